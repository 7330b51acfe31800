"""LifecycleController — start both loops, stop them on interrupt.

One asyncio.Event is the cancellation token for the whole process.  It
goes from unset to set exactly once and never back.
"""

from __future__ import annotations

import asyncio
import logging
import signal

from calorie_scale.service.publisher import PublisherLoop
from calorie_scale.service.sampler import SamplerLoop

logger = logging.getLogger(__name__)


class LifecycleController:
    """Owns the cancellation token shared by the sampler and publisher."""

    def __init__(self, sampler: SamplerLoop, publisher: PublisherLoop) -> None:
        self._sampler = sampler
        self._publisher = publisher
        self._cancelled = asyncio.Event()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self) -> bool:
        """Signal both loops to stop.

        Returns True for the call that performed the transition, False for
        any later call.
        """
        if self._cancelled.is_set():
            return False
        logger.info("Shutdown requested, stopping loops")
        self._cancelled.set()
        return True

    async def run(self, install_signal_handlers: bool = True) -> None:
        """Run both loops until :meth:`cancel` is called (or SIGINT arrives)."""
        loop = asyncio.get_running_loop()
        if install_signal_handlers:
            self._install_interrupt_handler(loop)

        logger.info("Starting...")
        tasks = [
            asyncio.create_task(self._publisher.run(self._cancelled), name="publisher"),
            asyncio.create_task(self._sampler.run(self._cancelled), name="sampler"),
        ]
        try:
            await asyncio.gather(*tasks)
        finally:
            if install_signal_handlers:
                self._remove_interrupt_handler(loop)
            logger.info("Sampler stats: %s", self._sampler.stats.to_dict())
            logger.info("Publisher stats: %s", self._publisher.stats.to_dict())

    # ── Signal wiring ────────────────────────────────────────────────────

    def _install_interrupt_handler(self, loop: asyncio.AbstractEventLoop) -> None:
        try:
            loop.add_signal_handler(signal.SIGINT, self.cancel)
        except NotImplementedError:
            # Windows event loops have no add_signal_handler
            signal.signal(signal.SIGINT, lambda *_: loop.call_soon_threadsafe(self.cancel))

    @staticmethod
    def _remove_interrupt_handler(loop: asyncio.AbstractEventLoop) -> None:
        try:
            loop.remove_signal_handler(signal.SIGINT)
        except NotImplementedError:
            signal.signal(signal.SIGINT, signal.default_int_handler)

"""Fixed-rate periodic execution with cooperative cancellation.

Each wait races the next deadline against the cancellation event; the
first one to fire wins.  Ticks are never interrupted mid-flight, so a
cancellation that arrives during a tick is observed once it returns.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable

from calorie_scale.foundation.clock import monotonic

logger = logging.getLogger(__name__)


async def run_periodic(
    interval: float,
    tick: Callable[[], Awaitable[object]],
    cancelled: asyncio.Event,
    name: str = "loop",
) -> None:
    """Call *tick* every *interval* seconds until *cancelled* is set.

    The first tick fires one interval after start.  Deadlines advance by
    whole intervals, so a slow tick causes missed ticks to be skipped
    rather than fired back to back.
    """
    if interval <= 0:
        raise ValueError("interval must be positive")

    deadline = monotonic() + interval
    logger.debug("%s ticking every %.3fs", name, interval)
    while not cancelled.is_set():
        timeout = max(0.0, deadline - monotonic())
        try:
            await asyncio.wait_for(cancelled.wait(), timeout=timeout)
        except asyncio.TimeoutError:
            pass
        else:
            break

        try:
            await tick()
        except Exception:
            logger.exception("%s tick failed unexpectedly", name)

        now = monotonic()
        deadline += interval
        if deadline <= now:
            missed = int((now - deadline) // interval) + 1
            deadline += missed * interval
            logger.debug("%s fell behind, skipping %d tick(s)", name, missed)

    logger.info("%s stopped", name)

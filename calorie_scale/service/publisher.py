"""Publisher loop — republish whatever the cell holds, every tick."""

from __future__ import annotations

import asyncio
import logging

from calorie_scale.core.cell import IntensityCell
from calorie_scale.service.stats import LoopStats
from calorie_scale.service.ticker import run_periodic
from calorie_scale.transport.base import Transport, TransportError

logger = logging.getLogger(__name__)

PUBLISH_INTERVAL_SECONDS = 1.0
DEFAULT_ADDRESS = "/calorie"


class PublisherLoop:
    """Reads the cell on a fixed cadence and forwards it downstream.

    Nothing is sent until the sampler has stored a first value.  Send
    failures are logged and dropped; the next tick tries again with
    whatever the cell then holds.
    """

    def __init__(
        self,
        cell: IntensityCell,
        transport: Transport,
        address: str = DEFAULT_ADDRESS,
        interval: float = PUBLISH_INTERVAL_SECONDS,
    ) -> None:
        self._cell = cell
        self._transport = transport
        self._address = address
        self._interval = interval
        self.stats = LoopStats("publisher")

    async def tick(self) -> bool:
        """Publish the current intensity; return True if a message went out."""
        self.stats.tick_count += 1
        value = self._cell.load()
        if value is None:
            self.stats.record_skip()
            return False

        try:
            self._transport.send(self._address, value)
        except TransportError as exc:
            self.stats.record_failure("transport")
            logger.warning("An error occurred sending %s=%d: %s", self._address, value, exc)
            return False

        self.stats.record_success()
        logger.debug("Published %s=%d to %s", self._address, value, self._transport.destination)
        return True

    async def run(self, cancelled: asyncio.Event) -> None:
        await run_periodic(self._interval, self.tick, cancelled, name="publisher")

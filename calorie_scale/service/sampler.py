"""Sampler loop — fetch, estimate, store.

Per tick:  Idle → Fetching → Estimating → Idle.

Any of SourceError, TimestampParseError or InsufficientDataError abandons
the tick without touching the cell, so the published value is either the
last good estimate or absent.
"""

from __future__ import annotations

import asyncio
import logging

from calorie_scale.core.cell import IntensityCell
from calorie_scale.core.estimator import InsufficientDataError, IntensityEstimator
from calorie_scale.domain.event import TimestampParseError
from calorie_scale.domain.intensity import IntensityEstimate
from calorie_scale.service.stats import LoopStats
from calorie_scale.service.ticker import run_periodic
from calorie_scale.sources.base import EventSource, SourceError

logger = logging.getLogger(__name__)

SAMPLE_INTERVAL_SECONDS = 6.0
SEARCH_COUNT = 100


class SamplerLoop:
    """Periodically samples the event source and refreshes the cell.

    The sampler is the cell's only writer.
    """

    def __init__(
        self,
        source: EventSource,
        estimator: IntensityEstimator,
        cell: IntensityCell,
        keyword: str,
        interval: float = SAMPLE_INTERVAL_SECONDS,
        result_type: str = "recent",
        count: int = SEARCH_COUNT,
    ) -> None:
        self._source = source
        self._estimator = estimator
        self._cell = cell
        self._keyword = keyword
        self._interval = interval
        self._result_type = result_type
        self._count = count
        self.stats = LoopStats("sampler")

    async def tick(self) -> IntensityEstimate | None:
        """Run one sampling iteration; return the stored estimate, if any."""
        self.stats.tick_count += 1
        try:
            posts = await self._source.search(self._keyword, self._result_type, self._count)
        except SourceError as exc:
            self.stats.record_failure("source")
            logger.warning(
                "Gathering posts from %s failed (keyword=%s): %s",
                self._source.source_name,
                self._keyword,
                exc,
            )
            return None

        try:
            estimate = self._estimator.estimate_posts(posts)
        except TimestampParseError as exc:
            self.stats.record_failure("timestamp")
            logger.warning(
                "Discarding batch of %d posts (keyword=%s): post %s has created_at=%r",
                len(posts),
                self._keyword,
                exc.post_id,
                exc.raw,
            )
            return None
        except InsufficientDataError as exc:
            self.stats.record_failure("insufficient_data")
            logger.warning("Skipping estimation (keyword=%s): %s", self._keyword, exc)
            return None

        self._cell.store(estimate.value)
        self.stats.record_success()
        logger.info(
            "Calculated keyword=%s posts=%d avg_gap=%.3f calorie=%d",
            self._keyword,
            estimate.event_count,
            estimate.mean_gap_seconds,
            estimate.value,
        )
        return estimate

    async def run(self, cancelled: asyncio.Event) -> None:
        await run_periodic(self._interval, self.tick, cancelled, name="sampler")

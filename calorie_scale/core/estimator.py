"""IntensityEstimator — turns event timestamps into a bounded intensity score.

Formula:
    gaps      = [max(0, newer - older) for each adjacent pair, oldest → newest]
    avg_gap   = sum(gaps) / (N - 1)
    ratio     = 1 - min(1, avg_gap / threshold)
    intensity = int(ease_in_out_cubic(ratio) * 100)

A small average gap (frequent events) yields a ratio near 1; an average
gap at or beyond ``threshold`` yields 0.  The estimator is pure: it never
touches the shared cell.  Writing the result is the sampler's job, and
only happens when estimation succeeds end to end.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, Sequence

from calorie_scale.domain.easing import ease_in_out_cubic
from calorie_scale.domain.event import EventBatch, Post
from calorie_scale.domain.intensity import MAX_INTENSITY, IntensityEstimate

logger = logging.getLogger(__name__)


class InsufficientDataError(Exception):
    """Raised when fewer than two events are available to form a gap."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"Need at least 2 events to compute a gap, got {count}")


class IntensityEstimator:
    """Stateless gap-statistics → intensity transform.

    Args:
        threshold: Average gap in seconds treated as zero intensity.
    """

    def __init__(self, threshold: int) -> None:
        if threshold <= 0:
            raise ValueError("threshold must be positive")
        self._threshold = threshold

    @property
    def threshold(self) -> int:
        return self._threshold

    def estimate(self, timestamps: Sequence[datetime]) -> IntensityEstimate:
        """Estimate intensity from timestamps ordered newest-first.

        A batch whose first element is older than its last is treated as
        oldest-first and reversed before the walk.

        Raises:
            InsufficientDataError: If fewer than two timestamps are given.
        """
        count = len(timestamps)
        if count < 2:
            raise InsufficientDataError(count)

        ordered = list(timestamps)
        reordered = False
        if ordered[0] < ordered[-1]:
            logger.warning(
                "Batch of %d events arrived oldest-first (%s .. %s), reversing",
                count,
                ordered[0].isoformat(),
                ordered[-1].isoformat(),
            )
            ordered.reverse()
            reordered = True

        total = 0.0
        for i in range(count - 2, -1, -1):
            newer, older = ordered[i], ordered[i + 1]
            total += max(0.0, (newer - older).total_seconds())

        mean_gap = total / (count - 1)
        ratio = 1.0 - min(1.0, mean_gap / self._threshold)
        value = int(ease_in_out_cubic(ratio) * MAX_INTENSITY)

        return IntensityEstimate(
            value=value,
            event_count=count,
            mean_gap_seconds=mean_gap,
            ratio=ratio,
            reordered=reordered,
        )

    def estimate_posts(self, posts: Iterable[Post]) -> IntensityEstimate:
        """Parse post timestamps and estimate.

        Raises:
            TimestampParseError: If any post carries an unparsable timestamp.
            InsufficientDataError: If fewer than two posts were given.
        """
        batch = EventBatch.from_posts(posts)
        return self.estimate(batch.timestamps)

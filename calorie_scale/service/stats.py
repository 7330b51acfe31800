"""Per-loop tick statistics for observability."""

from __future__ import annotations

from datetime import datetime

from calorie_scale.foundation.clock import utc_now


class LoopStats:
    """Counts what a periodic loop did with its ticks."""

    __slots__ = ("loop_name", "tick_count", "success_count", "skip_count", "failures", "last_success_at")

    def __init__(self, loop_name: str) -> None:
        self.loop_name = loop_name
        self.tick_count: int = 0
        self.success_count: int = 0
        self.skip_count: int = 0
        self.failures: dict[str, int] = {}
        self.last_success_at: datetime | None = None

    def record_success(self) -> None:
        self.success_count += 1
        self.last_success_at = utc_now()

    def record_skip(self) -> None:
        self.skip_count += 1

    def record_failure(self, kind: str) -> None:
        self.failures[kind] = self.failures.get(kind, 0) + 1

    @property
    def failure_count(self) -> int:
        return sum(self.failures.values())

    def to_dict(self) -> dict:
        return {
            "loop_name": self.loop_name,
            "tick_count": self.tick_count,
            "success_count": self.success_count,
            "skip_count": self.skip_count,
            "failures": dict(self.failures),
            "last_success_at": self.last_success_at.isoformat() if self.last_success_at else None,
        }

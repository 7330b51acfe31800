"""Clock utilities.

All wall-clock timestamps in calorie-scale are UTC-aware.  Scheduling uses
the running event loop's monotonic clock, never wall time.
"""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(timezone.utc)


def monotonic() -> float:
    """Seconds on the running loop's monotonic clock."""
    return asyncio.get_running_loop().time()

"""IntensityEstimate — the outcome of one successful estimation.

Pure data.  The integer ``value`` is what gets published; the remaining
fields exist for logging and diagnostics.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

MIN_INTENSITY = 0
MAX_INTENSITY = 100


class IntensityEstimate(BaseModel):
    """Immutable result of estimating intensity from one event batch."""

    value: int = Field(..., ge=MIN_INTENSITY, le=MAX_INTENSITY, description="Published intensity")
    event_count: int = Field(..., ge=2, description="Timestamps the estimate was built from")
    mean_gap_seconds: float = Field(..., ge=0.0, description="Average clamped gap between events")
    ratio: float = Field(..., ge=0.0, le=1.0, description="Normalised density before easing")
    reordered: bool = Field(False, description="True if the batch arrived oldest-first and was reversed")

    model_config = {"frozen": True}

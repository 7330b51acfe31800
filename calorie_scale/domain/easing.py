"""Easing curves used to turn a linear ratio into a perceptually smooth one."""

from __future__ import annotations


def ease_in_out_cubic(x: float) -> float:
    """Cubic ease-in-out over [0, 1].

    Slow near both ends and steep in the middle, so small rate changes
    around "nothing happening" or "everything happening" do not jitter
    the output.  The input is not validated; callers clamp it.
    """
    if x < 0.5:
        return 4 * x * x * x
    return (x - 1) * (2 * x - 2) * (2 * x - 2) + 1

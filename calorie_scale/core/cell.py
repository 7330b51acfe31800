"""IntensityCell — the single slot shared by the sampler and the publisher.

Rebinding one attribute is atomic in CPython, so readers always see either
the previous or the new value and neither side ever waits on the other.
"""

from __future__ import annotations


class IntensityCell:
    """Latest computed intensity, or ``None`` before the first success.

    The sampler is the only writer.  Any number of readers may call
    :meth:`load` concurrently.
    """

    __slots__ = ("_value",)

    def __init__(self) -> None:
        self._value: int | None = None

    def store(self, value: int) -> None:
        """Replace the current content unconditionally (last write wins)."""
        self._value = value

    def load(self) -> int | None:
        """Return the current intensity, or ``None`` if never stored."""
        return self._value

    @property
    def is_set(self) -> bool:
        return self._value is not None

    def __repr__(self) -> str:
        return f"IntensityCell(value={self._value!r})"

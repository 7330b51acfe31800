"""Tests for the shared single-slot intensity cell."""

import asyncio

import pytest

from calorie_scale.core.cell import IntensityCell


class TestIntensityCell:
    def test_absent_before_first_store(self) -> None:
        cell = IntensityCell()
        assert cell.load() is None
        assert not cell.is_set

    def test_load_returns_last_store(self) -> None:
        cell = IntensityCell()
        cell.store(37)
        assert cell.load() == 37
        assert cell.is_set

    def test_store_overwrites(self) -> None:
        cell = IntensityCell()
        cell.store(10)
        cell.store(0)
        assert cell.load() == 0
        assert cell.is_set

    def test_repr(self) -> None:
        cell = IntensityCell()
        cell.store(5)
        assert "5" in repr(cell)

    @pytest.mark.asyncio
    async def test_readers_see_only_stored_values(self) -> None:
        cell = IntensityCell()
        written = list(range(0, 101, 5))
        seen: list[int | None] = []

        async def writer() -> None:
            for v in written:
                cell.store(v)
                await asyncio.sleep(0)

        async def reader() -> None:
            for _ in range(50):
                seen.append(cell.load())
                await asyncio.sleep(0)

        await asyncio.gather(writer(), reader(), reader())
        assert all(v is None or v in written for v in seen)
        assert cell.load() == written[-1]

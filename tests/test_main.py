"""Tests for application wiring."""

import asyncio

import pytest

from calorie_scale.config import Settings
from calorie_scale.main import build_controller

from tests.fakes import FakeSource, FakeTransport
from tests.test_event import _posts_at_offsets


class TestBuildController:
    @pytest.mark.asyncio
    async def test_wires_settings_into_both_loops(self) -> None:
        settings = Settings(
            threshold=12,
            keyword="#music",
            osc_address="/heat",
            sample_interval_seconds=0.01,
            publish_interval_seconds=0.01,
            search_count=50,
        )
        source = FakeSource([_posts_at_offsets([6, 3, 0])], repeat_last=True)
        transport = FakeTransport()
        controller = build_controller(settings, source, transport)

        task = asyncio.create_task(controller.run(install_signal_handlers=False))
        await asyncio.sleep(0.15)
        controller.cancel()
        await asyncio.wait_for(task, timeout=1.0)

        assert source.calls[0] == ("#music", "recent", 50)
        # avg gap 3 against threshold 12 → ratio 0.75 → ease 0.9375 → 93
        assert set(transport.sent) == {("/heat", 93)}

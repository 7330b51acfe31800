"""calorie-scale — keyword activity to OSC.

This is the application entry point.  It wires the search source, the
intensity estimator, the shared cell, both loops and the OSC transport
together, then runs until interrupted.
"""

from __future__ import annotations

import asyncio
import logging
import sys

from calorie_scale.config import Settings, load_settings
from calorie_scale.core.cell import IntensityCell
from calorie_scale.core.estimator import IntensityEstimator
from calorie_scale.service.lifecycle import LifecycleController
from calorie_scale.service.publisher import PublisherLoop
from calorie_scale.service.sampler import SamplerLoop
from calorie_scale.sources.base import EventSource
from calorie_scale.sources.twitter import TwitterSearchSource
from calorie_scale.transport.base import Transport
from calorie_scale.transport.osc import OscTransport

logger = logging.getLogger(__name__)


def build_controller(
    settings: Settings,
    source: EventSource,
    transport: Transport,
) -> LifecycleController:
    """Assemble both loops around one shared cell."""
    cell = IntensityCell()
    sampler = SamplerLoop(
        source=source,
        estimator=IntensityEstimator(settings.threshold),
        cell=cell,
        keyword=settings.keyword,
        interval=settings.sample_interval_seconds,
        result_type=settings.search_result_type,
        count=settings.search_count,
    )
    publisher = PublisherLoop(
        cell=cell,
        transport=transport,
        address=settings.osc_address,
        interval=settings.publish_interval_seconds,
    )
    return LifecycleController(sampler, publisher)


async def serve(settings: Settings) -> None:
    source = TwitterSearchSource(
        settings.twitter_client_id,
        settings.twitter_client_secret,
        timeout=settings.http_timeout_seconds,
    )
    transport = OscTransport(settings.osc_host, settings.osc_port)
    controller = build_controller(settings, source, transport)
    try:
        await controller.run()
    finally:
        await source.aclose()


def main(argv: list[str] | None = None) -> None:
    settings = load_settings(sys.argv[1:] if argv is None else argv)

    # ── Logging ──────────────────────────────────────────────────────────
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )

    logger.info(
        "Initializing... threshold=%d keyword=%s osc_host=%s osc_port=%d",
        settings.threshold,
        settings.keyword,
        settings.osc_host,
        settings.osc_port,
    )
    asyncio.run(serve(settings))


if __name__ == "__main__":
    main()

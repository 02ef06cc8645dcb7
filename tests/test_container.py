"""Tests for container wiring."""

import asyncio

from macro_tracker.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.session_service is not None
    assert container.tracker_service.profile_service is container.profile_service
    assert container.vision_service.model == settings.openai_model
    asyncio.run(container.close_resources())

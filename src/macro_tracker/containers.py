"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from macro_tracker.adapters.openai_vision_client import OpenAIVisionClient
from macro_tracker.adapters.supabase_food_log_repository import (
    SupabaseFoodLogRepository,
)
from macro_tracker.adapters.supabase_identity_provider import (
    SupabaseIdentityProvider,
)
from macro_tracker.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from macro_tracker.adapters.supabase_water_log_repository import (
    SupabaseWaterLogRepository,
)
from macro_tracker.config import Settings
from macro_tracker.services.profiles import ProfileService
from macro_tracker.services.sessions import SessionService
from macro_tracker.services.tracker import TrackerService
from macro_tracker.services.vision import VisionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    session_service: SessionService
    profile_service: ProfileService
    tracker_service: TrackerService
    vision_service: VisionService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    profile_service = ProfileService(SupabaseProfileRepository(supabase_client))
    tracker_service = TrackerService(
        food_repository=SupabaseFoodLogRepository(supabase_client),
        water_repository=SupabaseWaterLogRepository(supabase_client),
        profile_service=profile_service,
    )
    session_service = SessionService(SupabaseIdentityProvider(supabase_client))
    openai_client = OpenAIVisionClient.create(
        resolved_settings.openai_api_key,
        timeout_seconds=resolved_settings.vision_timeout_seconds,
    )
    vision_service = VisionService(
        client=openai_client,
        model=resolved_settings.openai_model,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        store=resolved_settings.openai_store,
    )

    async def close_resources() -> None:
        await openai_client.close()

    return AppContainer(
        settings=resolved_settings,
        session_service=session_service,
        profile_service=profile_service,
        tracker_service=tracker_service,
        vision_service=vision_service,
        close_resources=close_resources,
    )

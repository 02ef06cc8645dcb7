"""Profile endpoints."""

from fastapi import APIRouter, Depends

from macro_tracker.api.dependencies import get_container, get_session
from macro_tracker.api.payloads import profile_payload
from macro_tracker.api.schemas import MicronutrientTargetsRequest, ProfileRequest
from macro_tracker.containers import AppContainer
from macro_tracker.domain.navigation import NavigationGuards
from macro_tracker.domain.profile import Profile
from macro_tracker.domain.sessions import SessionContext
from macro_tracker.services.navigation import landing_view

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("")
async def get_profile(
    session: SessionContext = Depends(get_session),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the caller's profile and the view it should land on."""
    profile = container.profile_service.get_profile(session)
    return _with_landing_view(profile)


@router.post("/onboarding")
async def complete_onboarding(
    body: ProfileRequest,
    session: SessionContext = Depends(get_session),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Compute targets for a finished onboarding flow and save the profile."""
    draft = body.apply_to(container.profile_service.get_profile(session))
    profile = container.profile_service.complete_onboarding(session, draft)
    return _with_landing_view(profile)


@router.put("")
async def update_profile(
    body: ProfileRequest,
    session: SessionContext = Depends(get_session),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Update body stats or goal and recompute targets."""
    current = container.profile_service.get_profile(session)
    profile = container.profile_service.update_profile(session, body.apply_to(current))
    return _with_landing_view(profile)


@router.put("/micronutrients")
async def update_micronutrients(
    body: MicronutrientTargetsRequest,
    session: SessionContext = Depends(get_session),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Edit the fiber target and the sugar, sodium and cholesterol limits."""
    profile = container.profile_service.update_micronutrient_targets(
        session,
        fiber=body.fiber,
        sugar=body.sugar,
        sodium=body.sodium,
        cholesterol=body.cholesterol,
    )
    return _with_landing_view(profile)


@router.post("/subscribe")
async def subscribe(
    session: SessionContext = Depends(get_session),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Upgrade the caller to premium."""
    profile = container.profile_service.subscribe(session)
    return _with_landing_view(profile)


def _with_landing_view(profile: Profile) -> dict[str, object]:
    guards = NavigationGuards(
        has_onboarded=profile.has_onboarded, is_premium=profile.is_premium
    )
    return {
        "profile": profile_payload(profile),
        "landing_view": landing_view(guards).value,
    }

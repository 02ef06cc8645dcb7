"""Food log, water, progress and achievement endpoints."""

from datetime import date

from fastapi import APIRouter, Depends

from macro_tracker.api.dependencies import get_container, get_session
from macro_tracker.api.payloads import (
    achievement_status_payload,
    day_log_payload,
    log_result_payload,
    progress_payload,
)
from macro_tracker.api.schemas import FoodEntryRequest, WaterRequest
from macro_tracker.containers import AppContainer
from macro_tracker.domain.sessions import SessionContext
from macro_tracker.services.achievements import achievement_board
from macro_tracker.services.progress import build_progress

router = APIRouter(tags=["logs"])


@router.get("/logs/{day}")
async def get_day_log(
    day: date,
    session: SessionContext = Depends(get_session),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return a day's food items, water intake and totals."""
    day_log = container.tracker_service.get_day_log(session, day.isoformat())
    return day_log_payload(day_log)


@router.post("/logs/{day}/food")
async def log_food(
    day: date,
    body: FoodEntryRequest,
    session: SessionContext = Depends(get_session),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Log a reviewed food and report newly unlocked achievements."""
    result = container.tracker_service.log_food(
        session, day.isoformat(), body.to_draft()
    )
    return log_result_payload(result)


@router.post("/logs/{day}/water")
async def log_water(
    day: date,
    body: WaterRequest,
    session: SessionContext = Depends(get_session),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Add a water increment to the day."""
    result = container.tracker_service.log_water(
        session, day.isoformat(), body.amount_ml
    )
    return log_result_payload(result)


@router.get("/progress/{day}")
async def get_progress(
    day: date,
    session: SessionContext = Depends(get_session),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return progress against every target and limit for a day."""
    profile = container.profile_service.get_profile(session)
    day_log = container.tracker_service.get_day_log(session, day.isoformat())
    return progress_payload(build_progress(day_log, profile))


@router.get("/achievements")
async def list_achievements(
    session: SessionContext = Depends(get_session),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return every achievement with its locked state."""
    profile = container.profile_service.get_profile(session)
    board = achievement_board(profile.preferences.unlocked_awards)
    return {"achievements": [achievement_status_payload(item) for item in board]}

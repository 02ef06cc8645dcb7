"""Food photo analysis endpoint."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from macro_tracker.api.dependencies import get_container, get_session
from macro_tracker.api.payloads import estimate_payload
from macro_tracker.api.schemas import AnalyzeRequest
from macro_tracker.containers import AppContainer
from macro_tracker.domain.sessions import SessionContext
from macro_tracker.services.vision import decode_image

logger = logging.getLogger(__name__)

router = APIRouter(tags=["analysis"])

ANALYSIS_FAILED_MESSAGE = "Could not identify food. Please try again."


@router.post("/analyze")
async def analyze_photo(
    body: AnalyzeRequest,
    session: SessionContext = Depends(get_session),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Estimate nutrients for a photo; nothing is logged until review."""
    image_bytes = decode_image(body.image_base64)
    try:
        estimate = await container.vision_service.analyze(image_bytes)
    except Exception as exc:
        logger.exception(
            "Food analysis failed", extra={"user_id": session.user_id}
        )
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=_format_analysis_error(container, exc),
        ) from exc
    return {"estimate": estimate_payload(estimate)}


def _format_analysis_error(container: AppContainer, exc: Exception) -> str:
    """Return a user-facing analysis error with local debug info."""
    if container.settings.environment == "local":
        detail = f"{type(exc).__name__}: {exc}".strip()
        if detail:
            return f"{ANALYSIS_FAILED_MESSAGE} (debug: {detail})"
    return ANALYSIS_FAILED_MESSAGE

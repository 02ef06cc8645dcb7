"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from macro_tracker.api.analysis import router as analysis_router
from macro_tracker.api.logs import router as logs_router
from macro_tracker.api.profile import router as profile_router
from macro_tracker.api.schemas import NavigationRequest
from macro_tracker.app_logging import configure_logging
from macro_tracker.containers import AppContainer
from macro_tracker.domain.errors import (
    InvalidImageError,
    InvalidTransitionError,
    LogDateMismatchError,
    MacroTrackerError,
    ProfileValidationError,
)
from macro_tracker.services.navigation import next_view

_ERROR_STATUS: dict[type[MacroTrackerError], int] = {
    ProfileValidationError: 422,
    LogDateMismatchError: 422,
    InvalidImageError: 422,
    InvalidTransitionError: 409,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(profile_router)
    app.include_router(logs_router)
    app.include_router(analysis_router)

    @app.exception_handler(MacroTrackerError)
    async def handle_domain_error(
        request: Request, exc: MacroTrackerError
    ) -> JSONResponse:
        status_code = _ERROR_STATUS.get(type(exc), 400)
        logger.info(
            "Rejected request", extra={"path": request.url.path, "error": str(exc)}
        )
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/navigation")
    async def navigate(body: NavigationRequest) -> dict[str, str]:
        """Resolve the next view for a navigation event."""
        view = next_view(body.state, body.event, body.guards())
        return {"state": view.value}

    return app

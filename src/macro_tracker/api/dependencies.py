"""Shared FastAPI dependencies."""

import logging

from fastapi import Depends, Header, HTTPException, Request, status

from macro_tracker.containers import AppContainer
from macro_tracker.domain.sessions import SessionContext

logger = logging.getLogger(__name__)


def get_container(request: Request) -> AppContainer:
    """Return the application container."""
    return request.app.state.container


def get_session(
    authorization: str | None = Header(default=None),
    container: AppContainer = Depends(get_container),
) -> SessionContext:
    """Resolve the caller's session; requests without a token are guests."""
    token = _bearer_token(authorization)
    try:
        session = container.session_service.resolve(token)
    except Exception:
        logger.exception("Failed to validate access token")
        session = None
    if session is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    return session


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    return token.strip()

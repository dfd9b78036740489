"""FastAPI dependency injection providers."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Request

from herald.db.base import utcnow
from herald.errors.exceptions import AuthenticationError
from herald.services.auth_service import AuthService
from herald.services.base import Clock


async def get_db(request: Request) -> AsyncGenerator:
    """Yield a database session from the app's session factory."""
    session_factory = request.app.state.db_session_factory
    async with session_factory() as session:
        yield session


def get_clock(request: Request) -> Clock:
    """Clock used to stamp timestamps; tests may pin it on app.state."""
    return getattr(request.app.state, "clock", utcnow)


def get_auth_service(request: Request, clock: Clock = Depends(get_clock)) -> AuthService:
    return AuthService(request.app.state.auth_config, clock=clock)


async def get_current_user(request: Request) -> dict:
    """Return the authenticated user dict or raise 401."""
    user = getattr(request.state, "user", {})
    if "_auth_error" in user:
        raise AuthenticationError(user["_auth_error"])
    if not user or user.get("sub") in ("anonymous", ""):
        raise AuthenticationError("Authentication required")
    return user


# Type aliases for dependency injection
CurrentUser = Annotated[dict, Depends(get_current_user)]

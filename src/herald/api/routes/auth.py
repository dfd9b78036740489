"""Demo login route."""

from fastapi import APIRouter, Depends

from herald.dependencies import get_auth_service
from herald.models.auth import LoginRequest, LoginResponse
from herald.services.auth_service import AuthService

router = APIRouter(tags=["Auth"])


@router.post("/auth/login")
async def login(
    body: LoginRequest,
    auth: AuthService = Depends(get_auth_service),
) -> dict:
    """Exchange the demo credentials for a bearer token."""
    issued = auth.login(body.username, body.password)
    return LoginResponse(
        token=issued.token,
        username=issued.username,
        expires_at=issued.expires_at,
    ).model_dump(mode="json", by_alias=True)

"""Pydantic models for the demo login."""

from datetime import datetime

from herald.models.common import ApiModel, ApiResponse


class LoginRequest(ApiModel):
    username: str
    password: str


class LoginResponse(ApiResponse):
    token: str
    username: str
    expires_at: datetime

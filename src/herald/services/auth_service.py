"""Demo login: compare against configured credentials and issue a signed JWT.

There is no user store, no refresh token and no password hashing.
"""

import logging
import secrets
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta

from jose import JWTError, jwt

from herald.config import Settings
from herald.db.base import utcnow
from herald.errors.exceptions import AuthenticationError
from herald.services.base import Clock

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthConfig:
    secret: str
    algorithm: str = "HS256"
    issuer: str = "herald-api"
    audience: str = "herald-console"
    expiry_minutes: int = 60
    demo_username: str = "admin"
    demo_password: str = "admin123"

    @classmethod
    def from_settings(cls, settings: Settings) -> "AuthConfig":
        return cls(
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            issuer=settings.jwt_issuer,
            audience=settings.jwt_audience,
            expiry_minutes=settings.jwt_expiry_minutes,
            demo_username=settings.demo_username,
            demo_password=settings.demo_password,
        )


@dataclass(frozen=True)
class IssuedToken:
    token: str
    username: str
    expires_at: datetime


class AuthService:
    def __init__(self, config: AuthConfig, clock: Clock = utcnow):
        self.config = config
        self._now = clock

    def login(self, username: str, password: str) -> IssuedToken:
        """Issue a token for the demo account or raise AuthenticationError."""
        user_ok = secrets.compare_digest(username.encode(), self.config.demo_username.encode())
        password_ok = secrets.compare_digest(password.encode(), self.config.demo_password.encode())
        if not (user_ok and password_ok):
            logger.warning("Failed login attempt for user %s", username)
            raise AuthenticationError("Invalid username or password")

        issued = self.issue_token(username)
        logger.info("User %s logged in successfully", username)
        return issued

    def issue_token(self, username: str) -> IssuedToken:
        now = self._now()
        expires_at = now + timedelta(minutes=self.config.expiry_minutes)
        payload = {
            "sub": username,
            "name": username,
            "jti": str(uuid.uuid4()),
            "iss": self.config.issuer,
            "aud": self.config.audience,
            "iat": now,
            "exp": expires_at,
        }
        token = jwt.encode(payload, self.config.secret, algorithm=self.config.algorithm)
        return IssuedToken(token=token, username=username, expires_at=expires_at)

    def decode(self, token: str) -> dict:
        """Validate signature, issuer, audience and expiry; return the claims."""
        try:
            return jwt.decode(
                token,
                self.config.secret,
                algorithms=[self.config.algorithm],
                audience=self.config.audience,
                issuer=self.config.issuer,
            )
        except JWTError as exc:
            logger.debug("JWT decode failed: %s", exc)
            raise AuthenticationError(f"Invalid token: {exc}") from exc

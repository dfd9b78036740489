"""Shared plumbing for the validation/orchestration services."""

from collections.abc import Awaitable, Callable
from datetime import datetime
from typing import TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from herald.db.base import utcnow
from herald.errors.exceptions import ConflictError, ValidationError

T = TypeVar("T")

SYSTEM_USER = "System"

Clock = Callable[[], datetime]


def require_text(value: str | None, field: str) -> str:
    """Reject missing or whitespace-only values."""
    if value is None or not value.strip():
        raise ValidationError(f"{field} is required", details={"field": field})
    return value


class BaseService:
    """Holds the request session and the clock used to stamp timestamps."""

    def __init__(self, session: AsyncSession, clock: Clock = utcnow):
        self.session = session
        self._now = clock

    async def _persist(self, operation: Awaitable[T], conflict_message: str) -> T:
        """Run a repository write; a unique/foreign key violation becomes a ConflictError."""
        try:
            return await operation
        except IntegrityError as exc:
            await self.session.rollback()
            raise ConflictError(conflict_message) from exc


def parse_enum(enum_cls, value, field: str):
    """Case-insensitive enum parse that fails with a ValidationError on unknown values."""
    try:
        return enum_cls.parse(value)
    except ValueError as exc:
        raise ValidationError(str(exc), details={"field": field}) from exc

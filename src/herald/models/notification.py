"""Pydantic models for notification requests and responses."""

from datetime import datetime

from pydantic import Field, field_validator

from herald.models.common import ApiModel, ApiResponse
from herald.models.enums import NotificationType


class NotificationCreate(ApiModel):
    """Request body for creating a notification (server generates ID + timestamps)."""

    tenant_id: str = Field(..., min_length=1, max_length=128)
    title: str = Field("", max_length=200)
    message: str = Field("", max_length=2000)
    type: NotificationType = NotificationType.INFO
    is_active: bool = True
    start_date: datetime | None = None
    end_date: datetime | None = None
    template_id: str | None = None
    application_id: str | None = None

    @field_validator("type", mode="before")
    @classmethod
    def _parse_type(cls, value):
        return NotificationType.parse(value)


class NotificationUpdate(ApiModel):
    """Partial update; only fields present in the body are applied."""

    title: str | None = Field(None, max_length=200)
    message: str | None = Field(None, max_length=2000)
    type: NotificationType | None = None
    is_active: bool | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    template_id: str | None = None
    application_id: str | None = None

    @field_validator("type", mode="before")
    @classmethod
    def _parse_type(cls, value):
        if value is None:
            return None
        return NotificationType.parse(value)


class NotificationResponse(ApiResponse):
    id: str
    tenant_id: str
    title: str
    message: str
    type: NotificationType
    is_active: bool
    start_date: datetime | None = None
    end_date: datetime | None = None
    created_at: datetime
    updated_at: datetime | None = None
    created_by: str
    template_id: str | None = None
    application_id: str | None = None

    @classmethod
    def from_row(cls, row) -> "NotificationResponse":
        return cls(
            id=row.notification_id,
            tenant_id=row.tenant_id,
            title=row.title,
            message=row.message,
            type=row.type,
            is_active=row.is_active,
            start_date=row.start_date,
            end_date=row.end_date,
            created_at=row.created_at,
            updated_at=row.updated_at,
            created_by=row.created_by,
            template_id=row.template_id,
            application_id=row.application_id,
        )

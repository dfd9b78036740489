"""Pydantic models for schedules and targeting rules attached to a notification.

Both are stored and returned as-is; nothing evaluates them.
"""

from datetime import datetime

from pydantic import Field, field_validator

from herald.models.common import ApiModel, ApiResponse
from herald.models.enums import RecurrencePattern, TargetingType


class ScheduleCreate(ApiModel):
    start_date: datetime
    end_date: datetime | None = None
    recurrence: RecurrencePattern = RecurrencePattern.NONE
    recurrence_interval: int = Field(1, ge=1)
    recurrence_days_of_week: str | None = Field(None, max_length=50, pattern=r"^[0-6](,[0-6])*$")
    recurrence_day_of_month: int | None = Field(None, ge=1, le=31)
    time_zone: str = Field("UTC", min_length=1, max_length=100)
    expiration_date: datetime | None = None
    is_active: bool = True

    @field_validator("recurrence", mode="before")
    @classmethod
    def _parse_recurrence(cls, value):
        return RecurrencePattern.parse(value)


class ScheduleResponse(ApiResponse):
    id: str
    notification_id: str
    start_date: datetime
    end_date: datetime | None = None
    recurrence: RecurrencePattern
    recurrence_interval: int
    recurrence_days_of_week: str | None = None
    recurrence_day_of_month: int | None = None
    time_zone: str
    expiration_date: datetime | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime | None = None

    @classmethod
    def from_row(cls, row) -> "ScheduleResponse":
        return cls(
            id=row.schedule_id,
            notification_id=row.notification_id,
            start_date=row.start_date,
            end_date=row.end_date,
            recurrence=row.recurrence,
            recurrence_interval=row.recurrence_interval,
            recurrence_days_of_week=row.recurrence_days_of_week,
            recurrence_day_of_month=row.recurrence_day_of_month,
            time_zone=row.time_zone,
            expiration_date=row.expiration_date,
            is_active=row.is_active,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )


class TargetingRuleCreate(ApiModel):
    target_type: TargetingType = TargetingType.ALL
    target_application_id: str | None = None
    target_environment: str | None = Field(None, max_length=50)
    target_user_group: str | None = Field(None, max_length=200)
    custom_filter: str | None = None
    priority: int = Field(0, ge=0)
    is_active: bool = True

    @field_validator("target_type", mode="before")
    @classmethod
    def _parse_target_type(cls, value):
        return TargetingType.parse(value)


class TargetingRuleResponse(ApiResponse):
    id: str
    notification_id: str
    target_type: TargetingType
    target_application_id: str | None = None
    target_environment: str | None = None
    target_user_group: str | None = None
    custom_filter: str | None = None
    priority: int
    is_active: bool
    created_at: datetime

    @classmethod
    def from_row(cls, row) -> "TargetingRuleResponse":
        return cls(
            id=row.rule_id,
            notification_id=row.notification_id,
            target_type=row.target_type,
            target_application_id=row.target_application_id,
            target_environment=row.target_environment,
            target_user_group=row.target_user_group,
            custom_filter=row.custom_filter,
            priority=row.priority,
            is_active=row.is_active,
            created_at=row.created_at,
        )

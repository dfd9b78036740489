"""Shared wire-model base and error response models."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from herald.db.base import as_utc


class ApiModel(BaseModel):
    """Base for request/response bodies: camelCase on the wire, snake_case in code."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ApiResponse(ApiModel):
    """Response base that reports every datetime as aware UTC."""

    @field_validator("*", mode="after")
    @classmethod
    def _utc_datetimes(cls, value):
        if isinstance(value, datetime):
            return as_utc(value)
        return value


class ErrorDetail(ApiModel):
    """Error detail in API responses."""

    code: str
    message: str
    details: dict[str, Any] | list[Any] | str | None = None
    trace_id: str
    timestamp: datetime


class ErrorResponse(ApiModel):
    """Standard error envelope."""

    error: ErrorDetail

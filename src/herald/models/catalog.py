"""Pydantic models for tenant catalog entities: applications, environments, templates."""

from datetime import datetime

from pydantic import Field, field_validator

from herald.models.common import ApiModel, ApiResponse
from herald.models.enums import TemplateFormat


# ── Applications ───────────────────────────────────────────────────────────────

class ApplicationCreate(ApiModel):
    tenant_id: str = Field(..., min_length=1, max_length=128)
    code: str = Field("", max_length=100)
    name: str = Field("", max_length=200)
    description: str = Field("", max_length=1000)


class ApplicationUpdate(ApiModel):
    name: str | None = Field(None, max_length=200)
    description: str | None = Field(None, max_length=1000)
    is_active: bool | None = None


class ApplicationResponse(ApiResponse):
    id: str
    tenant_id: str
    code: str
    name: str
    description: str
    is_active: bool
    created_at: datetime

    @classmethod
    def from_row(cls, row) -> "ApplicationResponse":
        return cls(
            id=row.application_id,
            tenant_id=row.tenant_id,
            code=row.code,
            name=row.name,
            description=row.description,
            is_active=row.is_active,
            created_at=row.created_at,
        )


# ── Environments ───────────────────────────────────────────────────────────────

class EnvironmentCreate(ApiModel):
    tenant_id: str = Field(..., min_length=1, max_length=128)
    code: str = Field("", max_length=50)
    name: str = Field("", max_length=100)


class EnvironmentUpdate(ApiModel):
    name: str | None = Field(None, max_length=100)
    is_active: bool | None = None


class EnvironmentResponse(ApiResponse):
    id: str
    tenant_id: str
    code: str
    name: str
    is_active: bool
    created_at: datetime

    @classmethod
    def from_row(cls, row) -> "EnvironmentResponse":
        return cls(
            id=row.environment_id,
            tenant_id=row.tenant_id,
            code=row.code,
            name=row.name,
            is_active=row.is_active,
            created_at=row.created_at,
        )


# ── Templates ──────────────────────────────────────────────────────────────────

class TemplateCreate(ApiModel):
    tenant_id: str = Field(..., min_length=1, max_length=128)
    code: str = Field("", max_length=100)
    name: str = Field("", max_length=200)
    description: str = Field("", max_length=1000)
    content: str = ""
    format: TemplateFormat = TemplateFormat.HTML

    @field_validator("format", mode="before")
    @classmethod
    def _parse_format(cls, value):
        return TemplateFormat.parse(value)


class TemplateUpdate(ApiModel):
    name: str | None = Field(None, max_length=200)
    description: str | None = Field(None, max_length=1000)
    content: str | None = None
    format: TemplateFormat | None = None
    is_active: bool | None = None

    @field_validator("format", mode="before")
    @classmethod
    def _parse_format(cls, value):
        if value is None:
            return None
        return TemplateFormat.parse(value)


class TemplateResponse(ApiResponse):
    id: str
    tenant_id: str
    code: str
    name: str
    description: str
    content: str
    format: TemplateFormat
    is_active: bool
    created_at: datetime
    updated_at: datetime | None = None
    created_by: str

    @classmethod
    def from_row(cls, row) -> "TemplateResponse":
        return cls(
            id=row.template_id,
            tenant_id=row.tenant_id,
            code=row.code,
            name=row.name,
            description=row.description,
            content=row.content,
            format=row.format,
            is_active=row.is_active,
            created_at=row.created_at,
            updated_at=row.updated_at,
            created_by=row.created_by,
        )

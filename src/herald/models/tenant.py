"""Pydantic models for tenants."""

from datetime import datetime

from pydantic import Field

from herald.models.common import ApiModel, ApiResponse


class TenantCreate(ApiModel):
    code: str = Field("", max_length=100)
    name: str = Field("", max_length=200)


class TenantResponse(ApiResponse):
    id: str
    code: str
    name: str
    is_active: bool
    created_at: datetime

    @classmethod
    def from_row(cls, row) -> "TenantResponse":
        return cls(
            id=row.tenant_id,
            code=row.code,
            name=row.name,
            is_active=row.is_active,
            created_at=row.created_at,
        )

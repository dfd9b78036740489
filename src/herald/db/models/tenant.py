"""Tenant table: root of tenant isolation."""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from herald.db.base import Base, CreatedAtMixin


class TenantRow(Base, CreatedAtMixin):
    __tablename__ = "tenants"

    tenant_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    code: Mapped[str] = mapped_column(String(100), unique=True, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

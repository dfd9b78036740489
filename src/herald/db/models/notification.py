"""Notification (banner) storage table."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from herald.db.base import Base, TimestampMixin


class NotificationRow(Base, TimestampMixin):
    __tablename__ = "notifications"

    notification_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    tenant_id: Mapped[str] = mapped_column(
        String(128),
        ForeignKey("tenants.tenant_id", ondelete="CASCADE"),
        nullable=False,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    message: Mapped[str] = mapped_column(String(2000), nullable=False)
    type: Mapped[str] = mapped_column(String(20), nullable=False, default="Info")
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    start_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    end_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_by: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    template_id: Mapped[str | None] = mapped_column(
        String(128),
        ForeignKey("notification_templates.template_id", ondelete="SET NULL"),
        nullable=True,
    )
    application_id: Mapped[str | None] = mapped_column(
        String(128),
        ForeignKey("applications.application_id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    __table_args__ = (
        Index("ix_notifications_tenant_active", "tenant_id", "is_active"),
    )

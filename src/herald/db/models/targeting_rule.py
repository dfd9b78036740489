"""Targeting rule table (audience descriptor, stored only)."""

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from herald.db.base import Base, CreatedAtMixin


class TargetingRuleRow(Base, CreatedAtMixin):
    __tablename__ = "targeting_rules"

    rule_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    notification_id: Mapped[str] = mapped_column(
        String(128),
        ForeignKey("notifications.notification_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    target_type: Mapped[str] = mapped_column(String(20), nullable=False, default="All")
    target_application_id: Mapped[str | None] = mapped_column(
        String(128),
        ForeignKey("applications.application_id", ondelete="SET NULL"),
        nullable=True,
    )
    target_environment: Mapped[str | None] = mapped_column(String(50), nullable=True)
    target_user_group: Mapped[str | None] = mapped_column(String(200), nullable=True)
    custom_filter: Mapped[str | None] = mapped_column(Text, nullable=True)
    priority: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

"""Notification schedule table (recurrence descriptor, stored only)."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from herald.db.base import Base, TimestampMixin


class NotificationScheduleRow(Base, TimestampMixin):
    __tablename__ = "notification_schedules"

    schedule_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    notification_id: Mapped[str] = mapped_column(
        String(128),
        ForeignKey("notifications.notification_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    recurrence: Mapped[str] = mapped_column(String(20), nullable=False, default="None")
    recurrence_interval: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    # comma separated, 0=Sunday .. 6=Saturday
    recurrence_days_of_week: Mapped[str | None] = mapped_column(String(50), nullable=True)
    recurrence_day_of_month: Mapped[int | None] = mapped_column(Integer, nullable=True)
    time_zone: Mapped[str] = mapped_column(String(100), nullable=False, default="UTC")
    expiration_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

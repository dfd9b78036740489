"""Notification repository."""

from datetime import datetime

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from herald.db.base import as_utc, utcnow
from herald.db.models.acknowledgment import NotificationAcknowledgmentRow
from herald.db.models.history import NotificationHistoryRow
from herald.db.models.notification import NotificationRow
from herald.db.models.schedule import NotificationScheduleRow
from herald.db.models.targeting_rule import TargetingRuleRow
from herald.repositories.base import BaseRepository

# Rows owned by a notification, removed with it.
_CHILD_MODELS = (
    NotificationScheduleRow,
    TargetingRuleRow,
    NotificationHistoryRow,
    NotificationAcknowledgmentRow,
)


class NotificationRepository(BaseRepository):
    def __init__(self, session: AsyncSession):
        super().__init__(session, NotificationRow)

    async def get(self, notification_id: str) -> NotificationRow | None:
        return await self.get_by_id("notification_id", notification_id)

    async def list_all(self) -> list[NotificationRow]:
        return await super().list_all(order_by=NotificationRow.created_at.desc())

    async def list_by_tenant(self, tenant_id: str) -> list[NotificationRow]:
        return await self.list_by_field(
            "tenant_id", tenant_id, order_by=NotificationRow.created_at.desc()
        )

    async def list_active_by_tenant(
        self, tenant_id: str, now: datetime | None = None
    ) -> list[NotificationRow]:
        """Notifications flagged active whose [start_date, end_date] window contains now."""
        now = as_utc(now) if now else utcnow()
        stmt = (
            select(NotificationRow)
            .where(
                NotificationRow.tenant_id == tenant_id,
                NotificationRow.is_active == True,  # noqa: E712
                or_(NotificationRow.start_date.is_(None), NotificationRow.start_date <= now),
                or_(NotificationRow.end_date.is_(None), NotificationRow.end_date >= now),
            )
            .order_by(NotificationRow.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, **kwargs) -> NotificationRow:
        kwargs.setdefault("created_at", utcnow())
        return await super().create(**kwargs)

    async def update(self, row: NotificationRow, **kwargs) -> NotificationRow:
        kwargs.setdefault("updated_at", utcnow())
        return await super().update(row, **kwargs)

    async def delete(self, notification_id: str) -> bool:
        """Hard delete with its schedules, rules, history and acknowledgments."""
        row = await self.get(notification_id)
        if row is None:
            return False
        await self.delete_children([notification_id])
        await self.session.delete(row)
        await self.session.flush()
        return True

    async def delete_children(self, notification_ids: list[str]) -> None:
        for model in _CHILD_MODELS:
            await BaseRepository(self.session, model).delete_by_field(
                "notification_id", notification_ids
            )

    async def delete_by_tenant(self, tenant_id: str) -> int:
        stmt = select(NotificationRow.notification_id).where(NotificationRow.tenant_id == tenant_id)
        ids = list((await self.session.execute(stmt)).scalars().all())
        await self.delete_children(ids)
        return await self.delete_by_field("notification_id", ids)

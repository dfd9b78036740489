"""Repositories for rows owned by a notification: schedules, targeting rules, history, acknowledgments."""

from sqlalchemy.ext.asyncio import AsyncSession

from herald.db.base import utcnow
from herald.db.models.acknowledgment import NotificationAcknowledgmentRow
from herald.db.models.history import NotificationHistoryRow
from herald.db.models.schedule import NotificationScheduleRow
from herald.db.models.targeting_rule import TargetingRuleRow
from herald.repositories.base import BaseRepository


class ScheduleRepository(BaseRepository):
    def __init__(self, session: AsyncSession):
        super().__init__(session, NotificationScheduleRow)

    async def get(self, schedule_id: str) -> NotificationScheduleRow | None:
        return await self.get_by_id("schedule_id", schedule_id)

    async def list_by_notification(self, notification_id: str) -> list[NotificationScheduleRow]:
        return await self.list_by_field(
            "notification_id", notification_id, order_by=NotificationScheduleRow.start_date
        )

    async def create(self, **kwargs) -> NotificationScheduleRow:
        kwargs.setdefault("created_at", utcnow())
        return await super().create(**kwargs)

    async def delete(self, schedule_id: str) -> bool:
        return await self.delete_by_id("schedule_id", schedule_id)


class TargetingRuleRepository(BaseRepository):
    def __init__(self, session: AsyncSession):
        super().__init__(session, TargetingRuleRow)

    async def get(self, rule_id: str) -> TargetingRuleRow | None:
        return await self.get_by_id("rule_id", rule_id)

    async def list_by_notification(self, notification_id: str) -> list[TargetingRuleRow]:
        # higher priority first
        return await self.list_by_field(
            "notification_id", notification_id, order_by=TargetingRuleRow.priority.desc()
        )

    async def create(self, **kwargs) -> TargetingRuleRow:
        kwargs.setdefault("created_at", utcnow())
        return await super().create(**kwargs)

    async def delete(self, rule_id: str) -> bool:
        return await self.delete_by_id("rule_id", rule_id)


class HistoryRepository(BaseRepository):
    def __init__(self, session: AsyncSession):
        super().__init__(session, NotificationHistoryRow)

    async def list_by_notification(self, notification_id: str) -> list[NotificationHistoryRow]:
        return await self.list_by_field(
            "notification_id", notification_id, order_by=NotificationHistoryRow.timestamp.desc()
        )


class AcknowledgmentRepository(BaseRepository):
    def __init__(self, session: AsyncSession):
        super().__init__(session, NotificationAcknowledgmentRow)

    async def list_by_notification(self, notification_id: str) -> list[NotificationAcknowledgmentRow]:
        return await self.list_by_field(
            "notification_id",
            notification_id,
            order_by=NotificationAcknowledgmentRow.acknowledged_at.desc(),
        )

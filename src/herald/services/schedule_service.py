"""Storage for schedules and targeting rules attached to a notification.

Rows are validated and persisted only; nothing here (or anywhere else)
evaluates recurrence or audience targeting.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from herald.db.base import as_utc, utcnow
from herald.errors.exceptions import NotFoundError
from herald.models.enums import RecurrencePattern, TargetingType
from herald.models.schedule import ScheduleCreate, TargetingRuleCreate
from herald.repositories.notification_repo import NotificationRepository
from herald.repositories.schedule_repo import (
    AcknowledgmentRepository,
    HistoryRepository,
    ScheduleRepository,
    TargetingRuleRepository,
)
from herald.services.base import BaseService, Clock, parse_enum
from herald.services.id_generator import SCHEDULE_PREFIX, TARGETING_RULE_PREFIX, generate_id

logger = logging.getLogger(__name__)


class NotificationDetailService(BaseService):
    """Child rows of a notification: schedules, targeting rules, history, acknowledgments."""

    def __init__(self, session: AsyncSession, clock: Clock = utcnow):
        super().__init__(session, clock)
        self.notifications = NotificationRepository(session)
        self.schedules = ScheduleRepository(session)
        self.rules = TargetingRuleRepository(session)
        self.history = HistoryRepository(session)
        self.acknowledgments = AcknowledgmentRepository(session)

    async def _require_notification(self, notification_id: str) -> None:
        if await self.notifications.get(notification_id) is None:
            raise NotFoundError("Notification", notification_id)

    # ── Schedules ──────────────────────────────────────────────────────────────

    async def list_schedules(self, notification_id: str):
        await self._require_notification(notification_id)
        return await self.schedules.list_by_notification(notification_id)

    async def add_schedule(self, notification_id: str, data: ScheduleCreate):
        await self._require_notification(notification_id)
        row = await self._persist(
            self.schedules.create(
                schedule_id=generate_id(SCHEDULE_PREFIX),
                notification_id=notification_id,
                start_date=as_utc(data.start_date),
                end_date=as_utc(data.end_date),
                recurrence=parse_enum(RecurrencePattern, data.recurrence, "recurrence").value,
                recurrence_interval=data.recurrence_interval,
                recurrence_days_of_week=data.recurrence_days_of_week,
                recurrence_day_of_month=data.recurrence_day_of_month,
                time_zone=data.time_zone,
                expiration_date=as_utc(data.expiration_date),
                is_active=data.is_active,
                created_at=self._now(),
            ),
            f"Schedule could not be stored for notification '{notification_id}'",
        )
        logger.info("Added schedule %s to notification %s", row.schedule_id, notification_id)
        return row

    async def get_schedule(self, notification_id: str, schedule_id: str):
        row = await self.schedules.get(schedule_id)
        if row is None or row.notification_id != notification_id:
            raise NotFoundError("Schedule", schedule_id)
        return row

    async def remove_schedule(self, notification_id: str, schedule_id: str) -> bool:
        row = await self.schedules.get(schedule_id)
        if row is None or row.notification_id != notification_id:
            return False
        return await self.schedules.delete(schedule_id)

    # ── Targeting rules ────────────────────────────────────────────────────────

    async def list_rules(self, notification_id: str):
        await self._require_notification(notification_id)
        return await self.rules.list_by_notification(notification_id)

    async def add_rule(self, notification_id: str, data: TargetingRuleCreate):
        await self._require_notification(notification_id)
        row = await self._persist(
            self.rules.create(
                rule_id=generate_id(TARGETING_RULE_PREFIX),
                notification_id=notification_id,
                target_type=parse_enum(TargetingType, data.target_type, "target_type").value,
                target_application_id=data.target_application_id,
                target_environment=data.target_environment,
                target_user_group=data.target_user_group,
                custom_filter=data.custom_filter,
                priority=data.priority,
                is_active=data.is_active,
                created_at=self._now(),
            ),
            f"Targeting rule could not be stored for notification '{notification_id}'",
        )
        logger.info("Added targeting rule %s to notification %s", row.rule_id, notification_id)
        return row

    async def get_rule(self, notification_id: str, rule_id: str):
        row = await self.rules.get(rule_id)
        if row is None or row.notification_id != notification_id:
            raise NotFoundError("TargetingRule", rule_id)
        return row

    async def remove_rule(self, notification_id: str, rule_id: str) -> bool:
        row = await self.rules.get(rule_id)
        if row is None or row.notification_id != notification_id:
            return False
        return await self.rules.delete(rule_id)

    # ── Read-only audit data ───────────────────────────────────────────────────

    async def list_history(self, notification_id: str):
        await self._require_notification(notification_id)
        return await self.history.list_by_notification(notification_id)

    async def list_acknowledgments(self, notification_id: str):
        await self._require_notification(notification_id)
        return await self.acknowledgments.list_by_notification(notification_id)

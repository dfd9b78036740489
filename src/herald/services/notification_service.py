"""Notification lifecycle: validation, timestamp stamping and the active-window query."""

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from herald.db.base import as_utc, utcnow
from herald.db.models.notification import NotificationRow
from herald.errors.exceptions import NotFoundError
from herald.models.enums import NotificationType
from herald.models.notification import NotificationCreate
from herald.repositories.notification_repo import NotificationRepository
from herald.services.base import SYSTEM_USER, BaseService, Clock, parse_enum, require_text
from herald.services.id_generator import NOTIFICATION_PREFIX, generate_id

logger = logging.getLogger(__name__)

# A null in the body for these fields means "leave as is".
_NON_NULLABLE_FIELDS = ("title", "message", "type", "is_active")
# These may be cleared with an explicit null.
_NULLABLE_FIELDS = ("start_date", "end_date", "template_id", "application_id")


class NotificationService(BaseService):
    def __init__(self, session: AsyncSession, clock: Clock = utcnow):
        super().__init__(session, clock)
        self.repo = NotificationRepository(session)

    async def get(self, notification_id: str) -> NotificationRow:
        row = await self.repo.get(notification_id)
        if row is None:
            raise NotFoundError("Notification", notification_id)
        return row

    async def list_all(self) -> list[NotificationRow]:
        return await self.repo.list_all()

    async def list_by_tenant(self, tenant_id: str) -> list[NotificationRow]:
        return await self.repo.list_by_tenant(tenant_id)

    async def list_active(self, tenant_id: str) -> list[NotificationRow]:
        return await self.repo.list_active_by_tenant(tenant_id, now=self._now())

    async def create(self, data: NotificationCreate, created_by: str | None = None) -> NotificationRow:
        """Validate and store a new notification.

        ``created_at`` and ``updated_at`` start out equal. ``created_by`` falls
        back to "System" when there is no caller identity.
        """
        require_text(data.title, "title")
        require_text(data.message, "message")

        now = self._now()
        row = await self._persist(
            self.repo.create(
                notification_id=generate_id(NOTIFICATION_PREFIX),
                tenant_id=data.tenant_id,
                title=data.title,
                message=data.message,
                type=parse_enum(NotificationType, data.type, "type").value,
                is_active=data.is_active,
                start_date=as_utc(data.start_date),
                end_date=as_utc(data.end_date),
                template_id=data.template_id,
                application_id=data.application_id,
                created_by=created_by or SYSTEM_USER,
                created_at=now,
                updated_at=now,
            ),
            f"Notification could not be stored for tenant '{data.tenant_id}'",
        )
        logger.info("Created notification %s for tenant %s", row.notification_id, row.tenant_id)
        return row

    async def update(self, notification_id: str, changes: dict[str, Any]) -> NotificationRow:
        """Apply a partial patch; keys missing from ``changes`` are left untouched."""
        row = await self.get(notification_id)

        updates: dict[str, Any] = {}
        for field in _NON_NULLABLE_FIELDS:
            if changes.get(field) is not None:
                updates[field] = changes[field]
        for field in _NULLABLE_FIELDS:
            if field in changes:
                updates[field] = changes[field]

        if "title" in updates:
            require_text(updates["title"], "title")
        if "message" in updates:
            require_text(updates["message"], "message")
        if "type" in updates:
            updates["type"] = parse_enum(NotificationType, updates["type"], "type").value
        for field in ("start_date", "end_date"):
            if field in updates:
                updates[field] = as_utc(updates[field])

        updates["updated_at"] = self._now()
        await self._persist(
            self.repo.update(row, **updates),
            f"Notification '{notification_id}' could not be updated",
        )
        logger.info("Updated notification %s", notification_id)
        return row

    async def delete(self, notification_id: str) -> bool:
        """Delete a notification and everything it owns; False if it does not exist."""
        deleted = await self.repo.delete(notification_id)
        if deleted:
            logger.info("Deleted notification %s", notification_id)
        return deleted

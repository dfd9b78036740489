"""Repositories for tenant-scoped catalog entities (applications, environments, templates).

All three share the same shape: listed by tenant ordered by name, looked up
by id or by the tenant-unique ``code``.
"""

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from herald.db.base import utcnow
from herald.db.models.application import ApplicationRow
from herald.db.models.environment import EnvironmentRow
from herald.db.models.notification import NotificationRow
from herald.db.models.targeting_rule import TargetingRuleRow
from herald.db.models.template import NotificationTemplateRow
from herald.repositories.base import BaseRepository


class CatalogRepository(BaseRepository):
    pk_field: str = ""

    async def get(self, pk_value: str):
        return await self.get_by_id(self.pk_field, pk_value)

    async def get_by_code(self, tenant_id: str, code: str):
        stmt = select(self.model_class).where(
            self.model_class.tenant_id == tenant_id,
            self.model_class.code == code,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_all(self):
        return await super().list_all(order_by=self.model_class.name)

    async def list_by_tenant(self, tenant_id: str):
        return await self.list_by_field("tenant_id", tenant_id, order_by=self.model_class.name)

    async def ids_by_tenant(self, tenant_id: str) -> list[str]:
        pk = getattr(self.model_class, self.pk_field)
        result = await self.session.execute(select(pk).where(self.model_class.tenant_id == tenant_id))
        return list(result.scalars().all())

    async def clear_references(self, ids: list[str]) -> None:
        """Detach rows in other tables that point at these ids before a delete."""

    async def create(self, **kwargs):
        kwargs.setdefault("created_at", utcnow())
        return await super().create(**kwargs)

    async def delete(self, pk_value: str) -> bool:
        return await self.delete_by_id(self.pk_field, pk_value)


class ApplicationRepository(CatalogRepository):
    pk_field = "application_id"

    def __init__(self, session: AsyncSession):
        super().__init__(session, ApplicationRow)

    async def clear_references(self, application_ids: list[str]) -> None:
        """Null notification and targeting-rule references to these applications."""
        if not application_ids:
            return
        await self.session.execute(
            update(NotificationRow)
            .where(NotificationRow.application_id.in_(application_ids))
            .values(application_id=None)
        )
        await self.session.execute(
            update(TargetingRuleRow)
            .where(TargetingRuleRow.target_application_id.in_(application_ids))
            .values(target_application_id=None)
        )

    async def delete(self, application_id: str) -> bool:
        row = await self.get(application_id)
        if row is None:
            return False
        await self.clear_references([application_id])
        await self.session.delete(row)
        await self.session.flush()
        return True


class EnvironmentRepository(CatalogRepository):
    pk_field = "environment_id"

    def __init__(self, session: AsyncSession):
        super().__init__(session, EnvironmentRow)


class TemplateRepository(CatalogRepository):
    pk_field = "template_id"

    def __init__(self, session: AsyncSession):
        super().__init__(session, NotificationTemplateRow)

    async def update(self, row: NotificationTemplateRow, **kwargs) -> NotificationTemplateRow:
        kwargs.setdefault("updated_at", utcnow())
        return await super().update(row, **kwargs)

    async def clear_references(self, template_ids: list[str]) -> None:
        if not template_ids:
            return
        await self.session.execute(
            update(NotificationRow)
            .where(NotificationRow.template_id.in_(template_ids))
            .values(template_id=None)
        )

    async def delete(self, template_id: str) -> bool:
        row = await self.get(template_id)
        if row is None:
            return False
        await self.clear_references([template_id])
        await self.session.delete(row)
        await self.session.flush()
        return True

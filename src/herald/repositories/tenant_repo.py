"""Tenant repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from herald.db.base import utcnow
from herald.db.models.tenant import TenantRow
from herald.repositories.base import BaseRepository
from herald.repositories.catalog_repo import (
    ApplicationRepository,
    EnvironmentRepository,
    TemplateRepository,
)
from herald.repositories.notification_repo import NotificationRepository


class TenantRepository(BaseRepository):
    def __init__(self, session: AsyncSession):
        super().__init__(session, TenantRow)

    async def get(self, tenant_id: str) -> TenantRow | None:
        return await self.get_by_id("tenant_id", tenant_id)

    async def get_by_code(self, code: str) -> TenantRow | None:
        stmt = select(TenantRow).where(TenantRow.code == code)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_all(self) -> list[TenantRow]:
        return await super().list_all(order_by=TenantRow.name)

    async def create(self, **kwargs) -> TenantRow:
        kwargs.setdefault("created_at", utcnow())
        return await super().create(**kwargs)

    async def delete(self, tenant_id: str) -> bool:
        """Delete a tenant with its notifications and catalog entities."""
        row = await self.get(tenant_id)
        if row is None:
            return False
        await NotificationRepository(self.session).delete_by_tenant(tenant_id)

        # other tenants' rows may still point at this tenant's catalog
        catalogs = (
            TemplateRepository(self.session),
            ApplicationRepository(self.session),
            EnvironmentRepository(self.session),
        )
        for repo in catalogs:
            ids = await repo.ids_by_tenant(tenant_id)
            await repo.clear_references(ids)
            await repo.delete_by_field(repo.pk_field, ids)
        await self.session.delete(row)
        await self.session.flush()
        return True

"""Tenant and tenant-catalog services (applications, environments, templates).

Validation is limited to non-blank required fields and enum parsing. The
store's unique constraints decide code collisions; no cross-entity checks.
"""

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from herald.db.base import utcnow
from herald.errors.exceptions import NotFoundError
from herald.models.catalog import ApplicationCreate, EnvironmentCreate, TemplateCreate
from herald.models.enums import TemplateFormat
from herald.models.tenant import TenantCreate
from herald.repositories.catalog_repo import (
    ApplicationRepository,
    CatalogRepository,
    EnvironmentRepository,
    TemplateRepository,
)
from herald.repositories.tenant_repo import TenantRepository
from herald.services.base import SYSTEM_USER, BaseService, Clock, parse_enum, require_text
from herald.services.id_generator import (
    APPLICATION_PREFIX,
    ENVIRONMENT_PREFIX,
    TEMPLATE_PREFIX,
    TENANT_PREFIX,
    generate_id,
)

logger = logging.getLogger(__name__)


class TenantService(BaseService):
    def __init__(self, session: AsyncSession, clock: Clock = utcnow):
        super().__init__(session, clock)
        self.repo = TenantRepository(session)

    async def list_all(self):
        return await self.repo.list_all()

    async def get(self, tenant_id: str):
        row = await self.repo.get(tenant_id)
        if row is None:
            raise NotFoundError("Tenant", tenant_id)
        return row

    async def get_by_code(self, code: str):
        row = await self.repo.get_by_code(code)
        if row is None:
            raise NotFoundError("Tenant", code)
        return row

    async def create(self, data: TenantCreate):
        require_text(data.code, "code")
        require_text(data.name, "name")
        row = await self._persist(
            self.repo.create(
                tenant_id=generate_id(TENANT_PREFIX),
                code=data.code,
                name=data.name,
                is_active=True,
                created_at=self._now(),
            ),
            f"Tenant code '{data.code}' is already in use",
        )
        logger.info("Created tenant %s with code %s", row.tenant_id, row.code)
        return row

    async def delete(self, tenant_id: str) -> bool:
        deleted = await self.repo.delete(tenant_id)
        if deleted:
            logger.info("Deleted tenant %s", tenant_id)
        return deleted

    async def ensure_default(self) -> bool:
        """Create the "default" tenant if it does not exist yet. Returns True if created."""
        if await self.repo.get_by_code("default") is not None:
            return False
        await self.create(TenantCreate(code="default", name="Default Tenant"))
        return True


class _CatalogService(BaseService):
    """Shared read/update/delete for the tenant-scoped catalog entities."""

    resource: str = ""
    # fields a partial update may overwrite; explicit nulls are ignored
    updatable: tuple[str, ...] = ()
    repo: CatalogRepository

    async def list_all(self):
        return await self.repo.list_all()

    async def list_by_tenant(self, tenant_id: str):
        return await self.repo.list_by_tenant(tenant_id)

    async def get(self, pk_value: str):
        row = await self.repo.get(pk_value)
        if row is None:
            raise NotFoundError(self.resource, pk_value)
        return row

    async def get_by_code(self, tenant_id: str, code: str):
        row = await self.repo.get_by_code(tenant_id, code)
        if row is None:
            raise NotFoundError(self.resource, f"{tenant_id}/{code}")
        return row

    def _clean_updates(self, changes: dict[str, Any]) -> dict[str, Any]:
        updates = {k: changes[k] for k in self.updatable if changes.get(k) is not None}
        if "name" in updates:
            require_text(updates["name"], "name")
        return updates

    async def update(self, pk_value: str, changes: dict[str, Any]):
        row = await self.get(pk_value)
        updates = self._clean_updates(changes)
        await self._persist(
            self.repo.update(row, **updates),
            f"{self.resource} '{pk_value}' could not be updated",
        )
        logger.info("Updated %s %s", self.resource.lower(), pk_value)
        return row

    async def delete(self, pk_value: str) -> bool:
        deleted = await self.repo.delete(pk_value)
        if deleted:
            logger.info("Deleted %s %s", self.resource.lower(), pk_value)
        return deleted


class ApplicationService(_CatalogService):
    resource = "Application"
    updatable = ("name", "description", "is_active")

    def __init__(self, session: AsyncSession, clock: Clock = utcnow):
        super().__init__(session, clock)
        self.repo = ApplicationRepository(session)

    async def create(self, data: ApplicationCreate):
        require_text(data.code, "code")
        require_text(data.name, "name")
        row = await self._persist(
            self.repo.create(
                application_id=generate_id(APPLICATION_PREFIX),
                tenant_id=data.tenant_id,
                code=data.code,
                name=data.name,
                description=data.description or "",
                is_active=True,
                created_at=self._now(),
            ),
            f"Application code '{data.code}' already exists for tenant '{data.tenant_id}'",
        )
        logger.info("Created application %s for tenant %s", row.application_id, row.tenant_id)
        return row


class EnvironmentService(_CatalogService):
    resource = "Environment"
    updatable = ("name", "is_active")

    def __init__(self, session: AsyncSession, clock: Clock = utcnow):
        super().__init__(session, clock)
        self.repo = EnvironmentRepository(session)

    async def create(self, data: EnvironmentCreate):
        require_text(data.code, "code")
        require_text(data.name, "name")
        row = await self._persist(
            self.repo.create(
                environment_id=generate_id(ENVIRONMENT_PREFIX),
                tenant_id=data.tenant_id,
                code=data.code,
                name=data.name,
                is_active=True,
                created_at=self._now(),
            ),
            f"Environment code '{data.code}' already exists for tenant '{data.tenant_id}'",
        )
        logger.info("Created environment %s for tenant %s", row.environment_id, row.tenant_id)
        return row


class TemplateService(_CatalogService):
    resource = "Template"
    updatable = ("name", "description", "content", "format", "is_active")

    def __init__(self, session: AsyncSession, clock: Clock = utcnow):
        super().__init__(session, clock)
        self.repo = TemplateRepository(session)

    def _clean_updates(self, changes: dict[str, Any]) -> dict[str, Any]:
        updates = super()._clean_updates(changes)
        if "content" in updates:
            require_text(updates["content"], "content")
        if "format" in updates:
            updates["format"] = parse_enum(TemplateFormat, updates["format"], "format").value
        updates["updated_at"] = self._now()
        return updates

    async def create(self, data: TemplateCreate, created_by: str | None = None):
        require_text(data.code, "code")
        require_text(data.name, "name")
        require_text(data.content, "content")
        row = await self._persist(
            self.repo.create(
                template_id=generate_id(TEMPLATE_PREFIX),
                tenant_id=data.tenant_id,
                code=data.code,
                name=data.name,
                description=data.description or "",
                content=data.content,
                format=parse_enum(TemplateFormat, data.format, "format").value,
                is_active=True,
                created_by=created_by or SYSTEM_USER,
                created_at=self._now(),
            ),
            f"Template code '{data.code}' already exists for tenant '{data.tenant_id}'",
        )
        logger.info("Created template %s for tenant %s", row.template_id, row.tenant_id)
        return row

"""Tenant API routes. Tenants are created and deleted, never updated."""

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from herald.dependencies import CurrentUser, get_clock, get_db
from herald.errors.exceptions import NotFoundError
from herald.models.tenant import TenantCreate, TenantResponse
from herald.services.base import Clock
from herald.services.catalog_service import TenantService

router = APIRouter(tags=["Tenants"])


def _tenant_dict(row) -> dict:
    return TenantResponse.from_row(row).model_dump(mode="json", by_alias=True)


@router.get("/tenants")
async def list_tenants(db: AsyncSession = Depends(get_db)) -> list[dict]:
    rows = await TenantService(db).list_all()
    return [_tenant_dict(r) for r in rows]


@router.get("/tenants/code/{code}")
async def get_tenant_by_code(code: str, db: AsyncSession = Depends(get_db)) -> dict:
    return _tenant_dict(await TenantService(db).get_by_code(code))


@router.get("/tenants/{tenant_id}")
async def get_tenant(tenant_id: str, db: AsyncSession = Depends(get_db)) -> dict:
    return _tenant_dict(await TenantService(db).get(tenant_id))


@router.post("/tenants", status_code=201)
async def create_tenant(
    body: TenantCreate,
    request: Request,
    response: Response,
    user: CurrentUser,
    db: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock),
) -> dict:
    row = await TenantService(db, clock).create(body)
    await db.commit()
    response.headers["Location"] = str(request.url_for("get_tenant", tenant_id=row.tenant_id))
    return _tenant_dict(row)


@router.delete("/tenants/{tenant_id}", status_code=204)
async def delete_tenant(
    tenant_id: str,
    user: CurrentUser,
    db: AsyncSession = Depends(get_db),
) -> Response:
    """Delete a tenant together with its notifications and catalog entries."""
    if not await TenantService(db).delete(tenant_id):
        raise NotFoundError("Tenant", tenant_id)
    await db.commit()
    return Response(status_code=204)

"""Environment API routes."""

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from herald.dependencies import CurrentUser, get_clock, get_db
from herald.errors.exceptions import NotFoundError
from herald.models.catalog import EnvironmentCreate, EnvironmentResponse, EnvironmentUpdate
from herald.services.base import Clock
from herald.services.catalog_service import EnvironmentService

router = APIRouter(tags=["Environments"])


def _environment_dict(row) -> dict:
    return EnvironmentResponse.from_row(row).model_dump(mode="json", by_alias=True)


@router.get("/environments")
async def list_environments(db: AsyncSession = Depends(get_db)) -> list[dict]:
    return [_environment_dict(r) for r in await EnvironmentService(db).list_all()]


@router.get("/environments/tenant/{tenant_id}")
async def list_tenant_environments(tenant_id: str, db: AsyncSession = Depends(get_db)) -> list[dict]:
    return [_environment_dict(r) for r in await EnvironmentService(db).list_by_tenant(tenant_id)]


@router.get("/environments/tenant/{tenant_id}/code/{code}")
async def get_environment_by_code(
    tenant_id: str,
    code: str,
    db: AsyncSession = Depends(get_db),
) -> dict:
    return _environment_dict(await EnvironmentService(db).get_by_code(tenant_id, code))


@router.get("/environments/{environment_id}")
async def get_environment(environment_id: str, db: AsyncSession = Depends(get_db)) -> dict:
    return _environment_dict(await EnvironmentService(db).get(environment_id))


@router.post("/environments", status_code=201)
async def create_environment(
    body: EnvironmentCreate,
    request: Request,
    response: Response,
    user: CurrentUser,
    db: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock),
) -> dict:
    row = await EnvironmentService(db, clock).create(body)
    await db.commit()
    response.headers["Location"] = str(
        request.url_for("get_environment", environment_id=row.environment_id)
    )
    return _environment_dict(row)


@router.put("/environments/{environment_id}", status_code=204)
async def update_environment(
    environment_id: str,
    body: EnvironmentUpdate,
    user: CurrentUser,
    db: AsyncSession = Depends(get_db),
) -> Response:
    await EnvironmentService(db).update(environment_id, body.model_dump(exclude_unset=True))
    await db.commit()
    return Response(status_code=204)


@router.delete("/environments/{environment_id}", status_code=204)
async def delete_environment(
    environment_id: str,
    user: CurrentUser,
    db: AsyncSession = Depends(get_db),
) -> Response:
    if not await EnvironmentService(db).delete(environment_id):
        raise NotFoundError("Environment", environment_id)
    await db.commit()
    return Response(status_code=204)

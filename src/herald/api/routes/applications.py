"""Application API routes."""

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from herald.dependencies import CurrentUser, get_clock, get_db
from herald.errors.exceptions import NotFoundError
from herald.models.catalog import ApplicationCreate, ApplicationResponse, ApplicationUpdate
from herald.services.base import Clock
from herald.services.catalog_service import ApplicationService

router = APIRouter(tags=["Applications"])


def _application_dict(row) -> dict:
    return ApplicationResponse.from_row(row).model_dump(mode="json", by_alias=True)


@router.get("/applications")
async def list_applications(db: AsyncSession = Depends(get_db)) -> list[dict]:
    rows = await ApplicationService(db).list_all()
    return [_application_dict(r) for r in rows]


@router.get("/applications/tenant/{tenant_id}")
async def list_tenant_applications(tenant_id: str, db: AsyncSession = Depends(get_db)) -> list[dict]:
    rows = await ApplicationService(db).list_by_tenant(tenant_id)
    return [_application_dict(r) for r in rows]


@router.get("/applications/tenant/{tenant_id}/code/{code}")
async def get_application_by_code(
    tenant_id: str,
    code: str,
    db: AsyncSession = Depends(get_db),
) -> dict:
    return _application_dict(await ApplicationService(db).get_by_code(tenant_id, code))


@router.get("/applications/{application_id}")
async def get_application(application_id: str, db: AsyncSession = Depends(get_db)) -> dict:
    return _application_dict(await ApplicationService(db).get(application_id))


@router.post("/applications", status_code=201)
async def create_application(
    body: ApplicationCreate,
    request: Request,
    response: Response,
    user: CurrentUser,
    db: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock),
) -> dict:
    row = await ApplicationService(db, clock).create(body)
    await db.commit()
    response.headers["Location"] = str(
        request.url_for("get_application", application_id=row.application_id)
    )
    return _application_dict(row)


@router.put("/applications/{application_id}", status_code=204)
async def update_application(
    application_id: str,
    body: ApplicationUpdate,
    user: CurrentUser,
    db: AsyncSession = Depends(get_db),
) -> Response:
    await ApplicationService(db).update(application_id, body.model_dump(exclude_unset=True))
    await db.commit()
    return Response(status_code=204)


@router.delete("/applications/{application_id}", status_code=204)
async def delete_application(
    application_id: str,
    user: CurrentUser,
    db: AsyncSession = Depends(get_db),
) -> Response:
    """Delete an application; notifications and targeting rules pointing at it lose the reference."""
    if not await ApplicationService(db).delete(application_id):
        raise NotFoundError("Application", application_id)
    await db.commit()
    return Response(status_code=204)

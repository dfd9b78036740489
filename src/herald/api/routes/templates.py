"""Notification template API routes."""

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from herald.dependencies import CurrentUser, get_clock, get_db
from herald.errors.exceptions import NotFoundError
from herald.models.catalog import TemplateCreate, TemplateResponse, TemplateUpdate
from herald.services.base import Clock
from herald.services.catalog_service import TemplateService

router = APIRouter(tags=["Templates"])


def _template_dict(row) -> dict:
    return TemplateResponse.from_row(row).model_dump(mode="json", by_alias=True)


@router.get("/templates")
async def list_templates(db: AsyncSession = Depends(get_db)) -> list[dict]:
    return [_template_dict(r) for r in await TemplateService(db).list_all()]


@router.get("/templates/tenant/{tenant_id}")
async def list_tenant_templates(tenant_id: str, db: AsyncSession = Depends(get_db)) -> list[dict]:
    return [_template_dict(r) for r in await TemplateService(db).list_by_tenant(tenant_id)]


@router.get("/templates/tenant/{tenant_id}/code/{code}")
async def get_template_by_code(
    tenant_id: str,
    code: str,
    db: AsyncSession = Depends(get_db),
) -> dict:
    return _template_dict(await TemplateService(db).get_by_code(tenant_id, code))


@router.get("/templates/{template_id}")
async def get_template(template_id: str, db: AsyncSession = Depends(get_db)) -> dict:
    return _template_dict(await TemplateService(db).get(template_id))


@router.post("/templates", status_code=201)
async def create_template(
    body: TemplateCreate,
    request: Request,
    response: Response,
    user: CurrentUser,
    db: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock),
) -> dict:
    row = await TemplateService(db, clock).create(body, created_by=user.get("name"))
    await db.commit()
    response.headers["Location"] = str(request.url_for("get_template", template_id=row.template_id))
    return _template_dict(row)


@router.put("/templates/{template_id}", status_code=204)
async def update_template(
    template_id: str,
    body: TemplateUpdate,
    user: CurrentUser,
    db: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock),
) -> Response:
    await TemplateService(db, clock).update(template_id, body.model_dump(exclude_unset=True))
    await db.commit()
    return Response(status_code=204)


@router.delete("/templates/{template_id}", status_code=204)
async def delete_template(
    template_id: str,
    user: CurrentUser,
    db: AsyncSession = Depends(get_db),
) -> Response:
    if not await TemplateService(db).delete(template_id):
        raise NotFoundError("Template", template_id)
    await db.commit()
    return Response(status_code=204)

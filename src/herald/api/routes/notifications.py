"""Notification API routes."""

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from herald.dependencies import CurrentUser, get_clock, get_db
from herald.errors.exceptions import NotFoundError
from herald.models.notification import NotificationCreate, NotificationResponse, NotificationUpdate
from herald.services.base import Clock
from herald.services.notification_service import NotificationService

router = APIRouter(tags=["Notifications"])


def _notification_dict(row) -> dict:
    return NotificationResponse.from_row(row).model_dump(mode="json", by_alias=True)


@router.get("/notifications")
async def list_notifications(db: AsyncSession = Depends(get_db)) -> list[dict]:
    rows = await NotificationService(db).list_all()
    return [_notification_dict(r) for r in rows]


@router.get("/notifications/tenant/{tenant_id}")
async def list_tenant_notifications(
    tenant_id: str,
    db: AsyncSession = Depends(get_db),
) -> list[dict]:
    rows = await NotificationService(db).list_by_tenant(tenant_id)
    return [_notification_dict(r) for r in rows]


@router.get("/notifications/tenant/{tenant_id}/active")
async def list_active_notifications(
    tenant_id: str,
    db: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock),
) -> list[dict]:
    """Notifications a polling client should display right now."""
    rows = await NotificationService(db, clock).list_active(tenant_id)
    return [_notification_dict(r) for r in rows]


@router.get("/notifications/{notification_id}")
async def get_notification(
    notification_id: str,
    db: AsyncSession = Depends(get_db),
) -> dict:
    row = await NotificationService(db).get(notification_id)
    return _notification_dict(row)


@router.post("/notifications", status_code=201)
async def create_notification(
    body: NotificationCreate,
    request: Request,
    response: Response,
    user: CurrentUser,
    db: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock),
) -> dict:
    row = await NotificationService(db, clock).create(body, created_by=user.get("name"))
    await db.commit()
    response.headers["Location"] = str(
        request.url_for("get_notification", notification_id=row.notification_id)
    )
    return _notification_dict(row)


@router.put("/notifications/{notification_id}", status_code=204)
async def update_notification(
    notification_id: str,
    body: NotificationUpdate,
    user: CurrentUser,
    db: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock),
) -> Response:
    await NotificationService(db, clock).update(notification_id, body.model_dump(exclude_unset=True))
    await db.commit()
    return Response(status_code=204)


@router.delete("/notifications/{notification_id}", status_code=204)
async def delete_notification(
    notification_id: str,
    user: CurrentUser,
    db: AsyncSession = Depends(get_db),
) -> Response:
    if not await NotificationService(db).delete(notification_id):
        raise NotFoundError("Notification", notification_id)
    await db.commit()
    return Response(status_code=204)

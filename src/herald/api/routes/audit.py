"""Read-only history and acknowledgment routes for a notification."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from herald.dependencies import get_db
from herald.models.audit import AcknowledgmentResponse, HistoryEntryResponse
from herald.services.schedule_service import NotificationDetailService

router = APIRouter(tags=["Audit"])


@router.get("/notifications/{notification_id}/history")
async def list_history(notification_id: str, db: AsyncSession = Depends(get_db)) -> list[dict]:
    """Newest first."""
    rows = await NotificationDetailService(db).list_history(notification_id)
    return [HistoryEntryResponse.from_row(r).model_dump(mode="json", by_alias=True) for r in rows]


@router.get("/notifications/{notification_id}/acknowledgments")
async def list_acknowledgments(notification_id: str, db: AsyncSession = Depends(get_db)) -> list[dict]:
    rows = await NotificationDetailService(db).list_acknowledgments(notification_id)
    return [AcknowledgmentResponse.from_row(r).model_dump(mode="json", by_alias=True) for r in rows]

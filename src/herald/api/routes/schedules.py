"""Schedule and targeting-rule routes nested under a notification.

These only store descriptors; the active-notification query ignores them.
"""

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from herald.dependencies import CurrentUser, get_clock, get_db
from herald.errors.exceptions import NotFoundError
from herald.models.schedule import (
    ScheduleCreate,
    ScheduleResponse,
    TargetingRuleCreate,
    TargetingRuleResponse,
)
from herald.services.base import Clock
from herald.services.schedule_service import NotificationDetailService

router = APIRouter(tags=["Schedules"])


def _schedule_dict(row) -> dict:
    return ScheduleResponse.from_row(row).model_dump(mode="json", by_alias=True)


def _rule_dict(row) -> dict:
    return TargetingRuleResponse.from_row(row).model_dump(mode="json", by_alias=True)


# ── Schedules ──────────────────────────────────────────────────────────────────

@router.get("/notifications/{notification_id}/schedules")
async def list_schedules(notification_id: str, db: AsyncSession = Depends(get_db)) -> list[dict]:
    rows = await NotificationDetailService(db).list_schedules(notification_id)
    return [_schedule_dict(r) for r in rows]


@router.get("/notifications/{notification_id}/schedules/{schedule_id}")
async def get_schedule(
    notification_id: str,
    schedule_id: str,
    db: AsyncSession = Depends(get_db),
) -> dict:
    return _schedule_dict(await NotificationDetailService(db).get_schedule(notification_id, schedule_id))


@router.post("/notifications/{notification_id}/schedules", status_code=201)
async def create_schedule(
    notification_id: str,
    body: ScheduleCreate,
    request: Request,
    response: Response,
    user: CurrentUser,
    db: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock),
) -> dict:
    row = await NotificationDetailService(db, clock).add_schedule(notification_id, body)
    await db.commit()
    response.headers["Location"] = str(
        request.url_for("get_schedule", notification_id=notification_id, schedule_id=row.schedule_id)
    )
    return _schedule_dict(row)


@router.delete("/notifications/{notification_id}/schedules/{schedule_id}", status_code=204)
async def delete_schedule(
    notification_id: str,
    schedule_id: str,
    user: CurrentUser,
    db: AsyncSession = Depends(get_db),
) -> Response:
    if not await NotificationDetailService(db).remove_schedule(notification_id, schedule_id):
        raise NotFoundError("Schedule", schedule_id)
    await db.commit()
    return Response(status_code=204)


# ── Targeting rules ────────────────────────────────────────────────────────────

@router.get("/notifications/{notification_id}/targeting-rules", tags=["TargetingRules"])
async def list_targeting_rules(notification_id: str, db: AsyncSession = Depends(get_db)) -> list[dict]:
    rows = await NotificationDetailService(db).list_rules(notification_id)
    return [_rule_dict(r) for r in rows]


@router.get("/notifications/{notification_id}/targeting-rules/{rule_id}", tags=["TargetingRules"])
async def get_targeting_rule(
    notification_id: str,
    rule_id: str,
    db: AsyncSession = Depends(get_db),
) -> dict:
    return _rule_dict(await NotificationDetailService(db).get_rule(notification_id, rule_id))


@router.post("/notifications/{notification_id}/targeting-rules", status_code=201, tags=["TargetingRules"])
async def create_targeting_rule(
    notification_id: str,
    body: TargetingRuleCreate,
    request: Request,
    response: Response,
    user: CurrentUser,
    db: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock),
) -> dict:
    row = await NotificationDetailService(db, clock).add_rule(notification_id, body)
    await db.commit()
    response.headers["Location"] = str(
        request.url_for("get_targeting_rule", notification_id=notification_id, rule_id=row.rule_id)
    )
    return _rule_dict(row)


@router.delete(
    "/notifications/{notification_id}/targeting-rules/{rule_id}",
    status_code=204,
    tags=["TargetingRules"],
)
async def delete_targeting_rule(
    notification_id: str,
    rule_id: str,
    user: CurrentUser,
    db: AsyncSession = Depends(get_db),
) -> Response:
    if not await NotificationDetailService(db).remove_rule(notification_id, rule_id):
        raise NotFoundError("TargetingRule", rule_id)
    await db.commit()
    return Response(status_code=204)

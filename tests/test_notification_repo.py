"""Tests for NotificationRepository: active window, ordering, scoping and cascades."""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import func, select

from herald.db.models import (
    NotificationAcknowledgmentRow,
    NotificationHistoryRow,
    NotificationScheduleRow,
    TargetingRuleRow,
)
from herald.repositories.notification_repo import NotificationRepository
from herald.repositories.schedule_repo import AcknowledgmentRepository, HistoryRepository
from herald.repositories.tenant_repo import TenantRepository
from herald.services.id_generator import NOTIFICATION_PREFIX, TENANT_PREFIX, generate_id

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


async def _add(repo: NotificationRepository, tenant_id: str, **fields):
    values = {
        "notification_id": generate_id(NOTIFICATION_PREFIX),
        "tenant_id": tenant_id,
        "title": "t",
        "message": "m",
        "type": "Info",
        "is_active": True,
        "created_by": "System",
        "created_at": NOW,
        "updated_at": NOW,
    }
    values.update(fields)
    return await repo.create(**values)


async def _count(db_session, model, notification_id: str) -> int:
    stmt = select(func.count()).select_from(model).where(model.notification_id == notification_id)
    return (await db_session.execute(stmt)).scalar_one()


# ---------------------------------------------------------------------------
# Active window
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
@pytest.mark.parametrize(
    "fields,expected",
    [
        ({}, True),
        ({"is_active": False}, False),
        ({"start_date": NOW - timedelta(hours=1)}, True),
        ({"start_date": NOW + timedelta(seconds=1)}, False),
        ({"end_date": NOW + timedelta(hours=1)}, True),
        ({"end_date": NOW - timedelta(seconds=1)}, False),
        ({"start_date": NOW - timedelta(days=1), "end_date": NOW + timedelta(days=1)}, True),
        ({"start_date": NOW, "end_date": NOW}, True),
        ({"is_active": False, "start_date": NOW - timedelta(days=1)}, False),
    ],
)
async def test_active_window(db_session, tenant_id, fields, expected):
    repo = NotificationRepository(db_session)
    row = await _add(repo, tenant_id, **fields)

    active = await repo.list_active_by_tenant(tenant_id, now=NOW)

    assert (row in active) is expected


@pytest.mark.asyncio
async def test_active_window_normalizes_offset_now(db_session, tenant_id):
    repo = NotificationRepository(db_session)
    row = await _add(repo, tenant_id, start_date=NOW, end_date=NOW + timedelta(minutes=30))

    # 13:15+01:00 is 12:15 UTC, inside the window
    local_now = datetime(2026, 3, 1, 13, 15, tzinfo=timezone(timedelta(hours=1)))
    assert await repo.list_active_by_tenant(tenant_id, now=local_now) == [row]


@pytest.mark.asyncio
async def test_active_is_scoped_to_tenant(db_session, tenant_id):
    tenants = TenantRepository(db_session)
    other = await tenants.create(tenant_id=generate_id(TENANT_PREFIX), code="other", name="Other")
    repo = NotificationRepository(db_session)
    mine = await _add(repo, tenant_id)
    await _add(repo, other.tenant_id)

    assert await repo.list_active_by_tenant(tenant_id, now=NOW) == [mine]


@pytest.mark.asyncio
async def test_lists_are_newest_first(db_session, tenant_id):
    repo = NotificationRepository(db_session)
    older = await _add(repo, tenant_id, created_at=NOW - timedelta(hours=2))
    newest = await _add(repo, tenant_id, created_at=NOW)
    middle = await _add(repo, tenant_id, created_at=NOW - timedelta(hours=1))

    expected = [newest.notification_id, middle.notification_id, older.notification_id]
    assert [r.notification_id for r in await repo.list_by_tenant(tenant_id)] == expected
    assert [r.notification_id for r in await repo.list_active_by_tenant(tenant_id, now=NOW)] == expected
    assert [r.notification_id for r in await repo.list_all()] == expected


# ---------------------------------------------------------------------------
# Deletes
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_delete_twice_is_a_noop(db_session, tenant_id):
    repo = NotificationRepository(db_session)
    row = await _add(repo, tenant_id)

    assert await repo.delete(row.notification_id) is True
    assert await repo.get(row.notification_id) is None
    assert await repo.delete(row.notification_id) is False


@pytest.mark.asyncio
async def test_delete_removes_owned_rows(db_session, tenant_id):
    repo = NotificationRepository(db_session)
    row = await _add(repo, tenant_id)
    nid = row.notification_id

    db_session.add_all([
        NotificationScheduleRow(schedule_id="sch_1", notification_id=nid, start_date=NOW),
        TargetingRuleRow(rule_id="trl_1", notification_id=nid),
    ])
    await HistoryRepository(db_session).create(
        history_id="nhs_1", notification_id=nid, action="Created", performed_by="System",
    )
    await AcknowledgmentRepository(db_session).create(
        acknowledgment_id="ack_1", notification_id=nid, user_id="u1", user_name="User One",
    )
    await db_session.flush()

    assert await repo.delete(nid) is True
    for model in (
        NotificationScheduleRow,
        TargetingRuleRow,
        NotificationHistoryRow,
        NotificationAcknowledgmentRow,
    ):
        assert await _count(db_session, model, nid) == 0


@pytest.mark.asyncio
async def test_tenant_delete_removes_notifications(db_session, tenant_id):
    repo = NotificationRepository(db_session)
    row = await _add(repo, tenant_id)

    assert await TenantRepository(db_session).delete(tenant_id) is True
    assert await repo.get(row.notification_id) is None
    assert await repo.list_by_tenant(tenant_id) == []

"""Tests for NotificationService validation, timestamps and partial updates."""

from datetime import timedelta

import pytest

from herald.errors.exceptions import NotFoundError, ValidationError
from herald.models.notification import NotificationCreate
from herald.services.notification_service import NotificationService


def _create_body(tenant_id: str, **overrides) -> NotificationCreate:
    fields = {"tenant_id": tenant_id, "title": "Maintenance", "message": "Down at 22:00"}
    fields.update(overrides)
    return NotificationCreate(**fields)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides,field",
    [
        ({"title": ""}, "title"),
        ({"title": "   "}, "title"),
        ({"message": ""}, "message"),
        ({"message": "\t\n"}, "message"),
    ],
)
async def test_create_rejects_blank_text(db_session, tenant_id, overrides, field):
    service = NotificationService(db_session)
    with pytest.raises(ValidationError) as exc_info:
        await service.create(_create_body(tenant_id, **overrides))
    assert exc_info.value.details == {"field": field}
    assert await service.list_by_tenant(tenant_id) == []


@pytest.mark.asyncio
async def test_create_assigns_id_and_equal_timestamps(db_session, tenant_id, clock):
    row = await NotificationService(db_session, clock).create(_create_body(tenant_id))

    assert row.notification_id.startswith("ntf_")
    assert len(row.notification_id) > len("ntf_")
    assert row.created_at == row.updated_at == clock.now
    assert row.created_by == "System"
    assert row.type == "Info"
    assert row.is_active is True


@pytest.mark.asyncio
async def test_create_records_caller(db_session, tenant_id):
    row = await NotificationService(db_session).create(_create_body(tenant_id), created_by="admin")
    assert row.created_by == "admin"


@pytest.mark.asyncio
async def test_update_title_only_leaves_other_fields(db_session, tenant_id, clock):
    service = NotificationService(db_session, clock)
    row = await service.create(_create_body(tenant_id, type="Warning"))
    created_at = row.created_at

    clock.advance(minutes=5)
    updated = await service.update(row.notification_id, {"title": "New title"})

    assert updated.title == "New title"
    assert updated.message == "Down at 22:00"
    assert updated.type == "Warning"
    assert updated.is_active is True
    assert updated.created_at == created_at
    assert updated.updated_at == created_at + timedelta(minutes=5)


@pytest.mark.asyncio
async def test_update_ignores_explicit_null_for_required_fields(db_session, tenant_id):
    service = NotificationService(db_session)
    row = await service.create(_create_body(tenant_id))

    await service.update(row.notification_id, {"title": None, "message": None, "is_active": None})

    assert row.title == "Maintenance"
    assert row.message == "Down at 22:00"
    assert row.is_active is True


@pytest.mark.asyncio
async def test_update_can_clear_window_bounds(db_session, tenant_id, clock):
    service = NotificationService(db_session, clock)
    row = await service.create(
        _create_body(tenant_id, start_date=clock.now, end_date=clock.now + timedelta(days=1))
    )

    await service.update(row.notification_id, {"end_date": None})

    assert row.start_date == clock.now
    assert row.end_date is None


@pytest.mark.asyncio
async def test_update_rejects_blank_title(db_session, tenant_id):
    service = NotificationService(db_session)
    row = await service.create(_create_body(tenant_id))
    with pytest.raises(ValidationError):
        await service.update(row.notification_id, {"title": "  "})


@pytest.mark.asyncio
async def test_update_rejects_unknown_type(db_session, tenant_id):
    service = NotificationService(db_session)
    row = await service.create(_create_body(tenant_id))
    with pytest.raises(ValidationError):
        await service.update(row.notification_id, {"type": "Critical"})


@pytest.mark.asyncio
async def test_update_unknown_notification_is_not_found(db_session):
    with pytest.raises(NotFoundError):
        await NotificationService(db_session).update("ntf_missing", {"title": "x"})


@pytest.mark.asyncio
async def test_delete_then_get_is_not_found(db_session, tenant_id):
    service = NotificationService(db_session)
    row = await service.create(_create_body(tenant_id))

    assert await service.delete(row.notification_id) is True
    with pytest.raises(NotFoundError):
        await service.get(row.notification_id)
    assert await service.delete(row.notification_id) is False


@pytest.mark.asyncio
async def test_list_active_uses_service_clock(db_session, tenant_id, clock):
    service = NotificationService(db_session, clock)
    row = await service.create(_create_body(tenant_id, end_date=clock.now + timedelta(hours=1)))

    assert [r.notification_id for r in await service.list_active(tenant_id)] == [row.notification_id]
    clock.advance(hours=2)
    assert await service.list_active(tenant_id) == []

"""Tests for schedule and targeting-rule storage routes."""

import pytest


@pytest.fixture
async def notification_id(client, auth_headers, tenant_id) -> str:
    r = await client.post(
        "/api/notifications",
        json={"tenantId": tenant_id, "title": "t", "message": "m"},
        headers=auth_headers,
    )
    return r.json()["id"]


# ---------------------------------------------------------------------------
# Schedules
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_add_and_list_schedules(client, auth_headers, notification_id):
    base = f"/api/notifications/{notification_id}/schedules"
    r = await client.post(
        base,
        json={
            "startDate": "2026-05-01T09:00:00Z",
            "recurrence": "weekly",
            "recurrenceDaysOfWeek": "1,3,5",
            "timeZone": "Europe/Berlin",
        },
        headers=auth_headers,
    )
    assert r.status_code == 201
    schedule = r.json()
    assert schedule["id"].startswith("sch_")
    assert schedule["recurrence"] == "Weekly"
    assert schedule["recurrenceInterval"] == 1
    assert schedule["startDate"] == "2026-05-01T09:00:00Z"
    assert r.headers["Location"].endswith(f"{base}/{schedule['id']}")

    r = await client.get(base)
    assert [s["id"] for s in r.json()] == [schedule["id"]]
    r = await client.get(f"{base}/{schedule['id']}")
    assert r.json() == schedule


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "fields",
    [
        {"recurrenceInterval": 0},
        {"recurrenceDayOfMonth": 32},
        {"recurrenceDaysOfWeek": "1,9"},
        {"recurrence": "Hourly"},
        {"startDate": None},
    ],
)
async def test_schedule_validation(client, auth_headers, notification_id, fields):
    body = {"startDate": "2026-05-01T09:00:00Z"}
    body.update(fields)
    r = await client.post(
        f"/api/notifications/{notification_id}/schedules", json=body, headers=auth_headers
    )
    assert r.status_code == 400


@pytest.mark.asyncio
async def test_schedule_for_unknown_notification_is_404(client, auth_headers):
    r = await client.post(
        "/api/notifications/ntf_missing/schedules",
        json={"startDate": "2026-05-01T09:00:00Z"},
        headers=auth_headers,
    )
    assert r.status_code == 404
    assert (await client.get("/api/notifications/ntf_missing/schedules")).status_code == 404


@pytest.mark.asyncio
async def test_delete_schedule(client, auth_headers, notification_id):
    base = f"/api/notifications/{notification_id}/schedules"
    schedule = (
        await client.post(base, json={"startDate": "2026-05-01T09:00:00Z"}, headers=auth_headers)
    ).json()

    assert (await client.delete(f"{base}/{schedule['id']}", headers=auth_headers)).status_code == 204
    assert (await client.get(base)).json() == []
    assert (await client.delete(f"{base}/{schedule['id']}", headers=auth_headers)).status_code == 404


@pytest.mark.asyncio
async def test_schedules_do_not_affect_active_query(client, auth_headers, tenant_id, notification_id):
    await client.post(
        f"/api/notifications/{notification_id}/schedules",
        json={"startDate": "2099-01-01T00:00:00Z"},
        headers=auth_headers,
    )
    r = await client.get(f"/api/notifications/tenant/{tenant_id}/active")
    assert [n["id"] for n in r.json()] == [notification_id]


# ---------------------------------------------------------------------------
# Targeting rules
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_rules_listed_by_priority(client, auth_headers, notification_id):
    base = f"/api/notifications/{notification_id}/targeting-rules"
    low = (await client.post(base, json={"priority": 1}, headers=auth_headers)).json()
    high = (
        await client.post(
            base,
            json={"targetType": "environment", "targetEnvironment": "prod", "priority": 10},
            headers=auth_headers,
        )
    ).json()

    assert low["targetType"] == "All"
    assert high["targetType"] == "Environment"

    r = await client.get(base)
    assert [rule["id"] for rule in r.json()] == [high["id"], low["id"]]


@pytest.mark.asyncio
@pytest.mark.parametrize("fields", [{"priority": -1}, {"targetType": "Everyone"}])
async def test_rule_validation(client, auth_headers, notification_id, fields):
    r = await client.post(
        f"/api/notifications/{notification_id}/targeting-rules", json=fields, headers=auth_headers
    )
    assert r.status_code == 400


@pytest.mark.asyncio
async def test_delete_rule(client, auth_headers, notification_id):
    base = f"/api/notifications/{notification_id}/targeting-rules"
    r = await client.post(base, json={}, headers=auth_headers)
    assert r.status_code == 201
    rule = r.json()
    assert r.headers["Location"].endswith(f"{base}/{rule['id']}")

    assert (await client.delete(f"{base}/{rule['id']}", headers=auth_headers)).status_code == 204
    assert (await client.get(f"{base}/{rule['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_rule_under_wrong_notification_is_404(client, auth_headers, tenant_id, notification_id):
    rule = (
        await client.post(
            f"/api/notifications/{notification_id}/targeting-rules", json={}, headers=auth_headers
        )
    ).json()
    other = (
        await client.post(
            "/api/notifications",
            json={"tenantId": tenant_id, "title": "x", "message": "y"},
            headers=auth_headers,
        )
    ).json()

    r = await client.delete(
        f"/api/notifications/{other['id']}/targeting-rules/{rule['id']}", headers=auth_headers
    )
    assert r.status_code == 404

"""Tests for application and environment routes."""

import pytest


async def _create_app(client, auth_headers, tenant_id, code="portal", name="Portal") -> dict:
    r = await client.post(
        "/api/applications",
        json={"tenantId": tenant_id, "code": code, "name": name, "description": "Customer portal"},
        headers=auth_headers,
    )
    assert r.status_code == 201, r.text
    return r.json()


@pytest.mark.asyncio
async def test_create_application(client, auth_headers, tenant_id):
    r = await client.post(
        "/api/applications",
        json={"tenantId": tenant_id, "code": "portal", "name": "Portal"},
        headers=auth_headers,
    )
    assert r.status_code == 201
    data = r.json()
    assert data["id"].startswith("app_")
    assert data["description"] == ""
    assert r.headers["Location"].endswith(f"/api/applications/{data['id']}")


@pytest.mark.asyncio
async def test_duplicate_application_code_is_409(client, auth_headers, tenant_id):
    await _create_app(client, auth_headers, tenant_id)
    r = await client.post(
        "/api/applications",
        json={"tenantId": tenant_id, "code": "portal", "name": "Another"},
        headers=auth_headers,
    )
    assert r.status_code == 409
    assert r.json()["error"]["code"] == "CONFLICT"


@pytest.mark.asyncio
async def test_same_code_in_other_tenant_is_allowed(client, auth_headers, tenant_id):
    await _create_app(client, auth_headers, tenant_id)
    r = await client.post("/api/tenants", json={"code": "other", "name": "Other"}, headers=auth_headers)
    other_id = r.json()["id"]
    await _create_app(client, auth_headers, other_id)


@pytest.mark.asyncio
@pytest.mark.parametrize("fields", [{"code": ""}, {"name": "  "}, {"code": "x" * 101}])
async def test_create_application_validation(client, auth_headers, tenant_id, fields):
    body = {"tenantId": tenant_id, "code": "c", "name": "n"}
    body.update(fields)
    r = await client.post("/api/applications", json=body, headers=auth_headers)
    assert r.status_code == 400


@pytest.mark.asyncio
async def test_lookup_application_by_code(client, auth_headers, tenant_id):
    created = await _create_app(client, auth_headers, tenant_id)

    r = await client.get(f"/api/applications/tenant/{tenant_id}/code/portal")
    assert r.status_code == 200
    assert r.json()["id"] == created["id"]

    r = await client.get(f"/api/applications/tenant/{tenant_id}/code/missing")
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_list_applications_ordered_by_name(client, auth_headers, tenant_id):
    await _create_app(client, auth_headers, tenant_id, code="b", name="Billing")
    await _create_app(client, auth_headers, tenant_id, code="a", name="Admin")

    r = await client.get(f"/api/applications/tenant/{tenant_id}")
    assert [a["name"] for a in r.json()] == ["Admin", "Billing"]
    r = await client.get("/api/applications")
    assert [a["name"] for a in r.json()] == ["Admin", "Billing"]


@pytest.mark.asyncio
async def test_update_application(client, auth_headers, tenant_id):
    created = await _create_app(client, auth_headers, tenant_id)

    r = await client.put(
        f"/api/applications/{created['id']}",
        json={"isActive": False, "name": None},
        headers=auth_headers,
    )
    assert r.status_code == 204

    data = (await client.get(f"/api/applications/{created['id']}")).json()
    assert data["isActive"] is False
    assert data["name"] == "Portal"
    assert data["description"] == "Customer portal"


@pytest.mark.asyncio
async def test_delete_application_clears_notification_reference(client, auth_headers, tenant_id):
    app = await _create_app(client, auth_headers, tenant_id)
    r = await client.post(
        "/api/notifications",
        json={"tenantId": tenant_id, "title": "t", "message": "m", "applicationId": app["id"]},
        headers=auth_headers,
    )
    notification_id = r.json()["id"]

    r = await client.delete(f"/api/applications/{app['id']}", headers=auth_headers)
    assert r.status_code == 204

    data = (await client.get(f"/api/notifications/{notification_id}")).json()
    assert data["applicationId"] is None
    assert (await client.delete(f"/api/applications/{app['id']}", headers=auth_headers)).status_code == 404


# ---------------------------------------------------------------------------
# Environments
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_environment_crud(client, auth_headers, tenant_id):
    r = await client.post(
        "/api/environments",
        json={"tenantId": tenant_id, "code": "prod", "name": "Production"},
        headers=auth_headers,
    )
    assert r.status_code == 201
    env = r.json()
    assert env["id"].startswith("env_")
    assert r.headers["Location"].endswith(f"/api/environments/{env['id']}")

    r = await client.get(f"/api/environments/tenant/{tenant_id}/code/prod")
    assert r.json()["id"] == env["id"]

    r = await client.put(f"/api/environments/{env['id']}", json={"name": "Prod"}, headers=auth_headers)
    assert r.status_code == 204
    assert (await client.get(f"/api/environments/{env['id']}")).json()["name"] == "Prod"

    r = await client.get(f"/api/environments/tenant/{tenant_id}")
    assert [e["id"] for e in r.json()] == [env["id"]]

    r = await client.delete(f"/api/environments/{env['id']}", headers=auth_headers)
    assert r.status_code == 204
    assert (await client.get(f"/api/environments/{env['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_duplicate_environment_code_is_409(client, auth_headers, tenant_id):
    body = {"tenantId": tenant_id, "code": "prod", "name": "Production"}
    assert (await client.post("/api/environments", json=body, headers=auth_headers)).status_code == 201
    assert (await client.post("/api/environments", json=body, headers=auth_headers)).status_code == 409


@pytest.mark.asyncio
async def test_create_application_for_unknown_tenant_is_409(client, auth_headers):
    r = await client.post(
        "/api/applications",
        json={"tenantId": "tnt_nope", "code": "web", "name": "Web"},
        headers=auth_headers,
    )
    assert r.status_code == 409

"""Seed a running Herald server with demo catalog entries and a banner.

Creates (idempotent):
  1. Tenant "default" (normally seeded at startup)
  2. Application "portal" and environment "prod" for that tenant
  3. Template "maintenance"
  4. One active Warning notification

Requires a running Herald server:
    herald-server --local --port 8080

Usage:
    python scripts/seed_demo_data.py [--api-url http://localhost:8080/api]
"""

import argparse
import sys

import httpx


def _fail(step: str, r: httpx.Response) -> None:
    print(f"   ERROR ({step}): {r.status_code} {r.text}", file=sys.stderr)
    sys.exit(1)


def _ensure(client: httpx.Client, lookup: str, create: str, body: dict, label: str) -> dict:
    r = client.get(lookup)
    if r.status_code == 200:
        print(f"   -> {label} already exists, skipping.")
        return r.json()
    r = client.post(create, json=body)
    if r.status_code != 201:
        _fail(label, r)
    print(f"   -> Created {label}: {r.json()['id']}")
    return r.json()


def main(api_url: str, username: str, password: str) -> None:
    client = httpx.Client(base_url=api_url, timeout=15.0)

    print(f"Herald API: {api_url}")
    print()

    # ── 0. Login ────────────────────────────────────────────────────────────
    r = client.post("/auth/login", json={"username": username, "password": password})
    if r.status_code != 200:
        _fail("login", r)
    client.headers["Authorization"] = f"Bearer {r.json()['token']}"

    # ── 1. Tenant ───────────────────────────────────────────────────────────
    print("1. Ensuring tenant 'default' exists...")
    tenant = _ensure(
        client,
        "/tenants/code/default",
        "/tenants",
        {"code": "default", "name": "Default Tenant"},
        "tenant",
    )
    tenant_id = tenant["id"]

    # ── 2. Catalog ──────────────────────────────────────────────────────────
    print("2. Ensuring application and environment...")
    app = _ensure(
        client,
        f"/applications/tenant/{tenant_id}/code/portal",
        "/applications",
        {"tenantId": tenant_id, "code": "portal", "name": "Customer Portal"},
        "application",
    )
    _ensure(
        client,
        f"/environments/tenant/{tenant_id}/code/prod",
        "/environments",
        {"tenantId": tenant_id, "code": "prod", "name": "Production"},
        "environment",
    )

    # ── 3. Template ─────────────────────────────────────────────────────────
    print("3. Ensuring maintenance template...")
    template = _ensure(
        client,
        f"/templates/tenant/{tenant_id}/code/maintenance",
        "/templates",
        {
            "tenantId": tenant_id,
            "code": "maintenance",
            "name": "Planned maintenance",
            "content": "<strong>Planned maintenance</strong> tonight 22:00-23:00 UTC.",
            "format": "Html",
        },
        "template",
    )

    # ── 4. Notification ─────────────────────────────────────────────────────
    print("4. Creating demo notification...")
    r = client.post(
        "/notifications",
        json={
            "tenantId": tenant_id,
            "title": "Scheduled maintenance",
            "message": "The portal will be read-only during tonight's maintenance window.",
            "type": "Warning",
            "templateId": template["id"],
            "applicationId": app["id"],
        },
    )
    if r.status_code != 201:
        _fail("notification", r)
    print(f"   -> Created: {r.json()['id']}")

    r = client.get(f"/notifications/tenant/{tenant_id}/active")
    print()
    print(f"Active notifications for tenant {tenant_id}: {len(r.json())}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed Herald demo data")
    parser.add_argument("--api-url", default="http://localhost:8080/api")
    parser.add_argument("--username", default="admin")
    parser.add_argument("--password", default="admin123")
    args = parser.parse_args()
    main(args.api_url, args.username, args.password)

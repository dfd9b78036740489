"""Master API router mounted at /api."""

from fastapi import APIRouter

from herald.api.routes import (
    applications,
    audit,
    auth,
    environments,
    health,
    notifications,
    schedules,
    templates,
    tenants,
)

api_router = APIRouter(prefix="/api")
api_router.include_router(health.router, tags=["Health"])
api_router.include_router(auth.router)
api_router.include_router(tenants.router)
api_router.include_router(notifications.router)
api_router.include_router(schedules.router)
api_router.include_router(audit.router)
api_router.include_router(applications.router)
api_router.include_router(environments.router)
api_router.include_router(templates.router)

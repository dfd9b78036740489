"""FastAPI application factory and lifespan management."""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from herald import __version__
from herald.config import settings
from herald.db.engine import create_db_engine, create_session_factory
from herald.logging_config import configure_logging

# Configure logging at import time
_json_logs = os.environ.get("HERALD_LOCAL", "0") != "1"
configure_logging(log_level=settings.log_level, json_output=_json_logs)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application startup and shutdown resources."""
    db_url = settings.effective_database_url
    engine = create_db_engine(db_url)
    session_factory = create_session_factory(engine)

    # Auto-create tables for SQLite (local dev, no Alembic migrations)
    if "sqlite" in db_url:
        from herald.db.base import Base
        import herald.db.models  # noqa: F401 register all ORM models

        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("SQLite tables created (local mode)")

    if settings.seed_default_tenant:
        from herald.services.catalog_service import TenantService

        async with session_factory() as seed_session:
            created = await TenantService(seed_session).ensure_default()
            await seed_session.commit()
            if created:
                logger.info("Seeded default tenant")

    app.state.db_engine = engine
    app.state.db_session_factory = session_factory

    logger.info("Herald API started (db=%s)", "sqlite" if "sqlite" in db_url else "postgresql")
    yield

    await engine.dispose()
    logger.info("Herald API shutdown complete")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Herald API",
        version=__version__,
        description="Multi-tenant system notification banners for applications and environments.",
        lifespan=lifespan,
    )

    # CORS for the admin console
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add middleware (order matters: last added = first executed)
    from herald.api.middleware.auth import AuthMiddleware
    from herald.api.middleware.trace_id import TraceIdMiddleware
    app.add_middleware(AuthMiddleware)
    app.add_middleware(TraceIdMiddleware)

    # Register error handlers
    from herald.errors.handlers import register_exception_handlers
    register_exception_handlers(app)

    # Signing key and demo credentials; read by AuthMiddleware and the login route
    from herald.services.auth_service import AuthConfig
    app.state.auth_config = AuthConfig.from_settings(settings)

    # Import and mount routers
    from herald.api.router import api_router
    app.include_router(api_router)

    return app


app = create_app()

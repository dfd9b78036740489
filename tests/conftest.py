"""Shared test fixtures."""

from datetime import datetime, timedelta, timezone

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from herald.db.base import Base
from herald.db.engine import create_db_engine
# Import all models to register with Base.metadata
import herald.db.models  # noqa: F401
from herald.models.tenant import TenantCreate
from herald.services.catalog_service import TenantService


class StepClock:
    """Deterministic clock; call ``advance`` to move time forward."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **delta) -> datetime:
        self.now = self.now + timedelta(**delta)
        return self.now


@pytest.fixture
def clock():
    # whole seconds so JWT exp claims round-trip exactly
    return StepClock(datetime.now(timezone.utc).replace(microsecond=0))


@pytest.fixture
async def db_engine():
    """Create an in-memory SQLite async engine for testing."""
    engine = create_db_engine("sqlite+aiosqlite:///")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(db_engine):
    """Create a test database session."""
    session_factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
def app(db_engine):
    """Create a test application instance with in-memory DB."""
    from herald.main import create_app

    _app = create_app()
    session_factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    _app.state.db_engine = db_engine
    _app.state.db_session_factory = session_factory
    return _app


@pytest.fixture
async def client(app):
    """Async HTTP test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def auth_headers(client) -> dict:
    """Bearer header for the demo account."""
    r = await client.post("/api/auth/login", json={"username": "admin", "password": "admin123"})
    assert r.status_code == 200
    return {"Authorization": f"Bearer {r.json()['token']}"}


@pytest.fixture
async def tenant_id(db_session) -> str:
    """A committed tenant every test can hang rows off."""
    row = await TenantService(db_session).create(TenantCreate(code="acme", name="Acme Corp"))
    await db_session.commit()
    return row.tenant_id

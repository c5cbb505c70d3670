"""Service test fixtures — async DB, seeded collection, FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - The collection singleton is seeded through ensure_collection (same path as startup)
    - get_db dependency overridden to use test DB session
    - db_manager patched for routes that bypass get_db (readiness probe)

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (row locks are a no-op there; serialization comes from the service lock)
    - Small cap and round prices so supply and payment edges are one request away
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from soulforge.api.dependencies import get_payout_rail
from soulforge.config import Settings
from soulforge.db.base import Base
from soulforge.infrastructure.database import get_db, DatabaseSessionManager
import soulforge.infrastructure.database as db_module
import soulforge.models  # noqa: F401
from soulforge.main import app
from soulforge.services.collection_bootstrap import ensure_collection

OWNER = "0x" + "1" * 40
CAP = 5
PUBLIC_PRICE = 100
PRESALE_PRICE = 50
PLACEHOLDER = "ipfs://placeholder/hidden.json"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        max_supply=CAP,
        owner_address=OWNER,
        public_price_wei=PUBLIC_PRICE,
        presale_price_wei=PRESALE_PRICE,
        placeholder_uri=PLACEHOLDER,
        royalty_bps=500,
    )


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def seeded(test_session_factory, settings):
    """Create the collection singleton the way the app does on startup."""
    async with test_session_factory() as session:
        await ensure_collection(session, settings)


@pytest.fixture
async def client(test_engine, test_session_factory, seeded):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def as_caller():
    """Build the identity header for a request."""
    def _headers(address: str) -> dict[str, str]:
        return {"X-Caller-Address": address}
    return _headers


@pytest.fixture
def failing_payout_rail():
    """Swap the payout rail for one that refuses every payout.

    Returns the list of (recipient, amount) attempts.
    """
    attempts = []

    class _RefusingRail:
        async def send(self, recipient, amount):
            attempts.append((recipient, amount))
            return False

    app.dependency_overrides[get_payout_rail] = lambda: _RefusingRail()
    yield attempts
    app.dependency_overrides.pop(get_payout_rail, None)

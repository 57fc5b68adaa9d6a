"""Root conftest — shared test configuration, async DB and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB session
    - db_manager patched so readiness checks hit the test engine
    - Lifespan is not run (ASGITransport), so no real database is contacted

Design Decisions:
    - SQLite in-memory via aiosqlite: fast, no external dependency
"""

import os
from decimal import Decimal

os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)

from jeep_sales.db.base import Base  # noqa: E402
from jeep_sales.infrastructure.database import (  # noqa: E402
    DatabaseSessionManager, get_db,
)
from jeep_sales.models.catalog_entry import CatalogEntry  # noqa: E402
import jeep_sales.infrastructure.database as db_module  # noqa: E402
from jeep_sales.main import app  # noqa: E402


SEED_ROWS = [
    ("WRANGLER", "Sport", 4, 17, "31975.00"),
    ("WRANGLER", "Sport", 2, 17, "28475.00"),
    ("WRANGLER", "Sport S", 2, 17, "31475.00"),
    ("WRANGLER", "Rubicon", 4, 17, "43825.00"),
    ("GLADIATOR", "Sport", 4, 17, "35040.00"),
    ("GRAND_CHEROKEE", "Limited", 4, 18, "43400.00"),
]


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
async def seed_jeeps(test_db):
    """Insert SEED_ROWS into the test DB."""
    test_db.add_all([
        CatalogEntry(
            model_id=model_id,
            trim_level=trim_level,
            num_doors=num_doors,
            wheel_size=wheel_size,
            base_price=Decimal(price),
        )
        for model_id, trim_level, num_doors, wheel_size, price in SEED_ROWS
    ])
    await test_db.commit()
    return SEED_ROWS


@pytest.fixture
async def client(test_engine, test_session_factory):
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

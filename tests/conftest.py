"""
Pytest configuration and fixtures for storefront tests.

Every test gets its own in-memory database, so nothing leaks between tests.
"""
import os
from decimal import Decimal

import pytest
import pytest_asyncio

# Set test environment before importing storefront modules
os.environ["ENVIRONMENT"] = "development"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["SEED_ON_STARTUP"] = "false"

from httpx import ASGITransport, AsyncClient  # noqa: E402

from storefront.core.config import IN_MEMORY_DATABASE_URL  # noqa: E402
from storefront.core.database import build_engine, build_sessionmaker, get_db, init_db  # noqa: E402
from storefront.services import CatalogService, UserService  # noqa: E402
from storefront.services.seed import seed_catalog  # noqa: E402


@pytest_asyncio.fixture
async def engine():
    """Fresh in-memory database with all tables created."""
    engine = build_engine(IN_MEMORY_DATABASE_URL)
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db(engine):
    async with build_sessionmaker(engine)() as session:
        yield session


@pytest_asyncio.fixture
async def seeded_db(db):
    """Session over a database holding the fixture catalog."""
    await seed_catalog(db)
    await db.commit()
    return db


@pytest_asyncio.fixture
async def user(db):
    return await UserService(db).create_user(email="shopper@example.com", first_name="Asha")


@pytest.fixture
def make_product(db):
    """Factory for active, in-stock products with sensible defaults."""
    catalog = CatalogService(db)

    async def _make(name: str = "Linen Shirt", **overrides):
        fields = {"name": name, "price": Decimal("999.00"), "stock": 10}
        fields.update(overrides)
        return await catalog.create_product(**fields)

    return _make


@pytest_asyncio.fixture
async def client(engine):
    """HTTP client against the app with get_db bound to this test's database."""
    from storefront.main import app

    sessionmaker = build_sessionmaker(engine)

    async def override_get_db():
        async with sessionmaker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http:
        yield http
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def seeded_client(client, engine):
    async with build_sessionmaker(engine)() as session:
        await seed_catalog(session)
        await session.commit()
    return client

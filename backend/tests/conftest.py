"""Pytest configuration and fixtures."""

from datetime import date

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from homelet.core.identity import Identity
from homelet.db import crud_properties, crud_users
from homelet.db import models  # noqa: F401  (registers the tables)
from homelet.db.base import Base
from homelet.db.session import enable_sqlite_foreign_keys, get_db
from homelet.main import app

PROPERTY_FIELDS = {
    "title": "Sunny flat",
    "description": "Two rooms near the park",
    "type": "apartment",
    "price": 1000.0,
    "address": "1 Main St",
    "city": "Austin",
    "state": "TX",
    "zip_code": "73301",
    "bedrooms": 2,
    "bathrooms": 1,
    "area": 70.0,
    "images": [],
}


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
async def engine(tmp_path):
    """Fresh SQLite file database per test."""
    engine = enable_sqlite_foreign_keys(
        create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def run(session_factory):
    """
    Call fn(session, *args) in a session of its own, like one request.
    A failing service call rolls its session back, which expires every
    object loaded in it; keeping calls apart keeps the fixtures readable.
    """

    async def _run(fn, *args, **kwargs):
        async with session_factory() as session:
            return await fn(session, *args, **kwargs)

    return _run


@pytest.fixture
async def client(session_factory):
    """HTTP client against the app, with get_db pointed at the test database."""

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def landlord(db):
    return await crud_users.create_user(
        db, name="Lana Landlord", email="lana@example.com", password="secret1", role="landlord"
    )


@pytest.fixture
async def tenant(db):
    return await crud_users.create_user(
        db, name="Tom Tenant", email="tom@example.com", password="secret1"
    )


@pytest.fixture
async def other_tenant(db):
    return await crud_users.create_user(
        db, name="Tess Tenant", email="tess@example.com", password="secret1"
    )


@pytest.fixture
async def listing(db, landlord):
    """An available 1000/month property owned by `landlord`."""
    return await crud_properties.create_property(db, owner_id=landlord.id, **PROPERTY_FIELDS)


def identity(user) -> Identity:
    return Identity.from_user(user)


def d(value: str) -> date:
    return date.fromisoformat(value)

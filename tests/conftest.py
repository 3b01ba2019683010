import os

# must be set before storefront.database builds its engine
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["CREATE_TABLES"] = "0"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.database import Base, get_session
from storefront.errors import StorageError
from storefront.main import app
from storefront.products import get_repository
from storefront.repository import InMemoryProductRepository, ProductRepository


class BrokenRepository(ProductRepository):
    """Every call fails as if the database were down."""

    async def list_all(self):
        raise StorageError("connection refused")

    async def insert(self, candidate):
        raise StorageError("connection refused")


@pytest.fixture
def repository():
    return InMemoryProductRepository()


@pytest.fixture
def client(repository):
    app.dependency_overrides[get_repository] = lambda: repository
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def broken_client():
    app.dependency_overrides[get_repository] = lambda: BrokenRepository()
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def sql_client():
    """TestClient wired to the real repository over an in-memory SQLite database."""
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    session_maker = sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)

    async def create_schema():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def sqlite_session():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_session] = sqlite_session
    # one event loop for every request so the shared connection stays usable
    with TestClient(app) as client:
        client.portal.call(create_schema)
        yield client
        client.portal.call(engine.dispose)
    app.dependency_overrides.clear()

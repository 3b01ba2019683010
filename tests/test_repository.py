import pytest
import pytest_asyncio
from sqlalchemy import Float, Text
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from storefront import controller
from storefront.database import Base
from storefront.envelope import Failure, Success
from storefront.errors import StorageError
from storefront.models import Product
from storefront.repository import InMemoryProductRepository, SqlAlchemyProductRepository
from storefront.schemas import ProductCategory, ProductCreate


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine):
    session_maker = sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)
    async with session_maker() as session:
        yield session


@pytest.mark.asyncio
async def test_sql_insert_assigns_id_and_created_at(session):
    repo = SqlAlchemyProductRepository(session)
    product = await repo.insert(ProductCreate(name="Widget", price=9.99, category=ProductCategory.OTHER))

    assert product.id
    assert product.created_at is not None
    assert product.name == "Widget"
    assert product.price == 9.99
    assert product.category is ProductCategory.OTHER


@pytest.mark.asyncio
async def test_sql_list_returns_inserted_rows(session):
    repo = SqlAlchemyProductRepository(session)
    assert await repo.list_all() == []

    first = await repo.insert(ProductCreate(name="A", price=1))
    second = await repo.insert(ProductCreate(name="B", price=2, image="/b.png"))

    listed = await repo.list_all()
    assert {p.id for p in listed} == {first.id, second.id}
    assert first.id != second.id


@pytest.mark.asyncio
async def test_sql_errors_become_storage_errors(engine, session):
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    repo = SqlAlchemyProductRepository(session)
    with pytest.raises(StorageError):
        await repo.list_all()
    with pytest.raises(StorageError):
        await repo.insert(ProductCreate(name="Widget", price=1))


@pytest.mark.asyncio
async def test_controller_against_sql_repository(session):
    repo = SqlAlchemyProductRepository(session)

    created = await controller.create_product(repo, {"name": "Widget", "price": 9.99})
    assert isinstance(created, Success)
    assert created.status_code == 201

    listed = await controller.list_products(repo)
    assert isinstance(listed, Success)
    assert listed.to_body()["count"] == 1
    assert listed.to_body()["data"][0]["id"] == created.data["id"]


@pytest.mark.asyncio
async def test_controller_rejects_without_inserting():
    repo = InMemoryProductRepository()

    result = await controller.create_product(repo, {"name": "   ", "price": 1})
    assert isinstance(result, Failure)
    assert result.status_code == 400
    assert result.to_body() == {
        "success": False,
        "error": "Product validation failed: name: Please add a product name",
    }
    assert await repo.list_all() == []


@pytest.mark.asyncio
async def test_in_memory_listing_is_a_copy():
    repo = InMemoryProductRepository()
    await repo.insert(ProductCreate(name="A", price=1))

    listed = await repo.list_all()
    listed.clear()
    assert len(await repo.list_all()) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("price", [1.999, 0.004, 19.995, 1e12])
async def test_sql_price_round_trips_unchanged(session, price):
    repo = SqlAlchemyProductRepository(session)

    result = await controller.create_product(repo, {"name": "Widget", "price": price})
    assert isinstance(result, Success)
    assert result.data["price"] == price

    [stored] = await repo.list_all()
    assert stored.price == price


@pytest.mark.asyncio
async def test_sql_name_has_no_length_limit(session):
    repo = SqlAlchemyProductRepository(session)
    name = "x" * 5000

    product = await repo.insert(ProductCreate(name=name, price=1))
    assert product.name == name
    assert isinstance(Product.__table__.c.name.type, Text)
    assert isinstance(Product.__table__.c.price.type, Float)

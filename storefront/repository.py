# storefront/repository.py
import logging
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from .errors import StorageError
from .models import Product
from .schemas import ProductCreate, ProductOut

logger = logging.getLogger(__name__)


class ProductRepository(ABC):
    """Storage used by the product controller."""

    @abstractmethod
    async def list_all(self) -> List[ProductOut]:
        """Return every stored product, in no particular order."""

    @abstractmethod
    async def insert(self, candidate: ProductCreate) -> ProductOut:
        """Persist a validated product and return it with id and created_at set."""


class SqlAlchemyProductRepository(ProductRepository):

    def __init__(self, session: AsyncSession):
        self._session = session

    async def list_all(self) -> List[ProductOut]:
        try:
            result = await self._session.execute(select(Product))
            products = result.scalars().all()
        except (SQLAlchemyError, OSError) as exc:
            logger.exception("Listing products failed")
            raise StorageError("Listing products failed") from exc
        return [ProductOut.model_validate(p) for p in products]

    async def insert(self, candidate: ProductCreate) -> ProductOut:
        product = Product(**candidate.model_dump(mode="json"))
        try:
            self._session.add(product)
            await self._session.commit()
            await self._session.refresh(product)
        except (SQLAlchemyError, OSError) as exc:
            logger.exception("Inserting product %r failed", candidate.name)
            await self._session.rollback()
            raise StorageError("Inserting product failed") from exc
        return ProductOut.model_validate(product)


class InMemoryProductRepository(ProductRepository):
    """List-backed repository for tests and offline demos."""

    def __init__(self, products: Optional[Iterable[ProductOut]] = None):
        self._products: List[ProductOut] = list(products or [])

    async def list_all(self) -> List[ProductOut]:
        return list(self._products)

    async def insert(self, candidate: ProductCreate) -> ProductOut:
        product = ProductOut(
            id=str(uuid.uuid4()),
            created_at=datetime.now(timezone.utc),
            **candidate.model_dump(),
        )
        self._products.append(product)
        return product

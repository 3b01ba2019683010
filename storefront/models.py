# storefront/models.py
import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    Column, String, Text, DateTime, Float, CheckConstraint, Index
)

from .database import Base
from .schemas import ProductCategory

PRODUCT_CATEGORIES = tuple(c.value for c in ProductCategory)


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Product(Base):
    __tablename__ = "products"

    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(Text, nullable=False)
    price = Column(Float, nullable=False)
    description = Column(Text, nullable=True)
    image = Column(String(1024), nullable=True)      # URL or static path
    category = Column(String(50), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_products_price_nonneg"),
        CheckConstraint(
            "category IS NULL OR category IN ({})".format(
                ", ".join(f"'{c}'" for c in PRODUCT_CATEGORIES)
            ),
            name="ck_products_category_known",
        ),
        Index("ix_products_created_at", "created_at"),
    )

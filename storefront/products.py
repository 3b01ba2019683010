# storefront/products.py
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from . import controller
from .database import get_session
from .repository import ProductRepository, SqlAlchemyProductRepository

# mounted under /api/products by create_app()
router = APIRouter(tags=["products"])


def get_repository(session: AsyncSession = Depends(get_session)) -> ProductRepository:
    return SqlAlchemyProductRepository(session)


@router.get("", summary="List products")
async def list_products(repository: ProductRepository = Depends(get_repository)):
    envelope = await controller.list_products(repository)
    return envelope.to_response()


@router.post("", summary="Create a product", status_code=status.HTTP_201_CREATED)
async def create_product(
    payload: Any = Body(...),
    repository: ProductRepository = Depends(get_repository),
):
    envelope = await controller.create_product(repository, payload)
    return envelope.to_response()

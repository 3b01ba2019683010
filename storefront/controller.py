# storefront/controller.py
import logging
from typing import Any

from fastapi import status

from .envelope import Envelope, Failure, Success
from .errors import ProductValidationError, StorageError
from .repository import ProductRepository
from .validation import validate_product

logger = logging.getLogger(__name__)

SERVER_ERROR = "Server Error"


async def list_products(repository: ProductRepository) -> Envelope:
    try:
        products = await repository.list_all()
    except StorageError:
        # details stay in the server log
        return Failure(status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR)

    data = [p.model_dump(mode="json", by_alias=True) for p in products]
    return Success(status.HTTP_200_OK, data, count=len(data))


async def create_product(repository: ProductRepository, candidate: Any) -> Envelope:
    try:
        product_in = validate_product(candidate)
    except ProductValidationError as exc:
        return Failure(status.HTTP_400_BAD_REQUEST, exc.message)

    try:
        product = await repository.insert(product_in)
    except StorageError:
        return Failure(status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR)

    logger.info("Created product %s (%s)", product.id, product.name)
    return Success(status.HTTP_201_CREATED, product.model_dump(mode="json", by_alias=True))

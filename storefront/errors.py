# storefront/errors.py
from typing import List

from .schemas import FieldError


class StorefrontError(Exception):
    """Base class for errors raised by the product service."""
    pass


class ProductValidationError(StorefrontError):
    """A candidate product broke one or more field rules."""

    def __init__(self, errors: List[FieldError]):
        self.errors = errors
        self.message = "Product validation failed: " + ", ".join(
            f"{e.field}: {e.message}" for e in errors
        )
        super().__init__(self.message)


class StorageError(StorefrontError):
    """The database could not complete a read or write."""
    pass

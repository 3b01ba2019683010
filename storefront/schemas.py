# storefront/schemas.py
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError


class ProductCategory(str, Enum):
    ELECTRONICS = "Electronics"
    CLOTHING = "Clothing"
    HOME = "Home"
    OTHER = "Other"


# 🛍️ Product
class ProductBase(BaseModel):
    name: str
    price: float = Field(ge=0, allow_inf_nan=False)
    description: Optional[str] = None
    image: Optional[str] = None
    category: Optional[ProductCategory] = None


class ProductCreate(ProductBase):
    # id and createdAt are assigned on insert; anything else unknown is dropped

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise PydanticCustomError("blank", "Please add a product name")
        return value

    @field_validator("price", mode="before")
    @classmethod
    def reject_bool_price(cls, value):
        # bool is an int subclass; lax float parsing would store true as 1.0
        if isinstance(value, bool):
            raise PydanticCustomError("bool_price", "Price must be a number")
        return value


class ProductOut(ProductBase):
    id: str
    created_at: datetime = Field(serialization_alias="createdAt")

    class Config:
        from_attributes = True


class FieldError(BaseModel):
    field: str
    message: str

"""
Pydantic schemas for products.

``ProductCreate`` and ``ProductUpdate`` validate incoming payloads
explicitly instead of coercing loosely typed values: text fields must
be strings, ``price`` must be a finite non-negative number (booleans
and numeric strings are rejected) and ``inStock`` must be a JSON
boolean.  Text fields are trimmed and ``category`` is lower-cased
during validation, so a validated model is already normalized.

``Product`` is the stored record and the shape returned by the API.
The stock flag is exposed as ``inStock`` on the wire and as
``in_stock`` in Python.
"""

import math
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

MISSING_FIELDS_MESSAGE = (
    "Missing required fields: name, description, price, and category are required"
)
PRICE_MESSAGE = "Price must be a positive number"
IN_STOCK_MESSAGE = "inStock must be a boolean"

Number = Union[int, float]


def _check_price(value: Any) -> Number:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PydanticCustomError("price", PRICE_MESSAGE)
    # JSON integers are unbounded; only floats can be nan or inf.
    if isinstance(value, float) and not math.isfinite(value):
        raise PydanticCustomError("price", PRICE_MESSAGE)
    if value < 0:
        raise PydanticCustomError("price", PRICE_MESSAGE)
    return value


def _is_blank(value: Any) -> bool:
    """Mirror JSON falsiness for text fields: null, "", false, 0 and blank strings."""
    if isinstance(value, str):
        return not value.strip()
    return value is None or value is False or (isinstance(value, (int, float)) and value == 0)


def _check_in_stock(value: Any) -> bool:
    if not isinstance(value, bool):
        raise PydanticCustomError("in_stock", IN_STOCK_MESSAGE)
    return value


def _normalize_text(value: str, field_name: str) -> str:
    value = value.strip()
    if field_name == "category":
        value = value.lower()
    return value


class Product(BaseModel):
    """A catalog item as stored and returned by the API."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: str
    price: Number
    category: str
    in_stock: bool = Field(True, alias="inStock")


class ProductCreate(BaseModel):
    """Schema for creating a new product."""

    name: str = Field(..., description="Product name", examples=["Desk"])
    description: str = Field(..., description="Free-text description", examples=["Wood desk"])
    price: Number = Field(..., description="Price, zero or greater", examples=[150])
    category: str = Field(..., description="Category, stored lower-case", examples=["furniture"])
    in_stock: bool = Field(True, alias="inStock", description="Defaults to true")

    @field_validator("name", "description", "category", mode="before")
    @classmethod
    def validate_text(cls, value: Any, info: ValidationInfo) -> str:
        if _is_blank(value):
            raise PydanticCustomError("missing", "Field required")
        if not isinstance(value, str):
            raise PydanticCustomError(
                "string_type", "{field} must be a string", {"field": info.field_name}
            )
        return _normalize_text(value, info.field_name)

    @field_validator("price", mode="before")
    @classmethod
    def validate_price(cls, value: Any) -> Number:
        return _check_price(value)

    @field_validator("in_stock", mode="before")
    @classmethod
    def validate_in_stock(cls, value: Any) -> bool:
        return _check_in_stock(value)


class ProductUpdate(BaseModel):
    """Schema for updating an existing product.

    All fields are optional.  Empty text values are treated as not
    supplied and leave the stored value unchanged; ``price`` and
    ``inStock`` are validated whenever the key is present, even when
    its value is ``null``.  Unknown keys, including ``id``, are ignored.
    """

    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Number] = None
    category: Optional[str] = None
    in_stock: Optional[bool] = Field(None, alias="inStock")

    @field_validator("name", "description", "category", mode="before")
    @classmethod
    def validate_text(cls, value: Any, info: ValidationInfo) -> Optional[str]:
        if _is_blank(value):
            return None
        if not isinstance(value, str):
            raise PydanticCustomError(
                "string_type", "{field} must be a string", {"field": info.field_name}
            )
        return _normalize_text(value, info.field_name)

    @field_validator("price", mode="before")
    @classmethod
    def validate_price(cls, value: Any) -> Number:
        return _check_price(value)

    @field_validator("in_stock", mode="before")
    @classmethod
    def validate_in_stock(cls, value: Any) -> bool:
        return _check_in_stock(value)


class ProductMessage(BaseModel):
    """Envelope returned by create, update and delete."""

    message: str
    product: Product


class ErrorResponse(BaseModel):
    error: str
    message: str

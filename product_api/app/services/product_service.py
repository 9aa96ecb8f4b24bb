"""
Service layer for products.

This module provides the CRUD operations behind the ``/api/products``
routes.  Payloads arrive as decoded JSON and are validated here with
the schemas from ``schemas.product``; pydantic's validation errors are
translated into a single ``ValidationError`` whose message names every
violated rule.  Missing records raise ``NotFoundError``.  The service
never builds HTTP responses itself.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, List, Type, TypeVar

from fastapi import Depends
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from product_api.app.core.errors import NotFoundError, ValidationError
from product_api.app.core.store import ProductStore, get_store
from product_api.app.schemas.product import (
    MISSING_FIELDS_MESSAGE,
    Product,
    ProductCreate,
    ProductUpdate,
)

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def _to_validation_error(exc: PydanticValidationError) -> ValidationError:
    """Collapse pydantic errors into one message listing every problem.

    Missing required fields are reported first with a single combined
    message; the remaining messages follow in field order.
    """
    fields: List[str] = []
    messages: List[str] = []
    missing = False
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "body"
        if field not in fields:
            fields.append(field)
        if error["type"] == "missing":
            missing = True
        elif error["msg"] not in messages:
            messages.append(error["msg"])
    if missing:
        messages.insert(0, MISSING_FIELDS_MESSAGE)
    return ValidationError("; ".join(messages), fields=fields)


def _validate(schema: Type[SchemaT], payload: Any) -> SchemaT:
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object", fields=["body"])
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as exc:
        raise _to_validation_error(exc) from None


class ProductService:
    """CRUD operations over a ``ProductStore``."""

    def __init__(self, store: ProductStore) -> None:
        self.store = store

    def list_products(self) -> List[Product]:
        return self.store.all()

    def get_product(self, product_id: str) -> Product:
        product = self.store.find(product_id)
        if product is None:
            raise NotFoundError.for_product(product_id)
        return product

    def create_product(self, payload: Any) -> Product:
        """Validate ``payload`` and append a new product.

        The id is a fresh UUID4 string; client supplied ids are ignored.
        """
        data = _validate(ProductCreate, payload)
        product = Product(id=str(uuid.uuid4()), **data.model_dump())
        self.store.append(product)
        logger.info("Created product %s", product.id)
        return product

    def update_product(self, product_id: str, payload: Any) -> Product:
        """Apply the supplied fields of ``payload`` to an existing product.

        The lookup happens before validation, so an unknown id is
        reported as not found even when the payload is invalid.  The
        record keeps its position in the collection.
        """
        index = self.store.index_of(product_id)
        if index == -1:
            raise NotFoundError.for_product(product_id)
        data = _validate(ProductUpdate, payload)
        changes = data.model_dump(exclude_none=True)
        updated = self.store.find(product_id).model_copy(update=changes)
        self.store.replace(index, updated)
        logger.info("Updated product %s (%s)", product_id, ", ".join(sorted(changes)) or "no changes")
        return updated

    def delete_product(self, product_id: str) -> Product:
        index = self.store.index_of(product_id)
        if index == -1:
            raise NotFoundError.for_product(product_id)
        deleted = self.store.pop(index)
        logger.info("Deleted product %s", product_id)
        return deleted


def get_product_service(store: ProductStore = Depends(get_store)) -> ProductService:
    """FastAPI dependency building a service around the application store."""
    return ProductService(store)

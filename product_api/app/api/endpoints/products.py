"""
Product endpoints.

These routes expose a CRUD API over the product collection.  Listing
and retrieving products is public.  Creating, updating and deleting
require a bearer ``Authorization`` header; the check runs as a
dependency before the request body is read, so unauthenticated
requests are rejected with 401 whatever their payload.
"""

import json
from typing import Any, List

from fastapi import APIRouter, Depends, Request, status

from product_api.app.core.errors import ValidationError
from product_api.app.core.security import require_bearer
from product_api.app.schemas.product import ErrorResponse, Product, ProductMessage
from product_api.app.services.product_service import ProductService, get_product_service

router = APIRouter()

# Request bodies are read manually (see ``_read_json``), so the OpenAPI
# document would otherwise not describe them.
_PRODUCT_BODY = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": {"type": "object"}}},
    }
}

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
_AUTH_ERRORS = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse},
}


async def _read_json(request: Request) -> Any:
    """Decode the request body.  An empty body is treated as ``{}``."""
    body = await request.body()
    if not body.strip():
        return {}
    try:
        return json.loads(body)
    except ValueError:
        raise ValidationError("Request body must be valid JSON", fields=["body"]) from None


@router.get("", response_model=List[Product])
async def list_products(service: ProductService = Depends(get_product_service)) -> List[Product]:
    """Return every product in insertion order."""
    return service.list_products()


@router.get("/{product_id}", response_model=Product, responses=_NOT_FOUND)
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Retrieve a single product by ID.  Returns 404 if it does not exist."""
    return service.get_product(product_id)


@router.post(
    "",
    response_model=ProductMessage,
    status_code=status.HTTP_201_CREATED,
    responses=_AUTH_ERRORS,
    openapi_extra=_PRODUCT_BODY,
)
async def create_product(
    request: Request,
    _token: str = Depends(require_bearer),
    service: ProductService = Depends(get_product_service),
) -> ProductMessage:
    """Create a new product (bearer token required)."""
    payload = await _read_json(request)
    product = service.create_product(payload)
    return ProductMessage(message="Product created successfully", product=product)


@router.put(
    "/{product_id}",
    response_model=ProductMessage,
    responses={**_AUTH_ERRORS, **_NOT_FOUND},
    openapi_extra=_PRODUCT_BODY,
)
async def update_product(
    product_id: str,
    request: Request,
    _token: str = Depends(require_bearer),
    service: ProductService = Depends(get_product_service),
) -> ProductMessage:
    """Update some or all fields of an existing product (bearer token required)."""
    payload = await _read_json(request)
    product = service.update_product(product_id, payload)
    return ProductMessage(message="Product updated successfully", product=product)


@router.delete(
    "/{product_id}",
    response_model=ProductMessage,
    responses={status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse}, **_NOT_FOUND},
)
async def delete_product(
    product_id: str,
    _token: str = Depends(require_bearer),
    service: ProductService = Depends(get_product_service),
) -> ProductMessage:
    """Delete a product and return its last state (bearer token required)."""
    product = service.delete_product(product_id)
    return ProductMessage(message="Product deleted successfully", product=product)

"""
Top-level router for the ``/api`` prefix.

Aggregates the domain routers.  When new resources are added, include
their routers here.
"""

from fastapi import APIRouter

from .endpoints import products

router = APIRouter()

router.include_router(products.router, prefix="/products", tags=["products"])

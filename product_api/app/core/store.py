"""
In-memory product storage.

``ProductStore`` owns the ordered collection of products for one
application instance.  It is created by ``create_app`` and attached to
``app.state.store``; endpoints obtain it through the ``get_store``
dependency.  Nothing is persisted: a new store (and therefore a process
restart) starts from the three seed products.
"""

from typing import Iterable, List, Optional

from fastapi import Request

from ..schemas.product import Product

SEED_PRODUCTS = (
    {
        "id": "1",
        "name": "Laptop",
        "description": "High-performance laptop with 16GB RAM",
        "price": 1200,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "2",
        "name": "Smartphone",
        "description": "Latest model with 128GB storage",
        "price": 800,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "3",
        "name": "Coffee Maker",
        "description": "Programmable coffee maker with timer",
        "price": 50,
        "category": "kitchen",
        "inStock": False,
    },
)


def seed_products() -> List[Product]:
    return [Product.model_validate(record) for record in SEED_PRODUCTS]


class ProductStore:
    """Ordered collection of products.

    Lookups are linear scans comparing ``id`` by exact string equality;
    the first match wins.  Records are replaced rather than mutated, so
    a ``Product`` handed out by the store never changes under the
    caller.
    """

    def __init__(self, seed: Optional[Iterable[Product]] = None) -> None:
        self._seed = list(seed) if seed is not None else seed_products()
        self._products: List[Product] = list(self._seed)

    def __len__(self) -> int:
        return len(self._products)

    def all(self) -> List[Product]:
        return list(self._products)

    def index_of(self, product_id: str) -> int:
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        return -1

    def find(self, product_id: str) -> Optional[Product]:
        index = self.index_of(product_id)
        if index == -1:
            return None
        return self._products[index]

    def append(self, product: Product) -> None:
        self._products.append(product)

    def replace(self, index: int, product: Product) -> None:
        self._products[index] = product

    def pop(self, index: int) -> Product:
        return self._products.pop(index)

    def reset(self) -> None:
        """Restore the collection to the records it was created with."""
        self._products = list(self._seed)


def get_store(request: Request) -> ProductStore:
    """FastAPI dependency returning the store of the running application."""
    return request.app.state.store

import pytest
from fastapi.testclient import TestClient

from product_api.app.core.store import ProductStore
from product_api.app.main import create_app


@pytest.fixture
def store():
    return ProductStore()


@pytest.fixture
def client(store):
    return TestClient(create_app(store))

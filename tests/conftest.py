"""
Shared fixtures for the products test suite.

Unit and API tests run against an in-memory ProductRepository so no
database is needed. The integration suite brings its own MongoDB fixtures.
"""

from datetime import datetime, timezone
from typing import Any, Optional

import pytest
from bson import ObjectId
from dotenv import load_dotenv
from fastapi.testclient import TestClient

from products_api.core.config import Settings
from products_api.domain.products.entities import NewProduct, Product
from products_api.domain.products.errors import InvalidProductIdError
from products_api.domain.products.ports import ProductRepository
from products_api.interfaces.products.dependencies import get_product_repository
from products_api.main import create_app

load_dotenv()

VALID_PRODUCT = {
    "name": "iPhone",
    "description": "Good phone",
    "price": 10000,
}


class InMemoryProductRepository(ProductRepository):
    """ProductRepository kept in a dict, with Mongo-style ids."""

    def __init__(self) -> None:
        self._products: dict[str, Product] = {}

    def _check_id(self, product_id: str) -> None:
        if not ObjectId.is_valid(product_id):
            raise InvalidProductIdError(product_id)

    def create(self, draft: NewProduct) -> Product:
        now = datetime.now(timezone.utc)
        product = Product(
            id=str(ObjectId()),
            name=draft.name,
            price=draft.price,
            description=draft.description,
            created_at=now,
            updated_at=now,
        )
        self._products[product.id] = product
        return product

    def find_all(self) -> list[Product]:
        return list(self._products.values())

    def find_by_id(self, product_id: str) -> Optional[Product]:
        self._check_id(product_id)
        return self._products.get(product_id)

    def update_by_id(
        self, product_id: str, changes: dict[str, Any]
    ) -> Optional[Product]:
        self._check_id(product_id)
        current = self._products.get(product_id)
        if current is None:
            return None
        fields = {
            "id": current.id,
            "name": current.name,
            "price": current.price,
            "description": current.description,
            "created_at": current.created_at,
        }
        fields.update(changes)
        fields["updated_at"] = datetime.now(timezone.utc)
        self._products[product_id] = Product(**fields)
        return self._products[product_id]

    def delete_by_id(self, product_id: str) -> bool:
        self._check_id(product_id)
        return self._products.pop(product_id, None) is not None

    def delete_all(self) -> int:
        count = len(self._products)
        self._products.clear()
        return count


@pytest.fixture
def test_settings() -> Settings:
    """Settings for in-process apps: no rate limiting, no database URL."""
    return Settings(rate_limit_enabled=False, mongo_url=None, log_level="WARNING")


@pytest.fixture
def repository() -> InMemoryProductRepository:
    return InMemoryProductRepository()


@pytest.fixture
def seeded_product(repository: InMemoryProductRepository) -> Product:
    """One valid product stored before the test runs."""
    return repository.create(NewProduct(**VALID_PRODUCT))


@pytest.fixture
def app(test_settings: Settings, repository: InMemoryProductRepository):
    application = create_app(test_settings)
    application.dependency_overrides[get_product_repository] = lambda: repository
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    """HTTP client that returns 500 responses instead of raising."""
    return TestClient(app, raise_server_exceptions=False)

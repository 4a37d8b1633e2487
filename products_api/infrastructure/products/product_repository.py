"""
Adapter: Product repository.

Implements ProductRepository port.
Stores products as documents in a MongoDB collection.
"""

import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Iterator, Optional

from bson import ObjectId
from pymongo import ASCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import ConnectionFailure

from products_api.domain.products.entities import NewProduct, Product
from products_api.domain.products.errors import (
    InvalidProductIdError,
    StorageUnavailableError,
)
from products_api.domain.products.ports import ProductRepository

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _to_object_id(product_id: str) -> ObjectId:
    if not ObjectId.is_valid(product_id):
        raise InvalidProductIdError(product_id)
    return ObjectId(product_id)


def _to_entity(document: dict[str, Any]) -> Product:
    return Product(
        id=str(document["_id"]),
        name=document["name"],
        price=document["price"],
        description=document.get("description"),
        created_at=document.get("createdAt"),
        updated_at=document.get("updatedAt"),
    )


@contextmanager
def _storage_errors() -> Iterator[None]:
    """Translate driver connection failures into a domain error."""
    try:
        yield
    except ConnectionFailure as exc:
        logger.error("MongoDB unreachable: %s", exc)
        raise StorageUnavailableError(type(exc).__name__) from exc


class MongoProductRepository(ProductRepository):
    """Concrete adapter for product persistence.

    Implements the ProductRepository port defined in the domain layer.
    Documents use the ObjectId in ``_id`` and camelCase timestamps.
    """

    def __init__(self, collection: Collection) -> None:
        self._collection = collection

    def ensure_indexes(self) -> None:
        """Create the secondary indexes used by the service."""
        with _storage_errors():
            self._collection.create_index([("name", ASCENDING)], name="name_idx")

    def create(self, draft: NewProduct) -> Product:
        now = _now()
        document = {
            "name": draft.name,
            "description": draft.description,
            "price": draft.price,
            "createdAt": now,
            "updatedAt": now,
        }
        with _storage_errors():
            result = self._collection.insert_one(document)
        document["_id"] = result.inserted_id
        return _to_entity(document)

    def find_all(self) -> list[Product]:
        with _storage_errors():
            documents = list(self._collection.find().sort("_id", ASCENDING))
        return [_to_entity(doc) for doc in documents]

    def find_by_id(self, product_id: str) -> Optional[Product]:
        oid = _to_object_id(product_id)
        with _storage_errors():
            document = self._collection.find_one({"_id": oid})
        return _to_entity(document) if document else None

    def update_by_id(
        self, product_id: str, changes: dict[str, Any]
    ) -> Optional[Product]:
        oid = _to_object_id(product_id)
        with _storage_errors():
            document = self._collection.find_one_and_update(
                {"_id": oid},
                {"$set": {**changes, "updatedAt": _now()}},
                return_document=ReturnDocument.AFTER,
            )
        return _to_entity(document) if document else None

    def delete_by_id(self, product_id: str) -> bool:
        oid = _to_object_id(product_id)
        with _storage_errors():
            result = self._collection.delete_one({"_id": oid})
        return result.deleted_count == 1

    def delete_all(self) -> int:
        with _storage_errors():
            result = self._collection.delete_many({})
        logger.info("Deleted %d products", result.deleted_count)
        return result.deleted_count

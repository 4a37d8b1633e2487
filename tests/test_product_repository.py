"""
Tests for the MongoDB adapters.

The pymongo client and collection are mocked; these tests check the
queries the adapter issues and how it maps documents and failures.
"""

from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

import pytest
from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.errors import OperationFailure, ServerSelectionTimeoutError

from products_api.domain.products.entities import NewProduct
from products_api.domain.products.errors import (
    InvalidProductIdError,
    StorageUnavailableError,
)
from products_api.infrastructure.products.mongo_connection import MongoConnection
from products_api.infrastructure.products.product_repository import (
    MongoProductRepository,
)

OID = ObjectId("65f0c0ffee0000000000beef")
STAMP = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _document(**overrides) -> dict:
    document = {
        "_id": OID,
        "name": "iPhone",
        "description": "Good phone",
        "price": 10000,
        "createdAt": STAMP,
        "updatedAt": STAMP,
    }
    document.update(overrides)
    return document


@pytest.fixture
def collection() -> MagicMock:
    return MagicMock()


@pytest.fixture
def mongo_repo(collection) -> MongoProductRepository:
    return MongoProductRepository(collection)


class TestMongoProductRepository:
    """Tests for MongoProductRepository."""

    def test_create_inserts_document_with_timestamps(self, mongo_repo, collection) -> None:
        collection.insert_one.return_value.inserted_id = OID

        product = mongo_repo.create(NewProduct(name="iPhone", price=10000))

        inserted = collection.insert_one.call_args.args[0]
        assert inserted["name"] == "iPhone"
        assert inserted["price"] == 10000
        assert inserted["createdAt"] == inserted["updatedAt"]
        assert product.id == str(OID)

    def test_find_all_sorts_by_id(self, mongo_repo, collection) -> None:
        collection.find.return_value.sort.return_value = [_document()]

        products = mongo_repo.find_all()

        collection.find.return_value.sort.assert_called_once_with("_id", 1)
        assert [p.id for p in products] == [str(OID)]

    def test_find_by_id_maps_document(self, mongo_repo, collection) -> None:
        collection.find_one.return_value = _document()

        product = mongo_repo.find_by_id(str(OID))

        collection.find_one.assert_called_once_with({"_id": OID})
        assert product.name == "iPhone"
        assert product.created_at == STAMP

    def test_find_by_id_missing_returns_none(self, mongo_repo, collection) -> None:
        collection.find_one.return_value = None

        assert mongo_repo.find_by_id(str(OID)) is None

    @pytest.mark.parametrize("bad_id", ["abc", "123", "zzzzzzzzzzzzzzzzzzzzzzzz"])
    def test_malformed_id_raises_before_query(self, mongo_repo, collection, bad_id) -> None:
        with pytest.raises(InvalidProductIdError):
            mongo_repo.find_by_id(bad_id)
        with pytest.raises(InvalidProductIdError):
            mongo_repo.update_by_id(bad_id, {"name": "laptop"})
        with pytest.raises(InvalidProductIdError):
            mongo_repo.delete_by_id(bad_id)

        collection.find_one.assert_not_called()
        collection.find_one_and_update.assert_not_called()
        collection.delete_one.assert_not_called()

    def test_update_sets_changes_and_returns_new_document(self, mongo_repo, collection) -> None:
        collection.find_one_and_update.return_value = _document(name="laptop")

        product = mongo_repo.update_by_id(str(OID), {"name": "laptop"})

        args, kwargs = collection.find_one_and_update.call_args
        assert args[0] == {"_id": OID}
        assert args[1]["$set"]["name"] == "laptop"
        assert "updatedAt" in args[1]["$set"]
        assert kwargs["return_document"] is ReturnDocument.AFTER
        assert product.name == "laptop"

    def test_update_missing_returns_none(self, mongo_repo, collection) -> None:
        collection.find_one_and_update.return_value = None

        assert mongo_repo.update_by_id(str(OID), {"name": "laptop"}) is None

    def test_delete_reports_match(self, mongo_repo, collection) -> None:
        collection.delete_one.return_value.deleted_count = 1
        assert mongo_repo.delete_by_id(str(OID)) is True

        collection.delete_one.return_value.deleted_count = 0
        assert mongo_repo.delete_by_id(str(OID)) is False

    def test_delete_all(self, mongo_repo, collection) -> None:
        collection.delete_many.return_value.deleted_count = 3

        assert mongo_repo.delete_all() == 3
        collection.delete_many.assert_called_once_with({})

    def test_connection_failure_becomes_storage_unavailable(self, mongo_repo, collection) -> None:
        collection.find_one.side_effect = ServerSelectionTimeoutError("no servers")

        with pytest.raises(StorageUnavailableError):
            mongo_repo.find_by_id(str(OID))

    def test_other_driver_errors_propagate(self, mongo_repo, collection) -> None:
        collection.insert_one.side_effect = OperationFailure("not authorized")

        with pytest.raises(OperationFailure):
            mongo_repo.create(NewProduct(name="iPhone", price=1))

    def test_ensure_indexes(self, mongo_repo, collection) -> None:
        mongo_repo.ensure_indexes()

        collection.create_index.assert_called_once_with([("name", 1)], name="name_idx")


class TestMongoConnection:
    """Tests for the scoped MongoDB connection handle."""

    @pytest.fixture
    def client_cls(self):
        with patch(
            "products_api.infrastructure.products.mongo_connection.MongoClient"
        ) as client_cls:
            yield client_cls

    def test_context_manager_opens_and_closes(self, client_cls) -> None:
        with MongoConnection("mongodb://db:27017", "products", timeout_ms=100) as conn:
            assert conn.is_open
            conn.collection("products")

        client_cls.assert_called_once_with(
            "mongodb://db:27017", serverSelectionTimeoutMS=100, tz_aware=True
        )
        client_cls.return_value.close.assert_called_once()
        assert not conn.is_open

    def test_closes_when_body_raises(self, client_cls) -> None:
        with pytest.raises(ValueError):
            with MongoConnection("mongodb://db:27017", "products"):
                raise ValueError("test body failed")

        client_cls.return_value.close.assert_called_once()

    def test_close_is_idempotent(self, client_cls) -> None:
        conn = MongoConnection("mongodb://db:27017", "products").connect()
        conn.close()
        conn.close()

        client_cls.return_value.close.assert_called_once()

    def test_collection_requires_open_connection(self) -> None:
        with pytest.raises(RuntimeError):
            MongoConnection("mongodb://db:27017", "products").collection("products")

    def test_ping(self, client_cls) -> None:
        conn = MongoConnection("mongodb://db:27017", "products")
        assert conn.ping() is False

        conn.connect()
        assert conn.ping() is True

        database = client_cls.return_value.__getitem__.return_value
        database.command.side_effect = ServerSelectionTimeoutError("down")
        assert conn.ping() is False

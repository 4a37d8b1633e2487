"""
MongoDB connection handle.

Wraps a pymongo MongoClient with explicit open/close so the owner
(app lifespan or a test fixture) decides when the connection lives.
Supports the context manager pattern for guaranteed cleanup.
"""

import logging
from typing import Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


class MongoConnection:
    """Owns one MongoClient and the database it points to."""

    def __init__(
        self,
        url: str,
        database_name: str,
        timeout_ms: int = 5000,
    ) -> None:
        """Initialize the connection handle. Nothing is opened yet.

        Args:
            url: MongoDB connection string.
            database_name: Name of the database to use.
            timeout_ms: Server selection timeout in milliseconds.
        """
        self._url = url
        self._database_name = database_name
        self._timeout_ms = timeout_ms

        self._client: Optional[MongoClient] = None
        self._database: Optional[Database] = None

    @property
    def is_open(self) -> bool:
        return self._client is not None

    def connect(self) -> "MongoConnection":
        """Create the client. pymongo connects lazily on first use."""
        if self._client is None:
            self._client = MongoClient(
                self._url,
                serverSelectionTimeoutMS=self._timeout_ms,
                tz_aware=True,
            )
            self._database = self._client[self._database_name]
            logger.info("MongoDB client opened for database=%s", self._database_name)
        return self

    def close(self) -> None:
        """Close the client. Safe to call more than once."""
        if self._client is not None:
            self._client.close()
            self._client = None
            self._database = None
            logger.info("MongoDB client closed")

    def ping(self) -> bool:
        """Return True if the server answers a ping command."""
        if self._database is None:
            return False
        try:
            self._database.command("ping")
        except PyMongoError as exc:
            logger.warning("MongoDB ping failed: %s", exc)
            return False
        return True

    def collection(self, name: str) -> Collection:
        """Return a collection of the connected database.

        Raises:
            RuntimeError: If the connection is not open.
        """
        if self._database is None:
            raise RuntimeError("MongoDB connection not open. Call connect() first.")
        return self._database[name]

    def __enter__(self) -> "MongoConnection":
        return self.connect()

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.close()
        return False

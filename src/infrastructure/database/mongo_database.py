"""
MongoDB Database - Infrastructure Layer

This module provides a MongoDB database client for interacting with MongoDB.
It handles connection, collections, and basic CRUD operations.

pymongo is blocking, so every driver call made from a coroutine runs in a
worker thread.
"""

import asyncio
from typing import Any, Callable, Dict, List, Optional

import pymongo.errors
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from src.shared import get_logger
from src.shared.consts import DEVICES_COLLECTION, VERIFICATION_EVENTS_COLLECTION

logger = get_logger(__name__)


class DocumentNotFoundError(Exception):
    """Raised when a write targets a document that does not exist."""


class MongoDatabase:
    """MongoDB database client."""

    def __init__(
        self,
        mongo_uri: str,
        db_name: str,
        server_selection_timeout_ms: int = 5000,
    ):
        """
        Initialize the MongoDB database client.

        The client connects lazily, so constructing it never blocks.

        Args:
            mongo_uri: MongoDB connection URI
            db_name: Name of the database to use
            server_selection_timeout_ms: How long an operation waits for a
                reachable server before failing
        """
        self.client: MongoClient = MongoClient(
            mongo_uri,
            serverSelectionTimeoutMS=server_selection_timeout_ms,
            tz_aware=True,
        )
        self.db: Database = self.client[db_name]

    def get_collection(self, collection_name: str) -> Collection:
        return self.db[collection_name]

    async def ping(self) -> None:
        """Round-trip to the server; raises a pymongo error when unreachable."""
        await asyncio.to_thread(self.client.admin.command, "ping")

    async def find_one(
        self, collection_name: str, query: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """
        Find a single document in a collection.

        Args:
            collection_name: Name of the collection
            query: Query to match documents

        Returns:
            The document if found, None otherwise
        """
        return await asyncio.to_thread(self.db[collection_name].find_one, query)

    async def find_many(
        self,
        collection_name: str,
        query: Dict[str, Any],
        sort_by: Optional[str] = None,
        sort_direction: int = 1,
        skip: int = 0,
        limit: int = 100,
    ) -> List[Dict[str, Any]]:
        """
        Find multiple documents in a collection.

        Args:
            collection_name: Name of the collection
            query: Query to match documents
            sort_by: Field to sort by
            sort_direction: Sort direction (1 for ascending, -1 for descending)
            skip: Number of documents to skip
            limit: Maximum number of documents to return

        Returns:
            List of documents
        """

        def _run() -> List[Dict[str, Any]]:
            cursor = self.db[collection_name].find(query)
            if sort_by:
                cursor = cursor.sort(sort_by, sort_direction)
            return list(cursor.skip(skip).limit(limit))

        return await asyncio.to_thread(_run)

    async def count_documents(
        self, collection_name: str, query: Optional[Dict[str, Any]] = None
    ) -> int:
        """Count matching documents; without a query the collection estimate is used."""
        collection = self.db[collection_name]
        if query:
            return await asyncio.to_thread(collection.count_documents, query)
        return await asyncio.to_thread(collection.estimated_document_count)

    async def insert_one(
        self, collection_name: str, document: Dict[str, Any]
    ) -> Dict[str, Any]:
        """
        Insert a document into a collection.

        Raises:
            pymongo.errors.DuplicateKeyError: If a unique index is violated
            Exception: If the insert is not acknowledged
        """
        result = await asyncio.to_thread(
            self.db[collection_name].insert_one, document
        )
        if not result.acknowledged:
            raise Exception(f"Failed to insert document in {collection_name}")
        return document

    async def replace_one(
        self, collection_name: str, query: Dict[str, Any], document: Dict[str, Any]
    ) -> Dict[str, Any]:
        """
        Replace a document in a collection.

        Raises:
            DocumentNotFoundError: If no document matches the query
            Exception: If the replace is not acknowledged
        """
        result = await asyncio.to_thread(
            self.db[collection_name].replace_one, query, document
        )
        if result.matched_count == 0:
            raise DocumentNotFoundError(f"Document not found in {collection_name}")
        if not result.acknowledged:
            raise Exception(f"Failed to replace document in {collection_name}")
        return document

    async def delete_one(self, collection_name: str, query: Dict[str, Any]) -> None:
        """
        Delete a document from a collection.

        Raises:
            DocumentNotFoundError: If no document matches the query
            Exception: If the delete is not acknowledged
        """
        result = await asyncio.to_thread(self.db[collection_name].delete_one, query)
        if result.deleted_count == 0:
            raise DocumentNotFoundError(f"Document not found in {collection_name}")
        if not result.acknowledged:
            raise Exception(f"Failed to delete document in {collection_name}")

    def close(self) -> None:
        """Close the database connection."""
        self.client.close()

    def _ensure_device_indexes(self) -> None:
        devices = self.db[DEVICES_COLLECTION]
        try:
            devices.drop_index("blocked_idx")
        except pymongo.errors.OperationFailure:
            # Index doesn't exist, nothing to do
            pass
        devices.create_index("mac_id", name="mac_id_unique_idx", unique=True)
        devices.create_index("blocked", name="blocked_idx")

    def _ensure_event_indexes(self) -> None:
        events = self.db[VERIFICATION_EVENTS_COLLECTION]
        events.create_index("checked_at", name="checked_at_idx")
        events.create_index(
            [("mac_id", 1), ("checked_at", -1)],
            name="mac_id_checked_at_idx",
            background=True,
        )

    async def create_indexes(self) -> None:
        """
        Create the indexes the repositories rely on.

        ``mac_id`` is unique on the devices collection; lookups by MAC id
        are the hot path of verification. Failures are logged and never
        raised: the service starts without a reachable server and reports
        the outage per request and on ``/health``.
        """
        steps: Dict[str, Callable[[], None]] = {
            DEVICES_COLLECTION: self._ensure_device_indexes,
            VERIFICATION_EVENTS_COLLECTION: self._ensure_event_indexes,
        }

        for collection_name, step in steps.items():
            try:
                await asyncio.to_thread(step)
            except pymongo.errors.ConnectionFailure as e:
                logger.warning("mongo.indexes.unreachable", error=str(e))
                return
            except pymongo.errors.PyMongoError as e:
                logger.warning(
                    "mongo.indexes.create_failed",
                    collection=collection_name,
                    error=str(e),
                )

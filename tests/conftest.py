from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Dict, Iterator, List, Sequence

import pytest

from src.domain.entities.device import Device
from src.infrastructure.database.mongo_database import DocumentNotFoundError

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture()
def sample_device() -> Device:
    return Device(mac_id="AA:BB", blocked=False, name="Lobby sensor")


@pytest.fixture()
def blocked_device() -> Device:
    return Device(mac_id="AA:BB", blocked=True, name="Lobby sensor")


class FakeCursor:
    def __init__(self, documents: Sequence[Dict[str, Any]]):
        self._documents = list(documents)
        self._skip = 0
        self._limit: int | None = None
        self.sorted_by: tuple[Any, ...] | None = None

    def sort(self, *args: Any, **kwargs: Any) -> "FakeCursor":
        self.sorted_by = args
        return self

    def skip(self, amount: int) -> "FakeCursor":
        self._skip = amount
        return self

    def limit(self, amount: int) -> "FakeCursor":
        self._limit = amount
        return self

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        docs = self._documents[self._skip :]
        if self._limit is not None:
            docs = docs[: self._limit]
        return iter(docs)


class FakeCollection:
    def __init__(self) -> None:
        self.documents: List[Dict[str, Any]] = []
        self.inserts: List[Dict[str, Any]] = []
        self.queries: List[Dict[str, Any]] = []
        self.dropped_indexes: List[str] = []
        self.created_indexes: List[tuple[Any, ...]] = []

    @property
    def last_query(self) -> Dict[str, Any] | None:
        return self.queries[-1] if self.queries else None

    def find_one(self, query: Dict[str, Any]) -> Dict[str, Any] | None:
        self.queries.append(query)
        for document in self.documents:
            if self._matches(document, query):
                return document
        return None

    def find(self, query: Dict[str, Any]) -> FakeCursor:
        self.queries.append(query)
        return FakeCursor([doc for doc in self.documents if self._matches(doc, query)])

    def insert_one(self, document: Dict[str, Any]) -> Any:
        self.inserts.append(document)
        self.documents.append(document)
        return SimpleNamespace(acknowledged=True, inserted_id=len(self.documents))

    def replace_one(self, query: Dict[str, Any], document: Dict[str, Any]) -> Any:
        for index, existing in enumerate(self.documents):
            if self._matches(existing, query):
                self.documents[index] = document
                return SimpleNamespace(matched_count=1, acknowledged=True)
        return SimpleNamespace(matched_count=0, acknowledged=False)

    def delete_one(self, query: Dict[str, Any]) -> Any:
        for index, existing in enumerate(self.documents):
            if self._matches(existing, query):
                del self.documents[index]
                return SimpleNamespace(deleted_count=1, acknowledged=True)
        return SimpleNamespace(deleted_count=0, acknowledged=False)

    def count_documents(self, query: Dict[str, Any]) -> int:
        return sum(1 for doc in self.documents if self._matches(doc, query))

    def estimated_document_count(self) -> int:
        return len(self.documents)

    def drop_index(self, index_name: str) -> None:
        self.dropped_indexes.append(index_name)

    def create_index(self, keys: Any, name: str | None = None, **kwargs: Any) -> Any:
        self.created_indexes.append((keys, name, kwargs))
        return name or keys

    @staticmethod
    def _matches(document: Dict[str, Any], query: Dict[str, Any]) -> bool:
        for key, value in query.items():
            if document.get(key) != value:
                return False
        return True


class FakeMongoDatabase:
    """In-memory stand-in mirroring MongoDatabase's async surface."""

    def __init__(self) -> None:
        self.collections: Dict[str, FakeCollection] = {}
        self.closed = False

    def get_collection(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())

    async def ping(self) -> None:
        pass

    async def find_one(self, collection_name: str, query: Dict[str, Any]) -> Any:
        return self.get_collection(collection_name).find_one(query)

    async def find_many(
        self,
        collection_name: str,
        query: Dict[str, Any],
        sort_by: str | None = None,
        sort_direction: int = 1,
        skip: int = 0,
        limit: int = 100,
    ) -> List[Dict[str, Any]]:
        cursor = self.get_collection(collection_name).find(query)
        cursor.sort(sort_by, sort_direction)
        cursor.skip(skip)
        cursor.limit(limit)
        return list(cursor)

    async def count_documents(
        self, collection_name: str, query: Dict[str, Any] | None = None
    ) -> int:
        return self.get_collection(collection_name).count_documents(query or {})

    async def insert_one(self, collection_name: str, document: Dict[str, Any]) -> Any:
        self.get_collection(collection_name).insert_one(document)
        return document

    async def replace_one(
        self, collection_name: str, query: Dict[str, Any], document: Dict[str, Any]
    ) -> Any:
        result = self.get_collection(collection_name).replace_one(query, document)
        if result.matched_count == 0:
            raise DocumentNotFoundError(f"Document not found in {collection_name}")
        return document

    async def delete_one(self, collection_name: str, query: Dict[str, Any]) -> Any:
        result = self.get_collection(collection_name).delete_one(query)
        if result.deleted_count == 0:
            raise DocumentNotFoundError(f"Document not found in {collection_name}")
        return None

    async def create_indexes(self) -> None:
        pass

    def close(self) -> None:
        self.closed = True


@pytest.fixture()
def fake_mongo_database() -> FakeMongoDatabase:
    return FakeMongoDatabase()


@pytest.fixture()
def dummy_now() -> datetime:
    return datetime.now(timezone.utc)

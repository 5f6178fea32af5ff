from __future__ import annotations

import threading
from typing import Any, Dict, Iterable, List, Optional, cast

import pymongo.errors
import pytest

from src.infrastructure.database.mongo_database import (
    DocumentNotFoundError,
    MongoDatabase,
)
from tests.conftest import FakeCollection


class _StubMongoClient:
    def __init__(self, uri: str, **kwargs: Any) -> None:
        self.uri = uri
        self.kwargs = kwargs
        self.databases: Dict[str, _StubDatabase] = {}
        self.closed = False
        self.admin = _StubAdmin()

    def __getitem__(self, name: str) -> "_StubDatabase":
        return self.databases.setdefault(name, _StubDatabase())

    def close(self) -> None:
        self.closed = True


class _StubAdmin:
    def __init__(self) -> None:
        self.commands: List[str] = []
        self.error: Optional[Exception] = None

    def command(self, name: str) -> Dict[str, Any]:
        self.commands.append(name)
        if self.error is not None:
            raise self.error
        return {"ok": 1.0}


class _StubDatabase:
    def __init__(self) -> None:
        self.collections: Dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())

    def list_collection_names(self) -> Iterable[str]:  # pragma: no cover
        return self.collections.keys()

    @property
    def name(self) -> str:
        return "test_db"


@pytest.fixture(autouse=True)
def patch_mongo_client(monkeypatch) -> None:
    monkeypatch.setattr(
        "src.infrastructure.database.mongo_database.MongoClient",
        _StubMongoClient,
    )


def test_client_is_timezone_aware_with_selection_timeout() -> None:
    database = MongoDatabase(
        "mongodb://localhost:27017", "device_gate", server_selection_timeout_ms=250
    )
    client = cast(_StubMongoClient, database.client)

    assert client.kwargs == {"serverSelectionTimeoutMS": 250, "tz_aware": True}


@pytest.mark.asyncio
async def test_insert_and_find_document() -> None:
    database = MongoDatabase("mongodb://localhost:27017", "device_gate")

    document = {"mac_id": "AA:BB", "blocked": False}
    await database.insert_one("devices", document)

    result = await database.find_one("devices", {"mac_id": "AA:BB"})
    assert result == document


@pytest.mark.asyncio
async def test_replace_document_success() -> None:
    database = MongoDatabase("mongodb://localhost:27017", "device_gate")
    await database.insert_one("devices", {"mac_id": "AA:BB", "blocked": False})

    new_doc = {"mac_id": "AA:BB", "blocked": True}
    replaced = await database.replace_one("devices", {"mac_id": "AA:BB"}, new_doc)
    assert replaced["blocked"] is True


@pytest.mark.asyncio
async def test_replace_missing_document_raises() -> None:
    database = MongoDatabase("mongodb://localhost:27017", "device_gate")

    with pytest.raises(DocumentNotFoundError):
        await database.replace_one("devices", {"mac_id": "AA:BB"}, {"mac_id": "AA:BB"})


@pytest.mark.asyncio
async def test_delete_document_success() -> None:
    database = MongoDatabase("mongodb://localhost:27017", "device_gate")
    await database.insert_one("devices", {"mac_id": "AA:BB"})

    await database.delete_one("devices", {"mac_id": "AA:BB"})
    assert await database.find_one("devices", {"mac_id": "AA:BB"}) is None

    with pytest.raises(DocumentNotFoundError):
        await database.delete_one("devices", {"mac_id": "AA:BB"})


@pytest.mark.asyncio
async def test_find_many_supports_filters() -> None:
    database = MongoDatabase("mongodb://localhost:27017", "device_gate")
    await database.insert_one("devices", {"mac_id": "AA:BB", "blocked": True})
    await database.insert_one("devices", {"mac_id": "CC:DD", "blocked": False})

    results = await database.find_many("devices", {"blocked": True})
    assert len(results) == 1
    assert results[0]["mac_id"] == "AA:BB"


@pytest.mark.asyncio
async def test_create_indexes_drops_and_creates() -> None:
    database = MongoDatabase("mongodb://localhost:27017", "device_gate")
    devices = cast(FakeCollection, database.db["devices"])
    events = cast(FakeCollection, database.db["verification_events"])

    await database.create_indexes()

    assert devices.dropped_indexes == ["blocked_idx"]
    created = {entry[1]: entry[2] for entry in devices.created_indexes}
    assert created["mac_id_unique_idx"] == {"unique": True}
    assert "blocked_idx" in created
    assert {entry[1] for entry in events.created_indexes} == {
        "checked_at_idx",
        "mac_id_checked_at_idx",
    }


@pytest.mark.asyncio
async def test_create_indexes_tolerates_operation_failures(monkeypatch) -> None:
    database = MongoDatabase("mongodb://localhost:27017", "device_gate")
    devices = cast(FakeCollection, database.db["devices"])

    def _fail(*args, **kwargs):
        raise pymongo.errors.OperationFailure("index conflict")

    monkeypatch.setattr(devices, "create_index", _fail)
    monkeypatch.setattr(devices, "drop_index", _fail)

    await database.create_indexes()

    events = cast(FakeCollection, database.db["verification_events"])
    assert len(events.created_indexes) == 2


@pytest.mark.asyncio
async def test_create_indexes_survives_unreachable_server(monkeypatch) -> None:
    database = MongoDatabase("mongodb://localhost:27017", "device_gate")
    devices = cast(FakeCollection, database.db["devices"])

    def _timeout(*args, **kwargs):
        raise pymongo.errors.ServerSelectionTimeoutError("no servers available")

    monkeypatch.setattr(devices, "drop_index", _timeout)

    await database.create_indexes()

    events = cast(FakeCollection, database.db["verification_events"])
    assert devices.created_indexes == []
    assert events.created_indexes == []


@pytest.mark.asyncio
async def test_ping_runs_admin_command() -> None:
    database = MongoDatabase("mongodb://localhost:27017", "device_gate")
    admin = cast(_StubMongoClient, database.client).admin

    await database.ping()
    assert admin.commands == ["ping"]

    admin.error = pymongo.errors.ServerSelectionTimeoutError("no servers available")
    with pytest.raises(pymongo.errors.ServerSelectionTimeoutError):
        await database.ping()


@pytest.mark.asyncio
async def test_count_documents_with_and_without_filter() -> None:
    database = MongoDatabase("mongodb://localhost:27017", "device_gate")
    await database.insert_one("devices", {"mac_id": "AA:BB", "blocked": True})
    await database.insert_one("devices", {"mac_id": "CC:DD", "blocked": False})

    assert await database.count_documents("devices") == 2
    assert await database.count_documents("devices", {"blocked": True}) == 1


@pytest.mark.asyncio
async def test_driver_calls_run_off_the_event_loop_thread(monkeypatch) -> None:
    database = MongoDatabase("mongodb://localhost:27017", "device_gate")
    devices = cast(FakeCollection, database.db["devices"])
    threads: List[int] = []
    original_find_one = devices.find_one

    def _find_one(query):
        threads.append(threading.get_ident())
        return original_find_one(query)

    monkeypatch.setattr(devices, "find_one", _find_one)

    await database.find_one("devices", {"mac_id": "AA:BB"})

    assert threads and threads[0] != threading.get_ident()


def test_close_closes_client() -> None:
    database = MongoDatabase("mongodb://localhost:27017", "device_gate")
    database.close()
    assert cast(_StubMongoClient, database.client).closed is True

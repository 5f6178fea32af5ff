from __future__ import annotations

from typing import Any, Dict, Optional, cast

import pymongo.errors
import pytest

from src.domain.entities.health import ServiceStatus
from src.infrastructure.database.mongo_database import MongoDatabase
from src.infrastructure.services.health_check_service import (
    DEVICE_STORE,
    HealthCheckService,
)
from tests.conftest import FakeMongoDatabase


class _UnreachableMongoDatabase(FakeMongoDatabase):
    async def ping(self) -> None:
        raise pymongo.errors.ServerSelectionTimeoutError("no servers available")


class _UncountableMongoDatabase(FakeMongoDatabase):
    async def count_documents(
        self, collection_name: str, query: Optional[Dict[str, Any]] = None
    ) -> int:
        raise pymongo.errors.OperationFailure("not authorized on device_gate")


def _seeded_database() -> FakeMongoDatabase:
    database = FakeMongoDatabase()
    devices = database.get_collection("devices")
    devices.insert_one({"mac_id": "AA:BB", "blocked": False})
    devices.insert_one({"mac_id": "CC:DD", "blocked": True})
    devices.insert_one({"mac_id": "EE:FF", "blocked": False})
    database.get_collection("verification_events").insert_one(
        {"mac_id": "AA:**", "ok": True, "reason": None}
    )
    return database


def _service(database: FakeMongoDatabase, audit_enabled: bool = True):
    return HealthCheckService(
        mongo_database=cast(MongoDatabase, database), audit_enabled=audit_enabled
    )


@pytest.mark.asyncio
async def test_evaluate_reports_registry_counts() -> None:
    health = await _service(_seeded_database()).evaluate()

    assert health.status is ServiceStatus.UP
    assert health.can_verify is True
    assert health.store is not None
    assert (health.store.registered, health.store.blocked) == (3, 1)
    assert health.store.allowed == 2
    assert health.store.audit_events == 1

    dependency = health.dependencies[0]
    assert dependency.name == DEVICE_STORE
    assert dependency.message == "MongoDB ping successful"
    assert dependency.latency_ms is not None


@pytest.mark.asyncio
async def test_evaluate_skips_audit_count_when_disabled() -> None:
    health = await _service(_seeded_database(), audit_enabled=False).evaluate()

    assert health.store is not None
    assert health.store.audit_events is None


@pytest.mark.asyncio
async def test_evaluate_marks_unreachable_store_down() -> None:
    health = await _service(_UnreachableMongoDatabase()).evaluate()

    assert health.status is ServiceStatus.DOWN
    assert health.can_verify is False
    assert health.store is None
    assert "no servers available" in (health.dependencies[0].message or "")


@pytest.mark.asyncio
async def test_evaluate_degrades_when_counts_fail() -> None:
    health = await _service(_UncountableMongoDatabase()).evaluate()

    assert health.status is ServiceStatus.DEGRADED
    assert health.can_verify is True
    assert health.store is None
    assert (health.dependencies[0].message or "").startswith(
        "Device counts unavailable"
    )

"""Device store health check backed by MongoDB."""

from __future__ import annotations

from time import perf_counter
from typing import Optional

import pymongo.errors

from src.domain.entities.health import (
    DependencyStatus,
    DeviceStoreStats,
    ServiceStatus,
    SystemHealth,
)
from src.domain.ports.health_check import IHealthCheckService
from src.infrastructure.database.mongo_database import MongoDatabase
from src.shared import get_logger
from src.shared.consts import DEVICES_COLLECTION, VERIFICATION_EVENTS_COLLECTION

logger = get_logger(__name__)

DEVICE_STORE = "device_store"


class HealthCheckService(IHealthCheckService):
    """Ping the device store and read registry counts from it.

    A failed ping makes the system DOWN. A store that answers the ping but
    not the count queries is DEGRADED: lookups may still succeed.
    """

    def __init__(self, mongo_database: MongoDatabase, audit_enabled: bool = True):
        self._mongo_database = mongo_database
        self._audit_enabled = audit_enabled

    async def evaluate(self) -> SystemHealth:
        start = perf_counter()
        try:
            await self._mongo_database.ping()
        except Exception as exc:
            logger.warning("health.device_store.unreachable", error=str(exc))
            return SystemHealth.from_dependencies(
                [
                    DependencyStatus(
                        name=DEVICE_STORE,
                        status=ServiceStatus.DOWN,
                        message=f"MongoDB ping failed: {exc}",
                        latency_ms=_elapsed_ms(start),
                    )
                ]
            )
        latency_ms = _elapsed_ms(start)

        try:
            stats = await self._read_stats()
        except pymongo.errors.PyMongoError as exc:
            logger.warning("health.device_store.stats_failed", error=str(exc))
            status = DependencyStatus(
                name=DEVICE_STORE,
                status=ServiceStatus.DEGRADED,
                message=f"Device counts unavailable: {exc}",
                latency_ms=latency_ms,
            )
            return SystemHealth.from_dependencies([status])

        status = DependencyStatus(
            name=DEVICE_STORE,
            status=ServiceStatus.UP,
            message="MongoDB ping successful",
            latency_ms=latency_ms,
        )
        return SystemHealth.from_dependencies([status], store=stats)

    async def _read_stats(self) -> DeviceStoreStats:
        registered = await self._mongo_database.count_documents(DEVICES_COLLECTION)
        blocked = await self._mongo_database.count_documents(
            DEVICES_COLLECTION, {"blocked": True}
        )
        audit_events: Optional[int] = None
        if self._audit_enabled:
            audit_events = await self._mongo_database.count_documents(
                VERIFICATION_EVENTS_COLLECTION
            )
        return DeviceStoreStats(
            registered=registered, blocked=blocked, audit_events=audit_events
        )


def _elapsed_ms(start: float) -> float:
    return (perf_counter() - start) * 1000

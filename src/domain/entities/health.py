"""
Health domain entities.

The service has a single dependency, the device store. Its health is
expressed as a ping result plus a snapshot of what the store holds, so
operators can see at a glance whether verification answers are backed
by a populated registry.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional


class ServiceStatus(str, Enum):
    UP = "up"
    DEGRADED = "degraded"
    DOWN = "down"


@dataclass(slots=True)
class DependencyStatus:
    """Result of checking one dependency."""

    name: str
    status: ServiceStatus
    message: Optional[str] = None
    latency_ms: Optional[float] = None


@dataclass(frozen=True, slots=True)
class DeviceStoreStats:
    """Counts read from the device store at check time.

    ``audit_events`` is None when the verification audit is disabled.
    ``registered`` may be an estimate, so ``allowed`` is floored at zero.
    """

    registered: int
    blocked: int
    audit_events: Optional[int] = None

    @property
    def allowed(self) -> int:
        return max(0, self.registered - self.blocked)


@dataclass(slots=True)
class SystemHealth:
    status: ServiceStatus
    dependencies: List[DependencyStatus] = field(default_factory=list)
    store: Optional[DeviceStoreStats] = None
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_dependencies(
        cls,
        dependencies: List[DependencyStatus],
        store: Optional[DeviceStoreStats] = None,
    ) -> "SystemHealth":
        """Aggregate: any DOWN wins, then any DEGRADED, otherwise UP."""
        statuses = {dependency.status for dependency in dependencies}
        if ServiceStatus.DOWN in statuses:
            status = ServiceStatus.DOWN
        elif ServiceStatus.DEGRADED in statuses:
            status = ServiceStatus.DEGRADED
        else:
            status = ServiceStatus.UP
        return cls(status=status, dependencies=list(dependencies), store=store)

    @property
    def can_verify(self) -> bool:
        return self.status is not ServiceStatus.DOWN


@dataclass(slots=True)
class ApplicationInfo:
    name: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    started_at: datetime
    uptime_seconds: float
    database_name: str
    database_uri: str
    audit_enabled: bool
    health: SystemHealth

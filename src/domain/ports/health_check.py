"""Domain port for dependency health checks."""

from __future__ import annotations

from typing import Protocol

from src.domain.entities.health import SystemHealth


class IHealthCheckService(Protocol):
    """Check the service's dependencies and aggregate their status."""

    async def evaluate(self) -> SystemHealth: ...

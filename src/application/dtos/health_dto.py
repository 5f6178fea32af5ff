"""
Health DTOs - Application Layer

Response bodies for ``/health`` and ``/info``. Like the device DTOs they
use camelCase on the wire.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from src.domain.entities.health import (
    ApplicationInfo,
    DependencyStatus,
    DeviceStoreStats,
    ServiceStatus,
    SystemHealth,
)


class DependencyStatusDTO(BaseModel):
    name: str = Field(description="Dependency identifier")
    status: ServiceStatus = Field(description="Check outcome")
    message: Optional[str] = Field(default=None, description="Check note")
    latency_ms: Optional[float] = Field(
        default=None, alias="latencyMs", description="Ping round-trip time"
    )

    model_config = {"populate_by_name": True}

    @classmethod
    def from_domain(cls, status: DependencyStatus) -> "DependencyStatusDTO":
        return cls(
            name=status.name,
            status=status.status,
            message=status.message,
            latency_ms=status.latency_ms,
        )


class DeviceStoreStatsDTO(BaseModel):
    """Registry counts at check time."""

    registered: int = Field(ge=0, description="Devices in the registry")
    blocked: int = Field(ge=0, description="Registered devices that are blocked")
    allowed: int = Field(ge=0, description="Registered devices that verify ok")
    audit_events: Optional[int] = Field(
        default=None,
        alias="auditEvents",
        description="Recorded verification decisions; absent when auditing is off",
    )

    model_config = {"populate_by_name": True}

    @classmethod
    def from_domain(cls, stats: DeviceStoreStats) -> "DeviceStoreStatsDTO":
        return cls(
            registered=stats.registered,
            blocked=stats.blocked,
            allowed=stats.allowed,
            audit_events=stats.audit_events,
        )


class SystemHealthDTO(BaseModel):
    """Body of ``GET /health``."""

    status: ServiceStatus = Field(description="Overall status")
    can_verify: bool = Field(
        alias="canVerify", description="Whether /devices/verify can answer"
    )
    checked_at: datetime = Field(alias="checkedAt", description="Check timestamp")
    dependencies: List[DependencyStatusDTO] = Field(default_factory=list)
    store: Optional[DeviceStoreStatsDTO] = Field(
        default=None, description="Device store snapshot, when readable"
    )

    @classmethod
    def from_domain(cls, health: SystemHealth) -> "SystemHealthDTO":
        return cls(
            status=health.status,
            can_verify=health.can_verify,
            checked_at=health.checked_at,
            dependencies=[
                DependencyStatusDTO.from_domain(dep) for dep in health.dependencies
            ],
            store=(
                DeviceStoreStatsDTO.from_domain(health.store)
                if health.store is not None
                else None
            ),
        )

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "status": "up",
                "canVerify": True,
                "checkedAt": "2024-09-09T12:00:00Z",
                "dependencies": [
                    {
                        "name": "device_store",
                        "status": "up",
                        "message": "MongoDB ping successful",
                        "latencyMs": 1.8,
                    }
                ],
                "store": {
                    "registered": 42,
                    "blocked": 3,
                    "allowed": 39,
                    "auditEvents": 1207,
                },
            }
        },
    }


class ApplicationInfoDTO(BaseModel):
    """Body of ``GET /info``."""

    name: str
    version: str
    environment: str
    git_commit: str = Field(alias="gitCommit")
    build_time: str = Field(alias="buildTime")
    started_at: datetime = Field(alias="startedAt")
    uptime_seconds: float = Field(alias="uptimeSeconds", ge=0)
    database_name: str = Field(alias="databaseName")
    database_uri: str = Field(
        alias="databaseUri", description="Configured URI with credentials removed"
    )
    audit_enabled: bool = Field(alias="auditEnabled")
    health: SystemHealthDTO

    @classmethod
    def from_domain(cls, info: ApplicationInfo) -> "ApplicationInfoDTO":
        return cls(
            name=info.name,
            version=info.version,
            environment=info.environment,
            git_commit=info.git_commit,
            build_time=info.build_time,
            started_at=info.started_at,
            uptime_seconds=info.uptime_seconds,
            database_name=info.database_name,
            database_uri=info.database_uri,
            audit_enabled=info.audit_enabled,
            health=SystemHealthDTO.from_domain(info.health),
        )

    model_config = {"populate_by_name": True}

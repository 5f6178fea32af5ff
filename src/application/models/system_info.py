"""Lightweight settings structures consumed by the application layer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SystemInfo:
    """Build metadata and store settings published by ``/info``.

    ``database_uri`` is the raw configured URI; it is redacted before it
    leaves the application layer.
    """

    title: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    database_uri: str
    database_name: str
    verification_audit_enabled: bool = True

"""
Domain Entities Package

This package contains the core domain entities and errors.
"""

from .device import Device
from .errors import (
    DeviceAlreadyExistsError,
    DeviceNotFoundError,
    DeviceOperationError,
    DeviceRepositoryError,
    DeviceValidationError,
    DomainError,
)
from .health import (
    ApplicationInfo,
    DependencyStatus,
    DeviceStoreStats,
    ServiceStatus,
    SystemHealth,
)
from .verification import VerificationEvent, VerificationReason, VerificationResult

__all__ = [
    "Device",
    "VerificationEvent",
    "VerificationReason",
    "VerificationResult",
    "SystemHealth",
    "DependencyStatus",
    "DeviceStoreStats",
    "ServiceStatus",
    "ApplicationInfo",
    "DomainError",
    "DeviceValidationError",
    "DeviceNotFoundError",
    "DeviceAlreadyExistsError",
    "DeviceOperationError",
    "DeviceRepositoryError",
]

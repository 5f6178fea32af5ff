"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
Expected verification outcomes are not errors; these classes signal
invalid usage or conditions a use case cannot turn into an outcome.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class DeviceValidationError(DomainError):
    """Raised when a device operation receives unusable input."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class DeviceNotFoundError(DomainError):
    """Raised when a specifically requested device does not exist."""

    def __init__(self, mac_id: str, details: Optional[Dict[str, Any]] = None):
        message = f"Device with MAC ID {mac_id} not found"
        super().__init__(message, details)


class DeviceAlreadyExistsError(DomainError):
    """Raised when registering a MAC id that is already stored."""

    def __init__(self, mac_id: str, details: Optional[Dict[str, Any]] = None):
        message = f"Device with MAC ID {mac_id} already exists"
        super().__init__(message, details)


class DeviceOperationError(DomainError):
    """Raised when a write on a device fails."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class DeviceRepositoryError(DomainError):
    """Raised when the device store cannot be reached or queried."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)

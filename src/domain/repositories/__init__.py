"""
Repositories Package

This package contains interfaces defining repository contracts
for data access operations. Specific implementations are provided
by the infrastructure layer.
"""

from .device_repository import IDeviceRepository
from .verification_event_repository import IVerificationEventRepository

__all__ = ["IDeviceRepository", "IVerificationEventRepository"]

"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer.
"""

from .device_dto import (
    DeviceCreateDTO,
    DeviceResponseDTO,
    DeviceUpdateDTO,
    VerificationResultDTO,
    VerifyDeviceRequestDTO,
)
from .health_dto import (
    ApplicationInfoDTO,
    DependencyStatusDTO,
    DeviceStoreStatsDTO,
    SystemHealthDTO,
)

__all__ = [
    "VerifyDeviceRequestDTO",
    "VerificationResultDTO",
    "DeviceCreateDTO",
    "DeviceUpdateDTO",
    "DeviceResponseDTO",
    "SystemHealthDTO",
    "DependencyStatusDTO",
    "DeviceStoreStatsDTO",
    "ApplicationInfoDTO",
]

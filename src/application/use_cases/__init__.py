"""
Use Cases Package - Application Layer

This package contains the service layer of the application: use cases
that hold the business rules for one capability each and orchestrate
repository calls. They accept primitive values or DTOs, never request
objects.
"""

from .device_use_cases import (
    DeleteDeviceUseCase,
    GetDeviceByMacIdUseCase,
    GetDevicesUseCase,
    RegisterDeviceUseCase,
    UpdateDeviceUseCase,
    VerifyDeviceUseCase,
)
from .health_use_cases import GetApplicationInfoUseCase, GetHealthStatusUseCase

__all__ = [
    "VerifyDeviceUseCase",
    "RegisterDeviceUseCase",
    "GetDevicesUseCase",
    "GetDeviceByMacIdUseCase",
    "UpdateDeviceUseCase",
    "DeleteDeviceUseCase",
    "GetHealthStatusUseCase",
    "GetApplicationInfoUseCase",
]

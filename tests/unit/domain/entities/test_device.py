from __future__ import annotations

from datetime import timezone

from src.domain.entities.device import Device
from src.domain.entities.errors import (
    DeviceAlreadyExistsError,
    DeviceNotFoundError,
    DeviceValidationError,
    DomainError,
)


def test_device_defaults() -> None:
    device = Device(mac_id="AA:BB")

    assert device.blocked is False
    assert device.name is None
    assert device.created_at.tzinfo == timezone.utc
    assert device.updated_at.tzinfo == timezone.utc


def test_device_errors_carry_messages() -> None:
    assert str(DeviceNotFoundError("AA:BB")) == "Device with MAC ID AA:BB not found"
    assert DeviceAlreadyExistsError("AA:BB").message == (
        "Device with MAC ID AA:BB already exists"
    )

    error = DeviceValidationError("MAC ID missing", {"field": "macId"})
    assert isinstance(error, DomainError)
    assert error.message == "MAC ID missing"
    assert error.details == {"field": "macId"}

"""
Device DTOs - Application Layer

This module defines Data Transfer Objects (DTOs) for the device
endpoints. Fields use camelCase aliases on the wire (``macId``) and
snake_case names in Python.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from src.domain.entities.device import Device
from src.domain.entities.verification import VerificationReason, VerificationResult


class VerifyDeviceRequestDTO(BaseModel):
    """DTO for a verification request body."""

    mac_id: Optional[str] = Field(
        default=None, alias="macId", description="MAC id of the device to verify"
    )

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {"example": {"macId": "AA:BB:CC:DD:EE:FF"}},
    }


class VerificationResultDTO(BaseModel):
    """DTO mirroring a verification outcome."""

    ok: bool = Field(description="Whether the device is admitted")
    reason: Optional[VerificationReason] = Field(
        default=None, description="Why the device was not admitted"
    )

    @classmethod
    def from_domain(cls, result: VerificationResult) -> "VerificationResultDTO":
        return cls(ok=result.ok, reason=result.reason)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"ok": True},
                {"ok": False, "reason": "NOT_FOUND"},
                {"ok": False, "reason": "BLOCKED"},
            ]
        }
    }


class DeviceCreateDTO(BaseModel):
    """DTO for registering a device."""

    mac_id: Optional[str] = Field(
        default=None, alias="macId", description="MAC id of the device"
    )
    blocked: bool = Field(default=False, description="Whether the device is blocked")
    name: Optional[str] = Field(
        default=None, max_length=120, description="Human readable label"
    )

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "macId": "AA:BB:CC:DD:EE:FF",
                "blocked": False,
                "name": "Front door sensor",
            }
        },
    }


class DeviceUpdateDTO(BaseModel):
    """DTO for updating a device. Omitted fields are left unchanged."""

    blocked: Optional[bool] = Field(default=None, description="New blocked flag")
    name: Optional[str] = Field(
        default=None, max_length=120, description="New human readable label"
    )

    model_config = {"json_schema_extra": {"example": {"blocked": True}}}


class DeviceResponseDTO(BaseModel):
    """DTO for a stored device."""

    mac_id: str = Field(alias="macId", description="MAC id of the device")
    blocked: bool = Field(description="Whether the device is blocked")
    name: Optional[str] = Field(default=None, description="Human readable label")
    created_at: datetime = Field(alias="createdAt", description="Creation timestamp")
    updated_at: datetime = Field(
        alias="updatedAt", description="Last update timestamp"
    )

    @classmethod
    def from_domain(cls, device: Device) -> "DeviceResponseDTO":
        return cls(
            mac_id=device.mac_id,
            blocked=device.blocked,
            name=device.name,
            created_at=device.created_at,
            updated_at=device.updated_at,
        )

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "macId": "AA:BB:CC:DD:EE:FF",
                "blocked": False,
                "name": "Front door sensor",
                "createdAt": "2024-09-09T12:00:00Z",
                "updatedAt": "2024-09-09T12:00:00Z",
            }
        },
    }

"""
Device Use Cases - Application Layer

This module defines the use cases behind the device endpoints. Each use
case receives primitive values or DTOs, applies the business rules and
talks to persistence through repository interfaces only.

Verification returns a discriminated ``VerificationResult`` for every
expected outcome and raises only on invalid usage. The management use
cases treat a missing device as an error, because there the caller asked
for a specific resource.
"""

from datetime import datetime, timezone
from typing import List, Optional

from src.application.dtos.device_dto import (
    DeviceCreateDTO,
    DeviceResponseDTO,
    DeviceUpdateDTO,
)
from src.domain.entities.device import Device
from src.domain.entities.errors import (
    DeviceAlreadyExistsError,
    DeviceNotFoundError,
    DeviceRepositoryError,
    DeviceValidationError,
)
from src.domain.entities.verification import VerificationEvent, VerificationResult
from src.domain.repositories.device_repository import IDeviceRepository
from src.domain.repositories.verification_event_repository import (
    IVerificationEventRepository,
)
from src.shared import get_logger, mask_mac_id, normalize_mac_id
from src.shared.consts import MAC_ID_MISSING_MESSAGE

logger = get_logger(__name__)


def _require_mac_id(mac_id: Optional[str]) -> str:
    normalized = normalize_mac_id(mac_id)
    if normalized is None:
        raise DeviceValidationError(MAC_ID_MISSING_MESSAGE)
    return normalized


class VerifyDeviceUseCase:
    """Decide whether a device identified by its MAC id is admitted."""

    def __init__(
        self,
        device_repository: IDeviceRepository,
        event_repository: Optional[IVerificationEventRepository] = None,
        audit_enabled: bool = True,
    ):
        self.device_repository = device_repository
        self.event_repository = event_repository
        self._audit_enabled = bool(audit_enabled)

    async def execute(self, mac_id: Optional[str]) -> VerificationResult:
        """
        Verify a device.

        Checks run in order: the MAC id must be present, the device must
        exist, and it must not be blocked.

        Args:
            mac_id: MAC id as received from the caller, possibly missing

        Returns:
            VerificationResult: success, NOT_FOUND or BLOCKED

        Raises:
            DeviceValidationError: If the MAC id is missing or blank
            DeviceRepositoryError: If the device store cannot be queried
        """
        normalized = _require_mac_id(mac_id)
        masked = mask_mac_id(normalized)

        try:
            device = await self.device_repository.find_by_mac_id(normalized)
        except DeviceRepositoryError as e:
            logger.error(
                "devices.verify.lookup_failed",
                mac_id=masked,
                error=str(e),
            )
            raise

        if device is None:
            result = VerificationResult.not_found()
        elif device.blocked:
            result = VerificationResult.blocked()
        else:
            result = VerificationResult.success()

        logger.info(
            "devices.verify.completed",
            mac_id=masked,
            ok=result.ok,
            reason=result.reason.value if result.reason else None,
        )
        return result

    async def record_outcome(
        self, mac_id: Optional[str], result: VerificationResult
    ) -> None:
        """
        Append a decision to the audit trail.

        Scheduled by the caller after the response is sent. Never raises;
        a failed write is logged and dropped.
        """
        if not self._audit_enabled or self.event_repository is None:
            return

        masked = mask_mac_id(normalize_mac_id(mac_id))
        event = VerificationEvent(mac_id=masked, ok=result.ok, reason=result.reason)
        try:
            await self.event_repository.record(event)
        except Exception as e:
            logger.warning(
                "devices.verify.audit_failed",
                mac_id=masked,
                error=str(e),
            )


class RegisterDeviceUseCase:
    """Use case for registering a new device."""

    def __init__(self, device_repository: IDeviceRepository) -> None:
        self.device_repository = device_repository

    async def execute(self, device_dto: DeviceCreateDTO) -> DeviceResponseDTO:
        """
        Register a device under its normalized MAC id.

        Raises:
            DeviceValidationError: If the MAC id is missing or blank
            DeviceAlreadyExistsError: If the MAC id is already registered
        """
        mac_id = _require_mac_id(device_dto.mac_id)

        if await self.device_repository.find_by_mac_id(mac_id) is not None:
            raise DeviceAlreadyExistsError(mac_id)

        device = Device(
            mac_id=mac_id,
            blocked=device_dto.blocked,
            name=device_dto.name,
        )
        created = await self.device_repository.create(device)

        logger.info(
            "devices.registered",
            mac_id=mask_mac_id(mac_id),
            blocked=created.blocked,
        )
        return DeviceResponseDTO.from_domain(created)


class GetDevicesUseCase:
    """Use case for listing devices."""

    def __init__(self, device_repository: IDeviceRepository) -> None:
        self.device_repository = device_repository

    async def execute(
        self,
        skip: int = 0,
        limit: int = 100,
        blocked: Optional[bool] = None,
    ) -> List[DeviceResponseDTO]:
        devices = await self.device_repository.find_all(
            skip=skip, limit=limit, blocked=blocked
        )
        return [DeviceResponseDTO.from_domain(device) for device in devices]


class GetDeviceByMacIdUseCase:
    """Use case for retrieving a device by MAC id."""

    def __init__(self, device_repository: IDeviceRepository) -> None:
        self.device_repository = device_repository

    async def execute(self, mac_id: Optional[str]) -> DeviceResponseDTO:
        normalized = _require_mac_id(mac_id)
        device = await self.device_repository.find_by_mac_id(normalized)
        if device is None:
            raise DeviceNotFoundError(normalized)
        return DeviceResponseDTO.from_domain(device)


class UpdateDeviceUseCase:
    """Use case for changing a device's blocked flag or label."""

    def __init__(self, device_repository: IDeviceRepository) -> None:
        self.device_repository = device_repository

    async def execute(
        self, mac_id: Optional[str], device_dto: DeviceUpdateDTO
    ) -> DeviceResponseDTO:
        """
        Apply the provided fields to a stored device.

        Raises:
            DeviceValidationError: If the MAC id is missing or blank
            DeviceNotFoundError: If no device has this MAC id
        """
        normalized = _require_mac_id(mac_id)
        device = await self.device_repository.find_by_mac_id(normalized)
        if device is None:
            raise DeviceNotFoundError(normalized)

        if device_dto.blocked is not None:
            device.blocked = device_dto.blocked
        if device_dto.name is not None:
            device.name = device_dto.name
        device.updated_at = datetime.now(timezone.utc)

        updated = await self.device_repository.update(device)

        logger.info(
            "devices.updated",
            mac_id=mask_mac_id(normalized),
            blocked=updated.blocked,
        )
        return DeviceResponseDTO.from_domain(updated)


class DeleteDeviceUseCase:
    """Use case for deleting a device."""

    def __init__(self, device_repository: IDeviceRepository) -> None:
        self.device_repository = device_repository

    async def execute(self, mac_id: Optional[str]) -> None:
        normalized = _require_mac_id(mac_id)
        await self.device_repository.delete(normalized)
        logger.info("devices.deleted", mac_id=mask_mac_id(normalized))

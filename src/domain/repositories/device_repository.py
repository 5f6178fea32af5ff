"""
Device Repository Interface

This module defines the interface for device repositories following
the repository pattern. Use cases depend on this contract only, never on
a concrete database client.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities.device import Device


class IDeviceRepository(ABC):
    """Interface for Device repository implementations."""

    @abstractmethod
    async def find_by_mac_id(self, mac_id: str) -> Optional[Device]:
        """
        Find a device by its MAC id.

        Args:
            mac_id: Normalized MAC identifier

        Returns:
            The device if found, None otherwise

        Raises:
            DeviceRepositoryError: If the store cannot be queried
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        skip: int = 0,
        limit: int = 100,
        blocked: Optional[bool] = None,
    ) -> List[Device]:
        """
        Find devices with pagination and an optional blocked filter.

        Args:
            skip: Number of records to skip (for pagination)
            limit: Maximum number of records to return
            blocked: Only return devices with this blocked flag

        Returns:
            List of devices matching the criteria
        """
        pass

    @abstractmethod
    async def create(self, device: Device) -> Device:
        """
        Store a new device.

        Raises:
            DeviceAlreadyExistsError: If the MAC id is already stored
            DeviceOperationError: If the insert fails
        """
        pass

    @abstractmethod
    async def update(self, device: Device) -> Device:
        """
        Replace a stored device.

        Raises:
            DeviceNotFoundError: If the device does not exist
            DeviceOperationError: If the update fails
        """
        pass

    @abstractmethod
    async def delete(self, mac_id: str) -> None:
        """
        Delete a device by its MAC id.

        Raises:
            DeviceNotFoundError: If the device does not exist
            DeviceOperationError: If the deletion fails
        """
        pass

"""
MongoDB Device Repository - Infrastructure Layer

This module implements the DeviceRepository interface using MongoDB
as the underlying data store.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import pymongo.errors

from src.domain.entities.device import Device
from src.domain.entities.errors import (
    DeviceAlreadyExistsError,
    DeviceNotFoundError,
    DeviceOperationError,
    DeviceRepositoryError,
)
from src.domain.repositories.device_repository import IDeviceRepository
from src.infrastructure.database import DocumentNotFoundError, MongoDatabase
from src.shared.consts import DEVICES_COLLECTION


def _as_utc(value: Any) -> datetime:
    if not isinstance(value, datetime):
        return datetime.now(timezone.utc)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class DeviceRepository(IDeviceRepository):
    """MongoDB implementation of the DeviceRepository."""

    COLLECTION_NAME = DEVICES_COLLECTION

    def __init__(self, mongo_database: MongoDatabase):
        self.db = mongo_database

    def _to_document(self, device: Device) -> Dict[str, Any]:
        """Convert a Device entity to a MongoDB document."""
        return {
            "mac_id": device.mac_id,
            "blocked": device.blocked,
            "name": device.name,
            "created_at": device.created_at,
            "updated_at": device.updated_at,
        }

    def _to_entity(self, document: Dict[str, Any]) -> Device:
        """Convert a MongoDB document to a Device entity."""
        return Device(
            mac_id=document["mac_id"],
            blocked=bool(document.get("blocked", False)),
            name=document.get("name"),
            created_at=_as_utc(document.get("created_at")),
            updated_at=_as_utc(document.get("updated_at")),
        )

    async def find_by_mac_id(self, mac_id: str) -> Optional[Device]:
        """
        Find a device by its MAC id.

        A failing query is reported as DeviceRepositoryError, never as a
        missing device.

        Raises:
            DeviceRepositoryError: If MongoDB cannot be queried
        """
        try:
            document = await self.db.find_one(self.COLLECTION_NAME, {"mac_id": mac_id})
        except pymongo.errors.PyMongoError as e:
            raise DeviceRepositoryError(f"Failed to look up device: {str(e)}")

        if document is None:
            return None
        return self._to_entity(document)

    async def find_all(
        self,
        skip: int = 0,
        limit: int = 100,
        blocked: Optional[bool] = None,
    ) -> List[Device]:
        query: Dict[str, Any] = {}
        if blocked is not None:
            query["blocked"] = blocked

        try:
            documents = await self.db.find_many(
                self.COLLECTION_NAME,
                query,
                sort_by="created_at",
                sort_direction=1,
                skip=skip,
                limit=limit,
            )
        except pymongo.errors.PyMongoError as e:
            raise DeviceRepositoryError(f"Failed to list devices: {str(e)}")

        return [self._to_entity(document) for document in documents]

    async def create(self, device: Device) -> Device:
        try:
            await self.db.insert_one(self.COLLECTION_NAME, self._to_document(device))
            return device
        except pymongo.errors.DuplicateKeyError:
            raise DeviceAlreadyExistsError(device.mac_id)
        except pymongo.errors.ConnectionFailure as e:
            raise DeviceRepositoryError(f"Failed to create device: {str(e)}")
        except Exception as e:
            raise DeviceOperationError(f"Failed to create device: {str(e)}")

    async def update(self, device: Device) -> Device:
        try:
            await self.db.replace_one(
                self.COLLECTION_NAME,
                {"mac_id": device.mac_id},
                self._to_document(device),
            )
            return device
        except DocumentNotFoundError:
            raise DeviceNotFoundError(device.mac_id)
        except pymongo.errors.ConnectionFailure as e:
            raise DeviceRepositoryError(f"Failed to update device: {str(e)}")
        except Exception as e:
            raise DeviceOperationError(f"Failed to update device: {str(e)}")

    async def delete(self, mac_id: str) -> None:
        try:
            await self.db.delete_one(self.COLLECTION_NAME, {"mac_id": mac_id})
        except DocumentNotFoundError:
            raise DeviceNotFoundError(mac_id)
        except pymongo.errors.ConnectionFailure as e:
            raise DeviceRepositoryError(f"Failed to delete device: {str(e)}")
        except Exception as e:
            raise DeviceOperationError(f"Failed to delete device: {str(e)}")

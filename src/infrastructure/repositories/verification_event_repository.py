"""
MongoDB Verification Event Repository - Infrastructure Layer

Stores the audit trail of verification decisions.
"""

from typing import Any, Dict

from src.domain.entities.verification import VerificationEvent
from src.domain.repositories.verification_event_repository import (
    IVerificationEventRepository,
)
from src.infrastructure.database import MongoDatabase
from src.shared.consts import VERIFICATION_EVENTS_COLLECTION


class VerificationEventRepository(IVerificationEventRepository):
    """MongoDB implementation of the verification audit trail."""

    COLLECTION_NAME = VERIFICATION_EVENTS_COLLECTION

    def __init__(self, mongo_database: MongoDatabase):
        self.db = mongo_database

    def _to_document(self, event: VerificationEvent) -> Dict[str, Any]:
        return {
            "id": str(event.id),
            "mac_id": event.mac_id,
            "ok": event.ok,
            "reason": event.reason.value if event.reason else None,
            "checked_at": event.checked_at,
        }

    async def record(self, event: VerificationEvent) -> None:
        await self.db.insert_one(self.COLLECTION_NAME, self._to_document(event))

"""Verification event repository interface."""

from abc import ABC, abstractmethod

from src.domain.entities.verification import VerificationEvent


class IVerificationEventRepository(ABC):
    """Append-only store for verification audit records."""

    @abstractmethod
    async def record(self, event: VerificationEvent) -> None:
        """Persist a verification event."""
        pass

"""
Domain Entities - Verification

Outcome of checking whether a device may be admitted. Expected business
outcomes are carried as data so callers can branch on them without
exception handling.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional
from uuid import UUID, uuid4


class VerificationReason(str, Enum):
    """Why a verification did not succeed."""

    NOT_FOUND = "NOT_FOUND"
    BLOCKED = "BLOCKED"


@dataclass(frozen=True, slots=True)
class VerificationResult:
    """
    Discriminated verification outcome.

    Only three shapes exist: ``ok`` with no reason, or not ``ok`` with
    either NOT_FOUND or BLOCKED. Build instances with the class
    constructors below.
    """

    ok: bool
    reason: Optional[VerificationReason] = None

    def __post_init__(self) -> None:
        if self.ok and self.reason is not None:
            raise ValueError("A successful verification cannot carry a reason")
        if not self.ok and self.reason is None:
            raise ValueError("A failed verification requires a reason")

    @classmethod
    def success(cls) -> VerificationResult:
        return cls(ok=True)

    @classmethod
    def not_found(cls) -> VerificationResult:
        return cls(ok=False, reason=VerificationReason.NOT_FOUND)

    @classmethod
    def blocked(cls) -> VerificationResult:
        return cls(ok=False, reason=VerificationReason.BLOCKED)

    def to_dict(self) -> Dict[str, Any]:
        if self.reason is None:
            return {"ok": self.ok}
        return {"ok": self.ok, "reason": self.reason.value}


@dataclass(slots=True)
class VerificationEvent:
    """Audit record of a single verification decision."""

    mac_id: str
    ok: bool
    reason: Optional[VerificationReason] = None
    id: UUID = field(default_factory=uuid4)
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

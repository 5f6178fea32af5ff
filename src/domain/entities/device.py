"""
Domain Entities - Device

Shape of a persisted network device. The entity carries no persistence
or validation logic; repositories map it to storage and use cases
decide what to do with it.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


@dataclass
class Device:
    """A device known to the system, identified by its MAC id."""

    mac_id: str
    blocked: bool = False
    name: Optional[str] = None

    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

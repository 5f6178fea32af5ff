"""
MAC Identifier Helpers - Shared Layer

Pure helpers for handling device MAC identifiers. They are used by the
application layer before touching persistence and by any code that needs
to print an identifier without exposing it in full.
"""

import re
from typing import Optional

_SEPARATORS = re.compile(r"[-.\s]+")


def normalize_mac_id(value: Optional[str]) -> Optional[str]:
    """
    Normalize a MAC identifier to its canonical stored form.

    Surrounding whitespace is removed, letters are upper-cased and runs of
    ``-``, ``.`` or inner whitespace become a single ``:``. Blank input is
    treated as missing.

    Args:
        value: Raw identifier as received from a caller

    Returns:
        The canonical identifier, or None when nothing usable was given
    """
    if value is None:
        return None

    stripped = value.strip()
    if not stripped:
        return None

    return _SEPARATORS.sub(":", stripped).upper()


def mask_mac_id(value: Optional[str]) -> str:
    """Hide the trailing octets of a MAC identifier for logs and audit records."""
    if not value:
        return ""

    octets = value.split(":")
    if len(octets) == 1:
        visible = max(1, len(value) // 2)
        return f"{value[:visible]}**"

    keep = max(1, len(octets) // 2)
    return ":".join(octets[:keep] + ["**"] * (len(octets) - keep))

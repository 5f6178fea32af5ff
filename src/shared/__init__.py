"""
Shared module - Cross-cutting concerns / Shared Layer

This module provides shared utilities, constants, and enums that are used
across multiple layers of the application.

Its primary responsibilities include:
- Defining cross-layer constants (e.g., environment names, collection names)
- Pure helpers reused by several use cases (MAC id normalization and masking)
- Logging configuration

It must not depend on Infrastructure, Presentation or Frameworks.
"""

from .consts import EnumEnvironment, EnumLogLevel
from .logging import configure_logging, get_logger, update_logging_from_settings
from .mac import mask_mac_id, normalize_mac_id

__all__ = [
    "EnumEnvironment",
    "EnumLogLevel",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
    "mask_mac_id",
    "normalize_mac_id",
]

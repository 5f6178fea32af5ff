"""
Controllers Package - Presentation Layer

This package contains FastAPI controllers (routers). A controller
adapts HTTP requests to plain use case calls and maps results and
domain errors back to responses; it never talks to persistence.
"""

from .devices_controller import router as devices_router
from .system_controller import router as system_router

__all__ = ["devices_router", "system_router"]

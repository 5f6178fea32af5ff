"""
Main module - Main/Composition Root Layer

This module is the composition root of the application. It loads the
settings, builds the dependency container, creates the FastAPI app and
starts the server.
"""

from .config import AppSettings, get_settings
from .container import AppContainer, get_container, init_container

__all__ = [
    "AppSettings",
    "get_settings",
    "AppContainer",
    "init_container",
    "get_container",
]

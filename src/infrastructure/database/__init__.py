"""
Database package - Infrastructure Layer

This package contains the MongoDB client wrapper used by the
repositories to persist devices and verification events.
"""

from src.infrastructure.database.mongo_database import (
    DocumentNotFoundError,
    MongoDatabase,
)

__all__ = ["MongoDatabase", "DocumentNotFoundError"]

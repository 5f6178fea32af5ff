"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer: the MongoDB client, the repositories and the health
check service.
"""

from src.infrastructure import repositories

__all__ = ["repositories"]

"""
Domain Layer Package

This package contains the device entities, the verification outcome
types and the repository contracts. It has no dependencies on
frameworks or infrastructure concerns.
"""

# Re-export submodules
from src.domain import entities, ports, repositories

__all__ = ["entities", "repositories", "ports"]

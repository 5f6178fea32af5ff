"""
Application Layer Package

This package contains the use cases (service layer) and the DTOs that
carry their inputs and outputs to the presentation layer.
"""

# Re-export submodules
from src.application import dtos, models, use_cases

__all__ = ["dtos", "use_cases", "models"]

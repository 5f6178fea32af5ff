"""
Presentation Layer Package

This package contains the HTTP-facing controllers of the service.
"""

from src.presentation import controllers

__all__ = ["controllers"]

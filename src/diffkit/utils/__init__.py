"""Utility functions for DiffKit package."""

from .numerics import (
    relative_error,
    relative_error_percent,
    signed_error,
)

__all__ = [
    "signed_error",
    "relative_error",
    "relative_error_percent",
]

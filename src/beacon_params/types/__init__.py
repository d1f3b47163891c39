"""Reusable type definitions for the beacon chain parameters."""

from .base import StrictBaseModel
from .exceptions import ProfileError, UnknownProfileError
from .uint import Uint64

__all__ = [
    # Core types
    "Uint64",
    "StrictBaseModel",
    # Exceptions
    "ProfileError",
    "UnknownProfileError",
]

"""Reusable type definitions for the one-time signature scheme."""

from .base import FrozenModel, StrictBaseModel

__all__ = [
    "FrozenModel",
    "StrictBaseModel",
]

"""
This package provides a Python implementation of the Winternitz-Lamport-Diffie
one-time signature scheme.

It exposes the core data structures and the main interface functions.
"""

from .containers import KeyState, PrivateKey, PublicKey, Signature
from .exceptions import (
    InvalidKeySizeError,
    InvalidParameterError,
    KeyConsumedError,
    RandomSourceError,
    WotsError,
)
from .interface import DEFAULT_SCHEME, SHA256_SCHEME, SHA512_SCHEME, WotsScheme
from .parameters import SchemeConfig
from .rand import SYSTEM_RANDOM, RandomSource, SystemRandom

__all__ = [
    "WotsScheme",
    "SchemeConfig",
    "PrivateKey",
    "PublicKey",
    "Signature",
    "KeyState",
    "RandomSource",
    "SystemRandom",
    "SYSTEM_RANDOM",
    "DEFAULT_SCHEME",
    "SHA256_SCHEME",
    "SHA512_SCHEME",
    # Exceptions
    "WotsError",
    "InvalidParameterError",
    "InvalidKeySizeError",
    "RandomSourceError",
    "KeyConsumedError",
]

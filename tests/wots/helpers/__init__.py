"""Test helpers for the one-time signature tests."""

from __future__ import annotations

import hashlib
from functools import partial

from wots.hashing import HashFactory

from .mocks import FailingRandom, ScriptedRandom, ZeroRandom


class XofHash:
    """
    A SHAKE-256 hash truncated to an arbitrary output size.

    Lets tests configure schemes with any digest size, including sizes the
    scheme must reject.
    """

    def __init__(self, digest_size: int) -> None:
        self.digest_size = digest_size
        self._shake = hashlib.shake_256()

    def update(self, data: bytes) -> None:
        self._shake.update(data)

    def digest(self) -> bytes:
        return self._shake.digest(self.digest_size)


def xof_factory(digest_size: int) -> HashFactory:
    """Return a factory building `XofHash` instances of `digest_size` bytes."""
    return partial(XofHash, digest_size)


def flip_bit(data: bytes, index: int, bit: int = 0) -> bytes:
    """Return a copy of `data` with one bit of byte `index` inverted."""
    mutated = bytearray(data)
    mutated[index] ^= 1 << bit
    return bytes(mutated)


__all__ = [
    "FailingRandom",
    "ScriptedRandom",
    "XofHash",
    "ZeroRandom",
    "flip_bit",
    "xof_factory",
]

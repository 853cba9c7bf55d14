"""
Data containers for the one-time signature scheme.

Public keys are plain `bytes`. The private key is the one stateful object in
the scheme: it may sign exactly once and is wiped when it does.
"""

from __future__ import annotations

import threading
from enum import Enum, auto
from typing import Iterator

from pydantic import Field

from .exceptions import KeyConsumedError
from .types import StrictBaseModel

PublicKey = bytes
"""
A type alias for the public key.

It is the hash of all fully advanced private chain segments, `digest_size`
bytes long. Public keys never expire and may be reused for any number of
verifications.
"""


class KeyState(Enum):
    """Lifecycle states of a private key."""

    FRESH = auto()
    """Key material is intact and may sign one message."""

    CONSUMED = auto()
    """The key signed a message; its bytes were overwritten with zeros."""


class PrivateKey:
    """
    A one-time private key. **MUST BE KEPT CONFIDENTIAL.**

    The key owns a mutable buffer of `(digest_size + 2) * chain_block_size`
    bytes, split into `digest_size + 2` chain segments. Signing a message moves
    the key from `FRESH` to `CONSUMED`: the buffer is zeroed and every later
    attempt to use it raises `KeyConsumedError`.
    """

    __slots__ = ("public_key", "_data", "_state", "_lock")

    def __init__(self, data: bytes | bytearray, public_key: PublicKey) -> None:
        self.public_key = public_key
        self._data = bytearray(data)
        self._state = KeyState.FRESH
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        # Never render key material.
        return f"PrivateKey(size={len(self._data)}, state={self._state.name})"

    @property
    def state(self) -> KeyState:
        """The current lifecycle state."""
        return self._state

    @property
    def is_consumed(self) -> bool:
        """Whether the key already signed a message."""
        return self._state is KeyState.CONSUMED

    def to_bytes(self) -> bytes:
        """
        Export a copy of the key material, for storage before signing.

        Raises:
            KeyConsumedError: If the key was already used.
        """
        with self._lock:
            if self._state is KeyState.CONSUMED:
                raise KeyConsumedError()
            return bytes(self._data)

    def segments(self, block_size: int) -> Iterator[bytes]:
        """
        Iterate over the key's chain segments.

        Callers must hold the key through `consume` for the duration.
        """
        for offset in range(0, len(self._data), block_size):
            yield bytes(self._data[offset : offset + block_size])

    def consume(self) -> "_Consumption":
        """
        Reserve the key for its single signature.

        Used as a context manager: entering checks the key is still fresh and
        locks it; leaving wipes the key, whether or not signing succeeded.
        """
        return _Consumption(self)

    def wipe(self) -> None:
        """Overwrite the key bytes with zeros and mark the key consumed."""
        for i in range(len(self._data)):
            self._data[i] = 0
        self._state = KeyState.CONSUMED


class _Consumption:
    """Holds a private key's lock for the span of one signing operation."""

    __slots__ = ("_key",)

    def __init__(self, key: PrivateKey) -> None:
        self._key = key

    def __enter__(self) -> PrivateKey:
        key = self._key
        key._lock.acquire()
        if key._state is KeyState.CONSUMED:
            key._lock.release()
            raise KeyConsumedError()
        return key

    def __exit__(self, *exc_info: object) -> None:
        try:
            self._key.wipe()
        finally:
            self._key._lock.release()


class Signature(StrictBaseModel):
    """
    A parsed view of a signature.

    Wire layout: `nonce || chains[0] || ... || chains[digest_size + 1]`.
    """

    nonce: bytes = Field(min_length=1)
    """The randomization string used to digest the message."""

    chains: tuple[bytes, ...]
    """The intermediate chain values, one per digest byte."""

    def encode_bytes(self) -> bytes:
        """Return the signature's wire representation."""
        return self.nonce + b"".join(self.chains)

    @classmethod
    def decode_bytes(cls, data: bytes, *, digest_size: int, chain_block_size: int) -> "Signature":
        """
        Split a wire signature into its nonce and chain values.

        Raises:
            ValueError: If `data` does not have the length the sizes imply.
        """
        expected = digest_size + (digest_size + 2) * chain_block_size
        if len(data) != expected:
            raise ValueError(f"signature must be exactly {expected} bytes, got {len(data)}")

        body = data[digest_size:]
        chains = tuple(
            bytes(body[offset : offset + chain_block_size])
            for offset in range(0, len(body), chain_block_size)
        )
        return cls(nonce=bytes(data[:digest_size]), chains=chains)

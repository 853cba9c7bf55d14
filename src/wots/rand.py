"""Random data sources for private keys and signature nonces."""

from __future__ import annotations

import secrets
from typing import Protocol, runtime_checkable

from .exceptions import RandomSourceError


@runtime_checkable
class RandomSource(Protocol):
    """
    A cryptographically secure source of random bytes.

    Implementations shared between threads must be safe for concurrent use;
    the scheme does not serialize access to them.
    """

    def read(self, n: int) -> bytes:
        """Return up to `n` random bytes."""
        ...


class SystemRandom:
    """Random bytes from the operating system CSPRNG."""

    def read(self, n: int) -> bytes:
        """Return exactly `n` bytes from `secrets.token_bytes`."""
        return secrets.token_bytes(n)

    def __repr__(self) -> str:
        return "SystemRandom()"


SYSTEM_RANDOM = SystemRandom()
"""The default random source."""


def read_exact(source: RandomSource, n: int) -> bytes:
    """
    Draw exactly `n` bytes from `source`.

    Short reads are not retried.

    Raises:
        RandomSourceError: If the source fails, returns something other than
            bytes, or returns fewer than `n` bytes.
    """
    try:
        data = source.read(n)
    except OSError as exc:
        raise RandomSourceError(requested=n, received=0, detail=str(exc)) from exc

    if not isinstance(data, (bytes, bytearray)):
        raise RandomSourceError(
            requested=n, received=0, detail=f"source returned {type(data).__name__}"
        )

    if len(data) < n:
        raise RandomSourceError(requested=n, received=len(data))
    return bytes(data[:n])

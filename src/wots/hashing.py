"""
Defines the hash primitive consumed by the scheme.

The scheme treats the hash function as an external collaborator. Any one-way
hash with a fixed output size qualifies, as long as it follows the `hashlib`
object shape: a `digest_size` attribute, an `update` method and a `digest`
method.

Hash objects carry mutable state, so the scheme never holds on to one. It is
configured with zero-argument *factories* instead (such as `hashlib.sha256`)
and asks for a fresh instance every time it starts a new hash computation.
"""

from __future__ import annotations

import hashlib
from functools import partial
from typing import Callable, Protocol

from Crypto.Hash import keccak

from .exceptions import InvalidParameterError


class HashFunction(Protocol):
    """The subset of the `hashlib` object interface the scheme relies on."""

    @property
    def digest_size(self) -> int:
        """Size of the hash output in bytes."""
        ...

    def update(self, data: bytes, /) -> object:
        """Absorb more data into the hash state."""
        ...

    def digest(self) -> bytes:
        """Return the hash of all data absorbed so far."""
        ...


HashFactory = Callable[[], HashFunction]
"""A zero-argument callable returning a fresh hash instance."""


def output_size(factory: HashFactory) -> int:
    """Return the output size in bytes of the hashes built by `factory`."""
    return factory().digest_size


def _keccak256() -> HashFunction:
    """Keccak-256 with the pre-standard padding, as used by Ethereum."""
    return keccak.new(digest_bits=256)


HASH_FUNCTIONS: dict[str, HashFactory] = {
    "sha256": hashlib.sha256,
    "sha384": hashlib.sha384,
    "sha512": hashlib.sha512,
    "sha3_256": hashlib.sha3_256,
    "sha3_512": hashlib.sha3_512,
    "blake2b": hashlib.blake2b,
    "blake2s": hashlib.blake2s,
    "keccak256": _keccak256,
}
"""Hash factories addressable by name from the configuration and the CLI."""

# Truncated SHA-512 depends on the OpenSSL build backing `hashlib`.
if "sha512_256" in hashlib.algorithms_available:
    HASH_FUNCTIONS["sha512_256"] = partial(hashlib.new, "sha512_256")


def get_hash_factory(name: str) -> HashFactory:
    """
    Look up a registered hash factory by name.

    Args:
        name: One of the keys of `HASH_FUNCTIONS` (case-insensitive).

    Returns:
        The matching factory.

    Raises:
        InvalidParameterError: If no hash is registered under `name`.
    """
    try:
        return HASH_FUNCTIONS[name.lower()]
    except KeyError:
        raise InvalidParameterError(
            "hash name", name, f"supported values: {sorted(HASH_FUNCTIONS)}"
        ) from None

"""
Randomized message hashing with a Winternitz checksum.

### Randomized Hashing

The message is hashed as specified in NIST SP 800-106 "Randomized Hashing for
Digital Signatures", with a randomization string `r` (the signature nonce) as
long as the hash output:

    m = msg || 0x80 || 0x00 ... (padded to a multiple of len(r))
    d = H(r || m_1 xor r || ... || m_L xor r || rv_length_indicator)

where `rv_length_indicator` is `len(r)` as 2 big-endian bytes. The nonce is
public and travels at the front of the signature, so the verifier recomputes
the same digest.

### Checksum

Each digest byte `d[i]` tells the signer how far to advance chain `i`. Anyone
holding a signature can push a chain further, so an attacker could raise any
`d[i]` at will. The checksum `sum(256 - d[i]) mod 2^16` moves in the opposite
direction: raising a digest byte lowers the checksum, which would require
walking a checksum chain *backwards*.
"""

from __future__ import annotations

from .constants import CHAIN_LENGTH, CHECKSUM_SIZE, LENGTH_INDICATOR_SIZE, PAD_BYTE
from .hashing import HashFunction


def _xor(block: bytes, nonce: bytes) -> bytes:
    return bytes(m ^ r for m, r in zip(block, nonce))


def digest_checksum(digest: bytes) -> bytes:
    """Return `sum(256 - d[i]) mod 2^16` over `digest`, as 2 big-endian bytes."""
    total = sum(CHAIN_LENGTH - v for v in digest) & 0xFFFF
    return total.to_bytes(CHECKSUM_SIZE, "big")


def randomized_digest(hasher: HashFunction, nonce: bytes, message: bytes) -> bytes:
    """
    Compute the randomized digest of `message` followed by its checksum.

    Args:
        hasher: A fresh hash instance; it is consumed by this call.
        nonce: The randomization string, `digest_size` bytes long.
        message: The message of arbitrary length.

    Returns:
        `digest_size + 2` bytes: the digest and its big-endian checksum.
    """
    block_size = len(nonce)
    if block_size == 0:
        raise ValueError("nonce must not be empty")

    hasher.update(nonce)

    # Full blocks are masked with the nonce as they are.
    full = len(message) - len(message) % block_size
    for offset in range(0, full, block_size):
        hasher.update(_xor(message[offset : offset + block_size], nonce))

    # The tail always gets a padding block, even when it is empty.
    tail = message[full:] + bytes([PAD_BYTE])
    tail += bytes(block_size - len(tail))
    hasher.update(_xor(tail, nonce))

    hasher.update(block_size.to_bytes(LENGTH_INDICATOR_SIZE, "big"))
    digest = hasher.digest()

    return digest + digest_checksum(digest)

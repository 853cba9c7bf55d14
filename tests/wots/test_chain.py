"""Tests for hash chain evaluation."""

import hashlib

import pytest
from hypothesis import given
from hypothesis import strategies as st

from wots.chain import chain_segments, hash_chain


def test_zero_steps_returns_copy() -> None:
    """A chain of length zero is the input itself."""
    block = bytearray(b"\x07" * 32)
    out = hash_chain(hashlib.sha256, block, 0)

    assert out == bytes(block)
    assert isinstance(out, bytes)

    # Mutating the input afterwards must not affect the result.
    block[0] = 0
    assert out == b"\x07" * 32


def test_steps_are_plain_iterated_hashing() -> None:
    """Each step hashes the previous output only."""
    block = b"\x01" * 32
    expected = hashlib.sha256(hashlib.sha256(hashlib.sha256(block).digest()).digest()).digest()

    assert hash_chain(hashlib.sha256, block, 1) == hashlib.sha256(block).digest()
    assert hash_chain(hashlib.sha256, block, 3) == expected


def test_negative_steps_rejected() -> None:
    """Chains cannot be walked backwards."""
    with pytest.raises(ValueError, match="non-negative"):
        hash_chain(hashlib.sha256, b"\x00" * 32, -1)


@given(a=st.integers(0, 40), b=st.integers(0, 40))
def test_chains_compose(a: int, b: int) -> None:
    """Walking `a` then `b` steps equals walking `a + b` steps at once."""
    block = b"\x5a" * 32
    partial = hash_chain(hashlib.sha256, block, a)

    assert hash_chain(hashlib.sha256, partial, b) == hash_chain(hashlib.sha256, block, a + b)


def test_sign_and_verify_steps_meet_at_chain_end() -> None:
    """For every digest byte, `v` plus `256 - v` steps reach the same end."""
    block = b"\xc3" * 32
    end = hash_chain(hashlib.sha256, block, 256)

    for v in (0, 1, 127, 254, 255):
        intermediate = hash_chain(hashlib.sha256, block, v)
        assert hash_chain(hashlib.sha256, intermediate, 256 - v) == end


def test_chain_segments_preserves_order() -> None:
    """Each segment is advanced by its own step count."""
    segments = [bytes([i]) * 32 for i in range(5)]
    steps = [0, 1, 2, 3, 4]

    result = chain_segments(hashlib.sha256, segments, steps)

    assert result == [hash_chain(hashlib.sha256, s, n) for s, n in zip(segments, steps)]


def test_chain_segments_parallel_matches_sequential() -> None:
    """Spreading segments over threads does not change the output."""
    segments = [bytes([i]) * 32 for i in range(34)]
    steps = [(7 * i) % 256 for i in range(34)]

    sequential = chain_segments(hashlib.sha256, segments, steps, max_workers=1)
    parallel = chain_segments(hashlib.sha256, segments, steps, max_workers=4)

    assert parallel == sequential


def test_chain_segments_length_mismatch() -> None:
    """Every segment needs exactly one step count."""
    with pytest.raises(ValueError, match="segments"):
        chain_segments(hashlib.sha256, [b"\x00" * 32] * 3, [1, 2])

"""Tests for the scheme parameter set."""

import hashlib
from functools import partial

import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import ValidationError

from wots import InvalidParameterError, SchemeConfig, WotsScheme
from wots.rand import SYSTEM_RANDOM
from tests.wots.helpers import xof_factory


@given(st.integers(16, 128))
def test_sizes_follow_digest_size(n: int) -> None:
    """Every key and signature size is a pure function of the output size."""
    config = SchemeConfig(hash_factory=xof_factory(n))

    assert config.digest_size == n
    assert config.chain_block_size == n
    assert config.private_key_size == (n + 2) * n
    assert config.public_key_size == n
    assert config.signature_size == n + (n + 2) * n
    config.check_sizes()


def test_sha256_sizes() -> None:
    """SHA-256 yields 32-byte public keys and 1120-byte signatures."""
    scheme = WotsScheme.from_hash(hashlib.sha256)

    assert scheme.private_key_size == 34 * 32
    assert scheme.public_key_size == 32
    assert scheme.signature_size == 1120


def test_two_hash_sizes() -> None:
    """The chain hash sets the block size, the key hash the digest size."""
    config = SchemeConfig(hash_factory=hashlib.sha512, chain_hash_factory=hashlib.sha256)

    assert config.digest_size == 64
    assert config.chain_block_size == 32
    assert config.private_key_size == 66 * 32
    assert config.public_key_size == 64
    assert config.signature_size == 64 + 66 * 32


def test_chain_factory_defaults_to_hash_factory() -> None:
    """Without a dedicated chain hash, chains use the message hash."""
    config = SchemeConfig(hash_factory=hashlib.sha256)
    assert config.chain_factory is hashlib.sha256

    config = SchemeConfig(hash_factory=hashlib.sha256, chain_hash_factory=hashlib.sha3_256)
    assert config.chain_factory is hashlib.sha3_256


def test_default_random_source() -> None:
    """Configurations draw from the operating system unless told otherwise."""
    config = SchemeConfig(hash_factory=hashlib.sha256)
    assert type(config.random_source) is type(SYSTEM_RANDOM)


@pytest.mark.parametrize("size", [8, 15, 129, 160])
def test_out_of_range_sizes_fail_validation(size: int) -> None:
    """Output sizes outside [16, 128] are rejected."""
    config = SchemeConfig(hash_factory=xof_factory(size))

    with pytest.raises(InvalidParameterError, match="digest size") as exc_info:
        config.check_sizes()
    assert exc_info.value.value == size


def test_out_of_range_chain_hash_fails_validation() -> None:
    """The chain block size is held to the same bounds."""
    config = SchemeConfig(hash_factory=hashlib.sha256, chain_hash_factory=xof_factory(8))

    with pytest.raises(InvalidParameterError, match="chain block size"):
        config.check_sizes()


def test_construction_does_not_validate() -> None:
    """An unusable hash still yields a configuration whose sizes can be queried."""
    config = SchemeConfig(hash_factory=partial(hashlib.blake2b, digest_size=8))

    assert config.private_key_size == 10 * 8
    assert config.signature_size == 8 + 10 * 8


def test_config_is_frozen() -> None:
    """Configurations are immutable once built."""
    config = SchemeConfig(hash_factory=hashlib.sha256)

    with pytest.raises(ValidationError):
        config.max_workers = 4  # type: ignore[misc]


def test_copy_with_updates() -> None:
    """`copy` derives a new validated configuration."""
    config = SchemeConfig(hash_factory=hashlib.sha256)
    threaded = config.copy(max_workers=4)

    assert threaded.max_workers == 4
    assert threaded.hash_factory is hashlib.sha256
    assert config.max_workers == 1

    with pytest.raises(ValidationError):
        config.copy(max_workers=0)


def test_random_source_must_have_read() -> None:
    """Objects without a `read` method are not random sources."""
    with pytest.raises(ValidationError):
        SchemeConfig(hash_factory=hashlib.sha256, random_source=object())  # type: ignore[arg-type]

"""
Shared pytest fixtures for the one-time signature tests.
"""

from __future__ import annotations

import hashlib

import pytest

from wots import SchemeConfig, WotsScheme
from tests.wots.helpers import ZeroRandom


@pytest.fixture
def sha256_scheme() -> WotsScheme:
    """SHA-256 scheme drawing from the system random source."""
    return WotsScheme(SchemeConfig(hash_factory=hashlib.sha256))


@pytest.fixture
def zero_scheme() -> WotsScheme:
    """SHA-256 scheme with the deterministic all-zero random source."""
    return WotsScheme(SchemeConfig(hash_factory=hashlib.sha256, random_source=ZeroRandom()))

"""
Global configuration for the one-time signature scheme.

This module contains environment-specific settings that apply to the default
scheme and the command line interface.
"""

import os

from .hashing import HASH_FUNCTIONS

WOTS_HASH = os.environ.get("WOTS_HASH", "sha256").lower()
"""Name of the hash used by the default scheme. Defaults to 'sha256'."""

if WOTS_HASH not in HASH_FUNCTIONS:
    raise ValueError(
        f"Invalid WOTS_HASH environment variable: '{WOTS_HASH}'. "
        f"Supported values: {sorted(HASH_FUNCTIONS)}"
    )

_workers = os.environ.get("WOTS_WORKERS", "1")

if not _workers.isdigit() or int(_workers) < 1:
    raise ValueError(
        f"Invalid WOTS_WORKERS environment variable: '{_workers}'. Expected a positive integer."
    )

WOTS_WORKERS = int(_workers)
"""Threads used to advance independent hash chains. Defaults to 1 (sequential)."""

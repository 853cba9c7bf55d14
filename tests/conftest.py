"""Pytest configuration and shared fixtures."""

import os

from hypothesis import settings

# Tests assume the default scheme; ignore settings from the caller's shell.
os.environ.pop("WOTS_HASH", None)
os.environ.pop("WOTS_WORKERS", None)

# Create a profile named "no_deadline" with deadline disabled.
#
# Every example walks full-length hash chains, which is slow in pure Python.
settings.register_profile("no_deadline", deadline=None)
settings.load_profile("no_deadline")

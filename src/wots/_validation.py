"""Internal validation utilities for the scheme parameters."""

from __future__ import annotations

from .constants import MAX_OUTPUT_SIZE, MIN_OUTPUT_SIZE
from .exceptions import InvalidParameterError


def enforce_output_size(name: str, size: int) -> None:
    """
    Validate that a hash output size lies in the accepted range.

    Shorter outputs leave chains open to brute-force inversion. Longer ones
    would overflow the 2-byte checksum and length indicator encodings.

    Args:
        name: The parameter being checked, used in the error message.
        size: The output size in bytes.

    Raises:
        InvalidParameterError: If `size` is outside `[MIN_OUTPUT_SIZE, MAX_OUTPUT_SIZE]`.
    """
    if not MIN_OUTPUT_SIZE <= size <= MAX_OUTPUT_SIZE:
        raise InvalidParameterError(
            name,
            size,
            f"hash output size must be between {MIN_OUTPUT_SIZE} and {MAX_OUTPUT_SIZE} bytes",
        )

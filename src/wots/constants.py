"""
Defines the fixed constants of the Winternitz one-time signature scheme.

The scheme is instantiated with a Winternitz parameter of `w = 8` bits: every
byte of the message digest selects a position in a hash chain of length 256.
Public key generation therefore costs `(n + 2) * 256 + 1` hash evaluations,
where `n` is the hash output size in bytes. Signing or verifying a single
message costs on average `1 + ((n + 2) * 255) / 2` evaluations.
"""

from typing_extensions import Final

W: Final = 8
"""The Winternitz parameter, in bits per chain."""

CHAIN_LENGTH: Final = 1 << W
"""
The number of hashing steps from a private segment to its public end.

A digest byte `v` makes the signer advance a chain by `v` steps and the
verifier by the remaining `CHAIN_LENGTH - v` steps.
"""

MIN_OUTPUT_SIZE: Final = 16
"""The smallest accepted hash output size, in bytes."""

MAX_OUTPUT_SIZE: Final = 128
"""The largest accepted hash output size, in bytes."""

CHECKSUM_SIZE: Final = 2
"""Width of the big-endian digest checksum appended to every message digest."""

LENGTH_INDICATOR_SIZE: Final = 2
"""Width of the big-endian randomization length indicator fed to the hash."""

PAD_BYTE: Final = 0x80
"""The byte appended to the message before zero padding the last block."""

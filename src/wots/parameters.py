"""
The parameter set of a scheme instance.

All sizes follow from the output sizes of the configured hash functions:

- `n = digest_size` is the output size of the message/key hash,
- `c = chain_block_size` is the output size of the chain hash,

and then

- private key: `(n + 2) * c` bytes,
- public key: `n` bytes,
- signature: `n + (n + 2) * c` bytes.
"""

from __future__ import annotations

from pydantic import Field

from ._validation import enforce_output_size
from .constants import CHECKSUM_SIZE
from .hashing import HashFactory, output_size
from .rand import SYSTEM_RANDOM, RandomSource
from .types import FrozenModel


class SchemeConfig(FrozenModel):
    """
    An immutable parameter set, safe to share between threads.

    Sizes are not validated at construction, so a configuration can always be
    queried for its sizes. Key generation calls `check_sizes` and refuses out of
    range hashes.
    """

    hash_factory: HashFactory
    """Builds the hash used for message digests and for the public key."""

    chain_hash_factory: HashFactory | None = None
    """Builds the hash used to advance chains. Defaults to `hash_factory`."""

    random_source: RandomSource = SYSTEM_RANDOM
    """Source of private keys and signature nonces."""

    max_workers: int = Field(default=1, ge=1)
    """Threads used to advance the independent chain segments."""

    @property
    def chain_factory(self) -> HashFactory:
        """The factory actually used for chain steps."""
        return self.chain_hash_factory or self.hash_factory

    @property
    def digest_size(self) -> int:
        """Output size `n` of the message/key hash, in bytes."""
        return output_size(self.hash_factory)

    @property
    def chain_block_size(self) -> int:
        """Output size `c` of the chain hash, in bytes."""
        return output_size(self.chain_factory)

    @property
    def num_chains(self) -> int:
        """Number of chain segments: one per digest byte plus the checksum."""
        return self.digest_size + CHECKSUM_SIZE

    @property
    def private_key_size(self) -> int:
        """Private key size in bytes."""
        return self.num_chains * self.chain_block_size

    @property
    def public_key_size(self) -> int:
        """Public key size in bytes."""
        return self.digest_size

    @property
    def signature_size(self) -> int:
        """Signature size in bytes."""
        return self.digest_size + self.private_key_size

    def check_sizes(self) -> None:
        """
        Check that the hashes produce sizes the scheme can use securely.

        Raises:
            InvalidParameterError: If an output size is outside `[16, 128]`.
        """
        enforce_output_size("digest size", self.digest_size)
        enforce_output_size("chain block size", self.chain_block_size)

"""
Defines the core interface for the one-time signature scheme.

The high-level functions (`key_gen`, `sign`, `verify`) constitute the public
API of the signature scheme.
"""

from __future__ import annotations

import hashlib
import hmac
import logging
from typing import Tuple

from .chain import chain_segments
from .config import WOTS_HASH, WOTS_WORKERS
from .constants import CHAIN_LENGTH
from .containers import PrivateKey, PublicKey, Signature
from .exceptions import InvalidKeySizeError
from .hashing import HashFactory, get_hash_factory
from .message_hash import randomized_digest
from .parameters import SchemeConfig
from .rand import SYSTEM_RANDOM, RandomSource, read_exact

logger = logging.getLogger(__name__)


class WotsScheme:
    """Instance of the Winternitz one-time signature scheme for a given config."""

    def __init__(self, config: SchemeConfig):
        """Initializes the scheme with a specific parameter set."""
        self.config = config

    @classmethod
    def from_hash(
        cls,
        hash_factory: HashFactory,
        chain_hash_factory: HashFactory | None = None,
        random_source: RandomSource = SYSTEM_RANDOM,
        max_workers: int = 1,
    ) -> WotsScheme:
        """Build a scheme directly from its hash factories."""
        return cls(
            SchemeConfig(
                hash_factory=hash_factory,
                chain_hash_factory=chain_hash_factory,
                random_source=random_source,
                max_workers=max_workers,
            )
        )

    def __repr__(self) -> str:
        config = self.config
        return (
            f"WotsScheme(digest_size={config.digest_size}, "
            f"chain_block_size={config.chain_block_size})"
        )

    @property
    def private_key_size(self) -> int:
        """Private key size in bytes."""
        return self.config.private_key_size

    @property
    def public_key_size(self) -> int:
        """Public key size in bytes."""
        return self.config.public_key_size

    @property
    def signature_size(self) -> int:
        """Signature size in bytes."""
        return self.config.signature_size

    def derive_public_key(self, private_key: bytes) -> PublicKey:
        """
        Deterministically derive the public key of raw private key material.

        ### Derivation Algorithm

        1.  Split the private key into `digest_size + 2` segments of
            `chain_block_size` bytes.
        2.  Advance every segment the full `CHAIN_LENGTH` steps with the chain hash.
        3.  Hash the concatenated chain ends once with the key hash.

        Raises:
            InvalidKeySizeError: If `private_key` is not `private_key_size` bytes.
        """
        config = self.config
        if len(private_key) != config.private_key_size:
            raise InvalidKeySizeError(expected=config.private_key_size, actual=len(private_key))

        block_size = config.chain_block_size
        segments = [
            bytes(private_key[offset : offset + block_size])
            for offset in range(0, len(private_key), block_size)
        ]
        ends = chain_segments(
            config.chain_factory,
            segments,
            [CHAIN_LENGTH] * len(segments),
            config.max_workers,
        )

        key_hash = config.hash_factory()
        for end in ends:
            key_hash.update(end)
        return key_hash.digest()

    def key_from_bytes(self, data: bytes) -> PrivateKey:
        """
        Wrap existing private key material into a fresh `PrivateKey`.

        The public key is derived from the material.

        Raises:
            InvalidParameterError: If the configured hashes have unusable sizes.
            InvalidKeySizeError: If `data` is not `private_key_size` bytes.
        """
        self.config.check_sizes()
        public_key = self.derive_public_key(data)
        return PrivateKey(data, public_key)

    def key_gen(self) -> Tuple[PublicKey, PrivateKey]:
        """
        Generates a new cryptographic key pair.

        This is a **randomized** algorithm: the private key is drawn from the
        configured random source and the public key derived from it.

        Returns:
            A tuple containing the public key and the one-time private key.

        Raises:
            InvalidParameterError: If the configured hashes have unusable sizes.
            RandomSourceError: If the random source cannot supply the key.
        """
        config = self.config
        config.check_sizes()

        data = read_exact(config.random_source, config.private_key_size)
        sk = self.key_from_bytes(data)

        logger.debug(
            "Generated key pair: %d-byte public key, %d chains of %d bytes",
            config.public_key_size,
            config.num_chains,
            config.chain_block_size,
        )
        return sk.public_key, sk

    def sign(self, sk: PrivateKey, message: bytes) -> bytes:
        """
        Produces a digital signature for a given message.

        This is a **randomized** algorithm.

        **CRITICAL SECURITY WARNING**: A private key must **NEVER** sign two
        messages. Two signatures reveal enough intermediate chain values to
        forge a third. The key is therefore wiped as part of signing.

        ### Signing Algorithm

        1.  **Nonce**: Draw a fresh `digest_size`-byte randomization string.
        2.  **Digest**: Compute `d = randomized_digest(H, nonce, message)`,
            `digest_size + 2` bytes including the checksum.
        3.  **Chains**: Advance private segment `i` by `d[i]` steps.
        4.  **Wipe**: Zero the private key and mark it consumed.

        Args:
            sk: The fresh private key.
            message: The message to be signed.

        Returns:
            The signature bytes, `nonce || chain values`.

        Raises:
            InvalidKeySizeError: If `sk` does not match the scheme's key size.
            RandomSourceError: If no nonce can be drawn. The key stays usable.
            KeyConsumedError: If `sk` was already used.
        """
        config = self.config
        if len(sk) != config.private_key_size:
            raise InvalidKeySizeError(expected=config.private_key_size, actual=len(sk))

        # The nonce must differ between signatures, but since every key signs
        # at most once it is drawn here rather than at key generation.
        nonce = read_exact(config.random_source, config.digest_size)
        digest = randomized_digest(config.hash_factory(), nonce, message)

        with sk.consume() as key:
            segments = list(key.segments(config.chain_block_size))
            chains = chain_segments(
                config.chain_factory, segments, list(digest), config.max_workers
            )

        logger.debug("Signed %d-byte message; private key consumed", len(message))
        return Signature(nonce=nonce, chains=tuple(chains)).encode_bytes()

    def verify(self, pk: PublicKey, message: bytes, sig: bytes) -> bool:
        """
        Verifies a digital signature against a public key and a message.

        This is a **deterministic** algorithm. Malformed inputs yield `False`.

        ### Verification Algorithm

        1.  **Re-digest**: Recompute `d` from the nonce at the front of the signature.
        2.  **Complete Chains**: Advance signature segment `i` by the remaining
            `CHAIN_LENGTH - d[i]` steps, reaching the chain ends key generation
            computed.
        3.  **Compare**: Hash the chain ends and compare with the public key.

        Note: running time depends on the message and the signature, which are
        both public.

        Returns:
            `True` if the signature is valid, `False` otherwise.
        """
        config = self.config
        if len(pk) != config.public_key_size or len(sig) != config.signature_size:
            logger.debug(
                "Rejected signature with malformed sizes: key %d, signature %d",
                len(pk),
                len(sig),
            )
            return False

        signature = Signature.decode_bytes(
            bytes(sig),
            digest_size=config.digest_size,
            chain_block_size=config.chain_block_size,
        )
        digest = randomized_digest(config.hash_factory(), signature.nonce, message)

        ends = chain_segments(
            config.chain_factory,
            signature.chains,
            [CHAIN_LENGTH - v for v in digest],
            config.max_workers,
        )

        key_hash = config.hash_factory()
        for end in ends:
            key_hash.update(end)

        valid = hmac.compare_digest(key_hash.digest(), bytes(pk))
        logger.debug("Signature verification result: %s", valid)
        return valid


SHA256_SCHEME = WotsScheme(SchemeConfig(hash_factory=hashlib.sha256))
"""SHA-256 instance: 32-byte public keys and 1120-byte signatures."""

SHA512_SCHEME = WotsScheme(SchemeConfig(hash_factory=hashlib.sha512))
"""SHA-512 instance: 64-byte public keys and 4288-byte signatures."""

DEFAULT_SCHEME = WotsScheme(
    SchemeConfig(hash_factory=get_hash_factory(WOTS_HASH), max_workers=WOTS_WORKERS)
)
"""The scheme selected by the `WOTS_HASH` and `WOTS_WORKERS` settings."""

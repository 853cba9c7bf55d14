"""
Hash chains, the primitive every other part of the scheme is built on.

A chain starts at a secret block and is advanced by hashing the running value,
one fresh hash instance per step:

    chain(x, 0) = x
    chain(x, n) = H(chain(x, n - 1))

Key generation walks every private segment to its public end. A signature
reveals the intermediate value after `d[i]` steps, and the verifier finishes the
remaining `CHAIN_LENGTH - d[i]` steps itself.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

from .hashing import HashFactory


def hash_chain(factory: HashFactory, block: bytes, steps: int) -> bytes:
    """
    Hash `block` iteratively `steps` times: `H(...H(block))`.

    Each step hashes only the current running value. With `steps == 0` an
    unmodified copy of `block` is returned.

    Args:
        factory: Builds the hash instance used for each step.
        block: The starting value.
        steps: The number of hash applications, must be non-negative.

    Returns:
        The value reached after `steps` applications.
    """
    if steps < 0:
        raise ValueError(f"chain steps must be non-negative, got {steps}")

    current = bytes(block)
    for _ in range(steps):
        h = factory()
        h.update(current)
        current = h.digest()
    return current


def chain_segments(
    factory: HashFactory,
    segments: Sequence[bytes],
    steps: Sequence[int],
    max_workers: int = 1,
) -> list[bytes]:
    """
    Advance many independent chain segments.

    Segment `i` is advanced `steps[i]` times. Segments never read each other's
    state, so with `max_workers > 1` they are spread over a thread pool.

    Returns:
        The advanced segments, in input order.
    """
    if len(segments) != len(steps):
        raise ValueError(f"got {len(segments)} segments but {len(steps)} step counts")

    if max_workers <= 1 or len(segments) <= 1:
        return [hash_chain(factory, block, n) for block, n in zip(segments, steps)]

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(lambda job: hash_chain(factory, *job), zip(segments, steps)))

"""Randomness sources for candidate generation, primality bases and exponent selection.

Every randomized operation in the library accepts an `rng` argument satisfying `RandomSource`. If omitted, the
shared `SystemRandomSource` backed by `secrets` is used. `SeededRandomSource` exists purely for reproducible tests
and demonstrations and must never be used for real keys.

Typical usage example:

    rng = SeededRandomSource(1337)
    pub, priv = generate_keypair(64, rng=rng)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import random
import secrets
from typing import Protocol


class RandomSource(Protocol):
    """Anything able to produce uniform integers below a bound and raw random bytes."""

    def randbelow(self, k: int) -> int:
        """Return a uniformly distributed integer in range [0, k-1]."""
        ...

    def token_bytes(self, n: int) -> bytes:
        """Return `n` independent random bytes."""
        ...


class SystemRandomSource:
    """Cryptographically strong source, proxying the `secrets` module."""

    def randbelow(self, k: int) -> int:
        return secrets.randbelow(k)

    def token_bytes(self, n: int) -> bytes:
        return secrets.token_bytes(n)


class SeededRandomSource:
    """Deterministic source built on a private `random.Random` instance.

    Attributes:
        seed: The seed the source was created with.
    """

    def __init__(self, seed: int | str | bytes | None = None) -> None:
        self.seed = seed
        self._random = random.Random(seed)

    def randbelow(self, k: int) -> int:
        if k <= 0:
            raise ValueError("Upper bound must be positive")
        return self._random.randrange(k)

    def token_bytes(self, n: int) -> bytes:
        return self._random.randbytes(n)


_DEFAULT_SOURCE = SystemRandomSource()


def get_default_source() -> SystemRandomSource:
    return _DEFAULT_SOURCE


def resolve(rng: RandomSource | None) -> RandomSource:
    """Fall back to the default system source when no `rng` was supplied."""
    if rng is None:
        return _DEFAULT_SOURCE
    return rng

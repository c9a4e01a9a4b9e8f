"""Core Key Generation Utility, mainly focusing on the generation of random probable primes.

This module is responsible for generating textbook RSA key pairs. Candidates are built from random bytes and
filtered through a Miller-Rabin test which, unless asked otherwise, runs a single round. Both the single round and
the lack of any check on the relation between `p` and `q` are known weaknesses kept on purpose: this is an academic
implementation, not a production one.

Typical usage example:

    p = find_prime(512)
    pub, priv = generate_keypair(512)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import math
import warnings

from rsacore import entropy
from rsacore.arith import inv_mod
from rsacore.arith import powmod
from rsacore.rsa import KeyPair
from rsacore.rsa import PrivateKey
from rsacore.rsa import PublicKey

_MINIMUM_CANDIDATE_BITS: int = 8


def gen_random(bits: int, rng: entropy.RandomSource | None = None) -> int:
    """Generate an odd random candidate of roughly `bits` bits.

    Only whole bytes are drawn, so a `bits` value that is not a multiple of 8 is truncated down. An even result is
    decremented by one to make it odd. With fewer than 8 bits nothing is drawn and the result is -1.

    Args:
        bits: Requested size of the candidate in bits. Must be >= 0.
        rng: Randomness source. Defaults to the system source.

    Returns:
        An odd integer in range [-1, 2**(bits // 8 * 8) - 1].

    Raises:
        ValueError: If `bits` is negative.
    """
    if bits < 0:
        raise ValueError("bits must be >= 0")
    nbytes = bits // 8
    if nbytes == 0:
        warnings.warn(f"Requested {bits} bits is below a single byte, candidate degenerates to -1.", RuntimeWarning)
    raw = entropy.resolve(rng).token_bytes(nbytes)
    candidate = int.from_bytes(raw, byteorder="big", signed=False)
    if candidate % 2 == 0:
        candidate -= 1
    return candidate


def _decompose(w: int) -> tuple[int, int]:
    """Split `w` into (m, k) such that `w == m * 2**k` and `m` is odd. `w` must be positive."""
    k = (w & -w).bit_length() - 1
    return w >> k, k


def is_prime(n: int, rounds: int = 1, rng: entropy.RandomSource | None = None) -> bool:
    """Perform a Miller-Rabin primality test.

    By default only a single round is run, giving a bound of 3/4 on the chance of a composite slipping through.
    A prime is never rejected. Further rounds have to be requested explicitly through `rounds`.

    Args:
        n: The candidate to test.
        rounds: Number of independent Miller-Rabin rounds. Defaults to 1. Must be >= 1.
        rng: Randomness source for the bases. Defaults to the system source.

    Returns:
        True if `n` is probably prime, False otherwise.

    Raises:
        ValueError: If `rounds` is below 1.
    """
    if rounds < 1:
        raise ValueError("rounds must be >= 1")
    if n <= 3:
        return n in (2, 3)
    if n % 2 == 0:
        return False
    rng = entropy.resolve(rng)
    tn = n - 1
    m, k = _decompose(tn)
    for _ in range(rounds):
        a = rng.randbelow(n - 3) + 2
        b = powmod(a, m, n)
        if b == 1:
            continue
        for _ in range(k):
            if b == tn:
                break
            b = powmod(b, 2, n)
        else:
            return False
    return True


def find_prime(bits: int, rng: entropy.RandomSource | None = None, rounds: int = 1) -> int:
    """Search for a probable prime of at most `bits` bits.

    Keeps drawing candidates from `gen_random` until one passes `is_prime`. There is no cap on attempts.

    Args:
        bits: Size of the candidates in bits. Must be >= 8.
        rng: Randomness source. Defaults to the system source.
        rounds: Miller-Rabin rounds per candidate. Defaults to 1.

    Returns:
        A probable prime.

    Raises:
        ValueError: If `bits` is too small to ever yield a prime.
    """
    if bits < _MINIMUM_CANDIDATE_BITS:
        raise ValueError(f"bits must be >= {_MINIMUM_CANDIDATE_BITS}")
    rng = entropy.resolve(rng)
    while True:
        candidate = gen_random(bits, rng)
        if is_prime(candidate, rounds=rounds, rng=rng):
            return candidate


def generate_keypair(bits: int, rng: entropy.RandomSource | None = None, rounds: int = 1) -> KeyPair:
    """Generates a textbook RSA key pair.

    Both primes are drawn independently, and the public exponent is picked at random among the values coprime to
    the totient.

    Args:
        bits: Size of each prime in bits, the modulus ends up around twice as large. Must be >= 8.
        rng: Randomness source. Defaults to the system source.
        rounds: Miller-Rabin rounds per prime candidate. Defaults to 1.

    Returns:
        KeyPair of ((n, e), (n, p, q, d)).

    Raises:
        RuntimeError: If the private exponent cannot be derived. Impossible for a coprime `e`.
    """
    rng = entropy.resolve(rng)
    p = find_prime(bits, rng, rounds)
    q = find_prime(bits, rng, rounds)
    n = p * q
    phi = (p - 1) * (q - 1)
    while True:
        e = rng.randbelow(phi)
        if math.gcd(e, phi) == 1:
            break
    d = inv_mod(e, phi)
    if d is None:
        raise RuntimeError(f"Public exponent {e} has no inverse modulo the totient.")
    return KeyPair(PublicKey(n, e), PrivateKey(n, p, q, d))

"""Modular arithmetic underpinning every RSA operation in the library.

Covers modular exponentiation by square-and-multiply and modular inversion via the Extended Euclidean Algorithm.
Both work on plain python integers, so magnitudes of hundreds or thousands of bits are handled natively.

Typical usage example:

    c = powmod(42, 65537, n)
    d = inv_mod(e, phi)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


def powmod(x: int, b: int, n: int) -> int:
    """Computes `x**b mod n` by iterative square-and-multiply.

    Uses O(log b) modular multiplications. Every other component of the library goes through here.

    Args:
        x: The base.
        b: The exponent. Must be >= 0.
        n: The modulus. Must be >= 1.

    Returns:
        The result of the modular exponentiation.

    Raises:
        ValueError: If `b` is negative or `n` is not positive.
    """
    if b < 0:
        raise ValueError("Exponent must be >= 0")
    if n < 1:
        raise ValueError("Modulus must be >= 1")
    z = 1
    while b > 0:
        if b & 1:
            z = (z * x) % n
        x = (x * x) % n
        b >>= 1
    return z


def inv_mod(x: int, n: int) -> int | None:
    """Computes the multiplicative inverse of `x` modulo `n`.

    Implements the Extended Euclidean Algorithm, only tracking the Bezout coefficient of `x` as the other is never
    needed. The coefficient is kept reduced modulo `n` on every step.

    Args:
        x: The number to invert. Must be > 0.
        n: The modulus. Must be > 0.

    Returns:
        The inverse in range [0, n-1], or None if `gcd(x, n) != 1` and no inverse exists.

    Raises:
        ValueError: If `x` or `n` is not positive.
    """
    if x < 1 or n < 1:
        raise ValueError("Both x and n must be > 0")
    r0, r = n, x % n
    t0, t = 0, 1
    while r > 0:
        q, rem = divmod(r0, r)
        t0, t = t, (t0 - q * t) % n
        r0, r = r, rem
    if r0 != 1:
        return None
    return t0 % n

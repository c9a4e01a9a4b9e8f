# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import math
import secrets

from cryptography.hazmat.primitives.asymmetric import rsa
import pytest
import sympy

from rsacore import arith

known_key = rsa.generate_private_key(public_exponent=65537, key_size=1024).private_numbers()
P, Q = known_key.p, known_key.q

powmod_cases = [
    (0, 0, 7),
    (0, 5, 7),
    (5, 0, 7),
    (1, 10**6, 13),
    (2, 10, 1000),
    (3, 200, 101),
    (4, 13, 497),
    (-3, 3, 10),
    (10**30, 3, 97),
    (65, 17, 3233),
    (2790, 2753, 3233),
    (2, P - 1, P),
    (7, P * Q - 1, P * Q),
]


def id_generator(param):
    if isinstance(param, int) and param > 1000000:
        return f"LargeInt-{param.bit_length()}bits"
    return str(param)


@pytest.mark.parametrize("x,b,n", powmod_cases, ids=id_generator)
def test_powmod_concrete(x, b, n):
    assert arith.powmod(x, b, n) == pow(x, b, n)


@pytest.mark.parametrize("bits", [8, 64, 256, 512, pytest.param(2048, marks=pytest.mark.slow)])
def test_powmod_random(bits):
    for _ in range(20):
        n = secrets.randbits(bits) | (1 << bits - 1)
        x = secrets.randbits(bits)
        b = secrets.randbits(bits)
        assert arith.powmod(x, b, n) == pow(x, b, n)


def test_powmod_fermat():
    # Fermat's little theorem on a genuine large prime.
    for a in (2, 3, 65537, secrets.randbelow(P - 2) + 2):
        assert arith.powmod(a, P - 1, P) == 1


@pytest.mark.parametrize("x,b,n", [(2, -1, 7), (2, 3, 0), (2, 3, -5)])
def test_powmod_validates(x, b, n):
    with pytest.raises(ValueError):
        arith.powmod(x, b, n)


@pytest.mark.parametrize("x,n", [(3, 7), (17, 3120), (65537, 2**64), (10, 17), (1, 2), (12, 7), (P - 1, P), (Q, P)],
                         ids=id_generator)
def test_inv_mod_coprime(x, n):
    inv = arith.inv_mod(x, n)
    assert inv is not None
    assert 0 <= inv < n
    assert (x * inv) % n == 1
    assert inv == sympy.mod_inverse(x, n)


def test_inv_mod_known():
    assert arith.inv_mod(3, 7) == 5
    assert arith.inv_mod(17, 3120) == 2753


def test_inv_mod_random():
    for _ in range(200):
        n = secrets.randbits(256) | 3
        x = secrets.randbelow(n - 1) + 1
        inv = arith.inv_mod(x, n)
        if math.gcd(x, n) == 1:
            assert inv == pow(x, -1, n)
        else:
            assert inv is None


@pytest.mark.parametrize("x,n", [(2, 4), (6, 9), (15, 10), (4, 2), (P, P * Q), (Q * 3, Q)], ids=id_generator)
def test_inv_mod_no_inverse(x, n):
    assert math.gcd(x, n) > 1
    assert arith.inv_mod(x, n) is None


def test_inv_mod_zero_inverse_not_absence():
    # Modulo 1 every number is its own (zero) inverse, which must not read as missing.
    assert arith.inv_mod(5, 1) == 0


@pytest.mark.parametrize("x,n", [(0, 7), (-3, 7), (3, 0), (3, -7)])
def test_inv_mod_validates(x, n):
    with pytest.raises(ValueError):
        arith.inv_mod(x, n)

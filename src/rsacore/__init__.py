"""Minimal textbook RSA primitives in an Academic Sense.

Provides key pair generation, modular arithmetic and unpadded RSA encryption/decryption over plain integers.
Primality is judged by a single-round Miller-Rabin test unless more rounds are requested. Not fit for protecting
real data.

Typical usage example:

    pub, priv = generate_keypair(512)
    c = encrypt(pub)(1234)
    m = decrypt(priv)(c)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from rsacore.arith import inv_mod
from rsacore.arith import powmod
from rsacore.entropy import RandomSource
from rsacore.entropy import SeededRandomSource
from rsacore.entropy import SystemRandomSource
from rsacore.keygen import find_prime
from rsacore.keygen import gen_random
from rsacore.keygen import generate_keypair
from rsacore.keygen import is_prime
from rsacore.rsa import decrypt
from rsacore.rsa import Decryptor
from rsacore.rsa import encrypt
from rsacore.rsa import Encryptor
from rsacore.rsa import KeyPair
from rsacore.rsa import PrivateKey
from rsacore.rsa import PublicKey

__version__ = "0.0.1"
__all__ = [
    "powmod",
    "inv_mod",
    "gen_random",
    "is_prime",
    "find_prime",
    "generate_keypair",
    "encrypt",
    "decrypt",
    "Encryptor",
    "Decryptor",
    "KeyPair",
    "PublicKey",
    "PrivateKey",
    "RandomSource",
    "SeededRandomSource",
    "SystemRandomSource",
]

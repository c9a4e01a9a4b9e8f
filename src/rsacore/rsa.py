"""Provides the RSA key types and the textbook encryption and decryption primitives.

Keys are plain immutable tuples of integers. Encryption and decryption are exposed as small callables bound to a
key, so one key can be applied to many messages. Messages are integers in range [0, n-1]; no padding is applied and
no range check is made, which makes this strictly "textbook" RSA.

Typical usage example:

    pub, priv = generate_keypair(512)
    c = encrypt(pub)(42)
    m = decrypt(priv)(c)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from typing import NamedTuple

from rsacore.arith import powmod


class PublicKey(NamedTuple):
    """Public half of a key pair.

    Attributes:
        n: The modulus.
        e: The public exponent.
    """
    n: int
    e: int


class PrivateKey(NamedTuple):
    """Private half of a key pair.

    Attributes:
        n: The modulus.
        p: Private Prime 1.
        q: Private Prime 2.
        d: The private exponent.
    """
    n: int
    p: int
    q: int
    d: int

    @property
    def totient(self) -> int:
        """Euler's totient of the modulus, (p-1)*(q-1)."""
        return (self.p - 1) * (self.q - 1)


class KeyPair(NamedTuple):
    public: PublicKey
    private: PrivateKey


class RSAKey:
    """A modulus and exponent bound together into a single RSA transformation.

    Acts as the template for both the encrypting and decrypting direction, which only differ by which exponent
    they carry.

    Attributes:
        mod: The modulus of the keypair.
        expo: The exponent of the key, whether private or public.
    """

    def __init__(self, mod: int, expo: int) -> None:
        self.mod = mod
        self.expo = expo

    def c_rsa(self, message: int) -> int:
        """Performs core RSA operation.

        The message is not checked against the modulus, the caller is responsible for keeping it in [0, mod-1].

        Args:
            message: The int-marshalled message.

        Returns:
            `message**expo mod mod`.
        """
        return powmod(message, self.expo, self.mod)

    def __call__(self, message: int) -> int:
        return self.c_rsa(message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RSAKey):
            return NotImplemented
        return type(self) is type(other) and (self.mod, self.expo) == (other.mod, other.expo)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.mod, self.expo))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(mod={self.mod}, expo={self.expo})"


class Encryptor(RSAKey):
    """Encrypts messages under a public key."""

    @classmethod
    def from_key(cls, key: PublicKey) -> "Encryptor":
        return cls(key.n, key.e)


class Decryptor(RSAKey):
    """Decrypts ciphertexts under a private key."""

    @classmethod
    def from_key(cls, key: PrivateKey) -> "Decryptor":
        return cls(key.n, key.d)


def encrypt(pub_key: PublicKey) -> Encryptor:
    """Bind a public key into a message -> ciphertext transformer.

    Args:
        pub_key: The public key to encrypt under.

    Returns:
        A callable taking a message in range [0, n-1] and returning its ciphertext.
    """
    return Encryptor.from_key(pub_key)


def decrypt(priv_key: PrivateKey) -> Decryptor:
    """Bind a private key into a ciphertext -> message transformer.

    Args:
        priv_key: The private key to decrypt with.

    Returns:
        A callable taking a ciphertext and returning the recovered message.
    """
    return Decryptor.from_key(priv_key)

"""
Capability factory
===================
Maps an algorithm and a capability to a ready-to-use object built from
the key bytes supplied at call time:

                      sign  verify  generate  encrypt  decrypt
    blake3             x      x        x
    ed25519            x      x        x
    chacha20poly1305                   x         x        x

Asking for a capability the algorithm lacks raises UnsupportedOperation;
wrong-sized key bytes raise KeyLengthMismatch. Adding an algorithm means
one new module plus one branch per capability it offers.
"""

from typing import Union

from ..errors import UnsupportedOperation
from .algorithm import Algorithm
from .base import KeyGenerate, TextDecrypt, TextEncrypt, TextSign, TextVerify
from .blake import BlakeGenerate, BlakeSign, BlakeVerify
from .chacha import ChaChaCipher, ChaChaGenerate
from .ed25519 import Ed25519Generate, Ed25519Sign, Ed25519Verify

AlgorithmLike = Union[Algorithm, str]


def create_signer(algorithm: AlgorithmLike, key: bytes) -> TextSign:
    algorithm = Algorithm.parse(algorithm)
    if algorithm is Algorithm.BLAKE3:
        return BlakeSign(key)
    if algorithm is Algorithm.ED25519:
        return Ed25519Sign(key)
    raise UnsupportedOperation(algorithm.value, "sign")


def create_verifier(algorithm: AlgorithmLike, key: bytes) -> TextVerify:
    algorithm = Algorithm.parse(algorithm)
    if algorithm is Algorithm.BLAKE3:
        return BlakeVerify(key)
    if algorithm is Algorithm.ED25519:
        return Ed25519Verify(key)
    raise UnsupportedOperation(algorithm.value, "verify")


def create_generator(algorithm: AlgorithmLike) -> KeyGenerate:
    algorithm = Algorithm.parse(algorithm)
    if algorithm is Algorithm.BLAKE3:
        return BlakeGenerate()
    if algorithm is Algorithm.ED25519:
        return Ed25519Generate()
    if algorithm is Algorithm.CHACHA20POLY1305:
        return ChaChaGenerate()
    raise UnsupportedOperation(algorithm.value, "generate")


def create_encryptor(algorithm: AlgorithmLike, key: bytes) -> TextEncrypt:
    algorithm = Algorithm.parse(algorithm)
    if algorithm is Algorithm.CHACHA20POLY1305:
        return ChaChaCipher(key)
    raise UnsupportedOperation(algorithm.value, "encrypt")


def create_decryptor(algorithm: AlgorithmLike, key: bytes) -> TextDecrypt:
    algorithm = Algorithm.parse(algorithm)
    if algorithm is Algorithm.CHACHA20POLY1305:
        return ChaChaCipher(key)
    raise UnsupportedOperation(algorithm.value, "decrypt")


__all__ = [
    "Algorithm",
    "TextSign",
    "TextVerify",
    "TextEncrypt",
    "TextDecrypt",
    "KeyGenerate",
    "create_signer",
    "create_verifier",
    "create_generator",
    "create_encryptor",
    "create_decryptor",
]

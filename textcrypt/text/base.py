"""
Capability interfaces
======================
One interface per text operation. An algorithm implements only the
capabilities it actually offers:

    TextSign     sign(reader)              -> signature string
    TextVerify   verify(reader, signature) -> bool
    TextEncrypt  encrypt(reader)           -> ciphertext string
    TextDecrypt  decrypt(reader)           -> plaintext bytes
    KeyGenerate  generate()                -> {key name: raw bytes}

``reader`` is any readable binary stream. It is always read to the end
before a cryptographic step runs, so an operation either completes or
fails without producing output.
"""

from typing import BinaryIO, Dict

from ..errors import IOFailure, KeyLengthMismatch


class TextSign:
    def sign(self, reader: BinaryIO) -> str:
        raise NotImplementedError


class TextVerify:
    def verify(self, reader: BinaryIO, signature: str) -> bool:
        raise NotImplementedError


class TextEncrypt:
    def encrypt(self, reader: BinaryIO) -> str:
        raise NotImplementedError


class TextDecrypt:
    def decrypt(self, reader: BinaryIO) -> bytes:
        raise NotImplementedError


class KeyGenerate:
    def generate(self) -> Dict[str, bytes]:
        raise NotImplementedError


def read_all(reader: BinaryIO) -> bytes:
    """Read a binary stream to the end."""
    try:
        data = reader.read()
    except OSError as e:
        raise IOFailure(f"error reading input: {e}") from e
    if isinstance(data, str):
        raise TypeError("input stream must be opened in binary mode")
    return bytes(data)


def check_key_length(algorithm: str, key: bytes, expected: int) -> bytes:
    """Return a private copy of ``key`` after checking its exact length."""
    key = bytes(key)
    if len(key) != expected:
        raise KeyLengthMismatch(algorithm, expected, len(key))
    return key

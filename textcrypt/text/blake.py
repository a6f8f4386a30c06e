"""
BLAKE3 keyed hash (MAC)
========================
Symmetric message authentication: whoever holds the 32-byte key can
produce and check the tag, and any change to the data changes it.

Key:       256-bit (32 bytes), used directly as the BLAKE3 key
Signature: 32-byte keyed digest, URL-safe base64 without padding

Generated keys are 32-character passwords over the full character set,
so the key file is printable ASCII.

Dependencies: blake3
"""

import hmac
from typing import BinaryIO, Dict

import blake3

from .. import encoding
from ..passwords import generate_password
from .base import KeyGenerate, TextSign, TextVerify, check_key_length, read_all


class _BlakeKeyed:
    KEY_SIZE = 32

    def __init__(self, key: bytes):
        self._key = check_key_length("blake3", key, self.KEY_SIZE)

    def _digest(self, reader: BinaryIO) -> bytes:
        data = read_all(reader)
        return blake3.blake3(data, key=self._key).digest()


class BlakeSign(_BlakeKeyed, TextSign):
    """Sign text with a BLAKE3 keyed hash."""

    def sign(self, reader: BinaryIO) -> str:
        return encoding.encode(self._digest(reader))


class BlakeVerify(_BlakeKeyed, TextVerify):
    """Check a BLAKE3 keyed-hash signature."""

    def verify(self, reader: BinaryIO, signature: str) -> bool:
        expected = encoding.encode(self._digest(reader))
        return hmac.compare_digest(expected.encode("ascii"),
                                   signature.encode("utf-8"))


class BlakeGenerate(KeyGenerate):
    KEY_NAME = "blake3.key"

    def generate(self) -> Dict[str, bytes]:
        key = generate_password(_BlakeKeyed.KEY_SIZE)
        return {self.KEY_NAME: key.encode("ascii")}

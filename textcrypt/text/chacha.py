"""
ChaCha20-Poly1305 text encryption
==================================
ChaCha20 stream cipher + Poly1305 authentication tag (RFC 8439, IETF
96-bit nonce variant).

Key material: nonce(12) || key(32) = 44 bytes -> chacha20poly1305.key
Ciphertext:   ciphertext || tag(16), URL-safe base64 without padding

The nonce is generated once together with the key and stored in the same
key file, so every message encrypted under one key file uses the same
nonce. That keeps ciphertexts compatible with existing key files, but
nonce reuse under one key reveals the XOR of plaintexts and lets tags be
forged. Generate a new key file per message where that matters.

Dependencies: cryptography >= 41.0
"""

import os
from typing import BinaryIO, Dict, Tuple

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305

from .. import encoding
from ..errors import AuthenticationFailed
from .base import KeyGenerate, TextDecrypt, TextEncrypt, check_key_length, read_all

KEY_SIZE      = 32
NONCE_SIZE    = 12
MATERIAL_SIZE = NONCE_SIZE + KEY_SIZE
TAG_SIZE      = 16


def split_nonce_key(material: bytes) -> Tuple[bytes, bytes]:
    """Split 44 bytes of key material into (nonce, key)."""
    material = check_key_length("chacha20poly1305", material, MATERIAL_SIZE)
    return material[:NONCE_SIZE], material[NONCE_SIZE:]


class ChaChaCipher(TextEncrypt, TextDecrypt):
    """ChaCha20-Poly1305 under the nonce and key stored in one key file."""

    def __init__(self, material: bytes):
        self._nonce, key = split_nonce_key(material)
        self._cipher = ChaCha20Poly1305(key)

    def encrypt(self, reader: BinaryIO) -> str:
        plaintext = read_all(reader)
        ct = self._cipher.encrypt(self._nonce, plaintext, None)
        return encoding.encode(ct)

    def decrypt(self, reader: BinaryIO) -> bytes:
        """
        Decode and open a ciphertext. Raises AuthenticationFailed if the
        tag does not match (tampered data or wrong key).
        """
        ct = encoding.decode(read_all(reader))
        try:
            return self._cipher.decrypt(self._nonce, ct, None)
        except InvalidTag as e:
            raise AuthenticationFailed(
                "ChaCha20-Poly1305 decryption failed: authentication tag mismatch"
            ) from e


class ChaChaGenerate(KeyGenerate):
    KEY_NAME = "chacha20poly1305.key"

    def generate(self) -> Dict[str, bytes]:
        key   = ChaCha20Poly1305.generate_key()
        nonce = os.urandom(NONCE_SIZE)
        return {self.KEY_NAME: nonce + key}

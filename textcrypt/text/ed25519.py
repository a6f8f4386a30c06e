"""
Ed25519 signatures
===================
Asymmetric, deterministic signatures (RFC 8032). The holder of the
private seed signs; anyone with the public key verifies.

Private key: 32-byte seed         -> ed25519.sk
Public key:  32-byte encoded point -> ed25519.pk
Signature:   64 bytes, URL-safe base64 without padding

The two keys are stored raw, with no PEM or DER wrapping, and are never
interchangeable: signers take the seed, verifiers take the public key.

Dependencies: cryptography >= 41.0
"""

from typing import BinaryIO, Dict

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

from .. import encoding
from ..errors import InvalidSignatureLength
from .base import KeyGenerate, TextSign, TextVerify, check_key_length, read_all

KEY_SIZE       = 32
SIGNATURE_SIZE = 64


class Ed25519Sign(TextSign):
    """Sign text with an Ed25519 private seed."""

    def __init__(self, seed: bytes):
        seed = check_key_length("ed25519 signing", seed, KEY_SIZE)
        self._key = Ed25519PrivateKey.from_private_bytes(seed)

    def sign(self, reader: BinaryIO) -> str:
        data = read_all(reader)
        return encoding.encode(self._key.sign(data))


class Ed25519Verify(TextVerify):
    """Verify Ed25519 signatures against a raw public key."""

    def __init__(self, public_key: bytes):
        self._public_bytes = check_key_length("ed25519 verifying", public_key,
                                              KEY_SIZE)

    def verify(self, reader: BinaryIO, signature: str) -> bool:
        """
        Returns True only if ``signature`` was made over the whole input by
        the matching private key. A well-formed signature that does not
        match is False; a malformed one raises.
        """
        data = read_all(reader)
        sig  = encoding.decode(signature)
        if len(sig) != SIGNATURE_SIZE:
            raise InvalidSignatureLength(SIGNATURE_SIZE, len(sig))
        try:
            key = Ed25519PublicKey.from_public_bytes(self._public_bytes)
            key.verify(sig, data)
            return True
        except (InvalidSignature, ValueError):
            return False


class Ed25519Generate(KeyGenerate):
    SECRET_KEY_NAME = "ed25519.sk"
    PUBLIC_KEY_NAME = "ed25519.pk"

    def generate(self) -> Dict[str, bytes]:
        sk = Ed25519PrivateKey.generate()
        return {
            self.SECRET_KEY_NAME: sk.private_bytes_raw(),
            self.PUBLIC_KEY_NAME: sk.public_key().public_bytes_raw(),
        }

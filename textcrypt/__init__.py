"""
textcrypt
==========
Text-oriented cryptographic operations over three algorithm families.

Algorithms:
    blake3            — BLAKE3 keyed hash (MAC)      sign / verify / generate
    ed25519           — Ed25519 signatures           sign / verify / generate
    chacha20poly1305  — ChaCha20-Poly1305 (AEAD)     encrypt / decrypt / generate

Signatures and ciphertexts are URL-safe base64 without padding. Keys are
raw bytes in files named after the key (blake3.key, ed25519.sk,
ed25519.pk, chacha20poly1305.key).

License: Apache 2.0
"""

__version__ = "1.0.0"

from .errors import (
    AuthenticationFailed,
    InvalidEncoding,
    InvalidSignatureLength,
    IOFailure,
    KeyLengthMismatch,
    TextCryptoError,
    UnsupportedOperation,
)
from .process import (
    process_text_decrypt,
    process_text_encrypt,
    process_text_generate,
    process_text_sign,
    process_text_verify,
)
from .text import (
    Algorithm,
    create_decryptor,
    create_encryptor,
    create_generator,
    create_signer,
    create_verifier,
)

__all__ = [
    "Algorithm",
    "create_signer",
    "create_verifier",
    "create_generator",
    "create_encryptor",
    "create_decryptor",
    "process_text_sign",
    "process_text_verify",
    "process_text_generate",
    "process_text_encrypt",
    "process_text_decrypt",
    "TextCryptoError",
    "UnsupportedOperation",
    "KeyLengthMismatch",
    "InvalidEncoding",
    "InvalidSignatureLength",
    "AuthenticationFailed",
    "IOFailure",
]

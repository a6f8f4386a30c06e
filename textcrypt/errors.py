"""Exception hierarchy for :mod:`textcrypt`."""

from __future__ import annotations

__all__ = [
    "TextCryptoError",
    "UnsupportedOperation",
    "KeyLengthMismatch",
    "InvalidEncoding",
    "InvalidSignatureLength",
    "AuthenticationFailed",
    "IOFailure",
]


class TextCryptoError(Exception):
    """Base exception for every failure raised by textcrypt."""


class UnsupportedOperation(TextCryptoError):
    """The selected algorithm does not offer the requested capability."""

    def __init__(self, algorithm: str, capability: str):
        super().__init__(f"{algorithm} does not support {capability}")
        self.algorithm  = algorithm
        self.capability = capability


class KeyLengthMismatch(TextCryptoError):
    """Raw key bytes are not the size the algorithm requires."""

    def __init__(self, algorithm: str, expected: int, actual: int):
        super().__init__(
            f"{algorithm} key must be exactly {expected} bytes long, got {actual}"
        )
        self.algorithm = algorithm
        self.expected  = expected
        self.actual    = actual


class InvalidEncoding(TextCryptoError):
    """Input is not URL-safe base64 without padding."""


class InvalidSignatureLength(TextCryptoError):
    """A decoded signature does not have the algorithm's fixed size."""

    def __init__(self, expected: int, actual: int):
        super().__init__(
            f"signature must be exactly {expected} bytes long, got {actual}"
        )
        self.expected = expected
        self.actual   = actual


class AuthenticationFailed(TextCryptoError):
    """Authentication tag mismatch: data tampered with or wrong key."""


class IOFailure(TextCryptoError):
    """Reading the input or a key file, or writing a key file, failed."""

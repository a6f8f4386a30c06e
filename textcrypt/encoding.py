"""
URL-safe base64 without padding
================================
Every signature and ciphertext leaving textcrypt is encoded with the
RFC 4648 §5 alphabet (``A-Z a-z 0-9 - _``) and no ``=`` padding.

Decoding is strict: characters from the standard alphabet (``+`` ``/``),
padding, impossible lengths and non-zero trailing bits are all rejected
with :class:`~textcrypt.errors.InvalidEncoding`. Only surrounding ASCII
whitespace is tolerated, so a file or stdin ending in a newline decodes.
"""

import base64
import binascii
import re
from typing import Union

from .errors import InvalidEncoding

_ALPHABET = re.compile(rb"\A[A-Za-z0-9_-]*\Z")


def encode(data: bytes) -> str:
    """Encode bytes as URL-safe base64 and drop the padding."""
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def decode(text: Union[str, bytes]) -> bytes:
    """Decode URL-safe unpadded base64, rejecting anything non-canonical."""
    if isinstance(text, str):
        try:
            raw = text.encode("ascii")
        except UnicodeEncodeError as e:
            raise InvalidEncoding("input contains non-ASCII characters") from e
    else:
        raw = bytes(text)
    raw = raw.strip()

    if not _ALPHABET.match(raw):
        raise InvalidEncoding("input is not URL-safe base64 without padding")
    if len(raw) % 4 == 1:
        raise InvalidEncoding(f"invalid base64 length: {len(raw)}")

    padded = raw + b"=" * (-len(raw) % 4)
    try:
        data = base64.urlsafe_b64decode(padded)
    except binascii.Error as e:
        raise InvalidEncoding(str(e)) from e

    # Trailing bits must be zero, as the canonical encoder produces them.
    if encode(data).encode("ascii") != raw:
        raise InvalidEncoding("input has non-canonical trailing bits")
    return data

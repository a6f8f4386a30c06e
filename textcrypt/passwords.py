"""
Password generation
====================
Random passwords drawn with :mod:`secrets` from up to four character
groups. Look-alike characters (``O`` and ``l``) are left out.

Also used as the key source for BLAKE3: a 32-character password over the
full character set is a 32-byte ASCII key.
"""

import secrets
from typing import List

UPPERCASE = "ABCDEFGHIJKLMNPQRSTUVWXYZ"
LOWERCASE = "abcdefghijkmnopqrstuvwxyz"
NUMBERS   = "0123456789"
SYMBOLS   = "!@#$%^&*()-_=+"


def charset(uppercase: bool = True, lowercase: bool = True,
            number: bool = True, symbol: bool = True) -> str:
    chars = ""
    if uppercase:
        chars += UPPERCASE
    if lowercase:
        chars += LOWERCASE
    if number:
        chars += NUMBERS
    if symbol:
        chars += SYMBOLS
    return chars


def generate_password(length: int = 16, uppercase: bool = True,
                      lowercase: bool = True, number: bool = True,
                      symbol: bool = True) -> str:
    """Return one random password of ``length`` characters."""
    if length < 1:
        raise ValueError("Password length must be at least 1.")
    chars = charset(uppercase, lowercase, number, symbol)
    if not chars:
        raise ValueError("At least one character group must be enabled.")
    return "".join(secrets.choice(chars) for _ in range(length))


def generate_passwords(count: int = 1, length: int = 16, **groups) -> List[str]:
    if count < 1:
        raise ValueError("Password count must be at least 1.")
    return [generate_password(length, **groups) for _ in range(count)]

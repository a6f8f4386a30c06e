"""Algorithm selector for the text operations."""

from enum import Enum
from typing import Union


class Algorithm(str, Enum):
    """The closed set of algorithm families textcrypt knows about."""

    BLAKE3           = "blake3"
    ED25519          = "ed25519"
    CHACHA20POLY1305 = "chacha20poly1305"

    @classmethod
    def parse(cls, name: Union[str, "Algorithm"]) -> "Algorithm":
        if isinstance(name, cls):
            return name
        n = str(name).strip().lower()
        if n == "blake":
            return cls.BLAKE3
        try:
            return cls(n)
        except ValueError:
            choices = ", ".join(a.value for a in cls)
            raise ValueError(
                f"unsupported format: {name!r} (choose from {choices})"
            ) from None

    def __str__(self) -> str:
        return self.value

"""
Key files and input sources
============================
Key files hold raw key bytes exactly as a generate call produced them.
There is no header or wrapping: the length is the only format marker.

Input sources are ``-`` (standard input), a filesystem path, or an
already-open binary stream.
"""

import logging
import os
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, List, Mapping, Union

from .errors import IOFailure

logger = logging.getLogger(__name__)

STDIN = "-"

PathLike = Union[str, "os.PathLike[str]"]


@contextmanager
def open_input(source: Union[PathLike, BinaryIO]) -> Iterator[BinaryIO]:
    """Yield a binary reader for ``source``. Streams passed in stay open."""
    if hasattr(source, "read"):
        yield source
        return
    if source == STDIN:
        yield sys.stdin.buffer
        return
    try:
        f = open(source, "rb")
    except OSError as e:
        raise IOFailure(f"cannot open input {source}: {e}") from e
    with f:
        yield f


def load_key(path: PathLike) -> bytes:
    """Read an entire key file."""
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise IOFailure(f"cannot read key file {path}: {e}") from e


def write_keys(keys: Mapping[str, bytes], output_dir: PathLike) -> List[Path]:
    """Write each generated key to ``output_dir/<key name>``, verbatim."""
    out = Path(output_dir)
    if not out.is_dir():
        raise IOFailure(f"output directory does not exist: {out}")
    written = []
    for name, value in keys.items():
        path = out / name
        try:
            path.write_bytes(value)
        except OSError as e:
            raise IOFailure(f"cannot write key file {path}: {e}") from e
        logger.info("wrote %s (%d bytes)", path, len(value))
        written.append(path)
    return written

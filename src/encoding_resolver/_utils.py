"""Internal shared utilities for encoding_resolver."""

from __future__ import annotations

import contextlib
from collections.abc import Iterator
from typing import BinaryIO

from encoding_resolver.pipeline import BOM_PROBE_SIZE


def _validate_source(source: BinaryIO) -> None:
    """Raise if *source* cannot be used for detection."""
    if source is None:
        msg = "source must be a binary file object, not None"
        raise TypeError(msg)
    if not source.seekable():
        msg = "source must be seekable"
        raise ValueError(msg)


def _validate_byte_str(byte_str: object) -> None:
    """Raise TypeError if *byte_str* is not bytes-like."""
    if not isinstance(byte_str, (bytes, bytearray, memoryview)):
        msg = f"expected a bytes-like object, got {type(byte_str).__name__}"
        raise TypeError(msg)


@contextlib.contextmanager
def preserved_position(source: BinaryIO) -> Iterator[int]:
    """Restore the position of *source* when the block exits, however it exits.

    :param source: A seekable file object.
    :returns: The position captured on entry.
    """
    original = source.tell()
    try:
        yield original
    finally:
        source.seek(original)


def _read_bytes(source: BinaryIO, size: int = -1) -> bytes:
    chunk = source.read(size)
    if not isinstance(chunk, (bytes, bytearray)):
        msg = "source must be opened in binary mode"
        raise TypeError(msg)
    return bytes(chunk)


def read_prefix(source: BinaryIO, size: int = BOM_PROBE_SIZE) -> bytes:
    """Read up to *size* bytes from the start of *source*.

    The position of *source* is left where it was.
    """
    with preserved_position(source):
        source.seek(0)
        return _read_bytes(source, size)


def read_all(source: BinaryIO, prefix: bytes) -> bytes:
    """Return the whole content of *source*, reusing the already-read *prefix*."""
    with preserved_position(source):
        source.seek(len(prefix))
        return prefix + _read_bytes(source)

"""Character encoding resolver for Western text: BOM sniffing plus byte statistics."""

from __future__ import annotations

from typing import BinaryIO

from encoding_resolver._utils import _validate_byte_str, _validate_source
from encoding_resolver.enums import Encoding
from encoding_resolver.pipeline.orchestrator import run_pipeline, run_stream_pipeline

__version__ = "1.0.0"
__all__ = [
    "Encoding",
    "detect",
    "detect_encoding",
]


def detect_encoding(source: BinaryIO) -> Encoding | None:
    """Detect the encoding of a seekable binary file object.

    The whole content is examined from offset 0, whatever the current
    position.  That position is restored before returning, on every path.

    :param source: A seekable file object opened in binary mode.
    :returns: The detected :class:`Encoding`, or ``None`` if it could not
        be determined.
    :raises TypeError: If *source* is ``None`` or yields text.
    :raises ValueError: If *source* is not seekable.
    """
    _validate_source(source)
    return run_stream_pipeline(source)


def detect(byte_str: bytes | bytearray | memoryview) -> Encoding | None:
    """Detect the encoding of the given byte string.

    :param byte_str: The data to examine.
    :returns: The detected :class:`Encoding`, or ``None`` if it could not
        be determined.
    :raises TypeError: If *byte_str* is not bytes-like.
    """
    _validate_byte_str(byte_str)
    return run_pipeline(bytes(byte_str))

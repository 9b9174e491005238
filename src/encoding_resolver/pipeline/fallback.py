"""Stage 4: single-byte fallback once UTF-8 is ruled out."""

from __future__ import annotations

import logging

from encoding_resolver.enums import Encoding
from encoding_resolver.pipeline import ByteStats

logger = logging.getLogger(__name__)


def detect_single_byte(length: int, stats: ByteStats) -> Encoding | None:
    """Choose between Windows-1252 and ISO-8859-1 by byte ranges.

    Bytes 0x80-0x9F are printable only in Windows-1252, so any of them
    settles it.  Otherwise the data is ISO-8859-1 only if every byte is in
    the usual Latin-1 text range.

    :param length: Length of the examined buffer.
    :param stats: Counters for the same buffer.
    :returns: The chosen :class:`Encoding`, or ``None`` when neither fits.
    """
    if stats.windows_1252_bytes:
        return Encoding.WINDOWS_1252
    if stats.latin1_bytes == length:
        return Encoding.LATIN_1
    logger.debug(
        "no candidate fits: %d of %d bytes outside the Latin-1 text range",
        length - stats.latin1_bytes,
        length,
    )
    return None

"""Stage 3: UTF-8 grammar validation and acceptance."""

from __future__ import annotations

import logging

from encoding_resolver.enums import Encoding
from encoding_resolver.pipeline import (
    MIN_ASCII_PROPORTION,
    SUSPICIOUS_RARITY_SCALE,
    ByteStats,
)

logger = logging.getLogger(__name__)

# Single bytes allowed by the grammar: tab, LF, CR and printable ASCII.
_TEXT_ASCII: frozenset[int] = frozenset({0x09, 0x0A, 0x0D, *range(0x20, 0x7F)})


def _lead_table() -> dict[int, tuple[int, int, int]]:
    """Map each valid lead byte to (sequence length, second byte min, max).

    The narrowed second-byte ranges exclude overlong forms (E0, F0),
    UTF-16 surrogates (ED) and code points above U+10FFFF (F4).  Every
    later byte is a plain 0x80-0xBF continuation.
    """
    table: dict[int, tuple[int, int, int]] = {}
    for lead in range(0xC2, 0xE0):
        table[lead] = (2, 0x80, 0xBF)
    for lead in range(0xE1, 0xF0):
        table[lead] = (3, 0x80, 0xBF)
    table[0xE0] = (3, 0xA0, 0xBF)
    table[0xED] = (3, 0x80, 0x9F)
    for lead in range(0xF1, 0xF4):
        table[lead] = (4, 0x80, 0xBF)
    table[0xF0] = (4, 0x90, 0xBF)
    table[0xF4] = (4, 0x80, 0x8F)
    return table


_LEAD_BYTES: dict[int, tuple[int, int, int]] = _lead_table()


def is_utf8_grammar(data: bytes) -> bool:
    """Return True if the whole of *data* matches the UTF-8 text grammar.

    Control bytes other than tab, LF and CR are rejected, as is a
    multi-byte sequence cut off by the end of the data.  The empty
    buffer matches.

    :param data: The raw byte data to examine.
    """
    pos = 0
    length = len(data)
    while pos < length:
        byte = data[pos]
        if byte < 0x80:
            if byte not in _TEXT_ASCII:
                return False
            pos += 1
            continue

        entry = _LEAD_BYTES.get(byte)
        if entry is None:
            return False
        seq_len, low, high = entry
        if pos + seq_len > length:
            return False
        if not low <= data[pos + 1] <= high:
            return False
        for offset in range(2, seq_len):
            if not 0x80 <= data[pos + offset] <= 0xBF:
                return False
        pos += seq_len
    return True


def detect_utf8(data: bytes, stats: ByteStats) -> Encoding | None:
    """Decide whether BOM-less *data* is UTF-8.

    Matching the grammar alone proves little, since ASCII-range text fits
    every Western encoding.  UTF-8 is accepted when the suspicious
    sequences are frequent enough and the bytes around them are mostly
    plain ASCII, or when every byte is plain ASCII.

    :param data: The raw byte data to examine.
    :param stats: Counters from :func:`~encoding_resolver.pipeline.stats.collect_stats`.
    :returns: :attr:`Encoding.UTF_8`, or ``None``.
    """
    if not is_utf8_grammar(data):
        logger.debug("data does not match the UTF-8 grammar")
        return None

    length = len(data)
    if length:
        ratio = stats.suspicious_sequences * SUSPICIOUS_RARITY_SCALE / length
        plain = length - stats.suspicious_bytes
        if ratio >= 1 and (
            plain == 0 or stats.ascii_bytes / plain >= MIN_ASCII_PROPORTION
        ):
            logger.debug(
                "UTF-8 accepted: %d suspicious sequences in %d bytes",
                stats.suspicious_sequences,
                length,
            )
            return Encoding.UTF_8

    if stats.ascii_bytes == length:
        logger.debug("UTF-8 accepted: all %d bytes are plain ASCII", length)
        return Encoding.UTF_8

    logger.debug("UTF-8 grammar matched but statistics rejected it")
    return None

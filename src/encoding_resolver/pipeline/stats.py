"""Stage 2: byte statistics for the no-BOM classifier."""

from __future__ import annotations

from encoding_resolver.pipeline import ByteStats

# Tab, newline, carriage return and printable ASCII (0x20-0x7E).
_ASCII_BYTES: bytes = bytes([0x09, 0x0A, 0x0D, *range(0x20, 0x7F)])

# C1 range: printable in Windows-1252, control codes in ISO-8859-1.
_WINDOWS_1252_BYTES: bytes = bytes(range(0x80, 0xA0))

# Everything ISO-8859-1 text is expected to contain.  0xA0 (NBSP) is left out.
_LATIN1_BYTES: bytes = _ASCII_BYTES + bytes(range(0xA1, 0x100))

# Two-byte sequences that are valid UTF-8 for characters common in Western
# European text, keyed by lead byte.  Tuned by hand; keep the values as-is.
_SUSPICIOUS_PAIRS: dict[int, frozenset[int]] = {
    0xC2: frozenset({0x81, 0x8D, 0x8F, 0x90, 0x9D, *range(0xA0, 0xC0)}),
    0xC3: frozenset(range(0x80, 0xC0)),
    0xC5: frozenset({0x92, 0x93, 0xA0, 0xA1, 0xB8, 0xBD, 0xBE}),
    0xC6: frozenset({0x92}),
    0xCB: frozenset({0x86, 0x9C}),
}

# Three-byte sequences, all starting with 0xE2: dashes, quotes, ellipsis,
# daggers, per mille, guillemets, euro sign and trade mark sign.
_SUSPICIOUS_TRIPLES: dict[tuple[int, int], frozenset[int]] = {
    (0xE2, 0x80): frozenset(
        {
            0x93,
            0x94,
            0x98,
            0x99,
            0x9A,
            0x9C,
            0x9D,
            0x9E,
            0xA0,
            0xA1,
            0xA2,
            0xA6,
            0xB0,
            0xB9,
            0xBA,
        }
    ),
    (0xE2, 0x82): frozenset({0xAC}),
    (0xE2, 0x84): frozenset({0xA2}),
}


def _count_in(data: bytes, allowed: bytes) -> int:
    return len(data) - len(data.translate(None, allowed))


def suspicious_sequence_length(data: bytes, pos: int) -> int:
    """Return the length of the suspicious sequence starting at *pos*.

    :param data: The raw byte data.
    :param pos: Offset of the candidate lead byte.
    :returns: 2 or 3 for a match, 0 otherwise.  A sequence that would run
        past the end of *data* never matches.
    """
    lead = data[pos]
    if lead in _SUSPICIOUS_PAIRS:
        if pos + 1 < len(data) and data[pos + 1] in _SUSPICIOUS_PAIRS[lead]:
            return 2
        return 0
    if pos + 2 < len(data):
        tails = _SUSPICIOUS_TRIPLES.get((lead, data[pos + 1]))
        if tails is not None and data[pos + 2] in tails:
            return 3
    return 0


def collect_stats(data: bytes) -> ByteStats:
    """Gather the byte counters used to choose between UTF-8 and single-byte encodings.

    :param data: The full buffer, BOM probe bytes included.
    :returns: A :class:`ByteStats` for *data*.
    """
    sequences = 0
    sequence_bytes = 0

    # Bytes inside a matched sequence are never treated as a new lead byte.
    pos = 0
    length = len(data)
    while pos < length:
        found = suspicious_sequence_length(data, pos)
        if found:
            sequences += 1
            sequence_bytes += found
            pos += found
        else:
            pos += 1

    return ByteStats(
        suspicious_sequences=sequences,
        suspicious_bytes=sequence_bytes,
        ascii_bytes=_count_in(data, _ASCII_BYTES),
        windows_1252_bytes=_count_in(data, _WINDOWS_1252_BYTES),
        latin1_bytes=_count_in(data, _LATIN1_BYTES),
    )

"""Detection pipeline stages and shared types."""

from __future__ import annotations

import dataclasses

#: Number of leading bytes examined for a byte-order mark.
BOM_PROBE_SIZE: int = 4

#: One suspicious sequence per this many bytes is enough to suggest UTF-8.
SUSPICIOUS_RARITY_SCALE: float = 500_000.0

#: Share of plain US-ASCII bytes required outside suspicious sequences.
MIN_ASCII_PROPORTION: float = 0.8


@dataclasses.dataclass(frozen=True, slots=True)
class ByteStats:
    """Byte counters gathered in one pass over a buffer.

    ``suspicious_sequences`` counts the 2- and 3-byte sequences that are
    valid UTF-8 for common Western characters; ``suspicious_bytes`` is their
    combined length.  The remaining counters tally single bytes by range.
    """

    suspicious_sequences: int
    suspicious_bytes: int
    ascii_bytes: int
    windows_1252_bytes: int
    latin1_bytes: int

    def to_dict(self) -> dict[str, int]:
        """Convert these counters to a plain dict.

        :returns: A dict keyed by field name.
        """
        return dataclasses.asdict(self)

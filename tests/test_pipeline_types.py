from __future__ import annotations

import dataclasses

import pytest

from encoding_resolver.pipeline import ByteStats


def test_byte_stats_fields():
    stats = ByteStats(
        suspicious_sequences=1,
        suspicious_bytes=2,
        ascii_bytes=3,
        windows_1252_bytes=0,
        latin1_bytes=5,
    )
    assert stats.suspicious_sequences == 1
    assert stats.suspicious_bytes == 2
    assert stats.ascii_bytes == 3
    assert stats.windows_1252_bytes == 0
    assert stats.latin1_bytes == 5


def test_byte_stats_to_dict():
    stats = ByteStats(1, 2, 3, 4, 5)
    assert stats.to_dict() == {
        "suspicious_sequences": 1,
        "suspicious_bytes": 2,
        "ascii_bytes": 3,
        "windows_1252_bytes": 4,
        "latin1_bytes": 5,
    }


def test_byte_stats_is_frozen():
    stats = ByteStats(0, 0, 0, 0, 0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        stats.ascii_bytes = 1  # type: ignore[misc]

"""Shared test fixtures."""

from __future__ import annotations

import pytest

from encoding_resolver.enums import Encoding

_ASCII_CSV = "id;name;city\r\n1;Alice;Paris\r\n2;Bob;Lyon\r\n"
_ACCENTED_CSV = "id;nom;ville\r\n1;Hélène;Besançon\r\n2;Jérôme;Orléans\r\n"
_WINDOWS_1252_CSV = "id;article;prix\r\n1;“Œuvre” – tome 1;12 €\r\n2;Café™;3 €\r\n"

# (file name, content, expected encoding).  The file name records how the
# file was written; the expected encoding is one that decodes the same text.
# Single-byte files holding only ASCII therefore resolve to UTF-8.
SAMPLE_FILES: list[tuple[str, bytes, Encoding]] = [
    (
        "ISO-8859-1_with_ascii_chars_only.csv",
        _ASCII_CSV.encode("iso-8859-1"),
        Encoding.UTF_8,
    ),
    (
        "ISO-8859-1_with_chars_that_arent_ascii.csv",
        _ACCENTED_CSV.encode("iso-8859-1"),
        Encoding.LATIN_1,
    ),
    ("UTF8_with_ascii_chars_only.csv", _ASCII_CSV.encode(), Encoding.UTF_8),
    (
        "UTF8_with_ascii_chars_only_with_BOM.csv",
        _ASCII_CSV.encode("utf-8-sig"),
        Encoding.UTF_8,
    ),
    (
        "UTF8_with_chars_that_arent_ascii_without_BOM.csv",
        _ACCENTED_CSV.encode(),
        Encoding.UTF_8,
    ),
    (
        "UTF16-BE_with_ascii_chars_only.csv",
        ("\ufeff" + _ASCII_CSV).encode("utf-16-be"),
        Encoding.UTF_16_BE,
    ),
    (
        "UTF16-BE_with_chars_that_arent_ascii.csv",
        ("\ufeff" + _ACCENTED_CSV).encode("utf-16-be"),
        Encoding.UTF_16_BE,
    ),
    (
        "UTF16-LE_with_ascii_chars_only.csv",
        ("\ufeff" + _ASCII_CSV).encode("utf-16-le"),
        Encoding.UTF_16_LE,
    ),
    (
        "UTF16-LE_with_chars_that_arent_ascii.csv",
        ("\ufeff" + _ACCENTED_CSV).encode("utf-16-le"),
        Encoding.UTF_16_LE,
    ),
    (
        "WINDOWS_1252_with_ascii_chars_only.csv",
        _ASCII_CSV.encode("windows-1252"),
        Encoding.UTF_8,
    ),
    (
        "WINDOWS_1252_with_chars_that_arent_ascii.csv",
        _ACCENTED_CSV.encode("windows-1252"),
        Encoding.LATIN_1,
    ),
    (
        "WINDOWS_1252_with_specific_chars.csv",
        _WINDOWS_1252_CSV.encode("windows-1252"),
        Encoding.WINDOWS_1252,
    ),
    (
        "UTF32-LE_with_chars_that_arent_ascii.csv",
        ("\ufeff" + _ACCENTED_CSV).encode("utf-32-le"),
        Encoding.UTF_32_LE,
    ),
    (
        "UTF32-BE_with_chars_that_arent_ascii.csv",
        ("\ufeff" + _ACCENTED_CSV).encode("utf-32-be"),
        Encoding.UTF_32_BE,
    ),
]


def pytest_generate_tests(metafunc: pytest.Metafunc) -> None:
    """Parametrize accuracy tests with the sample files."""
    if "expected_encoding" in metafunc.fixturenames:
        metafunc.parametrize(
            ("file_name", "content", "expected_encoding"),
            SAMPLE_FILES,
            ids=[name for name, _, _ in SAMPLE_FILES],
        )

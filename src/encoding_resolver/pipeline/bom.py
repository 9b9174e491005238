"""Stage 1: BOM (Byte Order Mark) detection."""

from __future__ import annotations

from encoding_resolver.enums import Encoding
from encoding_resolver.pipeline import BOM_PROBE_SIZE


def detect_bom(prefix: bytes | bytearray | None) -> Encoding | None:
    """Map a leading byte-order mark to its encoding.

    Checks run shortest-first.  ``FF FE 00 00`` is excluded from UTF-16-LE
    so that it reaches the UTF-32-LE check.

    :param prefix: The first bytes of the data; only four are examined.
    :returns: The matching :class:`Encoding`, or ``None``.
    :raises TypeError: If *prefix* is ``None``.
    """
    if prefix is None:
        msg = "prefix must be a bytes-like object, not None"
        raise TypeError(msg)

    head = bytes(prefix[:BOM_PROBE_SIZE])
    size = len(head)

    if size < 2:
        return None
    if head[:2] == b"\xff\xfe" and (size < 4 or head[2:4] != b"\x00\x00"):
        return Encoding.UTF_16_LE
    if head[:2] == b"\xfe\xff":
        return Encoding.UTF_16_BE

    if size < 3:
        return None
    if head[:3] == b"\xef\xbb\xbf":
        return Encoding.UTF_8
    if head[:3] == b"\x2b\x2f\x76":
        return Encoding.UTF_7

    if size < 4:
        return None
    if head == b"\xff\xfe\x00\x00":
        return Encoding.UTF_32_LE
    if head == b"\x00\x00\xfe\xff":
        return Encoding.UTF_32_BE
    return None

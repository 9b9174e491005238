"""Pipeline orchestrator: runs the detection stages in sequence."""

from __future__ import annotations

import logging
from typing import BinaryIO

from encoding_resolver._utils import preserved_position, read_all, read_prefix
from encoding_resolver.enums import Encoding
from encoding_resolver.pipeline import BOM_PROBE_SIZE
from encoding_resolver.pipeline.bom import detect_bom
from encoding_resolver.pipeline.fallback import detect_single_byte
from encoding_resolver.pipeline.stats import collect_stats
from encoding_resolver.pipeline.utf8 import detect_utf8

logger = logging.getLogger(__name__)


def classify_without_bom(data: bytes) -> Encoding | None:
    """Classify data that carries no recognised BOM.

    :param data: The full buffer, including any leading bytes that were
        probed for a BOM.
    :returns: UTF-8, Windows-1252, ISO-8859-1 or ``None``.
    """
    stats = collect_stats(data)
    logger.debug("byte statistics for %d bytes: %s", len(data), stats)

    result = detect_utf8(data, stats)
    if result is not None:
        return result

    result = detect_single_byte(len(data), stats)
    if result is not None:
        logger.debug("falling back to %s", result.value)
    return result


def run_pipeline(data: bytes) -> Encoding | None:
    """Run the full detection pipeline over an in-memory buffer.

    :param data: The raw byte data to examine.
    :returns: The detected :class:`Encoding`, or ``None`` if undetermined.
    """
    bom_result = detect_bom(data[:BOM_PROBE_SIZE])
    if bom_result is not None:
        logger.debug("BOM found: %s", bom_result.value)
        return bom_result
    return classify_without_bom(data)


def run_stream_pipeline(source: BinaryIO) -> Encoding | None:
    """Run the detection pipeline over a seekable binary file object.

    Only the BOM probe is read when a BOM is found.  The position of
    *source* is the same on return as on entry, also when reading fails.

    :param source: A seekable file object opened in binary mode.
    :returns: The detected :class:`Encoding`, or ``None`` if undetermined.
    """
    with preserved_position(source):
        prefix = read_prefix(source)
        bom_result = detect_bom(prefix)
        if bom_result is not None:
            logger.debug("BOM found: %s", bom_result.value)
            return bom_result
        data = read_all(source, prefix)
    return classify_without_bom(data)

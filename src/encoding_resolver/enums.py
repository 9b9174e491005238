"""Enumerations for encoding_resolver."""

import codecs
import enum


class Encoding(enum.Enum):
    """Encodings the resolver can identify.

    Values are Python codec names, so a result can be handed straight to
    :meth:`bytes.decode` or :func:`open`.
    """

    UTF_16_LE = "utf-16-le"
    UTF_16_BE = "utf-16-be"
    UTF_8 = "utf-8"
    UTF_7 = "utf-7"
    UTF_32_LE = "utf-32-le"
    UTF_32_BE = "utf-32-be"
    WINDOWS_1252 = "windows-1252"
    LATIN_1 = "iso-8859-1"

    @property
    def codec_info(self) -> codecs.CodecInfo:
        """The :class:`codecs.CodecInfo` registered for this encoding."""
        return codecs.lookup(self.value)

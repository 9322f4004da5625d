"""Text utilities for Unicode to printer codepage transcoding."""

from __future__ import annotations

from .codepage_mapping import CODEPAGE_TO_CODEC, get_codec_name, is_known_codepage
from .transcoding import (
    LOOKALIKE_MAP,
    encode_text,
    get_unmappable_chars,
    normalize_unicode,
    transcode_to_codepage,
)

__all__ = [
    "CODEPAGE_TO_CODEC",
    "LOOKALIKE_MAP",
    "encode_text",
    "get_codec_name",
    "get_unmappable_chars",
    "is_known_codepage",
    "normalize_unicode",
    "transcode_to_codepage",
]

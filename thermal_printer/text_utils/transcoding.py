"""Transcoding of Unicode text to printer codepage bytes.

Each character is first encoded directly, so characters native to the target
codepage (box drawing in CP437, for example) are kept. Characters the
codepage lacks fall back to an ASCII look-alike, then to their NFKC
compatibility decomposition ("ﬁ" to "fi") and finally to a
replacement character.
"""

from __future__ import annotations

import logging
import unicodedata

from .codepage_mapping import get_codec_name, is_known_codepage

_LOGGER = logging.getLogger(__name__)

LOOKALIKE_MAP: dict[str, str] = {
    "‘": "'",  # LEFT SINGLE QUOTATION MARK
    "’": "'",  # RIGHT SINGLE QUOTATION MARK
    "‚": ",",  # SINGLE LOW-9 QUOTATION MARK
    "“": '"',  # LEFT DOUBLE QUOTATION MARK
    "”": '"',  # RIGHT DOUBLE QUOTATION MARK
    "„": '"',  # DOUBLE LOW-9 QUOTATION MARK
    "«": "<<",  # LEFT-POINTING DOUBLE ANGLE QUOTATION MARK
    "»": ">>",  # RIGHT-POINTING DOUBLE ANGLE QUOTATION MARK
    "–": "-",  # EN DASH
    "—": "--",  # EM DASH
    "−": "-",  # MINUS SIGN
    "…": "...",  # HORIZONTAL ELLIPSIS
    "•": "*",  # BULLET
    " ": " ",  # NO-BREAK SPACE
    "€": "EUR",  # EURO SIGN
    "™": "TM",  # TRADE MARK SIGN
    "©": "(C)",  # COPYRIGHT SIGN
    "®": "(R)",  # REGISTERED SIGN
    "←": "<-",  # LEFTWARDS ARROW
    "→": "->",  # RIGHTWARDS ARROW
    "⁄": "/",  # FRACTION SLASH
}


def normalize_unicode(text: str) -> str:
    """Apply NFKC normalization (ligatures split, full-width to half-width)."""
    return unicodedata.normalize("NFKC", text)


def _encodable(text: str, codec: str) -> bool:
    try:
        text.encode(codec)
    except UnicodeEncodeError:
        return False
    return True


def _map_char(char: str, codec: str) -> str | None:
    """Return the printable stand-in for ``char``, or None when there is none."""
    if _encodable(char, codec):
        return char
    replacement = LOOKALIKE_MAP.get(char)
    if replacement is not None and _encodable(replacement, codec):
        return replacement
    # Compatibility decomposition only for characters the codepage lacks,
    # so native glyphs such as "½" or "µ" in CP437 are not split
    decomposed = normalize_unicode(char)
    if decomposed == char:
        return None
    pieces: list[str] = []
    for piece in decomposed:
        if _encodable(piece, codec):
            pieces.append(piece)
            continue
        replacement = LOOKALIKE_MAP.get(piece)
        if replacement is None or not _encodable(replacement, codec):
            return None
        pieces.append(replacement)
    return "".join(pieces)


def transcode_to_codepage(text: str, codepage: str, replace_char: str = "?") -> str:
    """Return ``text`` restricted to characters encodable in ``codepage``."""
    if not text:
        return text

    composed = unicodedata.normalize("NFC", text)
    if not is_known_codepage(codepage):
        _LOGGER.warning("Unknown codepage '%s', leaving text untranscoded", codepage)
        return composed
    codec = get_codec_name(codepage)

    result: list[str] = []
    for char in composed:
        mapped = _map_char(char, codec)
        result.append(replace_char if mapped is None else mapped)
    return "".join(result)


def encode_text(text: str, codepage: str, replace_char: str = "?") -> bytes:
    """Transcode ``text`` and encode it to bytes in ``codepage``."""
    codec = get_codec_name(codepage) if is_known_codepage(codepage) else "utf-8"
    return transcode_to_codepage(text, codepage, replace_char).encode(codec, errors="replace")


def get_unmappable_chars(text: str, codepage: str) -> list[str]:
    """Return the unique characters that would be replaced when transcoding."""
    if not text or not is_known_codepage(codepage):
        return []
    codec = get_codec_name(codepage)
    unmappable: list[str] = []
    for char in unicodedata.normalize("NFC", text):
        if char not in unmappable and _map_char(char, codec) is None:
            unmappable.append(char)
    return unmappable

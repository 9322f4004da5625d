"""Codepage to Python codec mapping."""

from __future__ import annotations

import codecs

# Printer codepage names that do not lowercase to a Python codec name
CODEPAGE_TO_CODEC: dict[str, str] = {
    "ISO_8859-1": "iso-8859-1",
    "ISO_8859-2": "iso-8859-2",
    "ISO_8859-7": "iso-8859-7",
    "ISO_8859-15": "iso-8859-15",
    "LATIN1": "latin-1",
    "UTF-8": "utf-8",
}


def get_codec_name(codepage: str) -> str:
    """Get the Python codec name for a printer codepage name (e.g. "CP437")."""
    upper = codepage.upper()
    if upper in CODEPAGE_TO_CODEC:
        return CODEPAGE_TO_CODEC[upper]

    normalized = upper.replace("-", "_").replace(" ", "")
    compact = normalized.replace("_", "")
    if compact.startswith("CP") and compact[2:].isdigit():
        return f"cp{compact[2:]}"
    if normalized.startswith(("ISO_8859_", "ISO8859_")):
        return f"iso-8859-{normalized.split('_')[-1]}"
    return codepage.lower()


def is_known_codepage(codepage: str) -> bool:
    """Return True when Python has a codec for ``codepage``."""
    try:
        codecs.lookup(get_codec_name(codepage))
    except LookupError:
        return False
    return True

"""Utility functions for value mapping in encoder operations."""

from __future__ import annotations

from typing import Any

from ..const import JUSTIFY_CENTER, JUSTIFY_LEFT, JUSTIFY_RIGHT

_JUSTIFY_CODES = {"L": JUSTIFY_LEFT, "C": JUSTIFY_CENTER, "R": JUSTIFY_RIGHT}


def map_justify(align: Any) -> int:
    """Map "L", "C" or "R" to the ESC a position; anything else is left."""
    if not isinstance(align, str):
        return JUSTIFY_LEFT
    return _JUSTIFY_CODES.get(align, JUSTIFY_LEFT)


def map_flag(value: Any) -> int:
    """Map a truthy/falsy value to a 1/0 print mode flag."""
    return 1 if value else 0


def split_fixed_width(text: str, width: int) -> list[str]:
    """Hard-cut ``text`` into pieces of ``width`` characters (last may be shorter)."""
    return [text[i : i + width] for i in range(0, len(text), width)]

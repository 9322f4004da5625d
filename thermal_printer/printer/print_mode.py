"""Print mode flags composed into the ESC ! mode byte."""

from __future__ import annotations

from dataclasses import dataclass

from escpos.constants import ESC

from ..const import (
    MODE_DOUBLE_HEIGHT,
    MODE_DOUBLE_WIDTH,
    MODE_EMPHASIZED,
    MODE_FONT_B,
    MODE_UNDERLINE,
)
from ..exceptions import InvalidArgumentError
from .mapping_utils import map_flag

SELECT_PRINT_MODE = ESC + b"\x21"


@dataclass
class PrintModeState:
    """Style flags for one printer session.

    Setters only change local state. The printer sees the change once the
    bytes returned by :meth:`apply` are appended to the command buffer.
    """

    font: int = 0
    underline: int = 0
    emphasized: int = 0
    double_height: int = 0
    double_width: int = 0

    def set_font(self, font: int) -> None:
        if font not in (0, 1):
            raise InvalidArgumentError(f"font must be 0 (A) or 1 (B), got {font!r}")
        self.font = int(font)

    def set_underline(self, on: bool) -> None:
        self.underline = map_flag(on)

    def set_emphasis(self, on: bool) -> None:
        self.emphasized = map_flag(on)

    def set_double_height(self, on: bool) -> None:
        self.double_height = map_flag(on)

    def set_double_width(self, on: bool) -> None:
        self.double_width = map_flag(on)

    def reset(self) -> None:
        """Return every flag to its power-on value."""
        self.font = 0
        self.underline = 0
        self.emphasized = 0
        self.double_height = 0
        self.double_width = 0

    def compose(self) -> int:
        """Return the mode byte for the current flags."""
        return (
            self.font * MODE_FONT_B
            + self.emphasized * MODE_EMPHASIZED
            + self.double_height * MODE_DOUBLE_HEIGHT
            + self.double_width * MODE_DOUBLE_WIDTH
            + self.underline * MODE_UNDERLINE
        )

    def apply(self) -> bytes:
        """Return the ESC ! sequence selecting the current mode."""
        return SELECT_PRINT_MODE + bytes([self.compose()])

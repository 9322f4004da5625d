"""Style operation mixin for the ESC/POS command encoder."""

from __future__ import annotations

from typing import Any

from escpos.constants import CTL_LF, ESC, GS

from ..security import validate_byte
from .mapping_utils import map_justify
from .print_mode import SELECT_PRINT_MODE, PrintModeState

SELECT_JUSTIFICATION = ESC + b"\x61"
DOUBLE_STRIKE = ESC + b"\x47"
EMPHASIZE = ESC + b"\x45"
CHARACTER_SIZE = GS + b"\x21"
REVERSE_PRINTING = GS + b"\x42"
SELECT_COLOR = ESC + b"\x72"


class StyleOperationsMixin:
    """Mixin providing print mode, character size, justification and color commands."""

    # These attributes are expected from the encoder
    _mode: PrintModeState

    def _append(self, data: bytes) -> None:
        """Append bytes to the command buffer (implemented in encoder)."""
        raise NotImplementedError

    @property
    def print_mode(self) -> PrintModeState:
        """Return the session's print mode flags."""
        return self._mode

    def apply_printmode(self) -> None:
        """Queue ESC ! with the mode byte composed from the current flags."""
        self._append(self._mode.apply())

    def bold_on(self) -> None:
        self._mode.set_emphasis(True)
        self.apply_printmode()

    def bold_off(self) -> None:
        self._mode.set_emphasis(False)
        self.apply_printmode()

    def font_a(self, *_: Any) -> None:
        self._mode.set_font(0)
        self.apply_printmode()

    def font_b(self, *_: Any) -> None:
        self._mode.set_font(1)
        self.apply_printmode()

    def underline_on(self) -> None:
        self._mode.set_underline(True)
        self.apply_printmode()

    def underline_off(self) -> None:
        self._mode.set_underline(False)
        self.apply_printmode()

    def double_height_on(self) -> None:
        self._mode.set_double_height(True)
        self.apply_printmode()

    def double_height_off(self) -> None:
        self._mode.set_double_height(False)
        self.apply_printmode()

    def double_width_on(self) -> None:
        self._mode.set_double_width(True)
        self.apply_printmode()

    def double_width_off(self) -> None:
        self._mode.set_double_width(False)
        self.apply_printmode()

    def doublestrike_on(self) -> None:
        self._append(DOUBLE_STRIKE + b"\x01")

    def doublestrike_off(self) -> None:
        self._append(DOUBLE_STRIKE + b"\x00")

    def emphasize_on(self) -> None:
        self._append(EMPHASIZE + b"\xff")

    def emphasize_off(self) -> None:
        self._append(EMPHASIZE + b"\x00")

    def inverse_on(self) -> None:
        self._append(REVERSE_PRINTING + b"\x01")

    def inverse_off(self) -> None:
        self._append(REVERSE_PRINTING + b"\x00")

    def font_size(self, size: int) -> None:
        """Select character size with GS !.

        High nibble is the width multiplier minus one, low nibble the height
        multiplier minus one (each 1-8), e.g. 0x11 for double width and height.
        """
        self._append(CHARACTER_SIZE + bytes([validate_byte(size, "size")]))

    def font_size_esc(self, size: int) -> None:
        """Write a raw ESC ! mode byte, bypassing the tracked print mode flags."""
        self._append(SELECT_PRINT_MODE + bytes([validate_byte(size, "size")]))

    def justify(self, align: str) -> None:
        """Justify following lines: "L" left, "C" center, "R" right (default left)."""
        self._append(SELECT_JUSTIFICATION + bytes([map_justify(align)]))

    def color_1(self, *_: Any) -> None:
        """Print in the first color on dual color printers."""
        self._append(CTL_LF + SELECT_COLOR + b"\x00")

    def color_2(self, *_: Any) -> None:
        """Print in the second color on dual color printers."""
        self._append(CTL_LF + SELECT_COLOR + b"\x01")

"""Control operation mixin for the ESC/POS command encoder."""

from __future__ import annotations

import logging

from escpos.constants import CTL_LF, ESC, GS

from ..security import is_byte, validate_byte

_LOGGER = logging.getLogger(__name__)

SET_LEFT_MARGIN = GS + b"\x4c"
RIGHT_SIDE_CHARACTER_SPACING = ESC + b"\x20"
SET_LINE_SPACING = ESC + b"\x33"
DEFAULT_LINE_SPACING = ESC + b"\x32"
CUT_PAPER = GS + b"\x56\x00\xff"
# ESC p m t1 t2: pulse on drawer pin 2, 50 * 2 ms on, 250 * 2 ms off
CASH_DRAWER_KICK = ESC + b"\x70\x00\x32\xfa"


class ControlOperationsMixin:
    """Mixin providing margin, spacing, cut and cash drawer commands."""

    def _append(self, data: bytes) -> None:
        """Append bytes to the command buffer (implemented in encoder)."""
        raise NotImplementedError

    def left_margin(self, nl: int, nh: int) -> None:
        """Set the left margin to ``nl + nh * 256`` dots.

        To split a value: ``nh = value // 256`` and ``nl = value % 256``.
        """
        low = validate_byte(nl, "nl")
        high = validate_byte(nh, "nh")
        self._append(CTL_LF + SET_LEFT_MARGIN + bytes([low, high]))

    def right_side_character_spacing(self, spacing: int) -> None:
        """Set right-side character spacing; values outside 0-255 are ignored."""
        if not is_byte(spacing):
            _LOGGER.debug("Ignoring right side character spacing %r", spacing)
            return
        self._append(RIGHT_SIDE_CHARACTER_SPACING + bytes([spacing]))

    def line_spacing(self, value: int | None = None) -> None:
        """Set line spacing to ``value`` dots; 0, None or out of range resets to default."""
        if value and is_byte(value):
            self._append(SET_LINE_SPACING + bytes([value]))
        else:
            self._append(DEFAULT_LINE_SPACING)

    def cutpaper(self) -> None:
        """Feed one line and cut the receipt."""
        self._append(CTL_LF + CUT_PAPER)

    def open_cash_drawer(self) -> None:
        self._append(CASH_DRAWER_KICK)

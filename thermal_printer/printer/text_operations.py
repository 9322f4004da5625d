"""Text operation mixin for the ESC/POS command encoder."""

from __future__ import annotations

import sys

from escpos.constants import CTL_HT, CTL_LF

from ..security import validate_numeric_input
from .mapping_utils import split_fixed_width


class TextOperationsMixin:
    """Mixin providing write, print_text, linefeed and horiz_tab."""

    def _append(self, data: bytes) -> None:
        """Append bytes to the command buffer (implemented in encoder)."""
        raise NotImplementedError

    def _encode_text(self, text: str) -> bytes:
        """Encode text in the session codepage (implemented in encoder)."""
        raise NotImplementedError

    def write(self, data: str | bytes) -> None:
        """Queue text or raw bytes; nothing is sent until the buffer is flushed."""
        if isinstance(data, (bytes, bytearray, memoryview)):
            self._append(bytes(data))
        else:
            self._append(self._encode_text(str(data)))

    def print_text(self, msg: str, chars_per_line: int | None = None) -> None:
        """Queue ``msg``, inserting a newline every ``chars_per_line`` characters.

        The cut is hard (words are split); use explicit "\\n" for empty lines.
        """
        if chars_per_line:
            width = validate_numeric_input(chars_per_line, 1, sys.maxsize, "chars_per_line")
            self.write("\n".join(split_fixed_width(msg, width)))
        else:
            self.write(msg)

    def linefeed(self) -> None:
        self._append(CTL_LF)

    def horiz_tab(self) -> None:
        self._append(CTL_HT)

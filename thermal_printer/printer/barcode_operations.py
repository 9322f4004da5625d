"""Barcode operation mixin for the ESC/POS command encoder."""

from __future__ import annotations

from escpos.constants import GS

from ..security import validate_byte

SET_BARCODE_HEIGHT = GS + b"\x68"
PRINT_BARCODE = GS + b"\x6b\x41"


class BarcodeOperationsMixin:
    """Mixin providing barcode_height and print_barcode."""

    def _append(self, data: bytes) -> None:
        """Append bytes to the command buffer (implemented in encoder)."""
        raise NotImplementedError

    def _encode_text(self, text: str) -> bytes:
        """Encode text in the session codepage (implemented in encoder)."""
        raise NotImplementedError

    def barcode_height(self, height: int) -> None:
        """Set the barcode height in dots."""
        self._append(SET_BARCODE_HEIGHT + bytes([validate_byte(height, "height")]))

    def print_barcode(self, barcode_type: int, data: str | bytes) -> None:
        """Queue GS k 0x41 followed by the barcode type byte and the data."""
        type_byte = validate_byte(barcode_type, "barcode_type")
        payload = bytes(data) if isinstance(data, (bytes, bytearray)) else self._encode_text(data)
        self._append(PRINT_BARCODE + bytes([type_byte]) + payload)

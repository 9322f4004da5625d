"""ESC/POS command encoder assembled from the operation mixins."""

from __future__ import annotations

import logging

from ..const import DEFAULT_CODEPAGE
from ..text_utils import encode_text, get_unmappable_chars
from .barcode_operations import BarcodeOperationsMixin
from .buffer import CommandBuffer
from .config import DeviceTuning
from .control_operations import ControlOperationsMixin
from .image_operations import ImageOperationsMixin
from .print_mode import PrintModeState
from .style_operations import StyleOperationsMixin
from .text_operations import TextOperationsMixin

_LOGGER = logging.getLogger(__name__)


class CommandEncoder(
    TextOperationsMixin,
    StyleOperationsMixin,
    ControlOperationsMixin,
    BarcodeOperationsMixin,
    ImageOperationsMixin,
):
    """Translate print intents into ESC/POS bytes accumulated in a buffer.

    No operation transmits anything; the buffer is drained by a session's
    ``flush()`` or read with :attr:`print_string`.
    """

    def __init__(
        self,
        tuning: DeviceTuning | None = None,
        *,
        codepage: str = DEFAULT_CODEPAGE,
        buffer: CommandBuffer | None = None,
    ) -> None:
        self._tuning = tuning or DeviceTuning()
        self._codepage = codepage
        self._buffer = buffer if buffer is not None else CommandBuffer()
        self._mode = PrintModeState()

    @property
    def buffer(self) -> CommandBuffer:
        return self._buffer

    @property
    def tuning(self) -> DeviceTuning:
        return self._tuning

    @property
    def codepage(self) -> str:
        return self._codepage

    @property
    def print_string(self) -> bytes:
        """Return the bytes queued since the last flush."""
        return self._buffer.getvalue()

    def clear(self) -> None:
        """Drop everything queued without sending it."""
        self._buffer.clear()

    def _append(self, data: bytes) -> None:
        self._buffer.append(data)

    def _encode_text(self, text: str) -> bytes:
        if _LOGGER.isEnabledFor(logging.DEBUG):
            unmappable = get_unmappable_chars(text, self._codepage)
            if unmappable:
                _LOGGER.debug("Replacing characters missing from %s: %s", self._codepage, "".join(unmappable))
        return encode_text(text, self._codepage)

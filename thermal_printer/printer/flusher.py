"""Chunked, paced transmission of the command buffer."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import logging
import time
from typing import TYPE_CHECKING

from ..const import DEFAULT_CHUNK_SIZE, DEFAULT_PACING
from ..exceptions import TransmissionError
from .buffer import CommandBuffer

if TYPE_CHECKING:
    from .base_transport import Transport

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class FlushResult:
    """Outcome of a successful flush."""

    chunks_sent: int = 0
    bytes_sent: int = 0


class Flusher:
    """Drain a :class:`CommandBuffer` to a transport in bounded chunks.

    Each chunk is followed by a blocking ``pacing`` sleep so slow printers
    are not overrun. When a send fails, the buffer keeps every byte that was
    not confirmed written and :class:`TransmissionError` is raised; with
    ``discard_on_error`` the buffer is cleared instead.
    """

    def __init__(
        self,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        pacing: float = DEFAULT_PACING,
        *,
        discard_on_error: bool = False,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        if pacing < 0:
            raise ValueError(f"pacing must not be negative, got {pacing}")
        self.chunk_size = chunk_size
        self.pacing = pacing
        self.discard_on_error = discard_on_error
        self._sleep = sleep

    def flush(self, buffer: CommandBuffer, transport: Transport) -> FlushResult:
        """Send the whole buffer and clear it."""
        if not len(buffer):
            return FlushResult()

        total = len(buffer)
        chunks_sent = 0
        bytes_sent = 0
        try:
            for chunk in buffer.segments(self.chunk_size):
                transport.send(chunk)
                chunks_sent += 1
                bytes_sent += len(chunk)
                self._sleep(self.pacing)
        except TransmissionError as err:
            pending = total - bytes_sent
            if self.discard_on_error:
                _LOGGER.warning("Transmission failed, discarding %s unsent bytes", pending)
                buffer.clear()
            else:
                _LOGGER.warning("Transmission failed, keeping %s unsent bytes for retry", pending)
                buffer.discard(bytes_sent)
            raise TransmissionError(str(err), bytes_sent=bytes_sent, pending=pending) from err

        buffer.clear()
        _LOGGER.debug("Flushed %s bytes in %s chunks", bytes_sent, chunks_sent)
        return FlushResult(chunks_sent=chunks_sent, bytes_sent=bytes_sent)

"""Printer session tying the command encoder to a transport."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
import logging
import threading
from typing import Any

from escpos.constants import HW_INIT

from ..const import (
    CONF_CHUNK_SIZE,
    CONF_CODEPAGE,
    CONF_DISCARD_ON_ERROR,
    CONF_PACING,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_CODEPAGE,
    DEFAULT_PACING,
)
from ..exceptions import PrinterConnectionError, TransmissionError
from ..security import sanitize_log_message
from .base_transport import Transport
from .config import (
    ConnectionConfig,
    DeviceTuning,
    build_connection_config,
    build_device_tuning,
    validate_options,
)
from .encoder import CommandEncoder
from .factory import build_transport
from .flusher import Flusher, FlushResult
from .self_test import queue_test_page

_LOGGER = logging.getLogger(__name__)

TransportFactory = Callable[[ConnectionConfig, DeviceTuning], Transport]


class ThermalPrinter(CommandEncoder):
    """A session with one ESC/POS printer.

    Encoder operations queue bytes; :meth:`flush` (or :meth:`print`) sends
    them. The transport is opened on first need and kept until
    :meth:`close`; the printer init sequence is sent on the first connection
    only. A session is meant for one thread at a time: callers
    sharing it hold :attr:`lock` around the whole encode-then-flush sequence.

        with ThermalPrinter.from_options(device_ip="192.168.1.50") as printer:
            printer.write("Receipt Details\\n")
            printer.bold_on()
            printer.write("Total 4.20")
            printer.bold_off()
            printer.cutpaper()
            printer.flush()
    """

    def __init__(
        self,
        connection: ConnectionConfig,
        tuning: DeviceTuning | None = None,
        *,
        codepage: str = DEFAULT_CODEPAGE,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        pacing: float = DEFAULT_PACING,
        discard_on_error: bool = False,
        transport_factory: TransportFactory = build_transport,
    ) -> None:
        super().__init__(tuning, codepage=codepage)
        self._connection = connection
        self._flusher = Flusher(chunk_size, pacing, discard_on_error=discard_on_error)
        self._transport_factory = transport_factory
        self._transport: Transport | None = None
        self._lock = threading.RLock()
        self._last_connect: datetime | None = None
        self._last_ok: datetime | None = None
        self._last_error: datetime | None = None
        self._last_error_reason: str | None = None
        self._bytes_sent = 0
        self._chunks_sent = 0
        self._initialized = False

    @classmethod
    def from_options(cls, **options: Any) -> ThermalPrinter:
        """Build a session from the flat option set.

        Exactly one of ``serial_device_path``, ``usb_device_path`` or
        ``device_ip`` selects the connection; ConfigurationError otherwise.
        """
        validated = validate_options(options)
        return cls(
            build_connection_config(validated),
            build_device_tuning(validated),
            codepage=validated[CONF_CODEPAGE],
            chunk_size=validated[CONF_CHUNK_SIZE],
            pacing=validated[CONF_PACING],
            discard_on_error=validated[CONF_DISCARD_ON_ERROR],
        )

    @property
    def connection(self) -> ConnectionConfig:
        """Return the connection configuration."""
        return self._connection

    @property
    def flusher(self) -> Flusher:
        return self._flusher

    @property
    def lock(self) -> threading.RLock:
        """Lock serializing access to the buffer and transport."""
        return self._lock

    @property
    def is_connected(self) -> bool:
        return self._transport is not None and self._transport.is_open

    def get_connection_info(self) -> str:
        """Return a human-readable connection info string."""
        if self._transport is not None:
            return self._transport.get_connection_info()
        return build_transport(self._connection, self._tuning).get_connection_info()

    def connect(self) -> Transport:
        """Open the transport now instead of on the first flush."""
        with self._lock:
            return self._ensure_transport()

    def _ensure_transport(self) -> Transport:
        if self._transport is not None and self._transport.is_open:
            return self._transport
        # The init sequence (ESC @ among it) goes out on the first connection
        # only. Reconnects continue the byte stream where the printer stopped.
        try:
            transport = self._transport_factory(self._connection, self._tuning)
            transport.open(initialize=not self._initialized)
        except PrinterConnectionError as err:
            self._mark_error(err)
            raise
        self._transport = transport
        self._initialized = True
        self._last_connect = datetime.now(timezone.utc)
        return transport

    def flush(self) -> FlushResult:
        """Send the queued bytes in paced chunks.

        On TransmissionError the transport is closed and the unsent bytes stay
        queued unless the session was created with ``discard_on_error``. The
        next flush reconnects without re-initializing the printer, so the kept
        bytes complete any command cut at the chunk boundary.
        """
        with self._lock:
            if not len(self._buffer):
                return FlushResult()
            transport = self._ensure_transport()
            try:
                result = self._flusher.flush(self._buffer, transport)
            except TransmissionError as err:
                self._bytes_sent += err.bytes_sent
                self._mark_error(err)
                transport.close()
                raise
            self._bytes_sent += result.bytes_sent
            self._chunks_sent += result.chunks_sent
            self._mark_success()
            return result

    # print() is the historical name of flush()
    print = flush

    def reset(self) -> None:
        """Send ESC @ straight to the printer, bypassing the buffer.

        The printer drops its own buffered data and modes, so the local print
        mode flags are reset as well. Queued bytes are kept.
        """
        with self._lock:
            transport = self._ensure_transport()
            try:
                transport.send(HW_INIT)
            except TransmissionError as err:
                self._mark_error(err)
                transport.close()
                raise
            self._mode.reset()

    def close(self) -> None:
        """Close the transport; queued bytes are kept for a later flush."""
        with self._lock:
            if self._transport is not None:
                self._transport.close()
                self._transport = None

    def __enter__(self) -> ThermalPrinter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def print_test_page(self) -> FlushResult:
        """Queue the demonstration receipt and send it."""
        with self._lock:
            queue_test_page(self)
            return self.flush()

    def get_diagnostics(self) -> dict[str, Any]:
        """Return diagnostic information about the session."""

        def _iso(dt_obj: datetime | None) -> str | None:
            return dt_obj.isoformat() if dt_obj is not None else None

        return {
            "connected": self.is_connected,
            "connection_info": self.get_connection_info(),
            "last_connect": _iso(self._last_connect),
            "last_ok": _iso(self._last_ok),
            "last_error": _iso(self._last_error),
            "last_error_reason": self._last_error_reason,
            "bytes_sent": self._bytes_sent,
            "chunks_sent": self._chunks_sent,
            "pending_bytes": len(self._buffer),
        }

    def _mark_success(self) -> None:
        self._last_ok = datetime.now(timezone.utc)

    def _mark_error(self, err: Exception) -> None:
        self._last_error = datetime.now(timezone.utc)
        self._last_error_reason = sanitize_log_message(str(err))
        _LOGGER.debug("Printer error recorded: %s", self._last_error_reason)

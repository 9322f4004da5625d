"""Base transport class for ESC/POS printers."""

from __future__ import annotations

from abc import ABC, abstractmethod
import contextlib
import logging
from typing import Any

from escpos.constants import ESC, GS, HW_INIT

from ..exceptions import PrinterConnectionError, TransmissionError
from ..security import sanitize_log_message
from .config import DeviceTuning

_LOGGER = logging.getLogger(__name__)

PRINT_SETTINGS = ESC + b"\x37"
# GS ( N opens the density configuration command. No length or payload
# follows; printers that require one ignore the incomplete sequence.
DENSITY_PREFIX = GS + b"\x28\x4e"


def init_sequence(tuning: DeviceTuning) -> bytes:
    """Return the bytes sent once when a transport is opened."""
    return HW_INIT + PRINT_SETTINGS + bytes([tuning.heating_dots]) + DENSITY_PREFIX


class Transport(ABC):
    """Abstract blocking byte channel to one physical printer."""

    def __init__(self, config: Any, tuning: DeviceTuning | None = None) -> None:
        self._config = config
        self._tuning = tuning or DeviceTuning()
        self._is_open = False

    @property
    def config(self) -> Any:
        """Return the connection configuration."""
        return self._config

    @property
    def is_open(self) -> bool:
        return self._is_open

    @abstractmethod
    def _open(self) -> None:
        """Open the underlying channel, raising OSError on failure."""

    @abstractmethod
    def _write(self, data: bytes) -> None:
        """Write all of ``data`` to the underlying channel."""

    @abstractmethod
    def _close(self) -> None:
        """Release the underlying channel."""

    @abstractmethod
    def get_connection_info(self) -> str:
        """Return a human-readable connection info string."""

    def open(self, *, initialize: bool = True) -> Transport:
        """Open the channel and send the initialization sequence.

        With ``initialize=False`` the channel is opened silently, leaving the
        printer's modes and any partially received command untouched.
        """
        if self._is_open:
            return self
        try:
            self._open()
        except (OSError, ValueError) as err:
            _LOGGER.warning(
                "Could not open printer %s: %s",
                sanitize_log_message(self.get_connection_info()),
                sanitize_log_message(str(err)),
            )
            raise PrinterConnectionError(f"Could not open printer {self.get_connection_info()}: {err}") from err
        self._is_open = True

        if initialize:
            try:
                self.send(init_sequence(self._tuning))
            except TransmissionError as err:
                self.close()
                raise PrinterConnectionError(
                    f"Could not initialize printer {self.get_connection_info()}: {err}"
                ) from err
        _LOGGER.debug("Opened printer %s", sanitize_log_message(self.get_connection_info()))
        return self

    def send(self, data: bytes) -> None:
        """Blocking write of ``data`` to the open channel."""
        if not self._is_open:
            raise TransmissionError(f"Printer {self.get_connection_info()} is not open", pending=len(data))
        try:
            self._write(data)
        except (OSError, ValueError) as err:
            raise TransmissionError(
                f"Write to {self.get_connection_info()} failed: {err}", pending=len(data)
            ) from err

    def close(self) -> None:
        """Close the channel; closing twice is harmless."""
        if not self._is_open:
            return
        self._is_open = False
        with contextlib.suppress(OSError):
            self._close()

    def __enter__(self) -> Transport:
        return self.open()

    def __exit__(self, *exc_info: object) -> None:
        self.close()

"""Exceptions raised by the thermal printer library."""

from __future__ import annotations


class ThermalPrinterError(Exception):
    """Base class for all thermal printer errors."""


class ConfigurationError(ThermalPrinterError, ValueError):
    """The printer options are invalid, empty or ambiguous."""


class InvalidArgumentError(ThermalPrinterError, ValueError):
    """A command operand is outside the range the protocol allows."""


class PrinterConnectionError(ThermalPrinterError, ConnectionError):
    """The serial port, device file or socket could not be opened."""


class TransmissionError(ThermalPrinterError, OSError):
    """A write to an open transport failed.

    ``bytes_sent`` counts the bytes confirmed written during the flush that
    failed, ``pending`` the bytes that were not.
    """

    def __init__(self, message: str, *, bytes_sent: int = 0, pending: int = 0) -> None:
        super().__init__(message)
        self.bytes_sent = bytes_sent
        self.pending = pending

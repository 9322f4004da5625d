"""Driver library for ESC/POS thermal receipt printers.

Commands are queued in a buffer by a :class:`ThermalPrinter` session and sent
over a serial port, a USB printer device file or a raw TCP socket in paced
chunks when the session is flushed.
"""

from __future__ import annotations

from .exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    PrinterConnectionError,
    ThermalPrinterError,
    TransmissionError,
)
from .printer import (
    CommandBuffer,
    CommandEncoder,
    DeviceTuning,
    FlushResult,
    NetworkConnectionConfig,
    PrintModeState,
    SerialConnectionConfig,
    ThermalPrinter,
    UsbFileConnectionConfig,
    create_transport,
)

__version__ = "1.0.0"

__all__ = [
    "CommandBuffer",
    "CommandEncoder",
    "ConfigurationError",
    "DeviceTuning",
    "FlushResult",
    "InvalidArgumentError",
    "NetworkConnectionConfig",
    "PrintModeState",
    "PrinterConnectionError",
    "SerialConnectionConfig",
    "ThermalPrinter",
    "ThermalPrinterError",
    "TransmissionError",
    "UsbFileConnectionConfig",
    "create_transport",
]

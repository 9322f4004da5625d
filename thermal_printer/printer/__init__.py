"""Printer package for ESC/POS thermal printers.

This package provides the command encoder, the serial, USB device file and
network transports, and the session that flushes queued commands to them.
"""

from __future__ import annotations

from .base_transport import Transport, init_sequence
from .buffer import CommandBuffer
from .config import (
    ConnectionConfig,
    DeviceTuning,
    NetworkConnectionConfig,
    SerialConnectionConfig,
    UsbFileConnectionConfig,
    build_connection_config,
    build_device_tuning,
)
from .encoder import CommandEncoder
from .factory import build_transport, create_transport
from .flusher import Flusher, FlushResult
from .network_transport import NetworkTransport
from .print_mode import PrintModeState
from .serial_transport import SerialTransport
from .session import ThermalPrinter
from .usb_file_transport import UsbFileTransport

__all__ = [
    "CommandBuffer",
    "CommandEncoder",
    "ConnectionConfig",
    "DeviceTuning",
    "FlushResult",
    "Flusher",
    "NetworkConnectionConfig",
    "NetworkTransport",
    "PrintModeState",
    "SerialConnectionConfig",
    "SerialTransport",
    "ThermalPrinter",
    "Transport",
    "UsbFileConnectionConfig",
    "UsbFileTransport",
    "build_connection_config",
    "build_device_tuning",
    "build_transport",
    "create_transport",
    "init_sequence",
]

"""Factory function for creating printer transports."""

from __future__ import annotations

from .base_transport import Transport
from .config import (
    ConnectionConfig,
    DeviceTuning,
    NetworkConnectionConfig,
    SerialConnectionConfig,
    UsbFileConnectionConfig,
)
from .network_transport import NetworkTransport
from .serial_transport import SerialTransport
from .usb_file_transport import UsbFileTransport


def build_transport(config: ConnectionConfig, tuning: DeviceTuning | None = None) -> Transport:
    """Return an unopened transport matching the configuration variant."""
    if isinstance(config, SerialConnectionConfig):
        return SerialTransport(config, tuning)
    if isinstance(config, UsbFileConnectionConfig):
        return UsbFileTransport(config, tuning)
    if isinstance(config, NetworkConnectionConfig):
        return NetworkTransport(config, tuning)
    raise TypeError(f"Unsupported connection config: {config!r}")


def create_transport(config: ConnectionConfig, tuning: DeviceTuning | None = None) -> Transport:
    """Open a transport for ``config`` and send the printer init sequence.

    Raises PrinterConnectionError when the channel cannot be opened.
    """
    return build_transport(config, tuning).open()

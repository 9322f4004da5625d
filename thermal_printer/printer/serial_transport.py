"""Serial port printer transport implementation."""

from __future__ import annotations

import serial

from .base_transport import Transport
from .config import DeviceTuning, SerialConnectionConfig


class SerialTransport(Transport):
    """Transport for printers attached to a serial device (e.g. /dev/ttyACM0).

    If the printer prints garbled characters, the baudrate usually does not
    match the printer's setting.
    """

    def __init__(self, config: SerialConnectionConfig, tuning: DeviceTuning | None = None) -> None:
        super().__init__(config, tuning)
        self._serial_config = config
        self._port: serial.Serial | None = None

    @property
    def config(self) -> SerialConnectionConfig:
        """Return the serial connection configuration."""
        return self._serial_config

    def _open(self) -> None:
        self._port = serial.Serial(self._serial_config.path, baudrate=self._serial_config.baudrate)

    def _write(self, data: bytes) -> None:
        assert self._port is not None
        self._port.write(data)

    def _close(self) -> None:
        if self._port is not None:
            port, self._port = self._port, None
            port.close()

    def get_connection_info(self) -> str:
        """Return a human-readable connection info string."""
        return f"serial {self._serial_config.path}@{self._serial_config.baudrate}"

"""USB character device printer transport implementation."""

from __future__ import annotations

from typing import BinaryIO

from .base_transport import Transport
from .config import DeviceTuning, UsbFileConnectionConfig


class UsbFileTransport(Transport):
    """Transport writing to a printer device file (e.g. /dev/usb/lp0) in append mode."""

    def __init__(self, config: UsbFileConnectionConfig, tuning: DeviceTuning | None = None) -> None:
        super().__init__(config, tuning)
        self._usb_config = config
        self._file: BinaryIO | None = None

    @property
    def config(self) -> UsbFileConnectionConfig:
        """Return the device file configuration."""
        return self._usb_config

    def _open(self) -> None:
        # Unbuffered so each chunk reaches the device before the pacing sleep
        self._file = open(self._usb_config.path, "ab", buffering=0)  # noqa: SIM115

    def _write(self, data: bytes) -> None:
        assert self._file is not None
        view = memoryview(data)
        while view:
            written = self._file.write(view)
            if not written:
                raise OSError(f"device accepted no data ({len(view)} bytes left)")
            view = view[written:]

    def _close(self) -> None:
        if self._file is not None:
            handle, self._file = self._file, None
            handle.close()

    def get_connection_info(self) -> str:
        """Return a human-readable connection info string."""
        return f"USB {self._usb_config.path}"

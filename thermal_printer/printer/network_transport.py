"""Network (raw TCP) printer transport implementation."""

from __future__ import annotations

import socket

from .base_transport import Transport
from .config import DeviceTuning, NetworkConnectionConfig


class NetworkTransport(Transport):
    """Transport for network printers listening on a raw TCP port (usually 9100)."""

    def __init__(self, config: NetworkConnectionConfig, tuning: DeviceTuning | None = None) -> None:
        super().__init__(config, tuning)
        self._network_config = config
        self._sock: socket.socket | None = None

    @property
    def config(self) -> NetworkConnectionConfig:
        """Return the network connection configuration."""
        return self._network_config

    def _open(self) -> None:
        sock = socket.create_connection(
            (self._network_config.ip, self._network_config.port),
            timeout=self._network_config.connect_timeout,
        )
        # The timeout only bounds the connect; writes block until done
        sock.settimeout(None)
        self._sock = sock

    def _write(self, data: bytes) -> None:
        assert self._sock is not None
        self._sock.sendall(data)

    def _close(self) -> None:
        if self._sock is not None:
            sock, self._sock = self._sock, None
            sock.close()

    def get_connection_info(self) -> str:
        """Return a human-readable connection info string."""
        return f"{self._network_config.ip}:{self._network_config.port}"

from collections.abc import Callable
import errno
from typing import Any

import pytest

from thermal_printer.printer import (
    CommandEncoder,
    DeviceTuning,
    NetworkConnectionConfig,
    ThermalPrinter,
    Transport,
)

INIT_SEQUENCE = b"\x1b@\x1b7\x07\x1d(N"


class RecordingTransport(Transport):
    """Transport that records writes instead of touching a device.

    ``fail_on_call`` makes the n-th write (1-based, the init sequence being
    the first) raise a broken pipe error.
    """

    def __init__(
        self,
        config: Any = None,
        tuning: DeviceTuning | None = None,
        *,
        fail_on_call: int | None = None,
        fail_open: bool = False,
    ) -> None:
        super().__init__(config or NetworkConnectionConfig(ip="127.0.0.1"), tuning)
        self.writes: list[bytes] = []
        self.calls = 0
        self.fail_on_call = fail_on_call
        self.fail_open = fail_open
        self.close_count = 0

    def _open(self) -> None:
        if self.fail_open:
            raise OSError(errno.ECONNREFUSED, "Connection refused")

    def _write(self, data: bytes) -> None:
        self.calls += 1
        if self.calls == self.fail_on_call:
            raise OSError(errno.EPIPE, "Broken pipe")
        self.writes.append(bytes(data))

    def _close(self) -> None:
        self.close_count += 1

    def get_connection_info(self) -> str:
        return "recording"

    @property
    def payload(self) -> bytes:
        """Everything written after the init sequence."""
        return b"".join(self.writes[1:])


@pytest.fixture
def encoder() -> CommandEncoder:
    return CommandEncoder()


@pytest.fixture
def make_transport() -> type[RecordingTransport]:
    return RecordingTransport


@pytest.fixture
def opened_transport() -> RecordingTransport:
    """An open recording transport with the init write already cleared."""
    transport = RecordingTransport()
    transport.open()
    transport.writes.clear()
    transport.calls = 0
    return transport


@pytest.fixture
def transports() -> list[RecordingTransport]:
    """Transports handed out by the ``printer`` fixture, in creation order."""
    return []


@pytest.fixture
def transport_factory(transports: list[RecordingTransport]) -> Callable[..., Transport]:
    def _factory(config: Any, tuning: DeviceTuning) -> Transport:
        transport = RecordingTransport(config, tuning)
        transports.append(transport)
        return transport

    return _factory


@pytest.fixture
def printer(transport_factory: Callable[..., Transport]) -> ThermalPrinter:
    """A session on a recording transport with pacing disabled."""
    return ThermalPrinter(
        NetworkConnectionConfig(ip="192.168.1.50"),
        pacing=0,
        transport_factory=transport_factory,
    )

"""Redacted diagnostics payload for a printer session."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict
from typing import Any

from .const import CONF_DEVICE_IP
from .printer.session import ThermalPrinter

REDACTED = "**REDACTED**"
TO_REDACT = {"ip", "path", CONF_DEVICE_IP, "connection_info"}


def redact_data(data: Any, to_redact: set[str]) -> Any:
    """Return a copy of ``data`` with the values of ``to_redact`` keys replaced."""
    if isinstance(data, Mapping):
        return {
            key: REDACTED if key in to_redact and value is not None else redact_data(value, to_redact)
            for key, value in data.items()
        }
    if isinstance(data, list):
        return [redact_data(item, to_redact) for item in data]
    return data


def get_session_diagnostics(printer: ThermalPrinter) -> dict[str, Any]:
    """Return diagnostics for a printer session."""
    payload = {
        "connection": asdict(printer.connection),
        "tuning": asdict(printer.tuning),
        "session": {
            "codepage": printer.codepage,
            "chunk_size": printer.flusher.chunk_size,
            "pacing": printer.flusher.pacing,
            "discard_on_error": printer.flusher.discard_on_error,
        },
        "print_mode": asdict(printer.print_mode),
        "runtime": printer.get_diagnostics(),
    }
    return redact_data(payload, TO_REDACT)

"""Configuration dataclasses for printer sessions."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal

import voluptuous as vol

from ..const import (
    CONF_ALPHA_THRESHOLD,
    CONF_BAUDRATE,
    CONF_BLACK_THRESHOLD,
    CONF_DEVICE_IP,
    CONF_DEVICE_PORT,
    CONF_HEAT_INTERVAL,
    CONF_HEAT_TIME,
    CONF_HEATING_DOTS,
    CONF_SERIAL_DEVICE_PATH,
    CONF_USB_DEVICE_PATH,
    CONNECTION_SELECTORS,
    DEFAULT_ALPHA_THRESHOLD,
    DEFAULT_BAUDRATE,
    DEFAULT_BLACK_THRESHOLD,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_HEAT_INTERVAL,
    DEFAULT_HEAT_TIME,
    DEFAULT_HEATING_DOTS,
    DEFAULT_PORT,
)
from ..exceptions import ConfigurationError
from .schemas import PRINTER_OPTIONS_SCHEMA


@dataclass(frozen=True)
class SerialConnectionConfig:
    """Configuration for printers attached to a serial port."""

    path: str
    baudrate: int = DEFAULT_BAUDRATE
    connection_type: Literal["serial"] = field(default="serial", repr=False)


@dataclass(frozen=True)
class UsbFileConnectionConfig:
    """Configuration for USB printers exposed as a character device (e.g. /dev/usb/lp0)."""

    path: str
    connection_type: Literal["usb_file"] = field(default="usb_file", repr=False)


@dataclass(frozen=True)
class NetworkConnectionConfig:
    """Configuration for network (raw TCP) printers."""

    ip: str
    port: int = DEFAULT_PORT
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    connection_type: Literal["network"] = field(default="network", repr=False)


ConnectionConfig = SerialConnectionConfig | UsbFileConnectionConfig | NetworkConnectionConfig


@dataclass(frozen=True)
class DeviceTuning:
    """Print head timing and image thresholds.

    Only ``heating_dots`` is sent to the device (at transport creation).
    ``black_threshold`` and ``alpha_threshold`` drive the raster encoder.
    """

    heat_time: int = DEFAULT_HEAT_TIME
    heat_interval: int = DEFAULT_HEAT_INTERVAL
    heating_dots: int = DEFAULT_HEATING_DOTS
    black_threshold: int = DEFAULT_BLACK_THRESHOLD
    alpha_threshold: int = DEFAULT_ALPHA_THRESHOLD


def validate_options(options: Mapping[str, Any]) -> dict[str, Any]:
    """Validate raw printer options, filling in defaults."""
    try:
        return PRINTER_OPTIONS_SCHEMA(dict(options))
    except vol.Invalid as err:
        raise ConfigurationError(f"Invalid printer options: {err}") from err


def build_connection_config(options: Mapping[str, Any]) -> ConnectionConfig:
    """Select the single connection variant described by ``options``.

    Exactly one of ``serial_device_path``, ``usb_device_path`` and
    ``device_ip`` must be set.
    """
    validated = validate_options(options)
    selected = [key for key in CONNECTION_SELECTORS if validated.get(key)]
    if not selected:
        raise ConfigurationError(
            "No printer connection configured; set one of " + ", ".join(CONNECTION_SELECTORS)
        )
    if len(selected) > 1:
        raise ConfigurationError("Ambiguous printer connection; got " + ", ".join(selected))

    if selected[0] == CONF_SERIAL_DEVICE_PATH:
        return SerialConnectionConfig(
            path=validated[CONF_SERIAL_DEVICE_PATH],
            baudrate=validated[CONF_BAUDRATE],
        )
    if selected[0] == CONF_USB_DEVICE_PATH:
        return UsbFileConnectionConfig(path=validated[CONF_USB_DEVICE_PATH])
    return NetworkConnectionConfig(
        ip=validated[CONF_DEVICE_IP],
        port=validated[CONF_DEVICE_PORT],
    )


def build_device_tuning(options: Mapping[str, Any]) -> DeviceTuning:
    """Build device tuning from ``options``, using defaults for missing keys."""
    validated = validate_options(options)
    return DeviceTuning(
        heat_time=validated[CONF_HEAT_TIME],
        heat_interval=validated[CONF_HEAT_INTERVAL],
        heating_dots=validated[CONF_HEATING_DOTS],
        black_threshold=validated[CONF_BLACK_THRESHOLD],
        alpha_threshold=validated[CONF_ALPHA_THRESHOLD],
    )

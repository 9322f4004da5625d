"""Validation schemas for printer construction options."""

from __future__ import annotations

from typing import Any

import voluptuous as vol

from ..const import (
    CONF_ALPHA_THRESHOLD,
    CONF_BAUDRATE,
    CONF_BLACK_THRESHOLD,
    CONF_CHUNK_SIZE,
    CONF_CODEPAGE,
    CONF_DEVICE_IP,
    CONF_DEVICE_PORT,
    CONF_DISCARD_ON_ERROR,
    CONF_HEAT_INTERVAL,
    CONF_HEAT_TIME,
    CONF_HEATING_DOTS,
    CONF_PACING,
    CONF_SERIAL_DEVICE_PATH,
    CONF_USB_DEVICE_PATH,
    DEFAULT_ALPHA_THRESHOLD,
    DEFAULT_BAUDRATE,
    DEFAULT_BLACK_THRESHOLD,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_CODEPAGE,
    DEFAULT_HEAT_INTERVAL,
    DEFAULT_HEAT_TIME,
    DEFAULT_HEATING_DOTS,
    DEFAULT_PACING,
    DEFAULT_PORT,
)

_NON_EMPTY_STR = vol.All(str, vol.Strip, vol.Length(min=1))
_OPTIONAL_STR = vol.Any(None, vol.All(str, vol.Strip))
_BYTE = vol.All(vol.Coerce(int), vol.Range(min=0, max=255))

CONNECTION_SCHEMA: dict[vol.Marker, Any] = {
    vol.Optional(CONF_USB_DEVICE_PATH): _OPTIONAL_STR,
    vol.Optional(CONF_SERIAL_DEVICE_PATH): _OPTIONAL_STR,
    vol.Optional(CONF_DEVICE_IP): _OPTIONAL_STR,
    vol.Optional(CONF_DEVICE_PORT, default=DEFAULT_PORT): vol.All(
        vol.Coerce(int), vol.Range(min=1, max=65535)
    ),
    vol.Optional(CONF_BAUDRATE, default=DEFAULT_BAUDRATE): vol.All(vol.Coerce(int), vol.Range(min=1)),
}

TUNING_SCHEMA: dict[vol.Marker, Any] = {
    vol.Optional(CONF_HEAT_TIME, default=DEFAULT_HEAT_TIME): _BYTE,
    vol.Optional(CONF_HEAT_INTERVAL, default=DEFAULT_HEAT_INTERVAL): _BYTE,
    vol.Optional(CONF_HEATING_DOTS, default=DEFAULT_HEATING_DOTS): _BYTE,
    vol.Optional(CONF_BLACK_THRESHOLD, default=DEFAULT_BLACK_THRESHOLD): _BYTE,
    vol.Optional(CONF_ALPHA_THRESHOLD, default=DEFAULT_ALPHA_THRESHOLD): _BYTE,
}

SESSION_SCHEMA: dict[vol.Marker, Any] = {
    vol.Optional(CONF_CODEPAGE, default=DEFAULT_CODEPAGE): _NON_EMPTY_STR,
    vol.Optional(CONF_CHUNK_SIZE, default=DEFAULT_CHUNK_SIZE): vol.All(vol.Coerce(int), vol.Range(min=1)),
    vol.Optional(CONF_PACING, default=DEFAULT_PACING): vol.All(vol.Coerce(float), vol.Range(min=0)),
    vol.Optional(CONF_DISCARD_ON_ERROR, default=False): vol.Boolean(),
}

PRINTER_OPTIONS_SCHEMA = vol.Schema({**CONNECTION_SCHEMA, **TUNING_SCHEMA, **SESSION_SCHEMA})

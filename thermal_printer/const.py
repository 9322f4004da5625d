"""Constants for the thermal printer library."""

from __future__ import annotations

# Connection selectors (exactly one must be set)
CONF_USB_DEVICE_PATH = "usb_device_path"
CONF_SERIAL_DEVICE_PATH = "serial_device_path"
CONF_DEVICE_IP = "device_ip"
CONF_DEVICE_PORT = "device_port"
CONF_BAUDRATE = "baudrate"

CONNECTION_SELECTORS: tuple[str, ...] = (
    CONF_SERIAL_DEVICE_PATH,
    CONF_USB_DEVICE_PATH,
    CONF_DEVICE_IP,
)

# Connection type tags
CONNECTION_TYPE_SERIAL = "serial"
CONNECTION_TYPE_USB_FILE = "usb_file"
CONNECTION_TYPE_NETWORK = "network"

# Device tuning keys
CONF_HEAT_TIME = "heat_time"
CONF_HEAT_INTERVAL = "heat_interval"
CONF_HEATING_DOTS = "heating_dots"
CONF_BLACK_THRESHOLD = "black_threshold"
CONF_ALPHA_THRESHOLD = "alpha_threshold"

# Session keys
CONF_CODEPAGE = "codepage"
CONF_CHUNK_SIZE = "chunk_size"
CONF_PACING = "pacing"
CONF_DISCARD_ON_ERROR = "discard_on_error"

# Default values
DEFAULT_PORT = 9100
DEFAULT_BAUDRATE = 38400
DEFAULT_CONNECT_TIMEOUT = 1.0
DEFAULT_HEAT_TIME = 120
DEFAULT_HEAT_INTERVAL = 50
DEFAULT_HEATING_DOTS = 7
DEFAULT_BLACK_THRESHOLD = 48
DEFAULT_ALPHA_THRESHOLD = 127
DEFAULT_CODEPAGE = "CP437"

# Flush pacing: some printers choke when fed too much too quickly
DEFAULT_CHUNK_SIZE = 300  # bytes
DEFAULT_PACING = 0.001  # seconds

# Justification codes for ESC a
JUSTIFY_LEFT = 0
JUSTIFY_CENTER = 1
JUSTIFY_RIGHT = 2

# Print mode bit weights for ESC !
MODE_FONT_B = 1
MODE_EMPHASIZED = 8
MODE_DOUBLE_HEIGHT = 16
MODE_DOUBLE_WIDTH = 32
MODE_UNDERLINE = 128

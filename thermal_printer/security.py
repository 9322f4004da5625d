"""Input validation and log sanitizing helpers."""

from __future__ import annotations

import re
from typing import Any

from .exceptions import InvalidArgumentError

MAX_BYTE = 255
MAX_LOG_MESSAGE_LENGTH = 200

# IPv4 addresses and absolute device paths are redacted from log output
_IPV4_RE = re.compile(r"\b\d{1,3}(?:\.\d{1,3}){3}\b")
_DEVICE_PATH_RE = re.compile(r"/dev/[\w./-]+")


def validate_numeric_input(value: Any, min_val: int, max_val: int, name: str) -> int:
    """Coerce ``value`` to int and check it lies within ``[min_val, max_val]``."""
    if isinstance(value, bool):
        value = int(value)
    try:
        number = int(value)
    except (TypeError, ValueError) as err:
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}") from err
    if number != value and not isinstance(value, str):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    if not min_val <= number <= max_val:
        raise InvalidArgumentError(f"{name} must be between {min_val} and {max_val}, got {number}")
    return number


def validate_byte(value: Any, name: str) -> int:
    """Validate a single-byte protocol operand."""
    return validate_numeric_input(value, 0, MAX_BYTE, name)


def is_byte(value: Any) -> bool:
    """Return True when ``value`` is an int usable as a single byte."""
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return 0 <= value <= MAX_BYTE


def sanitize_log_message(message: str, max_length: int = MAX_LOG_MESSAGE_LENGTH) -> str:
    """Redact addresses and device paths and truncate long messages."""
    sanitized = _IPV4_RE.sub("[ip]", message)
    sanitized = _DEVICE_PATH_RE.sub("[device]", sanitized)
    if len(sanitized) > max_length:
        sanitized = sanitized[:max_length] + "..."
    return sanitized

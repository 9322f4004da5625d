"""1-bit raster encoding for the GS v 0 bit image command.

Pixels are given row-major as grey levels (``int``) or tuples ``(l, a)``,
``(r, g, b)`` or ``(r, g, b, a)`` with 0-255 channels. Output rows are packed
eight pixels per byte, most significant bit leftmost, a set bit printing a
black dot. Rows are padded with white to a whole byte.
"""

from __future__ import annotations

from collections.abc import Sequence
import logging
from typing import Any

from escpos.constants import GS

from ..const import DEFAULT_ALPHA_THRESHOLD, DEFAULT_BLACK_THRESHOLD
from ..exceptions import InvalidArgumentError

_LOGGER = logging.getLogger(__name__)

RASTER_BIT_IMAGE = GS + b"\x76\x30"
RASTER_MODE_NORMAL = 0
WHITE = 255.0
DITHER_MIDPOINT = 128.0
MAX_RASTER_DIMENSION = 0xFFFF


def _luminance_and_alpha(pixel: Any) -> tuple[float, int]:
    if isinstance(pixel, (int, float)):
        return float(pixel), 255
    size = len(pixel)
    if size == 1:
        return float(pixel[0]), 255
    if size == 2:
        return float(pixel[0]), int(pixel[1])
    if size in (3, 4):
        r, g, b = pixel[0], pixel[1], pixel[2]
        alpha = int(pixel[3]) if size == 4 else 255
        # ITU-R BT.601 luma weights
        return 0.299 * r + 0.587 * g + 0.114 * b, alpha
    raise InvalidArgumentError(f"Unsupported pixel value: {pixel!r}")


def _check_dimensions(width: int, height: int, pixel_count: int) -> None:
    if not 0 < width <= MAX_RASTER_DIMENSION or not 0 < height <= MAX_RASTER_DIMENSION:
        raise InvalidArgumentError(f"Invalid raster size {width}x{height}")
    if pixel_count != width * height:
        raise InvalidArgumentError(
            f"Expected {width * height} pixels for {width}x{height}, got {pixel_count}"
        )


def threshold_pixels(
    width: int,
    height: int,
    pixel_data: Sequence[Any],
    black_threshold: int = DEFAULT_BLACK_THRESHOLD,
    alpha_threshold: int = DEFAULT_ALPHA_THRESHOLD,
) -> list[bool]:
    """Return one flag per pixel, True meaning a black dot.

    A pixel is black when it is opaque enough (alpha >= ``alpha_threshold``)
    and its luminance is below ``black_threshold``.
    """
    _check_dimensions(width, height, len(pixel_data))
    dots: list[bool] = []
    for pixel in pixel_data:
        luminance, alpha = _luminance_and_alpha(pixel)
        dots.append(alpha >= alpha_threshold and luminance < black_threshold)
    return dots


def dither_pixels(
    width: int,
    height: int,
    pixel_data: Sequence[Any],
    alpha_threshold: int = DEFAULT_ALPHA_THRESHOLD,
) -> list[bool]:
    """Return black-dot flags using Floyd-Steinberg error diffusion.

    Transparent pixels stay white and neither receive nor spread error.
    """
    _check_dimensions(width, height, len(pixel_data))
    levels: list[float] = []
    transparent: list[bool] = []
    for pixel in pixel_data:
        luminance, alpha = _luminance_and_alpha(pixel)
        levels.append(luminance)
        transparent.append(alpha < alpha_threshold)

    def _spread(x: int, y: int, amount: float) -> None:
        if 0 <= x < width and y < height:
            index = y * width + x
            if not transparent[index]:
                levels[index] += amount

    dots: list[bool] = []
    for y in range(height):
        for x in range(width):
            index = y * width + x
            if transparent[index]:
                dots.append(False)
                continue
            old = levels[index]
            new = 0.0 if old < DITHER_MIDPOINT else WHITE
            dots.append(new == 0.0)
            error = old - new
            _spread(x + 1, y, error * 7 / 16)
            _spread(x - 1, y + 1, error * 3 / 16)
            _spread(x, y + 1, error * 5 / 16)
            _spread(x + 1, y + 1, error * 1 / 16)
    return dots


def pack_rows(width: int, height: int, dots: Sequence[bool]) -> bytes:
    """Pack black-dot flags into raster rows, MSB first."""
    bytes_per_row = (width + 7) // 8
    packed = bytearray(bytes_per_row * height)
    for y in range(height):
        row_offset = y * bytes_per_row
        for x in range(width):
            if dots[y * width + x]:
                packed[row_offset + x // 8] |= 0x80 >> (x % 8)
    return bytes(packed)


def encode(
    width: int,
    height: int,
    pixel_data: Sequence[Any],
    black_threshold: int = DEFAULT_BLACK_THRESHOLD,
    alpha_threshold: int = DEFAULT_ALPHA_THRESHOLD,
    *,
    dither: bool = False,
) -> bytes:
    """Encode pixels into packed 1-bit raster rows."""
    if dither:
        dots = dither_pixels(width, height, pixel_data, alpha_threshold)
    else:
        dots = threshold_pixels(width, height, pixel_data, black_threshold, alpha_threshold)
    payload = pack_rows(width, height, dots)
    _LOGGER.debug("Encoded %sx%s raster (%s bytes, dither=%s)", width, height, len(payload), dither)
    return payload


def raster_command(width: int, height: int, payload: bytes) -> bytes:
    """Build ``GS v 0 m xL xH yL yH`` followed by ``payload``."""
    bytes_per_row = (width + 7) // 8
    if len(payload) != bytes_per_row * height:
        raise InvalidArgumentError(
            f"Raster payload is {len(payload)} bytes, expected {bytes_per_row * height}"
        )
    if bytes_per_row > MAX_RASTER_DIMENSION or height > MAX_RASTER_DIMENSION:
        raise InvalidArgumentError(f"Raster too large: {width}x{height}")
    header = RASTER_BIT_IMAGE + bytes(
        [
            RASTER_MODE_NORMAL,
            bytes_per_row & 0xFF,
            (bytes_per_row >> 8) & 0xFF,
            height & 0xFF,
            (height >> 8) & 0xFF,
        ]
    )
    return header + payload

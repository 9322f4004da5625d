"""Pillow adapter turning images into pixel data for the raster encoder."""

from __future__ import annotations

import logging
from os import PathLike
from typing import IO

from PIL import Image

_LOGGER = logging.getLogger(__name__)

# Common print head widths: 384 dots (58 mm paper), 576 dots (80 mm paper)
DEFAULT_MAX_WIDTH = 576


def load_image(source: str | PathLike[str] | IO[bytes] | Image.Image) -> Image.Image:
    """Open ``source`` unless it already is a Pillow image."""
    if isinstance(source, Image.Image):
        return source
    return Image.open(source)


def pixels_from_image(
    source: str | PathLike[str] | IO[bytes] | Image.Image,
    max_width: int | None = DEFAULT_MAX_WIDTH,
) -> tuple[int, int, list[tuple[int, int, int, int]]]:
    """Return ``(width, height, pixels)`` with row-major RGBA pixels.

    Images wider than ``max_width`` are scaled down keeping the aspect ratio.
    """
    img = load_image(source).convert("RGBA")
    if max_width and img.width > max_width:
        ratio = max_width / float(img.width)
        new_size = (max_width, max(1, int(img.height * ratio)))
        _LOGGER.debug("Resized image from %sx%s to %sx%s", img.width, img.height, *new_size)
        img = img.resize(new_size)
    raw = img.tobytes()
    pixels = [(raw[i], raw[i + 1], raw[i + 2], raw[i + 3]) for i in range(0, len(raw), 4)]
    return img.width, img.height, pixels

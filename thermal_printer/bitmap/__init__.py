"""Bitmap support: 1-bit raster encoding and image loading."""

from __future__ import annotations

from .image_loading import load_image, pixels_from_image
from .raster import dither_pixels, encode, pack_rows, raster_command, threshold_pixels

__all__ = [
    "dither_pixels",
    "encode",
    "load_image",
    "pack_rows",
    "pixels_from_image",
    "raster_command",
    "threshold_pixels",
]

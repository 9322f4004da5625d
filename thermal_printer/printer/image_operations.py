"""Image operation mixin for the ESC/POS command encoder."""

from __future__ import annotations

from collections.abc import Sequence
import logging
from typing import Any

from escpos.constants import CTL_LF, GS

from ..bitmap import encode, pixels_from_image, raster_command
from .config import DeviceTuning

_LOGGER = logging.getLogger(__name__)

# GS v 0 header as sent by print_bitmap; no size or pixel data follows
BITMAP_HEADER = GS + b"\x76\x30\x30\x32\x32"


class ImageOperationsMixin:
    """Mixin providing print_bitmap, print_raster and print_image."""

    # These attributes are expected from the encoder
    _tuning: DeviceTuning

    def _append(self, data: bytes) -> None:
        """Append bytes to the command buffer (implemented in encoder)."""
        raise NotImplementedError

    def print_bitmap(self, pixels: Any = None, width: int | None = None, height: int | None = None) -> None:
        """Queue the bare bitmap header.

        The pixel arguments are accepted but not encoded; use
        :meth:`print_raster` to print actual image data.
        """
        _LOGGER.debug("print_bitmap emits the header only (%sx%s ignored)", width, height)
        self._append(CTL_LF + BITMAP_HEADER)

    def print_raster(
        self,
        pixels: Sequence[Any],
        width: int,
        height: int,
        *,
        dither: bool = False,
    ) -> None:
        """Queue a GS v 0 raster image built from row-major ``pixels``.

        Thresholds come from the session's device tuning.
        """
        payload = encode(
            width,
            height,
            pixels,
            self._tuning.black_threshold,
            self._tuning.alpha_threshold,
            dither=dither,
        )
        self._append(CTL_LF + raster_command(width, height, payload))

    def print_image(self, source: Any, *, dither: bool = True, max_width: int | None = None) -> None:
        """Load an image with Pillow and queue it as a raster image."""
        if max_width is None:
            width, height, pixels = pixels_from_image(source)
        else:
            width, height, pixels = pixels_from_image(source, max_width=max_width)
        self.print_raster(pixels, width, height, dither=dither)

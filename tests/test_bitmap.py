"""Tests for raster encoding and Pillow image loading."""

import io

from PIL import Image
import pytest

from thermal_printer.bitmap import (
    dither_pixels,
    encode,
    pack_rows,
    pixels_from_image,
    raster_command,
    threshold_pixels,
)
from thermal_printer.exceptions import InvalidArgumentError


class TestThreshold:
    """Tests for threshold_pixels."""

    def test_grey_levels(self) -> None:
        assert threshold_pixels(4, 1, [0, 47, 48, 255]) == [True, True, False, False]

    def test_rgb_uses_luminance(self) -> None:
        # pure blue is dark (luma ~29), pure green is bright
        assert threshold_pixels(2, 1, [(0, 0, 255), (0, 255, 0)]) == [True, False]

    def test_transparent_pixels_are_white(self) -> None:
        assert threshold_pixels(3, 1, [(0, 0, 0, 0), (0, 0, 0, 126), (0, 0, 0, 127)]) == [False, False, True]

    def test_grey_alpha_pairs(self) -> None:
        assert threshold_pixels(2, 1, [(0, 255), (0, 0)]) == [True, False]

    def test_custom_thresholds(self) -> None:
        assert threshold_pixels(1, 1, [100], black_threshold=101) == [True]
        assert threshold_pixels(1, 1, [(0, 0, 0, 200)], alpha_threshold=201) == [False]

    def test_pixel_count_mismatch(self) -> None:
        with pytest.raises(InvalidArgumentError):
            threshold_pixels(2, 2, [0, 0, 0])

    @pytest.mark.parametrize(("width", "height"), [(0, 1), (1, 0), (-1, 1)])
    def test_invalid_size(self, width: int, height: int) -> None:
        with pytest.raises(InvalidArgumentError):
            threshold_pixels(width, height, [])

    def test_unsupported_pixel(self) -> None:
        with pytest.raises(InvalidArgumentError):
            threshold_pixels(1, 1, [(1, 2, 3, 4, 5)])


class TestDither:
    """Tests for Floyd-Steinberg dithering."""

    def test_extremes_are_unchanged(self) -> None:
        assert dither_pixels(2, 1, [0, 255]) == [True, False]

    def test_mid_grey_is_roughly_half_black(self) -> None:
        dots = dither_pixels(16, 16, [128] * 256)
        assert 96 <= sum(dots) <= 160

    def test_light_grey_is_sparse(self) -> None:
        dots = dither_pixels(16, 16, [224] * 256)
        assert 0 < sum(dots) < 64

    def test_transparent_stays_white(self) -> None:
        assert dither_pixels(2, 1, [(0, 0, 0, 0), (0, 0, 0, 255)]) == [False, True]


class TestPacking:
    """Tests for row packing and the GS v 0 command."""

    def test_msb_first(self) -> None:
        dots = [True, False, False, False, False, False, False, True]
        assert pack_rows(8, 1, dots) == b"\x81"

    def test_rows_padded(self) -> None:
        dots = [True] * 10 + [False] * 10
        assert pack_rows(10, 2, dots) == b"\xff\xc0\x00\x00"

    def test_encode_black_row(self) -> None:
        assert encode(8, 1, [0] * 8) == b"\xff"

    def test_encode_dither_flag(self) -> None:
        assert encode(8, 1, [0] * 8, dither=True) == b"\xff"

    def test_raster_command_header(self) -> None:
        assert raster_command(8, 1, b"\xff") == b"\x1d\x76\x30\x00\x01\x00\x01\x00\xff"

    def test_raster_command_little_endian_sizes(self) -> None:
        width, height = 2048, 300
        payload = bytes(256 * 300)
        command = raster_command(width, height, payload)
        assert command[:8] == b"\x1d\x76\x30\x00\x00\x01\x2c\x01"

    def test_raster_command_payload_mismatch(self) -> None:
        with pytest.raises(InvalidArgumentError):
            raster_command(8, 2, b"\xff")


class TestPixelsFromImage:
    """Tests for the Pillow adapter."""

    def test_rgba_pixels(self) -> None:
        img = Image.new("L", (3, 2), 0)
        width, height, pixels = pixels_from_image(img)
        assert (width, height) == (3, 2)
        assert pixels == [(0, 0, 0, 255)] * 6

    def test_scaled_down_to_max_width(self) -> None:
        img = Image.new("RGB", (800, 100), (255, 255, 255))
        width, height, pixels = pixels_from_image(img, max_width=400)
        assert (width, height) == (400, 50)
        assert len(pixels) == 400 * 50

    def test_narrow_image_not_scaled(self) -> None:
        img = Image.new("RGB", (100, 10))
        width, height, _ = pixels_from_image(img, max_width=384)
        assert (width, height) == (100, 10)

    def test_load_from_file_object(self) -> None:
        stream = io.BytesIO()
        Image.new("RGBA", (2, 1), (0, 0, 0, 0)).save(stream, format="PNG")
        stream.seek(0)
        _, _, pixels = pixels_from_image(stream)
        assert pixels == [(0, 0, 0, 0), (0, 0, 0, 0)]

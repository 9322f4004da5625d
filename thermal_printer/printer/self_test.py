"""Demonstration receipt exercising the encoder's command set.

Useful to check a printer is connected and configured properly. Some styles
(emphasized and double strike, for instance) look identical on many printers.
"""

from __future__ import annotations

from .encoder import CommandEncoder

GS_SIZES = (0, 16, 32, 48, 64, 80, 96, 112, 200, 255)
ESC_SIZES = (0, 16, 32, 48)
TRAILING_FEED_LINES = 6


def _styled_line(encoder: CommandEncoder, on: str, off: str, text_on: str, text_off: str) -> None:
    encoder.write("default ")
    getattr(encoder, on)()
    encoder.write(text_on)
    getattr(encoder, off)()
    encoder.write(text_off)
    encoder.linefeed()


def queue_test_page(encoder: CommandEncoder) -> None:
    """Queue the test receipt, ending with a paper cut."""
    encoder.write("Write Stuff before linefeed")

    encoder.left_margin(1, 0)
    encoder.write("Set left margin 1,0")
    encoder.left_margin(20, 0)
    encoder.write("Set left margin 20,0")
    encoder.left_margin(1, 0)

    encoder.right_side_character_spacing(1)
    encoder.write("Rgt chr space: 1 space")
    encoder.right_side_character_spacing(8)
    encoder.write(" 8 space")
    encoder.right_side_character_spacing(0)
    encoder.linefeed()

    encoder.horiz_tab()
    encoder.write("Tab before this line")
    encoder.linefeed()

    encoder.write("Part of this line ")
    encoder.bold_on()
    encoder.write("is bold")
    encoder.bold_off()
    encoder.linefeed()

    _styled_line(encoder, "doublestrike_on", "doublestrike_off", "doublestrike on ", "doublestrike off")
    _styled_line(encoder, "emphasize_on", "emphasize_off", "emphasize on ", "emphasize off")
    _styled_line(encoder, "font_b", "font_a", "font b ", "font a")
    _styled_line(encoder, "underline_on", "underline_off", "underline on", " underline off")
    _styled_line(encoder, "inverse_on", "inverse_off", "inverse on", " inverse off")

    encoder.write("This line is in default color")
    encoder.color_2()
    encoder.write("This line is in color 2")
    encoder.color_1()
    encoder.write("This line is in color 1")
    encoder.linefeed()

    encoder.print_text("Sizes")
    encoder.linefeed()
    for size in GS_SIZES:
        encoder.font_size(size)
        encoder.print_text(f"Size {size}")
        encoder.linefeed()
    encoder.font_size(0)

    encoder.print_text("ESC Sizes")
    encoder.linefeed()
    for size in ESC_SIZES:
        encoder.font_size_esc(size)
        encoder.print_text(f"Size {size}")
        encoder.linefeed()
    encoder.font_size_esc(0)
    encoder.apply_printmode()

    for _ in range(TRAILING_FEED_LINES):
        encoder.linefeed()
    encoder.cutpaper()

"""Tests for PrintModeState."""

import itertools

import pytest

from thermal_printer.exceptions import InvalidArgumentError
from thermal_printer.printer import PrintModeState


class TestCompose:
    """Tests for the composed mode byte."""

    @pytest.mark.parametrize(
        ("font", "emphasized", "double_height", "double_width", "underline"),
        list(itertools.product((0, 1), repeat=5)),
    )
    def test_formula_for_all_flag_combinations(
        self, font: int, emphasized: int, double_height: int, double_width: int, underline: int
    ) -> None:
        state = PrintModeState()
        state.set_font(font)
        state.set_emphasis(emphasized)
        state.set_double_height(double_height)
        state.set_double_width(double_width)
        state.set_underline(underline)
        expected = font + emphasized * 8 + double_height * 16 + double_width * 32 + underline * 128
        assert state.compose() == expected

    def test_example_value(self) -> None:
        state = PrintModeState(font=1, underline=1, emphasized=1, double_height=0, double_width=1)
        assert state.compose() == 170

    def test_default_is_zero(self) -> None:
        assert PrintModeState().compose() == 0


class TestSetters:
    """Tests for the flag setters."""

    def test_truthy_values_become_one(self) -> None:
        state = PrintModeState()
        state.set_underline("yes")
        state.set_emphasis(5)
        assert state.underline == 1
        assert state.emphasized == 1

    def test_falsy_values_become_zero(self) -> None:
        state = PrintModeState(underline=1, double_width=1)
        state.set_underline(None)
        state.set_double_width(False)
        assert state.underline == 0
        assert state.double_width == 0

    @pytest.mark.parametrize("font", [2, -1, "B"])
    def test_invalid_font_rejected(self, font: object) -> None:
        state = PrintModeState()
        with pytest.raises(InvalidArgumentError):
            state.set_font(font)  # type: ignore[arg-type]
        assert state.font == 0

    def test_reset(self) -> None:
        state = PrintModeState(font=1, underline=1, emphasized=1, double_height=1, double_width=1)
        state.reset()
        assert state == PrintModeState()


class TestApply:
    """Tests for the ESC ! sequence."""

    def test_apply_returns_esc_bang_and_mode(self) -> None:
        state = PrintModeState()
        state.set_emphasis(True)
        assert state.apply() == b"\x1b\x21\x08"

    def test_apply_all_flags(self) -> None:
        state = PrintModeState(font=1, underline=1, emphasized=1, double_height=1, double_width=1)
        assert state.apply() == b"\x1b\x21\xb9"

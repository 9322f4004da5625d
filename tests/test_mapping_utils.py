"""Tests for printer mapping_utils functions."""

import pytest

from thermal_printer.printer.mapping_utils import map_flag, map_justify, split_fixed_width


class TestMapJustify:
    """Tests for map_justify."""

    def test_left(self) -> None:
        assert map_justify("L") == 0

    def test_center(self) -> None:
        assert map_justify("C") == 1

    def test_right(self) -> None:
        assert map_justify("R") == 2

    @pytest.mark.parametrize("align", ["X", "", "l", "center", None, 1])
    def test_anything_else_is_left(self, align: object) -> None:
        assert map_justify(align) == 0


class TestMapFlag:
    """Tests for map_flag."""

    def test_truthy(self) -> None:
        assert map_flag(True) == 1
        assert map_flag(3) == 1

    def test_falsy(self) -> None:
        assert map_flag(False) == 0
        assert map_flag(None) == 0
        assert map_flag(0) == 0


class TestSplitFixedWidth:
    """Tests for split_fixed_width."""

    def test_hard_cut(self) -> None:
        assert split_fixed_width("ABCDEFGH", 3) == ["ABC", "DEF", "GH"]

    def test_exact_multiple(self) -> None:
        assert split_fixed_width("ABCDEF", 3) == ["ABC", "DEF"]

    def test_cuts_through_words(self) -> None:
        assert split_fixed_width("hello world", 4) == ["hell", "o wo", "rld"]

    def test_empty(self) -> None:
        assert split_fixed_width("", 5) == []

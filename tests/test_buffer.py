"""Tests for CommandBuffer."""

import pytest

from thermal_printer.printer import CommandBuffer


def test_append_preserves_order() -> None:
    buffer = CommandBuffer()
    buffer.append(b"\x1b@")
    buffer.append(b"abc")
    assert buffer.getvalue() == b"\x1b@abc"
    assert len(buffer) == 5


def test_equality_with_bytes_and_buffers() -> None:
    buffer = CommandBuffer(b"xyz")
    assert buffer == b"xyz"
    assert buffer == CommandBuffer(b"xyz")
    assert buffer != b"xy"
    assert bytes(buffer) == b"xyz"


def test_discard_drops_prefix() -> None:
    buffer = CommandBuffer(b"0123456789")
    buffer.discard(4)
    assert buffer == b"456789"


def test_clear() -> None:
    buffer = CommandBuffer(b"data")
    buffer.clear()
    assert len(buffer) == 0
    assert buffer.getvalue() == b""


def test_segments() -> None:
    buffer = CommandBuffer(bytes(range(10)))
    assert [len(s) for s in buffer.segments(4)] == [4, 4, 2]
    assert b"".join(buffer.segments(4)) == bytes(range(10))


def test_segments_of_empty_buffer() -> None:
    assert list(CommandBuffer().segments(300)) == []


def test_segments_rejects_non_positive_size() -> None:
    with pytest.raises(ValueError):
        list(CommandBuffer(b"a").segments(0))


def test_getvalue_returns_copy() -> None:
    buffer = CommandBuffer(b"abc")
    value = buffer.getvalue()
    buffer.append(b"d")
    assert value == b"abc"

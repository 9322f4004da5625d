"""Command buffer holding bytes pending transmission."""

from __future__ import annotations

from collections.abc import Iterator


class CommandBuffer:
    """Ordered, growable byte sequence owned by a single printer session."""

    def __init__(self, initial: bytes = b"") -> None:
        self._data = bytearray(initial)

    def append(self, data: bytes) -> None:
        """Append raw bytes to the end of the buffer."""
        self._data += data

    def getvalue(self) -> bytes:
        """Return a copy of the pending bytes."""
        return bytes(self._data)

    def clear(self) -> None:
        self._data.clear()

    def discard(self, count: int) -> None:
        """Drop the first ``count`` bytes (the ones already transmitted)."""
        del self._data[:count]

    def segments(self, size: int) -> Iterator[bytes]:
        """Yield consecutive segments of at most ``size`` bytes."""
        if size < 1:
            raise ValueError(f"segment size must be positive, got {size}")
        data = self.getvalue()
        for start in range(0, len(data), size):
            yield data[start : start + size]

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return self.getvalue()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CommandBuffer):
            return self._data == other._data
        if isinstance(other, (bytes, bytearray)):
            return bytes(self._data) == bytes(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"CommandBuffer({bytes(self._data)!r})"

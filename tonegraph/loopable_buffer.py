"""A read-only in-memory byte stream that can wrap around at its end."""

from __future__ import annotations


class LoopableBuffer:
    """Byte buffer whose reads restart from the beginning when looping."""

    def __init__(self, data: bytes = b"", loop: bool = False) -> None:
        self._data = bytes(data)
        self._pos = 0
        self.loop = loop

    @property
    def data(self) -> bytes:
        return self._data

    @data.setter
    def data(self, value: bytes) -> None:
        self._data = bytes(value)
        self._pos = min(self._pos, len(self._data))

    @property
    def size(self) -> int:
        return len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def tell(self) -> int:
        """Return the current read position."""
        return self._pos

    def seek(self, pos: int) -> int:
        """Move the read position; it must lie within the buffer."""
        if not 0 <= pos <= len(self._data):
            raise ValueError(f"position {pos} outside buffer of size {len(self._data)}")
        self._pos = pos
        return self._pos

    def reset(self) -> None:
        """Go back to the start of the buffer."""
        self._pos = 0

    def at_end(self) -> bool:
        return self._pos >= len(self._data)

    def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes, wrapping around when looping is on."""
        if size <= 0:
            return b""
        if not self.loop:
            chunk = self._data[self._pos:self._pos + size]
            self._pos += len(chunk)
            return chunk
        if not self._data:
            return b""

        parts = []
        remaining = size
        while remaining > 0:
            chunk = self._data[self._pos:self._pos + remaining]
            self._pos += len(chunk)
            remaining -= len(chunk)
            parts.append(chunk)
            if self.at_end():
                self.reset()
        return b"".join(parts)
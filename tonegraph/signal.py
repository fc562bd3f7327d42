"""Sampling of a component graph into 32-bit little-endian PCM."""

from __future__ import annotations

import math
import struct
from typing import Any, Callable

from tonegraph.component import Component
from tonegraph.loopable_buffer import LoopableBuffer

INT32_MAX = 2147483647
SAMPLE_WIDTH = 4


def _round(value: float) -> int:
    """Round to the nearest integer, halves going towards positive infinity."""
    return math.floor(value + 0.5)


class Signal:
    """Mono signal sampled from a component, held as signed 32-bit PCM."""

    def __init__(
        self,
        component: Component | None = None,
        duration: float = 1.0,
        sample_rate: int = 48000,
    ) -> None:
        self.component = component
        self.duration = duration
        self.sample_rate = sample_rate
        self.cursor_sample = 0
        self._callbacks: list[Callable[[], Any]] = []
        self._buffer = LoopableBuffer(bytes(sample_rate))

    @property
    def samples(self) -> bytes:
        """The raw little-endian PCM data."""
        return self._buffer.data

    @property
    def buffer(self) -> LoopableBuffer:
        """The playback stream over the samples."""
        return self._buffer

    @property
    def sample_count(self) -> int:
        return len(self._buffer.data) // SAMPLE_WIDTH

    @property
    def loop(self) -> bool:
        return self._buffer.loop

    def connect(self, callback: Callable[[], Any]) -> None:
        """Register a callback run each time the samples are regenerated."""
        self._callbacks.append(callback)

    def generate(self) -> None:
        """Sample the component over the whole duration."""
        total = _round(self.duration * self.sample_rate)
        if self.component is not None:
            self.component.init()

        values = []
        for i in range(max(total, 0)):
            if self.component is None:
                sample = 0.0
            else:
                time = i / self.sample_rate
                sample = min(max(self.component.output(time), -1.0), 1.0)
            values.append(_round(INT32_MAX * sample))

        self._buffer.data = struct.pack(f"<{len(values)}i", *values)
        for callback in self._callbacks:
            callback()

    def sample(self, index: int) -> int:
        """Return the sample at ``index``, or 0 outside the data."""
        offset = index * SAMPLE_WIDTH
        data = self._buffer.data
        if 0 <= offset <= len(data) - SAMPLE_WIDTH:
            return struct.unpack_from("<i", data, offset)[0]
        return 0

    def set_cursor_time(self, time: float) -> None:
        """Place the playback cursor at ``time`` seconds."""
        self.cursor_sample = _round(time * self.sample_rate)

    def set_loop(self, enable: bool) -> None:
        """Make playback wrap around at the end of the data."""
        self._buffer.loop = enable

    def to_start(self) -> None:
        """Move the stream to the cursor; to the very start if out of range."""
        self._buffer.reset()
        position = self.cursor_sample * SAMPLE_WIDTH
        if 0 <= position <= self._buffer.size:
            self._buffer.seek(position)

    def to_end(self) -> None:
        """Move the stream to its last byte."""
        self._buffer.seek(max(0, self._buffer.size - 1))
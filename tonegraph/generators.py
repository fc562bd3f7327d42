"""Periodic oscillators and a noise source."""

from __future__ import annotations

import math

from tonegraph.component import Component, GeneratorComponent
from tonegraph.random_source import random_range

_INT16_MAX = 32767


def _round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going towards positive infinity."""
    return math.floor(value + 0.5)


class SinusComponent(GeneratorComponent):
    """Sine wave oscillator."""

    name = "Sinusoidal"

    def output(self, time: float) -> float:
        phase, amplitude, offset = self._step(time)
        return offset + amplitude * math.sin(2 * math.pi * phase)


class SquareComponent(GeneratorComponent):
    """Square wave oscillator."""

    name = "Square"

    def output(self, time: float) -> float:
        phase, amplitude, offset = self._step(time)
        return offset + amplitude * (2.0 * _round_half_up(math.fmod(phase, 1.0)) - 1.0)


class TriangleComponent(GeneratorComponent):
    """Triangle wave oscillator."""

    name = "Triangle"

    def output(self, time: float) -> float:
        phase, amplitude, offset = self._step(time)
        return offset + amplitude * (2.0 * abs(2.0 * math.fmod(phase, 1.0) - 1.0) - 1.0)


class SawToothComponent(GeneratorComponent):
    """Saw tooth wave oscillator."""

    name = "Saw Tooth"

    def output(self, time: float) -> float:
        phase, amplitude, offset = self._step(time)
        return offset + amplitude * (2.0 * math.fmod(phase, 1.0) - 1.0)


class RandomComponent(Component):
    """White noise with a given amplitude around an offset."""

    name = "Random"

    def __init__(self) -> None:
        super().__init__()
        self.add_input("Amplitude", 1.0)
        self.add_input("Offset", 0.0)

    def output(self, time: float) -> float:
        amplitude = self.inputs[0].value(time)
        offset = self.inputs[1].value(time)
        unit = random_range(0, _INT16_MAX) / _INT16_MAX
        return amplitude * (2 * unit - 1) + offset
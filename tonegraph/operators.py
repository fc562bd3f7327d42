"""Components that combine, shape or re-time other signals."""

from __future__ import annotations

import math

from tonegraph.component import Component


def _map_value(value: float, in_min: float, in_max: float, out_min: float, out_max: float) -> float:
    """Map ``value`` linearly from ``[in_min, in_max]`` onto ``[out_min, out_max]``."""
    return out_min + (value - in_min) * (out_max - out_min) / (in_max - in_min)


class ADSRComponent(Component):
    """Attack, decay, sustain, release envelope applied to a signal."""

    name = "ADSR"

    def __init__(self) -> None:
        super().__init__()
        self.add_input("Signal", 0.0)
        self.add_input("Attack Time", 0.1, linkable=False)
        self.add_input("Decay Time", 0.1, linkable=False)
        self.add_input("Sustain Time", 0.7, linkable=False)
        self.add_input("Sustain Amp", 0.5, linkable=False)
        self.add_input("Release Time", 0.1, linkable=False)

    def output(self, time: float) -> float:
        signal = self.inputs[0].value(time)
        attack_end = self.inputs[1].value(time)
        decay_end = attack_end + self.inputs[2].value(time)
        sustain_end = decay_end + self.inputs[3].value(time)
        sustain_amp = self.inputs[4].value(time)
        release_end = sustain_end + self.inputs[5].value(time)

        envelope = 0.0
        if 0 < time <= attack_end:
            envelope = _map_value(time, 0.0, attack_end, 0.0, 1.0)
        elif attack_end < time <= decay_end:
            envelope = _map_value(time, attack_end, decay_end, 1.0, sustain_amp)
        elif decay_end < time <= sustain_end:
            envelope = sustain_amp
        elif sustain_end < time <= release_end:
            envelope = _map_value(time, sustain_end, release_end, sustain_amp, 0.0)
        return signal * envelope


class AddComponent(Component):
    """Sum of two signals."""

    name = "Add"

    def __init__(self) -> None:
        super().__init__()
        self.add_input("Signal A", 0.0)
        self.add_input("Signal B", 0.0)

    def output(self, time: float) -> float:
        return self.inputs[0].value(time) + self.inputs[1].value(time)


class DelayComponent(Component):
    """A signal shifted later in time; silent before the delay has elapsed."""

    name = "Delay"

    def __init__(self) -> None:
        super().__init__()
        self.add_input("Signal", 0.0)
        self.add_input("Delay", 0.0, linkable=False)

    def output(self, time: float) -> float:
        shifted = time - self.inputs[1].value(time)
        if shifted < 0:
            return 0.0
        return self.inputs[0].value(shifted)


class MultiplyComponent(Component):
    """Product of two signals."""

    name = "Multiply"

    def __init__(self) -> None:
        super().__init__()
        self.add_input("Signal A", 0.0)
        self.add_input("Signal B", 0.0)

    def output(self, time: float) -> float:
        return self.inputs[0].value(time) * self.inputs[1].value(time)


class OutputComponent(Component):
    """The final sink of the graph; passes its single input through."""

    name = "Output"
    has_output = False
    removable = False

    def __init__(self) -> None:
        super().__init__()
        self.add_input("", 0.0, editable=False)

    def output(self, time: float) -> float:
        return self.inputs[0].value(time)


class RepeatComponent(Component):
    """Loops the first ``Duration`` seconds of a signal."""

    name = "Repeat"

    def __init__(self) -> None:
        super().__init__()
        self.add_input("Signal", 0.0)
        self.add_input("Duration", 1.0, linkable=False)

    def output(self, time: float) -> float:
        duration = self.inputs[1].value(time)
        looped = math.fmod(time, duration) if duration != 0 else math.nan
        return self.inputs[0].value(looped)
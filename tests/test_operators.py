import pytest
from hypothesis import given
from hypothesis import strategies as st

from tonegraph.component import Component
from tonegraph.operators import (
    ADSRComponent,
    AddComponent,
    DelayComponent,
    MultiplyComponent,
    OutputComponent,
    RepeatComponent,
)


class _Ramp(Component):
    """Outputs the time it is asked about."""

    def output(self, time):
        return time


class _Const(Component):
    def __init__(self, value):
        super().__init__()
        self._value = value

    def output(self, time):
        return self._value


_floats = st.floats(min_value=-1e6, max_value=1e6, allow_nan=False)


def _adsr_with_signal(value):
    adsr = ADSRComponent()
    adsr.get_input("Signal").default_value = value
    return adsr


def test_adsr_inputs_and_defaults():
    adsr = ADSRComponent()
    names = [i.name for i in adsr.inputs]
    assert names == [
        "Signal",
        "Attack Time",
        "Decay Time",
        "Sustain Time",
        "Sustain Amp",
        "Release Time",
    ]
    assert [i.default_value for i in adsr.inputs] == [0.0, 0.1, 0.1, 0.7, 0.5, 0.1]
    assert adsr.inputs[0].linkable
    assert not any(i.linkable for i in adsr.inputs[1:])
    assert adsr.name == "ADSR"


def test_adsr_peak_at_end_of_attack():
    adsr = _adsr_with_signal(1.0)
    assert adsr.output(0.1) == pytest.approx(1.0)


def test_adsr_sustain_level():
    adsr = _adsr_with_signal(1.0)
    assert adsr.output(0.5) == pytest.approx(0.5)


def test_adsr_silent_outside_envelope():
    adsr = _adsr_with_signal(1.0)
    assert adsr.output(0.0) == 0.0
    assert adsr.output(-1.0) == 0.0
    assert adsr.output(5.0) == 0.0


def test_adsr_attack_rises_and_release_falls():
    adsr = _adsr_with_signal(1.0)
    attack = [adsr.output(t) for t in (0.025, 0.05, 0.075, 0.1)]
    assert attack == sorted(attack)
    decay = [adsr.output(t) for t in (0.1, 0.125, 0.15, 0.175)]
    assert decay == sorted(decay, reverse=True)
    release = [adsr.output(t) for t in (0.92, 0.95, 0.98)]
    assert release == sorted(release, reverse=True)
    assert all(0.0 <= v <= 0.5 for v in release)


def test_adsr_scales_linked_signal():
    adsr = ADSRComponent()
    adsr.get_input("Signal").component = _Const(2.0)
    assert adsr.output(0.5) == pytest.approx(2.0 * 0.5)
    assert adsr.output(0.1) == pytest.approx(2.0)


@given(_floats, _floats)
def test_add_is_commutative(a, b):
    first = AddComponent()
    first.inputs[0].default_value = a
    first.inputs[1].default_value = b
    second = AddComponent()
    second.inputs[0].default_value = b
    second.inputs[1].default_value = a
    assert first.output(0.3) == second.output(0.3)


@given(_floats)
def test_add_zero_is_identity(a):
    add = AddComponent()
    add.get_input("Signal A").default_value = a
    assert add.output(1.0) == a


def test_add_defaults_to_silence():
    add = AddComponent()
    assert add.output(0.5) == 0.0
    assert [i.name for i in add.inputs] == ["Signal A", "Signal B"]


@given(_floats)
def test_multiply_by_one_and_zero(a):
    mul = MultiplyComponent()
    mul.inputs[0].default_value = a
    mul.inputs[1].default_value = 1.0
    assert mul.output(0.2) == a
    mul.inputs[1].default_value = 0.0
    assert mul.output(0.2) == 0.0


def test_multiply_uses_linked_signal():
    mul = MultiplyComponent()
    mul.inputs[0].component = _Ramp()
    mul.inputs[1].default_value = 1.0
    assert mul.output(0.25) == 0.25
    assert mul.name == "Multiply"


def test_delay_shifts_signal():
    delay = DelayComponent()
    delay.get_input("Signal").component = _Ramp()
    delay.get_input("Delay").default_value = 0.5
    assert delay.output(0.75) == 0.25
    assert delay.output(0.5) == 0.0


def test_delay_silent_before_start():
    delay = DelayComponent()
    delay.get_input("Signal").component = _Const(1.0)
    delay.get_input("Delay").default_value = 0.5
    assert delay.output(0.25) == 0.0
    assert delay.output(0.75) == 1.0
    assert not delay.get_input("Delay").linkable


def test_output_passes_through_and_flags():
    out = OutputComponent()
    assert out.output(0.3) == 0.0
    out.inputs[0].component = _Ramp()
    assert out.output(0.3) == 0.3
    assert out.has_output is False
    assert out.removable is False
    assert out.inputs[0].name == ""
    assert out.inputs[0].editable is False
    assert out.name == "Output"


@given(st.integers(min_value=0, max_value=64))
def test_repeat_is_periodic(step):
    rep = RepeatComponent()
    rep.get_input("Signal").component = _Ramp()
    rep.get_input("Duration").default_value = 0.5
    t = step / 8
    assert rep.output(t) == rep.output(t + 0.5)
    assert 0.0 <= rep.output(t) < 0.5


def test_repeat_default_duration():
    rep = RepeatComponent()
    rep.inputs[0].component = _Ramp()
    assert rep.inputs[1].default_value == 1.0
    assert rep.output(1.25) == 0.25
    assert not rep.inputs[1].linkable


def test_operators_reject_cycles():
    add = AddComponent()
    mul = MultiplyComponent()
    mul.inputs[0].component = add
    assert not add.inputs[0].can_set_component(mul)
    assert add.inputs[0].can_set_component(DelayComponent())
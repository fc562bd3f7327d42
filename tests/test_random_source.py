import pytest
from hypothesis import given, strategies as st

from tonegraph.random_source import random_range


def test_single_value_range_returns_low():
    assert random_range(5, 6) == 5


@given(st.integers(-1000, 1000), st.integers(1, 1000))
def test_result_within_half_open_range(low, width):
    value = random_range(low, low + width)
    assert low <= value < low + width


def test_covers_both_ends_of_small_range():
    seen = {random_range(0, 2) for _ in range(500)}
    assert seen == {0, 1}


@pytest.mark.parametrize("low, high", [(3, 3), (4, 1)])
def test_empty_range_raises(low, high):
    with pytest.raises(ValueError):
        random_range(low, high)
import numpy as np
import pytest

from chromamix.gradients import Easing, ease, ease_positions


@pytest.mark.parametrize("easing, expected", [
    ("linear", 50.0),
    ("ease", 62.5),
    ("ease_in", 25.0),
    ("ease_out", 75.0),
    ("bezier", 50.0),
])
def test_middle_stop(easing, expected):
    assert ease_positions([0, 50, 100], easing) == [0, expected, 100]


def test_endpoints_are_kept():
    positions = [10, 40, 60, 90]
    eased = ease_positions(positions, Easing.EASE)
    assert eased[0] == 10
    assert eased[-1] == 90


def test_two_stops_are_untouched():
    assert ease_positions([0, 100], "ease_in") == [0, 100]


def test_ease_scalars_and_arrays():
    assert ease(0.5, "ease_in") == 0.25
    assert isinstance(ease(0.5, "bezier"), float)
    t = np.linspace(0, 1, 5)
    assert np.allclose(ease(t, Easing.EASE_OUT), 1 - (1 - t) ** 2)


def test_easing_names():
    assert Easing("ease-in") == Easing.EASE_IN
    assert Easing("EASE_OUT") == Easing.EASE_OUT
    with pytest.raises(ValueError):
        Easing("cubic")

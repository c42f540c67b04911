import pytest

from chromamix.exceptions import InvalidParametersError, PositionCountMismatchError, PositionsNotAscendingError
from chromamix.gradients import even_positions, quantized_stops, resolve_positions, validate_positions


def test_even_positions():
    assert even_positions(2) == [0.0, 100.0]
    assert even_positions(3) == [0.0, 50.0, 100.0]
    assert even_positions(5) == [0.0, 25.0, 50.0, 75.0, 100.0]
    assert even_positions(7)[1] == 16.67
    assert even_positions(1) == [50.0]
    assert even_positions(0) == []


def test_validate_positions():
    assert validate_positions([0, 30, 100], 3) == [0.0, 30.0, 100.0]


def test_position_count_mismatch():
    with pytest.raises(PositionCountMismatchError) as info:
        validate_positions([0, 100], 3)
    assert info.value.details == {"expected": 3, "got": 2}


@pytest.mark.parametrize("positions", [[0, 50, 50], [0, 60, 40], [100, 0]])
def test_positions_not_ascending(positions):
    with pytest.raises(PositionsNotAscendingError):
        validate_positions(positions, len(positions))


def test_positions_out_of_range():
    with pytest.raises(InvalidParametersError):
        validate_positions([0, 101], 2)
    with pytest.raises(InvalidParametersError):
        validate_positions([-1, 50], 2)


def test_resolve_positions():
    assert resolve_positions(None, 3) == [0.0, 50.0, 100.0]
    assert resolve_positions([10, 90], 2) == [10.0, 90.0]


def test_quantized_stops():
    assert quantized_stops(3, 4) == [(0, 0.0), (0, 25.0), (1, 50.0), (2, 75.0)]
    assert quantized_stops(2, 2) == [(0, 0.0), (1, 50.0)]
    stops = quantized_stops(2, 3)
    assert [i for i, _ in stops] == [0, 0, 1]
    assert stops[1][1] == 33.33


def test_quantized_stops_need_two_steps():
    with pytest.raises(InvalidParametersError):
        quantized_stops(3, 1)

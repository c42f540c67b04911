import pytest

from chromamix.colors import Color
from chromamix.exceptions import (
    EmptyInputError,
    InvalidColorFormatError,
    InvalidParametersError,
    PositionCountMismatchError,
    PositionsNotAscendingError,
)
from chromamix.gradients import (
    Easing,
    GradientSpec,
    LinearGeometry,
    RadialGeometry,
    RadialShape,
    RadialSize,
    build_gradient,
)
from chromamix.types import ColorSpace


def test_default_gradient():
    spec = build_gradient(["#ff0000", "#0000ff"])
    assert isinstance(spec, GradientSpec)
    assert spec.positions == [0.0, 100.0]
    assert [c.hex for c in spec.colors] == ["#ff0000", "#0000ff"]
    assert spec.easing == Easing.LINEAR
    assert spec.color_space == ColorSpace.RGB
    assert isinstance(spec.geometry, LinearGeometry)
    assert not spec.quantized
    assert len(spec) == 2


def test_even_spacing():
    spec = build_gradient(["red", "lime", "blue", "white", "black"])
    assert spec.positions == [0.0, 25.0, 50.0, 75.0, 100.0]


def test_explicit_positions():
    spec = build_gradient(["red", "lime", "blue"], positions=[0, 20, 100])
    assert spec.positions == [0.0, 20.0, 100.0]


def test_position_errors():
    with pytest.raises(PositionCountMismatchError):
        build_gradient(["red", "blue"], positions=[0, 50, 100])
    with pytest.raises(PositionsNotAscendingError):
        build_gradient(["red", "lime", "blue"], positions=[0, 70, 40])


def test_easing_moves_interior_stops():
    spec = build_gradient(["red", "lime", "blue"], easing="ease_in")
    assert spec.positions == [0.0, 25.0, 100.0]
    assert spec.easing == Easing.EASE_IN


def test_quantized_gradient():
    spec = build_gradient(["#ff0000", "#00ff00", "#0000ff"], steps=4)
    assert spec.quantized
    assert spec.positions == [0.0, 25.0, 50.0, 75.0]
    assert [c.hex for c in spec.colors] == ["#ff0000", "#ff0000", "#00ff00", "#0000ff"]


def test_quantized_still_validates_positions():
    with pytest.raises(PositionCountMismatchError):
        build_gradient(["red", "blue"], positions=[0], steps=3)


def test_quantized_ignores_easing():
    spec = build_gradient(["red", "lime", "blue"], easing="ease_in", steps=3)
    assert spec.positions == [0.0, 33.33, 66.67]


def test_build_errors():
    with pytest.raises(EmptyInputError):
        build_gradient([])
    with pytest.raises(InvalidColorFormatError):
        build_gradient(["red", "nope"])
    with pytest.raises(InvalidParametersError):
        build_gradient(["red", "blue"], steps=1)
    with pytest.raises(InvalidParametersError):
        build_gradient(["red", "blue"], color_space="hex")


def test_linear_css():
    spec = build_gradient(["#ff0000", "#0000ff"])
    assert spec.css() == "linear-gradient(90deg, #ff0000 0%, #0000ff 100%)"
    spec = build_gradient(["#ff0000", "#00ff00", "#0000ff"], geometry=LinearGeometry(45), positions=[0, 33.5, 100])
    assert spec.css() == "linear-gradient(45deg, #ff0000 0%, #00ff00 33.5%, #0000ff 100%)"


def test_radial_css():
    spec = build_gradient(["#ff0000", "#0000ff"], geometry=RadialGeometry())
    assert spec.css() == "radial-gradient(circle farthest-corner at 50% 50%, #ff0000 0%, #0000ff 100%)"

    geometry = RadialGeometry(RadialShape.ELLIPSE, RadialSize.EXPLICIT, (30, 40), (400, 200))
    spec = build_gradient(["#ff0000", "#0000ff"], geometry=geometry)
    assert spec.css() == "radial-gradient(ellipse 200px 100px at 30% 40%, #ff0000 0%, #0000ff 100%)"


def test_colors_are_parsed():
    spec = build_gradient([Color.from_hsl(0, 100, 50), (0, 0, 255), {"r": 0, "g": 255, "b": 0}])
    assert [c.hex for c in spec.colors] == ["#ff0000", "#0000ff", "#00ff00"]

import pytest

from chromamix.exceptions import InvalidGeometryError
from chromamix.gradients import LinearGeometry, RadialGeometry, RadialShape, RadialSize


def test_linear_defaults():
    geometry = LinearGeometry()
    assert geometry.angle == 90.0
    assert geometry.kind == "linear"


@pytest.mark.parametrize("angle", [-1, 361, float("nan")])
def test_linear_angle_range(angle):
    with pytest.raises(InvalidGeometryError):
        LinearGeometry(angle)


def test_radial_defaults():
    geometry = RadialGeometry()
    assert geometry.shape == RadialShape.CIRCLE
    assert geometry.size_spec == "farthest-corner"
    assert geometry.center_spec == "50% 50%"
    assert geometry.kind == "radial"


def test_radial_accepts_strings():
    geometry = RadialGeometry("ellipse", "closest_side", (25, 75.5))
    assert geometry.shape == RadialShape.ELLIPSE
    assert geometry.size == RadialSize.CLOSEST_SIDE
    assert geometry.size_spec == "closest-side"
    assert geometry.center_spec == "25% 75.5%"


def test_explicit_size():
    circle = RadialGeometry(RadialShape.CIRCLE, RadialSize.EXPLICIT, dimensions=(400, 200))
    assert circle.size_spec == "100px"
    ellipse = RadialGeometry(RadialShape.ELLIPSE, RadialSize.EXPLICIT, dimensions=(400, 200))
    assert ellipse.size_spec == "200px 100px"


def test_explicit_size_requires_dimensions():
    with pytest.raises(InvalidGeometryError) as info:
        RadialGeometry(size=RadialSize.EXPLICIT)
    assert info.value.code == "INVALID_GEOMETRY"


@pytest.mark.parametrize("kwargs", [
    {"center": (101, 50)},
    {"center": (50,)},
    {"dimensions": (0, 100)},
    {"dimensions": (100, 10001)},
    {"dimensions": (100,)},
])
def test_invalid_radial(kwargs):
    with pytest.raises(InvalidGeometryError):
        RadialGeometry(**kwargs)


def test_geometry_is_frozen():
    geometry = LinearGeometry(45)
    with pytest.raises(AttributeError):
        geometry.angle = 10

from __future__ import annotations
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from ..exceptions import InvalidGeometryError
from ..utils import format_number

MAX_DIMENSION = 10000


class RadialShape(str, Enum):
    CIRCLE = "circle"
    ELLIPSE = "ellipse"


class RadialSize(str, Enum):
    CLOSEST_SIDE = "closest_side"
    CLOSEST_CORNER = "closest_corner"
    FARTHEST_SIDE = "farthest_side"
    FARTHEST_CORNER = "farthest_corner"
    EXPLICIT = "explicit"

    @property
    def keyword(self) -> str:
        """CSS spelling of the size keyword."""
        return self.value.replace("_", "-")


def _check_percentage(value: float, name: str) -> float:
    value = float(value)
    if not math.isfinite(value) or not 0 <= value <= 100:
        raise InvalidGeometryError(f"{name} must be a percentage in [0, 100]", **{name: value})
    return value


@dataclass(frozen=True)
class RadialGeometry:
    """
    Radial gradient shape descriptor.

    ``center`` is given in percent of the box. ``dimensions`` is the
    (width, height) of the box in pixels and is required when ``size`` is
    explicit; it is ignored otherwise.
    """

    shape: RadialShape = RadialShape.CIRCLE
    size: RadialSize = RadialSize.FARTHEST_CORNER
    center: Tuple[float, float] = (50.0, 50.0)
    dimensions: Optional[Tuple[float, float]] = None

    def __post_init__(self):
        object.__setattr__(self, "shape", RadialShape(self.shape))
        object.__setattr__(self, "size", RadialSize(self.size))
        if len(self.center) != 2:
            raise InvalidGeometryError("center must be [x, y]", center=list(self.center))
        cx, cy = self.center
        object.__setattr__(self, "center", (_check_percentage(cx, "center_x"), _check_percentage(cy, "center_y")))

        if self.dimensions is not None:
            if len(self.dimensions) != 2:
                raise InvalidGeometryError("dimensions must be [width, height]", dimensions=list(self.dimensions))
            w, h = (float(d) for d in self.dimensions)
            for name, value in (("width", w), ("height", h)):
                if not math.isfinite(value) or not 1 <= value <= MAX_DIMENSION:
                    raise InvalidGeometryError(f"{name} must be in [1, {MAX_DIMENSION}] px", **{name: value})
            object.__setattr__(self, "dimensions", (w, h))
        elif self.size == RadialSize.EXPLICIT:
            raise InvalidGeometryError("explicit size requires dimensions [width, height]")

    @property
    def kind(self) -> str:
        return "radial"

    @property
    def size_spec(self) -> str:
        """
        CSS size component: radius in pixels for explicit sizes, keyword otherwise.

        A circle takes half the smaller dimension; an ellipse takes half of
        each dimension.
        """
        if self.size == RadialSize.EXPLICIT:
            w, h = self.dimensions  # type: ignore[misc]
            if self.shape == RadialShape.CIRCLE:
                return f"{format_number(min(w, h) / 2, 4)}px"
            return f"{format_number(w / 2, 4)}px {format_number(h / 2, 4)}px"
        return self.size.keyword

    @property
    def center_spec(self) -> str:
        cx, cy = self.center
        return f"{format_number(cx, 4)}% {format_number(cy, 4)}%"


@dataclass(frozen=True)
class LinearGeometry:
    """Linear gradient direction as a CSS angle in degrees (90 = left to right)."""

    angle: float = 90.0

    def __post_init__(self):
        angle = float(self.angle)
        if not math.isfinite(angle) or not 0 <= angle <= 360:
            raise InvalidGeometryError("angle must be in [0, 360] degrees", angle=angle)
        object.__setattr__(self, "angle", angle)

    @property
    def kind(self) -> str:
        return "linear"


Geometry = Union[LinearGeometry, RadialGeometry]

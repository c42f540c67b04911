from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from ..colors import Color, ColorInput, parse_color
from ..config import DEFAULT_CONFIG, EngineConfig
from ..exceptions import EmptyInputError, InvalidParametersError
from ..types.color_types import ColorSpace, as_space
from .easing import Easing, ease_positions
from .geometry import Geometry, LinearGeometry
from .positions import quantized_stops, resolve_positions

logger = logging.getLogger(__name__)

GRADIENT_SPACES = (ColorSpace.RGB, ColorSpace.HSL, ColorSpace.HSV, ColorSpace.LAB, ColorSpace.LCH)


@dataclass(frozen=True)
class GradientStop:
    color: Color
    position: float


@dataclass(frozen=True)
class GradientSpec:
    """
    A resolved gradient: ordered stops plus everything needed to render it.

    ``quantized`` marks a stepped gradient, whose stops are hard color
    bands rather than interpolation anchors.
    """

    stops: tuple[GradientStop, ...]
    geometry: Geometry
    easing: Easing = Easing.LINEAR
    color_space: ColorSpace = ColorSpace.RGB
    quantized: bool = False

    @property
    def colors(self) -> list[Color]:
        return [s.color for s in self.stops]

    @property
    def positions(self) -> list[float]:
        return [s.position for s in self.stops]

    def __len__(self) -> int:
        return len(self.stops)

    def css(self) -> str:
        from ..formatting import gradient_css
        return gradient_css(self)

    def render(self, samples: int = 256, space: Optional[Union[str, ColorSpace]] = None):
        from .interpolate import render_gradient
        return render_gradient(self, samples, space)


def build_gradient(
    colors: Sequence[ColorInput],
    positions: Optional[Sequence[float]] = None,
    easing: Union[Easing, str] = Easing.LINEAR,
    steps: Optional[int] = None,
    geometry: Optional[Geometry] = None,
    color_space: Union[ColorSpace, str] = ColorSpace.RGB,
    config: EngineConfig = DEFAULT_CONFIG,
) -> GradientSpec:
    """
    Resolve colors and layout options into a ``GradientSpec``.

    Args:
        colors: stop colors in order
        positions: explicit stop positions in [0, 100], one per color,
            strictly ascending; evenly spread when omitted
        easing: curve applied to interior positions (smooth gradients only)
        steps: when given, build a stepped gradient with this many bands;
            explicit positions are still validated but not used
        geometry: ``LinearGeometry`` (default, 90 degrees) or ``RadialGeometry``
        color_space: space used when the gradient is rendered
        config: precision settings

    Raises:
        EmptyInputError: no colors
        PositionCountMismatchError, PositionsNotAscendingError: bad positions
        InvalidParametersError: bad steps or color space
        InvalidColorFormatError: a color cannot be parsed
    """
    if not colors:
        raise EmptyInputError("gradient")
    parsed = [parse_color(c) for c in colors]
    easing = Easing(easing)
    color_space = as_space(color_space)
    if color_space not in GRADIENT_SPACES:
        raise InvalidParametersError(
            "gradient", [{"loc": ("color_space",), "msg": "unsupported color space", "input": color_space.value}]
        )
    if geometry is None:
        geometry = LinearGeometry()
    digits = config.position_precision

    resolved = resolve_positions(positions, len(parsed), digits)

    if steps is not None:
        stops = tuple(GradientStop(parsed[i], pos) for i, pos in quantized_stops(len(parsed), steps, digits))
        quantized = True
    else:
        eased = ease_positions(resolved, easing, digits)
        stops = tuple(GradientStop(c, p) for c, p in zip(parsed, eased))
        quantized = False

    logger.debug(
        "Built %s gradient with %d stops (easing=%s, quantized=%s)",
        geometry.kind, len(stops), easing.value, quantized,
    )
    return GradientSpec(stops, geometry, easing, color_space, quantized)

"""Validated parameter models for each operation."""

from typing import Any, Literal, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .accessibility import ContrastStandard, TextSize
from .colorblindness import Deficiency
from .exceptions import InvalidParametersError
from .formatting import OutputFormat
from .gradients import Easing, RadialShape, RadialSize
from .harmony import HarmonyKind
from .mixing import BlendMode
from .variations import VariationKind

ColorValue = Union[str, list[float], dict[str, float]]
MixSpace = Literal["rgb", "hsl", "lab", "lch"]
GradientSpace = Literal["rgb", "hsl", "hsv", "lab", "lch"]

MAX_MIX_COLORS = 10
MAX_GRADIENT_COLORS = 20
MAX_GRADIENT_STEPS = 100
MAX_VARIATION_STEPS = 20
MAX_HARMONY_COLORS = 10
MAX_SIMULATION_COLORS = 50


class _Params(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class ConvertParams(_Params):
    """Parameters for ``convert_color``."""

    color: ColorValue
    output_format: OutputFormat
    precision: int = Field(default=2, ge=0, le=10, description="Decimal places for numeric values")
    variable_name: Optional[str] = Field(
        default=None,
        pattern=r"^[a-zA-Z][a-zA-Z0-9\-_]*$",
        description="Name for CSS/SCSS variable output",
    )


class MixParams(_Params):
    """Parameters for ``mix_colors``."""

    colors: list[ColorValue] = Field(min_length=2, max_length=MAX_MIX_COLORS)
    ratios: Optional[list[float]] = Field(default=None, description="One weight per color, summing to 1")
    blend_mode: BlendMode = BlendMode.NORMAL
    color_space: MixSpace = "rgb"

    @field_validator("ratios")
    @classmethod
    def validate_ratio_range(cls, v: Optional[list[float]]) -> Optional[list[float]]:
        """Each ratio must lie in [0, 1]; the sum is checked when mixing."""
        if v is not None and any(not 0 <= r <= 1 for r in v):
            raise ValueError("Ratios must be between 0 and 1")
        return v


class VariationParams(_Params):
    """Parameters for ``generate_variations``."""

    base_color: ColorValue
    variation_type: VariationKind
    steps: int = Field(default=10, ge=3, le=MAX_VARIATION_STEPS)
    intensity: float = Field(default=50, ge=0, le=100)


class _GradientParams(_Params):
    colors: list[ColorValue] = Field(min_length=2, max_length=MAX_GRADIENT_COLORS)
    positions: Optional[list[float]] = None
    interpolation: Easing = Easing.LINEAR
    color_space: GradientSpace = "rgb"
    steps: Optional[int] = Field(default=None, ge=2, le=MAX_GRADIENT_STEPS)

    @field_validator("positions")
    @classmethod
    def validate_position_range(cls, v: Optional[list[float]]) -> Optional[list[float]]:
        """Positions are percentages; count and order are checked when building."""
        if v is not None and any(not 0 <= p <= 100 for p in v):
            raise ValueError("Positions must be between 0 and 100")
        return v


class LinearGradientParams(_GradientParams):
    """Parameters for ``generate_linear_gradient``."""

    angle: float = Field(default=90, ge=0, le=360, description="Gradient angle in degrees")


class RadialGradientParams(_GradientParams):
    """Parameters for ``generate_radial_gradient``."""

    center: tuple[float, float] = (50, 50)
    shape: RadialShape = RadialShape.CIRCLE
    size: RadialSize = RadialSize.FARTHEST_CORNER
    dimensions: Optional[tuple[float, float]] = None

    @field_validator("center")
    @classmethod
    def validate_center(cls, v: tuple[float, float]) -> tuple[float, float]:
        if any(not 0 <= c <= 100 for c in v):
            raise ValueError("Center coordinates must be between 0 and 100")
        return v

    @field_validator("dimensions")
    @classmethod
    def validate_dimensions(cls, v: Optional[tuple[float, float]]) -> Optional[tuple[float, float]]:
        if v is not None and any(not 1 <= d <= 10000 for d in v):
            raise ValueError("Dimensions must be between 1 and 10000 pixels")
        return v

    @model_validator(mode="after")
    def require_dimensions_for_explicit_size(self) -> "RadialGradientParams":
        if self.size == RadialSize.EXPLICIT and self.dimensions is None:
            raise ValueError("dimensions are required when size is explicit")
        return self


class ContrastParams(_Params):
    """Parameters for ``check_contrast``."""

    foreground: ColorValue
    background: ColorValue
    text_size: TextSize = TextSize.NORMAL
    standard: ContrastStandard = ContrastStandard.WCAG_AA


class HarmonyParams(_Params):
    """Parameters for ``generate_harmony_palette``."""

    base_color: ColorValue
    harmony_type: HarmonyKind
    count: int = Field(default=5, ge=3, le=MAX_HARMONY_COLORS)
    variation: float = Field(default=20, ge=0, le=100)


class ColorblindnessParams(_Params):
    """Parameters for ``simulate_colorblindness``."""

    colors: list[ColorValue] = Field(min_length=1, max_length=MAX_SIMULATION_COLORS)
    type: Deficiency
    severity: float = Field(default=100, ge=0, le=100, description="0 leaves colors unchanged")


P = TypeVar("P", bound=BaseModel)


def validate_params(model: Type[P], raw: Union[P, Mapping[str, Any]], operation: Optional[str] = None) -> P:
    """
    Validate raw operation input against ``model``.

    An instance of ``model`` passes through unchanged.

    Raises:
        InvalidParametersError: wraps the pydantic validation errors
    """
    if isinstance(raw, model):
        return raw
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        errors = [
            {"loc": tuple(err["loc"]), "msg": err["msg"], "type": err["type"]}
            for err in e.errors(include_url=False)
        ]
        raise InvalidParametersError(operation or model.__name__, errors) from e

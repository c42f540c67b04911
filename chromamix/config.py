"""Engine-wide tunables."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class HueMean(str, Enum):
    """How hues are averaged when mixing in HSL or LCH."""

    CIRCULAR = "circular"
    # cosine component only; every mix lands on hue 0 or 180
    LEGACY_COSINE = "legacy_cosine"


class EngineConfig(BaseModel):
    """Precision and tolerance settings shared by every operation."""

    model_config = ConfigDict(frozen=True)

    precision: int = Field(
        default=2,
        ge=0,
        le=10,
        description="Decimal places for float channels (hsl, hsv, lab, lch)",
    )
    alpha_precision: int = Field(
        default=3,
        ge=0,
        le=10,
        description="Decimal places for alpha",
    )
    weight_tolerance: float = Field(
        default=0.001,
        gt=0,
        description="Allowed deviation of mix weights from a sum of 1",
    )
    hue_mean: HueMean = Field(
        default=HueMean.CIRCULAR,
        description="Hue averaging strategy for HSL/LCH mixing",
    )
    position_precision: int = Field(
        default=2,
        ge=0,
        le=10,
        description="Decimal places for gradient stop positions",
    )


DEFAULT_CONFIG = EngineConfig()

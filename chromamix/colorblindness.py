"""
Color vision deficiency simulation.

Channels are linearized with a plain 2.2 gamma, projected with a
dichromat matrix (or collapsed to luminance for monochromacy), blended
with the unaltered color by ``severity`` and re-encoded. The anomalous
trichromacies share their dichromat's matrix; a lower severity is what
makes them milder.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Union

import numpy as np

from .accessibility import delta_e_76
from .colors import Color, ColorInput, parse_color
from .exceptions import EmptyInputError, InvalidParametersError
from .utils import round_channel, round_half_up

logger = logging.getLogger(__name__)

GAMMA = 2.2

# Brettel, Vienot and Mollon (1997) dichromat projections on linear RGB
PROTAN = np.array([
    [0.567, 0.433, 0.0],
    [0.558, 0.442, 0.0],
    [0.0, 0.242, 0.758],
])

DEUTAN = np.array([
    [0.625, 0.375, 0.0],
    [0.7, 0.3, 0.0],
    [0.0, 0.3, 0.7],
])

TRITAN = np.array([
    [0.95, 0.05, 0.0],
    [0.0, 0.433, 0.567],
    [0.0, 0.475, 0.525],
])

LUMINANCE_WEIGHTS = np.array([0.2126, 0.7152, 0.0722])

# CIE76 difference above which a simulated color counts as affected
AFFECTED_THRESHOLD = 5.0


class Deficiency(str, Enum):
    PROTANOPIA = "protanopia"
    DEUTERANOPIA = "deuteranopia"
    TRITANOPIA = "tritanopia"
    PROTANOMALY = "protanomaly"
    DEUTERANOMALY = "deuteranomaly"
    TRITANOMALY = "tritanomaly"
    MONOCHROMACY = "monochromacy"

    @property
    def matrix(self) -> np.ndarray | None:
        """Projection for the deficiency, or None for monochromacy."""
        if self == Deficiency.MONOCHROMACY:
            return None
        return CVD_MATRICES[self]


CVD_MATRICES: dict[Deficiency, np.ndarray] = {
    Deficiency.PROTANOPIA: PROTAN,
    Deficiency.PROTANOMALY: PROTAN,
    Deficiency.DEUTERANOPIA: DEUTAN,
    Deficiency.DEUTERANOMALY: DEUTAN,
    Deficiency.TRITANOPIA: TRITAN,
    Deficiency.TRITANOMALY: TRITAN,
}


class Impact(str, Enum):
    NONE = "none"
    MINIMAL = "minimal"
    MODERATE = "moderate"
    SEVERE = "severe"

    @classmethod
    def from_difference(cls, difference: float) -> "Impact":
        if difference < 5:
            return cls.NONE
        if difference < 15:
            return cls.MINIMAL
        if difference < 30:
            return cls.MODERATE
        return cls.SEVERE


def np_simulate(rgb: np.ndarray, deficiency: Union[Deficiency, str], severity: float = 100) -> np.ndarray:
    """
    Simulate a deficiency on unit RGB values.

    Args:
        rgb: array of shape (..., 3) in [0, 1]
        deficiency: the deficiency to simulate
        severity: 0 leaves colors unchanged, 100 applies the full projection

    Returns:
        array of the same shape in [0, 1]
    """
    deficiency = Deficiency(deficiency)
    linear = np.clip(np.asarray(rgb, dtype=float), 0.0, 1.0) ** GAMMA
    matrix = deficiency.matrix
    if matrix is None:
        projected = np.repeat((linear @ LUMINANCE_WEIGHTS)[..., None], 3, axis=-1)
    else:
        projected = linear @ matrix.T
    blended = linear + (projected - linear) * (severity / 100)
    return np.clip(blended, 0.0, 1.0) ** (1 / GAMMA)


def simulate(color: ColorInput, deficiency: Union[Deficiency, str], severity: float = 100) -> Color:
    """Simulate one color; the result is quantized to 8-bit channels."""
    c = parse_color(color)
    r, g, b = np_simulate(np.array(c.unit_rgb), deficiency, severity)
    return Color.from_rgb(round_channel(r), round_channel(g), round_channel(b))


@dataclass(frozen=True)
class SimulationResult:
    original: Color
    simulated: Color
    difference: float
    impact: Impact

    @property
    def affected(self) -> bool:
        return self.difference > AFFECTED_THRESHOLD


@dataclass(frozen=True)
class SimulationReport:
    deficiency: Deficiency
    severity: float
    results: tuple[SimulationResult, ...]

    def __len__(self) -> int:
        return len(self.results)

    @property
    def colors_affected(self) -> int:
        return sum(1 for r in self.results if r.affected)

    @property
    def average_difference(self) -> float:
        return round_half_up(sum(r.difference for r in self.results) / len(self.results), 2)


def simulate_colors(
    colors: Sequence[ColorInput],
    deficiency: Union[Deficiency, str],
    severity: float = 100,
) -> SimulationReport:
    """
    Simulate a deficiency for each color and measure how far it moved.

    Raises:
        EmptyInputError: ``colors`` is empty
        InvalidParametersError: severity outside [0, 100]
        InvalidColorFormatError: a color cannot be parsed
    """
    deficiency = Deficiency(deficiency)
    if not colors:
        raise EmptyInputError("colorblindness simulation")
    if not 0 <= severity <= 100:
        raise InvalidParametersError(
            "simulate", [{"loc": ("severity",), "msg": "must be in [0, 100]", "input": severity}]
        )

    parsed = [parse_color(c) for c in colors]
    rgb = np.array([c.unit_rgb for c in parsed], dtype=float)
    simulated = np_simulate(rgb, deficiency, severity)

    results = []
    for original, (r, g, b) in zip(parsed, simulated):
        sim = Color.from_rgb(round_channel(r), round_channel(g), round_channel(b))
        difference = round_half_up(delta_e_76(original, sim), 2)
        results.append(SimulationResult(original, sim, difference, Impact.from_difference(difference)))

    report = SimulationReport(deficiency, severity, tuple(results))
    logger.debug(
        "Simulated %s at %g%% on %d colors: %d affected",
        deficiency.value, severity, len(parsed), report.colors_affected,
    )
    return report

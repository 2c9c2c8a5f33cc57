"""Simulation parameters and tunable constants.

Humidity selects the ignition probability used by every spread check and
terrain type selects the share of the grid covered by vegetation. Both are
fixed for a run and applied through ``SimulationEngine.configure``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .exceptions import InvalidParameterError


# ============================================================================
# CELL LIFECYCLE
# ============================================================================

BURN_DURATION: int = 2                  # Steps a cell burns before scorching
COOLING_PROBABILITY: float = 0.4        # Chance per step a hot cell goes cold
FLARE_UP_PROBABILITY: float = 0.005     # Chance per step a hot cell spreads fire


class Humidity(Enum):
    """Air humidity level of a run."""
    HUMID = "humid"
    NORMAL = "normal"
    DRY = "dry"
    VERY_DRY = "very-dry"

    @property
    def ignition_probability(self) -> float:
        return IGNITION_PROBABILITY[self]

    @classmethod
    def parse(cls, value: Union["Humidity", str]) -> "Humidity":
        return _parse_enum(cls, "humidity", value)


class TerrainType(Enum):
    """How densely vegetation covers the grid."""
    CONTINUOUS = "continuous"
    SPARSE = "sparse"
    SPACED = "spaced"
    SCATTERED = "scattered"

    @property
    def coverage(self) -> float:
        return VEGETATION_COVERAGE[self]

    @classmethod
    def parse(cls, value: Union["TerrainType", str]) -> "TerrainType":
        return _parse_enum(cls, "terrain_type", value)


IGNITION_PROBABILITY: dict[Humidity, float] = {
    Humidity.HUMID: 0.1,
    Humidity.NORMAL: 0.3,
    Humidity.DRY: 0.6,
    Humidity.VERY_DRY: 0.9,
}

VEGETATION_COVERAGE: dict[TerrainType, float] = {
    TerrainType.CONTINUOUS: 1.0,
    TerrainType.SPARSE: 0.95,
    TerrainType.SPACED: 0.8,
    TerrainType.SCATTERED: 0.5,
}


def _parse_enum(enum_cls, parameter: str, value):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except (ValueError, TypeError):
        choices = ", ".join(repr(member.value) for member in enum_cls)
        raise InvalidParameterError(
            parameter, value, f"expected one of {choices}, got {value!r}"
        ) from None


@dataclass(frozen=True)
class SimulationParameters:
    """Parameters of a single simulation run."""

    humidity: Humidity = Humidity.NORMAL
    terrain_type: TerrainType = TerrainType.CONTINUOUS

    @classmethod
    def from_values(
        cls,
        humidity: Union[Humidity, str],
        terrain_type: Union[TerrainType, str],
    ) -> "SimulationParameters":
        """
        Build parameters from enum members or their string values.

        Raises:
            InvalidParameterError: If either value is not recognised
        """
        return cls(
            humidity=Humidity.parse(humidity),
            terrain_type=TerrainType.parse(terrain_type),
        )

    @property
    def ignition_probability(self) -> float:
        return self.humidity.ignition_probability

    @property
    def coverage(self) -> float:
        return self.terrain_type.coverage

    def __str__(self) -> str:
        return f"humidity: {self.humidity.value}, terrain: {self.terrain_type.value}"

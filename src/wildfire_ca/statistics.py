from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from .cell import CellState


ArrayLike = Any


@dataclass(frozen=True)
class Statistics:
    """Cell counts of a grid snapshot, grouped by state."""

    burning: int
    scorched_hot: int
    scorched_cold: int
    vegetation: int
    inert: int

    @classmethod
    def from_state_grid(cls, states: ArrayLike) -> Statistics:
        """Count the cells of a 2D grid of `CellState` values."""

        grid = np.asarray(states, dtype=np.int64)
        if grid.ndim != 2:
            raise ValueError(f"Expected 2D array, got shape={grid.shape}")

        counts = np.bincount(grid.ravel(), minlength=len(CellState))
        return cls(
            burning=int(counts[CellState.Burning.value]),
            scorched_hot=int(counts[CellState.ScorchedHot.value]),
            scorched_cold=int(counts[CellState.ScorchedCold.value]),
            vegetation=int(counts[CellState.Vegetation.value]),
            inert=int(counts[CellState.Inert.value]),
        )

    @property
    def total(self) -> int:
        return self.burning + self.scorched_hot + self.scorched_cold + self.vegetation + self.inert

    @property
    def burned(self) -> int:
        return self.scorched_hot + self.scorched_cold

    @property
    def fraction_burning(self) -> float:
        return _safe_div(self.burning, self.total)

    @property
    def fraction_burned(self) -> float:
        return _safe_div(self.burned, self.total)

    @property
    def fraction_vegetation(self) -> float:
        return _safe_div(self.vegetation, self.total)

    @property
    def fraction_inert(self) -> float:
        return _safe_div(self.inert, self.total)

    def as_dict(self) -> dict[str, float]:
        return {
            "fraction_burning": self.fraction_burning,
            "fraction_burned": self.fraction_burned,
            "fraction_vegetation": self.fraction_vegetation,
            "fraction_inert": self.fraction_inert,
        }

    def as_percentages(self) -> dict[str, float]:
        """Same fractions scaled to 0-100, as shown in the stats panel."""
        return {
            "percent_burning": 100.0 * self.fraction_burning,
            "percent_burned": 100.0 * self.fraction_burned,
            "percent_vegetation": 100.0 * self.fraction_vegetation,
            "percent_inert": 100.0 * self.fraction_inert,
        }


def _safe_div(num: float, den: float) -> float:
    return 0.0 if den == 0 else float(num) / float(den)

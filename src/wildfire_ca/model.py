"""Wildfire spread model implementation."""

import logging
from typing import Optional, Protocol, Union

import numpy as np
from mesa import Model
from mesa.datacollection import DataCollector
from mesa.space import SingleGrid

from .cell import CellState, ForestCell
from .exceptions import InvalidParameterError, OutOfBoundsError
from .parameters import Humidity, SimulationParameters, TerrainType
from .statistics import Statistics

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def random(self) -> float: ...


class SimulationEngine(Model):
    """Probabilistic cellular automaton of a spreading wildfire."""

    def __init__(
        self,
        width: int,
        height: int,
        *,
        seed: Optional[int] = None,
        random_source: Optional[RandomSource] = None,
    ):
        """
        Initialize the simulation engine.

        Every cell starts as vegetation and nothing burns until
        `configure` is called.

        Args:
            width: Width of the grid (number of cells)
            height: Height of the grid (number of cells)
            seed: Seed for the model's random number generator
            random_source: Object with a `random()` method returning floats
                in [0, 1); replaces the model's generator when given
        """
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise InvalidParameterError(name, value, f"must be a positive integer, got {value!r}")

        super().__init__(seed=seed)
        if random_source is not None:
            self.random = random_source

        self.width = width
        self.height = height
        self.grid = SingleGrid(width, height, torus=False)
        self.parameters = SimulationParameters()
        self.configured = False

        self._cells: list[ForestCell] = []
        for _, (x, y) in self.grid.coord_iter():
            cell = ForestCell((x, y), self)
            self.grid.place_agent(cell, (x, y))
            self.agents.add(cell)
            self._cells.append(cell)

        self.last_statistics = self.statistics()
        self.datacollector = self._new_datacollector()

    @staticmethod
    def _new_datacollector() -> DataCollector:
        """History of the grid fractions, one row per configure or step."""
        return DataCollector(
            model_reporters={
                "Burning": lambda m: m.last_statistics.fraction_burning,
                "Burned": lambda m: m.last_statistics.fraction_burned,
                "Vegetation": lambda m: m.last_statistics.fraction_vegetation,
                "Inert": lambda m: m.last_statistics.fraction_inert,
            }
        )

    @property
    def ignition_probability(self) -> float:
        return self.parameters.ignition_probability

    def configure(
        self,
        humidity: Union[Humidity, str],
        terrain_type: Union[TerrainType, str],
    ) -> None:
        """
        Reset the grid for a new run.

        Each cell independently becomes inert with probability
        ``1 - coverage``, then the two cells at the centre of the grid
        are set alight unless they are inert.

        Args:
            humidity: Humidity level, as a member or its string value
            terrain_type: Terrain type, as a member or its string value

        Raises:
            InvalidParameterError: If either value is not recognised. The
                grid is left untouched.
        """
        parameters = SimulationParameters.from_values(humidity, terrain_type)
        self.parameters = parameters

        coverage = parameters.coverage
        for cell in self._cells:
            cell.reset()
            if self.random.random() > coverage:
                cell.reset(CellState.Inert)

        mid_x, mid_y = self.width // 2, self.height // 2
        for x in (mid_x, mid_x + 1):
            if x >= self.width:
                continue
            cell = self.cell_at(x, mid_y)
            if cell.state != CellState.Inert:
                cell.reset(CellState.Burning)

        self.configured = True
        stats = self.last_statistics = self.statistics()
        logger.info(
            f"Configured {self.width}x{self.height} grid ({parameters}): "
            f"{stats.inert} inert, {stats.burning} burning"
        )
        self.datacollector = self._new_datacollector()
        self.datacollector.collect(self)

    def step(self):
        """
        Execute one step of the simulation.

        Uses a two-phase update: first all cells calculate their next state
        from the current grid, then all cells switch to their next state.
        No cell sees a neighbour's new state within the same step.
        """
        for cell in self._cells:
            cell.prepare()

        # Phase 1: Calculate next states
        for cell in self._cells:
            cell.step()

        # Phase 2: Apply next states
        for cell in self._cells:
            cell.advance()

        self.last_statistics = self.statistics()
        if self.configured:
            self.datacollector.collect(self)
        logger.debug("Step complete, %d cells burning", self.last_statistics.burning)

    def run(self, iterations: int, stop_when_extinguished: bool = False) -> Statistics:
        """
        Advance the simulation by up to `iterations` steps.

        Args:
            iterations: Maximum number of steps to run
            stop_when_extinguished: Stop early once no cell is burning or hot

        Returns:
            Statistics of the grid after the last step
        """
        for i in range(iterations):
            if stop_when_extinguished and not self.is_active:
                logger.info(f"Fire extinguished after {i} steps")
                break
            self.step()
        return self.statistics()

    @property
    def is_active(self) -> bool:
        """True while some cell can still spread fire."""
        return any(cell.is_fire_source() for cell in self._cells)

    def statistics(self) -> Statistics:
        return Statistics.from_state_grid(self.state_grid())

    def state_grid(self) -> np.ndarray:
        """
        Snapshot of all cell states.

        Returns:
            Integer array of shape (height, width) holding `CellState`
            values, indexed as ``[y, x]``
        """
        states = np.empty((self.height, self.width), dtype=np.int64)
        for cell in self._cells:
            x, y = cell.pos
            states[y, x] = cell.state.value
        return states

    def cell_at(self, x: int, y: int) -> ForestCell:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBoundsError(x, y, self.width, self.height)
        return self.grid[x][y]

    def cell_state_at(self, x: int, y: int) -> CellState:
        """
        Get the state of the cell at (x, y).

        Raises:
            OutOfBoundsError: If (x, y) is outside the grid
        """
        return self.cell_at(x, y).state

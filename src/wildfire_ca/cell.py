"""Forest cell agent implementation for wildfire simulation."""

from enum import Enum

from mesa import Agent

from .parameters import BURN_DURATION, COOLING_PROBABILITY, FLARE_UP_PROBABILITY


class CellState(Enum):
    """Possible states of a forest cell."""
    Vegetation = 0
    Burning = 1
    ScorchedHot = 2
    ScorchedCold = 3
    Inert = 4


TERMINAL_STATES = frozenset({CellState.ScorchedCold, CellState.Inert})
FIRE_SOURCE_STATES = frozenset({CellState.Burning, CellState.ScorchedHot})


class ForestCell(Agent):
    """Agent representing a single cell in the forest grid."""

    def __init__(
        self,
        pos: tuple[int, int],
        model,
        state: CellState = CellState.Vegetation,
    ):
        """
        Initialize a forest cell.

        Args:
            pos: (x, y) coordinates of the cell
            model: The SimulationEngine instance this cell belongs to
            state: Initial CellState of the cell
        """
        self.pos = None  # Set by SingleGrid.place_agent
        self.unique_id = pos
        self.model = model
        self.reset(state)

    def reset(self, state: CellState = CellState.Vegetation) -> None:
        """Put the cell into `state` with both timers cleared."""
        self.state = state
        self.burning_age = 0
        self.scorched_age = 0
        self.prepare()

    def is_burnable(self) -> bool:
        return self.state == CellState.Vegetation

    def is_fire_source(self) -> bool:
        """
        Check if the cell can set its neighbours alight.

        Returns:
            True if the cell is burning or still hot after burning
        """
        return self.state in FIRE_SOURCE_STATES

    def is_terminal(self) -> bool:
        return self.state in TERMINAL_STATES

    def neighbours(self) -> list["ForestCell"]:
        return self.model.grid.get_neighbors(self.pos, moore=True, include_center=False)

    def prepare(self):
        """Copy the current state into the next-state buffer."""
        self.next_state = self.state
        self.next_burning_age = self.burning_age
        self.next_scorched_age = self.scorched_age

    def ignite(self) -> bool:
        """
        Mark the cell as burning in the next state.

        Returns:
            True if the cell caught fire, False if it was already ignited
            this step
        """
        if self.next_state != CellState.Vegetation:
            return False
        self.next_state = CellState.Burning
        self.next_burning_age = 0
        return True

    def spread_fire(self):
        """Give every vegetation neighbour its own chance to catch fire."""
        ignition_prob = self.model.ignition_probability
        for neighbour in self.neighbours():
            if neighbour.is_burnable() and self.model.random.random() < ignition_prob:
                neighbour.ignite()

    def step(self):
        """
        Calculate the next state of the cell.

        Only the current state of this cell and its neighbours is read;
        results go to the next-state buffer of this cell and, when fire
        spreads, of its neighbours.
        """
        if self.is_terminal():
            return

        if self.state == CellState.Vegetation:
            if any(n.is_fire_source() for n in self.neighbours()):
                if self.model.random.random() < self.model.ignition_probability:
                    self.ignite()

        elif self.state == CellState.Burning:
            self.next_burning_age = self.burning_age + 1
            if self.next_burning_age >= BURN_DURATION:
                self.next_state = CellState.ScorchedHot
                self.next_scorched_age = 0
            self.spread_fire()

        elif self.state == CellState.ScorchedHot:
            if self.model.random.random() < COOLING_PROBABILITY:
                self.next_state = CellState.ScorchedCold
            else:
                self.next_scorched_age = self.scorched_age + 1
                if self.model.random.random() < FLARE_UP_PROBABILITY:
                    self.spread_fire()

    def advance(self):
        """
        Apply the next state calculated in step().

        This two-phase update ensures all cells calculate their next state
        before any state changes are applied.
        """
        self.state = self.next_state
        self.burning_age = self.next_burning_age
        self.scorched_age = self.next_scorched_age

    def __repr__(self) -> str:
        return (
            f"ForestCell({self.unique_id}, {self.state.name}, "
            f"burning_age={self.burning_age}, scorched_age={self.scorched_age})"
        )

"""
Wildfire Spread Simulation using Cellular Automata.

A stochastic cellular automaton in which fire spreads from burning and
still-hot cells into neighbouring vegetation.
"""

from .cell import ForestCell, CellState
from .exceptions import SimulationError, InvalidParameterError, OutOfBoundsError
from .model import SimulationEngine
from .parameters import Humidity, TerrainType, SimulationParameters
from .statistics import Statistics

__version__ = "0.1.0"

__all__ = [
    "ForestCell",
    "CellState",
    "SimulationEngine",
    "Humidity",
    "TerrainType",
    "SimulationParameters",
    "Statistics",
    "SimulationError",
    "InvalidParameterError",
    "OutOfBoundsError",
]

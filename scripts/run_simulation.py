#!/usr/bin/env python3
"""Main script to run the wildfire simulation in the console."""

import logging
import sys
from pathlib import Path

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from wildfire_ca import CellState, Humidity, SimulationEngine, TerrainType

logger = logging.getLogger(__name__)

GLYPHS = {
    CellState.Vegetation: "🌲",
    CellState.Burning: "🔥",
    CellState.ScorchedHot: "🟫",
    CellState.ScorchedCold: "⬛",
    CellState.Inert: "⬜",
}


def print_grid(engine: SimulationEngine) -> None:
    """
    Print a simple representation of the grid to console.

    Args:
        engine: The SimulationEngine instance to visualize
    """
    grid_str = ""
    for y in range(engine.height):
        for x in range(engine.width):
            grid_str += GLYPHS[engine.cell_state_at(x, y)]
        grid_str += "\n"
    print(grid_str)


def print_statistics(engine: SimulationEngine) -> None:
    stats = engine.statistics().as_percentages()
    print(
        f"Burning: {stats['percent_burning']:.1f}% | "
        f"Burned: {stats['percent_burned']:.1f}% | "
        f"Vegetation: {stats['percent_vegetation']:.1f}% | "
        f"Inert: {stats['percent_inert']:.1f}%"
    )


def main():
    """Run the wildfire simulation."""
    # Simulation parameters
    WIDTH = 20
    HEIGHT = 12
    STEPS = 50
    HUMIDITY = Humidity.DRY
    TERRAIN = TerrainType.SPACED

    logger.info("Creating engine")
    engine = SimulationEngine(WIDTH, HEIGHT)
    engine.configure(HUMIDITY, TERRAIN)

    print("--- INITIAL STATE ---")
    print_grid(engine)
    print_statistics(engine)

    # Main simulation loop
    for i in range(STEPS):
        print(f"\n--- STEP {i + 1} ---")
        engine.step()
        print_grid(engine)
        print_statistics(engine)

        if not engine.is_active:
            print("\nFire has been extinguished.")
            break


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )
    main()

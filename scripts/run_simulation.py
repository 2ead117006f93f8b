#!/usr/bin/env python3
"""Console demo of the falling sand simulation."""

import logging
import sys
from pathlib import Path

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from falling_sand import SandModel, Material

SYMBOLS = {
    Material.Empty: " ",
    Material.Sand: ".",
    Material.Water: "~",
    Material.Smoke: "'",
    Material.Oil: "o",
    Material.Wall: "#",
    Material.Wood: "=",
    Material.Fire: "*",
    Material.Flame: "^",
}


def print_grid(model: SandModel) -> None:
    """
    Print a simple representation of the grid to console, top row first.

    Args:
        model: The SandModel instance to visualize
    """
    grid = model.grid
    grid_str = ""
    for y in range(grid.height - 1, -1, -1):
        grid_str += "|"
        for x in range(grid.width):
            grid_str += SYMBOLS[grid.material_at(x, y)]
        grid_str += "|\n"
    grid_str += "+" + "-" * grid.width + "+"
    print(grid_str)


def main():
    """Run the falling sand simulation."""
    logging.basicConfig(level=logging.INFO)

    # Simulation parameters
    WIDTH = 40
    HEIGHT = 20
    STEPS = 60
    SEED = 42

    print("--- CREATING MODEL ---")
    model = SandModel(WIDTH, HEIGHT, seed=SEED)

    # A wooden shelf with oil on it, a wall on the right
    model.paint(5, 6, 20, 6, Material.Wood)
    model.paint(6, 7, 19, 7, Material.Oil)
    model.paint(30, 0, 30, 10, Material.Wall)

    print("--- INITIAL STATE ---")
    print_grid(model)

    for i in range(STEPS):
        # Pour sand and water from the top, light the oil once
        model.paint(10, HEIGHT - 1, 10, HEIGHT - 1, Material.Sand)
        model.paint(34, HEIGHT - 1, 35, HEIGHT - 1, Material.Water)
        if i == 10:
            model.paint(12, 8, 12, 8, Material.Fire)

        model.step()

    print(f"\n--- AFTER {STEPS} STEPS ---")
    print_grid(model)
    print(model.population())


if __name__ == "__main__":
    main()

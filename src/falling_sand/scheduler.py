"""Frame scheduler: one simulation tick over a grid."""

import random

from .behavior import update_cell
from .grid import Grid


def step_frame(grid: Grid, rng: random.Random) -> None:
    """
    Advance the grid by exactly one frame.

    Uses a two-phase pass: first every cell is simulated bottom row first,
    left to right, skipping cells a swap already touched this frame; then the
    processed mask is cleared so the next frame starts fresh.

    Args:
        grid: The grid to advance.
        rng: Source of randomness for decay, ignition and fire flicker.
    """
    # Phase 1: Simulate
    for y in range(grid.height):
        for x in range(grid.width):
            if grid.is_updated(x, y):
                continue
            update_cell(grid, x, y, rng)

    # Phase 2: Reset
    grid.reset_updated()

"""Falling sand model implementation."""

import logging
from typing import Optional

from mesa import Model

from .constants import DEFAULT_GRID_HEIGHT, DEFAULT_GRID_WIDTH
from .grid import Grid, create_grid
from .material import ERASE, Material
from .scheduler import step_frame
from .stroke import draw_stroke

logger = logging.getLogger(__name__)


class SandModel(Model):
    """Main model for the falling sand simulation.

    Owns one grid and the model's seeded random generator, which is the
    only randomness the rules consume. Two models built with the same seed
    and fed the same strokes stay identical frame by frame.
    """

    def __init__(
        self,
        width: int = DEFAULT_GRID_WIDTH,
        height: int = DEFAULT_GRID_HEIGHT,
        seed: Optional[int] = None,
    ):
        """
        Initialize the falling sand model.

        Args:
            width: Width of the grid (number of cells)
            height: Height of the grid (number of cells)
            seed: Seed for the random generator; None picks one at random.
        """
        super().__init__(seed=seed)
        self.grid: Grid = create_grid(width, height)
        self.frame = 0
        logger.debug(f"Created {width}x{height} sand model (seed={seed})")

    def step(self):
        """Advance the simulation by one frame."""
        step_frame(self.grid, self.random)
        self.frame += 1

    def paint(self, x1: int, y1: int, x2: int, y2: int, material: Material, radius: int = 0) -> None:
        draw_stroke(self.grid, x1, y1, x2, y2, material, radius)

    def erase(self, x1: int, y1: int, x2: int, y2: int, radius: int = 0) -> None:
        draw_stroke(self.grid, x1, y1, x2, y2, ERASE, radius)

    def clear(self) -> None:
        self.grid.clear()

    def population(self) -> dict[Material, int]:
        """Count of cells per non-Empty material, materials absent from the grid omitted."""
        counts: dict[Material, int] = {}
        for _, _, particle in self.grid.cells():
            if particle.material != Material.Empty:
                counts[particle.material] = counts.get(particle.material, 0) + 1
        return counts

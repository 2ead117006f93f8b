"""Particle grid with bounds-checked access.

Cells live in one flat list indexed ``y * width + x`` with (0, 0) at the
bottom left; gravity points towards decreasing y. Nothing outside this
module touches the buffer directly.
"""

import logging
from typing import Iterator, Optional

import numpy as np

from .constants import Color
from .material import ElementClass, Material
from .particle import Particle

logger = logging.getLogger(__name__)


class Grid:
    """Fixed-size 2D buffer of particles.

    Out-of-range reads return ``None`` or ``False`` (the edge behaves like a
    solid wall) and out-of-range writes are ignored.

    Besides the particles the grid holds a per-frame scratch mask of cells
    already processed in the current frame. It is scheduling metadata, so it
    is kept apart from the particle records.

    Attributes:
        width: Number of columns.
        height: Number of rows.
    """

    def __init__(self, width: int, height: int) -> None:
        """
        Allocate a grid filled with Empty particles.

        Args:
            width: Number of columns, positive.
            height: Number of rows, positive.

        Raises:
            ValueError: If either dimension is not a positive integer.
            MemoryError: If the buffer cannot be allocated.
        """
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                logger.error(f"Invalid grid {name}: {value!r}")
                raise ValueError(f"Grid {name} must be a positive integer, got {value!r}")

        self.width = width
        self.height = height
        try:
            self._cells = [Particle() for _ in range(width * height)]
            self._updated = np.zeros(width * height, dtype=bool)
        except MemoryError:
            logger.error(f"Could not allocate a {width}x{height} grid")
            raise
        logger.debug(f"Created {width}x{height} grid")

    def __len__(self) -> int:
        return len(self._cells)

    def _index(self, x: int, y: int) -> int:
        return y * self.width + x

    def is_in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Optional[Particle]:
        """Return the particle at (x, y), or None outside the grid."""
        if not self.is_in_bounds(x, y):
            return None
        return self._cells[self._index(x, y)]

    def set(self, x: int, y: int, particle: Particle) -> None:
        """Overwrite the cell at (x, y) with ``particle``."""
        if not self.is_in_bounds(x, y):
            return
        self._cells[self._index(x, y)] = particle

    def swap(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Exchange two cells and mark both as processed this frame."""
        if not (self.is_in_bounds(x1, y1) and self.is_in_bounds(x2, y2)):
            return
        i = self._index(x1, y1)
        j = self._index(x2, y2)
        self._cells[i], self._cells[j] = self._cells[j], self._cells[i]
        self._updated[i] = True
        self._updated[j] = True

    # ------------------------------------------------------------------
    # Queries; False outside the grid
    # ------------------------------------------------------------------

    def material_at(self, x: int, y: int) -> Optional[Material]:
        particle = self.get(x, y)
        return None if particle is None else particle.material

    def is_material(self, x: int, y: int, *materials: Material) -> bool:
        return self.material_at(x, y) in materials

    def is_class(self, x: int, y: int, *classes: ElementClass) -> bool:
        particle = self.get(x, y)
        return particle is not None and particle.element_class in classes

    def is_empty(self, x: int, y: int) -> bool:
        return self.is_material(x, y, Material.Empty)

    def is_static(self, x: int, y: int) -> bool:
        return self.is_class(x, y, ElementClass.Static)

    def is_solid(self, x: int, y: int) -> bool:
        return self.is_class(x, y, ElementClass.Solid)

    def is_liquid(self, x: int, y: int) -> bool:
        return self.is_class(x, y, ElementClass.Liquid)

    def is_gas(self, x: int, y: int) -> bool:
        return self.is_class(x, y, ElementClass.Gas)

    # ------------------------------------------------------------------
    # Per-frame bookkeeping
    # ------------------------------------------------------------------

    def is_updated(self, x: int, y: int) -> bool:
        if not self.is_in_bounds(x, y):
            return False
        return bool(self._updated[self._index(x, y)])

    def mark_updated(self, x: int, y: int) -> None:
        if not self.is_in_bounds(x, y):
            return
        self._updated[self._index(x, y)] = True

    def reset_updated(self) -> None:
        self._updated[:] = False

    # ------------------------------------------------------------------
    # Bulk access
    # ------------------------------------------------------------------

    def cells(self) -> Iterator[tuple[int, int, Particle]]:
        """Yield ``(x, y, particle)`` row by row, bottom row first."""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y, self._cells[self._index(x, y)]

    def clear(self) -> None:
        """Reset every cell to a fresh Empty particle."""
        self._cells = [Particle() for _ in range(self.width * self.height)]
        self._updated[:] = False
        logger.debug(f"Cleared {self.width}x{self.height} grid")

    def destroy(self) -> None:
        """Release the buffer; the grid behaves as zero-sized afterwards."""
        self._cells = []
        self._updated = np.zeros(0, dtype=bool)
        self.width = 0
        self.height = 0
        logger.debug("Destroyed grid")

    def material_array(self) -> np.ndarray:
        """Material codes as an int array indexed ``[x, y]``."""
        codes = np.fromiter(
            (p.material.value for p in self._cells), dtype=np.int8, count=len(self._cells)
        )
        return codes.reshape(self.height, self.width).T

    def color_array(self) -> np.ndarray:
        """RGB colors as a ``uint8`` array of shape ``(width, height, 3)``."""
        colors = np.array([p.color for p in self._cells], dtype=np.uint8)
        return colors.reshape(self.height, self.width, 3).transpose(1, 0, 2)

    def count(self, material: Material) -> int:
        return sum(1 for p in self._cells if p.material == material)

    def occupied(self) -> int:
        """Number of non-Empty cells."""
        return sum(1 for p in self._cells if not p.is_empty())


def create_grid(width: int, height: int) -> Grid:
    return Grid(width, height)


def destroy_grid(grid: Grid) -> None:
    grid.destroy()


def clear(grid: Grid) -> None:
    grid.clear()


def get_color(grid: Grid, x: int, y: int) -> Optional[Color]:
    """Render color of (x, y), None outside the grid."""
    particle = grid.get(x, y)
    return None if particle is None else particle.color

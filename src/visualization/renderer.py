"""Grid rendering functionality for the falling sand simulation.

This module provides the GridRenderer class which draws the particle grid
and converts between screen pixels and grid cells.
"""

from typing import TYPE_CHECKING, Optional

import numpy as np
import pygame

if TYPE_CHECKING:
    from falling_sand.grid import Grid


def screen_to_grid(
    px: int, py: int, cell_size: int, grid_height: int
) -> tuple[int, int]:
    """Map a screen pixel to a grid cell.

    The screen has its origin at the top left, the grid at the bottom left.
    The result may lie outside the grid; grid mutations ignore such cells.
    """
    x = px // cell_size
    y = grid_height - 1 - py // cell_size
    return x, y


class GridRenderer:
    """Renders the particle grid onto a Pygame surface.

    The whole grid is pushed as one pixel array per frame and scaled up to
    the cell size.

    Attributes:
        cell_size: Size of each cell in pixels.
    """

    def __init__(self, cell_size: int) -> None:
        """Initialize the grid renderer.

        Args:
            cell_size: Size of each cell in pixels.
        """
        self.cell_size = cell_size
        self._surface: Optional[pygame.Surface] = None

    def frame_pixels(self, grid: "Grid") -> np.ndarray:
        """Grid colors as a ``(width, height, 3)`` array in screen orientation."""
        return np.ascontiguousarray(grid.color_array()[:, ::-1])

    def draw(self, screen: pygame.Surface, grid: "Grid") -> None:
        """Draw the grid at the top left corner of ``screen``."""
        size = (grid.width, grid.height)
        if self._surface is None or self._surface.get_size() != size:
            self._surface = pygame.Surface(size)

        pygame.surfarray.blit_array(self._surface, self.frame_pixels(grid))
        scaled = pygame.transform.scale(
            self._surface, (grid.width * self.cell_size, grid.height * self.cell_size)
        )
        screen.blit(scaled, (0, 0))

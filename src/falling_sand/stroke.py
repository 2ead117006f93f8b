"""Turn a mouse drag between two frames into a continuous line of edits."""

import logging
from typing import Iterator

from .grid import Grid
from .material import ERASE, Material
from .registry import add_particle, remove_particle

logger = logging.getLogger(__name__)


def line_cells(x1: int, y1: int, x2: int, y2: int) -> Iterator[tuple[int, int]]:
    """
    Yield the integer points of the segment from (x1, y1) to (x2, y2).

    Bresenham's algorithm for all octants; both end points are included and a
    zero-length segment yields its single point.
    """
    dx = abs(x2 - x1)
    sx = 1 if x1 < x2 else -1
    dy = -abs(y2 - y1)
    sy = 1 if y1 < y2 else -1
    error = dx + dy

    while True:
        yield x1, y1
        if x1 == x2 and y1 == y2:
            return

        e2 = 2 * error
        if e2 >= dy:
            error += dy
            x1 += sx
        if e2 <= dx:
            error += dx
            y1 += sy


def _brush(radius: int) -> list[tuple[int, int]]:
    """Offsets of a filled disc; radius 0 is the single center cell."""
    return [
        (dx, dy)
        for dy in range(-radius, radius + 1)
        for dx in range(-radius, radius + 1)
        if dx * dx + dy * dy <= radius * radius
    ]


def draw_stroke(
    grid: Grid,
    x1: int,
    y1: int,
    x2: int,
    y2: int,
    material: Material,
    radius: int = 0,
) -> None:
    """
    Paint or erase every cell on the line from the previous to the current cursor cell.

    Args:
        grid: Target grid.
        x1, y1: Cursor cell in the previous frame.
        x2, y2: Cursor cell in the current frame.
        material: Material to paint, or ``ERASE`` to clear cells.
        radius: Brush radius in cells around each point of the line.
    """
    offsets = _brush(max(0, radius))
    erase = material == ERASE

    for px, py in line_cells(x1, y1, x2, y2):
        for dx, dy in offsets:
            if erase:
                remove_particle(grid, px + dx, py + dy)
            else:
                add_particle(grid, px + dx, py + dy, material)

    logger.debug(
        f"{'Erased' if erase else 'Painted ' + material.name} stroke "
        f"({x1}, {y1}) -> ({x2}, {y2}), radius {radius}"
    )

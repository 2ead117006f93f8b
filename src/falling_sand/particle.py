"""Per-cell particle record."""

from dataclasses import dataclass
from typing import Tuple

from .constants import Color, EMPTY_COLOR
from .material import ElementClass, Material


@dataclass
class Particle:
    """State of a single grid cell.

    A particle has no identity beyond its cell: painting or erasing a cell
    replaces the whole record. Only ``life_time``, ``color`` and
    ``element_class`` are ever changed in place.

    Attributes:
        material: What the cell is made of.
        element_class: Movement category, normally that of ``material``.
        life_time: Remaining decay budget; pinned at 0 for infinite-life materials.
        velocity: Carried along with the particle, not used by any rule.
        color: Render color, may flicker (fire).
    """

    material: Material = Material.Empty
    element_class: ElementClass = ElementClass.Empty
    life_time: float = 0.0
    velocity: Tuple[float, float] = (0.0, 0.0)
    color: Color = EMPTY_COLOR

    def is_empty(self) -> bool:
        return self.material == Material.Empty

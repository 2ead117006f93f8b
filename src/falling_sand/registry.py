"""Material registry: default particle properties per material.

The registry is the only place that knows how a fresh particle of a given
material looks. Painting and erasing go through :func:`add_particle` and
:func:`remove_particle`, which respect the "only paint into empty cells"
and "only erase occupied cells" rules.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from . import constants as c
from .material import ElementClass, Material
from .particle import Particle

if TYPE_CHECKING:
    from .grid import Grid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MaterialSpec:
    """Default properties of a material.

    Attributes:
        material: The material described.
        element_class: Movement category of a freshly placed particle.
        life_time: Initial decay budget (0 for infinite life).
        color: Base render color.
        decay: Upper bound of the per-frame life decrement, None if it never decays.
        ignition_chance: Chance per burning neighbour of catching fire, None if it never ignites.
        burning_class: Element class the material keeps once ignited.
    """

    material: Material
    element_class: ElementClass
    life_time: float
    color: c.Color
    decay: Optional[float] = None
    ignition_chance: Optional[float] = None
    burning_class: Optional[ElementClass] = None


MATERIALS = {
    Material.Empty: MaterialSpec(Material.Empty, ElementClass.Empty, 0.0, c.EMPTY_COLOR),
    Material.Sand: MaterialSpec(Material.Sand, ElementClass.Solid, 0.0, c.SAND_COLOR),
    Material.Water: MaterialSpec(Material.Water, ElementClass.Liquid, 0.0, c.WATER_COLOR),
    Material.Smoke: MaterialSpec(
        Material.Smoke, ElementClass.Gas, c.SMOKE_LIFE_TIME, c.SMOKE_COLOR,
        decay=c.SMOKE_DECAY,
    ),
    Material.Oil: MaterialSpec(
        Material.Oil, ElementClass.Liquid, 0.0, c.OIL_COLOR,
        ignition_chance=c.OIL_IGNITION_CHANCE, burning_class=ElementClass.Liquid,
    ),
    Material.Wall: MaterialSpec(Material.Wall, ElementClass.Static, 0.0, c.WALL_COLOR),
    Material.Wood: MaterialSpec(
        Material.Wood, ElementClass.Static, 0.0, c.WOOD_COLOR,
        ignition_chance=c.WOOD_IGNITION_CHANCE, burning_class=ElementClass.Static,
    ),
    Material.Fire: MaterialSpec(
        Material.Fire, ElementClass.Solid, c.FIRE_LIFE_TIME, c.FIRE_COLOR,
        decay=c.FIRE_DECAY,
    ),
    Material.Flame: MaterialSpec(
        Material.Flame, ElementClass.Gas, c.FLAME_LIFE_TIME, c.FLAME_COLOR,
        decay=c.FLAME_DECAY,
    ),
}


def material_spec(material) -> MaterialSpec:
    """Look up a material's defaults; unknown keys get the Empty defaults."""
    spec = MATERIALS.get(material)
    if spec is None:
        logger.warning(f"Unknown material {material!r}, using Empty defaults")
        return MATERIALS[Material.Empty]
    return spec


def new_particle(material) -> Particle:
    """Build the default particle for ``material``."""
    spec = material_spec(material)
    return Particle(
        material=spec.material,
        element_class=spec.element_class,
        life_time=spec.life_time,
        velocity=(0.0, 0.0),
        color=spec.color,
    )


def add_particle(grid: "Grid", x: int, y: int, material) -> None:
    """Place a fresh ``material`` particle at (x, y) if that cell is empty."""
    if not grid.is_empty(x, y):
        return
    grid.set(x, y, new_particle(material))


def remove_particle(grid: "Grid", x: int, y: int) -> None:
    """Clear (x, y) back to Empty unless it already is."""
    if grid.is_empty(x, y):
        return
    grid.set(x, y, new_particle(Material.Empty))

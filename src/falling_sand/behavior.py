"""Per-material update rules.

Every live cell is updated at most once per frame through :func:`update_cell`.
A rule first applies its material's special case (ignition for oil and wood,
decay for smoke, fire and flame). If that did not replace the particle, the
particle then moves according to its element class.

Movement always prefers the vertical over the lateral and left over right,
so settling is deterministic and slightly left-biased.
"""

import random
from typing import Callable, Dict

from . import constants as c
from .grid import Grid
from .material import ElementClass, Material
from .particle import Particle
from .registry import material_spec, new_particle

# Moore neighbourhood
NEIGHBOURS = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0), (1, 0),
    (-1, 1), (0, 1), (1, 1),
)


# ============================================================================
# MOVEMENT
# ============================================================================

def _fall(grid: Grid, x: int, y: int, dy: int, accepts: Callable[[int, int], bool]) -> bool:
    """Try straight, then left diagonal, then right diagonal towards ``y + dy``.

    Diagonals are off when the straight cell is static, so particles
    cannot slip through the corner of a wall.
    """
    ty = y + dy
    if accepts(x, ty):
        grid.swap(x, y, x, ty)
        return True
    if grid.is_static(x, ty):
        return False
    for tx in (x - 1, x + 1):
        if accepts(tx, ty):
            grid.swap(x, y, tx, ty)
            return True
    return False


def _spread(grid: Grid, x: int, y: int, accepts: Callable[[int, int], bool]) -> bool:
    """Try left, then right, on the same row."""
    for tx in (x - 1, x + 1):
        if accepts(tx, y):
            grid.swap(x, y, tx, y)
            return True
    return False


def move_solid(grid: Grid, x: int, y: int, particle: Particle) -> bool:
    if y == 0:
        return False

    def accepts(tx: int, ty: int) -> bool:
        return grid.is_class(tx, ty, ElementClass.Empty, ElementClass.Liquid, ElementClass.Gas)

    return _fall(grid, x, y, -1, accepts)


def move_liquid(grid: Grid, x: int, y: int, particle: Particle) -> bool:
    if y == 0:
        return False

    sinks_through_oil = particle.material == Material.Water

    def accepts(tx: int, ty: int) -> bool:
        if grid.is_empty(tx, ty) or grid.is_gas(tx, ty):
            return True
        return sinks_through_oil and grid.is_material(tx, ty, Material.Oil)

    if _fall(grid, x, y, -1, accepts):
        return True
    return _spread(grid, x, y, accepts)


def move_gas(grid: Grid, x: int, y: int, particle: Particle) -> bool:
    accepts = grid.is_empty
    if y < grid.height - 1 and _fall(grid, x, y, 1, accepts):
        return True
    return _spread(grid, x, y, accepts)


def stay(grid: Grid, x: int, y: int, particle: Particle) -> bool:
    return False


MOVES: Dict[ElementClass, Callable[[Grid, int, int, Particle], bool]] = {
    ElementClass.Empty: stay,
    ElementClass.Static: stay,
    ElementClass.Solid: move_solid,
    ElementClass.Liquid: move_liquid,
    ElementClass.Gas: move_gas,
}


# ============================================================================
# MATERIAL SPECIAL CASES
# ============================================================================
# Each returns True if the particle is still in place and should move.

def _decay(grid: Grid, x: int, y: int, particle: Particle, rng: random.Random) -> bool:
    """Burn down the life budget; returns False once the particle has expired."""
    spec = material_spec(particle.material)
    particle.life_time -= rng.uniform(0.0, spec.decay)
    if particle.life_time > 0:
        return True
    grid.set(x, y, new_particle(Material.Empty))
    return False


def update_smoke(grid: Grid, x: int, y: int, particle: Particle, rng: random.Random) -> bool:
    return _decay(grid, x, y, particle, rng)


def update_flame(grid: Grid, x: int, y: int, particle: Particle, rng: random.Random) -> bool:
    return _decay(grid, x, y, particle, rng)


def update_fire(grid: Grid, x: int, y: int, particle: Particle, rng: random.Random) -> bool:
    if not _decay(grid, x, y, particle, rng):
        if rng.random() < c.FIRE_SMOKE_CHANCE:
            grid.set(x, y, new_particle(Material.Smoke))
        return False
    particle.color = rng.choice(c.FIRE_SHADES)
    return True


def _ignite(grid: Grid, x: int, y: int, particle: Particle, rng: random.Random) -> bool:
    """Roll once per burning neighbour; on success turn into fire in place.

    The resulting fire keeps the particle's velocity and burns with the
    material's burning class (oil burns as a liquid, wood stays static).
    """
    spec = material_spec(particle.material)
    for dx, dy in NEIGHBOURS:
        if not grid.is_material(x + dx, y + dy, Material.Fire, Material.Flame):
            continue
        if rng.random() < spec.ignition_chance:
            fire = new_particle(Material.Fire)
            fire.velocity = particle.velocity
            fire.element_class = spec.burning_class
            grid.set(x, y, fire)
            return False
    return True


def update_oil(grid: Grid, x: int, y: int, particle: Particle, rng: random.Random) -> bool:
    return _ignite(grid, x, y, particle, rng)


def update_wood(grid: Grid, x: int, y: int, particle: Particle, rng: random.Random) -> bool:
    return _ignite(grid, x, y, particle, rng)


SPECIAL_CASES: Dict[Material, Callable[[Grid, int, int, Particle, random.Random], bool]] = {
    Material.Smoke: update_smoke,
    Material.Fire: update_fire,
    Material.Flame: update_flame,
    Material.Oil: update_oil,
    Material.Wood: update_wood,
}


def update_cell(grid: Grid, x: int, y: int, rng: random.Random) -> None:
    """Apply one frame of behavior to the particle at (x, y) and mark it processed."""
    particle = grid.get(x, y)
    if particle is None:
        return

    special = SPECIAL_CASES.get(particle.material)
    if special is None or special(grid, x, y, particle, rng):
        MOVES[particle.element_class](grid, x, y, particle)

    grid.mark_updated(x, y)

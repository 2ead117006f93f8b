"""Material kinds, their movement classes and the paint-material selector."""

from enum import Enum


class Material(Enum):
    """Substance held by a cell, in palette order."""
    Empty = 0
    Sand = 1
    Water = 2
    Smoke = 3
    Oil = 4
    Wall = 5
    Wood = 6
    Fire = 7
    Flame = 8


class ElementClass(Enum):
    """Movement category of a particle."""
    Empty = 0
    Static = 1
    Solid = 2
    Liquid = 3
    Gas = 4


# Selectable materials, declaration order
PAINTABLE = tuple(m for m in Material if m != Material.Empty)

# Erasing is painting with Empty
ERASE = Material.Empty


def next_material(material: Material) -> Material:
    """Return the paintable material after ``material``, wrapping to the first."""
    if material not in PAINTABLE:
        return PAINTABLE[0]
    index = PAINTABLE.index(material)
    return PAINTABLE[(index + 1) % len(PAINTABLE)]


def previous_material(material: Material) -> Material:
    """Return the paintable material before ``material``, wrapping to the last."""
    if material not in PAINTABLE:
        return PAINTABLE[-1]
    index = PAINTABLE.index(material)
    return PAINTABLE[(index - 1) % len(PAINTABLE)]

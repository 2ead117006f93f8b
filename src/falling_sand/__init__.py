"""
Falling Sand Simulation using Cellular Automata.

A grid of cells, each holding one material, updated once per frame by
per-material movement, decay and ignition rules.
"""

from .material import Material, ElementClass, ERASE, next_material, previous_material
from .particle import Particle
from .registry import MaterialSpec, material_spec, new_particle, add_particle, remove_particle
from .grid import Grid, create_grid, destroy_grid, clear, get_color
from .scheduler import step_frame
from .stroke import draw_stroke, line_cells
from .model import SandModel

__version__ = "0.1.0"

__all__ = [
    "Material",
    "ElementClass",
    "ERASE",
    "next_material",
    "previous_material",
    "Particle",
    "MaterialSpec",
    "material_spec",
    "new_particle",
    "add_particle",
    "remove_particle",
    "Grid",
    "create_grid",
    "destroy_grid",
    "clear",
    "get_color",
    "step_frame",
    "draw_stroke",
    "line_cells",
    "SandModel",
]

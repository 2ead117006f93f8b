"""Tunable constants for the falling sand simulation.

Colors are RGB tuples. Probabilities are per neighbour per frame.
"""

from typing import Tuple

# Type alias for RGB color tuples
Color = Tuple[int, int, int]

# ============================================================================
# MATERIAL BASE COLORS
# ============================================================================

EMPTY_COLOR: Color = (0, 0, 0)                      # background
SAND_COLOR: Color = (253, 249, 0)                   # yellow
WATER_COLOR: Color = (102, 191, 255)                # skyblue
SMOKE_COLOR: Color = (130, 130, 130)                # gray
OIL_COLOR: Color = (76, 52, 26)                     # dark brown
WALL_COLOR: Color = (200, 200, 200)                 # lightgray
WOOD_COLOR: Color = (127, 106, 79)                  # brown
FIRE_COLOR: Color = (230, 41, 55)                   # red
FLAME_COLOR: Color = (255, 161, 0)                  # orange

# Fire picks one of these every frame
FIRE_SHADES: Tuple[Color, ...] = (
    (230, 41, 55),
    (255, 161, 0),
    (255, 203, 0),
    (190, 33, 55),
)

# ============================================================================
# DECAY
# ============================================================================

# Initial life budget of finite-life materials
SMOKE_LIFE_TIME: float = 1.0
FIRE_LIFE_TIME: float = 1.0
FLAME_LIFE_TIME: float = 0.5

# Upper bound K of the uniform [0, K] decrement drawn each frame
SMOKE_DECAY: float = 0.1
FIRE_DECAY: float = 0.15
FLAME_DECAY: float = 0.25

# Chance that expiring fire leaves smoke behind instead of nothing
FIRE_SMOKE_CHANCE: float = 0.2

# ============================================================================
# IGNITION
# ============================================================================

OIL_IGNITION_CHANCE: float = 0.75
WOOD_IGNITION_CHANCE: float = 0.5

# ============================================================================
# DEFAULT GRID
# ============================================================================

DEFAULT_GRID_WIDTH: int = 256
DEFAULT_GRID_HEIGHT: int = 256

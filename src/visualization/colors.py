"""Color definitions and constants for the falling sand visualization.

This module contains the UI colors and default window configuration
used throughout the Pygame visualization. Material colors belong to the
simulation itself (``falling_sand.constants``).
"""

from typing import Tuple

# Type alias for RGB color tuples
Color = Tuple[int, int, int]

# ============================================================================
# UI COLORS
# ============================================================================

BLACK: Color = (0, 0, 0)                            # Background
WHITE: Color = (255, 255, 255)                      # Text
PANEL_COLOR: Color = (30, 30, 30)                   # Info panel background
HIGHLIGHT_COLOR: Color = (255, 161, 0)              # Selected palette swatch

# ============================================================================
# DEFAULT SIMULATION PARAMETERS
# ============================================================================

DEFAULT_WIDTH: int = 256                            # Grid width in cells
DEFAULT_HEIGHT: int = 256                           # Grid height in cells
DEFAULT_CELL_SIZE: int = 3                          # Cell size in pixels
DEFAULT_FPS: int = 60                               # Target frames per second
DEFAULT_BRUSH_RADIUS: int = 1                       # Brush radius in cells
MAX_BRUSH_RADIUS: int = 10

PANEL_HEIGHT: int = 90                              # Space below the grid for UI

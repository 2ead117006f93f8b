"""Visualization package for the falling sand simulation using Pygame."""

from .colors import *
from .renderer import GridRenderer, screen_to_grid
from .ui import InfoPanel

__all__ = [
    # Renderer and UI components
    'GridRenderer',
    'InfoPanel',
    'screen_to_grid',

    # UI colors
    'BLACK',
    'WHITE',
    'PANEL_COLOR',
    'HIGHLIGHT_COLOR',

    # Default parameters
    'DEFAULT_WIDTH',
    'DEFAULT_HEIGHT',
    'DEFAULT_CELL_SIZE',
    'DEFAULT_FPS',
    'DEFAULT_BRUSH_RADIUS',
    'MAX_BRUSH_RADIUS',
    'PANEL_HEIGHT',
]

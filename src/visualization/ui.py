"""UI components for the falling sand visualization.

This module contains the info panel below the grid: the material
palette, the FPS readout and the keyboard help.
"""

from typing import TYPE_CHECKING, Optional

import pygame

from falling_sand.material import PAINTABLE, Material
from falling_sand.registry import material_spec

from .colors import WHITE, PANEL_COLOR, HIGHLIGHT_COLOR

if TYPE_CHECKING:
    from falling_sand.model import SandModel


class InfoPanel:
    """Displays the palette and simulation status below the grid.

    Clicking a swatch selects that material.

    Attributes:
        top: Y coordinate of the panel's top edge.
        width: Panel width in pixels.
        height: Panel height in pixels.
        swatches: Clickable rectangle per paintable material.
    """

    SWATCH_SIZE = 28
    SWATCH_SPACING = 8
    PADDING = 10

    def __init__(self, top: int, width: int, height: int) -> None:
        """Initialize the info panel with fonts and palette layout."""
        self.top = top
        self.width = width
        self.height = height
        self.font = pygame.font.Font(None, 24)
        self.small_font = pygame.font.Font(None, 18)

        self.swatches: dict[Material, pygame.Rect] = {}
        for i, material in enumerate(PAINTABLE):
            x = self.PADDING + i * (self.SWATCH_SIZE + self.SWATCH_SPACING)
            self.swatches[material] = pygame.Rect(
                x, top + self.PADDING, self.SWATCH_SIZE, self.SWATCH_SIZE
            )

    def material_at(self, pos: tuple[int, int]) -> Optional[Material]:
        """Return the material whose swatch contains ``pos``, if any."""
        for material, rect in self.swatches.items():
            if rect.collidepoint(pos):
                return material
        return None

    def draw(
        self,
        screen: pygame.Surface,
        model: "SandModel",
        selected: Material,
        brush_radius: int,
        paused: bool,
        fps: float,
    ) -> None:
        """Draw the panel."""
        pygame.draw.rect(screen, PANEL_COLOR, (0, self.top, self.width, self.height))

        # === PALETTE ===
        for material, rect in self.swatches.items():
            pygame.draw.rect(screen, material_spec(material).color, rect)
            if material == selected:
                pygame.draw.rect(screen, HIGHLIGHT_COLOR, rect.inflate(6, 6), 2)

        # === STATUS ===
        status_y = self.top + self.PADDING + self.SWATCH_SIZE + 10
        status = "PAUSED" if paused else "RUNNING"
        text = self.font.render(
            f"{selected.name}  r={brush_radius}  {status}  frame {model.frame}",
            True,
            WHITE,
        )
        screen.blit(text, (self.PADDING, status_y))

        fps_text = self.font.render(f"{fps:.0f} FPS", True, WHITE)
        screen.blit(fps_text, (self.width - fps_text.get_width() - self.PADDING, status_y))

        help_text = self.small_font.render(
            "LMB paint  RMB erase  LEFT/RIGHT material  wheel brush  "
            "SPACE pause  C clear  ESC quit",
            True,
            WHITE,
        )
        screen.blit(help_text, (self.PADDING, status_y + 22))

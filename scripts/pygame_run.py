#!/usr/bin/env python3
"""Pygame visualization launcher for the falling sand simulation.

Opens a window onto the particle grid. Drag with the left mouse button to
paint the selected material, with the right button to erase.

Usage:
    python scripts/pygame_run.py
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import pygame

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from falling_sand import SandModel, Material, next_material, previous_material

from visualization import (
    GridRenderer,
    InfoPanel,
    screen_to_grid,
    BLACK,
    DEFAULT_WIDTH,
    DEFAULT_HEIGHT,
    DEFAULT_CELL_SIZE,
    DEFAULT_FPS,
    DEFAULT_BRUSH_RADIUS,
    MAX_BRUSH_RADIUS,
    PANEL_HEIGHT,
)

logger = logging.getLogger(__name__)


class SimulationRunner:
    """Main simulation runner with Pygame visualization.

    Handles the main loop, event processing, and coordination between
    the sand model and visualization components.

    Attributes:
        model: The falling sand model.
        screen: Pygame display surface.
        clock: Pygame clock for FPS control.
        renderer: Grid renderer for drawing cells.
        info_panel: Palette and status panel.
        material: Currently selected paint material.
        brush_radius: Brush radius in cells.
        paused: Whether the simulation is paused.
        prev_cell: Cursor cell in the previous frame.
    """

    def __init__(
        self,
        width: int,
        height: int,
        cell_size: int,
        seed: Optional[int] = None,
    ) -> None:
        """Initialize the simulation runner.

        Args:
            width: Grid width in cells.
            height: Grid height in cells.
            cell_size: Size of each cell in pixels.
            seed: Random seed for the model.
        """
        window_width = width * cell_size
        window_height = height * cell_size + PANEL_HEIGHT

        pygame.init()
        self.screen = pygame.display.set_mode((window_width, window_height))
        pygame.display.set_caption("Falling Sand")
        self.clock = pygame.time.Clock()

        self.model = SandModel(width=width, height=height, seed=seed)

        self.renderer = GridRenderer(cell_size)
        self.info_panel = InfoPanel(
            top=height * cell_size, width=window_width, height=PANEL_HEIGHT
        )

        self.cell_size = cell_size
        self.material = Material.Sand
        self.brush_radius = DEFAULT_BRUSH_RADIUS
        self.paused = False
        self.prev_cell = self._cursor_cell()

    def _cursor_cell(self) -> tuple[int, int]:
        return screen_to_grid(*pygame.mouse.get_pos(), self.cell_size, self.model.grid.height)

    def _handle_keyboard_events(self, event: pygame.event.Event) -> bool:
        """Handle keyboard input events.

        Args:
            event: The keyboard event to process.

        Returns:
            False if the simulation should quit, True otherwise.
        """
        if event.key == pygame.K_ESCAPE:
            return False

        elif event.key == pygame.K_SPACE:
            self.paused = not self.paused

        elif event.key == pygame.K_c:
            self.model.clear()

        elif event.key == pygame.K_RIGHT:
            self.material = next_material(self.material)

        elif event.key == pygame.K_LEFT:
            self.material = previous_material(self.material)

        return True

    def _handle_mouse_events(self, event: pygame.event.Event) -> None:
        """Handle palette clicks and brush resizing."""
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            picked = self.info_panel.material_at(event.pos)
            if picked is not None:
                self.material = picked

        elif event.type == pygame.MOUSEWHEEL:
            self.brush_radius = max(0, min(MAX_BRUSH_RADIUS, self.brush_radius + event.y))

    def _apply_stroke(self) -> None:
        """Paint or erase along the cursor path since the previous frame."""
        curr_cell = self._cursor_cell()
        left, _, right = pygame.mouse.get_pressed()

        if left:
            self.model.paint(*self.prev_cell, *curr_cell, self.material, self.brush_radius)
        elif right:
            self.model.erase(*self.prev_cell, *curr_cell, self.brush_radius)

        self.prev_cell = curr_cell

    def _render(self) -> None:
        """Render all visual components to the screen."""
        self.screen.fill(BLACK)
        self.renderer.draw(self.screen, self.model.grid)
        self.info_panel.draw(
            self.screen,
            self.model,
            self.material,
            self.brush_radius,
            self.paused,
            self.clock.get_fps(),
        )
        pygame.display.flip()

    def run(self) -> None:
        """Run the main loop until the user quits."""
        running = True

        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

                elif event.type == pygame.KEYDOWN:
                    if not self._handle_keyboard_events(event):
                        running = False

                else:
                    self._handle_mouse_events(event)

            self._apply_stroke()

            if not self.paused:
                self.model.step()

            self._render()
            self.clock.tick(DEFAULT_FPS)

        pygame.quit()


def main() -> None:
    """Main entry point for the Pygame visualization."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    runner = SimulationRunner(DEFAULT_WIDTH, DEFAULT_HEIGHT, DEFAULT_CELL_SIZE)
    runner.run()
    sys.exit()


if __name__ == "__main__":
    main()

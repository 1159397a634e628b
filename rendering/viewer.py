"""Interactive pygame viewer for the reef.

The viewer registers itself as an engine observer and redraws after every
step. Controls:

    P      Pause/Resume
    S      Single step while paused
    R      Reset (same seed)
    ESC    Quit
"""

import logging
from typing import Optional

import pygame

from reef.config.display import UI_FONT_SIZE
from reef.simulation.engine import SimulationEngine
from reef.snapshot import FieldSnapshot
from rendering.grid_renderer import GridRenderer, window_size

logger = logging.getLogger(__name__)


class ReefViewer:
    """Runs the engine in a pygame window.

    Attributes:
        engine: The simulation engine being shown
        paused: Whether stepping is paused
    """

    def __init__(self, engine: SimulationEngine, step_delay_ms: Optional[int] = None) -> None:
        self.engine = engine
        display = engine.config.display
        self.step_delay_ms = display.step_delay_ms if step_delay_ms is None else step_delay_ms
        self.cell_size = display.cell_size
        self.paused = False
        self.renderer: Optional[GridRenderer] = None
        self.clock = pygame.time.Clock()

    def setup(self) -> bool:
        """Open the window; returns False if no display is available."""
        size = window_size(self.engine.field.depth, self.engine.field.width, self.cell_size)
        try:
            screen = pygame.display.set_mode(size)
        except pygame.error as e:
            logger.error(f"Couldn't set the display mode: {e}")
            return False
        pygame.display.set_caption("Reef Ecosystem Simulation")

        font = pygame.font.Font(None, UI_FONT_SIZE)
        self.renderer = GridRenderer(screen, font, self.cell_size)
        self.engine.add_observer(self.on_step)
        self.on_step(self.engine.get_snapshot())
        return True

    def on_step(self, snapshot: FieldSnapshot) -> None:
        if self.renderer is None:
            return
        self.renderer.draw(snapshot)
        pygame.display.flip()

    def handle_events(self) -> bool:
        """Handle user input; returns False when the viewer should close."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_p:
                    self.paused = not self.paused
                elif event.key == pygame.K_s and self.paused:
                    self.engine.simulate_one_step()
                elif event.key == pygame.K_r:
                    self.engine.reset()
                elif event.key == pygame.K_ESCAPE:
                    return False
        return True

    def run(self, max_steps: Optional[int] = None) -> int:
        """Step the engine until the window is closed.

        Stepping pauses on its own once max_steps is reached or the reef is no
        longer viable.

        Returns:
            Number of steps run
        """
        if not self.setup():
            return 0

        max_steps = self.engine.config.max_steps if max_steps is None else max_steps
        steps_run = 0
        try:
            while self.handle_events():
                if not self.paused:
                    if steps_run >= max_steps or not self.engine.is_viable():
                        self.paused = True
                        logger.info(f"Stopped after {steps_run} steps")
                    else:
                        self.engine.simulate_one_step()
                        steps_run += 1
                self.clock.tick(1000 // max(1, self.step_delay_ms))
        finally:
            self.engine.remove_observer(self.on_step)
        return steps_run


def run_viewer(engine: SimulationEngine, max_steps: Optional[int] = None) -> int:
    """Entry point for the viewer."""
    pygame.init()
    viewer = ReefViewer(engine)
    try:
        return viewer.run(max_steps)
    finally:
        pygame.quit()

"""Grid rendering for the reef viewer.

This module draws a FieldSnapshot: one rectangle per cell coloured by
species, infected animals in white, a darker overlay at night, and a status
bar with the step, clock, weather and population.
"""

from typing import Optional, Tuple

import pygame

from reef.config.display import (
    BACKGROUND_COLOR,
    CELL_SIZE,
    EMPTY_COLOR,
    INFECTED_COLOR,
    NIGHT_OVERLAY_ALPHA,
    SPECIES_COLORS,
    STATUS_BAR_HEIGHT,
    STATUS_TEXT_COLOR,
    UI_FONT_SIZE,
    UNKNOWN_COLOR,
)
from reef.snapshot import FieldSnapshot, OccupantView
from reef.species import TRACKED_SPECIES

Color = Tuple[int, int, int]


def window_size(depth: int, width: int, cell_size: int = CELL_SIZE) -> Tuple[int, int]:
    """Pixel size of a window showing a depth x width field plus the status bar."""
    return width * cell_size, depth * cell_size + STATUS_BAR_HEIGHT


def color_for(view: Optional[OccupantView]) -> Color:
    """Colour of a cell given its occupant (None for an empty cell)."""
    if view is None or not view.alive:
        return EMPTY_COLOR
    if view.infected:
        return INFECTED_COLOR
    return SPECIES_COLORS.get(view.species.value, UNKNOWN_COLOR)


class GridRenderer:
    """Renders snapshots of the reef onto a pygame surface.

    Attributes:
        surface: Pygame surface to render to
        font: Font for the status bar
        cell_size: Pixel size of one cell
    """

    def __init__(
        self,
        surface: pygame.Surface,
        font: Optional[pygame.font.Font] = None,
        cell_size: int = CELL_SIZE,
    ) -> None:
        self.surface = surface
        self.font = font
        self.cell_size = cell_size

    def draw(self, snapshot: FieldSnapshot) -> None:
        """Draw the grid, the night overlay and the status bar."""
        self.surface.fill(BACKGROUND_COLOR)
        self.draw_grid(snapshot)
        if not snapshot.is_daytime:
            self.draw_night_overlay(snapshot)
        if self.font is not None:
            self.draw_status(snapshot)

    def draw_grid(self, snapshot: FieldSnapshot) -> None:
        size = self.cell_size
        grid_rect = pygame.Rect(0, 0, snapshot.width * size, snapshot.depth * size)
        pygame.draw.rect(self.surface, EMPTY_COLOR, grid_rect)

        for coordinate, view in snapshot.occupants.items():
            color = color_for(view)
            if color == EMPTY_COLOR:
                continue
            rect = pygame.Rect(coordinate.col * size, coordinate.row * size, size, size)
            pygame.draw.rect(self.surface, color, rect)

    def draw_night_overlay(self, snapshot: FieldSnapshot) -> None:
        overlay = pygame.Surface((snapshot.width * self.cell_size, snapshot.depth * self.cell_size))
        overlay.set_alpha(NIGHT_OVERLAY_ALPHA)
        overlay.fill((0, 0, 0))
        self.surface.blit(overlay, (0, 0))

    def draw_status(self, snapshot: FieldSnapshot) -> None:
        """Two text lines under the grid."""
        assert self.font is not None
        y_offset = snapshot.depth * self.cell_size + 4
        lines = [
            f"Step: {snapshot.step}  Time: {snapshot.time_string}  "
            f"Weather: {snapshot.weather.value}",
            "  ".join(
                f"{species.label}: {snapshot.counts.get(species, 0)}" for species in TRACKED_SPECIES
            ),
        ]
        for line in lines:
            text_surface = self.font.render(line, True, STATUS_TEXT_COLOR)
            self.surface.blit(text_surface, (4, y_offset))
            y_offset += UI_FONT_SIZE

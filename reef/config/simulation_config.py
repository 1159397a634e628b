"""Lightweight simulation configuration helpers.

Configuration mistakes never escape ``SimulationConfig.validate()``: each bad
value is replaced by its documented default and a warning is logged. Callers
that prefer to fail (``main.py --strict-config``) pass ``strict=True`` and get a
ConfigurationError listing every problem.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

from reef.config.display import CELL_SIZE, DEFAULT_STEP_DELAY_MS, SEPARATOR_WIDTH
from reef.config.simulation import (
    DEFAULT_DEPTH,
    DEFAULT_STATS_INTERVAL,
    DEFAULT_WIDTH,
    LONG_RUN_STEPS,
    SPAWN_PROBABILITIES,
)
from reef.exceptions import ConfigurationError
from reef.species import Species

logger = logging.getLogger(__name__)


def default_spawn_probabilities() -> Dict[Species, float]:
    """Spawn probabilities keyed by species, in roll order."""
    return {Species(name): probability for name, probability in SPAWN_PROBABILITIES.items()}


@dataclass
class GridConfig:
    """Dimensions of the field."""

    depth: int = DEFAULT_DEPTH
    width: int = DEFAULT_WIDTH

    def validate(self) -> None:
        if self.depth <= 0 or self.width <= 0:
            logger.warning(
                "Grid dimensions must be positive (got %dx%d); using defaults %dx%d",
                self.depth,
                self.width,
                DEFAULT_DEPTH,
                DEFAULT_WIDTH,
            )
            self.depth = DEFAULT_DEPTH
            self.width = DEFAULT_WIDTH


@dataclass
class DisplayConfig:
    """Minimal display configuration for the viewer and console output."""

    cell_size: int = CELL_SIZE
    step_delay_ms: int = DEFAULT_STEP_DELAY_MS
    separator_width: int = SEPARATOR_WIDTH


@dataclass
class SimulationConfig:
    """Configuration for one simulation run.

    Attributes:
        grid: Field dimensions
        seed: Seed for the shared RNG; None picks one at engine creation
        spawn_probabilities: Per-cell spawn probability per species, in roll order
        max_steps: Step budget for headless runs
        stats_interval: Print stats every N steps in headless mode
        display: Viewer settings
    """

    grid: GridConfig = field(default_factory=GridConfig)
    seed: Optional[int] = None
    spawn_probabilities: Dict[Species, float] = field(
        default_factory=default_spawn_probabilities
    )
    max_steps: int = LONG_RUN_STEPS
    stats_interval: int = DEFAULT_STATS_INTERVAL
    display: DisplayConfig = field(default_factory=DisplayConfig)

    @classmethod
    def production(cls, **overrides: Any) -> "SimulationConfig":
        """Default configuration with optional overrides."""
        return cls().with_overrides(**overrides)

    @classmethod
    def small(cls, depth: int = 20, width: int = 30, **overrides: Any) -> "SimulationConfig":
        """A small grid, handy for tests and quick runs."""
        return cls(grid=GridConfig(depth=depth, width=width)).with_overrides(**overrides)

    def with_overrides(self, **overrides: Any) -> "SimulationConfig":
        """Return a copy with top-level fields (or depth/width) replaced."""
        grid_overrides = {
            key: overrides.pop(key) for key in ("depth", "width") if key in overrides
        }
        grid = replace(overrides.pop("grid", self.grid), **grid_overrides)
        return replace(
            self,
            grid=grid,
            spawn_probabilities=dict(overrides.pop("spawn_probabilities", self.spawn_probabilities)),
            **overrides,
        )

    def validate(self, strict: bool = False) -> "SimulationConfig":
        """Replace invalid values by their defaults, in place.

        Args:
            strict: Raise ConfigurationError instead of substituting defaults

        Returns:
            self, for chaining
        """
        problems = self.find_problems()
        if strict and problems:
            raise ConfigurationError("; ".join(problems))

        self.grid.validate()

        defaults = default_spawn_probabilities()
        for species, probability in list(self.spawn_probabilities.items()):
            if not 0.0 <= probability <= 1.0:
                fallback = defaults.get(species, 0.0)
                logger.warning(
                    "Spawn probability for %s must be within [0, 1] (got %r); using %r",
                    species.value,
                    probability,
                    fallback,
                )
                self.spawn_probabilities[species] = fallback

        if self.max_steps < 0:
            logger.warning("max_steps must be >= 0 (got %d); using %d", self.max_steps, LONG_RUN_STEPS)
            self.max_steps = LONG_RUN_STEPS

        if self.stats_interval <= 0:
            logger.warning(
                "stats_interval must be positive (got %d); using %d",
                self.stats_interval,
                DEFAULT_STATS_INTERVAL,
            )
            self.stats_interval = DEFAULT_STATS_INTERVAL

        return self

    def find_problems(self) -> List[str]:
        """Describe every invalid value without changing anything."""
        problems = []
        if self.grid.depth <= 0 or self.grid.width <= 0:
            problems.append(f"grid must be positive, got {self.grid.depth}x{self.grid.width}")
        for species, probability in self.spawn_probabilities.items():
            if not 0.0 <= probability <= 1.0:
                problems.append(f"spawn probability for {species.value} out of range: {probability!r}")
        if self.max_steps < 0:
            problems.append(f"max_steps must be >= 0, got {self.max_steps}")
        if self.stats_interval <= 0:
            problems.append(f"stats_interval must be positive, got {self.stats_interval}")
        return problems

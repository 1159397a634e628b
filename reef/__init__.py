"""Grid-based reef ecosystem simulation.

Predators, grazers and algae share a rectangular field. Every step they age,
feed, breed, catch and spread a disease, and die, nudged by a day/night clock
and rotating weather. This package holds the pure simulation with no UI
dependencies:

- simulation: the stepping engine (reef.simulation.engine)
- entities: Animal and Plant behavior
- species: the species parameter table and diets
- field: the double-buffered grid
- time_system / weather_system: environmental modulators

Design note: this module exposes a small, explicit public API via ``__all__``.
Use direct imports from submodules for internal helpers.
"""

from . import entities as entities
from . import simulation as simulation
from .config.simulation_config import SimulationConfig
from .simulation.engine import SimulationEngine
from .species import Species

# Public API of the reef package. Keep this list intentionally small.
__all__ = [
    "entities",
    "simulation",
    "SimulationConfig",
    "SimulationEngine",
    "Species",
]

"""The stepping engine - owner of the RNG, the environment and the field.

Design Decisions:
-----------------
1. The engine is a COORDINATOR, not a DOER. Organisms carry their own
   behavior; the clock and weather are systems; statistics live in the
   PopulationTracker. The engine only runs phases in order.

2. The field is double-buffered. Every step reads the current Field and
   builds a fresh next Field, then swaps them. Organisms that do not
   re-place themselves into the next Field are gone.

3. One ``random.Random`` per engine, created from the configured seed (or a
   seed picked from the OS when none is configured). Every component draws
   from it, so the same seed replays the same run, including after
   ``reset()``.

4. Observers receive an immutable FieldSnapshot after every step and cannot
   reach back into the live field.
"""

import logging
import random
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from reef.config.simulation_config import SimulationConfig
from reef.entity_factory import create_initial_population
from reef.field import Field
from reef.population_tracker import PopulationTracker
from reef.simulation import diagnostics
from reef.simulation.step_context import StepContext
from reef.snapshot import FieldSnapshot, build_snapshot
from reef.species import Species
from reef.systems.base import BaseSystem
from reef.time_system import ClockSystem
from reef.update_phases import PHASE_DESCRIPTIONS, UpdatePhase, get_system_phase
from reef.weather_system import WeatherSystem

logger = logging.getLogger(__name__)

Observer = Callable[[FieldSnapshot], Any]

SEED_RANGE = 2**32


@dataclass
class StepResult:
    """Summary of one simulated step.

    Attributes:
        step: Step number just completed
        counts: Live organisms per species after the step
        births: Organisms born during the step
        deaths: Organisms that died during the step
        viable: Whether every tracked species survived the step
    """

    step: int
    counts: Dict[Species, int] = field(default_factory=dict)
    births: int = 0
    deaths: int = 0
    viable: bool = True


class SimulationEngine:
    """Runs the reef one step at a time.

    Attributes:
        config: Simulation configuration (validated)
        seed: Seed the RNG was created from (None when an RNG was injected)
        rng: The shared random generator
        clock: Day/night clock
        weather: Weather controller
        field: The current Field
        tracker: Population statistics
        step_count: Steps simulated since the last reset
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        *,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """Initialize the engine and populate the field.

        Args:
            config: Simulation configuration; defaults to the production setup
            seed: Override the configured seed
            rng: Inject a ready-made RNG instead (reset() then keeps using it)
        """
        # Validation and seeding act on a copy, never on the caller's config
        base = config or SimulationConfig.production()
        self.config = base.with_overrides() if seed is None else base.with_overrides(seed=seed)
        self.config.validate()

        self._injected_rng = rng
        if rng is None and self.config.seed is None:
            self.config.seed = random.SystemRandom().randrange(SEED_RANGE)
        self.seed: Optional[int] = None if rng is not None else self.config.seed

        self.tracker = PopulationTracker()
        self._observers: List[Observer] = []
        self._current_phase: Optional[UpdatePhase] = None
        self._start_time = time.time()

        self.reset()

    # =========================================================================
    # Setup
    # =========================================================================

    def reset(self) -> None:
        """Reseed and rebuild the clock, weather and field.

        With a seed, the run that follows is identical to the previous run
        from the same seed.
        """
        if self._injected_rng is not None:
            self.rng = self._injected_rng
        else:
            self.rng = random.Random(self.seed)

        self.step_count = 0
        self.clock = ClockSystem(self)
        self.weather = WeatherSystem(self.rng, self)
        self.field = Field(self.config.grid.depth, self.config.grid.width, self.rng)
        self.tracker.reset()

        created = create_initial_population(self.field, self.config.spawn_probabilities, self.rng)
        self.tracker.record_step(0, self.field.population_counts())
        self._start_time = time.time()

        logger.info(
            f"Reef ready: {self.field.depth}x{self.field.width} field, "
            f"{created} organisms, seed={self.seed}"
        )
        self._notify_observers()

    @property
    def systems(self) -> List[BaseSystem]:
        return [self.clock, self.weather]

    def get_systems_debug_info(self) -> Dict[str, Any]:
        """Debug information from the clock and weather systems."""
        info = {}
        for system in self.systems:
            phase = get_system_phase(system)
            info[system.name] = {
                **system.get_debug_info(),
                "phase": phase.name if phase is not None else None,
            }
        return info

    # =========================================================================
    # Phase Tracking
    # =========================================================================

    def get_current_phase(self) -> Optional[UpdatePhase]:
        """Get the current update phase (None if not in a step)."""
        return self._current_phase

    def get_phase_description(self, phase: Optional[UpdatePhase] = None) -> str:
        if phase is None:
            phase = self._current_phase
        if phase is None:
            return "Not in update loop"
        return PHASE_DESCRIPTIONS.get(phase, phase.name)

    # =========================================================================
    # Stepping
    # =========================================================================

    def simulate_one_step(self) -> StepResult:
        """Advance the reef by one step.

        Phase Order:
            1. STEP_START: Increment the step counter, allocate the next field
            2. TIME_UPDATE: Advance the clock
            3. ENVIRONMENT: Advance the weather
            4. ANIMAL_ACT: Animals of the current field act, in placement order
            5. PLANT_ACT: Plants of the current field act, in placement order
            6. BUFFER_SWAP: The next field becomes current
            7. STEP_END: Record statistics, notify observers
        """
        births_before = self.tracker.total_births
        deaths_before = self.tracker.total_deaths

        self._current_phase = UpdatePhase.STEP_START
        self.step_count += 1
        current = self.field
        next_field = current.spawn_empty()

        self._current_phase = UpdatePhase.TIME_UPDATE
        self.clock.update(self.step_count)

        self._current_phase = UpdatePhase.ENVIRONMENT
        self.weather.update(self.step_count)

        context = StepContext(
            rng=self.rng,
            clock=self.clock,
            weather=self.weather,
            tracker=self.tracker,
            step=self.step_count,
        )

        # Both lists are taken before anyone acts; newborns wait a step
        animals = current.animals
        plants = current.plants

        self._current_phase = UpdatePhase.ANIMAL_ACT
        for animal in animals:
            animal.act(current, next_field, context)

        self._current_phase = UpdatePhase.PLANT_ACT
        for plant in plants:
            plant.act(current, next_field, context)

        self._current_phase = UpdatePhase.BUFFER_SWAP
        self.field = next_field

        self._current_phase = UpdatePhase.STEP_END
        counts = self.field.population_counts()
        self.tracker.record_step(self.step_count, counts)
        self._notify_observers()
        self._current_phase = None

        return StepResult(
            step=self.step_count,
            counts=counts,
            births=self.tracker.total_births - births_before,
            deaths=self.tracker.total_deaths - deaths_before,
            viable=self.is_viable(),
        )

    def run_steps(self, num_steps: int) -> int:
        """Run up to ``num_steps`` steps, stopping early once not viable.

        Returns:
            Number of steps actually run
        """
        steps_run = 0
        for _ in range(max(0, num_steps)):
            if not self.is_viable():
                logger.info(f"Reef no longer viable at step {self.step_count}; stopping")
                break
            self.simulate_one_step()
            steps_run += 1
        return steps_run

    def run_long_simulation(self) -> int:
        """Run the configured step budget."""
        return self.run_steps(self.config.max_steps)

    def is_viable(self) -> bool:
        """Whether every tracked species still has a live member."""
        return self.field.is_viable()

    # =========================================================================
    # Observers
    # =========================================================================

    def add_observer(self, observer: Observer) -> None:
        """Call ``observer(snapshot)`` after every step and reset."""
        if observer not in self._observers:
            self._observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def _notify_observers(self) -> None:
        if not self._observers:
            return
        snapshot = self.get_snapshot()
        for observer in list(self._observers):
            observer(snapshot)

    def get_snapshot(self) -> FieldSnapshot:
        """Immutable view of the current field and environment."""
        return build_snapshot(self.step_count, self.field, self.clock, self.weather.current)

    # =========================================================================
    # Statistics
    # =========================================================================

    def get_stats(self) -> Dict[str, Any]:
        """Current statistics as plain, JSON-friendly values."""
        counts = self.field.population_counts()
        return {
            "step": self.step_count,
            "seed": self.seed,
            "time": self.clock.get_time_string(),
            "is_daytime": self.clock.is_daytime(),
            "days_elapsed": self.clock.days_elapsed,
            "weather": self.weather.current.value,
            "viable": self.is_viable(),
            "counts": {species.value: count for species, count in counts.items()},
            "total_population": sum(counts.values()),
            **self.tracker.get_stats(),
        }

    def print_stats(self) -> None:
        diagnostics.print_simulation_stats(self, self._start_time)

    def export_stats_json(self, filename: str) -> None:
        diagnostics.export_stats_json(self, filename, self._start_time)

    def run_headless(
        self,
        max_steps: Optional[int] = None,
        stats_interval: Optional[int] = None,
        export_json: Optional[str] = None,
    ) -> int:
        """Run the simulation without visualization.

        Returns:
            Number of steps run
        """
        max_steps = self.config.max_steps if max_steps is None else max_steps
        stats_interval = self.config.stats_interval if stats_interval is None else stats_interval
        sep = self.config.display.separator_width

        logger.info("=" * sep)
        logger.info("HEADLESS REEF SIMULATION")
        logger.info("=" * sep)
        logger.info(f"Running for up to {max_steps} steps (seed {self.seed})")
        logger.info(f"Stats will be printed every {stats_interval} steps")
        if export_json:
            logger.info(f"Stats will be exported to: {export_json}")
        logger.info("=" * sep)

        steps_run = 0
        for _ in range(max_steps):
            if not self.is_viable():
                logger.info(f"Reef no longer viable at step {self.step_count}")
                break
            self.simulate_one_step()
            steps_run += 1
            if stats_interval > 0 and self.step_count % stats_interval == 0:
                self.print_stats()

        logger.info("")
        logger.info("=" * sep)
        logger.info("SIMULATION COMPLETE - Final Statistics")
        logger.info("=" * sep)
        self.print_stats()

        if export_json:
            self.export_stats_json(export_json)

        return steps_run

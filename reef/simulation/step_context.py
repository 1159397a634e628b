"""StepContext - explicit per-step state handed to every organism.

The engine builds one StepContext at the start of each step, after the clock
and weather have advanced, and passes it to every ``act`` call. Organisms
read the shared RNG, the time of day and the weather modifiers from it, and
report deaths and births through it so bookkeeping stays in one place.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from reef.entities.base import DeathCause, Organism

if TYPE_CHECKING:
    from reef.population_tracker import PopulationTracker
    from reef.time_system import ClockSystem
    from reef.weather_system import WeatherModifiers, WeatherSystem


@dataclass
class StepContext:
    """Explicit per-step state passed through the act phase.

    Attributes:
        rng: The engine's shared RNG
        clock: Clock, already advanced for this step
        weather: Weather, already advanced for this step
        tracker: Optional population tracker for births and deaths
        step: Step number being computed
    """

    rng: random.Random
    clock: ClockSystem
    weather: WeatherSystem
    tracker: Optional[PopulationTracker] = None
    step: int = 0

    @property
    def is_daytime(self) -> bool:
        return self.clock.is_daytime()

    @property
    def modifiers(self) -> WeatherModifiers:
        return self.weather.modifiers

    def kill(self, organism: Organism, cause: DeathCause) -> None:
        """Mark an organism dead and record the cause."""
        if not organism.alive:
            return
        age = organism.age
        organism.set_dead(cause)
        if self.tracker is not None:
            self.tracker.record_death(organism.species, cause, age=age, step=self.step)

    def record_birth(self, organism: Organism) -> None:
        if self.tracker is not None:
            self.tracker.record_birth(organism.species, step=self.step)

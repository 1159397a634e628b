"""Rotating weather for the reef.

The weather holds one state for a random number of steps, then switches to a
state drawn uniformly from ``Weather`` (possibly the same one). Behaviors read
the current ``WeatherModifiers`` as probability multipliers; they never change
them.
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional

from reef.config.simulation import (
    COLD_PLANT_GROWTH_MODIFIER,
    COLD_PREDATOR_MOVING_MODIFIER,
    COLD_PREY_MOVING_MODIFIER,
    FOG_FEEDING_MODIFIER,
    FOG_HUNTING_MODIFIER,
    FOG_PLANT_GROWTH_MODIFIER,
    WEATHER_MAX_DURATION,
    WEATHER_MIN_DURATION,
)
from reef.systems.base import BaseSystem, SystemResult
from reef.update_phases import UpdatePhase, runs_in_phase
from reef.util.rng import require_rng_param

if TYPE_CHECKING:
    from reef.simulation.engine import SimulationEngine

logger = logging.getLogger(__name__)


class Weather(Enum):
    CLEAR = "clear"
    RAIN = "rain"
    FOG = "fog"
    COLD = "cold"


@dataclass(frozen=True)
class WeatherModifiers:
    """Probability multipliers applied to organism rolls.

    Attributes:
        predator_hunting: Chance multiplier for a predator catching prey
        predator_moving: Chance multiplier for a predator being active
        prey_feeding: Chance multiplier for a grazer eating algae
        prey_moving: Chance multiplier for a grazer moving when it found no food
        plant_growth: Multiplier on the number of new algae
    """

    predator_hunting: float = 1.0
    predator_moving: float = 1.0
    prey_feeding: float = 1.0
    prey_moving: float = 1.0
    plant_growth: float = 1.0


NEUTRAL_MODIFIERS = WeatherModifiers()

WEATHER_MODIFIERS: Dict[Weather, WeatherModifiers] = {
    Weather.CLEAR: NEUTRAL_MODIFIERS,
    Weather.RAIN: NEUTRAL_MODIFIERS,
    Weather.FOG: WeatherModifiers(
        predator_hunting=FOG_HUNTING_MODIFIER,
        prey_feeding=FOG_FEEDING_MODIFIER,
        plant_growth=FOG_PLANT_GROWTH_MODIFIER,
    ),
    Weather.COLD: WeatherModifiers(
        predator_moving=COLD_PREDATOR_MOVING_MODIFIER,
        prey_moving=COLD_PREY_MOVING_MODIFIER,
        plant_growth=COLD_PLANT_GROWTH_MODIFIER,
    ),
}


@runs_in_phase(UpdatePhase.ENVIRONMENT)
class WeatherSystem(BaseSystem):
    """Holds the current weather and counts down to the next change.

    Attributes:
        current: Current Weather state
        time_remaining: Steps left before the weather is re-rolled
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        engine: Optional["SimulationEngine"] = None,
        initial: Weather = Weather.CLEAR,
    ) -> None:
        super().__init__("Weather", engine)
        self._rng = require_rng_param(rng, "WeatherSystem.__init__")
        self._current = initial
        self._time_remaining: float = self._random_duration()
        self._changes = 0

    @property
    def current(self) -> Weather:
        return self._current

    @property
    def time_remaining(self) -> float:
        return self._time_remaining

    @property
    def modifiers(self) -> WeatherModifiers:
        return WEATHER_MODIFIERS[self._current]

    def _do_update(self, step: int) -> SystemResult:
        previous = self._current
        rerolled = self.advance(1.0)
        return SystemResult(
            changed=self._current is not previous,
            details={"weather": self._current.value, "rerolled": rerolled},
        )

    def advance(self, elapsed: float = 1.0) -> bool:
        """Count down by ``elapsed`` steps, re-rolling the weather on expiry.

        Returns:
            True if the weather (and its duration) was re-rolled
        """
        self._time_remaining -= elapsed
        if self._time_remaining > 0:
            return False

        previous = self._current
        self._current = self._rng.choice(list(Weather))
        self._time_remaining = self._random_duration()
        self._changes += 1
        if self._current is not previous:
            logger.debug(
                "Weather changed from %s to %s for %d steps",
                previous.value,
                self._current.value,
                self._time_remaining,
            )
        return True

    def set_weather(self, weather: Weather, duration: Optional[float] = None) -> None:
        """Force a weather state, e.g. for scenarios or tests."""
        self._current = weather
        if duration is not None:
            self._time_remaining = duration

    def _random_duration(self) -> int:
        return self._rng.randint(WEATHER_MIN_DURATION, WEATHER_MAX_DURATION)

    def get_debug_info(self) -> Dict[str, Any]:
        return {
            **super().get_debug_info(),
            "weather": self._current.value,
            "time_remaining": self._time_remaining,
            "changes": self._changes,
        }

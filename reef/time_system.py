"""Day/night clock for the simulation.

The clock starts at 06:00 and moves forward a fixed 20 minutes every step.
Prey are only active while ``is_daytime()`` holds; the viewer darkens the
field at night.

Runs in UpdatePhase.TIME_UPDATE. ``advance()`` is the only mutator.
"""

from typing import TYPE_CHECKING, Any, Dict, Optional

from reef.config.simulation import (
    CLOCK_START_HOUR,
    CLOCK_START_MINUTE,
    CLOCK_STEP_MINUTES,
    DAY_TIME,
    HOURS_PER_DAY,
    MINUTES_PER_HOUR,
    NIGHT_TIME,
)
from reef.systems.base import BaseSystem, SystemResult
from reef.update_phases import UpdatePhase, runs_in_phase

if TYPE_CHECKING:
    from reef.simulation.engine import SimulationEngine


@runs_in_phase(UpdatePhase.TIME_UPDATE)
class ClockSystem(BaseSystem):
    """Tracks the hour and minute of the simulated day.

    Attributes:
        hour: Current hour, 0-23
        minute: Current minute, 0-59
        step_minutes: Minutes added by each advance()
    """

    def __init__(
        self,
        engine: Optional["SimulationEngine"] = None,
        hour: int = CLOCK_START_HOUR,
        minute: int = CLOCK_START_MINUTE,
        step_minutes: int = CLOCK_STEP_MINUTES,
    ) -> None:
        super().__init__("Clock", engine)
        self._hour = hour % HOURS_PER_DAY
        self._minute = minute % MINUTES_PER_HOUR
        self.step_minutes = step_minutes
        self._days_elapsed = 0

    @property
    def hour(self) -> int:
        return self._hour

    @property
    def minute(self) -> int:
        return self._minute

    @property
    def days_elapsed(self) -> int:
        return self._days_elapsed

    def _do_update(self, step: int) -> SystemResult:
        was_daytime = self.is_daytime()
        self.advance()
        return SystemResult(
            changed=self.is_daytime() != was_daytime,
            details={"time": self.get_time_string(), "is_daytime": self.is_daytime()},
        )

    def advance(self) -> None:
        """Move the clock forward one step, carrying minutes into hours."""
        total = self._minute + self.step_minutes
        self._minute = total % MINUTES_PER_HOUR
        hour = self._hour + total // MINUTES_PER_HOUR
        if hour >= HOURS_PER_DAY:
            self._days_elapsed += hour // HOURS_PER_DAY
        self._hour = hour % HOURS_PER_DAY

    def is_daytime(self) -> bool:
        """Daytime is strictly between NIGHT_TIME and DAY_TIME."""
        return NIGHT_TIME < self._hour < DAY_TIME

    def is_night(self) -> bool:
        return not self.is_daytime()

    def get_time_string(self) -> str:
        """Clock time as ``HH:MM``."""
        return f"{self._hour:02d}:{self._minute:02d}"

    def get_debug_info(self) -> Dict[str, Any]:
        return {
            **super().get_debug_info(),
            "time": self.get_time_string(),
            "is_daytime": self.is_daytime(),
            "days_elapsed": self._days_elapsed,
        }

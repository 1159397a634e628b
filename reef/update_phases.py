"""Update phase definitions for explicit execution ordering.

One simulation step runs these phases in order. The order also fixes the
order in which the shared RNG is consumed, which is what makes seeded runs
reproducible: clock/weather first, then every animal in list order, then
every plant in list order.
"""

from enum import Enum, auto
from typing import Dict, Optional, Type, TypeVar

__all__ = [
    "UpdatePhase",
    "PHASE_DESCRIPTIONS",
    "runs_in_phase",
    "get_system_phase",
]


class UpdatePhase(Enum):
    """Phases of a simulation step."""

    STEP_START = auto()  # Increment step counter, allocate the next Field
    TIME_UPDATE = auto()  # Advance the clock
    ENVIRONMENT = auto()  # Advance the weather
    ANIMAL_ACT = auto()  # Every animal of the current Field acts
    PLANT_ACT = auto()  # Every plant of the current Field acts
    BUFFER_SWAP = auto()  # The next Field becomes the current Field
    STEP_END = auto()  # Record statistics, notify observers


PHASE_DESCRIPTIONS: Dict[UpdatePhase, str] = {
    UpdatePhase.STEP_START: "Starting step, allocating next field",
    UpdatePhase.TIME_UPDATE: "Advancing the clock",
    UpdatePhase.ENVIRONMENT: "Advancing the weather",
    UpdatePhase.ANIMAL_ACT: "Animals acting",
    UpdatePhase.PLANT_ACT: "Plants acting",
    UpdatePhase.BUFFER_SWAP: "Swapping field buffers",
    UpdatePhase.STEP_END: "Recording statistics and notifying observers",
}

T = TypeVar("T")


def runs_in_phase(phase: UpdatePhase):
    """Class decorator declaring which phase a system runs in.

    Example:
        @runs_in_phase(UpdatePhase.ENVIRONMENT)
        class WeatherSystem(BaseSystem):
            ...
    """

    def decorator(cls: Type[T]) -> Type[T]:
        cls._phase = phase  # type: ignore[attr-defined]
        return cls

    return decorator


def get_system_phase(system: object) -> Optional[UpdatePhase]:
    """Return the phase a system declared, or None."""
    return getattr(system, "_phase", None)

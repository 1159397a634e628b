"""Common base for the environment systems (clock, weather).

A system owns one piece of environmental state and advances it once per
step, before any organism acts. The engine only ever calls ``update(step)``;
subclasses put their logic in ``_do_update``.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional

__all__ = [
    "SystemResult",
    "BaseSystem",
]

if TYPE_CHECKING:
    from reef.simulation.engine import SimulationEngine
    from reef.update_phases import UpdatePhase


@dataclass
class SystemResult:
    """What one ``update`` call did.

    Attributes:
        changed: Whether something observers care about changed (day turned
            to night, the weather switched)
        skipped: True when the system is disabled and did nothing
        details: Free-form values for debugging, e.g. ``{"weather": "fog"}``
    """

    changed: bool = False
    skipped: bool = False
    details: Dict[str, Any] = field(default_factory=dict)


class BaseSystem(ABC):
    """An engine-owned system that can be switched off.

    A disabled system keeps its state frozen, e.g. a disabled WeatherSystem
    holds the current weather indefinitely.
    """

    # Set by @runs_in_phase
    _phase: Optional["UpdatePhase"] = None

    def __init__(self, name: str, engine: Optional["SimulationEngine"] = None) -> None:
        self._name = name
        self._engine = engine
        self.enabled = True
        self._update_count = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def engine(self) -> Optional["SimulationEngine"]:
        return self._engine

    @property
    def update_count(self) -> int:
        """Steps this system has actually run (disabled steps excluded)."""
        return self._update_count

    @property
    def phase(self) -> Optional["UpdatePhase"]:
        return self._phase

    def update(self, step: int = 0) -> SystemResult:
        if not self.enabled:
            return SystemResult(skipped=True)
        self._update_count += 1
        return self._do_update(step)

    @abstractmethod
    def _do_update(self, step: int) -> SystemResult:
        """Advance the system's state by one step."""

    def get_debug_info(self) -> Dict[str, Any]:
        return {
            "name": self._name,
            "enabled": self.enabled,
            "update_count": self._update_count,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._name!r}, enabled={self.enabled})"

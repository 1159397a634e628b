"""Population tracking for the reef.

This module tracks population dynamics per species: live counts after every
step, births, deaths by cause, and extinctions.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Dict, List, Mapping, Optional, Tuple

from reef.entities.base import DeathCause
from reef.species import TRACKED_SPECIES, Species

logger = logging.getLogger(__name__)


class PopulationTracker:
    """Tracks population dynamics: births, deaths and extinctions.

    Attributes:
        history: One ``{species value: live count}`` dict per recorded step
        births: Births per species since start
        deaths: Deaths per species and cause since start
        extinctions: ``(step, species)`` pairs, in the order they happened
        total_births: Total organisms born since start
        total_deaths: Total organisms died since start
    """

    def __init__(self, max_history: Optional[int] = None) -> None:
        """Initialize the population tracker.

        Args:
            max_history: Keep at most this many history entries (None = all)
        """
        self.max_history = max_history
        self.reset()

    def reset(self) -> None:
        """Forget everything recorded so far."""
        self.history: List[Dict[str, int]] = []
        self.births: Dict[Species, int] = defaultdict(int)
        self.deaths: Dict[Species, Dict[DeathCause, int]] = defaultdict(lambda: defaultdict(int))
        self.extinctions: List[Tuple[int, Species]] = []
        self.total_births: int = 0
        self.total_deaths: int = 0
        self._total_age_at_death: int = 0
        self._present: Dict[Species, bool] = {}

    def record_birth(self, species: Species, step: int = 0) -> None:
        self.total_births += 1
        self.births[species] += 1

    def record_death(
        self,
        species: Species,
        cause: DeathCause,
        age: int = 0,
        step: int = 0,
    ) -> None:
        """Record a death.

        Args:
            species: Species of the deceased organism
            cause: Cause of death
            age: Age of the organism at death
            step: Step in which it died
        """
        self.total_deaths += 1
        self._total_age_at_death += age
        self.deaths[species][cause] += 1

    def record_step(self, step: int, counts: Mapping[Species, int]) -> None:
        """Append the live counts for a step and check for extinctions."""
        self.history.append({species.value: counts.get(species, 0) for species in TRACKED_SPECIES})
        if self.max_history is not None and len(self.history) > self.max_history:
            self.history.pop(0)
        self.check_for_extinction(step, counts)

    def check_for_extinction(self, step: int, counts: Mapping[Species, int]) -> None:
        """Log each species that was present last time and is gone now."""
        for species in TRACKED_SPECIES:
            present = counts.get(species, 0) > 0
            if self._present.get(species) and not present:
                self.extinctions.append((step, species))
                logger.info(f"{species.label} went extinct at step {step}")
            self._present[species] = present

    def latest_counts(self) -> Dict[str, int]:
        return dict(self.history[-1]) if self.history else {}

    def deaths_by_cause(self) -> Dict[str, int]:
        """Deaths summed over species, keyed by cause value."""
        totals = {cause.value: 0 for cause in DeathCause}
        for causes in self.deaths.values():
            for cause, count in causes.items():
                totals[cause.value] += count
        return totals

    def get_stats(self) -> Dict[str, Any]:
        """All tracked statistics as plain, JSON-friendly values."""
        avg_age = self._total_age_at_death / self.total_deaths if self.total_deaths else 0.0
        return {
            "population": self.latest_counts(),
            "total_births": self.total_births,
            "total_deaths": self.total_deaths,
            "avg_age_at_death": avg_age,
            "births": {species.value: self.births.get(species, 0) for species in TRACKED_SPECIES},
            "deaths": {
                species.value: {
                    cause.value: self.deaths[species].get(cause, 0) for cause in DeathCause
                }
                for species in TRACKED_SPECIES
                if species in self.deaths
            },
            "deaths_by_cause": self.deaths_by_cause(),
            "extinctions": [
                {"step": step, "species": species.value} for step, species in self.extinctions
            ],
            "steps_recorded": len(self.history),
        }

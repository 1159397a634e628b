"""Base organism class shared by animals and plants."""

import random
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Optional

from reef.coordinate import Coordinate
from reef.species import Species, SpeciesParams, get_params

if TYPE_CHECKING:
    from reef.field import Field
    from reef.simulation.step_context import StepContext


class DeathCause(Enum):
    """Why an organism died."""

    OLD_AGE = "old_age"
    STARVATION = "starvation"
    DISEASE = "disease"
    EATEN = "eaten"
    OVERCROWDING = "overcrowding"


class Organism(ABC):
    """Anything that occupies a cell: an animal or a plant.

    Organisms compare and hash by identity; a Field uses them as keys.

    Attributes:
        species: Species tag
        params: Constant life-history parameters of the species
        age: Age in steps
        death_cause: Why the organism died, once it has
    """

    is_plant: bool = False

    def __init__(
        self,
        species: Species,
        coordinate: Optional[Coordinate],
        params: Optional[SpeciesParams] = None,
    ) -> None:
        self.species = species
        self.params = params if params is not None else get_params(species)
        self.age = 0
        self.death_cause: Optional[DeathCause] = None
        self._alive = True
        self._coordinate = Coordinate(*coordinate) if coordinate is not None else None

    @property
    def alive(self) -> bool:
        return self._alive

    @property
    def coordinate(self) -> Optional[Coordinate]:
        """Current cell, or None once dead."""
        return self._coordinate

    def set_coordinate(self, coordinate: Coordinate) -> None:
        self._coordinate = Coordinate(*coordinate)

    def set_dead(self, cause: DeathCause) -> None:
        """Mark the organism dead and release its cell."""
        self._alive = False
        self._coordinate = None
        self.death_cause = cause

    @abstractmethod
    def act(self, current: "Field", next_field: "Field", context: "StepContext") -> None:
        """Perform one step.

        Args:
            current: The field being read this step
            next_field: The field being built for the next step
            context: Shared RNG, clock, weather and bookkeeping for this step
        """

    def _increment_age(self, context: "StepContext") -> bool:
        """Age by one step; returns False if this killed the organism."""
        self.age += 1
        if self.age > self.params.max_age:
            context.kill(self, DeathCause.OLD_AGE)
            return False
        return True

    def can_breed(self) -> bool:
        return self.age >= self.params.breeding_age

    def _litter_size(self, rng: random.Random) -> int:
        """Number of offspring this step (may be zero)."""
        if self.can_breed() and rng.random() < self.params.breeding_probability:
            return rng.randint(1, self.params.max_litter_size)
        return 0

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(species={self.species.value}, age={self.age}, "
            f"alive={self._alive}, coordinate={self._coordinate})"
        )

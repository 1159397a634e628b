"""Algae: stationary plants that age and spread into neighbouring cells."""

import random
from typing import TYPE_CHECKING, Optional

from reef.coordinate import Coordinate
from reef.entities.base import DeathCause, Organism
from reef.species import Species, SpeciesParams

if TYPE_CHECKING:
    from reef.field import Field
    from reef.simulation.step_context import StepContext


class Plant(Organism):
    """A plant. It never moves, eats, or gets sick."""

    is_plant = True

    def __init__(
        self,
        species: Species,
        coordinate: Optional[Coordinate],
        rng: random.Random,
        *,
        random_age: bool = False,
        params: Optional[SpeciesParams] = None,
    ) -> None:
        super().__init__(species, coordinate, params)
        if not self.params.is_plant:
            raise ValueError(f"{species.value} is an animal species, not a plant")
        if random_age:
            self.age = rng.randrange(self.params.max_age)

    def act(self, current: "Field", next_field: "Field", context: "StepContext") -> None:
        if not self.alive:
            return
        if not self._increment_age(context):
            return

        # A grazer may have moved onto this cell already
        if not next_field.is_free(self.coordinate):
            context.kill(self, DeathCause.OVERCROWDING)
            return
        next_field.place(self, self.coordinate)

        if next_field.free_adjacent_coordinates(self.coordinate):
            self.grow(next_field, context)

    def grow(self, next_field: "Field", context: "StepContext") -> int:
        """Spread new plants into free neighbouring cells of the next field.

        The litter is scaled by the weather's plant growth multiplier and
        truncated.

        Returns:
            Number of new plants placed
        """
        rng = context.rng
        litter = self._litter_size(rng)
        if litter == 0:
            return 0
        births = int(litter * context.modifiers.plant_growth)

        placed = 0
        for location in next_field.free_adjacent_coordinates(self.coordinate)[:births]:
            young = Plant(self.species, location, rng, params=self.params)
            next_field.place(young, location)
            context.record_birth(young)
            placed += 1
        return placed

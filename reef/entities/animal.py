"""Animal behavior shared by every animal species.

All six animal species run the same algorithm; they differ only in their
SpeciesParams and diet. One ``act`` call is one step of this state machine:

1. Age, dying of old age past ``max_age``.
2. Decide whether the animal is awake. Diurnal prey sleep at night.
   Continuous predators get hungrier every step and then roll the weather's
   movement multiplier; a failed roll is a rest.
3. Awake: get hungrier (prey), catch or succumb to the disease, breed with an
   adjacent mate, then eat or wander. With nowhere to go the animal dies of
   overcrowding.
4. Resting: sleeping prey may still succumb to the disease; the animal stays
   where it is.

Sensing (food, mates) reads the current Field; every placement goes into the
next Field, always onto a free cell.
"""

import random
from typing import TYPE_CHECKING, Optional

from reef.coordinate import Coordinate
from reef.entities.base import DeathCause, Organism
from reef.species import Activity, Species, SpeciesParams

if TYPE_CHECKING:
    from reef.field import Field
    from reef.simulation.step_context import StepContext


class Animal(Organism):
    """A predator or prey animal.

    Attributes:
        is_male: Sex, fixed at creation
        infected: Whether the animal carries the disease
        food_level: Steps left before starvation
    """

    def __init__(
        self,
        species: Species,
        coordinate: Optional[Coordinate],
        rng: random.Random,
        *,
        random_age: bool = False,
        params: Optional[SpeciesParams] = None,
        is_male: Optional[bool] = None,
        infected: bool = False,
    ) -> None:
        """Create an animal.

        Args:
            species: Animal species
            coordinate: Starting cell
            rng: The engine's shared RNG
            random_age: Start at a random age (initial population) instead of 0
            params: Override the species parameters (offspring inherit them)
            is_male: Fix the sex instead of drawing it
            infected: Start infected
        """
        super().__init__(species, coordinate, params)
        if self.params.is_plant:
            raise ValueError(f"{species.value} is a plant species, not an animal")

        if random_age:
            self.age = rng.randrange(self.params.max_age)
        self.food_level: int = rng.randrange(self.params.food_value) if self.params.food_value > 0 else 0
        self.is_male: bool = rng.random() < 0.5 if is_male is None else is_male
        self.infected: bool = infected

    # =========================================================================
    # Step
    # =========================================================================

    def act(self, current: "Field", next_field: "Field", context: "StepContext") -> None:
        if not self.alive:
            return
        if not self._increment_age(context):
            return

        modifiers = context.modifiers
        if self.params.activity is Activity.DIURNAL:
            if not context.is_daytime:
                self._rest(next_field, context, self.params.night_disease_mortality)
                return
            if not self._increment_hunger(context):
                return
            self._active_turn(
                current,
                next_field,
                context,
                feeding_chance=modifiers.prey_feeding,
                moving_chance=modifiers.prey_moving,
            )
        else:
            if not self._increment_hunger(context):
                return
            if context.rng.random() >= modifiers.predator_moving:
                self._rest(next_field, context, None)
                return
            self._active_turn(
                current,
                next_field,
                context,
                feeding_chance=modifiers.predator_hunting,
                moving_chance=None,
            )

    def _active_turn(
        self,
        current: "Field",
        next_field: "Field",
        context: "StepContext",
        feeding_chance: float,
        moving_chance: Optional[float],
    ) -> None:
        if not self._check_disease(context, self.params.day_disease_mortality):
            return

        if next_field.free_adjacent_coordinates(self.coordinate):
            self.give_birth(current, next_field, context)

        destination = self.find_food(current, next_field, context, feeding_chance)
        if destination is None:
            if moving_chance is not None and context.rng.random() >= moving_chance:
                self._settle(next_field, context)
                return
            free = next_field.free_adjacent_coordinates(self.coordinate)
            if not free:
                context.kill(self, DeathCause.OVERCROWDING)
                return
            destination = free[0]

        self._move_to(next_field, destination)

    def _rest(
        self, next_field: "Field", context: "StepContext", mortality: Optional[float]
    ) -> None:
        if mortality is not None and self.infected and context.rng.random() < mortality:
            context.kill(self, DeathCause.DISEASE)
            return
        self._settle(next_field, context)

    def _settle(self, next_field: "Field", context: "StepContext") -> None:
        """Stay put, or step aside if someone already took this cell."""
        if next_field.is_free(self.coordinate):
            next_field.place(self, self.coordinate)
            return
        free = next_field.free_adjacent_coordinates(self.coordinate)
        if not free:
            context.kill(self, DeathCause.OVERCROWDING)
            return
        self._move_to(next_field, free[0])

    def _move_to(self, next_field: "Field", destination: Coordinate) -> None:
        self.set_coordinate(destination)
        next_field.place(self, destination)

    # =========================================================================
    # Hunger and disease
    # =========================================================================

    def _increment_hunger(self, context: "StepContext") -> bool:
        """Get hungrier; returns False if the animal starved."""
        self.food_level -= 1
        if self.food_level <= 0:
            context.kill(self, DeathCause.STARVATION)
            return False
        return True

    def _check_disease(self, context: "StepContext", mortality: float) -> bool:
        """Maybe catch the disease, then maybe die of it."""
        rng = context.rng
        if not self.infected and rng.random() < self.params.infection_probability:
            self.infected = True
        if self.infected and rng.random() < mortality:
            context.kill(self, DeathCause.DISEASE)
            return False
        return True

    def set_infected(self) -> None:
        self.infected = True

    # =========================================================================
    # Feeding
    # =========================================================================

    def find_food(
        self,
        current: "Field",
        next_field: "Field",
        context: "StepContext",
        chance: float,
    ) -> Optional[Coordinate]:
        """Try to eat the first live food item next to the animal.

        Each candidate is caught with probability ``chance``; a miss moves on
        to the next candidate. Only one item is eaten.

        Returns:
            The eaten item's cell if the animal can move there, else None
        """
        diet = self.params.diet
        if diet is None:
            return None

        for location in current.adjacent_coordinates(self.coordinate):
            food = current.occupant_at(location)
            if food is None or not food.alive or not diet.accepts(food.species):
                continue
            if context.rng.random() < chance:
                context.kill(food, DeathCause.EATEN)
                self.food_level = self.params.food_value
                if next_field.is_free(location):
                    return location
                return None
        return None

    # =========================================================================
    # Breeding
    # =========================================================================

    def can_breed_with(self, other: "Animal") -> bool:
        return (
            other is not self
            and other.species is self.species
            and other.is_male != self.is_male
        )

    def find_breeding_mate(self, field: "Field") -> Optional["Animal"]:
        """The first live adjacent animal of the same species and opposite sex."""
        for location in field.adjacent_coordinates(self.coordinate):
            other = field.animal_at(location)
            if other is not None and other.alive and self.can_breed_with(other):
                return other
        return None

    def give_birth(self, current: "Field", next_field: "Field", context: "StepContext") -> int:
        """Breed with an adjacent mate, placing offspring on free cells.

        Returns:
            Number of offspring placed
        """
        mate = self.find_breeding_mate(current)
        if mate is None:
            return 0

        rng = context.rng
        self._exchange_disease(mate, rng)

        births = self._litter_size(rng)
        if births == 0:
            return 0

        parent_infected = self.infected or mate.infected
        placed = 0
        for location in next_field.free_adjacent_coordinates(self.coordinate)[:births]:
            young = Animal(self.species, location, rng, params=self.params)
            if parent_infected and rng.random() < self.params.inherit_probability:
                young.set_infected()
            next_field.place(young, location)
            context.record_birth(young)
            placed += 1
        return placed

    def _exchange_disease(self, mate: "Animal", rng: random.Random) -> None:
        """Pass the disease one way between mates, never both."""
        chance = self.params.transmission_probability
        if self.infected and not mate.infected:
            if rng.random() < chance:
                mate.set_infected()
        elif mate.infected and not self.infected:
            if rng.random() < chance:
                self.set_infected()

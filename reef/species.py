"""Species catalogue for the reef.

Every species is described by one immutable ``SpeciesParams`` record instead
of a class of its own. Behavior code reads the record; nothing here changes at
runtime. The diet and activity fields separate the roles:

- a diet of plants makes a prey species (diurnal grazer)
- a diet of animals makes a predator (active around the clock)
- plants have no diet at all
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple

from reef.config import species as S

__all__ = [
    "Species",
    "OrganismKind",
    "Activity",
    "Diet",
    "SpeciesParams",
    "SPECIES_PARAMS",
    "TRACKED_SPECIES",
    "get_params",
]


class Species(Enum):
    """Species tag shared by every organism of a kind."""

    SWORDFISH = "swordfish"
    TURTLE = "turtle"
    PARROTFISH = "parrotfish"
    CLOWNFISH = "clownfish"
    WHITE_SHARK = "white_shark"
    KILLER_WHALE = "killer_whale"
    ALGAE = "algae"

    @property
    def label(self) -> str:
        """Human-readable name, e.g. ``White shark``."""
        return self.value.replace("_", " ").capitalize()


class OrganismKind(Enum):
    """Which Field collection an organism lives in."""

    ANIMAL = "animal"
    PLANT = "plant"


class Activity(Enum):
    """When an animal is awake."""

    DIURNAL = "diurnal"  # Active by day, sleeps at night
    CONTINUOUS = "continuous"  # Active every step, rests on a failed movement roll


@dataclass(frozen=True)
class Diet:
    """What an animal may eat.

    Attributes:
        foods: Species accepted as food
        kind: OrganismKind of every accepted food species
    """

    foods: FrozenSet[Species]
    kind: OrganismKind

    @classmethod
    def herbivore(cls, *plants: Species) -> "Diet":
        return cls(frozenset(plants), OrganismKind.PLANT)

    @classmethod
    def carnivore(cls, *prey: Species) -> "Diet":
        return cls(frozenset(prey), OrganismKind.ANIMAL)

    @property
    def eats_plants(self) -> bool:
        return self.kind is OrganismKind.PLANT

    def accepts(self, species: Species) -> bool:
        return species in self.foods


@dataclass(frozen=True)
class SpeciesParams:
    """Constant life-history parameters of one species.

    Attributes:
        species: Species these parameters describe
        kind: Animal or plant
        breeding_age: Age from which the organism may breed (or grow, for plants)
        max_age: Age above which the organism dies
        breeding_probability: Chance per step of producing a litter once of age
        max_litter_size: Upper bound of the uniform litter draw
        food_value: Food level granted by a meal (animals only)
        infection_probability: Chance per active step of catching the disease
        transmission_probability: Chance of passing the disease to a mate
        inherit_probability: Chance a newborn of an infected parent is infected
        day_disease_mortality: Chance per active step an infected animal dies
        night_disease_mortality: Chance per resting step an infected animal dies
        activity: When the animal is awake
        diet: What the animal eats (None for plants)
    """

    species: Species
    kind: OrganismKind
    breeding_age: int
    max_age: int
    breeding_probability: float
    max_litter_size: int
    food_value: int = 0
    infection_probability: float = 0.0
    transmission_probability: float = 0.0
    inherit_probability: float = 0.0
    day_disease_mortality: float = 0.0
    night_disease_mortality: float = 0.0
    activity: Activity = Activity.CONTINUOUS
    diet: Optional[Diet] = field(default=None)

    @property
    def is_plant(self) -> bool:
        return self.kind is OrganismKind.PLANT


def _prey(
    species: Species,
    *,
    breeding_age: int,
    max_age: int,
    breeding_probability: float,
    infection_probability: float,
    transmission_probability: float,
    max_litter_size: int,
    food_value: int,
) -> SpeciesParams:
    return SpeciesParams(
        species=species,
        kind=OrganismKind.ANIMAL,
        breeding_age=breeding_age,
        max_age=max_age,
        breeding_probability=breeding_probability,
        max_litter_size=max_litter_size,
        food_value=food_value,
        infection_probability=infection_probability,
        transmission_probability=transmission_probability,
        inherit_probability=S.INHERIT_PROBABILITY,
        day_disease_mortality=S.PREY_DAY_DISEASE_MORTALITY,
        night_disease_mortality=S.PREY_NIGHT_DISEASE_MORTALITY,
        activity=Activity.DIURNAL,
        diet=Diet.herbivore(Species.ALGAE),
    )


def _predator(
    species: Species,
    diet: Diet,
    *,
    breeding_age: int,
    max_age: int,
    breeding_probability: float,
    infection_probability: float,
    transmission_probability: float,
    max_litter_size: int,
    food_value: int,
    disease_mortality: float,
) -> SpeciesParams:
    return SpeciesParams(
        species=species,
        kind=OrganismKind.ANIMAL,
        breeding_age=breeding_age,
        max_age=max_age,
        breeding_probability=breeding_probability,
        max_litter_size=max_litter_size,
        food_value=food_value,
        infection_probability=infection_probability,
        transmission_probability=transmission_probability,
        inherit_probability=S.INHERIT_PROBABILITY,
        day_disease_mortality=disease_mortality,
        night_disease_mortality=disease_mortality,
        activity=Activity.CONTINUOUS,
        diet=diet,
    )


SPECIES_PARAMS: Dict[Species, SpeciesParams] = {
    Species.TURTLE: _prey(
        Species.TURTLE,
        breeding_age=S.TURTLE_BREEDING_AGE,
        max_age=S.TURTLE_MAX_AGE,
        breeding_probability=S.TURTLE_BREEDING_PROBABILITY,
        infection_probability=S.TURTLE_INFECTION_PROBABILITY,
        transmission_probability=S.TURTLE_TRANSMISSION_PROBABILITY,
        max_litter_size=S.TURTLE_MAX_LITTER_SIZE,
        food_value=S.TURTLE_FOOD_VALUE,
    ),
    Species.PARROTFISH: _prey(
        Species.PARROTFISH,
        breeding_age=S.PARROTFISH_BREEDING_AGE,
        max_age=S.PARROTFISH_MAX_AGE,
        breeding_probability=S.PARROTFISH_BREEDING_PROBABILITY,
        infection_probability=S.PARROTFISH_INFECTION_PROBABILITY,
        transmission_probability=S.PARROTFISH_TRANSMISSION_PROBABILITY,
        max_litter_size=S.PARROTFISH_MAX_LITTER_SIZE,
        food_value=S.PARROTFISH_FOOD_VALUE,
    ),
    Species.CLOWNFISH: _prey(
        Species.CLOWNFISH,
        breeding_age=S.CLOWNFISH_BREEDING_AGE,
        max_age=S.CLOWNFISH_MAX_AGE,
        breeding_probability=S.CLOWNFISH_BREEDING_PROBABILITY,
        infection_probability=S.CLOWNFISH_INFECTION_PROBABILITY,
        transmission_probability=S.CLOWNFISH_TRANSMISSION_PROBABILITY,
        max_litter_size=S.CLOWNFISH_MAX_LITTER_SIZE,
        food_value=S.CLOWNFISH_FOOD_VALUE,
    ),
    Species.SWORDFISH: _predator(
        Species.SWORDFISH,
        Diet.carnivore(Species.CLOWNFISH, Species.PARROTFISH),
        breeding_age=S.SWORDFISH_BREEDING_AGE,
        max_age=S.SWORDFISH_MAX_AGE,
        breeding_probability=S.SWORDFISH_BREEDING_PROBABILITY,
        infection_probability=S.SWORDFISH_INFECTION_PROBABILITY,
        transmission_probability=S.SWORDFISH_TRANSMISSION_PROBABILITY,
        max_litter_size=S.SWORDFISH_MAX_LITTER_SIZE,
        food_value=S.SWORDFISH_FOOD_VALUE,
        disease_mortality=S.SWORDFISH_DISEASE_MORTALITY,
    ),
    Species.WHITE_SHARK: _predator(
        Species.WHITE_SHARK,
        Diet.carnivore(
            Species.TURTLE, Species.PARROTFISH, Species.CLOWNFISH, Species.SWORDFISH
        ),
        breeding_age=S.WHITE_SHARK_BREEDING_AGE,
        max_age=S.WHITE_SHARK_MAX_AGE,
        breeding_probability=S.WHITE_SHARK_BREEDING_PROBABILITY,
        infection_probability=S.WHITE_SHARK_INFECTION_PROBABILITY,
        transmission_probability=S.WHITE_SHARK_TRANSMISSION_PROBABILITY,
        max_litter_size=S.WHITE_SHARK_MAX_LITTER_SIZE,
        food_value=S.WHITE_SHARK_FOOD_VALUE,
        disease_mortality=S.WHITE_SHARK_DISEASE_MORTALITY,
    ),
    Species.KILLER_WHALE: _predator(
        Species.KILLER_WHALE,
        Diet.carnivore(Species.PARROTFISH, Species.TURTLE, Species.CLOWNFISH),
        breeding_age=S.KILLER_WHALE_BREEDING_AGE,
        max_age=S.KILLER_WHALE_MAX_AGE,
        breeding_probability=S.KILLER_WHALE_BREEDING_PROBABILITY,
        infection_probability=S.KILLER_WHALE_INFECTION_PROBABILITY,
        transmission_probability=S.KILLER_WHALE_TRANSMISSION_PROBABILITY,
        max_litter_size=S.KILLER_WHALE_MAX_LITTER_SIZE,
        food_value=S.KILLER_WHALE_FOOD_VALUE,
        disease_mortality=S.KILLER_WHALE_DISEASE_MORTALITY,
    ),
    Species.ALGAE: SpeciesParams(
        species=Species.ALGAE,
        kind=OrganismKind.PLANT,
        breeding_age=S.ALGAE_GROWTH_AGE,
        max_age=S.ALGAE_MAX_AGE,
        breeding_probability=S.ALGAE_GROWTH_PROBABILITY,
        max_litter_size=S.ALGAE_MAX_LITTER_SIZE,
    ),
}

# Species whose extinction ends a run
TRACKED_SPECIES: Tuple[Species, ...] = tuple(Species)


def get_params(species: Species) -> SpeciesParams:
    """Look up the constant parameters of a species."""
    return SPECIES_PARAMS[species]

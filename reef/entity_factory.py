"""Entity factory for creating organisms and the initial population.

This module is the single source of truth for turning a Species tag into an
organism, used both when seeding the field and in tests.
"""

import logging
import random
from typing import Mapping, Optional

from reef.coordinate import Coordinate
from reef.entities import Animal, Organism, Plant
from reef.field import Field
from reef.species import Species, get_params
from reef.util.rng import require_rng_param

logger = logging.getLogger(__name__)


def create_organism(
    species: Species,
    coordinate: Optional[Coordinate],
    rng: random.Random,
    *,
    random_age: bool = False,
) -> Organism:
    """Create an animal or plant of the given species."""
    if get_params(species).is_plant:
        return Plant(species, coordinate, rng, random_age=random_age)
    return Animal(species, coordinate, rng, random_age=random_age)


def create_initial_population(
    field: Field,
    spawn_probabilities: Mapping[Species, float],
    rng: Optional[random.Random] = None,
) -> int:
    """Populate an empty field.

    Every cell is visited in row-major order. Species are tried in the
    mapping's order, each with its own roll; the first success claims the
    cell and later species are not rolled. Initial organisms start at a
    random age.

    Args:
        field: Field to fill (cleared first)
        spawn_probabilities: Per-cell probability per species, in roll order
        rng: The engine's shared RNG

    Returns:
        Number of organisms created
    """
    rng = require_rng_param(rng, "create_initial_population")
    field.clear()

    created = 0
    for row in range(field.depth):
        for col in range(field.width):
            for species, probability in spawn_probabilities.items():
                if rng.random() < probability:
                    coordinate = Coordinate(row, col)
                    field.place(create_organism(species, coordinate, rng, random_age=True), coordinate)
                    created += 1
                    break

    logger.debug(f"Created initial population of {created} organisms")
    return created

import random

from reef.coordinate import Coordinate
from reef.entities import Animal, Plant
from reef.entity_factory import create_initial_population, create_organism
from reef.field import Field
from reef.species import Species


def test_create_organism_picks_the_right_class(seeded_rng):
    assert isinstance(create_organism(Species.ALGAE, Coordinate(0, 0), seeded_rng), Plant)
    assert isinstance(create_organism(Species.KILLER_WHALE, Coordinate(0, 0), seeded_rng), Animal)


def test_random_age_is_below_max_age(seeded_rng):
    for _ in range(50):
        turtle = create_organism(Species.TURTLE, Coordinate(0, 0), seeded_rng, random_age=True)
        assert 0 <= turtle.age < turtle.params.max_age
        assert 0 <= turtle.food_level < turtle.params.food_value


def test_probability_one_fills_every_cell_with_first_species(seeded_rng):
    field = Field(4, 5, seeded_rng)
    created = create_initial_population(
        field, {Species.TURTLE: 1.0, Species.ALGAE: 1.0}, seeded_rng
    )

    assert created == 20
    assert len(field.animals) == 20
    assert field.plants == []


def test_probability_zero_leaves_field_empty(seeded_rng):
    field = Field(4, 5, seeded_rng)
    assert create_initial_population(field, {species: 0.0 for species in Species}, seeded_rng) == 0
    assert list(field.occupied()) == []


def test_initial_population_is_reproducible():
    def populate(seed):
        rng = random.Random(seed)
        field = Field(10, 10, rng)
        create_initial_population(field, {Species.TURTLE: 0.3, Species.ALGAE: 0.5}, rng)
        return [(coordinate, organism.species, organism.age) for coordinate, organism in field.occupied()]

    assert populate(9) == populate(9)
    assert populate(9) != populate(10)

"""Behavior tests for the shared animal algorithm.

Most tests force the RNG with ``fixed_rng`` so every roll has a known
outcome, and tweak species parameters with ``dataclasses.replace`` to take
the disease or breeding out of the picture.
"""

import random
from dataclasses import replace

import pytest

from reef.coordinate import Coordinate
from reef.entities import Animal, DeathCause, Plant
from reef.field import Field
from reef.species import Species, get_params
from reef.weather_system import Weather


def healthy_params(species, **overrides):
    """Species params without spontaneous infection or breeding."""
    defaults = {"infection_probability": 0.0, "breeding_probability": 0.0}
    defaults.update(overrides)
    return replace(get_params(species), **defaults)


def put(field, organism):
    field.place(organism, organism.coordinate)
    return organism


def test_dead_animal_act_is_noop(seeded_rng, make_context):
    current = Field(3, 3, seeded_rng)
    turtle = put(current, Animal(Species.TURTLE, Coordinate(1, 1), seeded_rng))
    turtle.set_dead(DeathCause.EATEN)
    age = turtle.age

    next_field = current.spawn_empty()
    turtle.act(current, next_field, make_context(seeded_rng))

    assert turtle.age == age
    assert next_field.animals == []


def test_animal_dies_of_old_age(seeded_rng, make_context):
    current = Field(3, 3, seeded_rng)
    turtle = put(current, Animal(Species.TURTLE, Coordinate(1, 1), seeded_rng))
    turtle.age = turtle.params.max_age

    next_field = current.spawn_empty()
    context = make_context(seeded_rng)
    turtle.act(current, next_field, context)

    assert not turtle.alive
    assert turtle.death_cause is DeathCause.OLD_AGE
    assert turtle.coordinate is None
    assert next_field.animals == []
    assert context.tracker.deaths[Species.TURTLE][DeathCause.OLD_AGE] == 1


def test_prey_starves_when_food_runs_out(seeded_rng, make_context):
    current = Field(3, 3, seeded_rng)
    turtle = put(current, Animal(Species.TURTLE, Coordinate(1, 1), seeded_rng))
    turtle.food_level = 1

    next_field = current.spawn_empty()
    turtle.act(current, next_field, make_context(seeded_rng, hour=12))

    assert not turtle.alive
    assert turtle.death_cause is DeathCause.STARVATION
    assert next_field.animals == []


def test_predator_starves_at_night_too(seeded_rng, make_context):
    current = Field(3, 3, seeded_rng)
    shark = put(current, Animal(Species.WHITE_SHARK, Coordinate(1, 1), seeded_rng))
    shark.food_level = 1

    shark.act(current, current.spawn_empty(), make_context(seeded_rng, hour=23))

    assert shark.death_cause is DeathCause.STARVATION


def test_prey_rests_in_place_at_night(seeded_rng, make_context):
    current = Field(3, 3, seeded_rng)
    turtle = put(current, Animal(Species.TURTLE, Coordinate(1, 1), seeded_rng))
    turtle.food_level = 5

    next_field = current.spawn_empty()
    turtle.act(current, next_field, make_context(seeded_rng, hour=22))

    assert turtle.alive
    assert turtle.age == 1
    assert turtle.food_level == 5
    assert next_field.animal_at(Coordinate(1, 1)) is turtle


def test_resting_prey_steps_aside_when_its_cell_is_taken(seeded_rng, make_context):
    current = Field(3, 3, seeded_rng)
    turtle = put(current, Animal(Species.TURTLE, Coordinate(1, 1), seeded_rng))
    turtle.food_level = 5
    next_field = current.spawn_empty()
    squatter = put(next_field, Animal(Species.CLOWNFISH, Coordinate(1, 1), seeded_rng))

    turtle.act(current, next_field, make_context(seeded_rng, hour=22))

    assert turtle.alive
    assert turtle.coordinate != Coordinate(1, 1)
    assert next_field.animal_at(turtle.coordinate) is turtle
    assert next_field.animal_at(Coordinate(1, 1)) is squatter


def test_infected_prey_may_die_at_night(fixed_rng, make_context):
    rng = fixed_rng(0.0)
    current = Field(3, 3, rng)
    params = healthy_params(Species.PARROTFISH, night_disease_mortality=0.5)
    fish = put(current, Animal(Species.PARROTFISH, Coordinate(1, 1), rng, params=params, infected=True))
    fish.food_level = 5

    fish.act(current, current.spawn_empty(), make_context(rng, hour=2))

    assert fish.death_cause is DeathCause.DISEASE


def test_prey_with_nowhere_to_go_dies_of_overcrowding(fixed_rng, make_context):
    rng = fixed_rng(0.5)
    current = Field(1, 1, rng)
    turtle = put(current, Animal(Species.TURTLE, Coordinate(0, 0), rng, params=healthy_params(Species.TURTLE)))
    turtle.food_level = 5

    next_field = current.spawn_empty()
    turtle.act(current, next_field, make_context(rng))

    assert turtle.death_cause is DeathCause.OVERCROWDING
    assert next_field.animals == []


def test_awake_animal_moves_to_a_free_neighbour(fixed_rng, make_context):
    rng = fixed_rng(0.5)
    current = Field(3, 3, rng)
    turtle = put(current, Animal(Species.TURTLE, Coordinate(1, 1), rng, params=healthy_params(Species.TURTLE)))
    turtle.food_level = 5

    next_field = current.spawn_empty()
    turtle.act(current, next_field, make_context(rng))

    assert turtle.alive
    assert turtle.food_level == 4
    assert turtle.coordinate in list(Coordinate(1, 1).neighbours())
    assert next_field.animals == [turtle]


def test_infected_animal_dies_with_certain_mortality(seeded_rng, make_context):
    current = Field(3, 3, seeded_rng)
    params = healthy_params(Species.SWORDFISH, day_disease_mortality=1.0, night_disease_mortality=1.0)
    swordfish = put(
        current, Animal(Species.SWORDFISH, Coordinate(1, 1), seeded_rng, params=params, infected=True)
    )
    swordfish.food_level = 10

    next_field = current.spawn_empty()
    swordfish.act(current, next_field, make_context(seeded_rng))

    assert swordfish.death_cause is DeathCause.DISEASE
    assert next_field.animals == []


def test_healthy_animal_catches_disease(fixed_rng, make_context):
    rng = fixed_rng(0.5)
    current = Field(3, 3, rng)
    params = healthy_params(Species.TURTLE, infection_probability=1.0, day_disease_mortality=0.0)
    turtle = put(current, Animal(Species.TURTLE, Coordinate(1, 1), rng, params=params))
    turtle.food_level = 5

    turtle.act(current, current.spawn_empty(), make_context(rng))

    assert turtle.infected
    assert turtle.alive


@pytest.mark.parametrize("species", [Species.TURTLE, Species.WHITE_SHARK, Species.KILLER_WHALE])
def test_disease_passes_to_mate(fixed_rng, make_context, species):
    rng = fixed_rng(0.5)
    current = Field(3, 3, rng)
    params = healthy_params(species, transmission_probability=1.0, day_disease_mortality=0.0)
    carrier = put(
        current,
        Animal(species, Coordinate(1, 1), rng, params=params, is_male=True, infected=True),
    )
    carrier.food_level = 5
    mate = put(current, Animal(species, Coordinate(0, 1), rng, params=params, is_male=False))

    carrier.act(current, current.spawn_empty(), make_context(rng))

    assert carrier.alive
    assert mate.infected


def test_disease_is_not_passed_to_same_sex_neighbour(fixed_rng, make_context):
    rng = fixed_rng(0.5)
    current = Field(3, 3, rng)
    params = healthy_params(Species.TURTLE, transmission_probability=1.0, day_disease_mortality=0.0)
    carrier = put(
        current,
        Animal(Species.TURTLE, Coordinate(1, 1), rng, params=params, is_male=True, infected=True),
    )
    carrier.food_level = 5
    neighbour = put(current, Animal(Species.TURTLE, Coordinate(0, 1), rng, params=params, is_male=True))

    carrier.act(current, current.spawn_empty(), make_context(rng))

    assert not neighbour.infected


def test_breeding_places_offspring_on_distinct_free_cells(fixed_rng, make_context):
    rng = fixed_rng(0.0, randint_value=2)
    current = Field(3, 3, rng)
    params = healthy_params(Species.TURTLE, breeding_probability=1.0)
    parent = put(current, Animal(Species.TURTLE, Coordinate(1, 1), rng, params=params, is_male=True))
    parent.age = 10
    parent.food_level = 5
    put(current, Animal(Species.TURTLE, Coordinate(0, 0), rng, params=params, is_male=False))

    next_field = current.spawn_empty()
    context = make_context(rng)
    parent.act(current, next_field, context)

    young = [animal for animal in next_field.animals if animal is not parent]
    assert len(young) == 2
    assert all(animal.age == 0 and animal.species is Species.TURTLE for animal in young)
    cells = [animal.coordinate for animal in next_field.animals]
    assert len(set(cells)) == len(cells) == 3
    assert context.tracker.births[Species.TURTLE] == 2


def test_too_young_animal_does_not_breed(fixed_rng, make_context):
    rng = fixed_rng(0.0, randint_value=2)
    current = Field(3, 3, rng)
    params = healthy_params(Species.TURTLE, breeding_probability=1.0)
    parent = put(current, Animal(Species.TURTLE, Coordinate(1, 1), rng, params=params, is_male=True))
    parent.food_level = 5
    put(current, Animal(Species.TURTLE, Coordinate(0, 0), rng, params=params, is_male=False))

    next_field = current.spawn_empty()
    parent.act(current, next_field, make_context(rng))

    assert next_field.animals == [parent]


def test_litter_is_limited_by_free_cells(fixed_rng, make_context):
    rng = fixed_rng(0.0, randint_value=3)
    current = Field(1, 3, rng)
    params = healthy_params(Species.TURTLE, breeding_probability=1.0)
    parent = put(current, Animal(Species.TURTLE, Coordinate(0, 1), rng, params=params, is_male=True))
    parent.age = 10
    parent.food_level = 5
    put(current, Animal(Species.TURTLE, Coordinate(0, 0), rng, params=params, is_male=False))

    next_field = current.spawn_empty()
    parent.act(current, next_field, make_context(rng))

    # Both neighbours go to the young, leaving the parent nowhere to move
    young = next_field.animals
    assert len(young) == 2
    assert parent not in young
    assert parent.death_cause is DeathCause.OVERCROWDING


def test_predator_eats_adjacent_prey(fixed_rng, make_context):
    rng = fixed_rng(0.5)
    current = Field(3, 3, rng)
    shark = put(
        current,
        Animal(Species.WHITE_SHARK, Coordinate(1, 1), rng, params=healthy_params(Species.WHITE_SHARK)),
    )
    shark.food_level = 3
    turtle = put(current, Animal(Species.TURTLE, Coordinate(2, 2), rng))

    next_field = current.spawn_empty()
    context = make_context(rng)
    shark.act(current, next_field, context)

    assert turtle.death_cause is DeathCause.EATEN
    assert shark.coordinate == Coordinate(2, 2)
    assert shark.food_level == shark.params.food_value
    assert context.tracker.deaths[Species.TURTLE][DeathCause.EATEN] == 1


def test_predator_ignores_species_outside_its_diet(fixed_rng, make_context):
    rng = fixed_rng(0.5)
    current = Field(3, 3, rng)
    swordfish = put(
        current,
        Animal(Species.SWORDFISH, Coordinate(1, 1), rng, params=healthy_params(Species.SWORDFISH)),
    )
    swordfish.food_level = 3
    turtle = put(current, Animal(Species.TURTLE, Coordinate(0, 0), rng))

    swordfish.act(current, current.spawn_empty(), make_context(rng))

    assert turtle.alive
    assert swordfish.food_level == 2


def test_cold_can_keep_predator_resting(fixed_rng, make_context):
    rng = fixed_rng(0.85)
    current = Field(3, 3, rng)
    whale = put(
        current,
        Animal(Species.KILLER_WHALE, Coordinate(1, 1), rng, params=healthy_params(Species.KILLER_WHALE)),
    )
    whale.food_level = 10
    turtle = put(current, Animal(Species.TURTLE, Coordinate(0, 0), rng))

    next_field = current.spawn_empty()
    whale.act(current, next_field, make_context(rng, weather=Weather.COLD))

    assert turtle.alive
    assert whale.food_level == 9
    assert next_field.animal_at(Coordinate(1, 1)) is whale


@pytest.mark.parametrize("weather, eats", [(Weather.CLEAR, True), (Weather.FOG, False)])
def test_fog_lowers_feeding_chance(fixed_rng, make_context, weather, eats):
    rng = fixed_rng(0.97)
    current = Field(1, 2, rng)
    fish = put(
        current,
        Animal(Species.PARROTFISH, Coordinate(0, 0), rng, params=healthy_params(Species.PARROTFISH)),
    )
    fish.food_level = 5
    algae = put(current, Plant(Species.ALGAE, Coordinate(0, 1), rng))

    fish.act(current, current.spawn_empty(), make_context(rng, weather=weather))

    assert algae.alive is not eats
    if eats:
        assert fish.food_level == fish.params.food_value
        assert fish.coordinate == Coordinate(0, 1)
    else:
        assert fish.food_level == 4


def test_eaten_prey_is_not_revived_when_acting_later(fixed_rng, make_context):
    rng = fixed_rng(0.5)
    current = Field(3, 3, rng)
    shark = put(
        current,
        Animal(Species.WHITE_SHARK, Coordinate(1, 1), rng, params=healthy_params(Species.WHITE_SHARK)),
    )
    shark.food_level = 3
    turtle = put(current, Animal(Species.TURTLE, Coordinate(2, 2), rng))

    next_field = current.spawn_empty()
    context = make_context(rng)
    shark.act(current, next_field, context)
    turtle.act(current, next_field, context)

    assert next_field.animals == [shark]


def test_animal_rejects_plant_species():
    with pytest.raises(ValueError):
        Animal(Species.ALGAE, Coordinate(0, 0), random.Random(0))

import dataclasses

import pytest

from reef.coordinate import Coordinate
from reef.species import Species


def test_snapshot_matches_field(simulation_engine):
    snapshot = simulation_engine.get_snapshot()
    field = simulation_engine.field

    assert (snapshot.depth, snapshot.width) == (field.depth, field.width)
    assert snapshot.step == 0
    assert snapshot.time_string == "06:00"
    assert snapshot.is_daytime
    assert dict(snapshot.counts) == field.population_counts()
    assert len(snapshot.occupants) == len(list(field.occupied()))

    for coordinate, organism in field.occupied():
        view = snapshot.view_at(coordinate)
        assert view.species is organism.species
        assert view.age == organism.age


def test_snapshot_is_read_only(simulation_engine):
    snapshot = simulation_engine.get_snapshot()

    with pytest.raises(dataclasses.FrozenInstanceError):
        snapshot.step = 5
    with pytest.raises(TypeError):
        snapshot.occupants[Coordinate(0, 0)] = None
    with pytest.raises(TypeError):
        snapshot.counts[Species.ALGAE] = 0


def test_snapshot_does_not_change_with_the_engine(simulation_engine):
    snapshot = simulation_engine.get_snapshot()
    before = dict(snapshot.occupants)
    simulation_engine.simulate_one_step()

    assert dict(snapshot.occupants) == before
    assert snapshot.step == 0

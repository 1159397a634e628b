"""Read-only view of the field handed to observers after every step."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from reef.coordinate import Coordinate
from reef.field import Field
from reef.species import Species
from reef.time_system import ClockSystem
from reef.weather_system import Weather


@dataclass(frozen=True)
class OccupantView:
    """What an observer may know about one occupant."""

    species: Species
    alive: bool
    infected: bool = False
    age: int = 0
    is_male: Optional[bool] = None


@dataclass(frozen=True)
class FieldSnapshot:
    """Immutable state of the field after a step.

    Attributes:
        step: Number of steps simulated so far
        depth: Field rows
        width: Field columns
        hour: Clock hour
        minute: Clock minute
        is_daytime: Whether prey are active
        weather: Current weather
        counts: Live organisms per species
        occupants: Coordinate -> OccupantView for every occupied cell
    """

    step: int
    depth: int
    width: int
    hour: int
    minute: int
    is_daytime: bool
    weather: Weather
    counts: Mapping[Species, int]
    occupants: Mapping[Coordinate, OccupantView]

    @property
    def time_string(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"

    @property
    def total_population(self) -> int:
        return sum(self.counts.values())

    def view_at(self, coordinate: Coordinate) -> Optional[OccupantView]:
        return self.occupants.get(coordinate)


def build_snapshot(step: int, field: Field, clock: ClockSystem, weather: Weather) -> FieldSnapshot:
    """Capture a field and the environment as a FieldSnapshot."""
    occupants = {}
    for coordinate, organism in field.occupied():
        occupants[coordinate] = OccupantView(
            species=organism.species,
            alive=organism.alive,
            infected=getattr(organism, "infected", False),
            age=organism.age,
            is_male=getattr(organism, "is_male", None),
        )
    return FieldSnapshot(
        step=step,
        depth=field.depth,
        width=field.width,
        hour=clock.hour,
        minute=clock.minute,
        is_daytime=clock.is_daytime(),
        weather=weather,
        counts=MappingProxyType(field.population_counts()),
        occupants=MappingProxyType(occupants),
    )

"""The reef field: a rectangular grid holding at most one organism per cell.

A Field is one buffer of the simulation's double-buffered state. During a
step the engine reads the *current* Field and every organism writes itself
(and its offspring) into a fresh *next* Field; the buffers are then swapped.
Nothing is ever removed from a Field explicitly - organisms that are not
re-placed into the next Field simply disappear.

The live collections are insertion-ordered, so iteration order is the order
in which organisms were placed. That order is part of what makes seeded runs
reproducible.
"""

import random
from typing import TYPE_CHECKING, Dict, Iterable, Iterator, List, Optional, Tuple

from reef.coordinate import Coordinate
from reef.exceptions import InvalidCoordinateError
from reef.species import TRACKED_SPECIES, Species
from reef.util.rng import require_rng_param

if TYPE_CHECKING:
    from reef.entities import Animal, Organism, Plant


class Field:
    """A depth x width grid of cells.

    Attributes:
        depth: Number of rows
        width: Number of columns
        rng: Shared random generator used to shuffle adjacency queries
    """

    def __init__(self, depth: int, width: int, rng: Optional[random.Random] = None) -> None:
        """Create an empty field.

        Args:
            depth: Number of rows (must be positive)
            width: Number of columns (must be positive)
            rng: The engine's shared RNG
        """
        self._depth = depth
        self._width = width
        self.rng = require_rng_param(rng, "Field.__init__")

        self._cells: Dict[Coordinate, "Organism"] = {}
        self._positions: Dict["Organism", Coordinate] = {}
        # dicts used as insertion-ordered sets
        self._animals: Dict["Animal", None] = {}
        self._plants: Dict["Plant", None] = {}

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def width(self) -> int:
        return self._width

    @property
    def animals(self) -> List["Animal"]:
        """Animals placed in this field, in placement order (a copy)."""
        return list(self._animals)

    @property
    def plants(self) -> List["Plant"]:
        """Plants placed in this field, in placement order (a copy)."""
        return list(self._plants)

    def spawn_empty(self) -> "Field":
        """A new empty field of the same size sharing the same RNG."""
        return Field(self._depth, self._width, self.rng)

    # =========================================================================
    # Placement
    # =========================================================================

    def is_valid(self, coordinate: Optional[Coordinate]) -> bool:
        return coordinate is not None and Coordinate(*coordinate).is_within(
            self._depth, self._width
        )

    def place(self, organism: "Organism", coordinate: Optional[Coordinate]) -> None:
        """Put an organism at a coordinate, evicting any previous occupant.

        An evicted occupant is dropped from the live collections but is not
        killed. If the organism was already placed elsewhere in this field,
        that earlier cell is vacated.

        Raises:
            InvalidCoordinateError: If the coordinate is None or out of bounds
        """
        if not self.is_valid(coordinate):
            raise InvalidCoordinateError(coordinate, self._depth, self._width)
        coordinate = Coordinate(*coordinate)

        previous = self._cells.get(coordinate)
        if previous is not None and previous is not organism:
            self._forget(previous)

        old_coordinate = self._positions.get(organism)
        if old_coordinate is not None and old_coordinate != coordinate:
            del self._cells[old_coordinate]

        self._cells[coordinate] = organism
        self._positions[organism] = coordinate
        if organism.is_plant:
            self._plants[organism] = None
        else:
            self._animals[organism] = None

    def _forget(self, organism: "Organism") -> None:
        self._positions.pop(organism, None)
        self._animals.pop(organism, None)
        self._plants.pop(organism, None)

    def clear(self) -> None:
        """Empty the field."""
        self._cells.clear()
        self._positions.clear()
        self._animals.clear()
        self._plants.clear()

    # =========================================================================
    # Queries
    # =========================================================================

    def occupant_at(self, coordinate: Coordinate) -> Optional["Organism"]:
        return self._cells.get(coordinate)

    def animal_at(self, coordinate: Coordinate) -> Optional["Animal"]:
        """The occupant at a coordinate if it is an animal, else None."""
        occupant = self._cells.get(coordinate)
        if occupant is None or occupant.is_plant:
            return None
        return occupant  # type: ignore[return-value]

    def plant_at(self, coordinate: Coordinate) -> Optional["Plant"]:
        """The occupant at a coordinate if it is a plant, else None."""
        occupant = self._cells.get(coordinate)
        if occupant is None or not occupant.is_plant:
            return None
        return occupant  # type: ignore[return-value]

    def is_free(self, coordinate: Coordinate) -> bool:
        """A cell is free when it is empty or holds a dead organism."""
        occupant = self._cells.get(coordinate)
        return occupant is None or not occupant.alive

    def adjacent_coordinates(self, coordinate: Optional[Coordinate]) -> List[Coordinate]:
        """In-bounds cells surrounding a coordinate, in a fresh random order.

        Several behaviors rely on the list being shuffled: taking the first
        matching cell is how they pick uniformly among candidates.
        """
        if coordinate is None:
            return []
        coordinate = Coordinate(*coordinate)
        locations = [
            neighbour
            for neighbour in coordinate.neighbours()
            if neighbour.is_within(self._depth, self._width)
        ]
        self.rng.shuffle(locations)
        return locations

    def free_adjacent_coordinates(self, coordinate: Optional[Coordinate]) -> List[Coordinate]:
        """Shuffled adjacent cells that are empty or hold a dead organism."""
        return [loc for loc in self.adjacent_coordinates(coordinate) if self.is_free(loc)]

    def occupied(self) -> Iterator[Tuple[Coordinate, "Organism"]]:
        """(coordinate, occupant) pairs in row-major order."""
        for coordinate in sorted(self._cells):
            yield coordinate, self._cells[coordinate]

    def population_counts(self) -> Dict[Species, int]:
        """Number of live organisms per species currently on the grid."""
        counts = {species: 0 for species in Species}
        for occupant in self._cells.values():
            if occupant.alive:
                counts[occupant.species] += 1
        return counts

    def is_viable(self, species: Iterable[Species] = TRACKED_SPECIES) -> bool:
        """Whether at least one live member of every given species is present."""
        missing = set(species)
        for organism in self._iter_members():
            if organism.alive:
                missing.discard(organism.species)
                if not missing:
                    return True
        return not missing

    def _iter_members(self) -> Iterator["Organism"]:
        yield from self._animals
        yield from self._plants

    def __repr__(self) -> str:
        return (
            f"Field(depth={self._depth}, width={self._width}, "
            f"animals={len(self._animals)}, plants={len(self._plants)})"
        )

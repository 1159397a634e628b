"""Grid coordinates."""

from typing import Iterator, NamedTuple

# Moore neighbourhood offsets, row-major, excluding (0, 0)
NEIGHBOUR_OFFSETS = tuple(
    (row_offset, col_offset)
    for row_offset in (-1, 0, 1)
    for col_offset in (-1, 0, 1)
    if row_offset != 0 or col_offset != 0
)


class Coordinate(NamedTuple):
    """A (row, col) cell position. Immutable, hashable and orderable."""

    row: int
    col: int

    def is_within(self, depth: int, width: int) -> bool:
        """Whether this cell lies inside a depth x width grid."""
        return 0 <= self.row < depth and 0 <= self.col < width

    def neighbours(self) -> Iterator["Coordinate"]:
        """All eight surrounding cells, ignoring grid bounds."""
        for row_offset, col_offset in NEIGHBOUR_OFFSETS:
            yield Coordinate(self.row + row_offset, self.col + col_offset)

    def __repr__(self) -> str:
        return f"Coordinate({self.row}, {self.col})"

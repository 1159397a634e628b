"""Reef exception hierarchy.

Centralised base classes so callers can catch simulation failures narrowly
instead of relying on bare ``except Exception`` blocks.
"""


class ReefError(Exception):
    """Root of all reef domain exceptions."""


class SimulationError(ReefError):
    """Errors during simulation execution (engine, field, organisms)."""


class FieldError(SimulationError):
    """A broken Field invariant detected by the Field itself."""


class InvalidCoordinateError(FieldError):
    """An organism was placed at a missing or out-of-bounds coordinate.

    This always indicates a bug in the caller; it is never recovered from.
    """

    def __init__(self, coordinate, depth: int, width: int) -> None:
        super().__init__(
            f"Invalid coordinate {coordinate!r} for a {depth}x{width} field"
        )
        self.coordinate = coordinate
        self.depth = depth
        self.width = width


class ConfigurationError(ReefError):
    """Invalid or missing configuration."""

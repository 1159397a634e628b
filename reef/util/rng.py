"""The reef's single source of randomness.

A seeded run is reproducible only if every draw (weather, adjacency shuffles,
organism rolls) comes from the one ``random.Random`` the engine creates.
Components therefore take that generator as a constructor argument and
refuse to start without it.
"""

import random
from typing import Optional


class MissingRNGError(RuntimeError):
    """A component was built without the engine's RNG."""


def require_rng_param(rng: Optional[random.Random], context: str) -> random.Random:
    """Return ``rng``, or raise if the caller forgot to pass it.

    Args:
        rng: Generator handed to a constructor or factory
        context: Name of the receiving callable, for the error message

    Raises:
        MissingRNGError: If rng is None
    """
    if rng is None:
        raise MissingRNGError(
            f"{context} needs the engine RNG; a fresh unseeded generator would break seeded replays"
        )
    return rng

"""Utilities shared by the simulation core."""

from reef.util.rng import MissingRNGError, require_rng_param

__all__ = [
    "MissingRNGError",
    "require_rng_param",
]

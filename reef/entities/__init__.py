"""Organisms living on the reef.

- base.py: Organism contract and DeathCause
- animal.py: the single behavior engine shared by every animal species
- plant.py: algae growth
"""

from reef.entities.animal import Animal
from reef.entities.base import DeathCause, Organism
from reef.entities.plant import Plant

__all__ = [
    "Animal",
    "DeathCause",
    "Organism",
    "Plant",
]

"""Deterministic sampling primitives.

Usage:
    >>> from npcforge.sampling import SeededRandom, WeightedOption, weighted_choice
    >>> rng = SeededRandom(42)
    >>> weighted_choice(rng, [WeightedOption("a", 3), WeightedOption("b", 1)])
"""

from npcforge.sampling.seeded_random import SeededRandom, coerce_seed
from npcforge.sampling.weighted import (
    WeightedOption,
    sample_unique,
    weighted_choice,
    weighted_pool,
)

__all__ = [
    "SeededRandom",
    "coerce_seed",
    "WeightedOption",
    "sample_unique",
    "weighted_choice",
    "weighted_pool",
]

"""Utility functions and constants for the galaxy generator."""

from .constants import (
    HISTORICAL_DEFAULT_SEED,
    MAX_RADIUS,
    MAX_SPECIES,
    MAX_STARS,
    MIN_RADIUS,
    MIN_SPECIES,
    MIN_STARS,
)
from .distance import distance_squared, euclidean_distance
from .rng import PRNG

__all__ = [
    "HISTORICAL_DEFAULT_SEED",
    "MAX_RADIUS",
    "MAX_SPECIES",
    "MAX_STARS",
    "MIN_RADIUS",
    "MIN_SPECIES",
    "MIN_STARS",
    "distance_squared",
    "euclidean_distance",
    "PRNG",
]

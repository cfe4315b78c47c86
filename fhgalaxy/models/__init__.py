"""Data models for the galaxy generator."""

from .coords import Coordinate
from .galaxy import Galaxy
from .planet import GAS_TABLE, Gas, Planet, PlanetSpecial
from .star import Star, StarColor, StarType

__all__ = [
    "Coordinate",
    "Galaxy",
    "GAS_TABLE",
    "Gas",
    "Planet",
    "PlanetSpecial",
    "Star",
    "StarColor",
    "StarType",
]

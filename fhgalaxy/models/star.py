"""Star system data model."""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Optional

from ..utils.constants import MAX_PLANETS_PER_STAR, MAX_STAR_SIZE
from .coords import Coordinate


class StarType(Enum):
    """Type of star. The value is the one-letter code used in reports."""

    DWARF = "d"  # Small, cool, long-lived stars
    DEGENERATE = "D"  # White dwarfs, neutron stars and other remnants
    MAIN_SEQUENCE = " "  # Stars burning hydrogen in their core, like the Sun
    GIANT = "g"  # Large, luminous stars in later stages of evolution


class StarColor(IntEnum):
    """Star color, ordered from hottest to coolest."""

    BLUE = 1
    BLUE_WHITE = 2
    WHITE = 3
    YELLOW_WHITE = 4
    YELLOW = 5
    ORANGE = 6
    RED = 7

    @property
    def planet_die_size(self) -> int:
        """Size of the die rolled for planets. Big stars roll bigger dice."""
        return StarColor.RED + 2 - self


@dataclass(frozen=True)
class Star:
    """Represents a star system in the galaxy.

    Planets are not held directly; the star owns an ordered tuple of planet
    ids (innermost orbit first) that index into the Galaxy's planet list.
    """

    id: int  # 1-based, in placement order
    coords: Coordinate
    type: StarType
    color: StarColor
    size: int  # 0-9
    num_planets: int  # 1-9
    planet_ids: tuple[int, ...] = field(default_factory=tuple)
    home_system: bool = False  # True if this is a confirmed potential home system
    home_planet_id: Optional[int] = None

    def __post_init__(self):
        """Validate star data after initialization."""
        if self.id < 1:
            raise ValueError(f"Invalid star id: {self.id} (must be >= 1)")
        if not (0 <= self.size <= MAX_STAR_SIZE):
            raise ValueError(f"Invalid size: {self.size} (must be 0-{MAX_STAR_SIZE})")
        if not (1 <= self.num_planets <= MAX_PLANETS_PER_STAR):
            raise ValueError(
                f"Invalid num_planets: {self.num_planets} (must be 1-{MAX_PLANETS_PER_STAR})"
            )
        if len(self.planet_ids) != self.num_planets:
            raise ValueError(
                f"Invalid planet_ids: star {self.id} has {len(self.planet_ids)} planets "
                f"(expected {self.num_planets})"
            )
        if self.home_system != (self.home_planet_id is not None):
            raise ValueError(
                f"Invalid home_planet_id: {self.home_planet_id} "
                f"(must be set if and only if home_system is True)"
            )
        if self.home_planet_id is not None and self.home_planet_id not in self.planet_ids:
            raise ValueError(
                f"Invalid home_planet_id: {self.home_planet_id} is not orbiting star {self.id}"
            )

    @property
    def x(self) -> int:
        return self.coords.x

    @property
    def y(self) -> int:
        return self.coords.y

    @property
    def z(self) -> int:
        return self.coords.z

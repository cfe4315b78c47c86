"""Galaxy container."""

from dataclasses import dataclass, field
from typing import Optional

from ..utils.constants import MAX_SPECIES, MIN_SPECIES
from .planet import Planet
from .star import Star


@dataclass
class Galaxy:
    """Generated universe: an arena of stars and planets plus galaxy metadata.

    Stars and planets reference each other only by id. Star ids and planet ids
    are 1-based and match their position in the lists, so lookups are O(1).
    """

    radius: int  # Galactic radius in parsecs
    d_num_species: int  # Design number of species
    num_species: int  # Actual number of species allocated
    seed: Optional[int]  # Effective PRNG seed; None if generated from a resumed PRNG
    turn_number: int = 0
    stars: list[Star] = field(default_factory=list)
    planets: list[Planet] = field(default_factory=list)
    rng_state: Optional[str] = None  # PRNG checkpoint taken at the end of generation

    def __post_init__(self):
        """Validate galaxy data after initialization."""
        if self.turn_number < 0:
            raise ValueError(f"Invalid turn_number: {self.turn_number} (must be >= 0)")
        if not (MIN_SPECIES <= self.d_num_species <= MAX_SPECIES):
            raise ValueError(
                f"Invalid d_num_species: {self.d_num_species} (must be {MIN_SPECIES}-{MAX_SPECIES})"
            )

        columns = set()
        for n, star in enumerate(self.stars, start=1):
            if star.id != n:
                raise ValueError(f"Invalid star id: {star.id} at position {n}")
            if (star.x, star.y) in columns:
                raise ValueError(f"Duplicate star column: ({star.x}, {star.y})")
            columns.add((star.x, star.y))

        for n, planet in enumerate(self.planets, start=1):
            if planet.id != n:
                raise ValueError(f"Invalid planet id: {planet.id} at position {n}")
            if not (1 <= planet.star_id <= len(self.stars)):
                raise ValueError(f"Planet {planet.id} orbits unknown star {planet.star_id}")

    def get_star(self, star_id: int) -> Star:
        """Look up a star by id.

        Raises:
            KeyError: If there is no such star
        """
        if not (1 <= star_id <= len(self.stars)):
            raise KeyError(f"No star with id {star_id}")
        return self.stars[star_id - 1]

    def get_planet(self, planet_id: int) -> Planet:
        """Look up a planet by id.

        Raises:
            KeyError: If there is no such planet
        """
        if not (1 <= planet_id <= len(self.planets)):
            raise KeyError(f"No planet with id {planet_id}")
        return self.planets[planet_id - 1]

    def planets_of(self, star: Star) -> list[Planet]:
        """Planets orbiting `star`, innermost first."""
        return [self.get_planet(pid) for pid in star.planet_ids]

    def home_systems(self) -> list[Star]:
        """Stars confirmed as potential home systems."""
        return [s for s in self.stars if s.home_system]

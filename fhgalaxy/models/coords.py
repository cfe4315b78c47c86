"""Galactic coordinate data model."""

from dataclasses import dataclass

from ..utils.distance import distance_squared, euclidean_distance


@dataclass(frozen=True)
class Coordinate:
    """Integer position of a star system, in parsecs from the galactic center."""

    x: int
    y: int
    z: int

    def distance_squared(self) -> int:
        """Squared distance from the origin."""
        return distance_squared(0, 0, 0, self.x, self.y, self.z)

    def distance(self) -> float:
        """Distance from the origin in parsecs."""
        return euclidean_distance(0, 0, 0, self.x, self.y, self.z)

    def sort_key(self) -> tuple[int, int, int, int]:
        """Order by distance from the origin, then by x, y and z."""
        return (self.distance_squared(), self.x, self.y, self.z)

    def __str__(self) -> str:
        return f"({self.x:5d},{self.y:5d},{self.z:5d})"

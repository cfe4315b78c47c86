"""Distance calculations for galactic coordinates."""

import math


def distance_squared(x1: int, y1: int, z1: int, x2: int, y2: int, z2: int) -> int:
    """Calculate the squared Euclidean distance between two points.

    Stays in integer arithmetic, so it is safe to use for boundary tests and
    ordering where a float square root could round.

    Examples:
        >>> distance_squared(0, 0, 0, 3, 4, 0)
        25
    """
    dx, dy, dz = x2 - x1, y2 - y1, z2 - z1
    return dx * dx + dy * dy + dz * dz


def euclidean_distance(x1: int, y1: int, z1: int, x2: int, y2: int, z2: int) -> float:
    """Calculate the Euclidean distance between two points in parsecs.

    Examples:
        >>> euclidean_distance(0, 0, 0, 3, 4, 0)
        5.0
    """
    return math.sqrt(distance_squared(x1, y1, z1, x2, y2, z2))

"""Tests for distance calculations."""

from fhgalaxy.utils import distance_squared, euclidean_distance


class TestDistance:
    """Test Euclidean distance calculation."""

    def test_distance_same_point(self):
        """Test distance from a point to itself."""
        assert distance_squared(5, 5, 5, 5, 5, 5) == 0
        assert euclidean_distance(5, 5, 5, 5, 5, 5) == 0.0

    def test_distance_axes(self):
        """Test distance along each axis."""
        assert distance_squared(0, 0, 0, 6, 0, 0) == 36
        assert distance_squared(0, 0, 0, 0, -6, 0) == 36
        assert distance_squared(0, 0, 0, 0, 0, 6) == 36

    def test_distance_negative_coords(self):
        """Test distance with negative coordinates."""
        assert distance_squared(-1, -2, -2, 1, 2, 2) == 36
        assert euclidean_distance(-1, -2, -2, 1, 2, 2) == 6.0

    def test_distance_is_symmetric(self):
        """Test that direction does not matter."""
        assert distance_squared(1, 2, 3, -4, 5, -6) == distance_squared(-4, 5, -6, 1, 2, 3)

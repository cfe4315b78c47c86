"""Test a complete galaxy against a recorded run.

The fixture pins every roll of the generator: star placement, star
attributes, planets and home system evaluation. Any change to the order or
number of dice rolls shows up here.
"""

import json
from pathlib import Path

import pytest

from fhgalaxy import generate_galaxy

FIXTURE = Path(__file__).parent / "fixtures" / "galaxy_seed_1924085713_r6_s12.json"


@pytest.fixture(scope="module")
def expected():
    with FIXTURE.open() as f:
        return json.load(f)


@pytest.fixture(scope="module")
def galaxy(expected):
    return generate_galaxy(expected["radius"], expected["num_stars"], expected["num_species"], 0)


def star_record(star):
    return {
        "id": star.id,
        "x": star.x,
        "y": star.y,
        "z": star.z,
        "type": star.type.name,
        "color": star.color.name,
        "size": star.size,
        "num_planets": star.num_planets,
        "home_system": star.home_system,
        "home_planet_id": star.home_planet_id,
    }


def planet_record(planet):
    return {
        "id": planet.id,
        "orbit": planet.orbit,
        "diameter": planet.diameter,
        "density": planet.density,
        "gravity": planet.gravity,
        "temperature_class": planet.temperature_class,
        "pressure_class": planet.pressure_class,
        "mining_difficulty": planet.mining_difficulty,
        "atmosphere": [[gas.name, percent] for gas, percent in planet.atmosphere],
        "special": planet.special.name,
    }


class TestGoldenGalaxy:
    """Test the smallest galaxy with the historical default seed."""

    def test_header(self, galaxy, expected):
        """Test seed, sizes and final generator state."""
        assert galaxy.seed == expected["seed"]
        assert galaxy.radius == expected["radius"]
        assert galaxy.num_species == expected["num_species"]
        assert len(galaxy.stars) == expected["num_stars"]
        assert galaxy.rng_state == expected["rng_state"]

    def test_planet_count(self, galaxy, expected):
        """Test the total number of planets."""
        assert len(galaxy.planets) == sum(len(s["planets"]) for s in expected["stars"]) == 36

    def test_stars(self, galaxy, expected):
        """Test every star, in order."""
        for star, record in zip(galaxy.stars, expected["stars"]):
            expected_star = {k: v for k, v in record.items() if k != "planets"}
            assert star_record(star) == expected_star

    def test_planets(self, galaxy, expected):
        """Test every planet of every star, in order."""
        for star, record in zip(galaxy.stars, expected["stars"]):
            planets = [planet_record(p) for p in galaxy.planets_of(star)]
            assert planets == record["planets"], f"star {star.id}"

    def test_home_system(self, galaxy):
        """Test that star 7 is the only home system."""
        homes = galaxy.home_systems()
        assert [s.id for s in homes] == [7]
        assert homes[0].home_planet_id == 21

    def test_seed_zero_is_historical_default(self, galaxy, expected):
        """Test that seed 0 and the historical default seed give the same galaxy."""
        other = generate_galaxy(
            expected["radius"], expected["num_stars"], expected["num_species"], expected["seed"]
        )
        assert other == galaxy

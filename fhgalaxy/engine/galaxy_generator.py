"""Galaxy generation: star placement, star attributes and planetary systems."""

import logging
import time
from dataclasses import dataclass
from typing import List, Optional

from ..models import Coordinate, Galaxy, Planet, Star, StarColor, StarType
from ..utils.constants import (
    MAX_CHANCE_OF_STAR,
    MAX_PLANETS_PER_STAR,
    MIN_CHANCE_OF_STAR,
    PLACEMENT_ATTEMPTS_PER_STAR,
)
from ..utils.rng import PRNG
from .errors import AttemptGuard, CancelSignal, ConfigurationError
from .home_system import evaluate_home_system
from .params import validate_params
from .planet_generator import generate_planets

logger = logging.getLogger(__name__)


@dataclass
class StarAttributes:
    """Randomly generated attributes of one star."""

    type: StarType
    color: StarColor
    size: int
    num_planets: int


def generate_galaxy(
    radius: int,
    num_stars: int,
    num_species: int,
    seed: int = 0,
    *,
    earth_like: bool = True,
    easier_mining: bool = False,
    rng: Optional[PRNG] = None,
    cancel: Optional[CancelSignal] = None,
) -> Galaxy:
    """Generate a complete galaxy.

    Algorithm:
    1. Validate parameters and star density
    2. Place stars inside the sphere, one per (x, y) column
    3. For each star, nearest the center first:
       - roll type, color, size and number of planets
       - generate its planets, possibly with an Earth-like planet
       - confirm or revoke it as a potential home system

    Args:
        radius: Galactic radius in parsecs (6-50)
        num_stars: Number of star systems (12-1000)
        num_species: Number of species (1-100)
        seed: Unsigned 64-bit seed; 0 selects the historical default seed.
            Must be 0 when rng is given
        earth_like: Offer every star system an Earth-like planet
        easier_mining: Use the easier mining difficulty range
        rng: RNG to draw from instead of a new one seeded with `seed`. The
            galaxy records its seed, or None for an RNG made with from_state
        cancel: Optional cancel signal, e.g. threading.Event

    Returns:
        Galaxy with all stars and planets, at turn 0

    Raises:
        ConfigurationError: If parameters are out of bounds, or both seed
            and rng were given
        GenerationStalledError: If a rejection-sampling loop exceeded its cap
        GenerationCancelled: If the cancel signal was set
    """
    params = validate_params(
        radius=radius,
        num_stars=num_stars,
        num_species=num_species,
        seed=seed,
        earth_like=earth_like,
        easier_mining=easier_mining,
    )
    if rng is not None and seed != 0:
        raise ConfigurationError("seed and rng are mutually exclusive")
    chance_of_star = check_density(params.radius, params.num_stars)
    logger.info(
        "creating galaxy: radius %d, stars %d, species %d, chance of star %d",
        params.radius,
        params.num_stars,
        params.num_species,
        chance_of_star,
    )

    if rng is None:
        rng = PRNG(params.seed)
        seed = params.seed
    else:
        seed = rng.seed

    started = time.perf_counter()
    coords = place_stars(rng, params.radius, params.num_stars, cancel)
    logger.info("placed %d stars in %.3fs", len(coords), time.perf_counter() - started)

    stars: List[Star] = []
    planets: List[Planet] = []
    for star_id, c in enumerate(coords, start=1):
        attrs = generate_star_attributes(rng)
        system = generate_planets(
            rng,
            star_id,
            attrs.num_planets,
            first_planet_id=len(planets) + 1,
            earth_like=params.earth_like,
            easier_mining=params.easier_mining,
            cancel=cancel,
        )
        home = evaluate_home_system(system)

        star = Star(
            id=star_id,
            coords=c,
            type=attrs.type,
            color=attrs.color,
            size=attrs.size,
            num_planets=attrs.num_planets,
            planet_ids=tuple(p.id for p in system),
            home_system=home is not None,
            home_planet_id=home.id if home is not None else None,
        )
        logger.debug(
            "star %d: %s %.4f type %r color %s size %d planets %d%s",
            star.id,
            c,
            c.distance(),
            star.type.value,
            star.color.name,
            star.size,
            star.num_planets,
            " home" if star.home_system else "",
        )
        stars.append(star)
        planets.extend(system)

    galaxy = Galaxy(
        radius=params.radius,
        d_num_species=params.num_species,
        num_species=params.num_species,
        seed=seed,
        turn_number=0,
        stars=stars,
        planets=planets,
        rng_state=rng.get_state(),
    )

    num_homes = len(galaxy.home_systems())
    logger.info("created %d stars, %d planets, %d home systems", len(stars), len(planets), num_homes)
    if params.earth_like and num_homes < params.num_species:
        logger.warning(
            "only %d potential home systems for %d species", num_homes, params.num_species
        )
    return galaxy


def check_density(radius: int, num_stars: int) -> int:
    """Check that the stars will be neither too crowded nor too sparse.

    Uses integer arithmetic with pi approximated as 3.14.

    Returns:
        Cubic parsecs per star ("chance of star")

    Raises:
        ConfigurationError: If the density is outside the allowed band
    """
    galactic_volume = (4 * 314 * radius * radius * radius) // 300
    chance_of_star = galactic_volume // num_stars
    if chance_of_star < MIN_CHANCE_OF_STAR:
        raise ConfigurationError(f"galactic radius is too small for {num_stars} stars")
    if chance_of_star > MAX_CHANCE_OF_STAR:
        raise ConfigurationError(f"galactic radius is too large for {num_stars} stars")
    return chance_of_star


def place_stars(
    rng: PRNG, radius: int, num_stars: int, cancel: Optional[CancelSignal] = None
) -> List[Coordinate]:
    """Randomly place stars inside the galactic sphere.

    Candidates are drawn uniformly from the cube [-radius, radius) on each
    axis and rejected if their (x, y) column already has a star or if they
    lie on or outside the sphere.

    Returns:
        Star coordinates ordered by distance from the center, then x, y, z

    Raises:
        GenerationStalledError: If 100 attempts per star were not enough
        GenerationCancelled: If the cancel signal was set
    """
    diameter = 2 * radius
    star_here = [[False] * diameter for _ in range(diameter)]
    max_distance_squared = radius * radius
    guard = AttemptGuard("star placement", PLACEMENT_ATTEMPTS_PER_STAR * num_stars, cancel)

    coords: List[Coordinate] = []
    while len(coords) < num_stars:
        guard.tick()
        c = Coordinate(
            x=rng.roll(diameter) - 1 - radius,
            y=rng.roll(diameter) - 1 - radius,
            z=rng.roll(diameter) - 1 - radius,
        )

        # only one star per x, y column
        if star_here[c.x + radius][c.y + radius]:
            continue
        if c.distance_squared() >= max_distance_squared:
            continue

        coords.append(c)
        star_here[c.x + radius][c.y + radius] = True

    coords.sort(key=Coordinate.sort_key)
    return coords


def generate_star_attributes(rng: PRNG) -> StarAttributes:
    """Roll a star's type, color, size and number of planets.

    Main sequence is the most common type. The type decides how many dice
    are rolled for planets and the color decides how big they are: blue stars
    roll eight-sided dice, red stars two-sided ones.
    """
    roll = rng.roll(10)
    if roll == 1:
        star_type, num_dice = StarType.DWARF, 1
    elif roll == 2:
        star_type, num_dice = StarType.DEGENERATE, 2
    elif roll == 3:
        star_type, num_dice = StarType.GIANT, 3
    else:
        star_type, num_dice = StarType.MAIN_SEQUENCE, 2

    color = StarColor(rng.roll(7))
    size = rng.roll(10) - 1

    num_planets = -2
    for _ in range(num_dice):
        num_planets += rng.roll(color.planet_die_size)
    while num_planets > MAX_PLANETS_PER_STAR:
        num_planets -= rng.roll(3)
    num_planets = max(num_planets, 1)

    return StarAttributes(type=star_type, color=color, size=size, num_planets=num_planets)

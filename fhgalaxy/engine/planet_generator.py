"""Planet generation for a single star system.

Planets are generated one at a time, innermost orbit first. Each planet
starts from a planet of Earth's solar system and is then randomized:

1. Diameter, which decides whether the planet is a gas giant
2. Density and gravity
3. Temperature class, which may never be warmer than the planet inside it
4. Optionally, replace everything with Earth-like values (once per system)
5. Pressure class
6. Atmosphere, drawn from a window of the gas table picked by temperature
7. Mining difficulty

The order of the dice rolls is part of the reproducibility contract. Do not
reorder, merge or skip rolls.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..models.planet import GAS_TABLE, Gas, Planet, PlanetSpecial
from ..utils.constants import (
    ATMOSPHERE_TEMPERATURE_RANGE,
    EARTH_LIKE_MAX_TEMPERATURE,
    GAS_GIANT_DIAMETER,
    GAS_GIANT_PRESSURE_RANGE,
    GAS_GIANT_TEMPERATURE_RANGE,
    MAX_ATMOSPHERE_GASES,
    MAX_MINING_ATTEMPTS,
    MAX_NUDGES,
    MAX_PLANETS_PER_STAR,
    MAX_TEMPERATURE_CLASS,
    MIN_ATMOSPHERE_GRAVITY,
    MIN_DIAMETER,
    MIN_TEMPERATURE_CLASS,
    MINING_DIFFICULTY_EASIER,
    MINING_DIFFICULTY_NORMAL,
    MINING_HARDENING,
    ROCKY_PRESSURE_RANGE,
    SMALL_SYSTEM_INNER_TEMPERATURE,
)
from ..utils.rng import PRNG
from .errors import AttemptGuard, CancelSignal

logger = logging.getLogger(__name__)

# Starting (diameter, temperature class) from Earth's solar system.
# Index 0 is unused. Index 5 is a fictional planet in place of the asteroid
# belt, and Pluto is left out.
BASE_PLANETS = (
    (0, 0),
    (5, 29),
    (12, 27),
    (13, 11),
    (7, 9),
    (20, 8),
    (143, 6),
    (121, 5),
    (51, 5),
    (49, 3),
)

# Gravity is density times diameter over this; 100 for Earth (550 * 13 / 72)
GRAVITY_DIVISOR = 72


@dataclass
class PlanetValues:
    """Working values for one planet while its system is being generated."""

    diameter: int
    temperature_class: int
    gas_giant: bool = False
    density: int = 0
    gravity: int = 0
    pressure_class: int = 0
    mining_difficulty: int = 0
    atmosphere: List[List] = field(default_factory=list)  # [gas, quantity] pairs
    special: PlanetSpecial = PlanetSpecial.NOT_SPECIAL


def generate_planets(
    rng: PRNG,
    star_id: int,
    num_planets: int,
    first_planet_id: int = 1,
    earth_like: bool = False,
    easier_mining: bool = False,
    cancel: Optional[CancelSignal] = None,
) -> List[Planet]:
    """Generate the planets orbiting one star.

    Args:
        rng: Random number generator for this run
        star_id: Id of the star the planets orbit
        num_planets: Number of planets to generate (1-9)
        first_planet_id: Id given to the innermost planet; the others follow
        earth_like: Make the first cold enough planet Earth-like
        easier_mining: Use the wider, easier mining difficulty range
        cancel: Optional cancel signal checked by every capped loop

    Returns:
        Planets in orbit order, innermost first

    Raises:
        ValueError: If num_planets is out of range
        GenerationStalledError: If a loop exceeded its attempt cap
        GenerationCancelled: If the cancel signal was set
    """
    if not (1 <= num_planets <= MAX_PLANETS_PER_STAR):
        raise ValueError(
            f"Invalid num_planets: {num_planets} (must be 1-{MAX_PLANETS_PER_STAR})"
        )

    # cleared once the system has its Earth-like planet
    make_earth = earth_like

    planets: List[Planet] = []
    previous: Optional[PlanetValues] = None
    for orbit in range(1, num_planets + 1):
        pv = _base_values(orbit, num_planets)

        _randomize_diameter(rng, pv, cancel)
        pv.gas_giant = pv.diameter > GAS_GIANT_DIAMETER
        if pv.gas_giant:
            # 0.60 through 1.70 times the density of water
            pv.density = 58 + rng.roll(56) + rng.roll(56)
        else:
            # 3.70 through 5.70 times the density of water
            pv.density = 368 + rng.roll(101) + rng.roll(101)
        pv.gravity = (pv.density * pv.diameter) // GRAVITY_DIVISOR

        _randomize_temperature(rng, pv, orbit, num_planets, previous, cancel)

        if make_earth and pv.temperature_class <= EARTH_LIKE_MAX_TEMPERATURE:
            make_earth = False
            _make_earth_like(rng, pv)
        else:
            _generate_pressure(rng, pv, cancel)
            if pv.pressure_class != 0:
                _generate_atmosphere(rng, pv)
            pv.mining_difficulty = _generate_mining_difficulty(
                rng, pv.diameter, easier_mining, cancel
            )

        planet = Planet(
            id=first_planet_id + orbit - 1,
            star_id=star_id,
            orbit=orbit,
            diameter=pv.diameter,
            density=pv.density,
            gravity=pv.gravity,
            temperature_class=pv.temperature_class,
            pressure_class=pv.pressure_class,
            mining_difficulty=pv.mining_difficulty,
            atmosphere=tuple((gas, percent) for gas, percent in pv.atmosphere),
            special=pv.special,
        )
        logger.debug(
            "star %d orbit %d: diameter %d gravity %d temp %d pressure %d md %d %s [%s]",
            star_id,
            orbit,
            planet.diameter,
            planet.gravity,
            planet.temperature_class,
            planet.pressure_class,
            planet.mining_difficulty,
            planet.special.name,
            format_atmosphere(planet),
        )
        planets.append(planet)
        previous = pv

    return planets


def format_atmosphere(planet: Planet) -> str:
    """Format an atmosphere as "N2 78% O2 22%", using the chemical symbols."""
    return " ".join(f"{gas.symbol} {percent}%" for gas, percent in planet.atmosphere)


def _base_values(orbit: int, num_planets: int) -> PlanetValues:
    """Pick the starting planet, nudging small systems toward the Earth-like zone."""
    if num_planets > 3:
        index = (9 * orbit) // num_planets
    else:
        index = 2 * orbit + 1
    diameter, temperature_class = BASE_PLANETS[index]
    return PlanetValues(diameter=diameter, temperature_class=temperature_class)


def _jitter(rng: PRNG, value: int, die_size: int, rounds: int) -> int:
    """Add or subtract a roll of the die, `rounds` times."""
    for _ in range(rounds):
        roll = rng.roll(die_size)
        if rng.roll(100) > 50:
            value += roll
        else:
            value -= roll
    return value


def _raise_to(
    rng: PRNG, value: int, floor: int, die_size: int, what: str, cancel: Optional[CancelSignal]
) -> int:
    """Add rolls of the die until value is at least floor."""
    guard = AttemptGuard(what, MAX_NUDGES, cancel)
    while value < floor:
        guard.tick()
        value += rng.roll(die_size)
    return value


def _lower_to(
    rng: PRNG, value: int, ceiling: int, die_size: int, what: str, cancel: Optional[CancelSignal]
) -> int:
    """Subtract rolls of the die until value is at most ceiling."""
    guard = AttemptGuard(what, MAX_NUDGES, cancel)
    while value > ceiling:
        guard.tick()
        value -= rng.roll(die_size)
    return value


def _randomize_diameter(rng: PRNG, pv: PlanetValues, cancel: Optional[CancelSignal]) -> None:
    # largest possible result is 283,000 km
    die_size = max(2, pv.diameter // 4)
    pv.diameter = _jitter(rng, pv.diameter, die_size, 4)
    pv.diameter = _raise_to(rng, pv.diameter, MIN_DIAMETER, 4, "planet diameter", cancel)


def _randomize_temperature(
    rng: PRNG,
    pv: PlanetValues,
    orbit: int,
    num_planets: int,
    previous: Optional[PlanetValues],
    cancel: Optional[CancelSignal],
) -> None:
    die_size = max(2, pv.temperature_class // 4)
    rounds = rng.roll(3) + rng.roll(3) + rng.roll(3)
    t = _jitter(rng, pv.temperature_class, die_size, rounds)

    if pv.gas_giant:
        low, high = GAS_GIANT_TEMPERATURE_RANGE
        t = _raise_to(rng, t, low, 2, "gas giant temperature", cancel)
        t = _lower_to(rng, t, high, 2, "gas giant temperature", cancel)
    else:
        t = _raise_to(rng, t, MIN_TEMPERATURE_CLASS, 3, "planet temperature", cancel)
        t = _lower_to(rng, t, MAX_TEMPERATURE_CLASS, 3, "planet temperature", cancel)

    # inner planets of small systems are often too cold; warm them up
    if num_planets < 4 and orbit < 3:
        t = _raise_to(rng, t, SMALL_SYSTEM_INNER_TEMPERATURE, 4, "inner planet temperature", cancel)

    # never warmer than the planet closer to the star
    if previous is not None and previous.temperature_class < t:
        t = previous.temperature_class

    pv.temperature_class = t


def _make_earth_like(rng: PRNG, pv: PlanetValues) -> None:
    """Replace the planet's values with Earth-like ones."""
    pv.diameter = 11 + rng.roll(3)
    pv.gas_giant = False
    pv.gravity = 93 + rng.roll(11) + rng.roll(11) + rng.roll(5)
    pv.temperature_class = 9 + rng.roll(3)
    pv.pressure_class = 8 + rng.roll(3)
    pv.mining_difficulty = 208 + rng.roll(11) + rng.roll(11)
    pv.special = PlanetSpecial.IDEAL_HOME_PLANET

    atmosphere = []
    # 1 in 3 has up to 30% ammonia
    if rng.roll(3) == 1:
        atmosphere.append([Gas.NH3, rng.roll(30)])
    # at least 10% nitrogen; it also takes whatever is left over
    nitrogen = len(atmosphere)
    atmosphere.append([Gas.N2, 10])
    # 1 in 3 has up to 30% carbon dioxide
    if rng.roll(3) == 1:
        atmosphere.append([Gas.CO2, rng.roll(30)])
    # always 11% to 30% oxygen
    atmosphere.append([Gas.O2, rng.roll(20) + 10])

    atmosphere[nitrogen][1] += 100 - sum(percent for _, percent in atmosphere)
    pv.atmosphere = atmosphere


def _generate_pressure(rng: PRNG, pv: PlanetValues, cancel: Optional[CancelSignal]) -> None:
    """Pressure class depends primarily on gravity."""
    p = pv.gravity // 10
    die_size = max(2, p // 4)
    rounds = rng.roll(3) + rng.roll(3) + rng.roll(3)
    p = _jitter(rng, p, die_size, rounds)

    low, high = GAS_GIANT_PRESSURE_RANGE if pv.gas_giant else ROCKY_PRESSURE_RANGE
    p = _raise_to(rng, p, low, 3, "planet pressure", cancel)
    p = _lower_to(rng, p, high, 3, "planet pressure", cancel)

    min_t, max_t = ATMOSPHERE_TEMPERATURE_RANGE
    if pv.gravity < MIN_ATMOSPHERE_GRAVITY:
        # too light to hold an atmosphere
        p = 0
    elif not (min_t <= pv.temperature_class <= max_t):
        p = 0

    pv.pressure_class = p


def _generate_atmosphere(rng: PRNG, pv: PlanetValues) -> None:
    """Pick up to four gases and convert their quantities to percentages.

    The candidate gases are a window of the gas table starting at a position
    between 1 and 9 set by the temperature class. A planet that ends up with
    no gas has no atmosphere, so its pressure class drops to 0.
    """
    first_gas = min(max(100 * pv.temperature_class // 225, 1), 9)
    candidates = GAS_TABLE[first_gas - 1 : first_gas - 1 + MAX_ATMOSPHERE_GASES]

    num_gases_wanted = (rng.roll(4) + rng.roll(4)) // 2
    atmosphere = []
    for gas in candidates:
        if num_gases_wanted == 0:
            break
        if gas is Gas.HE:
            # only a third of the very coldest planets have helium
            if pv.temperature_class > 5 or rng.roll(3) != 1:
                continue
            quantity = rng.roll(20)
        else:
            # a third of the remaining gases are left out
            if rng.roll(3) == 3:
                continue
            quantity = rng.roll(100)
            if gas is Gas.O2:
                # oxygen is self-limiting
                quantity = (quantity + 1) // 2
        num_gases_wanted -= 1
        atmosphere.append([gas, quantity])

    total = sum(quantity for _, quantity in atmosphere)
    if total == 0:
        pv.pressure_class = 0
        pv.atmosphere = []
        return

    for slot in atmosphere:
        slot[1] = 100 * slot[1] // total
    # rounding leftovers go to the first gas
    atmosphere[0][1] += 100 - sum(percent for _, percent in atmosphere)
    pv.atmosphere = atmosphere


def _generate_mining_difficulty(
    rng: PRNG, diameter: int, easier_mining: bool, cancel: Optional[CancelSignal]
) -> int:
    """Mining difficulty grows with diameter, with an occasional big surprise."""
    low, high, surprise = MINING_DIFFICULTY_EASIER if easier_mining else MINING_DIFFICULTY_NORMAL

    guard = AttemptGuard("mining difficulty", MAX_MINING_ATTEMPTS, cancel)
    md = 0
    while md < low or md > high:
        guard.tick()
        md = (rng.roll(3) + rng.roll(3) + rng.roll(3) - rng.roll(4)) * rng.roll(diameter)
        md += rng.roll(surprise) + rng.roll(surprise)

    if not easier_mining:
        numerator, denominator = MINING_HARDENING
        md = (md * numerator) // denominator
    return md

"""Home system viability.

A star system with an Earth-like planet is only a good starting location if
the other planets in the system are reasonably colonizable and worth mining.
Every planet is scored by its approximate life support needs relative to the
home planet and by its mining difficulty; the summed score must land in a
narrow, hand-tuned band.
"""

import logging
from typing import Iterable, Optional, Sequence

from ..models.planet import Gas, Planet, PlanetSpecial
from ..utils.constants import HOME_SYSTEM_SCORE_NUMERATOR, HOME_SYSTEM_SCORE_RANGE

logger = logging.getLogger(__name__)


def approximate_lsn(planet: Planet, home: Planet) -> int:
    """Approximate Life Support Needed to live on `planet` for natives of `home`.

    Two points per temperature class and per pressure class of difference,
    plus two points for every gas in the planet's atmosphere that is not in
    the home atmosphere. Oxygen always counts as present at home. This ignores
    a species' own neutral and poison gases, hence "approximate".
    """
    lsn = 2 * abs(planet.temperature_class - home.temperature_class)
    lsn += 2 * abs(planet.pressure_class - home.pressure_class)

    required = set(home.gases) | {Gas.O2}
    for gas in planet.gases:
        if gas not in required:
            lsn += 2
    return lsn


def score_home_system(planets: Iterable[Planet], home: Planet) -> int:
    """Sum 20000 / ((3 + LSN) * (50 + mining difficulty)) over every planet."""
    score = 0
    for planet in planets:
        lsn = approximate_lsn(planet, home)
        score += HOME_SYSTEM_SCORE_NUMERATOR // ((3 + lsn) * (50 + planet.mining_difficulty))
    return score


def is_viable_score(score: int) -> bool:
    """Only 54, 55 and 56 are viable. The band was found by trial and error."""
    low, high = HOME_SYSTEM_SCORE_RANGE
    return low < score < high


def evaluate_home_system(planets: Sequence[Planet]) -> Optional[Planet]:
    """Confirm or revoke the Earth-like planet of a star system.

    Args:
        planets: All planets of one star system

    Returns:
        The home planet if the system has an Earth-like planet and passes the
        viability test, otherwise None
    """
    home = next((p for p in planets if p.special is PlanetSpecial.IDEAL_HOME_PLANET), None)
    if home is None:
        return None

    score = score_home_system(planets, home)
    viable = is_viable_score(score)
    logger.debug(
        "star %d: home planet candidate orbit %d scored %d (%s)",
        home.star_id,
        home.orbit,
        score,
        "viable" if viable else "revoked",
    )
    return home if viable else None

"""Generation parameters and size suggestions."""

from pydantic import BaseModel, ValidationError, field_validator

from ..utils.constants import (
    HISTORICAL_DEFAULT_SEED,
    MAX_RADIUS,
    MAX_SEED,
    MAX_SPECIES,
    MAX_STARS,
    MIN_RADIUS,
    MIN_SPECIES,
    MIN_STARS,
    STANDARD_GALACTIC_RADIUS,
    STANDARD_NUMBER_OF_SPECIES,
    STANDARD_NUMBER_OF_STAR_SYSTEMS,
)
from .errors import ConfigurationError


class GalaxyParams(BaseModel):
    """Validated parameters for one galaxy generation run."""

    radius: int
    num_stars: int
    num_species: int
    seed: int = 0
    earth_like: bool = True  # Offer every star system an Earth-like planet
    easier_mining: bool = False

    @field_validator("radius")
    @classmethod
    def check_radius(cls, v: int) -> int:
        if not (MIN_RADIUS <= v <= MAX_RADIUS):
            raise ValueError(
                f"galaxy must have a radius between {MIN_RADIUS} and {MAX_RADIUS} parsecs"
            )
        return v

    @field_validator("num_stars")
    @classmethod
    def check_num_stars(cls, v: int) -> int:
        if not (MIN_STARS <= v <= MAX_STARS):
            raise ValueError(f"galaxy must have between {MIN_STARS} and {MAX_STARS} star systems")
        return v

    @field_validator("num_species")
    @classmethod
    def check_num_species(cls, v: int) -> int:
        if not (MIN_SPECIES <= v <= MAX_SPECIES):
            raise ValueError(f"galaxy must have between {MIN_SPECIES} and {MAX_SPECIES} species")
        return v

    @field_validator("seed")
    @classmethod
    def check_seed(cls, v: int) -> int:
        if not (0 <= v <= MAX_SEED):
            raise ValueError("seed must be an unsigned 64-bit integer")
        # zero means "use the historical default"
        return v or HISTORICAL_DEFAULT_SEED


def validate_params(**kwargs) -> GalaxyParams:
    """Build GalaxyParams, reporting problems as ConfigurationError.

    Raises:
        ConfigurationError: If any parameter is missing or out of bounds
    """
    try:
        return GalaxyParams(**kwargs)
    except ValidationError as e:
        messages = []
        for err in e.errors():
            cause = err.get("ctx", {}).get("error")
            messages.append(str(cause) if cause is not None else f"{err['loc'][0]}: {err['msg']}")
        raise ConfigurationError("; ".join(messages)) from e


def suggest_sizes(num_species: int, less_crowded: bool = False) -> tuple[int, int]:
    """Suggest a star count and radius for a number of species.

    Scales the standard game (15 species, 90 stars, radius 20) to the number
    of species, keeping the standard density.

    Args:
        num_species: Number of species in the game
        less_crowded: Add 50% more stars so species take longer to meet

    Returns:
        Tuple of (number of stars, radius in parsecs)

    Raises:
        ConfigurationError: If the result would exceed the galaxy bounds
    """
    if not (MIN_SPECIES <= num_species <= MAX_SPECIES):
        raise ConfigurationError(
            f"galaxy must have between {MIN_SPECIES} and {MAX_SPECIES} species"
        )

    num_stars = (num_species * STANDARD_NUMBER_OF_STAR_SYSTEMS) // STANDARD_NUMBER_OF_SPECIES
    if less_crowded:
        num_stars = 3 * num_stars // 2
    if num_stars > MAX_STARS:
        raise ConfigurationError(f"calculation results in a number greater than {MAX_STARS} stars")

    min_volume = (
        num_stars * STANDARD_GALACTIC_RADIUS**3 // STANDARD_NUMBER_OF_STAR_SYSTEMS
    )
    radius = MIN_RADIUS
    while radius**3 < min_volume:
        radius += 1
    if radius > MAX_RADIUS:
        raise ConfigurationError(f"calculation results in a radius greater than {MAX_RADIUS} parsecs")

    return num_stars, radius

"""Galaxy generation engine."""

from .errors import ConfigurationError, GenerationCancelled, GenerationStalledError
from .galaxy_generator import (
    StarAttributes,
    check_density,
    generate_galaxy,
    generate_star_attributes,
    place_stars,
)
from .home_system import (
    approximate_lsn,
    evaluate_home_system,
    is_viable_score,
    score_home_system,
)
from .params import GalaxyParams, suggest_sizes, validate_params
from .planet_generator import format_atmosphere, generate_planets

__all__ = [
    "ConfigurationError",
    "GenerationCancelled",
    "GenerationStalledError",
    "StarAttributes",
    "check_density",
    "generate_galaxy",
    "generate_star_attributes",
    "place_stars",
    "approximate_lsn",
    "evaluate_home_system",
    "is_viable_score",
    "score_home_system",
    "GalaxyParams",
    "suggest_sizes",
    "validate_params",
    "format_atmosphere",
    "generate_planets",
]

"""Far Horizons galaxy generator.

Builds a static, reproducible universe of stars and planets from a radius,
a star count, a species count and a seed.
"""

from .engine import (
    ConfigurationError,
    GenerationCancelled,
    GenerationStalledError,
    generate_galaxy,
)
from .models import Galaxy, Planet, Star
from .utils import PRNG

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "GenerationCancelled",
    "GenerationStalledError",
    "generate_galaxy",
    "Galaxy",
    "Planet",
    "Star",
    "PRNG",
]

"""Command line entry point: create a galaxy and print a summary."""

import argparse
import logging
import sys
from typing import Optional, Sequence

from .engine import (
    ConfigurationError,
    GenerationStalledError,
    generate_galaxy,
    suggest_sizes,
)
from .models import Galaxy
from .utils.constants import MIN_RADIUS, MIN_SPECIES, MIN_STARS

logger = logging.getLogger(__name__)

EXIT_CONFIGURATION_ERROR = 2
EXIT_GENERATION_STALLED = 3


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="fhgalaxy",
        description="Create a Far Horizons galaxy",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                  # Smallest galaxy, historical default seed
  %(prog)s --radius 20 --stars 90 --species 15 --seed 42
  %(prog)s --species 15 --suggest-values    # Show suggested stars and radius, then exit
  %(prog)s --species 15 --derive-sizes --less-crowded
        """,
    )
    parser.add_argument(
        "--radius", type=int, default=MIN_RADIUS, help="radius of the galaxy in parsecs (default: 6)"
    )
    parser.add_argument(
        "--stars", type=int, default=MIN_STARS, help="number of star systems to create (default: 12)"
    )
    parser.add_argument(
        "--species", type=int, default=MIN_SPECIES, help="number of species (default: 1)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="seed for the random number generator (default: 0, the historical default seed)",
    )
    parser.add_argument(
        "--suggest-values",
        action="store_true",
        help="display suggested stars and radius for the number of species and exit",
    )
    parser.add_argument(
        "--derive-sizes",
        action="store_true",
        help="derive radius and number of stars from the number of species",
    )
    parser.add_argument(
        "--less-crowded",
        action="store_true",
        help="increase the number of stars by 50%% for slower-paced games",
    )
    parser.add_argument(
        "--easier-mining", action="store_true", help="use the easier mining difficulty range"
    )
    parser.add_argument(
        "--no-earth-like",
        action="store_true",
        help="do not generate Earth-like planets or potential home systems",
    )
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    return parser


def print_galaxy(galaxy: Galaxy) -> None:
    """Print one line per star system."""
    print(
        f"galaxy: radius {galaxy.radius}, {len(galaxy.stars)} stars, "
        f"{len(galaxy.planets)} planets, {galaxy.num_species} species, seed {galaxy.seed}"
    )
    for star in galaxy.stars:
        home = " home" if star.home_system else ""
        print(
            f"star {star.id:6d}: {star.coords} {star.coords.distance():12.4f} "
            f"type {star.type.value!r} color {star.color.name:<12s} size {star.size} "
            f"planets {star.num_planets:2d}{home}"
        )
    print(f"{len(galaxy.home_systems())} potential home systems")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    logger.debug("arguments: %s", vars(args))

    radius, num_stars = args.radius, args.stars
    if args.suggest_values or args.derive_sizes:
        try:
            num_stars, radius = suggest_sizes(args.species, args.less_crowded)
        except ConfigurationError as e:
            print(f"error: {e}", file=sys.stderr)
            return EXIT_CONFIGURATION_ERROR
        density = "a less crowded" if args.less_crowded else "a normal density"
        print(f"for {args.species} species, {num_stars} stars are needed for {density} galaxy.")
        print(f"for {num_stars} stars, a radius of {radius} should be large enough.")
        if not args.derive_sizes:
            return 0

    try:
        galaxy = generate_galaxy(
            radius,
            num_stars,
            args.species,
            args.seed,
            earth_like=not args.no_earth_like,
            easier_mining=args.easier_mining,
        )
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_CONFIGURATION_ERROR
    except GenerationStalledError as e:
        print(f"error: {e} (try another seed)", file=sys.stderr)
        return EXIT_GENERATION_STALLED

    print_galaxy(galaxy)
    return 0


if __name__ == "__main__":
    sys.exit(main())

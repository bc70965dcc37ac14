"""Stellar Forge - command line entry point.

Generates a universe from a seed, optionally opens the first few star
systems, prints a summary, and can save the result as JSON.
"""

import argparse
import logging
import sys
from collections import Counter

from .engine import InMemorySystemCache, build_universe, enter_system
from .models import UniverseData
from .utils import DEFAULT_GALAXY_SEED, GALAXY_RADIUS, VERSION
from .utils.serialization import load_universe, save_universe


def print_summary(universe: UniverseData) -> None:
    """Print a human-readable overview of a universe."""
    print("\n" + "=" * 60)
    print(f"Stellar Forge {universe.metadata.version} - {universe.mode} universe")
    print("=" * 60)
    print(f"Seed:        {universe.metadata.seed}")
    print(f"Stars:       {len(universe.stars)}")
    print(f"Nebulas:     {len(universe.nebulas)}")
    print(f"Warp lanes:  {len(universe.warp_lanes)}")
    print(f"Systems:     {len(universe.systems)}")

    classes = Counter(star.spectral_class for star in universe.stars)
    if classes:
        breakdown = ", ".join(f"{cls}={classes[cls]}" for cls in "OBAFGKM" if classes[cls])
        print(f"\nSpectral classes: {breakdown}")

    planet_types = Counter(
        planet.type.value for system in universe.systems for planet in system.planets
    )
    if planet_types:
        print("\nPlanet types:")
        for planet_type, count in planet_types.most_common():
            print(f"  {planet_type:<16} {count}")

    for lane in universe.warp_lanes:
        print(f"  {lane.name}: {len(lane.path)} stars, {lane.distance:.0f} units")


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Stellar Forge - Deterministic procedural universe generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                  # Default galaxy (seed 12345)
  %(prog)s --seed 42 --stars 500            # Smaller galaxy with another seed
  %(prog)s --systems 10 --save galaxy.json  # Open 10 systems and save
  %(prog)s --load galaxy.json               # Summarize a saved universe
        """,
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=DEFAULT_GALAXY_SEED,
        help=f"Galaxy seed (default: {DEFAULT_GALAXY_SEED})",
    )
    parser.add_argument("--stars", type=int, default=1000, help="Number of stars (default: 1000)")
    parser.add_argument("--nebulas", type=int, default=30, help="Number of nebulas (default: 30)")
    parser.add_argument("--lanes", type=int, default=12, help="Number of warp lanes (default: 12)")
    parser.add_argument(
        "--galaxy-radius",
        type=float,
        default=GALAXY_RADIUS,
        help=f"Radius that warp lane bounds scale with (default: {GALAXY_RADIUS:g})",
    )
    parser.add_argument(
        "--systems",
        type=int,
        default=0,
        metavar="N",
        help="Generate planetary systems for the first N stars",
    )
    parser.add_argument("--load", type=str, metavar="FILE", help="Load universe from JSON file")
    parser.add_argument("--save", type=str, metavar="FILE", help="Save universe to JSON file")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")

    args = parser.parse_args()

    log_level = logging.DEBUG if args.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    if args.load:
        print(f"Loading universe from {args.load}...")
        try:
            universe = load_universe(args.load)
        except FileNotFoundError:
            print(f"Error: File {args.load} not found.")
            sys.exit(1)
        except ValueError as e:
            print(f"Error loading universe: {e}")
            sys.exit(1)
    else:
        print(f"Generating universe with seed {args.seed}...")
        try:
            universe = build_universe(
                args.seed, args.stars, args.nebulas, args.lanes, galaxy_radius=args.galaxy_radius
            )
        except ValueError as e:
            print(f"Error: {e}")
            sys.exit(1)

    if args.systems > 0:
        seed = universe.metadata.seed if universe.metadata.seed is not None else args.seed
        cache = InMemorySystemCache()
        for system in universe.systems:
            cache.put(system.star_id, system)
        for star in universe.stars[: args.systems]:
            if star.id not in cache:
                universe.systems.append(enter_system(star, seed, cache))

    print_summary(universe)

    if args.save:
        path = save_universe(universe, args.save)
        print(f"\nUniverse saved to {path}")


if __name__ == "__main__":
    main()

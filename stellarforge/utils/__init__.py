"""Utility functions and constants for Stellar Forge."""

from .constants import (
    DEFAULT_GALAXY_SEED,
    GALAXY_RADIUS,
    NEBULA_SEED,
    STAR_MAX_DISTANCE,
    STAR_MIN_DISTANCE,
    VERSION,
    WARP_SEED,
)
from .distance import euclidean_distance
from .rng import SeededStream, seeded_random

__all__ = [
    "DEFAULT_GALAXY_SEED",
    "GALAXY_RADIUS",
    "NEBULA_SEED",
    "STAR_MAX_DISTANCE",
    "STAR_MIN_DISTANCE",
    "VERSION",
    "WARP_SEED",
    "euclidean_distance",
    "SeededStream",
    "seeded_random",
]

"""Nebula placement biased toward dense star regions."""

import logging
import math
from dataclasses import dataclass
from typing import Sequence

from ..models import Nebula, Star
from ..utils import NEBULA_SEED, SeededStream
from ..utils.constants import (
    NEBULA_EMISSION_PROB,
    NEBULA_FIELD_DISTANCE_RANGE,
    NEBULA_GRID_CELL_SIZE,
    NEBULA_HOTSPOT_FRACTION,
    NEBULA_HOTSPOT_MIN_STARS,
    NEBULA_HOTSPOT_OFFSET_RANGE,
    NEBULA_HOTSPOT_PROB,
    NEBULA_MIN_HOTSPOTS,
    NEBULA_SEED_STRIDE,
)
from ..utils.distance import add, scale
from ..utils.naming import NEBULA_NAMES
from .star_generator import require_int

logger = logging.getLogger(__name__)

EMISSION_COLORS = ["#ff6b6b", "#ff8e8e", "#ffb3ba", "#ff69b4", "#ff1493"]
REFLECTION_COLORS = ["#4d79ff", "#66b3ff", "#99ccff", "#b3d9ff", "#87ceeb"]
EMISSION_RADIUS_RANGE = (30.0, 110.0)
REFLECTION_RADIUS_RANGE = (15.0, 55.0)

COMPOSITIONS = [
    "Hydrogen and Helium",
    "Ionized Hydrogen",
    "Dust and Gas",
    "Carbon and Oxygen",
    "Silicon and Iron",
    "Molecular Hydrogen",
]

# Draw offsets within a nebula's stream
_PLACEMENT = 1
_HOTSPOT = 2
_DISTANCE = 3
_DIRECTION = 4  # uses 4 and 5
_TYPE = 6
_COLOR = 7
_RADIUS = 8
_NAME = 9
_COMPOSITION = 10


@dataclass
class Hotspot:
    """A grid cell crowded with stars."""

    cell: tuple[int, int, int]
    center: tuple[float, float, float]
    star_count: int
    total_mass: float
    weight: float  # log(star_count) * total_mass


def build_density_map(
    stars: Sequence[Star],
    cell_size: float = NEBULA_GRID_CELL_SIZE,
    min_stars: int = NEBULA_HOTSPOT_MIN_STARS,
) -> list[Hotspot]:
    """Bucket stars into a 3D grid and return the crowded cells.

    Args:
        stars: Star population
        cell_size: Edge length of a grid cell
        min_stars: Minimum stars for a cell to count as a hotspot

    Returns:
        Hotspots sorted by descending weight (ties broken by cell index)
    """
    if cell_size <= 0:
        raise ValueError(f"Invalid cell_size: {cell_size} (must be > 0)")

    counts: dict[tuple[int, int, int], int] = {}
    masses: dict[tuple[int, int, int], float] = {}
    for star in stars:
        cell = tuple(math.floor(coord / cell_size) for coord in star.position)
        counts[cell] = counts.get(cell, 0) + 1
        masses[cell] = masses.get(cell, 0.0) + star.mass

    hotspots = [
        Hotspot(
            cell=cell,
            center=tuple((c + 0.5) * cell_size for c in cell),
            star_count=count,
            total_mass=masses[cell],
            weight=math.log(count) * masses[cell],
        )
        for cell, count in counts.items()
        if count >= min_stars
    ]
    hotspots.sort(key=lambda h: (-h.weight, h.cell))
    return hotspots


def generate_nebulas(
    count: int,
    stars: Sequence[Star] | None = None,
    seed: int = NEBULA_SEED,
) -> list[Nebula]:
    """Place decorative nebulas, favouring dense star regions when stars are given.

    Algorithm:
    1. Build a density map from the stars and keep the heaviest
       max(10, 0.4 * count) hotspots
    2. For each nebula, with probability 0.7 (hotspots permitting) offset it
       200-1000 units from a weight-sampled hotspot; otherwise place it
       800-9447 units from the galactic origin
    3. 60% emission (warm, large) / 40% reflection (cool, small)

    Args:
        count: Number of nebulas (zero or negative yields an empty list)
        stars: Optional star population for density biasing
        seed: Placement seed

    Returns:
        List of nebulas

    Raises:
        ValueError: If count or seed is not an integer
    """
    require_int("count", count)
    require_int("seed", seed)
    if count <= 0:
        return []

    hotspots: list[Hotspot] = []
    if stars:
        keep = max(NEBULA_MIN_HOTSPOTS, int(NEBULA_HOTSPOT_FRACTION * count))
        hotspots = build_density_map(stars)[:keep]
        logger.debug(f"Nebula density map: {len(hotspots)} hotspots from {len(stars)} stars")

    weighted = [(hotspot, hotspot.weight) for hotspot in hotspots if hotspot.weight > 0]
    root = SeededStream(seed)
    nebulas = [
        _generate_nebula(root.child(i * NEBULA_SEED_STRIDE), i, weighted) for i in range(count)
    ]

    logger.info(f"Generated {len(nebulas)} nebulas ({len(weighted)} hotspots)")
    return nebulas


def _generate_nebula(
    stream: SeededStream, index: int, weighted: list[tuple[Hotspot, float]]
) -> Nebula:
    """Generate a single nebula from its own stream."""
    direction = stream.unit_vector(_DIRECTION)
    if weighted and stream.chance(_PLACEMENT, NEBULA_HOTSPOT_PROB):
        hotspot = stream.weighted_choice(_HOTSPOT, weighted)
        offset = stream.uniform(_DISTANCE, *NEBULA_HOTSPOT_OFFSET_RANGE)
        position = add(hotspot.center, scale(direction, offset))
    else:
        distance = stream.uniform(_DISTANCE, *NEBULA_FIELD_DISTANCE_RANGE)
        position = scale(direction, distance)

    if stream.chance(_TYPE, NEBULA_EMISSION_PROB):
        nebula_type = "emission"
        color = stream.choice(_COLOR, EMISSION_COLORS)
        radius = stream.uniform(_RADIUS, *EMISSION_RADIUS_RANGE)
    else:
        nebula_type = "reflection"
        color = stream.choice(_COLOR, REFLECTION_COLORS)
        radius = stream.uniform(_RADIUS, *REFLECTION_RADIUS_RANGE)

    return Nebula(
        id=f"nebula-{index:03d}",
        name=f"{stream.choice(_NAME, NEBULA_NAMES)} Nebula",
        position=position,
        radius=radius,
        color=color,
        composition=stream.choice(_COMPOSITION, COMPOSITIONS),
        type=nebula_type,
    )

"""Assemble a complete universe document from a single seed."""

import logging
from datetime import datetime, timezone

from ..models import UniverseData, UniverseMetadata
from ..utils import GALAXY_RADIUS, NEBULA_SEED, VERSION, WARP_SEED
from .nebula_placer import generate_nebulas
from .star_generator import generate_stars
from .warp_lane_generator import generate_warp_lanes

logger = logging.getLogger(__name__)


def build_universe(
    seed: int,
    star_count: int,
    nebula_count: int,
    lane_count: int,
    galaxy_radius: float = GALAXY_RADIUS,
    mode: str = "sandbox",
) -> UniverseData:
    """Generate stars, density-aware nebulas and warp lanes.

    Systems are left empty; they are generated lazily when a star is
    entered. Nebula and lane streams are offset from the galaxy seed so a
    different galaxy also gets different nebulas and lanes.

    Args:
        seed: Galaxy seed
        star_count: Number of stars
        nebula_count: Number of nebulas
        lane_count: Desired number of warp lanes
        galaxy_radius: Radius that warp lane bounds scale with
        mode: "sandbox" or "lore"

    Returns:
        UniverseData stamped with version and timestamps
    """
    stars = generate_stars(seed, star_count)
    nebulas = generate_nebulas(nebula_count, stars, seed=NEBULA_SEED + seed)
    warp_lanes = generate_warp_lanes(stars, galaxy_radius, lane_count, seed=WARP_SEED + seed)

    now = datetime.now(timezone.utc).isoformat()
    universe = UniverseData(
        mode=mode,
        metadata=UniverseMetadata(version=VERSION, created=now, modified=now, seed=seed),
        stars=stars,
        nebulas=nebulas,
        warp_lanes=warp_lanes,
    )
    logger.info(
        f"Built {mode} universe (seed={seed}): {len(stars)} stars, "
        f"{len(nebulas)} nebulas, {len(warp_lanes)} warp lanes"
    )
    return universe

"""Warp lane generation: long multi-hop routes snapped onto real stars."""

import colorsys
import logging
import math
from dataclasses import dataclass
from typing import Sequence

from ..models import Star, WarpLane
from ..utils import WARP_SEED, SeededStream, euclidean_distance
from ..utils.constants import LANE_SEED_STRIDE
from ..utils.distance import add, project_onto_segment, quadratic_bezier, scale

logger = logging.getLogger(__name__)

GOLDEN_ANGLE = 137.508  # Degrees of hue between consecutive lanes


@dataclass
class WarpLaneConfig:
    """Tunable bounds for lane construction.

    Factors are multiplied by the galaxy radius.
    """

    min_separation_factor: float = 0.6  # Start/end must be at least this far apart
    hop_spacing_factor: float = 0.1  # Target distance per hop
    min_hops: int = 4
    control_offset_factor: float = 0.4  # Bézier control point displacement
    max_deviation_factor: float = 0.2  # Refinement corridor half-width
    refinements_per_segment: int = 3
    max_attempts_per_lane: int = 12
    max_stars: int = 500  # Working set cap

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.min_hops < 2:
            raise ValueError(f"Invalid min_hops: {self.min_hops} (must be >= 2)")
        if self.max_attempts_per_lane < 1:
            raise ValueError(
                f"Invalid max_attempts_per_lane: {self.max_attempts_per_lane} (must be >= 1)"
            )
        if self.refinements_per_segment < 0:
            raise ValueError(
                f"Invalid refinements_per_segment: {self.refinements_per_segment} (must be >= 0)"
            )


def lane_color(lane_index: int) -> str:
    """Hue-rotated display color for the n-th lane.

    Examples:
        >>> lane_color(0)
        '#f61313'
    """
    hue = (lane_index * GOLDEN_ANGLE % 360) / 360
    r, g, b = colorsys.hls_to_rgb(hue, 0.52, 0.93)
    return f"#{round(r * 255):02x}{round(g * 255):02x}{round(b * 255):02x}"


def path_distance(path: Sequence[Star]) -> float:
    """Sum of straight-line hop distances along a path of stars."""
    return sum(euclidean_distance(a.position, b.position) for a, b in zip(path, path[1:]))


def generate_warp_lanes(
    stars: Sequence[Star],
    galaxy_radius: float,
    lane_count: int,
    seed: int = WARP_SEED,
    config: WarpLaneConfig | None = None,
) -> list[WarpLane]:
    """Build long-distance routes between far-apart stars.

    Algorithm (per lane):
    1. Pick an unused start and an unused end at least 0.6 * radius away
    2. Lay waypoints on a quadratic Bézier bowed by a random control point
       and snap each to the nearest unclaimed star
    3. Refine every coarse segment by inserting up to 3 stars that lie
       inside a corridor along it, moving strictly forward
    4. Mark every star on the path as used so no later lane can reuse it

    A lane that cannot be built within the retry ceiling is skipped, so
    fewer than ``lane_count`` lanes may come back for sparse populations.

    Args:
        stars: Star population (only the first ``config.max_stars`` are used)
        galaxy_radius: Galaxy-scale radius that all distance bounds scale with
        lane_count: Desired number of lanes
        seed: Lane seed
        config: Optional tuning overrides

    Returns:
        List of lanes; no star id appears in more than one lane

    Raises:
        ValueError: If galaxy_radius is not positive and finite, or lane_count/seed
            is not an integer
    """
    if isinstance(lane_count, bool) or not isinstance(lane_count, int):
        raise ValueError(f"Invalid lane_count: {lane_count!r} (must be an integer)")
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise ValueError(f"Invalid seed: {seed!r} (must be an integer)")
    if not isinstance(galaxy_radius, (int, float)) or not math.isfinite(galaxy_radius) or galaxy_radius <= 0:
        raise ValueError(f"Invalid galaxy_radius: {galaxy_radius!r} (must be > 0)")

    config = config or WarpLaneConfig()
    working = list(stars[: config.max_stars])
    if lane_count <= 0 or len(working) < 2:
        return []

    by_id = {star.id: star for star in working}
    root = SeededStream(seed)
    used: frozenset[str] = frozenset()
    lanes: list[WarpLane] = []
    attempt = 0

    for lane_index in range(lane_count):
        path = None
        for _ in range(config.max_attempts_per_lane):
            stream = root.child(attempt * LANE_SEED_STRIDE)
            attempt += 1
            path = build_lane_path(working, used, galaxy_radius, stream, config)
            if path is not None:
                break

        if path is None:
            logger.warning(
                f"Skipping warp lane {lane_index + 1}: no valid route after "
                f"{config.max_attempts_per_lane} attempts ({len(used)}/{len(working)} stars used)"
            )
            continue

        used = used | frozenset(path)
        lanes.append(_make_lane(len(lanes), [by_id[star_id] for star_id in path]))
        logger.debug(f"Warp lane {len(lanes)}: {len(path)} stars")

    logger.info(f"Generated {len(lanes)}/{lane_count} warp lanes from {len(working)} stars")
    return lanes


def build_lane_path(
    stars: Sequence[Star],
    used: frozenset[str],
    galaxy_radius: float,
    stream: SeededStream,
    config: WarpLaneConfig,
) -> list[str] | None:
    """Attempt one lane; return its star ids, or None if this attempt fails.

    ``used`` is never modified. Stars claimed during the attempt live in a
    local set and only become used when the caller accepts the path.
    """
    available = [star for star in stars if star.id not in used]
    if len(available) < 2:
        return None

    start = stream.choice(0, available)
    min_separation = galaxy_radius * config.min_separation_factor
    ends = [
        star
        for star in available
        if star.id != start.id and euclidean_distance(start.position, star.position) >= min_separation
    ]
    if not ends:
        return None
    end = stream.choice(1, ends)

    claimed = set(used) | {start.id, end.id}
    waypoints = _snap_waypoints(stars, start, end, claimed, galaxy_radius, stream, config)
    coarse = [start, *waypoints, end]
    refined = _refine_path(coarse, stars, claimed, galaxy_radius, config)

    path: list[str] = []
    for star in refined:
        if star.id not in path:
            path.append(star.id)
    if len(path) < 2:
        return None
    return path


def _snap_waypoints(
    stars: Sequence[Star],
    start: Star,
    end: Star,
    claimed: set[str],
    galaxy_radius: float,
    stream: SeededStream,
    config: WarpLaneConfig,
) -> list[Star]:
    """Sample the bowed curve and snap each sample to the nearest free star."""
    distance = euclidean_distance(start.position, end.position)
    hop_count = max(config.min_hops, int(distance / (galaxy_radius * config.hop_spacing_factor)))

    midpoint = scale(add(start.position, end.position), 0.5)
    offset = galaxy_radius * config.control_offset_factor * stream.draw(4)
    control = add(midpoint, scale(stream.unit_vector(2), offset))

    waypoints = []
    for k in range(1, hop_count - 1):
        target = quadratic_bezier(start.position, control, end.position, k / (hop_count - 1))
        nearest = min(
            (star for star in stars if star.id not in claimed),
            key=lambda star: euclidean_distance(star.position, target),
            default=None,
        )
        if nearest is None:
            break
        claimed.add(nearest.id)
        waypoints.append(nearest)
    return waypoints


def _refine_path(
    coarse: list[Star],
    stars: Sequence[Star],
    claimed: set[str],
    galaxy_radius: float,
    config: WarpLaneConfig,
) -> list[Star]:
    """Insert intermediate stars that lie in a corridor along each segment."""
    max_deviation = galaxy_radius * config.max_deviation_factor
    refined = [coarse[0]]

    for a, b in zip(coarse, coarse[1:]):
        segment_length = euclidean_distance(a.position, b.position)
        last_along = 0.0  # Insertions must keep moving toward b

        for _ in range(config.refinements_per_segment):
            best = None
            best_score = math.inf
            best_along = last_along
            for candidate in stars:
                if candidate.id in claimed:
                    continue
                along, deviation = project_onto_segment(candidate.position, a.position, b.position)
                if along <= last_along or along >= segment_length or deviation > max_deviation:
                    continue
                score = (
                    euclidean_distance(a.position, candidate.position)
                    + euclidean_distance(candidate.position, b.position)
                    + deviation
                )
                if score < best_score:
                    best, best_score, best_along = candidate, score, along

            if best is None:
                break
            claimed.add(best.id)
            refined.append(best)
            last_along = best_along

        refined.append(b)
    return refined


def _make_lane(lane_index: int, path: list[Star]) -> WarpLane:
    return WarpLane(
        id=f"warp-lane-{lane_index}",
        name=f"Warp Route {lane_index + 1}",
        start_star_id=path[0].id,
        end_star_id=path[-1].id,
        path=[star.id for star in path],
        distance=path_distance(path),
        color=lane_color(lane_index),
        is_active=True,
    )

"""Top-level universe document."""

from dataclasses import dataclass, field

from .nebula import Nebula
from .star import Star
from .system import StarSystem
from .warp_lane import WarpLane


@dataclass
class UniverseMetadata:
    """Provenance for a universe document."""

    version: str
    created: str  # ISO-8601 timestamp
    modified: str  # ISO-8601 timestamp
    seed: int | None = None  # None for hand-built lore universes

    def __post_init__(self):
        """Validate metadata after initialization."""
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ValueError(f"Invalid seed: {self.seed!r} (must be an integer or null)")


@dataclass
class UniverseData:
    """Everything a persistence layer needs to round-trip a universe.

    Systems only contain the stars that have been entered so far; the rest
    are regenerated on demand from the seed.
    """

    mode: str  # "sandbox" or "lore"
    metadata: UniverseMetadata
    stars: list[Star] = field(default_factory=list)
    systems: list[StarSystem] = field(default_factory=list)
    nebulas: list[Nebula] = field(default_factory=list)
    warp_lanes: list[WarpLane] = field(default_factory=list)

    def __post_init__(self):
        """Validate universe data after initialization.

        Ids are unique per collection, and systems and warp lanes may only
        refer to stars in this document.
        """
        if self.mode not in ("sandbox", "lore"):
            raise ValueError(f"Invalid mode: {self.mode} (must be 'sandbox' or 'lore')")

        star_ids = _unique_ids("star", [star.id for star in self.stars])
        _unique_ids("system", [system.star_id for system in self.systems])
        _unique_ids("nebula", [nebula.id for nebula in self.nebulas])
        _unique_ids("warp lane", [lane.id for lane in self.warp_lanes])

        for system in self.systems:
            if system.star_id not in star_ids:
                raise ValueError(f"Invalid system {system.id}: unknown star {system.star_id}")

        lane_stars: set[str] = set()
        for lane in self.warp_lanes:
            unknown = [star_id for star_id in lane.path if star_id not in star_ids]
            if unknown:
                raise ValueError(f"Invalid warp lane {lane.id}: unknown star {unknown[0]}")
            shared = lane_stars.intersection(lane.path)
            if shared:
                raise ValueError(f"Invalid warp lane {lane.id}: star {min(shared)} is on another lane")
            lane_stars.update(lane.path)

    def find_star(self, star_id: str) -> Star | None:
        """Return the star with the given id, or None."""
        return next((s for s in self.stars if s.id == star_id), None)

    def find_system(self, star_id: str) -> StarSystem | None:
        """Return the generated system for a star id, or None."""
        return next((s for s in self.systems if s.star_id == star_id), None)


def _unique_ids(kind: str, ids: list[str]) -> set[str]:
    seen: set[str] = set()
    for item_id in ids:
        if item_id in seen:
            raise ValueError(f"Invalid universe: duplicate {kind} id {item_id}")
        seen.add(item_id)
    return seen

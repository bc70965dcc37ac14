"""Warp lane data model."""

from dataclasses import dataclass, field


@dataclass
class WarpLane:
    """A long-distance travel route hopping across real stars.

    The path starts at ``start_star_id``, ends at ``end_star_id`` and visits
    each star at most once.
    """

    id: str  # e.g., "warp-lane-0"
    name: str  # e.g., "Warp Route 1"
    start_star_id: str
    end_star_id: str
    path: list[str] = field(default_factory=list)  # Ordered star ids
    distance: float = 0.0  # Sum of hop distances
    color: str = "#00ffff"
    is_active: bool = True

    def __post_init__(self):
        """Validate lane data after initialization."""
        if len(self.path) < 2:
            raise ValueError(f"Invalid path: {self.path} (must contain at least 2 stars)")
        if self.path[0] != self.start_star_id or self.path[-1] != self.end_star_id:
            raise ValueError("path must begin at start_star_id and end at end_star_id")
        if len(set(self.path)) != len(self.path):
            raise ValueError(f"Invalid path: {self.path} (stars must not repeat)")
        if self.distance < 0:
            raise ValueError(f"Invalid distance: {self.distance} (must be >= 0)")

"""Procedural generation components."""

from .faction_generator import generate_factions
from .nebula_placer import generate_nebulas
from .star_generator import generate_stars
from .system_cache import InMemorySystemCache, SystemCache, enter_system
from .system_generator import generate_system, orbital_position
from .universe_builder import build_universe
from .warp_lane_generator import WarpLaneConfig, generate_warp_lanes

__all__ = [
    "generate_stars",
    "generate_nebulas",
    "generate_system",
    "generate_factions",
    "orbital_position",
    "generate_warp_lanes",
    "WarpLaneConfig",
    "SystemCache",
    "InMemorySystemCache",
    "enter_system",
    "build_universe",
]

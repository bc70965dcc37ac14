"""Data models for Stellar Forge."""

from .faction import CONTESTED_FACTION_ID, Faction
from .nebula import Nebula
from .planet import Moon, Planet, PlanetRing, PlanetType, RingComposition, SurfaceFeature
from .star import SPECTRAL_CLASSES, Star
from .system import AsteroidBelt, StarSystem
from .universe import UniverseData, UniverseMetadata
from .warp_lane import WarpLane

__all__ = [
    "CONTESTED_FACTION_ID",
    "Faction",
    "SPECTRAL_CLASSES",
    "Star",
    "Nebula",
    "PlanetType",
    "RingComposition",
    "Moon",
    "PlanetRing",
    "SurfaceFeature",
    "Planet",
    "AsteroidBelt",
    "StarSystem",
    "WarpLane",
    "UniverseData",
    "UniverseMetadata",
]

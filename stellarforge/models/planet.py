"""Planet, moon, ring and surface feature data models."""

from dataclasses import dataclass, field
from enum import Enum


class PlanetType(str, Enum):
    """Closed set of world types.

    Every per-type lookup table in the engine is keyed by this enum and must
    cover all fifteen members.
    """

    GAS_GIANT = "gas_giant"
    FROST_GIANT = "frost_giant"
    ARID_WORLD = "arid_world"
    BARREN_WORLD = "barren_world"
    DUSTY_WORLD = "dusty_world"
    GRASSLAND_WORLD = "grassland_world"
    JUNGLE_WORLD = "jungle_world"
    MARSHY_WORLD = "marshy_world"
    MARTIAN_WORLD = "martian_world"
    METHANE_WORLD = "methane_world"
    SANDY_WORLD = "sandy_world"
    SNOWY_WORLD = "snowy_world"
    TUNDRA_WORLD = "tundra_world"
    NUCLEAR_WORLD = "nuclear_world"
    OCEAN_WORLD = "ocean_world"

    @property
    def is_giant(self) -> bool:
        return self in (PlanetType.GAS_GIANT, PlanetType.FROST_GIANT)


class RingComposition(str, Enum):
    """Material a planetary ring is made of."""

    ICE = "ice"
    ROCK = "rock"
    DUST = "dust"
    MIXED = "mixed"


@dataclass
class Moon:
    """A moon owned by exactly one planet."""

    id: str  # e.g., "planet-star-3-1-moon-0"
    name: str
    radius: float  # Earth radii
    orbit_radius: float  # Distance from planet center
    orbit_speed: float


@dataclass
class PlanetRing:
    """One ring system around a planet. Radii are in planet radii."""

    id: str
    name: str
    inner_radius: float
    outer_radius: float
    thickness: float
    density: float  # 0-1, drives opacity in the renderer
    color: str
    composition: RingComposition

    def __post_init__(self):
        """Validate ring data after initialization."""
        if not (0 < self.inner_radius < self.outer_radius):
            raise ValueError(
                f"Invalid ring radii: {self.inner_radius}-{self.outer_radius} (must be 0 < inner < outer)"
            )
        if not (0 < self.density <= 1):
            raise ValueError(f"Invalid density: {self.density} (must be in (0, 1])")


@dataclass
class SurfaceFeature:
    """A named location on a planet's surface."""

    id: str
    type: str  # "city", "fort" or "landmark"
    name: str
    position: tuple[float, float]  # (latitude, longitude) in degrees
    description: str | None = None
    population: int | None = None  # Cities only
    size: str | None = None  # "small", "medium", "large"
    technology: str | None = None  # "primitive", "industrial", "advanced"
    affiliation: str | None = None

    def __post_init__(self):
        """Validate surface feature data after initialization."""
        if self.type not in ("city", "fort", "landmark"):
            raise ValueError(f"Invalid type: {self.type} (must be 'city', 'fort' or 'landmark')")


@dataclass
class Planet:
    """A planet owned by exactly one star system.

    The generator fixes the orbit (radius, speed, initial angle and
    inclination); ``position`` is the position at time zero. Callers compute
    later positions analytically and never need to mutate the planet.
    """

    id: str  # e.g., "planet-star-3-1"
    name: str
    position: tuple[float, float, float]
    radius: float  # Earth radii
    mass: float  # Earth masses
    type: PlanetType
    orbit_radius: float  # AU
    orbit_speed: float  # Radians per time unit
    rotation_speed: float
    initial_angle: float  # Radians
    inclination: float  # Radians
    temperature: float  # Kelvin
    atmosphere: list[str] = field(default_factory=list)  # Gas names, ordered
    moons: list[Moon] = field(default_factory=list)
    rings: list[PlanetRing] = field(default_factory=list)
    surface_features: list[SurfaceFeature] = field(default_factory=list)
    texture_index: int = 0  # Palette entry for the renderer
    faction: str | None = None  # Controlling faction id within the system

    def __post_init__(self):
        """Validate planet data after initialization."""
        if not isinstance(self.type, PlanetType):
            self.type = PlanetType(self.type)
        if self.radius <= 0:
            raise ValueError(f"Invalid radius: {self.radius} (must be > 0)")
        if self.orbit_radius <= 0:
            raise ValueError(f"Invalid orbit_radius: {self.orbit_radius} (must be > 0)")
        if self.texture_index < 0:
            raise ValueError(f"Invalid texture_index: {self.texture_index} (must be >= 0)")

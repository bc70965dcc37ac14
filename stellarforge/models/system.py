"""Star system and asteroid belt data models."""

from dataclasses import dataclass, field

from .faction import Faction
from .planet import Planet
from .star import Star


@dataclass
class AsteroidBelt:
    """An asteroid belt owned by a star system, independent of any planet."""

    id: str
    name: str
    inner_radius: float  # AU
    outer_radius: float  # AU
    density: float
    asteroid_count: int

    def __post_init__(self):
        """Validate belt data after initialization."""
        if not (0 < self.inner_radius < self.outer_radius):
            raise ValueError(
                f"Invalid belt radii: {self.inner_radius}-{self.outer_radius} (must be 0 < inner < outer)"
            )
        if self.asteroid_count < 0:
            raise ValueError(f"Invalid asteroid_count: {self.asteroid_count} (must be >= 0)")


@dataclass
class StarSystem:
    """Planets and belts generated for a single star.

    Systems are generated lazily the first time a star is entered and are
    expected to be cached by star id (see ``engine.system_cache``).
    """

    id: str  # "system-<star id>"
    star_id: str
    planets: list[Planet] = field(default_factory=list)  # Ordered by orbit radius
    asteroid_belts: list[AsteroidBelt] = field(default_factory=list)
    factions: list[Faction] = field(default_factory=list)
    star: Star | None = None  # Denormalized copy for convenience

    def __post_init__(self):
        """Validate system data after initialization."""
        if not self.star_id:
            raise ValueError("star_id cannot be empty")
        if self.star is not None and self.star.id != self.star_id:
            raise ValueError(f"Star copy {self.star.id} does not match star_id {self.star_id}")

        faction_ids = {faction.id for faction in self.factions}
        for planet in self.planets:
            if planet.faction is not None and planet.faction not in faction_ids:
                raise ValueError(
                    f"Invalid faction: {planet.faction} (planet {planet.id} names no faction of this system)"
                )

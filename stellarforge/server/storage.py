"""In-memory storage for the editable lore universe."""

import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any

from ..engine import InMemorySystemCache, build_universe, enter_system
from ..models import Planet, Star, StarSystem, UniverseData
from ..utils import DEFAULT_GALAXY_SEED, GALAXY_RADIUS

logger = logging.getLogger(__name__)


class LoreUniverseStore:
    """Holds the single lore universe served by the API.

    Systems are generated on first request and appended to the universe so
    later edits to their planets are kept alongside the stars.
    """

    def __init__(self):
        self.universe: UniverseData | None = None
        self.cache = InMemorySystemCache()

    def clear(self) -> None:
        self.universe = None
        self.cache.clear()

    def generate(
        self,
        seed: int,
        star_count: int,
        nebula_count: int,
        lane_count: int,
        galaxy_radius: float = GALAXY_RADIUS,
    ) -> UniverseData:
        """Build a fresh lore universe and make it current."""
        universe = build_universe(
            seed, star_count, nebula_count, lane_count, galaxy_radius=galaxy_radius, mode="lore"
        )
        self.replace(universe)
        return universe

    def replace(self, universe: UniverseData) -> None:
        """Make ``universe`` current, seeding the cache with its saved systems."""
        self.universe = universe
        self.cache.clear()
        for system in universe.systems:
            self.cache.put(system.star_id, system)
        logger.info(
            f"Lore universe loaded: {len(universe.stars)} stars, {len(universe.systems)} systems"
        )

    def get_star(self, star_id: str) -> Star | None:
        if self.universe is None:
            return None
        return self.universe.find_star(star_id)

    def system_for(self, star_id: str) -> StarSystem | None:
        """Return the star's system, generating it on first request.

        Returns:
            The system, or None if there is no universe or no such star
        """
        star = self.get_star(star_id)
        if star is None:
            return None

        seed = self.universe.metadata.seed
        if seed is None:
            seed = DEFAULT_GALAXY_SEED
        system = enter_system(star, seed, self.cache)
        if self.universe.find_system(star_id) is None:
            self.universe.systems.append(system)
            self._touch()
        return system

    def update_star(self, star_id: str, updates: dict[str, Any]) -> Star | None:
        """Apply field updates to a star.

        Raises:
            ValueError: If the updated star fails validation
        """
        star = self.get_star(star_id)
        if star is None:
            return None

        updated = replace(star, **updates)
        stars = self.universe.stars
        stars[stars.index(star)] = updated

        system = self.universe.find_system(star_id)
        if system is not None:
            system.star = replace(updated)

        self._touch()
        logger.info(f"Updated star {star_id}: {sorted(updates)}")
        return updated

    def update_planet(self, planet_id: str, updates: dict[str, Any]) -> Planet | None:
        """Apply field updates to a planet in an already generated system.

        Raises:
            ValueError: If the updated planet fails validation
        """
        if self.universe is None:
            return None

        for system in self.universe.systems:
            for i, planet in enumerate(system.planets):
                if planet.id == planet_id:
                    updated = replace(planet, **updates)
                    system.planets[i] = updated
                    self._touch()
                    logger.info(f"Updated planet {planet_id}: {sorted(updates)}")
                    return updated
        return None

    def _touch(self) -> None:
        self.universe.metadata.modified = datetime.now(timezone.utc).isoformat()

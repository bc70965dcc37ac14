"""Lazy system generation backed by a cache keyed by star id."""

import logging
from typing import Protocol

from ..models import Star, StarSystem
from .system_generator import generate_system

logger = logging.getLogger(__name__)


class SystemCache(Protocol):
    """Anything that can store and return systems by star id."""

    def get(self, star_id: str) -> StarSystem | None: ...

    def put(self, star_id: str, system: StarSystem) -> None: ...


class InMemorySystemCache:
    """Dict-backed cache with no eviction.

    Entries are never invalidated: a system is a pure function of its
    star and seed.
    """

    def __init__(self):
        self._systems: dict[str, StarSystem] = {}

    def get(self, star_id: str) -> StarSystem | None:
        return self._systems.get(star_id)

    def put(self, star_id: str, system: StarSystem) -> None:
        self._systems[star_id] = system

    def clear(self) -> None:
        self._systems.clear()

    def __len__(self) -> int:
        return len(self._systems)

    def __contains__(self, star_id: object) -> bool:
        return star_id in self._systems


def enter_system(star: Star, seed: int, cache: SystemCache) -> StarSystem:
    """Return the star's system, generating and caching it on first visit.

    Args:
        star: Star being entered
        seed: Galaxy seed
        cache: Cache to read from and store into

    Returns:
        The star's planetary system
    """
    system = cache.get(star.id)
    if system is not None:
        logger.debug(f"System cache hit for {star.id}")
        return system

    logger.debug(f"System cache miss for {star.id}, generating")
    system = generate_system(star, seed)
    cache.put(star.id, system)
    return system

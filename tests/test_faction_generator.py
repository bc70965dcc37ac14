"""Tests for faction assignment."""

from collections import Counter

import pytest

from stellarforge.engine import generate_stars, generate_system
from stellarforge.engine.faction_generator import (
    FACTION_SUFFIXES,
    GOALS_PER_FACTION,
    contested_faction,
    generate_factions,
)
from stellarforge.models import CONTESTED_FACTION_ID
from stellarforge.utils import SeededStream

SEED = 4242


@pytest.fixture(scope="module")
def systems():
    return [generate_system(star, SEED) for star in generate_stars(SEED, 200)]


def fresh_planets(system):
    """Copies of a system's planets with no faction assigned."""
    planets = generate_system(system.star, SEED).planets
    for planet in planets:
        planet.faction = None
    return planets


class TestGenerateFactions:
    """Test faction assignment over generated systems."""

    def test_empty_system_has_no_factions(self):
        """No planets, no factions."""
        assert generate_factions([], SeededStream(1)) == []

    def test_every_planet_assigned(self, systems):
        """Every planet names a faction listed by its system."""
        for system in systems:
            if not system.planets:
                assert system.factions == []
                continue
            assert system.factions[0].id == CONTESTED_FACTION_ID
            ids = {faction.id for faction in system.factions}
            assert len(ids) == len(system.factions)
            for planet in system.planets:
                assert planet.faction in ids

    def test_split_or_dominated(self, systems):
        """A system is either held by one faction or split with one contested planet."""
        dominated = 0
        for system in (s for s in systems if len(s.planets) >= 2):
            owners = Counter(planet.faction for planet in system.planets)
            if len(owners) == 1:
                dominated += 1
                assert len(system.factions) == 2
                assert CONTESTED_FACTION_ID not in owners
            else:
                assert owners[CONTESTED_FACTION_ID] == 1
                assert len(system.factions) == len(system.planets)
                assert all(count == 1 for count in owners.values())
        assert dominated < len(systems) // 2

    def test_factions_founded_on_planets(self, systems):
        """Non-contested factions take their homeworld's name."""
        for system in systems:
            planets = {planet.id: planet for planet in system.planets}
            for faction in system.factions:
                if faction.is_contested:
                    assert faction.homeworld_id is None
                    continue
                homeworld = planets[faction.homeworld_id]
                assert faction.id == f"faction-{homeworld.id}"
                assert faction.name.startswith(homeworld.name + " ")
                assert faction.name.rsplit(" ", 1)[1] in FACTION_SUFFIXES
                assert len(faction.goals) == GOALS_PER_FACTION
                assert len(set(faction.goals)) == GOALS_PER_FACTION
                assert 0 <= faction.influence <= 99
                assert faction.resources["food"] == 1000

    def test_deterministic(self, systems):
        """Same planets and stream give the same factions."""
        system = next(s for s in systems if len(s.planets) >= 3)
        first = fresh_planets(system)
        second = fresh_planets(system)

        assert generate_factions(first, SeededStream(99)) == generate_factions(second, SeededStream(99))
        assert [p.faction for p in first] == [p.faction for p in second]

    def test_single_planet(self, systems):
        """A lone planet either founds the only faction or stays contested."""
        system = next(s for s in systems if s.planets)
        planet = fresh_planets(system)[0]
        factions = generate_factions([planet], SeededStream(7))

        assert factions[0] == contested_faction()
        if len(factions) == 1:
            assert planet.faction == CONTESTED_FACTION_ID
        else:
            assert planet.faction == factions[1].id

    def test_description_names_world_type(self, systems):
        """Descriptions mention the homeworld's type in plain words."""
        for system in systems:
            for faction in system.factions[1:]:
                homeworld = next(p for p in system.planets if p.id == faction.homeworld_id)
                assert homeworld.type.value.replace("_", " ") in faction.description

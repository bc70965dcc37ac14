"""Seeded faction assignment for the planets of a system."""

from ..models import CONTESTED_FACTION_ID, Faction, Planet
from ..utils import SeededStream

DOMINATION_CHANCE = 0.1  # One faction holds every planet

FACTION_SUFFIXES = [
    "Consortium",
    "Federation",
    "Syndicate",
    "Dominion",
    "Alliance",
    "Conglomerate",
    "Union",
    "Guild",
    "Assembly",
    "Kingdom",
    "Republic",
    "Empire",
    "League",
    "Coalition",
    "Corporation",
    "Collective",
    "Tsardom",
]
LEADER_TITLES = ["Admiral", "President", "Chancellor", "Overseer", "Director", "Warlord", "Commander"]
LEADER_NAMES = ["Tarn", "Vale", "Korr", "Saren", "Dray", "Zane", "Myra", "Quinn", "Lex"]
GOALS = [
    "Expand influence",
    "Secure trade routes",
    "Dominate local system",
    "Advance technology",
    "Preserve cultural identity",
    "Mine rare resources",
    "Build megastructures",
]
GOALS_PER_FACTION = 2
BASE_FOOD = 1000

# Draw offsets
_DOMINATED = 0
_DOMINANT_PLANET = 1
_SHUFFLE = 10  # one draw per planet
_FACTION_STREAM = 1000  # child stream per planet index


def contested_faction() -> Faction:
    """The placeholder faction for planets no one controls."""
    return Faction(
        id=CONTESTED_FACTION_ID,
        name="Contested Zone",
        description="An area with no clear faction control, contested by various groups.",
        leader="Unknown",
    )


def generate_factions(planets: list[Planet], stream: SeededStream) -> list[Faction]:
    """Create factions for a system and set ``planet.faction`` on every planet.

    With a 10% chance one faction, founded on a random planet, holds the
    whole system. Otherwise the planets are shuffled and all but the last
    found a faction of their own; the last one stays contested. The
    contested faction is always listed first.

    Args:
        planets: The system's planets, modified in place
        stream: Faction stream of the system

    Returns:
        Factions of the system (empty when there are no planets)
    """
    if not planets:
        return []

    factions = [contested_faction()]
    if stream.chance(_DOMINATED, DOMINATION_CHANCE):
        founder = stream.choice(_DOMINANT_PLANET, planets)
        faction = _found_faction(founder, stream.child((planets.index(founder) + 1) * _FACTION_STREAM))
        factions.append(faction)
        for planet in planets:
            planet.faction = faction.id
        return factions

    order = sorted(range(len(planets)), key=lambda i: (stream.draw(_SHUFFLE + i), i))
    for i in order[:-1]:
        faction = _found_faction(planets[i], stream.child((i + 1) * _FACTION_STREAM))
        factions.append(faction)
        planets[i].faction = faction.id
    planets[order[-1]].faction = CONTESTED_FACTION_ID
    return factions


def _found_faction(planet: Planet, stream: SeededStream) -> Faction:
    goal_order = sorted(range(len(GOALS)), key=lambda g: (stream.draw(10 + g), g))
    return Faction(
        id=f"faction-{planet.id}",
        name=f"{planet.name} {stream.choice(0, FACTION_SUFFIXES)}",
        description=f"A faction based on the {planet.type.value.replace('_', ' ')} of {planet.name}.",
        leader=f"{stream.choice(1, LEADER_TITLES)} {stream.choice(2, LEADER_NAMES)}",
        homeworld_id=planet.id,
        influence=stream.randint(3, 0, 99),
        goals=[GOALS[g] for g in sorted(goal_order[:GOALS_PER_FACTION])],
        resources={
            "credits": stream.randint(4, 0, 99_999),
            "minerals": stream.randint(5, 0, 49_999),
            "energy": stream.randint(6, 0, 39_999),
            "food": BASE_FOOD,
        },
    )

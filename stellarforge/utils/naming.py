"""Deterministic naming tables for stars, planets, moons and rings.

Names are indexed by position rather than drawn at random, so a given
element always carries the same name regardless of what else was generated.
"""

# Greek-letter prefixes for star names (24 entries)
STAR_PREFIXES = [
    "Alpha", "Beta", "Gamma", "Delta", "Epsilon", "Zeta", "Eta", "Theta",
    "Iota", "Kappa", "Lambda", "Mu", "Nu", "Xi", "Omicron", "Pi",
    "Rho", "Sigma", "Tau", "Upsilon", "Phi", "Chi", "Psi", "Omega",
]

# Constellation suffixes for star names (16 entries)
STAR_SUFFIXES = [
    "Centauri", "Draconis", "Lyrae", "Cygni", "Orionis", "Ursae",
    "Andromedae", "Cassiopeiae", "Persei", "Aquilae", "Bootis",
    "Coronae", "Geminorum", "Leonis", "Scorpii", "Tauri",
]

HOME_STAR_NAME = "Sol"

PLANET_LETTERS = ["α", "β", "γ", "δ", "ε", "ζ", "η", "θ"]

ROMAN_NUMERALS = [
    "I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX", "X",
]

NEBULA_NAMES = [
    "Orion", "Eagle", "Horsehead", "Cat's Eye", "Rosette", "Helix",
    "Ring", "Crab", "Veil", "Swan", "Lagoon", "Trifid", "Flame",
    "Witch Head", "Heart", "Soul", "North", "Pelican",
]


def star_name(index: int) -> str:
    """Return the name for the star at a given index.

    Index 0 is always the home star. Others cycle through the prefix and
    suffix tables: the suffix advances every star, the prefix every 16.

    Examples:
        >>> star_name(0)
        'Sol'
        >>> star_name(1)
        'Alpha Draconis'
        >>> star_name(16)
        'Beta Centauri'
    """
    if index == 0:
        return HOME_STAR_NAME

    prefix = STAR_PREFIXES[(index // len(STAR_SUFFIXES)) % len(STAR_PREFIXES)]
    suffix = STAR_SUFFIXES[index % len(STAR_SUFFIXES)]
    return f"{prefix} {suffix}"


def planet_name(star: str, index: int) -> str:
    """Return a planet name: Greek letter for the first eight, then a number.

    Examples:
        >>> planet_name("Sol", 2)
        'Sol γ'
        >>> planet_name("Sol", 8)
        'Sol 9'
    """
    if index < len(PLANET_LETTERS):
        return f"{star} {PLANET_LETTERS[index]}"
    return f"{star} {index + 1}"


def moon_name(planet: str, index: int) -> str:
    """Return a moon name using Roman numerals.

    Examples:
        >>> moon_name("Sol γ", 0)
        'Sol γ I'
    """
    if index < len(ROMAN_NUMERALS):
        return f"{planet} {ROMAN_NUMERALS[index]}"
    return f"{planet} {index + 1}"


def ring_name(planet: str, index: int) -> str:
    """Return a ring name lettered from A.

    Examples:
        >>> ring_name("Sol ε", 1)
        'Sol ε Ring B'
    """
    return f"{planet} Ring {chr(ord('A') + index)}"


def belt_name(star: str, index: int) -> str:
    """Return an asteroid belt name lettered from A."""
    return f"{star} Belt {chr(ord('A') + index)}"

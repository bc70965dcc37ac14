"""World typing rules: temperature bands and the per-type lookup tables.

This module is the single home of the world lore. A planet's type comes
only from ``determine_planet_type``; every other per-type property
(radius range, atmosphere, ring makeup, texture palette) is looked up in a
table keyed by ``PlanetType`` that covers all fifteen members.
"""

import math
from enum import Enum

from ..models import PlanetType, RingComposition
from ..utils import SeededStream, seeded_random
from ..utils.constants import (
    EQUILIBRIUM_CONSTANT,
    GAS_GIANT_MIN_ORBIT,
    HZ_INNER_FLUX,
    HZ_OUTER_FLUX,
    SOLAR_TEMPERATURE,
)


class TemperatureBand(str, Enum):
    """Equilibrium-temperature bands used to pick a world type."""

    VERY_HOT = "very_hot"  # > 1000 K
    HOT = "hot"  # > 600 K
    WARM = "warm"  # > 273 K, or inside the habitable zone
    COLD = "cold"  # > 150 K
    FROZEN = "frozen"  # <= 150 K


# Lower bounds (exclusive), hottest first
BAND_THRESHOLDS = [
    (1000.0, TemperatureBand.VERY_HOT),
    (600.0, TemperatureBand.HOT),
    (273.0, TemperatureBand.WARM),
    (150.0, TemperatureBand.COLD),
]

# Relative weights per band. Gas giant entries only apply past GAS_GIANT_MIN_ORBIT.
BAND_WEIGHTS: dict[TemperatureBand, list[tuple[PlanetType, float]]] = {
    TemperatureBand.VERY_HOT: [
        (PlanetType.BARREN_WORLD, 35),
        (PlanetType.DUSTY_WORLD, 25),
        (PlanetType.NUCLEAR_WORLD, 25),
        (PlanetType.MARTIAN_WORLD, 15),
    ],
    TemperatureBand.HOT: [
        (PlanetType.ARID_WORLD, 25),
        (PlanetType.SANDY_WORLD, 25),
        (PlanetType.DUSTY_WORLD, 15),
        (PlanetType.MARTIAN_WORLD, 15),
        (PlanetType.BARREN_WORLD, 10),
        (PlanetType.GAS_GIANT, 10),
    ],
    TemperatureBand.WARM: [
        (PlanetType.GRASSLAND_WORLD, 25),
        (PlanetType.OCEAN_WORLD, 25),
        (PlanetType.JUNGLE_WORLD, 20),
        (PlanetType.MARSHY_WORLD, 15),
        (PlanetType.ARID_WORLD, 15),
    ],
    TemperatureBand.COLD: [
        (PlanetType.GAS_GIANT, 25),
        (PlanetType.TUNDRA_WORLD, 25),
        (PlanetType.SNOWY_WORLD, 20),
        (PlanetType.FROST_GIANT, 15),
        (PlanetType.MARTIAN_WORLD, 15),
    ],
    TemperatureBand.FROZEN: [
        (PlanetType.FROST_GIANT, 30),
        (PlanetType.GAS_GIANT, 20),
        (PlanetType.METHANE_WORLD, 20),
        (PlanetType.SNOWY_WORLD, 20),
        (PlanetType.TUNDRA_WORLD, 10),
    ],
}

# Radius ranges in Earth radii
RADIUS_RANGES: dict[PlanetType, tuple[float, float]] = {
    PlanetType.GAS_GIANT: (3.5, 11.2),  # Saturn to Jupiter
    PlanetType.FROST_GIANT: (2.5, 4.0),  # Neptune to Uranus
    PlanetType.ARID_WORLD: (0.4, 1.2),
    PlanetType.BARREN_WORLD: (0.1, 0.6),  # Mercury-like
    PlanetType.DUSTY_WORLD: (0.3, 0.9),
    PlanetType.GRASSLAND_WORLD: (0.8, 1.5),
    PlanetType.JUNGLE_WORLD: (0.8, 1.6),
    PlanetType.MARSHY_WORLD: (0.7, 1.4),
    PlanetType.MARTIAN_WORLD: (0.3, 0.8),
    PlanetType.METHANE_WORLD: (0.5, 1.8),
    PlanetType.SANDY_WORLD: (0.4, 1.2),
    PlanetType.SNOWY_WORLD: (0.5, 1.5),
    PlanetType.TUNDRA_WORLD: (0.5, 1.3),
    PlanetType.NUCLEAR_WORLD: (0.3, 0.8),
    PlanetType.OCEAN_WORLD: (0.7, 1.3),
}

# Types whose radius is biased toward the low end of the range
HABITABLE_TYPES = frozenset(
    {
        PlanetType.GRASSLAND_WORLD,
        PlanetType.JUNGLE_WORLD,
        PlanetType.MARSHY_WORLD,
        PlanetType.OCEAN_WORLD,
    }
)

ATMOSPHERES: dict[PlanetType, list[str]] = {
    PlanetType.GAS_GIANT: ["Hydrogen", "Helium", "Methane"],
    PlanetType.FROST_GIANT: ["Hydrogen", "Helium", "Water", "Ammonia"],
    PlanetType.ARID_WORLD: ["Carbon Dioxide", "Nitrogen"],
    PlanetType.BARREN_WORLD: [],
    PlanetType.DUSTY_WORLD: ["Carbon Dioxide", "Argon"],
    PlanetType.GRASSLAND_WORLD: ["Nitrogen", "Oxygen", "Argon"],
    PlanetType.JUNGLE_WORLD: ["Nitrogen", "Oxygen", "Water Vapor"],
    PlanetType.MARSHY_WORLD: ["Nitrogen", "Methane", "Water Vapor"],
    PlanetType.MARTIAN_WORLD: ["Carbon Dioxide", "Nitrogen", "Argon"],
    PlanetType.METHANE_WORLD: ["Nitrogen", "Methane"],
    PlanetType.SANDY_WORLD: ["Nitrogen", "Carbon Dioxide"],
    PlanetType.SNOWY_WORLD: ["Nitrogen", "Oxygen"],
    PlanetType.TUNDRA_WORLD: ["Nitrogen", "Oxygen", "Carbon Dioxide"],
    PlanetType.NUCLEAR_WORLD: ["Radioactive Gases", "Xenon"],
    PlanetType.OCEAN_WORLD: ["Nitrogen", "Oxygen", "Water Vapor"],
}

# Surface temperature multipliers (dust traps heat, methane cools)
TEMPERATURE_MULTIPLIERS: dict[PlanetType, float] = {
    PlanetType.GAS_GIANT: 0.7,  # Upper atmosphere
    PlanetType.FROST_GIANT: 1.0,
    PlanetType.ARID_WORLD: 1.0,
    PlanetType.BARREN_WORLD: 1.0,
    PlanetType.DUSTY_WORLD: 1.3,
    PlanetType.GRASSLAND_WORLD: 1.0,
    PlanetType.JUNGLE_WORLD: 1.0,
    PlanetType.MARSHY_WORLD: 1.0,
    PlanetType.MARTIAN_WORLD: 1.0,
    PlanetType.METHANE_WORLD: 0.6,
    PlanetType.SANDY_WORLD: 1.0,
    PlanetType.SNOWY_WORLD: 1.0,
    PlanetType.TUNDRA_WORLD: 1.0,
    PlanetType.NUCLEAR_WORLD: 1.2,
    PlanetType.OCEAN_WORLD: 1.0,
}

# Number of texture variants the renderer ships per type
TEXTURE_PALETTE_SIZES: dict[PlanetType, int] = {
    PlanetType.GAS_GIANT: 20,
    PlanetType.FROST_GIANT: 20,
    PlanetType.ARID_WORLD: 5,
    PlanetType.BARREN_WORLD: 5,
    PlanetType.DUSTY_WORLD: 5,
    PlanetType.GRASSLAND_WORLD: 5,
    PlanetType.JUNGLE_WORLD: 5,
    PlanetType.MARSHY_WORLD: 5,
    PlanetType.MARTIAN_WORLD: 5,
    PlanetType.METHANE_WORLD: 5,
    PlanetType.SANDY_WORLD: 5,
    PlanetType.SNOWY_WORLD: 5,
    PlanetType.TUNDRA_WORLD: 5,
    PlanetType.NUCLEAR_WORLD: 1,
    PlanetType.OCEAN_WORLD: 1,
}

# Ring material weights (ice, rock, dust, mixed)
_ICY = [(RingComposition.ICE, 0.6), (RingComposition.ROCK, 0.1), (RingComposition.DUST, 0.1), (RingComposition.MIXED, 0.2)]
_ROCKY = [(RingComposition.ICE, 0.1), (RingComposition.ROCK, 0.5), (RingComposition.DUST, 0.3), (RingComposition.MIXED, 0.1)]
_DUSTY = [(RingComposition.ICE, 0.0), (RingComposition.ROCK, 0.3), (RingComposition.DUST, 0.6), (RingComposition.MIXED, 0.1)]
_TEMPERATE = [(RingComposition.ICE, 0.2), (RingComposition.ROCK, 0.4), (RingComposition.DUST, 0.2), (RingComposition.MIXED, 0.2)]

RING_COMPOSITION_WEIGHTS: dict[PlanetType, list[tuple[RingComposition, float]]] = {
    PlanetType.GAS_GIANT: [(RingComposition.ICE, 0.4), (RingComposition.ROCK, 0.3), (RingComposition.DUST, 0.3), (RingComposition.MIXED, 0.0)],
    PlanetType.FROST_GIANT: [(RingComposition.ICE, 0.7), (RingComposition.ROCK, 0.1), (RingComposition.DUST, 0.2), (RingComposition.MIXED, 0.0)],
    PlanetType.ARID_WORLD: _DUSTY,
    PlanetType.BARREN_WORLD: _ROCKY,
    PlanetType.DUSTY_WORLD: _DUSTY,
    PlanetType.GRASSLAND_WORLD: _TEMPERATE,
    PlanetType.JUNGLE_WORLD: _TEMPERATE,
    PlanetType.MARSHY_WORLD: _TEMPERATE,
    PlanetType.MARTIAN_WORLD: _DUSTY,
    PlanetType.METHANE_WORLD: _ICY,
    PlanetType.SANDY_WORLD: _DUSTY,
    PlanetType.SNOWY_WORLD: _ICY,
    PlanetType.TUNDRA_WORLD: _ICY,
    PlanetType.NUCLEAR_WORLD: _ROCKY,
    PlanetType.OCEAN_WORLD: _TEMPERATE,
}

RING_COLORS: dict[RingComposition, str] = {
    RingComposition.ICE: "#e0f0ff",
    RingComposition.ROCK: "#8b7d6b",
    RingComposition.DUST: "#c2a383",
    RingComposition.MIXED: "#b0a89a",
}


def luminosity_from_temperature(star_temperature: float) -> float:
    """Approximate luminosity (solar units) for a Sun-sized star."""
    return (star_temperature / SOLAR_TEMPERATURE) ** 4


def habitable_zone(luminosity: float) -> tuple[float, float]:
    """Return the (inner, outer) habitable-zone radii in AU."""
    return math.sqrt(luminosity / HZ_INNER_FLUX), math.sqrt(luminosity / HZ_OUTER_FLUX)


def equilibrium_temperature(luminosity: float, orbit_radius: float) -> float:
    """Planet equilibrium temperature in Kelvin: 255 * sqrt(L / d)."""
    return EQUILIBRIUM_CONSTANT * math.sqrt(luminosity / orbit_radius)


def temperature_band(orbit_radius: float, luminosity: float) -> TemperatureBand:
    """Bucket a planet by equilibrium temperature.

    A cold or frozen planet that sits inside the habitable zone is promoted
    to warm, since the zone is where liquid water survives. Hot bands are
    never overridden.
    """
    temperature = equilibrium_temperature(luminosity, orbit_radius)
    if temperature > 273.0:
        return next(band for threshold, band in BAND_THRESHOLDS if temperature > threshold)

    hz_inner, hz_outer = habitable_zone(luminosity)
    if hz_inner <= orbit_radius <= hz_outer:
        return TemperatureBand.WARM
    if temperature > 150.0:
        return TemperatureBand.COLD
    return TemperatureBand.FROZEN


def allowed_types(band: TemperatureBand, orbit_radius: float) -> list[tuple[PlanetType, float]]:
    """Return the weighted type table for a band at a given orbit.

    Gas giants are dropped from the table inside GAS_GIANT_MIN_ORBIT.
    """
    return [
        (planet_type, weight)
        for planet_type, weight in BAND_WEIGHTS[band]
        if planet_type is not PlanetType.GAS_GIANT or orbit_radius >= GAS_GIANT_MIN_ORBIT
    ]


def determine_planet_type(
    orbit_radius: float,
    star_temperature: float,
    seed: int,
    luminosity: float | None = None,
) -> PlanetType:
    """Pick a world type from orbital distance, stellar output and seed.

    Args:
        orbit_radius: Orbital distance in AU (must be > 0)
        star_temperature: Stellar surface temperature in Kelvin
        seed: Planet seed
        luminosity: Stellar luminosity in solar units; estimated from the
            temperature when omitted

    Returns:
        The planet type, always a member of the band's weighted table

    Raises:
        ValueError: If orbit radius or temperature is not a positive finite number
    """
    if not math.isfinite(orbit_radius) or orbit_radius <= 0:
        raise ValueError(f"Invalid orbit_radius: {orbit_radius} (must be > 0)")
    if not math.isfinite(star_temperature) or star_temperature <= 0:
        raise ValueError(f"Invalid star_temperature: {star_temperature} (must be > 0)")
    if luminosity is None:
        luminosity = luminosity_from_temperature(star_temperature)

    band = temperature_band(orbit_radius, luminosity)
    return SeededStream(seed).weighted_choice(0, allowed_types(band, orbit_radius))


def radius_for(planet_type: PlanetType, seed: float) -> float:
    """Draw a radius (Earth radii) within the type's range.

    Habitable types square the draw so most land near the small end.
    """
    low, high = RADIUS_RANGES[planet_type]
    roll = seeded_random(seed)
    if planet_type in HABITABLE_TYPES:
        roll = roll * roll
    return low + roll * (high - low)

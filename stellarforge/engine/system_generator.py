"""Planetary system generation for a single star."""

import logging
import math
import zlib
from dataclasses import dataclass, replace

from ..models import AsteroidBelt, Moon, Planet, PlanetRing, Star, StarSystem
from ..utils import SeededStream
from ..utils.constants import (
    BELT_GAP_RATIO,
    BELT_MAX_SELECTED,
    BELT_MIN_CLEARANCE,
    FROST_LINE_FACTOR,
    MAX_INCLINATION,
    MAX_ORBIT_FACTOR,
    ORBIT_DISPLAY_SCALE,
    ORBIT_SPACING_RANGE,
    PLANET_SEED_STRIDE,
    PLANET_TEMPERATURE_DIVISOR,
    SYSTEM_SEED_MULTIPLIER,
)
from ..utils.naming import belt_name, moon_name, planet_name, ring_name
from .planet_typing import (
    ATMOSPHERES,
    RING_COLORS,
    RING_COMPOSITION_WEIGHTS,
    TEMPERATURE_MULTIPLIERS,
    TEXTURE_PALETTE_SIZES,
    determine_planet_type,
    habitable_zone,
    radius_for,
)
from .faction_generator import generate_factions
from .star_generator import stellar_luminosity
from .surface_features import generate_surface_features

logger = logging.getLogger(__name__)

# Stream layout relative to the system seed
_BELT_STREAM = 50_000
_FACTION_STREAM = 60_000

# Draw offsets within a planet's stream
_TYPE = 0
_RADIUS = 1
_ANGLE = 10
_INCLINATION = 11
_ROTATION = 12
_MOON_STREAM = 100
_RING_STREAM = 300
_FEATURE_STREAM = 600


@dataclass
class OrbitalZones:
    """Luminosity-derived distances (AU) that shape a system."""

    luminosity: float
    hz_inner: float
    hz_outer: float
    frost_line: float
    max_orbit: float


def orbital_zones(star: Star) -> OrbitalZones:
    """Compute habitable zone, frost line and outer orbit cap for a star."""
    luminosity = stellar_luminosity(star.mass)
    hz_inner, hz_outer = habitable_zone(luminosity)
    root_l = math.sqrt(luminosity)
    return OrbitalZones(
        luminosity=luminosity,
        hz_inner=hz_inner,
        hz_outer=hz_outer,
        frost_line=FROST_LINE_FACTOR * root_l,
        max_orbit=MAX_ORBIT_FACTOR * root_l,
    )


def planet_budget(star: Star) -> int:
    """Number of planets to lay out, bounded by stellar mass.

    Massive stars disrupt planet formation and keep few worlds; red dwarfs
    can pack more into their tight inner systems.
    """
    if star.mass > 8:
        cap = 2
    elif star.mass > 2:
        cap = 4
    elif star.mass < 0.5:
        cap = 9
    else:
        cap = 8
    return min(star.planet_count, cap)


def system_seed_for(star: Star, seed: int) -> int:
    """Mix the star id into the seed so every star gets its own system.

    The galaxy seed is spread by a prime multiplier so neighbouring galaxy
    seeds never land a multiple of ``PLANET_SEED_STRIDE`` apart, and the
    full crc32 of the id keeps stars of one galaxy from sharing a seed.
    """
    return seed * SYSTEM_SEED_MULTIPLIER + zlib.crc32(star.id.encode("utf-8"))


def orbit_distances(star: Star, system_seed: int) -> list[float]:
    """Lay out planet orbits (AU) in a Titius-Bode-like progression.

    The first planet sits in the inner system scaled by luminosity, the
    second is pulled toward the habitable zone, and each later one is
    1.3-2.0x farther than the previous. Layout stops at the outer cap.
    """
    zones = orbital_zones(star)
    stream = SeededStream(system_seed)
    spacing_low, spacing_high = ORBIT_SPACING_RANGE

    distances: list[float] = []
    for i in range(planet_budget(star)):
        if i == 0:
            distance = math.sqrt(zones.luminosity) * stream.uniform(1, 0.2, 0.7)
        elif i == 1:
            distance = max(
                stream.uniform(2, zones.hz_inner, zones.hz_outer),
                distances[0] * spacing_low,
            )
        else:
            distance = distances[-1] * stream.uniform(100 + i, spacing_low, spacing_high)

        if distance > zones.max_orbit:
            break
        distances.append(distance)

    return distances


def texture_index_for(star_name: str, index: int, planet_type) -> int:
    """Stable texture palette entry from (star name, planet index, type)."""
    key = f"{star_name}:{index}:{planet_type.value}".encode("utf-8")
    return zlib.crc32(key) % TEXTURE_PALETTE_SIZES[planet_type]


def generate_planet(
    star: Star,
    index: int,
    orbit_radius: float,
    system_seed: int,
    luminosity: float | None = None,
) -> Planet:
    """Generate one planet (with moons and rings) at a fixed orbit.

    Only depends on its own stream, so a single planet can be regenerated
    without touching its siblings.

    Args:
        star: Host star
        index: Position in the system's planet list
        orbit_radius: Orbital distance in AU
        system_seed: Seed returned by ``system_seed_for``
        luminosity: Host luminosity; derived from mass when omitted

    Returns:
        Fully populated planet
    """
    if luminosity is None:
        luminosity = stellar_luminosity(star.mass)
    stream = SeededStream(system_seed).child((index + 1) * PLANET_SEED_STRIDE)

    planet_type = determine_planet_type(
        orbit_radius, star.temperature, stream.seed + _TYPE, luminosity=luminosity
    )
    radius = radius_for(planet_type, stream.seed + _RADIUS)

    mass = radius**3
    if planet_type.is_giant:
        mass *= 0.3  # Gas giants are far less dense

    temperature = (
        star.temperature
        / (orbit_radius * orbit_radius * PLANET_TEMPERATURE_DIVISOR)
        * TEMPERATURE_MULTIPLIERS[planet_type]
    )

    angle = stream.uniform(_ANGLE, 0.0, math.pi * 2)
    inclination = stream.uniform(_INCLINATION, -MAX_INCLINATION, MAX_INCLINATION)
    name = planet_name(star.name, index)
    planet = Planet(
        id=f"planet-{star.id}-{index}",
        name=name,
        position=_orbit_point(orbit_radius, angle, inclination),
        radius=radius,
        mass=mass,
        type=planet_type,
        orbit_radius=orbit_radius,
        orbit_speed=0.1 / math.sqrt(orbit_radius),
        rotation_speed=stream.draw(_ROTATION) * 0.1,
        initial_angle=angle,
        inclination=inclination,
        temperature=temperature,
        atmosphere=list(ATMOSPHERES[planet_type]),
        texture_index=texture_index_for(star.name, index, planet_type),
    )
    planet.moons = generate_moons(planet, stream.child(_MOON_STREAM))
    planet.rings = generate_rings(planet, stream.child(_RING_STREAM))
    return planet


def moon_count_range(planet: Planet) -> tuple[int, int]:
    """Inclusive (min, max) moon count for a planet's size class."""
    if planet.type.is_giant:
        return (2, 9) if planet.radius >= 3.0 else (1, 4)
    if planet.radius > 1.2:
        return (1, 4)
    if planet.radius > 0.6:
        return (0, 1)
    return (0, 0)


def generate_moons(planet: Planet, stream: SeededStream) -> list[Moon]:
    """Generate moons on tight orbits that widen with moon index."""
    low, high = moon_count_range(planet)
    count = stream.randint(0, low, high)

    moons = []
    for j in range(count):
        k = 1 + j * 10
        orbit_radius = planet.radius * (2.5 + 1.5 * j + stream.uniform(k + 1, 0.0, 0.8))
        moons.append(
            Moon(
                id=f"{planet.id}-moon-{j}",
                name=moon_name(planet.name, j),
                radius=planet.radius * stream.uniform(k, 0.05, 0.25),
                orbit_radius=orbit_radius,
                orbit_speed=0.5 / math.sqrt(orbit_radius),
            )
        )
    return moons


def ring_probability(planet: Planet) -> float:
    if planet.type.is_giant:
        return 0.4
    if planet.radius > 1.0:
        return 0.3
    return 0.0


def generate_rings(planet: Planet, stream: SeededStream) -> list[PlanetRing]:
    """Generate zero or more nested ring systems (radii in planet radii)."""
    if not stream.chance(0, ring_probability(planet)):
        return []

    count = stream.randint(1, 1, 3 if planet.type.is_giant else 2)
    weights = RING_COMPOSITION_WEIGHTS[planet.type]

    rings = []
    inner = stream.uniform(2, 1.2, 1.6)
    for k in range(count):
        base = 10 + k * 10
        outer = inner + stream.uniform(base, 0.2, 0.8)
        composition = stream.weighted_choice(base + 1, weights)
        rings.append(
            PlanetRing(
                id=f"{planet.id}-ring-{k}",
                name=ring_name(planet.name, k),
                inner_radius=inner,
                outer_radius=outer,
                thickness=stream.uniform(base + 2, 0.01, 0.05),
                density=stream.uniform(base + 3, 0.3, 1.0),
                color=RING_COLORS[composition],
                composition=composition,
            )
        )
        inner = outer + stream.uniform(base + 4, 0.05, 0.25)
    return rings


def find_belt_locations(orbits: list[float], zones: OrbitalZones) -> list[tuple[float, float]]:
    """Return candidate (inner, outer) belt radii from gaps in the orbit list.

    Candidates: inside the first planet (if there is enough clearance),
    between planets whose spacing ratio is wide, and beyond the last planet.
    A planetless system gets a single belt around the frost line.
    """
    if not orbits:
        return [(zones.frost_line * 0.8, zones.frost_line * 1.2)]

    locations = []
    first = orbits[0]
    if first * 0.4 >= BELT_MIN_CLEARANCE:
        locations.append((first * 0.4, first * 0.7))

    for inner, outer in zip(orbits, orbits[1:]):
        if outer / inner >= BELT_GAP_RATIO:
            gap = outer - inner
            locations.append((inner + gap * 0.35, inner + gap * 0.65))

    last = orbits[-1]
    locations.append((last * 1.3, last * 1.6))
    return locations


def generate_asteroid_belts(
    system_id: str,
    star: Star,
    orbits: list[float],
    zones: OrbitalZones,
    stream: SeededStream,
) -> list[AsteroidBelt]:
    """Materialize 1-4 of the candidate belt locations."""
    locations = find_belt_locations(orbits, zones)
    wanted = min(len(locations), stream.randint(0, 1, BELT_MAX_SELECTED))

    picked = sorted(range(len(locations)), key=lambda j: (stream.draw(10 + j), j))[:wanted]
    belts = []
    for k, j in enumerate(sorted(picked)):
        inner, outer = locations[j]
        density = stream.uniform(100 + k * 10, 0.3, 1.0)
        belts.append(
            AsteroidBelt(
                id=f"{system_id}-belt-{k}",
                name=belt_name(star.name, k),
                inner_radius=inner,
                outer_radius=outer,
                density=density,
                asteroid_count=int(100 + density * 900),
            )
        )
    return belts


def generate_system(star: Star, seed: int, feature_count: int = 0) -> StarSystem:
    """Generate the planetary system for a star.

    Algorithm:
    1. Zones from luminosity (habitable zone, frost line, outer cap)
    2. Orbit layout bounded by stellar mass and the star's planet hint
    3. Per planet: type from temperature band, then radius, mass,
       temperature, atmosphere, orbit, texture, moons and rings
    4. Asteroid belts in the orbital gaps
    5. Optional surface features on rocky worlds
    6. Factions founded on the planets (one may dominate the system)

    Generation is idempotent: the same star and seed always yield an
    identical system, so callers can cache by star id.

    Args:
        star: Host star
        seed: Galaxy seed
        feature_count: Surface features per rocky planet (0 disables)

    Returns:
        StarSystem owning all planets and belts

    Raises:
        ValueError: If the star has invalid fields or the seed is not an integer
    """
    star.validate()
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise ValueError(f"Invalid seed: {seed!r} (must be an integer)")

    zones = orbital_zones(star)
    system_seed = system_seed_for(star, seed)
    system_id = f"system-{star.id}"

    orbits = orbit_distances(star, system_seed)
    planets = [
        generate_planet(star, i, orbit, system_seed, zones.luminosity)
        for i, orbit in enumerate(orbits)
    ]

    if feature_count > 0:
        for i, planet in enumerate(planets):
            feature_seed = system_seed + (i + 1) * PLANET_SEED_STRIDE + _FEATURE_STREAM
            planet.surface_features = generate_surface_features(planet, feature_seed, feature_count)

    belts = generate_asteroid_belts(
        system_id, star, orbits, zones, SeededStream(system_seed).child(_BELT_STREAM)
    )
    factions = generate_factions(planets, SeededStream(system_seed).child(_FACTION_STREAM))

    logger.debug(
        f"Generated system for {star.name}: {len(planets)} planets, "
        f"{len(belts)} belts, {len(factions)} factions"
    )
    return StarSystem(
        id=system_id,
        star_id=star.id,
        planets=planets,
        asteroid_belts=belts,
        factions=factions,
        star=replace(star),
    )


def orbital_position(planet: Planet, elapsed: float) -> tuple[float, float, float]:
    """Position of a planet after ``elapsed`` time units, in display units.

    Pure helper for callers animating orbits; the planet is not modified.
    """
    angle = planet.initial_angle + planet.orbit_speed * elapsed
    return _orbit_point(planet.orbit_radius, angle, planet.inclination)


def _orbit_point(orbit_radius: float, angle: float, inclination: float) -> tuple[float, float, float]:
    # Orbit in the x-z plane, tilted about the x axis
    r = orbit_radius * ORBIT_DISPLAY_SCALE
    return (
        math.cos(angle) * r,
        math.sin(angle) * r * math.sin(inclination),
        math.sin(angle) * r * math.cos(inclination),
    )

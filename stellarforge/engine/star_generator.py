"""Star field generation with realistic stellar demographics."""

import logging

from ..models import Star
from ..utils import STAR_MAX_DISTANCE, STAR_MIN_DISTANCE, SeededStream
from ..utils.constants import MAX_PLANET_HINT, STAR_SEED_STRIDE
from ..utils.distance import scale
from ..utils.naming import star_name

logger = logging.getLogger(__name__)

# Mass tiers: (cumulative probability, mass range, temperature range)
# Roughly 70% red dwarfs, then orange, Sun-like and massive hot stars.
MASS_TIERS = [
    (0.70, (0.1, 0.5), (2500.0, 3700.0)),  # M-class
    (0.90, (0.5, 1.3), (3700.0, 5200.0)),  # K-class
    (0.97, (0.8, 2.0), (5200.0, 7500.0)),  # G-F class
    (1.00, (2.0, 10.0), (7500.0, 20000.0)),  # A-B-O class
]

# Temperature thresholds (exclusive lower bounds), hottest first
SPECTRAL_THRESHOLDS = [
    (30000.0, "O"),
    (10000.0, "B"),
    (7500.0, "A"),
    (6000.0, "F"),
    (5200.0, "G"),
    (3700.0, "K"),
]

STAR_COLORS = {
    "O": "#9bb0ff",
    "B": "#aabfff",
    "A": "#cad7ff",
    "F": "#f8f7ff",
    "G": "#fff4ea",
    "K": "#ffd2a1",
    "M": "#ffad51",
}

# Draw offsets within a star's stream
_DISTANCE = 1
_DIRECTION = 2  # uses 2 and 3
_TIER = 4
_MASS = 5
_TEMPERATURE = 6
_AGE = 7
_PLANETS = 8


def spectral_class_for(temperature: float) -> str:
    """Classify a star by temperature.

    Examples:
        >>> spectral_class_for(5778)
        'G'
        >>> spectral_class_for(3700)
        'M'
    """
    for threshold, spectral_class in SPECTRAL_THRESHOLDS:
        if temperature > threshold:
            return spectral_class
    return "M"


def stellar_radius(mass: float) -> float:
    """Derive radius (solar radii) from mass with a per-regime power law."""
    if mass < 0.5:
        # Red dwarfs: very small
        return (mass / 0.5) ** 0.8 * 0.4
    if mass > 8:
        # Massive stars swell into giants
        return (mass / 8) ** 0.6 * 8
    return mass**0.8


def stellar_luminosity(mass: float) -> float:
    """Mass-luminosity relation in solar units."""
    return mass**3.5


def star_color(spectral_class: str) -> str:
    """Return the display hex color for a spectral class (white if unknown)."""
    return STAR_COLORS.get(spectral_class, "#ffffff")


def generate_stars(seed: int, count: int) -> list[Star]:
    """Generate the galaxy's star population.

    Algorithm:
    1. Each star i draws from its own stream (seed + i * 1000), so star i
       never depends on star i-1
    2. Position: uniform direction on the sphere at a radius between the
       minimum and maximum star distance
    3. Mass and temperature from a four-tier demographic distribution
    4. Radius, luminosity and spectral class derived from mass/temperature
    5. Index 0 is always "Sol"

    Args:
        seed: Galaxy seed
        count: Number of stars (zero or negative yields an empty list)

    Returns:
        List of stars ordered by index

    Raises:
        ValueError: If seed or count is not an integer
    """
    require_int("seed", seed)
    require_int("count", count)
    if count <= 0:
        return []

    root = SeededStream(seed)
    stars = [_generate_star(root.child(i * STAR_SEED_STRIDE), i) for i in range(count)]

    logger.info(f"Generated {len(stars)} stars (seed={seed})")
    return stars


def _generate_star(stream: SeededStream, index: int) -> Star:
    """Generate a single star from its own stream."""
    distance = stream.uniform(_DISTANCE, STAR_MIN_DISTANCE, STAR_MAX_DISTANCE)
    position = scale(stream.unit_vector(_DIRECTION), distance)

    tier_roll = stream.draw(_TIER)
    for cumulative, mass_range, temperature_range in MASS_TIERS:
        if tier_roll < cumulative:
            break
    mass = stream.uniform(_MASS, *mass_range)
    temperature = stream.uniform(_TEMPERATURE, *temperature_range)

    return Star(
        id=f"star-{index}",
        name=star_name(index),
        position=position,
        spectral_class=spectral_class_for(temperature),
        mass=mass,
        radius=stellar_radius(mass),
        temperature=temperature,
        luminosity=stellar_luminosity(mass),
        age=stream.uniform(_AGE, 1.0, 11.0),
        planet_count=int(stream.draw(_PLANETS) * MAX_PLANET_HINT),
    )


def require_int(name: str, value) -> None:
    """Raise ValueError unless value is a real int (bools are rejected)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Invalid {name}: {value!r} (must be an integer)")

"""Star data model."""

import math
from dataclasses import dataclass

from ..utils.constants import STAR_MASS_RANGE, STAR_TEMPERATURE_RANGE

SPECTRAL_CLASSES = ("O", "B", "A", "F", "G", "K", "M")


def _check_finite(name: str, value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise ValueError(f"Invalid {name}: {value!r} (must be a finite number)")


@dataclass
class Star:
    """Represents a star in the galaxy.

    Stars are created once by the star field generator and are the anchor
    for everything else: planetary systems are generated per star, nebulas
    cluster around dense star regions, and warp lanes hop between stars.
    """

    id: str  # Stable key (e.g., "star-42")
    name: str  # Display name ("Sol", "Alpha Draconis", ...)
    position: tuple[float, float, float]  # Galactic coordinates
    spectral_class: str  # O, B, A, F, G, K or M (derived from temperature)
    mass: float  # Solar masses
    radius: float  # Solar radii
    temperature: float  # Kelvin
    luminosity: float  # Solar units (mass ** 3.5)
    age: float  # Billions of years
    planet_count: int  # Planet-count hint (0-11)

    def __post_init__(self):
        """Validate star data after initialization."""
        self.validate()

    def validate(self) -> None:
        """Check every field, raising ValueError on the first violation.

        Stars may be edited after construction (lore mode), so generators
        call this again before trusting the numbers.
        """
        if not self.id:
            raise ValueError("id cannot be empty")
        if len(self.position) != 3:
            raise ValueError(f"Invalid position: {self.position} (must have 3 coordinates)")
        for coord in self.position:
            _check_finite("position", coord)
        if self.spectral_class not in SPECTRAL_CLASSES:
            raise ValueError(
                f"Invalid spectral_class: {self.spectral_class} (must be one of {''.join(SPECTRAL_CLASSES)})"
            )
        for name in ("mass", "radius", "temperature"):
            value = getattr(self, name)
            _check_finite(name, value)
            if value <= 0:
                raise ValueError(f"Invalid {name}: {value} (must be > 0)")
        for name, (low, high) in (("mass", STAR_MASS_RANGE), ("temperature", STAR_TEMPERATURE_RANGE)):
            value = getattr(self, name)
            if not low <= value <= high:
                raise ValueError(f"Invalid {name}: {value} (must be between {low:g} and {high:g})")
        for name in ("luminosity", "age"):
            value = getattr(self, name)
            _check_finite(name, value)
            if value < 0:
                raise ValueError(f"Invalid {name}: {value} (must be >= 0)")
        if isinstance(self.planet_count, bool) or not isinstance(self.planet_count, int):
            raise ValueError(f"Invalid planet_count: {self.planet_count!r} (must be an integer)")
        if self.planet_count < 0:
            raise ValueError(f"Invalid planet_count: {self.planet_count} (must be >= 0)")

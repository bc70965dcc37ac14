"""Nebula data model."""

from dataclasses import dataclass


@dataclass
class Nebula:
    """A decorative gas cloud placed in galactic space.

    Nebulas are independent of stars once placed: placement may be biased
    toward dense star regions, but a nebula keeps no reference to them.
    """

    id: str  # e.g., "nebula-007"
    name: str  # e.g., "Lagoon Nebula"
    position: tuple[float, float, float]
    radius: float
    color: str  # Hex color
    composition: str  # e.g., "Ionized Hydrogen"
    type: str  # "emission" or "reflection"

    def __post_init__(self):
        """Validate nebula data after initialization."""
        if self.type not in ("emission", "reflection"):
            raise ValueError(f"Invalid type: {self.type} (must be 'emission' or 'reflection')")
        if self.radius <= 0:
            raise ValueError(f"Invalid radius: {self.radius} (must be > 0)")

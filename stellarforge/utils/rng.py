"""Stateless seeded random stream for deterministic generation."""

import math
from dataclasses import dataclass
from typing import Sequence, TypeVar

T = TypeVar("T")


def seeded_random(seed: float) -> float:
    """Return a deterministic float in [0.0, 1.0) for the given seed.

    This is a hash-like transform, not a stateful generator: the same seed
    always maps to the same value, and neighbouring seeds map to unrelated
    values. Statistical quality is good enough for visuals, nothing more.

    Args:
        seed: Integer (or float) seed

    Returns:
        Float between 0.0 and 1.0
    """
    x = math.sin(seed) * 10000
    value = x - math.floor(x)
    # Tiny negative x rounds up to exactly 1.0
    return value if value < 1.0 else 0.0


@dataclass(frozen=True)
class SeededStream:
    """Immutable view over ``seeded_random`` rooted at a seed.

    Generators never advance shared state. Every draw names an explicit
    offset from the stream's root, and sub-generators get their own stream
    via ``child`` (typically ``stream.child(index * 1000)``). This keeps
    sibling elements independent so any one of them can be regenerated alone.
    """

    seed: int
    offset: int = 0

    def draw(self, k: int = 0) -> float:
        """Return the value at offset ``k`` in [0.0, 1.0)."""
        return seeded_random(self.seed + self.offset + k)

    def next(self) -> tuple[float, "SeededStream"]:
        """Return the current value and the stream advanced by one.

        Returns:
            Tuple of (value, next_stream)
        """
        return self.draw(), SeededStream(self.seed, self.offset + 1)

    def child(self, offset: int) -> "SeededStream":
        """Return a new stream rooted ``offset`` draws further along."""
        return SeededStream(self.seed + self.offset + offset)

    def uniform(self, k: int, low: float, high: float) -> float:
        """Return a float in [low, high)."""
        return low + self.draw(k) * (high - low)

    def randint(self, k: int, low: int, high: int) -> int:
        """Return an integer in [low, high], inclusive."""
        return low + min(int(self.draw(k) * (high - low + 1)), high - low)

    def chance(self, k: int, probability: float) -> bool:
        """Return True with the given probability."""
        return self.draw(k) < probability

    def choice(self, k: int, seq: Sequence[T]) -> T:
        """Choose an element from a non-empty sequence.

        Raises:
            ValueError: If the sequence is empty
        """
        if not seq:
            raise ValueError("Cannot choose from an empty sequence")
        return seq[min(int(self.draw(k) * len(seq)), len(seq) - 1)]

    def weighted_choice(self, k: int, weighted: Sequence[tuple[T, float]]) -> T:
        """Choose an item with probability proportional to its weight.

        Uses a cumulative-sum scan, so the result depends only on the order
        of ``weighted`` and the drawn value.

        Args:
            k: Draw offset
            weighted: Sequence of (item, weight) pairs, weights >= 0

        Returns:
            The selected item

        Raises:
            ValueError: If the sequence is empty or all weights are zero
        """
        total = sum(weight for _, weight in weighted)
        if not weighted or total <= 0:
            raise ValueError("weighted_choice needs at least one positive weight")

        target = self.draw(k) * total
        cumulative = 0.0
        for item, weight in weighted:
            cumulative += weight
            if target < cumulative:
                return item
        # Float rounding can leave target == total; fall back to the last positive entry
        return next(item for item, weight in reversed(weighted) if weight > 0)

    def unit_vector(self, k: int) -> tuple[float, float, float]:
        """Return a direction uniformly distributed on the unit sphere.

        Uses offsets ``k`` (azimuth) and ``k + 1`` (polar angle via inverse cosine).
        """
        theta = self.draw(k) * math.pi * 2
        phi = math.acos(2 * self.draw(k + 1) - 1)
        return (
            math.sin(phi) * math.cos(theta),
            math.sin(phi) * math.sin(theta),
            math.cos(phi),
        )

"""Tests for density-aware nebula placement."""

import math

import pytest

from stellarforge.engine import generate_nebulas, generate_stars
from stellarforge.engine.nebula_placer import (
    EMISSION_COLORS,
    EMISSION_RADIUS_RANGE,
    REFLECTION_COLORS,
    REFLECTION_RADIUS_RANGE,
    build_density_map,
)
from stellarforge.models import Star
from stellarforge.utils import euclidean_distance


def make_star(index: int, position: tuple[float, float, float], mass: float = 1.0) -> Star:
    return Star(
        id=f"star-{index}",
        name=f"Star {index}",
        position=position,
        spectral_class="G",
        mass=mass,
        radius=1.0,
        temperature=5778.0,
        luminosity=1.0,
        age=4.6,
        planet_count=0,
    )


def make_cluster() -> list[Star]:
    """Ten stars crowded into one grid cell, three scattered elsewhere."""
    stars = [make_star(i, (3100.0 + i * 10, 3200.0, 3300.0)) for i in range(10)]
    stars += [make_star(10 + i, (-4500.0, 200.0 * i, 0.0)) for i in range(3)]
    return stars


class TestDensityMap:
    """Test hotspot detection."""

    def test_single_hotspot(self):
        """Only cells with enough stars become hotspots."""
        hotspots = build_density_map(make_cluster())

        assert len(hotspots) == 1
        hotspot = hotspots[0]
        assert hotspot.cell == (3, 3, 3)
        assert hotspot.center == (3500.0, 3500.0, 3500.0)
        assert hotspot.star_count == 10
        assert hotspot.total_mass == pytest.approx(10.0)
        assert hotspot.weight == pytest.approx(math.log(10) * 10.0)

    def test_sorted_by_weight(self):
        """Heavier cells come first."""
        stars = generate_stars(12345, 2000)
        hotspots = build_density_map(stars, min_stars=2)
        weights = [h.weight for h in hotspots]
        assert weights == sorted(weights, reverse=True)

    def test_negative_coordinates_bucket_downward(self):
        """Cells use floor division, so -1 lands in cell -1."""
        stars = [make_star(i, (-1.0, -1.0, -1.0)) for i in range(8)]
        assert build_density_map(stars)[0].cell == (-1, -1, -1)

    def test_invalid_cell_size(self):
        """Cell size must be positive."""
        with pytest.raises(ValueError, match="Invalid cell_size"):
            build_density_map([], cell_size=0)


class TestGenerateNebulas:
    """Test nebula generation."""

    @pytest.mark.parametrize("count", [0, -3])
    def test_non_positive_count(self, count):
        """Zero or negative counts yield nothing."""
        assert generate_nebulas(count) == []

    @pytest.mark.parametrize("count", [2.5, "4", True])
    def test_non_integer_count(self, count):
        """Count must be an integer."""
        with pytest.raises(ValueError, match="Invalid count"):
            generate_nebulas(count)

    def test_non_integer_seed(self):
        """Seed must be an integer."""
        with pytest.raises(ValueError, match="Invalid seed"):
            generate_nebulas(5, seed=1.5)

    def test_basic_fields(self):
        """Nebulas carry ids, names and type-consistent appearance."""
        nebulas = generate_nebulas(40)

        assert [n.id for n in nebulas] == [f"nebula-{i:03d}" for i in range(40)]
        for nebula in nebulas:
            assert nebula.name.endswith(" Nebula")
            if nebula.type == "emission":
                assert nebula.color in EMISSION_COLORS
                assert EMISSION_RADIUS_RANGE[0] <= nebula.radius <= EMISSION_RADIUS_RANGE[1]
            else:
                assert nebula.type == "reflection"
                assert nebula.color in REFLECTION_COLORS
                assert REFLECTION_RADIUS_RANGE[0] <= nebula.radius <= REFLECTION_RADIUS_RANGE[1]

    def test_deterministic(self):
        """Same inputs give the same nebulas."""
        stars = generate_stars(12345, 300)
        assert generate_nebulas(25, stars) == generate_nebulas(25, stars)

    def test_field_placement_without_stars(self):
        """With no stars every nebula is placed in the open field."""
        for nebula in generate_nebulas(60):
            distance = math.sqrt(sum(c * c for c in nebula.position))
            assert 800.0 - 1e-6 <= distance <= 9447.0 + 1e-6

    def test_clusters_attract_nebulas(self):
        """Most nebulas land near the only hotspot."""
        nebulas = generate_nebulas(50, make_cluster())
        center = (3500.0, 3500.0, 3500.0)

        near = [
            n for n in nebulas if 200.0 - 1e-6 <= euclidean_distance(n.position, center) <= 1000.0 + 1e-6
        ]
        assert len(near) >= 20

    def test_seed_changes_layout(self):
        """A different seed moves the nebulas."""
        a = generate_nebulas(10, seed=1)
        b = generate_nebulas(10, seed=2)
        assert [n.position for n in a] != [n.position for n in b]

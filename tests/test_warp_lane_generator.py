"""Tests for warp lane generation."""

import logging
import math
import re

import pytest

from stellarforge.engine import WarpLaneConfig, generate_stars, generate_warp_lanes
from stellarforge.engine.warp_lane_generator import (
    _refine_path,
    build_lane_path,
    lane_color,
    path_distance,
)
from stellarforge.models import Star
from stellarforge.utils import SeededStream, euclidean_distance

RADIUS = 6000.0


def make_star(index: int, position: tuple[float, float, float]) -> Star:
    return Star(
        id=f"star-{index}",
        name=f"Star {index}",
        position=position,
        spectral_class="M",
        mass=0.3,
        radius=0.3,
        temperature=3200.0,
        luminosity=0.015,
        age=5.0,
        planet_count=0,
    )


@pytest.fixture(scope="module")
def stars():
    return generate_stars(12345, 300)


@pytest.fixture(scope="module")
def lanes(stars):
    return generate_warp_lanes(stars, RADIUS, 4)


class TestGenerateWarpLanes:
    """Test lane generation over a real star field."""

    def test_lanes_built(self, lanes):
        """A populated galaxy yields lanes with sequential ids and names."""
        assert 1 <= len(lanes) <= 4
        for n, lane in enumerate(lanes):
            assert lane.id == f"warp-lane-{n}"
            assert lane.name == f"Warp Route {n + 1}"
            assert lane.is_active

    def test_star_used_by_at_most_one_lane(self, lanes):
        """No star appears on two lanes or twice on one lane."""
        all_ids = [star_id for lane in lanes for star_id in lane.path]
        assert len(all_ids) == len(set(all_ids))

    def test_paths_reference_real_stars(self, stars, lanes):
        """Every hop is a star from the population."""
        known = {star.id for star in stars}
        for lane in lanes:
            assert len(lane.path) >= 2
            assert set(lane.path) <= known
            assert lane.path[0] == lane.start_star_id
            assert lane.path[-1] == lane.end_star_id

    def test_endpoints_far_apart(self, stars, lanes):
        """Start and end are at least 0.6 galaxy radii apart."""
        by_id = {star.id: star for star in stars}
        for lane in lanes:
            start = by_id[lane.start_star_id].position
            end = by_id[lane.end_star_id].position
            assert euclidean_distance(start, end) >= 0.6 * RADIUS

    def test_distance_is_sum_of_hops(self, stars, lanes):
        """Lane distance is the total of its straight hops."""
        by_id = {star.id: star for star in stars}
        for lane in lanes:
            hops = [by_id[star_id] for star_id in lane.path]
            assert lane.distance == pytest.approx(path_distance(hops))
            assert lane.distance >= euclidean_distance(hops[0].position, hops[-1].position) - 1e-6

    def test_deterministic(self, stars, lanes):
        """Same stars and seed give the same lanes."""
        assert generate_warp_lanes(stars, RADIUS, 4) == lanes

    def test_seed_changes_lanes(self, stars, lanes):
        """A different seed routes lanes differently."""
        other = generate_warp_lanes(stars, RADIUS, 4, seed=1)
        assert [lane.path for lane in other] != [lane.path for lane in lanes]

    def test_working_set_cap(self, stars):
        """Only the first max_stars stars are considered."""
        config = WarpLaneConfig(max_stars=40)
        allowed = {star.id for star in stars[:40]}
        for lane in generate_warp_lanes(stars, RADIUS, 3, config=config):
            assert set(lane.path) <= allowed


class TestEdgeCases:
    """Test degenerate inputs."""

    @pytest.mark.parametrize("lane_count", [0, -2])
    def test_non_positive_lane_count(self, stars, lane_count):
        """Zero or negative lane counts yield no lanes."""
        assert generate_warp_lanes(stars, RADIUS, lane_count) == []

    def test_too_few_stars(self):
        """A single star cannot host a lane."""
        assert generate_warp_lanes([make_star(0, (0.0, 0.0, 0.0))], RADIUS, 3) == []
        assert generate_warp_lanes([], RADIUS, 3) == []

    @pytest.mark.parametrize("radius", [0, -100.0, math.nan, math.inf])
    def test_invalid_radius(self, stars, radius):
        """Galaxy radius must be positive and finite."""
        with pytest.raises(ValueError, match="Invalid galaxy_radius"):
            generate_warp_lanes(stars, radius, 2)

    def test_non_integer_lane_count(self, stars):
        """Lane count must be an integer."""
        with pytest.raises(ValueError, match="Invalid lane_count"):
            generate_warp_lanes(stars, RADIUS, 2.5)

    def test_compact_cluster_skips_lanes(self, caplog):
        """Stars too close together give no lanes and log a warning."""
        cluster = [make_star(i, (float(i * 10), 0.0, 0.0)) for i in range(20)]
        with caplog.at_level(logging.WARNING, logger="stellarforge.engine.warp_lane_generator"):
            lanes = generate_warp_lanes(cluster, RADIUS, 2)

        assert lanes == []
        assert "Skipping warp lane" in caplog.text

    def test_exhausted_population_returns_fewer_lanes(self):
        """Once every far pair is used, later lanes are skipped."""
        stars = [make_star(0, (-3000.0, 0.0, 0.0)), make_star(1, (3000.0, 0.0, 0.0))]
        lanes = generate_warp_lanes(stars, RADIUS, 3)

        assert len(lanes) == 1
        assert sorted(lanes[0].path) == ["star-0", "star-1"]


class TestLanePath:
    """Test a single lane attempt."""

    def line_of_stars(self) -> list[Star]:
        """Stars every 500 units along the x axis, plus one far off the line."""
        stars = [make_star(i, (-3000.0 + i * 500.0, 0.0, 0.0)) for i in range(13)]
        stars.append(make_star(99, (0.0, 5000.0, 0.0)))
        return stars

    def test_used_stars_never_chosen(self):
        """Stars already on a lane are excluded from new paths."""
        stars = self.line_of_stars()
        used = frozenset({"star-5", "star-6", "star-7"})
        for k in range(20):
            path = build_lane_path(stars, used, RADIUS, SeededStream(k * 1000), WarpLaneConfig())
            if path is not None:
                assert used.isdisjoint(path)
                assert len(path) == len(set(path))

    def test_used_set_not_modified(self):
        """The caller's used set is left alone."""
        stars = self.line_of_stars()
        used = frozenset({"star-0"})
        build_lane_path(stars, used, RADIUS, SeededStream(5), WarpLaneConfig())
        assert used == frozenset({"star-0"})


class TestRefinePath:
    """Test corridor refinement of a coarse segment."""

    RADIUS = 1000.0  # Corridor half-width 200

    def endpoints(self) -> tuple[Star, Star]:
        return make_star(0, (0.0, 0.0, 0.0)), make_star(1, (1000.0, 0.0, 0.0))

    def refine(self, stars, config=None) -> list[str]:
        a, b = self.endpoints()
        refined = _refine_path(
            [a, b], [a, b, *stars], {a.id, b.id}, self.RADIUS, config or WarpLaneConfig()
        )
        return [star.id for star in refined]

    def test_only_stars_inside_the_corridor(self):
        """Stars behind the start, past the end or off the corridor are skipped."""
        outside = [
            make_star(10, (-100.0, 10.0, 0.0)),
            make_star(11, (1100.0, 10.0, 0.0)),
            make_star(12, (500.0, 300.0, 0.0)),
            make_star(13, (1000.0, 5.0, 0.0)),
        ]
        assert self.refine(outside) == ["star-0", "star-1"]

    def test_insertions_move_forward(self):
        """Each insertion lies further along the segment than the previous one."""
        stars = [
            make_star(20, (200.0, 50.0, 0.0)),
            make_star(21, (500.0, 20.0, 0.0)),
            make_star(22, (800.0, -40.0, 0.0)),
        ]
        # star-21 scores best first, so star-20 is behind it and never inserted
        assert self.refine(stars) == ["star-0", "star-21", "star-22", "star-1"]

    def test_at_most_three_insertions_per_segment(self):
        """Refinement stops after three stars even when more fit."""
        # Deviation grows with k, so the nearest-to-start stars score best
        stars = [make_star(30 + k, (100.0 * k, float(k), 0.0)) for k in range(1, 10)]
        assert self.refine(stars) == ["star-0", "star-31", "star-32", "star-33", "star-1"]

    def test_refinement_disabled(self):
        """With no refinements the coarse path comes back unchanged."""
        stars = [make_star(40, (500.0, 0.0, 0.0))]
        config = WarpLaneConfig(refinements_per_segment=0)
        assert self.refine(stars, config) == ["star-0", "star-1"]

    def test_claimed_stars_skipped(self):
        """Stars already claimed by the attempt are never inserted."""
        a, b = self.endpoints()
        middle = make_star(50, (500.0, 0.0, 0.0))
        claimed = {a.id, b.id, middle.id}
        refined = _refine_path([a, b], [a, b, middle], claimed, self.RADIUS, WarpLaneConfig())
        assert [star.id for star in refined] == ["star-0", "star-1"]


class TestLaneColor:
    """Test lane colors."""

    def test_hex_format(self):
        """Colors are lowercase six-digit hex."""
        for n in range(20):
            assert re.fullmatch(r"#[0-9a-f]{6}", lane_color(n))

    def test_colors_differ(self):
        """Consecutive lanes get distinct hues."""
        colors = [lane_color(n) for n in range(10)]
        assert len(set(colors)) == 10


class TestConfig:
    """Test tunable validation."""

    def test_defaults(self):
        """Defaults match the documented bounds."""
        config = WarpLaneConfig()
        assert config.min_separation_factor == 0.6
        assert config.hop_spacing_factor == 0.1
        assert config.min_hops == 4
        assert config.max_deviation_factor == 0.2
        assert config.refinements_per_segment == 3
        assert config.max_attempts_per_lane == 12
        assert config.max_stars == 500

    def test_invalid_attempts(self):
        """At least one attempt per lane is required."""
        with pytest.raises(ValueError, match="max_attempts_per_lane"):
            WarpLaneConfig(max_attempts_per_lane=0)

"""Tests for universe serialization."""

import json
import tempfile
from pathlib import Path

import pytest

from stellarforge.engine import build_universe, generate_system
from stellarforge.models import PlanetType
from stellarforge.utils.serialization import (
    load_universe,
    save_universe,
    universe_from_dict,
    universe_to_dict,
)


@pytest.fixture(scope="module")
def universe():
    universe = build_universe(2024, 120, 6, 2)
    universe.systems = [generate_system(star, 2024, feature_count=2) for star in universe.stars[:8]]
    return universe


def test_save_and_load_universe(universe):
    """Test that a universe survives a save/load cycle unchanged."""
    with tempfile.TemporaryDirectory() as tmpdir:
        filepath = Path(tmpdir) / "universe.json"
        save_universe(universe, str(filepath))
        loaded = load_universe(str(filepath))

    assert loaded == universe


def test_dict_is_plain_json(universe):
    """Test that the dict form needs no special encoder."""
    data = universe_to_dict(universe)
    text = json.dumps(data)
    assert universe_from_dict(json.loads(text)) == universe


def test_enums_stored_as_values(universe):
    """Test that planet types are stored as their string values."""
    data = universe_to_dict(universe)
    types = {p["type"] for s in data["systems"] for p in s["planets"]}
    assert types
    assert types <= {t.value for t in PlanetType}


def test_loaded_positions_are_tuples(universe):
    """Test that coordinates come back as tuples."""
    loaded = universe_from_dict(universe_to_dict(universe))
    assert isinstance(loaded.stars[0].position, tuple)
    assert isinstance(loaded.systems[0].star.position, tuple)


@pytest.mark.parametrize("key", ["stars", "systems", "metadata"])
def test_missing_section_rejected(universe, key):
    """Test that a document missing a required section is rejected."""
    data = universe_to_dict(universe)
    del data[key]
    with pytest.raises(ValueError, match=f"missing {key}"):
        universe_from_dict(data)


def test_malformed_record_rejected(universe):
    """Test that a star missing fields is reported as invalid data."""
    data = universe_to_dict(universe)
    del data["stars"][0]["mass"]
    with pytest.raises(ValueError, match="Invalid universe data"):
        universe_from_dict(data)


def test_invalid_values_rejected(universe):
    """Test that model validation runs on load."""
    data = universe_to_dict(universe)
    data["stars"][0]["spectral_class"] = "Q"
    with pytest.raises(ValueError, match="Invalid spectral_class"):
        universe_from_dict(data)


def test_invalid_json_file():
    """Test that a corrupt file raises ValueError."""
    with tempfile.TemporaryDirectory() as tmpdir:
        filepath = Path(tmpdir) / "broken.json"
        filepath.write_text("{not json")
        with pytest.raises(ValueError, match="Invalid universe file"):
            load_universe(str(filepath))


def test_missing_file():
    """Test that a missing file raises FileNotFoundError."""
    with tempfile.TemporaryDirectory() as tmpdir:
        with pytest.raises(FileNotFoundError):
            load_universe(str(Path(tmpdir) / "nope.json"))


def test_factions_survive_round_trip(universe):
    """Test that factions and planet allegiances are saved and restored."""
    loaded = universe_from_dict(universe_to_dict(universe))
    populated = [s for s in loaded.systems if s.planets]
    assert populated
    for system in populated:
        assert system.factions
        assert all(planet.faction is not None for planet in system.planets)
    assert loaded.systems == universe.systems


def test_documents_without_factions_load(universe):
    """Test that systems saved before factions existed still load."""
    data = universe_to_dict(universe)
    for system in data["systems"]:
        del system["factions"]
        for planet in system["planets"]:
            del planet["faction"]

    loaded = universe_from_dict(data)
    assert all(system.factions == [] for system in loaded.systems)


@pytest.mark.parametrize(
    "corrupt, message",
    [
        (lambda d: d["metadata"].update(seed="abc"), "Invalid seed"),
        (lambda d: d["stars"].append(dict(d["stars"][0])), "duplicate star id"),
        (lambda d: d["systems"][0].update(star_id="ghost", star=None), "unknown star ghost"),
    ],
)
def test_inconsistent_document_rejected(universe, corrupt, message):
    """Test that broken ids and dangling references are rejected on load."""
    data = universe_to_dict(universe)
    corrupt(data)
    with pytest.raises(ValueError, match=message):
        universe_from_dict(data)

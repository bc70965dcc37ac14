"""Universe serialization to/from JSON.

This module saves and loads complete universe documents (stars, generated
systems, nebulas, warp lanes and metadata) so edited lore universes and
explored sandbox universes survive restarts.
"""

import json
from pathlib import Path
from typing import Any

from ..models import (
    AsteroidBelt,
    Faction,
    Moon,
    Nebula,
    Planet,
    PlanetRing,
    PlanetType,
    RingComposition,
    Star,
    StarSystem,
    SurfaceFeature,
    UniverseData,
    UniverseMetadata,
    WarpLane,
)

REQUIRED_KEYS = ("stars", "systems", "metadata")


def _resolve_path(filepath: str) -> Path:
    path = Path(filepath)
    if not path.is_absolute():
        state_dir = Path(__file__).parent.parent.parent / "state"
        path = state_dir / filepath
    return path


def save_universe(universe: UniverseData, filepath: str) -> Path:
    """Save a universe to a JSON file.

    Args:
        universe: Universe to save
        filepath: Path to save file (will be created in /state directory if relative)

    Returns:
        The path actually written

    Example:
        save_universe(universe, "galaxy.json")  # Saves to state/galaxy.json
        save_universe(universe, "/absolute/path/galaxy.json")  # Saves to absolute path
    """
    path = _resolve_path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        json.dump(universe_to_dict(universe), f, indent=2)
    return path


def load_universe(filepath: str) -> UniverseData:
    """Load a universe from a JSON file.

    Args:
        filepath: Path to saved universe file

    Returns:
        Loaded UniverseData

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If JSON is invalid or a required section is missing
    """
    path = _resolve_path(filepath)

    with open(path) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid universe file {path}: {e}") from e

    return universe_from_dict(data)


def universe_to_dict(universe: UniverseData) -> dict[str, Any]:
    """Convert a universe to a JSON-compatible dictionary."""
    return {
        "mode": universe.mode,
        "metadata": {
            "version": universe.metadata.version,
            "created": universe.metadata.created,
            "modified": universe.metadata.modified,
            "seed": universe.metadata.seed,
        },
        "stars": [star_to_dict(s) for s in universe.stars],
        "systems": [system_to_dict(s) for s in universe.systems],
        "nebulas": [_serialize_nebula(n) for n in universe.nebulas],
        "warp_lanes": [_serialize_warp_lane(w) for w in universe.warp_lanes],
    }


def universe_from_dict(data: dict[str, Any]) -> UniverseData:
    """Reconstruct a universe from a dictionary.

    Raises:
        ValueError: If a required section is missing or a record is invalid
    """
    if not isinstance(data, dict):
        raise ValueError("Invalid universe data: expected a JSON object")
    missing = [key for key in REQUIRED_KEYS if key not in data]
    if missing:
        raise ValueError(f"Invalid universe data: missing {', '.join(missing)}")

    try:
        metadata = data["metadata"]
        return UniverseData(
            mode=data.get("mode", "sandbox"),
            metadata=UniverseMetadata(
                version=metadata["version"],
                created=metadata["created"],
                modified=metadata["modified"],
                seed=metadata.get("seed"),
            ),
            stars=[_deserialize_star(s) for s in data["stars"]],
            systems=[_deserialize_system(s) for s in data["systems"]],
            nebulas=[_deserialize_nebula(n) for n in data.get("nebulas", [])],
            warp_lanes=[_deserialize_warp_lane(w) for w in data.get("warp_lanes", [])],
        )
    except (KeyError, TypeError) as e:
        raise ValueError(f"Invalid universe data: {e!r}") from e


def star_to_dict(star: Star) -> dict[str, Any]:
    """Convert Star to dictionary."""
    return {
        "id": star.id,
        "name": star.name,
        "position": list(star.position),
        "spectral_class": star.spectral_class,
        "mass": star.mass,
        "radius": star.radius,
        "temperature": star.temperature,
        "luminosity": star.luminosity,
        "age": star.age,
        "planet_count": star.planet_count,
    }


def _deserialize_star(data: dict[str, Any]) -> Star:
    """Reconstruct Star from dictionary."""
    return Star(
        id=data["id"],
        name=data["name"],
        position=tuple(data["position"]),
        spectral_class=data["spectral_class"],
        mass=data["mass"],
        radius=data["radius"],
        temperature=data["temperature"],
        luminosity=data["luminosity"],
        age=data["age"],
        planet_count=data["planet_count"],
    )


def _serialize_nebula(nebula: Nebula) -> dict[str, Any]:
    return {
        "id": nebula.id,
        "name": nebula.name,
        "position": list(nebula.position),
        "radius": nebula.radius,
        "color": nebula.color,
        "composition": nebula.composition,
        "type": nebula.type,
    }


def _deserialize_nebula(data: dict[str, Any]) -> Nebula:
    return Nebula(
        id=data["id"],
        name=data["name"],
        position=tuple(data["position"]),
        radius=data["radius"],
        color=data["color"],
        composition=data["composition"],
        type=data["type"],
    )


def system_to_dict(system: StarSystem) -> dict[str, Any]:
    """Convert StarSystem (with its planets and belts) to dictionary."""
    return {
        "id": system.id,
        "star_id": system.star_id,
        "planets": [planet_to_dict(p) for p in system.planets],
        "asteroid_belts": [
            {
                "id": belt.id,
                "name": belt.name,
                "inner_radius": belt.inner_radius,
                "outer_radius": belt.outer_radius,
                "density": belt.density,
                "asteroid_count": belt.asteroid_count,
            }
            for belt in system.asteroid_belts
        ],
        "factions": [_serialize_faction(f) for f in system.factions],
        "star": star_to_dict(system.star) if system.star is not None else None,
    }


def _deserialize_system(data: dict[str, Any]) -> StarSystem:
    """Reconstruct StarSystem from dictionary."""
    star = data.get("star")
    return StarSystem(
        id=data["id"],
        star_id=data["star_id"],
        planets=[_deserialize_planet(p) for p in data.get("planets", [])],
        asteroid_belts=[AsteroidBelt(**belt) for belt in data.get("asteroid_belts", [])],
        factions=[_deserialize_faction(f) for f in data.get("factions", [])],
        star=_deserialize_star(star) if star is not None else None,
    )


def planet_to_dict(planet: Planet) -> dict[str, Any]:
    """Convert Planet to dictionary."""
    return {
        "id": planet.id,
        "name": planet.name,
        "position": list(planet.position),
        "radius": planet.radius,
        "mass": planet.mass,
        "type": planet.type.value,
        "orbit_radius": planet.orbit_radius,
        "orbit_speed": planet.orbit_speed,
        "rotation_speed": planet.rotation_speed,
        "initial_angle": planet.initial_angle,
        "inclination": planet.inclination,
        "temperature": planet.temperature,
        "atmosphere": list(planet.atmosphere),
        "moons": [
            {
                "id": moon.id,
                "name": moon.name,
                "radius": moon.radius,
                "orbit_radius": moon.orbit_radius,
                "orbit_speed": moon.orbit_speed,
            }
            for moon in planet.moons
        ],
        "rings": [
            {
                "id": ring.id,
                "name": ring.name,
                "inner_radius": ring.inner_radius,
                "outer_radius": ring.outer_radius,
                "thickness": ring.thickness,
                "density": ring.density,
                "color": ring.color,
                "composition": ring.composition.value,
            }
            for ring in planet.rings
        ],
        "surface_features": [_serialize_feature(f) for f in planet.surface_features],
        "texture_index": planet.texture_index,
        "faction": planet.faction,
    }


def _deserialize_planet(data: dict[str, Any]) -> Planet:
    """Reconstruct Planet from dictionary."""
    return Planet(
        id=data["id"],
        name=data["name"],
        position=tuple(data["position"]),
        radius=data["radius"],
        mass=data["mass"],
        type=PlanetType(data["type"]),
        orbit_radius=data["orbit_radius"],
        orbit_speed=data["orbit_speed"],
        rotation_speed=data["rotation_speed"],
        initial_angle=data["initial_angle"],
        inclination=data["inclination"],
        temperature=data["temperature"],
        atmosphere=list(data.get("atmosphere", [])),
        moons=[Moon(**moon) for moon in data.get("moons", [])],
        rings=[
            PlanetRing(**{**ring, "composition": RingComposition(ring["composition"])})
            for ring in data.get("rings", [])
        ],
        surface_features=[_deserialize_feature(f) for f in data.get("surface_features", [])],
        texture_index=data.get("texture_index", 0),
        faction=data.get("faction"),
    )


def _serialize_feature(feature: SurfaceFeature) -> dict[str, Any]:
    return {
        "id": feature.id,
        "type": feature.type,
        "name": feature.name,
        "position": list(feature.position),
        "description": feature.description,
        "population": feature.population,
        "size": feature.size,
        "technology": feature.technology,
        "affiliation": feature.affiliation,
    }


def _deserialize_feature(data: dict[str, Any]) -> SurfaceFeature:
    return SurfaceFeature(**{**data, "position": tuple(data["position"])})


def _serialize_faction(faction: Faction) -> dict[str, Any]:
    return {
        "id": faction.id,
        "name": faction.name,
        "description": faction.description,
        "leader": faction.leader,
        "homeworld_id": faction.homeworld_id,
        "influence": faction.influence,
        "goals": list(faction.goals),
        "resources": dict(faction.resources),
    }


def _deserialize_faction(data: dict[str, Any]) -> Faction:
    return Faction(**data)


def _serialize_warp_lane(lane: WarpLane) -> dict[str, Any]:
    return {
        "id": lane.id,
        "name": lane.name,
        "start_star_id": lane.start_star_id,
        "end_star_id": lane.end_star_id,
        "path": list(lane.path),
        "distance": lane.distance,
        "color": lane.color,
        "is_active": lane.is_active,
    }


def _deserialize_warp_lane(data: dict[str, Any]) -> WarpLane:
    return WarpLane(**{**data, "path": list(data["path"])})

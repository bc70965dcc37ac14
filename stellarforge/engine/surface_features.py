"""Surface feature generation for rocky planets."""

from ..models import Planet, SurfaceFeature
from ..utils import SeededStream

FEATURE_TYPES = ["city", "fort", "landmark"]
FEATURE_SIZES = ["small", "medium", "large"]
TECHNOLOGY_LEVELS = ["primitive", "industrial", "advanced"]

FEATURE_NAMES = {
    "city": ["New Terra", "Alpha Station", "Beta Colony", "Gamma Outpost", "Delta City"],
    "fort": ["Fort Alpha", "Beta Garrison", "Gamma Stronghold", "Delta Fortress", "Epsilon Base"],
    "landmark": ["Crystal Peaks", "Azure Falls", "Crimson Canyon", "Emerald Valley", "Silver Plateau"],
}

FEATURE_DESCRIPTIONS = {
    "city": "A bustling urban center with diverse populations.",
    "fort": "A stronghold providing safety and defense.",
    "landmark": "A prominent natural or historical site.",
}

AFFILIATIONS = [
    "Terran Federation",
    "Independent Colony",
    "Mining Consortium",
    "Trade Union",
    "Scientific Outpost",
    "Frontier Settlement",
    "Corporate Territory",
    "Free State",
    "Research Station",
    "Colonial Administration",
]


def generate_surface_features(planet: Planet, seed: int, count: int = 5) -> list[SurfaceFeature]:
    """Generate named surface locations for a planet.

    Giants have no surface and get none.

    Args:
        planet: Owning planet
        seed: Feature seed
        count: Number of features to place

    Returns:
        List of features owned by the planet
    """
    if planet.type.is_giant or count <= 0:
        return []

    features = []
    for i in range(count):
        stream = SeededStream(seed).child(i * 10)
        feature_type = stream.choice(0, FEATURE_TYPES)
        features.append(
            SurfaceFeature(
                id=f"{planet.id}-feature-{i}",
                type=feature_type,
                name=FEATURE_NAMES[feature_type][i % len(FEATURE_NAMES[feature_type])],
                position=(stream.uniform(1, -90.0, 90.0), stream.uniform(2, -180.0, 180.0)),
                description=FEATURE_DESCRIPTIONS[feature_type],
                population=stream.randint(3, 50_000, 10_050_000) if feature_type == "city" else None,
                size=stream.choice(4, FEATURE_SIZES),
                technology=stream.choice(5, TECHNOLOGY_LEVELS),
                affiliation=stream.choice(6, AFFILIATIONS),
            )
        )
    return features

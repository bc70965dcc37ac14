"""Pydantic request schemas for API endpoints."""

from pydantic import BaseModel, Field

from ...models import PlanetType
from ...utils import DEFAULT_GALAXY_SEED, GALAXY_RADIUS
from ...utils.constants import STAR_MASS_RANGE, STAR_TEMPERATURE_RANGE


class GenerateLoreRequest(BaseModel):
    """Request to generate a new lore universe."""

    seed: int = Field(default=DEFAULT_GALAXY_SEED, description="Galaxy seed")
    starCount: int = Field(default=1000, ge=0, le=20000)  # noqa: N815
    nebulaCount: int = Field(default=30, ge=0, le=1000)  # noqa: N815
    laneCount: int = Field(default=12, ge=0, le=200)  # noqa: N815
    galaxyRadius: float = Field(default=GALAXY_RADIUS, gt=0)  # noqa: N815


class StarUpdateRequest(BaseModel):
    """Partial update of a lore star. Omitted fields are left unchanged."""

    name: str | None = Field(default=None, min_length=1)
    position: tuple[float, float, float] | None = None
    spectralClass: str | None = Field(default=None, pattern="^[OBAFGKM]$")  # noqa: N815
    mass: float | None = Field(default=None, ge=STAR_MASS_RANGE[0], le=STAR_MASS_RANGE[1])
    radius: float | None = Field(default=None, gt=0)
    temperature: float | None = Field(
        default=None, ge=STAR_TEMPERATURE_RANGE[0], le=STAR_TEMPERATURE_RANGE[1]
    )
    luminosity: float | None = Field(default=None, ge=0)
    age: float | None = Field(default=None, ge=0)
    planetCount: int | None = Field(default=None, ge=0)  # noqa: N815

    def to_updates(self) -> dict:
        """Model field updates for the fields that were provided."""
        fields = {
            "name": "name",
            "position": "position",
            "spectralClass": "spectral_class",
            "mass": "mass",
            "radius": "radius",
            "temperature": "temperature",
            "luminosity": "luminosity",
            "age": "age",
            "planetCount": "planet_count",
        }
        return {fields[key]: value for key, value in self.model_dump(exclude_none=True).items()}


class PlanetUpdateRequest(BaseModel):
    """Partial update of a planet in a generated lore system."""

    name: str | None = Field(default=None, min_length=1)
    type: PlanetType | None = None
    radius: float | None = Field(default=None, gt=0)
    mass: float | None = Field(default=None, gt=0)
    temperature: float | None = None
    atmosphere: list[str] | None = None
    textureIndex: int | None = Field(default=None, ge=0)  # noqa: N815

    def to_updates(self) -> dict:
        """Model field updates for the fields that were provided."""
        updates = self.model_dump(exclude_none=True)
        if "textureIndex" in updates:
            updates["texture_index"] = updates.pop("textureIndex")
        return updates

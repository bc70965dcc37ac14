"""Pydantic response schemas for API endpoints."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Server health check."""

    service: str
    status: str
    version: str
    loreUniverse: bool  # noqa: N815


class StarsResponse(BaseModel):
    """Response containing a generated star field."""

    seed: int
    count: int
    stars: list[dict]


class UniverseResponse(BaseModel):
    """A full universe document, in the same shape as a saved file."""

    mode: str
    metadata: dict
    stars: list[dict]
    systems: list[dict] = Field(default_factory=list)
    nebulas: list[dict] = Field(default_factory=list)
    warp_lanes: list[dict] = Field(default_factory=list)


class SystemResponse(BaseModel):
    """A star's planetary system."""

    id: str
    star_id: str
    planets: list[dict]
    asteroid_belts: list[dict]
    factions: list[dict] = Field(default_factory=list)
    star: dict | None = None


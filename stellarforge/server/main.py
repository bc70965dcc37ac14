"""FastAPI server for Stellar Forge.

Serves generated star fields and an editable lore universe whose systems
are generated lazily the first time a star is opened.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import Body, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from ..engine import generate_stars
from ..engine.star_generator import star_color
from ..utils import DEFAULT_GALAXY_SEED, VERSION
from ..utils.serialization import (
    planet_to_dict,
    star_to_dict,
    system_to_dict,
    universe_from_dict,
    universe_to_dict,
)
from .schemas.requests import GenerateLoreRequest, PlanetUpdateRequest, StarUpdateRequest
from .schemas.responses import HealthResponse, StarsResponse, SystemResponse, UniverseResponse
from .storage import LoreUniverseStore

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Global lore universe store
store = LoreUniverseStore()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup/shutdown."""
    logger.info("Stellar Forge server starting...")
    yield
    logger.info("Stellar Forge server shutting down...")
    store.clear()


app = FastAPI(
    title="Stellar Forge API",
    description="Procedural universe generation and lore editing",
    version=VERSION,
    lifespan=lifespan,
)

# Enable CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify exact origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _require_universe():
    if store.universe is None:
        raise HTTPException(status_code=404, detail="No lore universe has been created")
    return store.universe


# ============================================
# API ENDPOINTS
# ============================================


@app.get("/api", response_model=HealthResponse)
async def api_root():
    """API root endpoint - server health check."""
    return HealthResponse(
        service="Stellar Forge",
        status="operational",
        version=VERSION,
        loreUniverse=store.universe is not None,
    )


@app.get("/api/stars", response_model=StarsResponse)
async def get_stars(
    seed: int = Query(default=DEFAULT_GALAXY_SEED),
    count: int = Query(default=1000, ge=0, le=20000),
):
    """Generate a star field.

    Example:
        GET /api/stars?seed=12345&count=100
    """
    stars = generate_stars(seed, count)
    return StarsResponse(
        seed=seed,
        count=len(stars),
        stars=[{**star_to_dict(s), "color": star_color(s.spectral_class)} for s in stars],
    )


@app.post("/api/lore/generate", response_model=UniverseResponse)
async def generate_lore_universe(request: GenerateLoreRequest):
    """Generate a new lore universe and make it current.

    Example:
        POST /api/lore/generate
        {"seed": 42, "starCount": 500, "nebulaCount": 20, "laneCount": 8}
    """
    universe = store.generate(
        request.seed,
        request.starCount,
        request.nebulaCount,
        request.laneCount,
        galaxy_radius=request.galaxyRadius,
    )
    return universe_to_dict(universe)


@app.get("/api/lore/universe", response_model=UniverseResponse)
async def get_lore_universe():
    """Return the current lore universe."""
    return universe_to_dict(_require_universe())


@app.post("/api/lore/universe", response_model=UniverseResponse)
async def save_lore_universe(data: dict = Body(...)):
    """Replace the lore universe with an uploaded document.

    The body uses the same shape as a saved universe file.
    """
    try:
        universe = universe_from_dict(data)
    except ValueError as e:
        logger.warning(f"Rejected lore universe upload: {e}", exc_info=True)
        raise HTTPException(status_code=400, detail=str(e))

    store.replace(universe)
    return universe_to_dict(universe)


@app.put("/api/lore/star/{star_id}")
async def update_star(star_id: str, request: StarUpdateRequest):
    """Update fields of a lore star.

    Example:
        PUT /api/lore/star/star-0
        {"name": "Home", "mass": 1.1}
    """
    _require_universe()
    try:
        star = store.update_star(star_id, request.to_updates())
    except ValueError as e:
        logger.warning(f"Star {star_id}: update rejected: {e}", exc_info=True)
        raise HTTPException(status_code=400, detail=str(e))

    if star is None:
        raise HTTPException(status_code=404, detail="Star not found")
    return star_to_dict(star)


@app.put("/api/lore/planet/{planet_id}")
async def update_planet(planet_id: str, request: PlanetUpdateRequest):
    """Update fields of a planet in an already opened system."""
    _require_universe()
    try:
        planet = store.update_planet(planet_id, request.to_updates())
    except ValueError as e:
        logger.warning(f"Planet {planet_id}: update rejected: {e}", exc_info=True)
        raise HTTPException(status_code=400, detail=str(e))

    if planet is None:
        raise HTTPException(status_code=404, detail="Planet not found")
    return planet_to_dict(planet)


@app.get("/api/lore/star/{star_id}/system", response_model=SystemResponse)
async def get_star_system(star_id: str):
    """Open a star's system, generating it on first request."""
    _require_universe()
    try:
        system = store.system_for(star_id)
    except ValueError as e:
        logger.warning(f"Star {star_id}: system generation rejected: {e}", exc_info=True)
        raise HTTPException(status_code=400, detail=str(e))

    if system is None:
        raise HTTPException(status_code=404, detail="Star not found")
    return system_to_dict(system)

"""HTTP REST endpoints for the orrery.

- /health                — Health check
- /search                — Search Horizons bodies by name or designation
- /bodies                — List simulated bodies
- /bodies/{id}           — Spawn (POST) or remove (DELETE) a body
- /simulation/config     — Read or update integrator settings
- /simulation/step       — Advance the simulation by one step
"""

from __future__ import annotations

import logging
from dataclasses import asdict, replace

import httpx
from fastapi import APIRouter, HTTPException, Query, Request
from pydantic import BaseModel, Field

from simulation.integrator import SimulationConfig
from simulation.loader import BodyLoader
from simulation.world import World

logger = logging.getLogger("orrery.api")
router = APIRouter()


# --------------------------------------------------------------------------- #
#  Pydantic models for request/response
# --------------------------------------------------------------------------- #

class SearchRecordOut(BaseModel):
    id: int
    name: str
    designation: str
    other: str


class BodyOut(BaseModel):
    body_id: int
    name: str
    radius_km: float
    mass: float
    position: list[float]
    velocity: list[float]


class ConfigIn(BaseModel):
    gravitational_constant: float | None = Field(default=None, gt=0)
    dt: float | None = Field(default=None, gt=0)
    paused: bool | None = None
    interpolating: bool | None = None


class ConfigOut(BaseModel):
    gravitational_constant: float
    dt: float
    paused: bool
    interpolating: bool


# --------------------------------------------------------------------------- #
#  Helpers
# --------------------------------------------------------------------------- #

def _get_world(request: Request) -> World:
    world: World = request.app.state.world
    return world


def _get_loader(request: Request) -> BodyLoader:
    loader: BodyLoader = request.app.state.loader
    return loader


# --------------------------------------------------------------------------- #
#  Endpoints
# --------------------------------------------------------------------------- #

@router.get("/health")
async def health():
    return {"status": "ok", "service": "orrery"}


@router.get("/search", response_model=list[SearchRecordOut])
async def search(request: Request, q: str = Query(min_length=1)):
    """Bodies whose name or designation matches ``q``."""
    loader = _get_loader(request)
    records = await loader.search(q)
    return [SearchRecordOut(**asdict(r)) for r in records]


@router.get("/bodies", response_model=list[BodyOut])
async def list_bodies(request: Request):
    return _get_world(request).snapshot()


@router.post("/bodies/{body_id}", response_model=BodyOut)
async def spawn_body(body_id: int, request: Request, name: str | None = Query(default=None)):
    """Fetch a body from Horizons and add it to the simulation."""
    loader = _get_loader(request)
    world = _get_world(request)

    try:
        body = await loader.load(body_id, name)
    except httpx.HTTPError as e:
        logger.error("Horizons request for body %d failed: %s", body_id, e)
        raise HTTPException(status_code=502, detail=f"Horizons request failed: {e}")

    if body is None:
        raise HTTPException(
            status_code=404,
            detail=f"Could not retrieve motion and physical data for body {body_id}",
        )

    world.add(body)
    return next(b for b in world.snapshot() if b["body_id"] == body_id)


@router.delete("/bodies/{body_id}")
async def remove_body(body_id: int, request: Request):
    if not _get_world(request).remove(body_id):
        raise HTTPException(status_code=404, detail=f"Body {body_id} is not simulated")
    return {"removed": body_id}


@router.get("/simulation/config", response_model=ConfigOut)
async def get_config(request: Request):
    return asdict(_get_world(request).config)


@router.put("/simulation/config", response_model=ConfigOut)
async def update_config(req: ConfigIn, request: Request):
    """Update integrator settings; omitted fields keep their value."""
    world = _get_world(request)
    changes = req.model_dump(exclude_none=True)
    world.config = replace(world.config, **changes)
    logger.info("Simulation config updated: %s", changes)
    return asdict(world.config)


@router.post("/simulation/step")
async def step(request: Request):
    """Advance one step, even while the background loop is paused."""
    world = _get_world(request)
    world.step(replace(world.config, paused=False))
    return {"ticks": world.ticks, "bodies": world.snapshot()}

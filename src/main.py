from __future__ import annotations

import asyncio
import contextlib
import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import settings
from api.routes_http import router as http_router
from simulation.loader import BodyLoader
from simulation.world import World

logger = logging.getLogger("orrery")
logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(name)s] %(levelname)s: %(message)s")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: open the Horizons client and start ticking. Shutdown: stop both."""
    client = httpx.AsyncClient(timeout=settings.horizons_timeout)
    world = World()
    app.state.world = world
    app.state.loader = BodyLoader(client)
    loop = asyncio.create_task(world.run(settings.tick_interval))
    logger.info("Orrery ready")
    yield
    loop.cancel()
    with contextlib.suppress(asyncio.CancelledError):
        await loop
    await client.aclose()
    logger.info("Shutting down orrery")


app = FastAPI(
    title="Orrery — Horizons-driven N-body simulator",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(http_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=settings.host, port=settings.port, reload=settings.reload)

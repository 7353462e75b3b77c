"""Fetch-and-parse actions behind the search box and the spawn button.

Each user action runs one loader call. Nothing deduplicates or cancels
earlier calls, so when two spawns of the same body overlap the last one to
finish is what the world keeps.
"""

from __future__ import annotations

import logging

import httpx

from horizons.client import fetch_body_motion, fetch_body_properties, search_bodies
from horizons.records import BodySearchRecord
from simulation.world import KM_TO_M, SimBody

logger = logging.getLogger("orrery.simulation")


class BodyLoader:
    """Turns Horizons reports into bodies ready for the world."""

    def __init__(self, client: httpx.AsyncClient | None = None) -> None:
        self._client = client

    async def search(self, query: str) -> list[BodySearchRecord]:
        """Search matches for ``query``; an empty list if Horizons is unreachable."""
        try:
            return await search_bodies(query, self._client)
        except httpx.HTTPError as e:
            logger.error("Search for %r failed: %s", query, e)
            return []

    async def load(self, body_id: int, name: str | None = None) -> SimBody | None:
        """Fetch motion and physical data for ``body_id``.

        Returns None, after logging which part was missing, when either
        report could not be parsed. Transport errors propagate.
        """
        motion = await fetch_body_motion(body_id, self._client)
        if motion is None:
            logger.error("Unable to find body %d motion parameters (position & velocity)", body_id)
            return None

        properties = await fetch_body_properties(body_id, self._client)
        if properties is None:
            logger.error(
                "Unable to find body %d physical properties (mass & radius). "
                "Please try another body, preferably a major one (e.g. Earth, Mars)",
                body_id,
            )
            return None

        position, velocity = motion
        return SimBody(
            body_id=body_id,
            name=name or str(body_id),
            position=position.current.to_array() * KM_TO_M,
            velocity=velocity.current.to_array() * KM_TO_M,
            mass=properties.mass.kg,
            radius_km=properties.radius_km,
        )

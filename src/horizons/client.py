"""Async client for the JPL Horizons REST API.

Issues the three text-format queries the orrery needs (body search, state
vectors at the reference epoch, physical data) and hands the raw report to
the matching parser.

API docs: https://ssd-api.jpl.nasa.gov/doc/horizons.html
"""

from __future__ import annotations

import logging

import httpx

from config import settings
from horizons.motion import parse_motion_report
from horizons.properties import parse_physical_report
from horizons.records import BodySearchRecord, MotionResult, PhysicalProperties
from horizons.search import parse_search_report

logger = logging.getLogger("orrery.horizons")

# Horizons vector settings
# CENTER      = geocentric (500@399)
# TLIST       = single reference epoch
# OUT_UNITS   = KM-S  (km and km/s)
# OBJ_DATA    = NO    (physical data is fetched separately)


def motion_params(body_id: int) -> dict:
    return {
        "format": "text",
        "COMMAND": str(body_id),
        "EPHEM_TYPE": "VECTORS",
        "CENTER": f"'{settings.horizons_center}'",
        "TLIST": f"'{settings.horizons_epoch}'",
        "TIME_TYPE": "TT",
        "REF_SYSTEM": "'ICRF'",
        "OUT_UNITS": f"'{settings.horizons_out_units}'",
        "OBJ_DATA": "'NO'",
    }


def search_params(query: str) -> dict:
    return {
        "format": "text",
        "COMMAND": f"'{query}'",
        "MAKE_EPHEM": "'NO'",
    }


def properties_params(body_id: int) -> dict:
    return {
        "format": "text",
        "COMMAND": str(body_id),
        "OBJ_DATA": "'YES'",
        "MAKE_EPHEM": "'NO'",
    }


async def fetch_report(params: dict, client: httpx.AsyncClient | None = None) -> str:
    """GET a Horizons text report.

    Reuses ``client`` when given, otherwise opens a short-lived one.
    HTTP and transport errors propagate as ``httpx.HTTPError``.
    """
    if client is not None:
        resp = await client.get(settings.horizons_url, params=params)
        resp.raise_for_status()
        return resp.text

    async with httpx.AsyncClient(timeout=settings.horizons_timeout) as own_client:
        resp = await own_client.get(settings.horizons_url, params=params)
        resp.raise_for_status()
        return resp.text


async def search_bodies(
    query: str,
    client: httpx.AsyncClient | None = None,
) -> list[BodySearchRecord]:
    """Search Horizons for bodies whose name or designation matches ``query``."""
    logger.info("Searching Horizons for %r", query)
    text = await fetch_report(search_params(query), client)
    records = parse_search_report(text)
    logger.info("Search %r matched %d bodies", query, len(records))
    return records


async def fetch_body_motion(
    body_id: int,
    client: httpx.AsyncClient | None = None,
) -> MotionResult | None:
    """Fetch the position and velocity of a body at the reference epoch."""
    logger.info("Fetching state vectors for %d", body_id)
    text = await fetch_report(motion_params(body_id), client)
    return parse_motion_report(text)


async def fetch_body_properties(
    body_id: int,
    client: httpx.AsyncClient | None = None,
) -> PhysicalProperties | None:
    """Fetch the mass and mean radius of a body."""
    logger.info("Fetching physical data for %d", body_id)
    text = await fetch_report(properties_params(body_id), client)
    return parse_physical_report(text)

#!/usr/bin/env python3
"""Query JPL Horizons and print what the orrery parsers make of it.

Usage:
    python scripts/fetch_body.py --search Mars
    python scripts/fetch_body.py --id 499
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

# Add src to path
sys.path.insert(0, "src")

from horizons.client import fetch_body_motion, fetch_body_properties, search_bodies


async def main(query: str | None, body_id: int | None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )
    logger = logging.getLogger("fetch_body")

    if query is not None:
        records = await search_bodies(query)
        for r in records:
            print(f"{r.id:>9}  {r.name:<37} {r.designation:<12} {r.other}")
        logger.info("%d matches for %r", len(records), query)
        return 0

    motion = await fetch_body_motion(body_id)
    if motion is None:
        logger.error("No state vectors could be parsed for %d", body_id)
        return 1
    position, velocity = motion
    print(f"position (km)   : {position.current.x:.6e} {position.current.y:.6e} {position.current.z:.6e}")
    print(f"velocity (km/s) : {velocity.current.x:.6e} {velocity.current.y:.6e} {velocity.current.z:.6e}")

    properties = await fetch_body_properties(body_id)
    if properties is None:
        logger.error("No mass / mean radius could be parsed for %d", body_id)
        return 1
    print(f"mass (kg)       : {properties.mass.kg:.6e}")
    print(f"radius (km)     : {properties.radius_km}")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Fetch and parse Horizons reports")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--search", help="Name or designation to search for")
    group.add_argument("--id", type=int, help="Horizons body ID to fetch")
    args = parser.parse_args()

    sys.exit(asyncio.run(main(args.search, args.id)))

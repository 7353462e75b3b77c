"""Report scanner for Horizons vector ephemerides.

The data block sits between ``$$SOE`` and ``$$EOE`` markers. With the
default vector table each record is a calendar header line followed by the
position and velocity lines::

    $$SOE
    2451545.000000000 = A.D. 2000-Jan-01 12:00:00.0000 TDB
     X = 2.345471743170112E+08 Y =-1.467043494230836E+08 Z =-5.155677809885457E+06
     VX= 3.095693250734420E+01 VY= 3.176535947901246E+01 VZ= 5.221152230112693E-01
     LT= 9.280062985681519E+02 RG= 2.782098372186024E+08 RR= 1.182015733440698E+00
    $$EOE

Queries always ask for a single epoch, so only the first record is read.
"""

from __future__ import annotations

import logging
import re

from horizons.records import MotionResult
from horizons.vectors import parse_position, parse_velocity

logger = logging.getLogger("orrery.parser")

START_OF_DATA = "$$SOE"
END_OF_DATA = "$$EOE"

# "X =" but not the X inside "VX="
_POSITION_MARKER = re.compile(r"(?<![A-Za-z])X\s*=")
_VELOCITY_MARKER = re.compile(r"(?<![A-Za-z])VX\s*=")


def parse_motion_report(text: str) -> MotionResult | None:
    """Extract the first (position, velocity) record of a vector report.

    Each expectation is checked in order: start marker, one header line,
    a position line, a velocity line. Any violated expectation yields None.
    """
    lines = iter(text.splitlines())

    for line in lines:
        stripped = line.strip()
        if stripped.startswith(END_OF_DATA):
            logger.debug("Reached %s before %s", END_OF_DATA, START_OF_DATA)
            return None
        if stripped.startswith(START_OF_DATA):
            break
    else:
        logger.debug("No %s marker in vector report", START_OF_DATA)
        return None

    # Calendar header line
    if next(lines, None) is None:
        return None

    position_line = next(lines, None)
    if position_line is None or not _POSITION_MARKER.search(position_line):
        logger.debug("Expected position line after header, got %r", position_line)
        return None

    velocity_line = next(lines, None)
    if velocity_line is None or not _VELOCITY_MARKER.search(velocity_line):
        logger.debug("Expected velocity line after position, got %r", velocity_line)
        return None

    position = parse_position(position_line)
    velocity = parse_velocity(velocity_line)
    if position is None or velocity is None:
        return None

    return MotionResult(position, velocity)

"""Physical-property extraction from Horizons object data dumps.

The physical data block packs two ``key = value`` pairs per line::

     Vol. Mean Radius (km) =  2439.4+-0.1    Density (g cm^-3)     = 5.427
     Mass x10^23 (kg)      =     3.302       Volume (x10^10 km^3)  = 6.085

Scale factors live in the key (``x10^23``), not in the value, so the mass
is resolved in two stages: a mantissa from the value, an exponent from the
key text, combined at the end.

Jupiter's dump gives its mass in grams (``Mass x 10^22 (g)``). That layout
is not supported and fails the extraction instead of being rescaled.
"""

from __future__ import annotations

import logging
import math
import re

from horizons.numeric import extract_number
from horizons.records import Mass, PhysicalProperties

logger = logging.getLogger("orrery.parser")

_EXPONENT_MARKER = "10^"
_EXPONENT_DIGITS = re.compile(r"[+-]?\d+")
# Columns of a physical data line are separated by runs of spaces
_COLUMN_GAP = re.compile(r"\s{2,}")
_APPROXIMATE = "~"


class UnsupportedLayout(ValueError):
    """Raised internally when a report cannot be read without guessing."""


def split_pairs(line: str) -> list[tuple[str, str]]:
    """Split a data line into its ``(key, value)`` pairs.

    Every ``=`` closes a key; the text after it holds the value and, when a
    second pair shares the line, that pair's key after a column gap. A
    segment with a single column before another ``=`` is an empty value
    followed by the next key.
    """
    segments = line.split("=")
    pairs: list[tuple[str, str]] = []
    key = segments[0]
    for index, segment in enumerate(segments[1:], start=1):
        if index == len(segments) - 1:
            value, next_key = segment, ""
        else:
            parts = _COLUMN_GAP.split(segment.strip(), maxsplit=1)
            if len(parts) > 1:
                value, next_key = parts
            else:
                # Empty value: the only column is the next pair's key
                value, next_key = "", parts[0]
        pairs.append((key.strip(), value.strip()))
        key = next_key
    return pairs


def is_mean_radius_key(key: str) -> bool:
    key = key.lower()
    if "radius" not in key:
        return False
    if "equ" in key or "polar" in key or "solar" in key:
        return False
    return "mean" in key or "vol" in key


def is_mass_key(key: str) -> bool:
    key = key.lower()
    return "mass" in key and "ratio" not in key


def key_exponent(key: str) -> int | None:
    """Return the power of ten encoded in a key such as ``Mass x10^23 (kg)``.

    Returns None when the key carries no ``10^`` marker. Raises
    UnsupportedLayout when the marker is present but its exponent is not an
    integer.
    """
    marker = key.find(_EXPONENT_MARKER)
    if marker < 0:
        return None
    match = _EXPONENT_DIGITS.match(key, marker + len(_EXPONENT_MARKER))
    if match is None:
        raise UnsupportedLayout(f"Unreadable exponent in key {key!r}")
    return int(match.group())


def _value_number(value: str) -> float | None:
    return extract_number(value.lstrip(_APPROXIMATE).lstrip())


def _resolve_mass(key: str, value: str) -> float | None:
    lowered = key.lower()
    if "kg" not in lowered:
        raise UnsupportedLayout(f"Mass key without kilogram unit: {key!r}")

    exponent = key_exponent(lowered)
    mantissa = _value_number(value)
    if mantissa is None:
        return None

    if exponent is None:
        return mantissa
    try:
        mass = mantissa * 10.0 ** exponent
    except OverflowError:
        return None
    return mass if math.isfinite(mass) else None


def parse_physical_report(text: str) -> PhysicalProperties | None:
    """Extract (mass, mean radius) from a Horizons physical data report.

    The first readable mass and mean-radius entries win. Both must be
    found; a report holding only one of them yields None.
    """
    mass: float | None = None
    radius_km: float | None = None

    try:
        for line in text.splitlines():
            if not line.strip() or "=" not in line:
                continue
            for key, value in split_pairs(line):
                if radius_km is None and is_mean_radius_key(key):
                    radius_km = _value_number(value)
                elif mass is None and is_mass_key(key):
                    mass = _resolve_mass(key, value)
    except UnsupportedLayout as e:
        logger.debug("Unsupported physical data layout: %s", e)
        return None

    if mass is None or radius_km is None:
        logger.debug("Incomplete physical data: mass=%s radius_km=%s", mass, radius_km)
        return None
    if mass < 0.0:
        return None

    return PhysicalProperties(Mass(mass), radius_km)

"""Parsing of Horizons state-vector lines.

With ``VEC_LABELS=YES`` (the default) a vector table row spans lines like::

     X = 2.345471743170112E+08 Y =-1.467043494230836E+08 Z =-5.155677809885457E+06
     VX= 3.095693250734420E+01 VY= 3.176535947901246E+01 VZ= 5.221152230112693E-01

The parser does not check the labels; the report scanner knows which line
it is handing over.
"""

from __future__ import annotations

from horizons.numeric import extract_number
from horizons.records import Position, Vector3, Velocity


def parse_vector_line(line: str) -> Vector3 | None:
    """Parse the three ``key = value`` fields of a line into a Vector3."""
    segments = line.strip().split("=")
    if len(segments) < 4:
        return None

    components: list[float] = []
    for segment in segments[1:4]:
        words = segment.split()
        if not words:
            return None
        value = extract_number(words[0])
        if value is None:
            return None
        components.append(value)

    return Vector3(*components)


def parse_position(line: str) -> Position | None:
    vector = parse_vector_line(line)
    if vector is None:
        return None
    return Position(vector)


def parse_velocity(line: str) -> Velocity | None:
    vector = parse_vector_line(line)
    if vector is None:
        return None
    return Velocity(vector)

"""Typed records produced by the Horizons report parsers.

Every record is an immutable value built in one shot from a single report.
Units are the ones Horizons reports in: km, km/s, kg.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, NamedTuple

import numpy as np


@dataclass(frozen=True, slots=True)
class Vector3:
    x: float
    y: float
    z: float

    ZERO: ClassVar[Vector3]

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y) and math.isfinite(self.z)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)


Vector3.ZERO = Vector3(0.0, 0.0, 0.0)


@dataclass(frozen=True, slots=True)
class Position:
    """Current position plus the previously recorded one (km).

    ``previous`` belongs to the integrator, which fills it every tick for
    interpolated display. Parsers always leave it zeroed.
    """

    current: Vector3
    previous: Vector3 = Vector3.ZERO


@dataclass(frozen=True, slots=True)
class Velocity:
    """Current velocity plus the previously recorded one (km/s)."""

    current: Vector3
    previous: Vector3 = Vector3.ZERO


@dataclass(frozen=True, slots=True)
class Mass:
    kg: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.kg) or self.kg < 0.0:
            raise ValueError(f"Mass must be finite and non-negative, got {self.kg!r}")


@dataclass(frozen=True, slots=True)
class BodySearchRecord:
    """One row of a Horizons name/designation search table."""

    id: int
    name: str
    designation: str = ""
    other: str = ""


class MotionResult(NamedTuple):
    position: Position
    velocity: Velocity


class PhysicalProperties(NamedTuple):
    mass: Mass
    radius_km: float

"""N-body integrator — pairwise Newtonian gravity, symplectic Euler step.

All quantities are SI (m, m/s, kg, s). The per-pair acceleration loop is
JIT-compiled with Numba.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numba import njit

from config import settings


@dataclass(frozen=True, slots=True)
class SimulationConfig:
    """Integrator settings, passed explicitly to every step."""

    gravitational_constant: float = settings.gravitational_constant
    dt: float = settings.physics_dt
    paused: bool = False
    interpolating: bool = settings.interpolating


# --------------------------------------------------------------------------- #
#  Accelerations
# --------------------------------------------------------------------------- #
@njit(cache=True)
def compute_accelerations(positions: np.ndarray, masses: np.ndarray, g: float) -> np.ndarray:
    """Acceleration of every body due to all the others.

    Parameters
    ----------
    positions : (N, 3) positions in m
    masses : (N,) masses in kg
    g : gravitational constant

    Bodies at identical positions exert no force on each other.
    """
    n = positions.shape[0]
    acc = np.zeros((n, 3))
    for i in range(n):
        for j in range(n):
            if i == j:
                continue
            dx = positions[j, 0] - positions[i, 0]
            dy = positions[j, 1] - positions[i, 1]
            dz = positions[j, 2] - positions[i, 2]
            dist = np.sqrt(dx * dx + dy * dy + dz * dz)
            if dist == 0.0:
                continue
            scale = g * masses[j] / dist**3
            acc[i, 0] += dx * scale
            acc[i, 1] += dy * scale
            acc[i, 2] += dz * scale
    return acc


def symplectic_euler_step(
    positions: np.ndarray,
    velocities: np.ndarray,
    masses: np.ndarray,
    config: SimulationConfig,
) -> tuple[np.ndarray, np.ndarray]:
    """Advance one step: velocity from current accelerations, then position
    from the updated velocity. Returns new (positions, velocities)."""
    acc = compute_accelerations(positions, masses, config.gravitational_constant)
    new_velocities = velocities + acc * config.dt
    new_positions = positions + new_velocities * config.dt
    return new_positions, new_velocities

"""Simulated bodies and the state the integrator advances every tick.

The world keeps current and previous state for each body. The previous
slot is written by ``step`` and used to interpolate display positions
between two ticks.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

import numpy as np

from simulation.integrator import SimulationConfig, symplectic_euler_step

logger = logging.getLogger("orrery.simulation")

KM_TO_M = 1000.0


@dataclass(frozen=True, slots=True)
class SimBody:
    """A body as it enters the simulation (SI units, radius in km)."""

    body_id: int
    name: str
    position: np.ndarray  # (3,) m
    velocity: np.ndarray  # (3,) m/s
    mass: float  # kg
    radius_km: float


class World:
    """Bodies keyed by Horizons ID plus their integrator state."""

    def __init__(self, config: SimulationConfig | None = None) -> None:
        self.config = config or SimulationConfig()
        self._ids: list[int] = []
        self._names: dict[int, str] = {}
        self._radii: dict[int, float] = {}
        self.masses = np.zeros(0)
        self.positions = np.zeros((0, 3))
        self.velocities = np.zeros((0, 3))
        self.previous_positions = np.zeros((0, 3))
        self.previous_velocities = np.zeros((0, 3))
        self.ticks = 0

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, body_id: int) -> bool:
        return body_id in self._names

    def add(self, body: SimBody) -> None:
        """Add a body, replacing any body already simulated under its ID."""
        if body.body_id in self:
            logger.info("Replacing body %d (%s)", body.body_id, body.name)
            self.remove(body.body_id)

        self._ids.append(body.body_id)
        self._names[body.body_id] = body.name
        self._radii[body.body_id] = body.radius_km

        position = np.asarray(body.position, dtype=np.float64).reshape(1, 3)
        velocity = np.asarray(body.velocity, dtype=np.float64).reshape(1, 3)
        self.masses = np.append(self.masses, body.mass)
        self.positions = np.vstack([self.positions, position])
        self.velocities = np.vstack([self.velocities, velocity])
        self.previous_positions = np.vstack([self.previous_positions, position])
        self.previous_velocities = np.vstack([self.previous_velocities, velocity])
        logger.info("Added body %d (%s), %d bodies simulated", body.body_id, body.name, len(self))

    def remove(self, body_id: int) -> bool:
        if body_id not in self:
            return False
        index = self._ids.index(body_id)
        self._ids.pop(index)
        del self._names[body_id]
        del self._radii[body_id]
        self.masses = np.delete(self.masses, index)
        self.positions = np.delete(self.positions, index, axis=0)
        self.velocities = np.delete(self.velocities, index, axis=0)
        self.previous_positions = np.delete(self.previous_positions, index, axis=0)
        self.previous_velocities = np.delete(self.previous_velocities, index, axis=0)
        return True

    def step(self, config: SimulationConfig | None = None) -> bool:
        """Advance one integrator step; returns False when paused."""
        config = config or self.config
        if config.paused:
            return False

        self.previous_positions = self.positions
        self.previous_velocities = self.velocities
        if len(self):
            self.positions, self.velocities = symplectic_euler_step(
                self.positions, self.velocities, self.masses, config,
            )
        self.ticks += 1
        return True

    def interpolated_positions(self, alpha: float) -> np.ndarray:
        """Positions blended between the previous and current tick.

        ``alpha`` is the fraction of a tick elapsed, 0 → previous, 1 → current.
        Without interpolation the current positions are returned.
        """
        if not self.config.interpolating:
            return self.positions.copy()
        alpha = min(max(alpha, 0.0), 1.0)
        return self.previous_positions + (self.positions - self.previous_positions) * alpha

    def snapshot(self) -> list[dict]:
        return [
            {
                "body_id": body_id,
                "name": self._names[body_id],
                "radius_km": self._radii[body_id],
                "mass": float(self.masses[i]),
                "position": self.positions[i].tolist(),
                "velocity": self.velocities[i].tolist(),
            }
            for i, body_id in enumerate(self._ids)
        ]

    async def run(self, interval: float) -> None:
        """Step the world at a fixed real-time interval until cancelled."""
        logger.info("Simulation loop started (interval=%.3fs)", interval)
        try:
            while True:
                self.step()
                await asyncio.sleep(interval)
        except asyncio.CancelledError:
            logger.info("Simulation loop stopped after %d ticks", self.ticks)
            raise

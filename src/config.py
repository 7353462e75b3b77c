from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Horizons
    horizons_url: str = "https://ssd.jpl.nasa.gov/api/horizons.api"
    horizons_timeout: float = 60.0
    horizons_center: str = "500@399"
    horizons_epoch: str = "2000-01-01-12-00-00"
    horizons_out_units: str = "KM-S"

    # Simulation (SI units)
    gravitational_constant: float = 6.6743e-11
    physics_dt: float = 0.15
    tick_interval: float = 0.03
    interpolating: bool = True

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()

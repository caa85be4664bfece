"""Mini README: Centralised configuration models and helpers for Driftpath.

Structure:
    * DriftpathSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read environment variables (``DRIFTPATH_*``),
    tune the simulated cruise speed or interpolation spacing, and choose the
    interface host/port. Values are validated once and cached per process.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, validator
from pydantic_settings import BaseSettings

from .logging_utils import resolve_level


class DriftpathSettings(BaseSettings):
    """Runtime configuration for the Driftpath engine and its interfaces."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level name (DEBUG shows every generation step).",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the HTTP service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Default port the HTTP service exposes.",
        ge=1,
        le=65535,
    )
    cruise_speed_kmph: float = Field(
        60.0,
        description="Nominal drone cruise speed used to convert distance into flight time.",
        gt=0,
    )
    interpolation_spacing_km: float = Field(
        0.5,
        description="Approximate spacing between synthesised points along a segment.",
        gt=0,
    )
    timestamp_step_seconds: float = Field(
        10.0,
        description="Cosmetic wall-clock increment applied to each emitted waypoint.",
        ge=0,
    )
    export_directory: Path = Field(
        Path("exports"),
        description="Directory where exported waypoint files are written.",
    )

    class Config:
        env_prefix = "DRIFTPATH_"
        env_file = ".env"
        case_sensitive = False

    @validator("log_level")
    def _check_log_level(cls, value: str) -> str:
        """Reject level names the logging module does not know."""

        resolve_level(value)
        return value.strip().upper()

    @validator("export_directory", pre=True)
    def _expand_path(cls, value: str | Path) -> Path:
        """Expand user directories so exports land where operators expect."""

        return Path(value).expanduser().resolve()


@lru_cache()
def get_settings() -> DriftpathSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return DriftpathSettings()

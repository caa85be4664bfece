"""Mini README: Application-wide logging helpers for Driftpath.

Structure:
    * configure_root_logger - one-shot root handler installation.
    * resolve_level - turn ``"debug"``/``"INFO"``/``10`` into a level number.
    * set_log_level - apply the configured verbosity (``DRIFTPATH_LOG_LEVEL``).
    * get_logger - module logger factory used across the engine.

Usage:
    Every module binds ``LOGGER = get_logger(__name__)``. The first call
    installs a single stream handler so that repeated imports (tests, the
    uvicorn reloader) never stack duplicate handlers. Interfaces call
    ``set_log_level(settings.log_level)`` once settings are loaded; per-step
    generator detail only appears at DEBUG.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"


def configure_root_logger(level: int = logging.INFO) -> None:
    """Attach the Driftpath formatter to the root logger once per process."""

    global _LOGGER_INITIALISED
    if _LOGGER_INITIALISED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def resolve_level(level: Union[int, str]) -> int:
    """Return the numeric level for a name such as ``"debug"`` or a number."""

    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def set_log_level(level: Union[int, str]) -> None:
    """Adjust root verbosity after initial configuration."""

    numeric = resolve_level(level)
    configure_root_logger(numeric)
    logging.getLogger().setLevel(numeric)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)

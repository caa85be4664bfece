"""Mini README: Tests for the logging helpers and the configured log level."""

from __future__ import annotations

import logging

import pytest

from driftpath.configuration import DriftpathSettings
from driftpath.logging_utils import resolve_level, set_log_level


def test_resolve_level_accepts_names_and_numbers() -> None:
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(" Warning ") == logging.WARNING
    assert resolve_level(logging.ERROR) == logging.ERROR


def test_resolve_level_rejects_unknown_names() -> None:
    with pytest.raises(ValueError):
        resolve_level("chatty")


def test_set_log_level_updates_root_logger() -> None:
    root = logging.getLogger()
    previous = root.level
    try:
        set_log_level("WARNING")
        assert root.level == logging.WARNING
    finally:
        root.setLevel(previous)


def test_settings_normalise_and_validate_log_level() -> None:
    assert DriftpathSettings(log_level="debug").log_level == "DEBUG"
    with pytest.raises(ValueError):
        DriftpathSettings(log_level="chatty")

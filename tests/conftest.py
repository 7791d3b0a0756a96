"""
Shared pytest fixtures and configuration for collectkit tests.

This module provides:
- Settings cache, environment and logging isolation
- Seeded random sources for deterministic shuffles
- Auto-marking of unit tests
"""

import logging
import random
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog

from collectkit.core.logging import clear_context
from collectkit.core.settings import clear_settings_cache


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Mark all tests without explicit markers as unit tests."""
    for item in items:
        markers = {mark.name for mark in item.iter_markers()}
        if not markers.intersection({"unit", "slow"}):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_settings_fixture(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[None, None, None]:
    """
    Clear cached settings and COLLECTKIT_* variables around each test, and
    return logging to its unconfigured state afterwards.

    Tests run from a temporary directory so a developer's ``.env`` file
    cannot leak into settings.
    """
    import os

    for key in list(os.environ):
        if key.startswith("COLLECTKIT_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    clear_settings_cache()
    clear_context()
    root_level = logging.getLogger().level
    yield
    clear_settings_cache()
    clear_context()
    structlog.reset_defaults()
    logging.getLogger("collectkit").setLevel(logging.NOTSET)
    logging.getLogger().setLevel(root_level)


# =============================================================================
# Random Sources
# =============================================================================


@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic random source."""
    return random.Random(20240101)


class RecordingRandom:
    """Random source that records every ``randrange`` bound it is asked for."""

    def __init__(self, seed: int = 0):
        self._rng = random.Random(seed)
        self.bounds: list[int] = []

    def randrange(self, stop: int) -> int:
        self.bounds.append(stop)
        return self._rng.randrange(stop)


@pytest.fixture
def recording_rng() -> RecordingRandom:
    return RecordingRandom(seed=7)

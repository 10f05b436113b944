"""Shared test fixtures."""

from pathlib import Path

import pytest

from spot_the_plane.config import Settings
from spot_the_plane.sighting.service import SightingService


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Create test settings pointing at a temporary observer file."""
    return Settings(
        observer_file=str(tmp_path / "state" / "observer.json"),
        log_level="DEBUG",
    )


@pytest.fixture
def service(settings: Settings) -> SightingService:
    """Create a SightingService with test settings."""
    return SightingService(settings)

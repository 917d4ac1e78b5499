"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from lighthouse.artifacts.models import (
    Artifact,
    ArtifactType,
    Explorer,
    Location,
    Rarity,
)

ArtifactFactory = Callable[..., Artifact]


@pytest.fixture
def storage_file(tmp_path: Path) -> Path:
    """Collection JSON path inside a temporary workspace."""
    return tmp_path / "artifacts.json"


@pytest.fixture
def make_artifact() -> ArtifactFactory:
    """Factory for artifacts with sensible defaults and keyword overrides."""

    def _make(**overrides: object) -> Artifact:
        fields: dict[str, object] = {
            "name": "Compass",
            "description": "Brass compass found near the lighthouse",
            "rarity": Rarity.RARE,
            "type": ArtifactType.TOOL,
            "coordinates": Location(latitude=59.93, longitude=30.31, depth=12),
            "weight": 0.4,
            "value": 100,
            "power": 1.5,
            "owner": Explorer(name="Anna", rank="Novice", experience=0),
        }
        fields.update(overrides)
        return Artifact.model_validate(fields)

    return _make

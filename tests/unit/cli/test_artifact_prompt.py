"""Unit tests for the interactive artifact prompt."""

from __future__ import annotations

import pytest

from lighthouse.artifacts.models import ArtifactType, Explorer, Location, Rarity
from lighthouse.cli.prompts import ArtifactPrompt
from lighthouse.config import ExplorerSettings


class _ScriptedAnswers:
    """Answer prompts from a fixed list, recording asked labels."""

    def __init__(self, *answers: str) -> None:
        self._answers = list(answers)
        self.labels: list[str] = []

    def __call__(self, label: str) -> str:
        self.labels.append(label)
        return self._answers.pop(0)


@pytest.mark.unit
def test_prompt_builds_full_artifact() -> None:
    """Every answer should land in its field in prompt order."""
    # Arrange - complete answers
    answers = _ScriptedAnswers(
        "Compass",
        "Brass compass",
        "legendary",
        "TOOL",
        "59.93",
        "30.31",
        "12",
        "0.4",
        "150",
        "2.5",
        "Anna",
    )

    # Act - build
    artifact = ArtifactPrompt(ask=answers).build_artifact()

    # Assert - parsed fields and default owner rank
    assert artifact.id == 0
    assert artifact.name == "Compass"
    assert artifact.description == "Brass compass"
    assert artifact.rarity is Rarity.LEGENDARY
    assert artifact.type is ArtifactType.TOOL
    assert artifact.coordinates == Location(latitude=59.93, longitude=30.31, depth=12)
    assert artifact.weight == 0.4
    assert artifact.value == 150
    assert artifact.power == 2.5
    assert artifact.owner == Explorer(name="Anna", rank="Novice", experience=0)
    assert len(answers.labels) == 11


@pytest.mark.unit
def test_prompt_defaults_unparseable_input() -> None:
    """Bad enum text falls back to Common/Relic; bad numbers become zero."""
    answers = _ScriptedAnswers(
        "Shard", "", "mythic", "weapon", "north", "", "deep", "x", "1e", "", "   "
    )

    artifact = ArtifactPrompt(ask=answers).build_artifact()

    assert artifact.rarity is Rarity.COMMON
    assert artifact.type is ArtifactType.RELIC
    assert artifact.coordinates == Location()
    assert artifact.weight == 0.0
    assert artifact.value == 0
    assert artifact.power == 0.0
    assert artifact.owner is None


@pytest.mark.unit
def test_prompt_logs_numeric_coercion(caplog: pytest.LogCaptureFixture) -> None:
    answers = _ScriptedAnswers("a", "", "", "", "1", "2", "3", "4", "many", "6", "")

    with caplog.at_level("WARNING", logger="lighthouse.cli.prompts"):
        artifact = ArtifactPrompt(ask=answers).build_artifact()

    assert artifact.value == 0
    assert "Value: 'many' is not an integer" in caplog.text


@pytest.mark.unit
def test_prompt_uses_configured_owner_defaults() -> None:
    answers = _ScriptedAnswers("a", "", "", "", "", "", "", "", "", "", "Oleg")

    artifact = ArtifactPrompt(
        ask=answers,
        explorer=ExplorerSettings(default_rank="Keeper", default_experience=3),
    ).build_artifact()

    assert artifact.owner == Explorer(name="Oleg", rank="Keeper", experience=3)


@pytest.mark.unit
@pytest.mark.parametrize("raw", ["inf", "-inf", "nan", "1e400"])
def test_prompt_coerces_non_finite_numbers_to_zero(
    raw: str, caplog: pytest.LogCaptureFixture
) -> None:
    """Non-finite floats should be treated like unparseable input."""
    # Arrange - non-finite weight, power, and latitude
    answers = _ScriptedAnswers("a", "", "", "", raw, "2", "3", raw, "5", raw, "")

    # Act - build with warnings captured
    with caplog.at_level("WARNING", logger="lighthouse.cli.prompts"):
        artifact = ArtifactPrompt(ask=answers).build_artifact()

    # Assert - zeros in place of non-finite values, other fields kept
    assert artifact.coordinates == Location(latitude=0.0, longitude=2.0, depth=3)
    assert artifact.weight == 0.0
    assert artifact.power == 0.0
    assert artifact.value == 5
    assert f"Weight: '{raw}' is not a finite number" in caplog.text

"""Unit tests for artifact command handlers."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from lighthouse.artifacts.collection import ArtifactCollection
from lighthouse.artifacts.models import Artifact, ArtifactType, Rarity
from lighthouse.commands.handlers.clear import ClearCommand
from lighthouse.commands.handlers.filter_rarity import FilterRarityCommand
from lighthouse.commands.handlers.group_by_type import GroupByTypeCommand
from lighthouse.commands.handlers.help import HelpCommand
from lighthouse.commands.handlers.info import InfoCommand
from lighthouse.commands.handlers.insert import InsertCommand
from lighthouse.commands.handlers.remove_key import RemoveKeyCommand
from lighthouse.commands.handlers.replace_if_lower import ReplaceIfLowerCommand
from lighthouse.commands.handlers.save import EXIT_CODE, ExitCommand, SaveCommand
from lighthouse.commands.handlers.show import ShowCommand
from lighthouse.commands.parser import CommandCall
from lighthouse.commands.types import CommandStatus

ArtifactFactory = Callable[..., Artifact]


class _StubSource:
    """Artifact source returning queued artifacts."""

    def __init__(self, *artifacts: Artifact) -> None:
        self._queue = list(artifacts)
        self.calls = 0

    def build_artifact(self) -> Artifact:
        self.calls += 1
        return self._queue.pop(0)


def _call(name: str, arg: str = "") -> CommandCall:
    """Build command call fixture."""
    return CommandCall(name=name, arg=arg, raw=f"{name} {arg}".strip())


@pytest.mark.unit
def test_help_lists_every_command() -> None:
    result = HelpCommand().execute(_call("help"))

    assert result.status == CommandStatus.OK
    assert result.data is not None
    names = [usage.split()[0] for usage in result.data["commands"]]
    assert names == [
        "help",
        "info",
        "show",
        "insert",
        "remove_key",
        "clear",
        "save",
        "replace_if_lower",
        "filter_rarity",
        "group_by_type",
        "exit",
    ]


@pytest.mark.unit
def test_info_reports_count(make_artifact: ArtifactFactory) -> None:
    collection = ArtifactCollection()
    collection.insert(make_artifact())

    result = InfoCommand(collection).execute(_call("info"))

    assert result.code == "collection_info"
    assert result.data is not None
    assert result.data["count"] == 1
    assert result.data["container"] == "list"
    assert "Element count: 1" in result.message


@pytest.mark.unit
def test_show_empty_collection_uses_distinct_code() -> None:
    result = ShowCommand(ArtifactCollection()).execute(_call("show"))

    assert result.status == CommandStatus.OK
    assert result.code == "collection_empty"
    assert result.message == "Collection is empty."


@pytest.mark.unit
def test_show_lists_artifacts_in_order(make_artifact: ArtifactFactory) -> None:
    collection = ArtifactCollection()
    collection.insert(make_artifact(name="first"))
    collection.insert(make_artifact(name="second"))

    result = ShowCommand(collection).execute(_call("show"))

    assert result.code == "artifacts_listed"
    assert result.data is not None
    assert [row["name"] for row in result.data["artifacts"]] == ["first", "second"]
    assert result.message.splitlines()[0].startswith("[1] first")


@pytest.mark.unit
def test_insert_appends_built_artifact(make_artifact: ArtifactFactory) -> None:
    """insert should store the source artifact with the next id."""
    # Arrange - collection and stub source
    collection = ArtifactCollection()
    source = _StubSource(make_artifact(name="Lens"))

    # Act - insert
    result = InsertCommand(collection, source).execute(_call("insert"))

    # Assert - stored with id 1
    assert result.code == "artifact_inserted"
    assert result.data is not None
    assert result.data["artifact"]["id"] == 1
    assert [item.name for item in collection] == ["Lens"]


@pytest.mark.unit
@pytest.mark.parametrize("arg", ["", "abc", "1.5"])
def test_remove_key_rejects_bad_id(arg: str) -> None:
    result = RemoveKeyCommand(ArtifactCollection()).execute(_call("remove_key", arg))

    assert result.status == CommandStatus.ERROR
    assert result.code == "invalid_args"


@pytest.mark.unit
def test_remove_key_missing_id_reports_not_found(
    make_artifact: ArtifactFactory,
) -> None:
    """Unknown id is a reported error and leaves collection untouched."""
    collection = ArtifactCollection()
    collection.insert(make_artifact())

    result = RemoveKeyCommand(collection).execute(_call("remove_key", "9"))

    assert result.status == CommandStatus.ERROR
    assert result.code == "artifact_not_found"
    assert len(collection) == 1


@pytest.mark.unit
def test_remove_key_removes_artifact(make_artifact: ArtifactFactory) -> None:
    collection = ArtifactCollection()
    collection.insert(make_artifact())

    result = RemoveKeyCommand(collection).execute(_call("remove_key", "1"))

    assert result.code == "artifact_removed"
    assert len(collection) == 0


@pytest.mark.unit
def test_clear_reports_removed_count(make_artifact: ArtifactFactory) -> None:
    collection = ArtifactCollection()
    collection.insert(make_artifact())
    collection.insert(make_artifact())

    result = ClearCommand(collection).execute(_call("clear"))

    assert result.code == "collection_cleared"
    assert result.data == {"removed": 2}
    assert len(collection) == 0


@pytest.mark.unit
def test_replace_if_lower_missing_id_skips_prompt(
    make_artifact: ArtifactFactory,
) -> None:
    """Unknown id should be reported before asking for a description."""
    source = _StubSource(make_artifact())

    result = ReplaceIfLowerCommand(ArtifactCollection(), source).execute(
        _call("replace_if_lower", "3")
    )

    assert result.code == "artifact_not_found"
    assert source.calls == 0


@pytest.mark.unit
def test_replace_if_lower_bad_id_is_invalid_args(
    make_artifact: ArtifactFactory,
) -> None:
    source = _StubSource(make_artifact())

    result = ReplaceIfLowerCommand(ArtifactCollection(), source).execute(
        _call("replace_if_lower", "x")
    )

    assert result.code == "invalid_args"
    assert source.calls == 0


@pytest.mark.unit
def test_replace_if_lower_replaces_with_lower_value(
    make_artifact: ArtifactFactory,
) -> None:
    # Arrange - existing value 100, candidate 99
    collection = ArtifactCollection()
    collection.insert(make_artifact(value=100))
    source = _StubSource(make_artifact(name="Cheaper", value=99))

    # Act - replace
    result = ReplaceIfLowerCommand(collection, source).execute(
        _call("replace_if_lower", "1")
    )

    # Assert - replaced, id kept
    assert result.code == "artifact_replaced"
    stored = collection.get(1)
    assert stored is not None
    assert stored.name == "Cheaper"
    assert stored.value == 99


@pytest.mark.unit
def test_replace_if_lower_equal_value_is_noop(make_artifact: ArtifactFactory) -> None:
    collection = ArtifactCollection()
    original = collection.insert(make_artifact(value=100))
    source = _StubSource(make_artifact(name="Same", value=100))

    result = ReplaceIfLowerCommand(collection, source).execute(
        _call("replace_if_lower", "1")
    )

    assert result.status == CommandStatus.OK
    assert result.code == "artifact_not_replaced"
    assert "not lower" in result.message
    assert collection.get(1) == original


@pytest.mark.unit
@pytest.mark.parametrize("arg", ["epic", "Epic", "EPIC"])
def test_filter_rarity_matches_any_case(
    arg: str, make_artifact: ArtifactFactory
) -> None:
    collection = ArtifactCollection()
    collection.insert(make_artifact(name="a", rarity=Rarity.EPIC))
    collection.insert(make_artifact(name="b", rarity=Rarity.RARE))

    result = FilterRarityCommand(collection).execute(_call("filter_rarity", arg))

    assert result.code == "artifacts_filtered"
    assert result.data is not None
    assert result.data["rarity"] == "Epic"
    assert [row["name"] for row in result.data["artifacts"]] == ["a"]


@pytest.mark.unit
def test_filter_rarity_invalid_name_reports_error(
    make_artifact: ArtifactFactory,
) -> None:
    collection = ArtifactCollection()
    collection.insert(make_artifact())

    result = FilterRarityCommand(collection).execute(_call("filter_rarity", "mythic"))

    assert result.status == CommandStatus.ERROR
    assert result.code == "artifact_invalid_rarity"


@pytest.mark.unit
def test_filter_rarity_without_matches_names_resolved_rarity(
    make_artifact: ArtifactFactory,
) -> None:
    collection = ArtifactCollection()
    collection.insert(make_artifact(rarity=Rarity.RARE))

    result = FilterRarityCommand(collection).execute(
        _call("filter_rarity", "  legendary ")
    )

    assert result.status == CommandStatus.OK
    assert result.message == "No Legendary artifacts."
    assert result.data == {"rarity": "Legendary", "artifacts": []}


@pytest.mark.unit
def test_group_by_type_payload(make_artifact: ArtifactFactory) -> None:
    """Groups appear in first-seen order with member names."""
    collection = ArtifactCollection()
    collection.insert(make_artifact(name="r1", type=ArtifactType.RELIC))
    collection.insert(make_artifact(name="g1", type=ArtifactType.GEM))
    collection.insert(make_artifact(name="r2", type=ArtifactType.RELIC))

    result = GroupByTypeCommand(collection).execute(_call("group_by_type"))

    assert result.code == "artifacts_grouped"
    assert result.data is not None
    groups = result.data["groups"]
    assert [group["type"] for group in groups] == ["Relic", "Gem"]
    assert [item["name"] for item in groups[0]["artifacts"]] == ["r1", "r2"]
    assert result.message.splitlines() == [
        "Type: Relic",
        "  - r1",
        "  - r2",
        "Type: Gem",
        "  - g1",
    ]


@pytest.mark.unit
def test_save_writes_collection(
    storage_file: Path, make_artifact: ArtifactFactory
) -> None:
    collection = ArtifactCollection()
    collection.insert(make_artifact())

    result = SaveCommand(collection, storage_file).execute(_call("save"))

    assert result.code == "collection_saved"
    payload = json.loads(storage_file.read_text(encoding="utf-8"))
    assert [item["id"] for item in payload] == [1]


@pytest.mark.unit
def test_save_reports_unwritable_target(
    tmp_path: Path, make_artifact: ArtifactFactory
) -> None:
    """I/O failures on save become error results."""
    # Arrange - parent path is a regular file
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    collection = ArtifactCollection()
    collection.insert(make_artifact())

    # Act - save below the file
    result = SaveCommand(collection, blocker / "artifacts.json").execute(_call("save"))

    # Assert - save_failed error
    assert result.status == CommandStatus.ERROR
    assert result.code == "save_failed"


@pytest.mark.unit
def test_exit_saves_and_signals_termination(
    storage_file: Path, make_artifact: ArtifactFactory
) -> None:
    collection = ArtifactCollection()
    collection.insert(make_artifact())

    result = ExitCommand(SaveCommand(collection, storage_file)).execute(_call("exit"))

    assert result.status == CommandStatus.OK
    assert result.code == EXIT_CODE
    assert storage_file.exists()

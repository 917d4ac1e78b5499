"""Handler for `clear`."""

from __future__ import annotations

from lighthouse.artifacts.collection import ArtifactCollection
from lighthouse.commands.parser import CommandCall
from lighthouse.commands.types import CommandResult


class ClearCommand:
    """Deterministic `clear` command handler."""

    def __init__(self, collection: ArtifactCollection) -> None:
        self._collection = collection

    def execute(self, call: CommandCall) -> CommandResult:
        del call
        removed = self._collection.clear()
        return CommandResult.ok(
            "Collection cleared.",
            code="collection_cleared",
            data={"removed": removed},
        )

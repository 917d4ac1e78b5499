"""Handler for `insert`."""

from __future__ import annotations

from lighthouse.artifacts.collection import ArtifactCollection
from lighthouse.commands.parser import CommandCall
from lighthouse.commands.types import ArtifactSource, CommandResult


class InsertCommand:
    """Deterministic `insert` command handler."""

    def __init__(self, collection: ArtifactCollection, source: ArtifactSource) -> None:
        """Store collaborators.

        Args:
            collection: Collection receiving new artifacts.
            source: Supplier of artifact descriptions.
        """
        self._collection = collection
        self._source = source

    def execute(self, call: CommandCall) -> CommandResult:
        """Build a new artifact and append it with the next id.

        Args:
            call: Parsed command call.

        Returns:
            Confirmation carrying the stored artifact.
        """
        del call
        stored = self._collection.insert(self._source.build_artifact())
        return CommandResult.ok(
            f"Artifact {stored.id} added.",
            code="artifact_inserted",
            data={"artifact": stored.model_dump(mode="json")},
        )

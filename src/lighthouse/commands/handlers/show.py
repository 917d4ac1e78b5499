"""Handler for `show`."""

from __future__ import annotations

from lighthouse.artifacts.collection import ArtifactCollection
from lighthouse.commands.parser import CommandCall
from lighthouse.commands.types import CommandResult, artifact_rows


class ShowCommand:
    """Deterministic `show` command handler."""

    def __init__(self, collection: ArtifactCollection) -> None:
        self._collection = collection

    def execute(self, call: CommandCall) -> CommandResult:
        """List every artifact in insertion order.

        Args:
            call: Parsed command call.

        Returns:
            Artifact listing, or an empty-collection notice.
        """
        del call
        artifacts = self._collection.artifacts
        if not artifacts:
            return CommandResult.ok(
                "Collection is empty.",
                code="collection_empty",
                data={"artifacts": []},
            )
        return CommandResult.ok(
            "\n".join(artifact.describe() for artifact in artifacts),
            code="artifacts_listed",
            data={"artifacts": artifact_rows(artifacts)},
        )

"""Handler for `remove_key <id>`."""

from __future__ import annotations

from lighthouse.artifacts.collection import ArtifactCollection
from lighthouse.artifacts.errors import ArtifactError
from lighthouse.commands.parser import CommandCall, CommandParseError, parse_artifact_id
from lighthouse.commands.types import CommandResult


class RemoveKeyCommand:
    """Deterministic `remove_key` command handler."""

    def __init__(self, collection: ArtifactCollection) -> None:
        self._collection = collection

    def execute(self, call: CommandCall) -> CommandResult:
        """Remove one artifact by id.

        Args:
            call: Parsed command call.

        Returns:
            Deterministic success/error envelope.
        """
        try:
            artifact_id = parse_artifact_id(call)
        except CommandParseError as exc:
            return CommandResult.error(
                str(exc), code="invalid_args", data={"command": call.name}
            )
        try:
            removed = self._collection.remove_by_id(artifact_id)
        except ArtifactError as exc:
            return CommandResult.error(str(exc), code=exc.code.value, data=exc.data)
        return CommandResult.ok(
            f"Artifact {removed.id} removed.",
            code="artifact_removed",
            data={"id": removed.id},
        )

"""Handler for `replace_if_lower <id>`."""

from __future__ import annotations

from lighthouse.artifacts.collection import ArtifactCollection
from lighthouse.artifacts.errors import ArtifactError, ArtifactErrorCode
from lighthouse.commands.parser import CommandCall, CommandParseError, parse_artifact_id
from lighthouse.commands.types import ArtifactSource, CommandResult


class ReplaceIfLowerCommand:
    """Deterministic `replace_if_lower` command handler."""

    def __init__(self, collection: ArtifactCollection, source: ArtifactSource) -> None:
        """Store collaborators.

        Args:
            collection: Collection holding the artifact to replace.
            source: Supplier of the replacement description.
        """
        self._collection = collection
        self._source = source

    def execute(self, call: CommandCall) -> CommandResult:
        """Replace an artifact when the new description has a lower value.

        The id is checked before prompting so a missing artifact does not
        cost the user a full description.

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
        if self._collection.get(artifact_id) is None:
            return CommandResult.error(
                f"Error: artifact {artifact_id} not found.",
                code=ArtifactErrorCode.NOT_FOUND.value,
                data={"id": artifact_id},
            )
        candidate = self._source.build_artifact()
        try:
            outcome = self._collection.replace_if_lower(artifact_id, candidate)
        except ArtifactError as exc:
            return CommandResult.error(str(exc), code=exc.code.value, data=exc.data)
        data = {
            "id": artifact_id,
            "previous_value": outcome.previous.value,
            "candidate_value": candidate.value,
        }
        if outcome.replaced:
            return CommandResult.ok(
                f"Artifact {artifact_id} replaced: new value "
                f"{candidate.value} is lower than {outcome.previous.value}.",
                code="artifact_replaced",
                data=data,
            )
        return CommandResult.ok(
            f"Artifact {artifact_id} kept: new value {candidate.value} is not "
            f"lower than {outcome.previous.value}.",
            code="artifact_not_replaced",
            data=data,
        )

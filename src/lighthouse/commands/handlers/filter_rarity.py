"""Handler for `filter_rarity <name>`."""

from __future__ import annotations

from lighthouse.artifacts.collection import ArtifactCollection, resolve_rarity
from lighthouse.artifacts.errors import ArtifactError
from lighthouse.commands.parser import CommandCall
from lighthouse.commands.types import CommandResult, artifact_rows


class FilterRarityCommand:
    """Deterministic `filter_rarity` command handler."""

    def __init__(self, collection: ArtifactCollection) -> None:
        self._collection = collection

    def execute(self, call: CommandCall) -> CommandResult:
        """List artifacts whose rarity matches the argument.

        Args:
            call: Parsed command call.

        Returns:
            Filtered listing, or invalid-rarity error.
        """
        try:
            rarity = resolve_rarity(call.arg)
        except ArtifactError as exc:
            return CommandResult.error(str(exc), code=exc.code.value, data=exc.data)
        matches = self._collection.filter_by_rarity(rarity)
        lines = [artifact.describe() for artifact in matches]
        return CommandResult.ok(
            "\n".join(lines) if lines else f"No {rarity.value} artifacts.",
            code="artifacts_filtered",
            data={"rarity": rarity.value, "artifacts": artifact_rows(matches)},
        )

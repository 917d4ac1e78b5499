"""Handler for `group_by_type`."""

from __future__ import annotations

from lighthouse.artifacts.collection import ArtifactCollection
from lighthouse.commands.parser import CommandCall
from lighthouse.commands.types import CommandResult


class GroupByTypeCommand:
    """Deterministic `group_by_type` command handler."""

    def __init__(self, collection: ArtifactCollection) -> None:
        self._collection = collection

    def execute(self, call: CommandCall) -> CommandResult:
        """List artifact names grouped by type in first-seen order.

        Args:
            call: Parsed command call.

        Returns:
            Grouped listing.
        """
        del call
        groups = self._collection.group_by_type()
        lines: list[str] = []
        for kind, members in groups.items():
            lines.append(f"Type: {kind.value}")
            lines.extend(f"  - {artifact.name}" for artifact in members)
        return CommandResult.ok(
            "\n".join(lines) if lines else "Collection is empty.",
            code="artifacts_grouped",
            data={
                "groups": [
                    {
                        "type": kind.value,
                        "artifacts": [
                            {"id": artifact.id, "name": artifact.name}
                            for artifact in members
                        ],
                    }
                    for kind, members in groups.items()
                ]
            },
        )

"""Handler for `info`."""

from __future__ import annotations

from lighthouse.artifacts.collection import ArtifactCollection
from lighthouse.commands.parser import CommandCall
from lighthouse.commands.types import CommandResult


class InfoCommand:
    """Deterministic `info` command handler."""

    def __init__(self, collection: ArtifactCollection) -> None:
        self._collection = collection

    def execute(self, call: CommandCall) -> CommandResult:
        """Report container kind, initialization time, and element count.

        Args:
            call: Parsed command call.

        Returns:
            Collection summary.
        """
        del call
        info = self._collection.info()
        return CommandResult.ok(
            "\n".join(
                [
                    f"Collection type: {info.container}",
                    f"Initialized at: {info.initialized_at:%Y-%m-%d %H:%M:%S}",
                    f"Element count: {info.count}",
                ]
            ),
            code="collection_info",
            data=info.model_dump(mode="json"),
        )

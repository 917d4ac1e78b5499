"""Handlers for `save` and `exit`."""

from __future__ import annotations

import logging
from pathlib import Path

from lighthouse.artifacts.collection import ArtifactCollection
from lighthouse.artifacts.store import save_collection
from lighthouse.commands.parser import CommandCall
from lighthouse.commands.types import CommandResult, CommandStatus

_LOGGER = logging.getLogger(__name__)

EXIT_CODE = "session_exit"


class SaveCommand:
    """Deterministic `save` command handler."""

    def __init__(
        self, collection: ArtifactCollection, storage_file: Path, *, indent: int = 2
    ) -> None:
        """Store persistence target.

        Args:
            collection: Collection to persist.
            storage_file: Target JSON file.
            indent: JSON indentation width.
        """
        self._collection = collection
        self._storage_file = storage_file
        self._indent = indent

    def execute(self, call: CommandCall) -> CommandResult:
        """Write the full collection to the storage file.

        Args:
            call: Parsed command call.

        Returns:
            Save confirmation, or an error when the file cannot be written.
        """
        del call
        try:
            save_collection(self._collection, self._storage_file, indent=self._indent)
        except OSError as exc:
            _LOGGER.error(
                "Failed to save collection to %s: %s", self._storage_file, exc
            )
            return CommandResult.error(
                f"Error: failed to save collection to {self._storage_file}: {exc}",
                code="save_failed",
                data={"path": str(self._storage_file)},
            )
        return CommandResult.ok(
            f"Saved {len(self._collection)} artifacts to {self._storage_file}.",
            code="collection_saved",
            data={"path": str(self._storage_file), "count": len(self._collection)},
        )


class ExitCommand:
    """Deterministic `exit` command handler: save, then end the session."""

    def __init__(self, save: SaveCommand) -> None:
        self._save = save

    def execute(self, call: CommandCall) -> CommandResult:
        """Persist the collection and signal loop termination.

        Args:
            call: Parsed command call.

        Returns:
            Result with ``EXIT_CODE``; save errors are folded into its message.
        """
        saved = self._save.execute(call)
        if saved.status == CommandStatus.ERROR:
            return CommandResult.error(
                f"{saved.message}\nExiting without a saved copy.",
                code=EXIT_CODE,
                data=saved.data,
            )
        return CommandResult.ok(
            f"{saved.message}\nGoodbye.",
            code=EXIT_CODE,
            data=saved.data,
        )

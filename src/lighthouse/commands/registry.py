"""Command registry and dispatch."""

from __future__ import annotations

from pathlib import Path

from lighthouse.artifacts.collection import ArtifactCollection
from lighthouse.commands.handlers.clear import ClearCommand
from lighthouse.commands.handlers.filter_rarity import FilterRarityCommand
from lighthouse.commands.handlers.group_by_type import GroupByTypeCommand
from lighthouse.commands.handlers.help import HelpCommand
from lighthouse.commands.handlers.info import InfoCommand
from lighthouse.commands.handlers.insert import InsertCommand
from lighthouse.commands.handlers.remove_key import RemoveKeyCommand
from lighthouse.commands.handlers.replace_if_lower import ReplaceIfLowerCommand
from lighthouse.commands.handlers.save import ExitCommand, SaveCommand
from lighthouse.commands.handlers.show import ShowCommand
from lighthouse.commands.parser import CommandCall
from lighthouse.commands.types import ArtifactSource, CommandHandler, CommandResult


class CommandRegistry:
    """Deterministic command handler registry."""

    def __init__(
        self,
        *,
        collection: ArtifactCollection,
        storage_file: Path,
        artifact_source: ArtifactSource,
        indent: int = 2,
        handlers: dict[str, CommandHandler] | None = None,
    ) -> None:
        """Construct registry with built-in handlers plus optional overrides.

        Args:
            collection: Collection every handler operates on.
            storage_file: Persistence file for `save` and `exit`.
            artifact_source: Supplier for `insert` and `replace_if_lower`.
            indent: JSON indentation width used on save.
            handlers: Optional custom handlers keyed by command name.
        """
        save = SaveCommand(collection, storage_file, indent=indent)
        self._handlers: dict[str, CommandHandler] = {
            "help": HelpCommand(),
            "info": InfoCommand(collection),
            "show": ShowCommand(collection),
            "insert": InsertCommand(collection, artifact_source),
            "remove_key": RemoveKeyCommand(collection),
            "clear": ClearCommand(collection),
            "save": save,
            "replace_if_lower": ReplaceIfLowerCommand(collection, artifact_source),
            "filter_rarity": FilterRarityCommand(collection),
            "group_by_type": GroupByTypeCommand(collection),
            "exit": ExitCommand(save),
        }
        if handlers:
            self._handlers.update(handlers)

    @property
    def command_names(self) -> tuple[str, ...]:
        return tuple(self._handlers)

    def dispatch(self, call: CommandCall) -> CommandResult:
        """Dispatch parsed command call to exact-match handler.

        Args:
            call: Parsed command call.

        Returns:
            Command execution result.
        """
        handler = self._handlers.get(call.name)
        if handler is not None:
            return handler.execute(call)
        return CommandResult.error(
            f"Error: unknown command '{call.name}'. Type `help` for the command list.",
            code="unknown_command",
            data={"command": call.name},
        )

"""Handler for `help`."""

from __future__ import annotations

from lighthouse.commands.parser import CommandCall
from lighthouse.commands.types import CommandResult

COMMAND_HELP: tuple[tuple[str, str], ...] = (
    ("help", "list commands"),
    ("info", "collection metadata"),
    ("show", "list all artifacts"),
    ("insert", "describe a new artifact and append it"),
    ("remove_key <id>", "remove artifact by id"),
    ("clear", "empty the collection"),
    ("save", "write the collection to file"),
    ("replace_if_lower <id>", "replace artifact when the new value is lower"),
    ("filter_rarity <name>", "list artifacts of one rarity"),
    ("group_by_type", "list artifact names grouped by type"),
    ("exit", "save and quit"),
)


class HelpCommand:
    """Deterministic `help` command handler."""

    def execute(self, call: CommandCall) -> CommandResult:
        """List available commands.

        Args:
            call: Parsed command call.

        Returns:
            Command listing.
        """
        del call
        lines = [f"- `{usage}`: {summary}" for usage, summary in COMMAND_HELP]
        return CommandResult.ok(
            "\n".join(["Commands:", "", *lines]),
            code="help_listed",
            data={"commands": [usage for usage, _ in COMMAND_HELP]},
        )

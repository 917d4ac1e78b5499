"""Deterministic command line parser."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CommandParseError(ValueError):
    """Raised when a command argument cannot be interpreted."""


class CommandCall(BaseModel):
    """Normalized command call.

    ``arg`` is the stripped remainder of the line after the command name and
    is never split further.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    arg: str = ""
    raw: str


def parse_input(text: str) -> CommandCall | None:
    """Split one input line into command name and argument string.

    Args:
        text: Raw user input line.

    Returns:
        Normalized call, or ``None`` for blank input.
    """
    stripped = text.strip()
    if not stripped:
        return None
    parts = stripped.split(maxsplit=1)
    name = parts[0].lower()
    arg = parts[1].strip() if len(parts) > 1 else ""
    return CommandCall(name=name, arg=arg, raw=text)


def parse_artifact_id(call: CommandCall) -> int:
    """Read the integer artifact id argument of a call.

    Args:
        call: Parsed command call.

    Returns:
        Artifact id.

    Raises:
        CommandParseError: If the argument is missing or not an integer.
    """
    if not call.arg:
        raise CommandParseError(f"Error: {call.name} requires an artifact id.")
    try:
        return int(call.arg)
    except ValueError as exc:
        raise CommandParseError(
            f"Error: {call.name} expects an integer id, got '{call.arg}'."
        ) from exc

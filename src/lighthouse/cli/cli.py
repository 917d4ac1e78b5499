"""Typer CLI entrypoint for Lighthouse."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import click
import typer
from rich.console import Console

from lighthouse.artifacts.store import load_collection
from lighthouse.cli.bootstrap import (
    build_registry,
    configure_logging,
    load_settings,
    resolve_storage_file,
)
from lighthouse.cli.rendering import CliRenderer
from lighthouse.commands.handlers.save import EXIT_CODE
from lighthouse.commands.parser import CommandCall, parse_input
from lighthouse.commands.registry import CommandRegistry
from lighthouse.commands.types import CommandResult

app = typer.Typer(
    name="lighthouse",
    help="Lighthouse: an artifact catalog with JSON persistence",
    add_completion=False,
)
_CONSOLE = Console()
_LOGGER = logging.getLogger(__name__)
_EXIT_CALL = CommandCall(name="exit", raw="exit")


def _dispatch(registry: CommandRegistry, call: CommandCall) -> CommandResult:
    """Dispatch one call, turning unexpected failures into error results.

    Args:
        registry: Command registry.
        call: Parsed command call.

    Returns:
        Command result; never raises for ordinary exceptions.
    """
    try:
        return registry.dispatch(call)
    except (EOFError, KeyboardInterrupt, click.Abort):
        raise
    except Exception as exc:  # noqa: BLE001
        _LOGGER.debug("Command '%s' failed", call.name, exc_info=True)
        return CommandResult.error(
            f"Error: {exc}",
            code="command_failed",
            data={"command": call.name},
        )


def run_loop(
    registry: CommandRegistry, renderer: CliRenderer, *, console: Console
) -> None:
    """Read, dispatch, and render commands until `exit` or end of input.

    End of input saves the collection the same way `exit` does.

    Args:
        registry: Command registry.
        renderer: Result renderer.
        console: Rich console for loop notices.
    """
    while True:
        try:
            raw = typer.prompt(
                "lighthouse", default="", show_default=False, prompt_suffix="> "
            )
            call = parse_input(raw)
            if call is None:
                continue
            result = _dispatch(registry, call)
        except (EOFError, KeyboardInterrupt, click.Abort):
            console.print("\nInput closed; saving.", style="yellow")
            renderer.render(_dispatch(registry, _EXIT_CALL))
            break
        renderer.render(result)
        if result.code == EXIT_CODE:
            break


@app.command()
def main_command(
    storage_file: Annotated[
        Path | None,
        typer.Argument(
            file_okay=True,
            dir_okay=False,
            help="Collection JSON file (default: artifacts.json).",
        ),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            file_okay=True,
            dir_okay=False,
            help="Path to Lighthouse config YAML/JSON file.",
        ),
    ] = None,
) -> None:
    """Open the artifact collection and run the interactive command loop.

    Args:
        storage_file: Optional collection file path.
        config_file: Optional config file path override.
    """
    config = load_settings(config_file, console=_CONSOLE)
    configure_logging(config.logging.level)
    effective_storage_file = resolve_storage_file(storage_file, config)
    collection = load_collection(effective_storage_file)
    registry = build_registry(
        collection=collection,
        storage_file=effective_storage_file,
        config=config,
    )
    _CONSOLE.print(
        "Welcome to the Lighthouse artifact catalog. Type 'help' for commands.",
        style="cyan",
    )
    run_loop(registry, CliRenderer(console=_CONSOLE), console=_CONSOLE)


def main() -> None:
    """Main entry point for CLI."""
    app()


if __name__ == "__main__":
    main()

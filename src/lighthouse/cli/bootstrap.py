"""CLI bootstrap helpers."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from lighthouse.artifacts.collection import ArtifactCollection
from lighthouse.cli.prompts import ArtifactPrompt
from lighthouse.commands.registry import CommandRegistry
from lighthouse.config import (
    ConfigError,
    LighthouseConfig,
    LogLevel,
    default_config_file,
    load_config,
)

_LOGGING_CONFIGURED = False


def configure_logging(level: LogLevel = LogLevel.WARNING) -> None:
    """Configure Rich-backed logging once for CLI commands.

    Args:
        level: Root logging level.
    """
    global _LOGGING_CONFIGURED  # noqa: PLW0603
    if _LOGGING_CONFIGURED:
        return
    logging.basicConfig(
        level=level.value,
        format="%(message)s",
        handlers=[RichHandler(show_path=False, rich_tracebacks=True)],
    )
    _LOGGING_CONFIGURED = True


def load_settings(config_file: Path | None, *, console: Console) -> LighthouseConfig:
    """Load config, falling back to defaults when the file is invalid.

    Args:
        config_file: Optional explicit config path.
        console: Rich console for config warnings.

    Returns:
        Effective configuration.
    """
    effective_config_file = config_file or default_config_file(Path.cwd())
    try:
        return load_config(effective_config_file)
    except ConfigError as exc:
        console.print(
            f"[yellow]Config at {effective_config_file} is invalid; "
            "falling back to defaults.[/yellow]"
        )
        console.print(f"[yellow]Reason: {exc}[/yellow]")
        return LighthouseConfig()


def resolve_storage_file(storage_file: Path | None, config: LighthouseConfig) -> Path:
    """Return persistence file from the CLI argument or configuration.

    Args:
        storage_file: Optional positional CLI argument.
        config: Effective configuration.

    Returns:
        Collection file path.
    """
    return storage_file or Path(config.storage.file)


def build_registry(
    *,
    collection: ArtifactCollection,
    storage_file: Path,
    config: LighthouseConfig,
) -> CommandRegistry:
    """Wire command handlers around one collection.

    Args:
        collection: Collection for the session.
        storage_file: Persistence file path.
        config: Effective configuration.

    Returns:
        Command registry.
    """
    return CommandRegistry(
        collection=collection,
        storage_file=storage_file,
        artifact_source=ArtifactPrompt(explorer=config.explorer),
        indent=config.storage.indent,
    )


"""CLI result rendering policies and Rich views."""

from __future__ import annotations

from collections.abc import Callable

from rich.console import Console
from rich.json import JSON
from rich.markdown import Markdown
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from lighthouse.cli.renderers.artifacts import (
    render_artifact_groups,
    render_artifact_list,
    render_collection_info,
)
from lighthouse.cli.result_codes import HIDE_DATA_CODES, NOTICE_CODES
from lighthouse.commands.types import CommandResult, CommandStatus


class CliRenderer:
    """Render command results with Rich structures and code-based policies."""

    def __init__(self, *, console: Console) -> None:
        """Store console used for rendering.

        Args:
            console: Rich console used for output rendering.
        """
        self._console = console

    def render(self, result: CommandResult) -> None:
        """Render one command result.

        Args:
            result: Structured command result.
        """
        if result.status == CommandStatus.OK:
            if self._render_rich_success(result):
                return
            self._console.print(
                Panel(
                    Markdown(result.message),
                    title=f"Lighthouse {escape(f'[{result.code}]')}",
                    border_style="yellow" if result.code in NOTICE_CODES else "green",
                    expand=True,
                )
            )
            if result.data and result.code not in HIDE_DATA_CODES:
                self._render_data(result)
            return
        self._console.print(
            Panel(
                Text(result.message),
                title=f"Error {escape(f'[{result.code}]')}",
                border_style="bold red",
                expand=True,
            )
        )
        if result.data and result.code not in HIDE_DATA_CODES:
            self._render_data(result)

    def _render_data(self, result: CommandResult) -> None:
        self._console.print(
            Panel(
                JSON.from_data(result.data),
                title="Data",
                border_style="cyan",
                expand=True,
            )
        )

    def _render_rich_success(self, result: CommandResult) -> bool:
        """Render specialized success view for selected command result codes.

        Args:
            result: Command result payload.

        Returns:
            ``True`` when a specialized render path handled the result.
        """
        renderers: dict[str, Callable[[Console, CommandResult], bool]] = {
            "collection_info": render_collection_info,
            "collection_empty": render_artifact_list,
            "artifacts_listed": render_artifact_list,
            "artifacts_filtered": render_artifact_list,
            "artifacts_grouped": render_artifact_groups,
        }
        renderer = renderers.get(result.code)
        if renderer is None:
            return False
        return renderer(self._console, result)

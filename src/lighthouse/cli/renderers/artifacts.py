"""Artifact listing Rich renderer helpers."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from lighthouse.commands.types import CommandResult


def render_artifact_list(console: Console, result: CommandResult) -> bool:
    """Render `show` / `filter_rarity` output as a table.

    Args:
        console: Rich console.
        result: Command result payload.

    Returns:
        ``True`` when rendered.
    """
    data = result.data if isinstance(result.data, dict) else None
    rows = data.get("artifacts") if data is not None else None
    if not isinstance(rows, list):
        return False
    rarity = data.get("rarity") if data is not None else None
    title = f"{rarity} Artifacts" if rarity else "Artifacts"
    if not rows:
        console.print(
            Panel(result.message, title=title, border_style="yellow", expand=True)
        )
        return True
    table = Table(
        title=f"{title} ({len(rows)})", show_header=True, header_style="bold cyan"
    )
    table.add_column("ID", style="green", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("Rarity", style="magenta")
    table.add_column("Type")
    table.add_column("Value", justify="right")
    table.add_column("Weight", justify="right")
    table.add_column("Power", justify="right")
    table.add_column("Coordinates")
    table.add_column("Owner")
    for row in rows:
        if not isinstance(row, dict):
            continue
        table.add_row(*(escape(cell) for cell in _artifact_cells(row)))
    console.print(table)
    return True


def render_artifact_groups(console: Console, result: CommandResult) -> bool:
    """Render `group_by_type` output as one table per type.

    Args:
        console: Rich console.
        result: Command result payload.

    Returns:
        ``True`` when rendered.
    """
    data = result.data if isinstance(result.data, dict) else None
    groups = data.get("groups") if data is not None else None
    if not isinstance(groups, list):
        return False
    if not groups:
        console.print(
            Panel(result.message, title="Groups", border_style="yellow", expand=True)
        )
        return True
    for group in groups:
        if not isinstance(group, dict):
            continue
        members = group.get("artifacts")
        if not isinstance(members, list):
            continue
        table = Table(
            title=f"Type: {escape(str(group.get('type', '')))}",
            show_header=True,
            header_style="bold cyan",
        )
        table.add_column("ID", style="green", no_wrap=True)
        table.add_column("Name", style="bold")
        for member in members:
            if isinstance(member, dict):
                table.add_row(
                    str(member.get("id", "")), escape(str(member.get("name", "")))
                )
        console.print(table)
    return True


def render_collection_info(console: Console, result: CommandResult) -> bool:
    """Render `info` output as a field/value panel.

    Args:
        console: Rich console.
        result: Command result payload.

    Returns:
        ``True`` when rendered.
    """
    data = result.data if isinstance(result.data, dict) else None
    if data is None:
        return False
    details = Table(show_header=False, box=None, expand=True)
    details.add_column("Field", style="bold cyan", no_wrap=True)
    details.add_column("Value")
    details.add_row("Collection type", str(data.get("container", "")))
    details.add_row("Initialized at", str(data.get("initialized_at", "")))
    details.add_row("Element count", str(data.get("count", "")))
    details.add_row("Next id", str(data.get("next_id", "")))
    console.print(Panel(details, title="Collection", border_style="green", expand=True))
    return True


def _artifact_cells(row: dict[str, object]) -> tuple[str, ...]:
    coordinates = row.get("coordinates")
    if isinstance(coordinates, dict):
        where = (
            f"({float(coordinates.get('latitude', 0.0)):.2f}, "
            f"{float(coordinates.get('longitude', 0.0)):.2f}, "
            f"{coordinates.get('depth', 0)}m)"
        )
    else:
        where = ""
    owner = row.get("owner")
    owner_text = (
        f"{owner.get('name', '')} ({owner.get('rank', '')})"
        if isinstance(owner, dict)
        else ""
    )
    return (
        str(row.get("id", "")),
        str(row.get("name", "")),
        str(row.get("rarity", "")),
        str(row.get("type", "")),
        str(row.get("value", "")),
        str(row.get("weight", "")),
        str(row.get("power", "")),
        where,
        owner_text,
    )

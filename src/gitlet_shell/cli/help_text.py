"""Static command catalog screen for the interactive ``help`` directive.

Renders one Rich table per catalog section when Rich is available and
falls back to aligned plain text otherwise.  Content comes entirely
from :mod:`gitlet_shell.core.catalog`.
"""

from __future__ import annotations

from typing import Any

from gitlet_shell.cli.console import console
from gitlet_shell.core.catalog import CATEGORIES, help_rows

TITLE = "Available Gitlet commands:"
USAGE_WIDTH = 30


def _import_rich_table() -> type[Any] | None:
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        return None
    return Table


def plain_help_lines() -> list[str]:
    """Return the catalog as plain text lines, sections blank-separated."""
    lines = ["", TITLE, ""]
    for category in CATEGORIES:
        lines.append(f"{category}:")
        lines.extend(
            f"  {usage:<{USAGE_WIDTH}} {summary}" for usage, summary in help_rows(category)
        )
        lines.append("")
    return lines[:-1]


def print_help() -> None:
    """Print the grouped command catalog to stdout."""
    table_class = _import_rich_table()
    if table_class is None:
        for line in plain_help_lines():
            console.text(line)
        return

    console.print()
    console.print(f"[bold]{TITLE}[/bold]")
    for category in CATEGORIES:
        table = table_class(
            title=f"{category}:",
            title_justify="left",
            title_style="bold cyan",
            show_header=False,
            box=None,
            padding=(0, 1, 0, 2),
        )
        table.add_column("Usage", style="bold", min_width=USAGE_WIDTH, no_wrap=True)
        table.add_column("Description")
        for usage, summary in help_rows(category):
            table.add_row(usage, summary)
        console.print()
        console.print(table)

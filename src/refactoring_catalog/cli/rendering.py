# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Rendering helpers for catalog query commands."""

from __future__ import annotations

from collections.abc import Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..catalog import Entry


def build_entries_table(entries: Sequence[Entry], *, title: str) -> Table:
    """Return a rich table listing ``entries`` in the order given.

    Args:
        entries: Entries to list.
        title: Caption shown above the table.

    Returns:
        Table: Rich table instance ready for rendering.
    """

    table = Table(title=title, box=box.SIMPLE, expand=True)
    table.add_column("ID", style="bold", overflow="fold")
    table.add_column("Title", overflow="fold")
    table.add_column("Category")
    for entry in entries:
        table.add_row(entry.id, entry.title, entry.category.value)
    return table


def render_entry(console: Console, entry: Entry, references: Sequence[Entry]) -> None:
    """Render ``entry`` with its examples and resolved references.

    Args:
        console: Rich console used for output.
        entry: Entry to display.
        references: Entries referenced by ``entry`` in declared order.
    """

    subtitle = entry.category.value
    if entry.tags:
        subtitle = f"{subtitle} · {', '.join(entry.tags)}"
    console.print(
        Panel(
            Text(entry.body or "-"),
            title=Text(f"{entry.title} ({entry.id})"),
            subtitle=Text(subtitle),
            box=box.ROUNDED,
        ),
    )
    for example in entry.examples:
        console.print(Panel(Text(example.snippet), title=Text(example.label), box=box.SIMPLE))
    if references:
        console.print(build_entries_table(references, title="See also"))


__all__ = ["build_entries_table", "render_entry"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring catalog query commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer

from ..catalog import Category, EntryNotFoundError
from ..logging import configure_logging
from .rendering import build_entries_table, render_entry
from .shared import CLIError, CLIState, build_cli_logger, load_cli_config

app = typer.Typer(
    name="refactoring-catalog",
    help="Browse the catalog of code smells and refactoring techniques.",
    no_args_is_help=True,
    add_completion=False,
)


def _state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise RuntimeError("CLI state was not initialised by the application callback")
    return state


@app.callback()
def main(
    ctx: typer.Context,
    catalog: Annotated[
        Path | None,
        typer.Option("--catalog", help="Directory of entry documents; defaults to the bundled catalog."),
    ] = None,
    schema: Annotated[
        Path | None,
        typer.Option("--schema", help="Directory containing catalog_entry.schema.json."),
    ] = None,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable ANSI colour output.")] = False,
    no_emoji: Annotated[bool, typer.Option("--no-emoji", help="Disable emoji output.")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Emit debug logging.")] = False,
) -> None:
    """Load configuration shared by every command."""

    try:
        config = load_cli_config(catalog=catalog, schema=schema, no_color=no_color, no_emoji=no_emoji)
    except CLIError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=exc.exit_code) from exc
    configure_logging(verbose=verbose, use_color=config.use_color)
    logger = build_cli_logger(emoji=config.use_emoji, color=config.use_color)
    ctx.obj = CLIState(config=config, logger=logger)


@app.command("show")
def show_command(
    ctx: typer.Context,
    entry_id: Annotated[str, typer.Argument(help="Identifier of the entry to display.")],
    as_json: Annotated[bool, typer.Option("--json", help="Print the entry as JSON.")] = False,
) -> None:
    """Display one entry with its examples and references."""

    state = _state(ctx)
    try:
        lookup = state.snapshot().lookup
        entry = lookup.require(entry_id)
        references = lookup.resolve_references(entry_id)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc
    except EntryNotFoundError as exc:
        state.logger.fail(str(exc))
        raise typer.Exit(code=1) from exc
    if as_json:
        typer.echo(json.dumps(entry.to_dict(), indent=2))
        return
    render_entry(state.logger.console, entry, references)


@app.command("list")
def list_command(
    ctx: typer.Context,
    category: Annotated[
        Category | None,
        typer.Option("--category", "-c", help="Only list entries of this category."),
    ] = None,
) -> None:
    """List catalog entries in authoring order."""

    state = _state(ctx)
    try:
        snapshot = state.snapshot()
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc
    if category is None:
        entries = tuple(snapshot.store.all())
        title = "Catalog entries"
    else:
        entries = snapshot.lookup.by_category(category)
        title = f"Catalog entries ({category.value})"
    state.logger.console.print(build_entries_table(entries, title=title))


@app.command("refs")
def refs_command(
    ctx: typer.Context,
    entry_id: Annotated[str, typer.Argument(help="Identifier of the referencing entry.")],
) -> None:
    """List the entries an entry references, in declared order."""

    state = _state(ctx)
    try:
        references = state.snapshot().lookup.resolve_references(entry_id)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc
    except EntryNotFoundError as exc:
        state.logger.fail(str(exc))
        raise typer.Exit(code=1) from exc
    if not references:
        state.logger.info(f"'{entry_id}' references no other entries")
        return
    state.logger.console.print(build_entries_table(references, title=f"Referenced by {entry_id}"))


@app.command("used-by")
def used_by_command(
    ctx: typer.Context,
    entry_id: Annotated[str, typer.Argument(help="Identifier of the referenced entry.")],
) -> None:
    """List the entries that reference an entry."""

    state = _state(ctx)
    try:
        referrers = state.snapshot().lookup.referenced_by(entry_id)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc
    except EntryNotFoundError as exc:
        state.logger.fail(str(exc))
        raise typer.Exit(code=1) from exc
    if not referrers:
        state.logger.info(f"No entries reference '{entry_id}'")
        return
    state.logger.console.print(build_entries_table(referrers, title=f"Entries referencing {entry_id}"))


@app.command("search")
def search_command(
    ctx: typer.Context,
    text: Annotated[str, typer.Argument(help="Case-insensitive text to find in titles and bodies.")] = "",
) -> None:
    """Find entries whose title or body contains the given text.

    Exits with status 1 when nothing matches, like grep.
    """

    state = _state(ctx)
    try:
        matches = state.snapshot().lookup.search(text)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc
    if not matches:
        state.logger.warn(f"No entries match '{text}'")
        raise typer.Exit(code=1)
    state.logger.console.print(build_entries_table(matches, title=f"{len(matches)} matching entries"))


@app.command("validate")
def validate_command(ctx: typer.Context) -> None:
    """Load the catalog and report its size, checksum, and content warnings."""

    state = _state(ctx)
    try:
        snapshot = state.snapshot()
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc
    state.logger.section("Catalog validation")
    for entry in snapshot.store.all():
        if not entry.has_paired_examples:
            state.logger.warn(f"{entry.id}: examples are not paired as problem/solution")
    state.logger.ok(f"Catalog valid: {len(snapshot.store)} entries")
    state.logger.echo(f"checksum: {snapshot.checksum}")


__all__ = ["app"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors, catalog access)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer
from rich.console import Console

from ..catalog import CatalogError, CatalogLoader, CatalogSnapshot
from ..config import CatalogConfig, ConfigError, load_config
from ..console import get_console_manager
from ..logging import fail as core_fail
from ..logging import info as core_info
from ..logging import ok as core_ok
from ..logging import section as core_section
from ..logging import warn as core_warn


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI presentation settings."""

    console: Console
    use_emoji: bool
    use_color: bool

    def fail(self, message: str) -> None:
        core_fail(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def warn(self, message: str) -> None:
        core_warn(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def ok(self, message: str) -> None:
        core_ok(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def info(self, message: str) -> None:
        core_info(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def section(self, title: str) -> None:
        core_section(title, use_color=self.use_color)

    def echo(self, message: str) -> None:
        """Write ``message`` to stdout using Typer's echo helper."""

        typer.echo(message)


def build_cli_logger(*, emoji: bool, color: bool) -> CLILogger:
    """Return a ``CLILogger`` configured for the provided presentation flags.

    Args:
        emoji: Whether log output may include emoji glyphs.
        color: Whether terminal colour output may be used.

    Returns:
        CLILogger: Logger bound to the shared Rich console for those flags.
    """

    console = get_console_manager().get(color=color, emoji=emoji)
    return CLILogger(console=console, use_emoji=emoji, use_color=color)


@dataclass(slots=True)
class CLIState:
    """Per-invocation state shared between the app callback and commands."""

    config: CatalogConfig
    logger: CLILogger
    _snapshot: CatalogSnapshot | None = None

    def snapshot(self) -> CatalogSnapshot:
        """Return the catalog snapshot, loading it on first use.

        Raises:
            CLIError: If the catalog cannot be loaded.
        """

        if self._snapshot is None:
            self._snapshot = load_catalog_snapshot(self.config, logger=self.logger)
        return self._snapshot


def load_cli_config(
    *,
    catalog: Path | None,
    schema: Path | None,
    no_color: bool,
    no_emoji: bool,
) -> CatalogConfig:
    """Resolve configuration for a CLI invocation.

    Raises:
        CLIError: If configuration loading fails.
    """

    overrides: dict[str, object] = {"catalog_root": catalog, "schema_root": schema}
    if no_color:
        overrides["use_color"] = False
    if no_emoji:
        overrides["use_emoji"] = False
    try:
        return load_config(overrides=overrides)
    except ConfigError as exc:
        raise CLIError(f"Failed to load configuration: {exc}") from exc


def load_catalog_snapshot(config: CatalogConfig, *, logger: CLILogger) -> CatalogSnapshot:
    """Load the catalog described by ``config``.

    Args:
        config: Effective configuration naming the catalog and schema roots.
        logger: CLI logger used to report load failures.

    Returns:
        CatalogSnapshot: Loaded catalog snapshot.

    Raises:
        CLIError: If schema files are missing or the catalog content is invalid.
    """

    catalog_root = config.resolved_catalog_root()
    if not catalog_root.is_dir():
        message = f"Catalog directory not found: {catalog_root}"
        logger.fail(message)
        raise CLIError(message)
    try:
        loader = CatalogLoader(catalog_root=catalog_root, schema_root=config.resolved_schema_root())
        return loader.load_snapshot()
    except FileNotFoundError as exc:
        message = f"Catalog schema not found: {exc}"
        logger.fail(message)
        raise CLIError(message) from exc
    except CatalogError as exc:
        message = f"Failed to load catalog: {exc}"
        logger.fail(message)
        raise CLIError(message) from exc


__all__ = [
    "CLIError",
    "CLILogger",
    "CLIState",
    "build_cli_logger",
    "load_catalog_snapshot",
    "load_cli_config",
]

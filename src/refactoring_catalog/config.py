# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model and loaders for the refactoring catalog."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, ValidationError

from .paths import bundled_catalog_root, bundled_schema_root

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "refactoring-catalog"
CATALOG_ROOT_ENV: Final[str] = "REFACTORING_CATALOG_ROOT"
SCHEMA_ROOT_ENV: Final[str] = "REFACTORING_CATALOG_SCHEMA"
_PATH_KEYS: Final[frozenset[str]] = frozenset({"catalog_root", "schema_root"})


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class CatalogConfig(BaseModel):
    """Settings controlling where catalog content lives and how it is displayed."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    catalog_root: Path | None = None
    schema_root: Path | None = None
    use_color: bool = True
    use_emoji: bool = True

    def resolved_catalog_root(self) -> Path:
        """Return the configured catalog root, falling back to the bundled catalog."""

        return self.catalog_root if self.catalog_root is not None else bundled_catalog_root()

    def resolved_schema_root(self) -> Path | None:
        """Return the schema directory to validate against.

        ``None`` means the loader should look for a ``schema`` directory beside
        a custom catalog root.
        """

        if self.schema_root is not None:
            return self.schema_root
        if self.catalog_root is None:
            return bundled_schema_root()
        return None


def load_config(
    project_root: Path | None = None,
    *,
    env: Mapping[str, str] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> CatalogConfig:
    """Build the effective configuration for ``project_root``.

    Sources apply in order, later ones winning: built-in defaults, the
    ``[tool.refactoring-catalog]`` table of ``pyproject.toml``, environment
    variables, then explicit ``overrides`` whose value is not ``None``.

    Args:
        project_root: Directory searched for ``pyproject.toml``; defaults to the
            current working directory.
        env: Environment mapping; defaults to :data:`os.environ`.
        overrides: Caller supplied values such as CLI options.

    Returns:
        CatalogConfig: Validated configuration model.

    Raises:
        ConfigError: If any source holds an invalid value.
    """

    root = project_root or Path.cwd()
    environment = os.environ if env is None else env
    merged: dict[str, Any] = {}
    merged.update(_pyproject_section(root / PYPROJECT_FILENAME))
    merged.update(_environment_values(environment, base_dir=root))
    if overrides:
        merged.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return CatalogConfig(**merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


def _pyproject_section(path: Path) -> dict[str, Any]:
    if not path.is_file():
        return {}
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc
    tool_section = data.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return {}
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise ConfigError(f"[{PYPROJECT_TOOL_KEY}.{PYPROJECT_SECTION_KEY}] in {path} must be a table")
    return _normalise_section(section, base_dir=path.parent)


def _normalise_section(section: Mapping[str, Any], *, base_dir: Path) -> dict[str, Any]:
    normalised: dict[str, Any] = {}
    for key, value in section.items():
        field_name = str(key).replace("-", "_")
        if field_name in _PATH_KEYS and isinstance(value, str):
            value = _resolve_path(Path(value), base_dir)
        normalised[field_name] = value
    return normalised


def _environment_values(env: Mapping[str, str], *, base_dir: Path) -> dict[str, Any]:
    values: dict[str, Any] = {}
    catalog_root = env.get(CATALOG_ROOT_ENV)
    if catalog_root:
        values["catalog_root"] = _resolve_path(Path(catalog_root), base_dir)
    schema_root = env.get(SCHEMA_ROOT_ENV)
    if schema_root:
        values["schema_root"] = _resolve_path(Path(schema_root), base_dir)
    return values


def _resolve_path(path: Path, base_dir: Path) -> Path:
    expanded = path.expanduser()
    return expanded if expanded.is_absolute() else (base_dir / expanded)


__all__ = [
    "CATALOG_ROOT_ENV",
    "SCHEMA_ROOT_ENV",
    "CatalogConfig",
    "ConfigError",
    "load_config",
]

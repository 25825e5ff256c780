# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Static catalog of code smells and refactoring techniques."""

from __future__ import annotations

from importlib import metadata

from .bundled import load_bundled_snapshot
from .catalog import (
    CatalogLookup,
    CatalogStore,
    Category,
    CodeExample,
    Entry,
)

__all__ = [
    "CatalogLookup",
    "CatalogStore",
    "Category",
    "CodeExample",
    "Entry",
    "__version__",
    "load_bundled_snapshot",
]

try:
    __version__ = metadata.version("refactoring-catalog")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"

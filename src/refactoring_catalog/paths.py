# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Locations of the catalog content bundled with the package."""

from __future__ import annotations

from pathlib import Path
from typing import Final

_DATA_ROOT: Final[Path] = Path(__file__).resolve().parent / "data"


def bundled_catalog_root() -> Path:
    """Return the directory holding the bundled entry documents."""

    return _DATA_ROOT / "catalog"


def bundled_schema_root() -> Path:
    """Return the directory holding the bundled JSON schema."""

    return _DATA_ROOT / "schema"


__all__ = ["bundled_catalog_root", "bundled_schema_root"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Filesystem scanning utilities for the refactoring catalog."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

CATALOG_CACHE_FILENAME: Final[str] = "cache.json"


@dataclass(slots=True)
class CatalogScanner:
    """Scan the catalog directory tree for entry documents."""

    catalog_root: Path

    def entry_documents(self) -> tuple[Path, ...]:
        """Return sorted entry document paths.

        Files whose name starts with an underscore are treated as drafts and
        skipped, as is the loader cache file.

        Returns:
            tuple[Path, ...]: Sorted entry document file paths.
        """
        if not self.catalog_root.is_dir():
            return ()
        paths: list[Path] = []
        for json_path in self.catalog_root.rglob("*.json"):
            if json_path.name.startswith("_"):
                continue
            if json_path.name == CATALOG_CACHE_FILENAME:
                continue
            paths.append(json_path)
        return tuple(sorted(paths))


__all__ = ["CATALOG_CACHE_FILENAME", "CatalogScanner"]

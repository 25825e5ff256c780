# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Cached access to the catalog content shipped with the package."""

from __future__ import annotations

from functools import lru_cache

from .catalog import CatalogLoader, CatalogSnapshot
from .paths import bundled_catalog_root, bundled_schema_root


@lru_cache(maxsize=1)
def load_bundled_snapshot() -> CatalogSnapshot:
    """Return the snapshot of the bundled catalog, loading it once per process.

    Returns:
        CatalogSnapshot: Snapshot of the bundled smells and techniques.

    Raises:
        CatalogError: If the bundled content violates catalog invariants.
    """

    loader = CatalogLoader(catalog_root=bundled_catalog_root(), schema_root=bundled_schema_root())
    return loader.load_snapshot()


def clear_bundled_snapshot_cache() -> None:
    """Clear the cached bundled snapshot to force a reload on next access."""

    load_bundled_snapshot.cache_clear()


__all__ = ["clear_bundled_snapshot_cache", "load_bundled_snapshot"]

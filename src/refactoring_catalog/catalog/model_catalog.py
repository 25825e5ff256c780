# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Catalog aggregate models produced by the loader."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .lookup import CatalogLookup
from .store import CatalogStore


@dataclass(frozen=True, slots=True)
class CatalogSnapshot:
    """Loaded catalog store paired with a deterministic checksum."""

    store: CatalogStore
    checksum: str
    sources: tuple[Path, ...] = ()
    _lookup: CatalogLookup = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Bind a lookup helper to the snapshot store."""

        object.__setattr__(self, "_lookup", CatalogLookup(self.store))

    @property
    def lookup(self) -> CatalogLookup:
        """Return the query helper bound to the snapshot store."""

        return self._lookup


__all__ = ["CatalogSnapshot"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Query helpers layered over a validated :class:`CatalogStore`."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import EntryNotFoundError
from .model_entry import Category, Entry
from .store import CatalogStore


@dataclass(frozen=True, slots=True)
class CatalogLookup:
    """Answer read-only queries against a catalog store.

    Every query returns entries in authoring order unless stated otherwise and
    follows references one hop only.
    """

    store: CatalogStore

    def get(self, entry_id: str) -> Entry | None:
        """Return the entry named ``entry_id`` or ``None`` when absent."""

        return self.store.get(entry_id)

    def require(self, entry_id: str) -> Entry:
        """Return the entry named ``entry_id``.

        Raises:
            EntryNotFoundError: If the catalog has no such entry.
        """

        entry = self.store.get(entry_id)
        if entry is None:
            raise EntryNotFoundError(entry_id)
        return entry

    def by_category(self, category: Category | str) -> tuple[Entry, ...]:
        """Return entries tagged with ``category``.

        Args:
            category: Category member or its string value.

        Returns:
            tuple[Entry, ...]: Matching entries in authoring order.

        Raises:
            ValueError: If ``category`` is a string naming no known category.
        """

        wanted = Category(category)
        return tuple(entry for entry in self.store.all() if entry.category is wanted)

    def resolve_references(self, entry_id: str) -> tuple[Entry, ...]:
        """Return the entries referenced by ``entry_id`` in declared order.

        Args:
            entry_id: Identifier of the referencing entry.

        Returns:
            tuple[Entry, ...]: Referenced entries; empty when the entry declares none.

        Raises:
            EntryNotFoundError: If ``entry_id`` itself is not in the catalog.
        """

        entry = self.require(entry_id)
        return tuple(self.require(reference) for reference in entry.references)

    def referenced_by(self, entry_id: str) -> tuple[Entry, ...]:
        """Return entries whose references include ``entry_id``.

        Raises:
            EntryNotFoundError: If ``entry_id`` is not in the catalog.
        """

        self.require(entry_id)
        return tuple(entry for entry in self.store.all() if entry_id in entry.references)

    def search(self, text: str) -> tuple[Entry, ...]:
        """Return entries whose title or body contains ``text``, ignoring case.

        An empty query matches every entry. Results are filtered, not ranked.
        """

        if not text:
            return tuple(self.store.all())
        return tuple(entry for entry in self.store.all() if entry.matches(text))


__all__ = ["CatalogLookup"]

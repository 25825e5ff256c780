# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Immutable, validated storage for catalog entries."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .errors import DanglingReferenceError, DuplicateIdError
from .model_entry import Entry

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CatalogStore:
    """Own the complete set of entries in authoring order.

    Instances are built through :meth:`load`, which guarantees identifiers are
    unique and every reference resolves. Nothing mutates a store afterwards, so
    one instance may be shared freely between readers.
    """

    _entries: tuple[Entry, ...]
    _index: Mapping[str, Entry] = field(compare=False, repr=False)

    @classmethod
    def load(cls, entries: Iterable[Entry]) -> CatalogStore:
        """Build a store from ``entries`` after checking catalog invariants.

        Args:
            entries: Entries in authoring order.

        Returns:
            CatalogStore: Store indexing every entry by identifier.

        Raises:
            DuplicateIdError: If two entries share an identifier.
            DanglingReferenceError: If a reference names an identifier absent from ``entries``.
        """

        ordered = tuple(entries)
        index: dict[str, Entry] = {}
        for entry in ordered:
            if entry.id in index:
                raise DuplicateIdError(entry.id)
            index[entry.id] = entry
        for entry in ordered:
            for reference in entry.references:
                if reference not in index:
                    raise DanglingReferenceError(entry.id, reference)
        LOGGER.debug("Loaded catalog store with %d entries", len(ordered))
        return cls(_entries=ordered, _index=MappingProxyType(index))

    def get(self, entry_id: str) -> Entry | None:
        """Return the entry registered under ``entry_id`` or ``None``."""

        return self._index.get(entry_id)

    def all(self) -> Iterator[Entry]:
        """Return a fresh iterator over every entry in authoring order."""

        return iter(self._entries)

    @property
    def ids(self) -> tuple[str, ...]:
        """Return entry identifiers in authoring order."""

        return tuple(entry.id for entry in self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return self.all()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._index


__all__ = ["CatalogStore"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised by refactoring catalog operations."""

from __future__ import annotations


class CatalogError(RuntimeError):
    """Base class for every failure surfaced by the catalog."""


class CatalogValidationError(CatalogError):
    """Raised when a catalog document fails schema validation."""


class CatalogIntegrityError(CatalogError):
    """Raised when catalog content passes schema validation but fails semantic checks."""


class CatalogLoadError(CatalogIntegrityError):
    """Raised when a set of entries cannot be assembled into a store."""


class DuplicateIdError(CatalogLoadError):
    """Raised when two entries share the same identifier."""

    def __init__(self, entry_id: str) -> None:
        """Create the error for the duplicated ``entry_id``.

        Args:
            entry_id: Identifier declared more than once.
        """

        super().__init__(f"Duplicate entry identifier '{entry_id}' detected in catalog")
        self.entry_id = entry_id


class DanglingReferenceError(CatalogLoadError):
    """Raised when an entry references an identifier absent from the catalog."""

    def __init__(self, entry_id: str, reference: str) -> None:
        """Create the error for ``entry_id`` referencing the unknown ``reference``.

        Args:
            entry_id: Identifier of the entry declaring the reference.
            reference: Identifier that could not be resolved.
        """

        super().__init__(f"Entry '{entry_id}' references unknown entry '{reference}'")
        self.entry_id = entry_id
        self.reference = reference


class EntryNotFoundError(CatalogError):
    """Raised when a query names an identifier the catalog does not contain."""

    def __init__(self, entry_id: str) -> None:
        super().__init__(f"Unknown catalog entry '{entry_id}'")
        self.entry_id = entry_id


__all__ = [
    "CatalogError",
    "CatalogIntegrityError",
    "CatalogLoadError",
    "CatalogValidationError",
    "DanglingReferenceError",
    "DuplicateIdError",
    "EntryNotFoundError",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Public export surface for the refactoring catalog."""

from __future__ import annotations

from typing import Final

from .errors import (
    CatalogError,
    CatalogIntegrityError,
    CatalogLoadError,
    CatalogValidationError,
    DanglingReferenceError,
    DuplicateIdError,
    EntryNotFoundError,
)
from .loader import CatalogLoader
from .lookup import CatalogLookup
from .model_catalog import CatalogSnapshot
from .model_entry import Category, CodeExample, Entry
from .store import CatalogStore

__all__: Final[tuple[str, ...]] = (
    "CatalogError",
    "CatalogIntegrityError",
    "CatalogLoadError",
    "CatalogLoader",
    "CatalogLookup",
    "CatalogSnapshot",
    "CatalogStore",
    "CatalogValidationError",
    "Category",
    "CodeExample",
    "DanglingReferenceError",
    "DuplicateIdError",
    "Entry",
    "EntryNotFoundError",
)

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""High-level loader that materialises catalog entries from disk."""

from __future__ import annotations

import importlib
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import ModuleType
from typing import Final, cast

from .checksum import compute_catalog_checksum
from .errors import CatalogIntegrityError, CatalogValidationError
from .io import load_document
from .model_catalog import CatalogSnapshot
from .model_entry import Entry
from .scanner import CatalogScanner
from .schema import SchemaRepository
from .store import CatalogStore
from .types import JSONValue
from .utils import expect_mapping, mapping_array

jsonschema_module = importlib.import_module("jsonschema")
jsonschema_exceptions: ModuleType = cast(ModuleType, jsonschema_module.exceptions)
JsonSchemaValidationError = cast(type[Exception], getattr(jsonschema_exceptions, "ValidationError"))

ENTRIES_KEY: Final[str] = "entries"

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class CatalogLoader:
    """Loader that validates entry documents and assembles a catalog store.

    Authoring order is the sorted order of the entry documents, then the
    position of each entry inside its document.
    """

    catalog_root: Path
    schema_root: Path | None = None
    _schemas: SchemaRepository = field(init=False, repr=False)
    _scanner: CatalogScanner = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Initialize the schema repository and scanner after dataclass setup."""

        self._schemas = SchemaRepository.load(
            catalog_root=self.catalog_root,
            schema_root=self.schema_root,
        )
        self.schema_root = self._schemas.schema_root
        self._scanner = CatalogScanner(self.catalog_root)

    def load_entries(self) -> tuple[Entry, ...]:
        """Parse every entry document under ``catalog_root``.

        Returns:
            tuple[Entry, ...]: Entries in authoring order.

        Raises:
            CatalogValidationError: When a document fails schema validation.
            CatalogIntegrityError: When a document cannot be parsed.
        """

        entries: list[Entry] = []
        for path in self._scanner.entry_documents():
            document = load_document(path)
            self._validate_document(document, path=path)
            entries.extend(self._entries_from_document(document, path=path))
        LOGGER.debug("Parsed %d entries from %s", len(entries), self.catalog_root)
        return tuple(entries)

    def load_store(self) -> CatalogStore:
        """Return a validated store built from the catalog documents.

        Raises:
            DuplicateIdError: If two documents declare the same identifier.
            DanglingReferenceError: If a reference cannot be resolved.
        """

        return CatalogStore.load(self.load_entries())

    def load_snapshot(self) -> CatalogSnapshot:
        """Produce a catalog snapshot containing the store and its checksum.

        Returns:
            CatalogSnapshot: Snapshot containing the store, checksum, and source paths.
        """

        store = self.load_store()
        return CatalogSnapshot(
            store=store,
            checksum=self.compute_checksum(),
            sources=self._scanner.entry_documents(),
        )

    def compute_checksum(self) -> str:
        """Calculate a checksum representing the current catalog contents.

        Returns:
            str: Hex-encoded checksum covering catalog-relevant files.
        """

        paths = self._scanner.entry_documents()
        return compute_catalog_checksum(self.catalog_root, paths)

    def _entries_from_document(self, document: JSONValue, *, path: Path) -> tuple[Entry, ...]:
        """Return the entries declared by ``document``.

        A document holds either a single entry object or an ``entries`` array.
        """

        mapping = expect_mapping(document, key="<root>", context=str(path))
        if ENTRIES_KEY not in mapping:
            return (Entry.from_mapping(mapping, context=str(path), source=path),)
        items = mapping_array(mapping.get(ENTRIES_KEY), key=ENTRIES_KEY, context=str(path))
        return tuple(
            Entry.from_mapping(item, context=f"{path}.{ENTRIES_KEY}[{index}]", source=path)
            for index, item in enumerate(items)
        )

    def _validate_document(self, document: Mapping[str, JSONValue] | JSONValue, *, path: Path) -> None:
        """Validate a document against the entry schema.

        Args:
            document: Raw JSON payload to validate.
            path: Filesystem path used in error reporting.

        Raises:
            CatalogValidationError: When the document fails schema validation.
        """

        try:
            self._schemas.entry_validator.validate(document)
        except JsonSchemaValidationError as exc:
            message = getattr(exc, "message", str(exc))
            raise CatalogValidationError(f"{path}: {message}") from exc


__all__ = [
    "CatalogIntegrityError",
    "CatalogLoader",
    "CatalogValidationError",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Regression tests for loading catalog documents from disk."""

from __future__ import annotations

from pathlib import Path

import pytest

from refactoring_catalog.catalog import (
    CatalogIntegrityError,
    CatalogLoader,
    CatalogSnapshot,
    CatalogValidationError,
    DanglingReferenceError,
    DuplicateIdError,
)
from refactoring_catalog.catalog.scanner import CatalogScanner


def test_loader_builds_snapshot(catalog_root: Path) -> None:
    loader = CatalogLoader(catalog_root=catalog_root)
    snapshot = loader.load_snapshot()

    assert isinstance(snapshot, CatalogSnapshot)
    assert snapshot.store.ids == ("long-method", "extract-method")
    assert [entry.id for entry in snapshot.lookup.resolve_references("long-method")] == ["extract-method"]
    assert snapshot.lookup.resolve_references("extract-method") == ()
    assert snapshot.store.get("missing") is None
    assert snapshot.checksum == loader.compute_checksum()
    assert [path.name for path in snapshot.sources] == ["10-smells.json", "20-extract-method.json"]


def test_loader_defaults_schema_root_beside_catalog(catalog_root: Path) -> None:
    loader = CatalogLoader(catalog_root=catalog_root)

    assert loader.schema_root == catalog_root.parent / "schema"


def test_entries_record_their_source(catalog_root: Path) -> None:
    entries = CatalogLoader(catalog_root=catalog_root).load_entries()

    assert entries[0].source == catalog_root / "10-smells.json"


def test_checksum_changes_with_content(catalog_root: Path, write_document) -> None:
    loader = CatalogLoader(catalog_root=catalog_root)
    before = loader.compute_checksum()

    write_document(
        catalog_root / "30-move-method.json",
        {"schemaVersion": "1.0.0", "id": "move-method", "title": "Move Method", "category": "technique"},
    )

    assert loader.compute_checksum() != before


def test_scanner_skips_drafts_and_cache(catalog_root: Path, write_document) -> None:
    write_document(catalog_root / "_draft.json", {"id": "draft"})
    write_document(catalog_root / "cache.json", {})
    write_document(catalog_root / "nested" / "40-inline-method.json", {})

    names = [path.name for path in CatalogScanner(catalog_root).entry_documents()]

    assert names == ["10-smells.json", "20-extract-method.json", "40-inline-method.json"]


def test_scanner_missing_root_yields_nothing(tmp_path: Path) -> None:
    assert CatalogScanner(tmp_path / "absent").entry_documents() == ()


def test_schema_rejects_unknown_category(catalog_root: Path, write_document) -> None:
    write_document(
        catalog_root / "30-bad.json",
        {"schemaVersion": "1.0.0", "id": "bad-entry", "title": "Bad", "category": "pattern"},
    )

    with pytest.raises(CatalogValidationError) as excinfo:
        CatalogLoader(catalog_root=catalog_root).load_entries()

    assert "30-bad.json" in str(excinfo.value)


def test_schema_requires_schema_version(catalog_root: Path, write_document) -> None:
    write_document(
        catalog_root / "30-bad.json",
        {"id": "bad-entry", "title": "Bad", "category": "smell"},
    )

    with pytest.raises(CatalogValidationError):
        CatalogLoader(catalog_root=catalog_root).load_entries()


def test_malformed_json_is_an_integrity_error(catalog_root: Path) -> None:
    (catalog_root / "30-broken.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(CatalogIntegrityError):
        CatalogLoader(catalog_root=catalog_root).load_entries()


def test_duplicate_ids_across_documents(catalog_root: Path, write_document, make_bundle) -> None:
    write_document(
        catalog_root / "30-dupe.json",
        make_bundle([{"id": "extract-method", "title": "Extract Method Again", "category": "technique"}]),
    )

    with pytest.raises(DuplicateIdError):
        CatalogLoader(catalog_root=catalog_root).load_store()


def test_dangling_reference_across_documents(catalog_root: Path, write_document, make_bundle) -> None:
    write_document(
        catalog_root / "30-smell.json",
        make_bundle(
            [{"id": "feature-envy", "title": "Feature Envy", "category": "smell", "references": ["move-method"]}],
        ),
    )

    with pytest.raises(DanglingReferenceError) as excinfo:
        CatalogLoader(catalog_root=catalog_root).load_snapshot()

    assert excinfo.value.reference == "move-method"


def test_missing_schema_raises_file_not_found(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        CatalogLoader(catalog_root=tmp_path / "catalog", schema_root=tmp_path / "nowhere")


def test_invalid_utf8_is_an_integrity_error(catalog_root: Path) -> None:
    (catalog_root / "30-bad.json").write_bytes(b'{"id": "\xff\xfe"}')

    with pytest.raises(CatalogIntegrityError) as excinfo:
        CatalogLoader(catalog_root=catalog_root).load_entries()

    assert "30-bad.json" in str(excinfo.value)

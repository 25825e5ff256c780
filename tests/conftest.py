# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
import shutil
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from refactoring_catalog.catalog import Category, CodeExample, Entry
from refactoring_catalog.catalog.types import ENTRY_SCHEMA_VERSION
from refactoring_catalog.paths import bundled_schema_root

EntryFactory = Callable[..., Entry]


def write_json(path: Path, payload: object) -> None:
    """Serialize ``payload`` as formatted JSON into ``path``."""

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


def bundle(entries: Sequence[dict[str, object]]) -> dict[str, object]:
    """Return a bundle document wrapping ``entries``."""

    return {"schemaVersion": ENTRY_SCHEMA_VERSION, "entries": list(entries)}


@pytest.fixture
def write_document() -> Callable[[Path, object], None]:
    """Return the helper used to write catalog documents."""
    return write_json


@pytest.fixture
def make_bundle() -> Callable[[Sequence[dict[str, object]]], dict[str, object]]:
    """Return the helper wrapping entry mappings into a bundle document."""
    return bundle


@pytest.fixture
def schema_root() -> Path:
    """Return the schema directory shipped with the package."""
    return bundled_schema_root()


@pytest.fixture
def make_entry() -> EntryFactory:
    """Return a factory building entries with sensible defaults."""

    def _make(
        entry_id: str,
        *,
        category: Category = Category.TECHNIQUE,
        title: str | None = None,
        body: str = "",
        references: Sequence[str] = (),
        examples: Sequence[tuple[str, str]] = (),
    ) -> Entry:
        return Entry(
            id=entry_id,
            title=title or entry_id.replace("-", " ").title(),
            category=category,
            body=body,
            examples=tuple(CodeExample(label=label, snippet=snippet) for label, snippet in examples),
            references=tuple(references),
        )

    return _make


@pytest.fixture
def catalog_root(tmp_path: Path, schema_root: Path) -> Path:
    """Return a small on-disk catalog with a sibling schema directory."""

    root = tmp_path / "catalog"
    write_json(
        root / "10-smells.json",
        bundle(
            [
                {
                    "id": "long-method",
                    "title": "Long Method",
                    "category": "smell",
                    "body": "A method contains too many lines of code.",
                    "examples": [
                        {"label": "problem", "snippet": "function f() { /* 80 lines */ }"},
                        {"label": "solution", "snippet": "function f() { g(); h(); }"},
                    ],
                    "references": ["extract-method"],
                },
            ],
        ),
    )
    write_json(
        root / "20-extract-method.json",
        {
            "schemaVersion": ENTRY_SCHEMA_VERSION,
            "id": "extract-method",
            "title": "Extract Method",
            "category": "technique",
            "body": "Move a code fragment into a new method named after its purpose.",
            "references": [],
        },
    )
    shutil.copytree(schema_root, tmp_path / "schema")
    return root

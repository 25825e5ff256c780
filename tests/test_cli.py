# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the catalog query CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from refactoring_catalog.cli import app
from refactoring_catalog.config import CATALOG_ROOT_ENV, SCHEMA_ROOT_ENV


@pytest.fixture
def runner(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> CliRunner:
    monkeypatch.delenv(CATALOG_ROOT_ENV, raising=False)
    monkeypatch.delenv(SCHEMA_ROOT_ENV, raising=False)
    monkeypatch.chdir(tmp_path)
    return CliRunner()


def _invoke(runner: CliRunner, catalog_root: Path, *args: str):
    return runner.invoke(app, ["--catalog", str(catalog_root), "--no-color", "--no-emoji", *args])


def test_show_renders_entry(runner: CliRunner, catalog_root: Path) -> None:
    result = _invoke(runner, catalog_root, "show", "long-method")

    assert result.exit_code == 0
    assert "Long Method" in result.stdout
    assert "problem" in result.stdout
    assert "extract-method" in result.stdout


def test_show_json(runner: CliRunner, catalog_root: Path) -> None:
    result = _invoke(runner, catalog_root, "show", "extract-method", "--json")

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["id"] == "extract-method"
    assert payload["category"] == "technique"


def test_show_unknown_entry_fails(runner: CliRunner, catalog_root: Path) -> None:
    result = _invoke(runner, catalog_root, "show", "missing")

    assert result.exit_code == 1
    assert "Unknown catalog entry 'missing'" in result.stdout


def test_list_filters_by_category(runner: CliRunner, catalog_root: Path) -> None:
    result = _invoke(runner, catalog_root, "list", "--category", "smell")

    assert result.exit_code == 0
    assert "long-method" in result.stdout
    assert "extract-method" not in result.stdout


def test_refs_lists_references(runner: CliRunner, catalog_root: Path) -> None:
    result = _invoke(runner, catalog_root, "refs", "long-method")

    assert result.exit_code == 0
    assert "Extract Method" in result.stdout


def test_refs_for_leaf_entry(runner: CliRunner, catalog_root: Path) -> None:
    result = _invoke(runner, catalog_root, "refs", "extract-method")

    assert result.exit_code == 0
    assert "references no other entries" in result.stdout


def test_used_by_lists_referrers(runner: CliRunner, catalog_root: Path) -> None:
    result = _invoke(runner, catalog_root, "used-by", "extract-method")

    assert result.exit_code == 0
    assert "Long Method" in result.stdout


def test_search_matches_and_misses(runner: CliRunner, catalog_root: Path) -> None:
    hit = _invoke(runner, catalog_root, "search", "EXTRACT")
    miss = _invoke(runner, catalog_root, "search", "polymorphism")

    assert hit.exit_code == 0
    assert "extract-method" in hit.stdout
    assert miss.exit_code == 1
    assert "No entries match" in miss.stdout


def test_validate_reports_checksum(runner: CliRunner, catalog_root: Path) -> None:
    result = _invoke(runner, catalog_root, "validate")

    assert result.exit_code == 0
    assert "Catalog valid: 2 entries" in result.stdout
    assert "checksum:" in result.stdout


def test_validate_warns_about_unpaired_examples(
    runner: CliRunner,
    catalog_root: Path,
    write_document,
) -> None:
    write_document(
        catalog_root / "30-inline-method.json",
        {
            "schemaVersion": "1.0.0",
            "id": "inline-method",
            "title": "Inline Method",
            "category": "technique",
            "examples": [{"label": "solution", "snippet": "x()"}],
        },
    )

    result = _invoke(runner, catalog_root, "validate")

    assert result.exit_code == 0
    assert "inline-method: examples are not paired" in result.stdout


def test_validate_fails_on_dangling_reference(
    runner: CliRunner,
    catalog_root: Path,
    write_document,
) -> None:
    write_document(
        catalog_root / "30-feature-envy.json",
        {
            "schemaVersion": "1.0.0",
            "id": "feature-envy",
            "title": "Feature Envy",
            "category": "smell",
            "references": ["move-method"],
        },
    )

    result = _invoke(runner, catalog_root, "validate")

    assert result.exit_code == 1
    assert "Failed to load catalog" in result.stdout


def test_missing_catalog_directory_fails(runner: CliRunner, tmp_path: Path) -> None:
    result = _invoke(runner, tmp_path / "absent", "list")

    assert result.exit_code == 1
    assert "Catalog directory not found" in result.stdout


def test_bundled_catalog_is_the_default(runner: CliRunner) -> None:
    result = runner.invoke(app, ["--no-color", "--no-emoji", "refs", "long-method"])

    assert result.exit_code == 0
    assert "extract-method" in result.stdout


def test_validate_fails_on_undecodable_document(runner: CliRunner, catalog_root: Path) -> None:
    (catalog_root / "30-bad.json").write_bytes(b'{"id": "\xff\xfe"}')

    result = _invoke(runner, catalog_root, "validate")

    assert result.exit_code == 1
    assert "Failed to load catalog" in result.stdout


def test_search_help_documents_exit_status(runner: CliRunner) -> None:
    result = runner.invoke(app, ["search", "--help"])

    assert result.exit_code == 0
    assert "grep" in result.stdout

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Schema loading utilities for validating catalog entry documents."""

from __future__ import annotations

import importlib
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, cast, runtime_checkable

from .io import load_schema
from .types import ENTRY_SCHEMA_FILENAME, JSONValue


@runtime_checkable
class SchemaValidator(Protocol):
    """Protocol describing the minimal interface exposed by jsonschema validators."""

    def validate(self, instance: JSONValue) -> None:
        """Validate ``instance`` against the bound schema.

        Args:
            instance: JSON payload to validate against the schema.

        Raises:
            Exception: Implementations raise jsonschema validation errors when invalid.
        """


SchemaValidatorFactory = Callable[[JSONValue], SchemaValidator]


jsonschema_module = importlib.import_module("jsonschema")
Draft202012Validator = cast(SchemaValidatorFactory, jsonschema_module.Draft202012Validator)


@dataclass(slots=True)
class SchemaRepository:
    """Hold the JSON schema validator used for catalog entry documents."""

    schema_root: Path
    entry_validator: SchemaValidator

    @classmethod
    def load(cls, *, catalog_root: Path, schema_root: Path | None = None) -> SchemaRepository:
        """Load schema validators from disk.

        Args:
            catalog_root: Root directory containing the catalog.
            schema_root: Optional override for the schema directory. Defaults to
                a ``schema`` directory beside ``catalog_root``.

        Returns:
            SchemaRepository: Repository configured with the entry validator.
        """
        resolved_root = schema_root or (catalog_root.parent / "schema")
        entry_schema = load_schema(resolved_root / ENTRY_SCHEMA_FILENAME)
        return cls(
            schema_root=resolved_root,
            entry_validator=Draft202012Validator(entry_schema),
        )


__all__ = ["SchemaRepository", "SchemaValidator"]

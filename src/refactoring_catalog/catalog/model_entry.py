# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Entry models describing smells, techniques, and their code examples."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Final

from .errors import CatalogIntegrityError
from .types import JSONValue
from .utils import (
    dedupe_preserving_order,
    expect_non_empty_string,
    expect_string,
    mapping_array,
    string_array,
)

PROBLEM_LABEL: Final[str] = "problem"
SOLUTION_LABEL: Final[str] = "solution"


class Category(str, Enum):
    """Enumerate the kinds of entry held by the catalog."""

    SMELL = "smell"
    TECHNIQUE = "technique"

    @classmethod
    def parse(cls, value: JSONValue | None, *, context: str) -> Category:
        """Return the category named by ``value``.

        Args:
            value: Raw category value sourced from catalog metadata.
            context: Human-readable context used in error messages.

        Returns:
            Category: Matching enumeration member.

        Raises:
            CatalogIntegrityError: If ``value`` is missing or not a known category.
        """

        raw = expect_string(value, key="category", context=context)
        try:
            return cls(raw)
        except ValueError as exc:
            raise CatalogIntegrityError(f"{context}: category '{raw}' is not supported") from exc


@dataclass(frozen=True, slots=True)
class CodeExample:
    """Labelled code snippet attached to an entry."""

    label: str
    snippet: str

    @staticmethod
    def from_mapping(data: Mapping[str, JSONValue], *, context: str) -> CodeExample:
        """Create a code example from JSON data.

        Raises:
            CatalogIntegrityError: If ``label`` or ``snippet`` is missing.
        """

        label = expect_non_empty_string(data.get("label"), key="label", context=context)
        snippet = expect_string(data.get("snippet"), key="snippet", context=context)
        return CodeExample(label=label, snippet=snippet)

    def to_dict(self) -> dict[str, str]:
        return {"label": self.label, "snippet": self.snippet}


@dataclass(frozen=True, slots=True)
class Entry:
    """A single documented unit of knowledge: one smell or one technique."""

    id: str
    title: str
    category: Category
    body: str = ""
    examples: tuple[CodeExample, ...] = ()
    references: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    source: Path | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        # References form a set; repeats collapse to their first occurrence.
        object.__setattr__(self, "references", dedupe_preserving_order(self.references))

    @staticmethod
    def from_mapping(
        data: Mapping[str, JSONValue],
        *,
        context: str,
        source: Path | None = None,
    ) -> Entry:
        """Create an entry from a JSON object.

        Args:
            data: Mapping describing the entry.
            context: Human-readable context used in error messages.
            source: Path of the document the entry was read from.

        Returns:
            Entry: Frozen entry populated from ``data``.

        Raises:
            CatalogIntegrityError: If required fields are missing or malformed.
        """

        entry_id = expect_non_empty_string(data.get("id"), key="id", context=context)
        entry_context = f"{context}[{entry_id}]"
        title = expect_non_empty_string(data.get("title"), key="title", context=entry_context)
        category = Category.parse(data.get("category"), context=entry_context)
        body_value = data.get("body")
        body = "" if body_value is None else expect_string(body_value, key="body", context=entry_context)
        examples = tuple(
            CodeExample.from_mapping(item, context=f"{entry_context}.examples[{index}]")
            for index, item in enumerate(mapping_array(data.get("examples"), key="examples", context=entry_context))
        )
        references = string_array(data.get("references"), key="references", context=entry_context)
        tags = string_array(data.get("tags"), key="tags", context=entry_context)
        return Entry(
            id=entry_id,
            title=title,
            category=category,
            body=body,
            examples=examples,
            references=references,
            tags=tags,
            source=source,
        )

    @property
    def has_paired_examples(self) -> bool:
        """Return ``True`` when examples alternate ``problem`` then ``solution`` labels.

        An entry without examples counts as paired.
        """

        if len(self.examples) % 2:
            return False
        labels = [example.label.casefold() for example in self.examples]
        return all(
            labels[index] == PROBLEM_LABEL and labels[index + 1] == SOLUTION_LABEL
            for index in range(0, len(labels), 2)
        )

    def matches(self, needle: str) -> bool:
        """Return ``True`` when ``needle`` occurs in the title or body, ignoring case."""

        folded = needle.casefold()
        return folded in self.title.casefold() or folded in self.body.casefold()

    def to_dict(self) -> dict[str, JSONValue]:
        """Return the JSON representation of the entry.

        Returns:
            dict[str, JSONValue]: Mapping compatible with the entry document schema.
        """

        payload: dict[str, JSONValue] = {
            "id": self.id,
            "title": self.title,
            "category": self.category.value,
            "body": self.body,
            "examples": [example.to_dict() for example in self.examples],
            "references": list(self.references),
        }
        if self.tags:
            payload["tags"] = list(self.tags)
        return payload


__all__ = [
    "PROBLEM_LABEL",
    "SOLUTION_LABEL",
    "Category",
    "CodeExample",
    "Entry",
]

"""Shared lexical analysis types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator


class EntityCategory(Enum):
    """Named entity buckets produced by the analyzer."""

    TECHNOLOGIES = "technologies"
    ACTIONS = "actions"
    NOUNS = "nouns"
    NUMBERS = "numbers"


@dataclass(frozen=True)
class EntityBuckets:
    """Entities matched in a request, one ordered tuple per category.

    Duplicates are kept: a request mentioning "redis" twice contributes
    two entries to ``technologies``.
    """

    technologies: tuple[str, ...] = ()
    actions: tuple[str, ...] = ()
    nouns: tuple[str, ...] = ()
    numbers: tuple[str, ...] = ()

    def get(self, category: EntityCategory) -> tuple[str, ...]:
        return getattr(self, category.value)

    def __iter__(self) -> Iterator[tuple[EntityCategory, tuple[str, ...]]]:
        for category in EntityCategory:
            yield category, self.get(category)

    def total(self) -> int:
        """Number of entities across all buckets."""
        return sum(len(values) for _, values in self)

    def as_dict(self) -> dict[str, list[str]]:
        return {category.value: list(values) for category, values in self}


@dataclass(frozen=True)
class LexicalAnalysis:
    """Tokens, part-of-speech tags and entity buckets for one request."""

    text: str
    tokens: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    entities: EntityBuckets = field(default_factory=EntityBuckets)

    @property
    def lowered_tokens(self) -> tuple[str, ...]:
        return tuple(token.lower() for token in self.tokens)

    @property
    def joined_text(self) -> str:
        """Lower-cased tokens joined by single spaces."""
        return " ".join(self.lowered_tokens)

    def tagged(self) -> list[tuple[str, str]]:
        return list(zip(self.tokens, self.tags))

    def to_dict(self) -> dict:
        return {
            "tokens": list(self.tokens),
            "tags": list(self.tags),
            "entities": self.entities.as_dict(),
        }

"""Lookup and keyword tables for request interpretation.

Tables are checked when built: empty tables, non-string entries and
lookup lists that share a value raise ``KeywordTableError``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from codeplan.config import KeywordSettings
from codeplan.errors import KeywordTableError

LANGUAGES = ("javascript", "typescript", "python", "java", "c#", "ruby", "go")
FRAMEWORKS = ("react", "angular", "vue", "express", "django", "spring", "flask")
PLATFORMS = ("node", "browser", "web", "mobile", "desktop", "server")

CONSTRAINT_PHRASES = ("must be", "should be", "needs to be", "required to")

COMPLEXITY_KEYWORDS = frozenset({
    "async", "concurrent", "parallel", "optimize", "secure",
    "scale", "distributed", "enterprise", "integration",
})
URGENT_KEYWORDS = frozenset({"urgent", "asap", "critical", "important", "priority"})
LOW_PRIORITY_KEYWORDS = frozenset({"experimental", "optional", "nice to have"})
WORK_UNIT_INDICATORS = frozenset({
    "async", "await", "try", "catch", "class", "interface",
    "extends", "implements", "generic", "template",
})

# Validation tables
STRUCTURAL_KEYWORDS = ("function", "class", "component", "interface")
VALIDATION_LANGUAGES = ("javascript", "typescript", "python", "java", "c#")
COMPLETION_PHRASES = (
    "create a function",
    "implement a class",
    "generate an interface",
    "build a component",
    "develop an API",
    "write a test",
)


@dataclass(frozen=True)
class LookupTables:
    """Ordered lookup lists used to classify technology entities."""

    languages: tuple[str, ...] = LANGUAGES
    frameworks: tuple[str, ...] = FRAMEWORKS
    platforms: tuple[str, ...] = PLATFORMS
    constraint_phrases: tuple[str, ...] = CONSTRAINT_PHRASES

    @property
    def all_values(self) -> frozenset[str]:
        return frozenset(self.languages) | frozenset(self.frameworks) | frozenset(self.platforms)


def _normalize(name: str, values: Sequence[str]) -> tuple[str, ...]:
    if not values:
        raise KeywordTableError(name, "must not be empty")
    normalized: list[str] = []
    for value in values:
        if not isinstance(value, str) or not value.strip():
            raise KeywordTableError(name, f"invalid entry {value!r}")
        lowered = value.strip().lower()
        if lowered not in normalized:
            normalized.append(lowered)
    return tuple(normalized)


def build_lookup_tables(settings: Optional[KeywordSettings] = None) -> LookupTables:
    """Build lookup tables from defaults plus optional overrides."""
    settings = settings or KeywordSettings()
    languages = _normalize("languages", settings.languages if settings.languages is not None else LANGUAGES)
    frameworks = _normalize("frameworks", settings.frameworks if settings.frameworks is not None else FRAMEWORKS)
    platforms = _normalize("platforms", settings.platforms if settings.platforms is not None else PLATFORMS)
    phrases = _normalize(
        "constraint_phrases",
        settings.constraint_phrases if settings.constraint_phrases is not None else CONSTRAINT_PHRASES,
    )

    named = {"languages": languages, "frameworks": frameworks, "platforms": platforms}
    seen: dict[str, str] = {}
    for table, values in named.items():
        for value in values:
            if value in seen:
                raise KeywordTableError(table, f"'{value}' is also listed in {seen[value]}")
            seen[value] = table

    return LookupTables(
        languages=languages,
        frameworks=frameworks,
        platforms=platforms,
        constraint_phrases=phrases,
    )

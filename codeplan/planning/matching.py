"""Keyword matching against a request's lexical analysis."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Iterable

from codeplan.lexical.types import LexicalAnalysis

# Tokens counted towards the structural threshold (exact token match)
STRUCTURAL_KEYWORDS = frozenset({
    "class", "interface", "function", "method",
    "api", "endpoint", "database", "async",
})


@lru_cache(maxsize=256)
def _keyword_pattern(keyword: str) -> re.Pattern[str]:
    # Anchor at a word start only: "auth" matches "authenticated", "api" does not match "rapid"
    return re.compile(rf"(?<![\w]){re.escape(keyword.lower())}")


def _technology_spans(analysis: LexicalAnalysis, joined: str) -> list[tuple[int, int]]:
    spans: list[tuple[int, int]] = []
    for name in {value.lower() for value in analysis.entities.technologies}:
        spans.extend(match.span() for match in re.finditer(rf"(?<!\w){re.escape(name)}(?!\w)", joined))
    return spans


def _inside_technology(start: int, end: int, spans: list[tuple[int, int]]) -> bool:
    return any(
        span_start <= start and end <= span_end and end - start < span_end - span_start
        for span_start, span_end in spans
    )


def matched_keywords(analysis: LexicalAnalysis, keywords: Iterable[str]) -> list[str]:
    """Keywords found in the request, sorted for stable reporting.

    A keyword that only occurs inside a longer technology name ("fast" in
    "fastapi") does not count.
    """
    joined = analysis.joined_text
    if not joined:
        return []
    spans = _technology_spans(analysis, joined)
    return sorted(
        keyword
        for keyword in set(keywords)
        if any(
            not _inside_technology(*match.span(), spans)
            for match in _keyword_pattern(keyword).finditer(joined)
        )
    )


def count_structural_keywords(analysis: LexicalAnalysis) -> int:
    return sum(1 for token in analysis.lowered_tokens if token in STRUCTURAL_KEYWORDS)

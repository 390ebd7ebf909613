"""Helpers shared by task strategies."""

from __future__ import annotations

from typing import Any

from codeplan.interpretation.types import InterpretedRequest
from codeplan.lexical.types import LexicalAnalysis
from codeplan.planning.matching import count_structural_keywords, matched_keywords
from codeplan.planning.types import PatternConfig, TriggerResult


def evaluate_patterns(analysis: LexicalAnalysis, patterns: PatternConfig) -> TriggerResult:
    """Evaluate the keyword and structural triggers of a pattern config."""
    result = TriggerResult()

    primary = matched_keywords(analysis, patterns.primary_keywords)
    if primary:
        result.add(f"keywords: {', '.join(primary)}")

    implied = matched_keywords(analysis, patterns.implied_keywords)
    if implied:
        result.add(f"implied by: {', '.join(implied)}")

    if patterns.structural_threshold:
        structural = count_structural_keywords(analysis)
        if structural >= patterns.structural_threshold:
            result.add(f"{structural} structural keywords")

    return result


def language_context(request: InterpretedRequest) -> dict[str, Any]:
    return {
        "language": request.language,
        "framework": request.framework,
    }

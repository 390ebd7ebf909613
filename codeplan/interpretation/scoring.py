"""Complexity, priority and work-unit scoring."""

from __future__ import annotations

from typing import Iterable, Optional

from codeplan.config import ScoringSettings
from codeplan.constants import SCORE_MAX, SCORE_MIN
from codeplan.interpretation.tables import (
    COMPLEXITY_KEYWORDS,
    LOW_PRIORITY_KEYWORDS,
    URGENT_KEYWORDS,
    WORK_UNIT_INDICATORS,
)
from codeplan.lexical.types import LexicalAnalysis


def clamp_score(value: float) -> int:
    """Round half up and clamp into [SCORE_MIN, SCORE_MAX]."""
    rounded = int(value + 0.5) if value >= 0 else int(value - 0.5)
    return min(max(rounded, SCORE_MIN), SCORE_MAX)


def count_keyword_tokens(tokens: Iterable[str], keywords: frozenset[str]) -> int:
    return sum(1 for token in tokens if token in keywords)


def _has_keyword(analysis: LexicalAnalysis, keywords: frozenset[str]) -> bool:
    tokens = analysis.lowered_tokens
    if any(token in keywords for token in tokens):
        return True
    # Multi-word keywords ("nice to have") only show up in the joined text
    joined = f" {analysis.joined_text} "
    return any(" " in keyword and f" {keyword} " in joined for keyword in keywords)


def calculate_complexity(analysis: LexicalAnalysis, scoring: Optional[ScoringSettings] = None) -> int:
    scoring = scoring or ScoringSettings()
    complexity = analysis.entities.total() * scoring.entity_weight
    complexity += count_keyword_tokens(analysis.lowered_tokens, COMPLEXITY_KEYWORDS) * scoring.keyword_weight
    return clamp_score(complexity)


def calculate_priority(analysis: LexicalAnalysis, scoring: Optional[ScoringSettings] = None) -> int:
    scoring = scoring or ScoringSettings()
    priority = scoring.priority_base
    if _has_keyword(analysis, URGENT_KEYWORDS):
        priority += scoring.priority_step
    if _has_keyword(analysis, LOW_PRIORITY_KEYWORDS):
        priority -= scoring.priority_step
    return clamp_score(priority)


def estimate_work_units(analysis: LexicalAnalysis, scoring: Optional[ScoringSettings] = None) -> int:
    """Additive estimate of how much output a request will need."""
    scoring = scoring or ScoringSettings()
    entities = analysis.entities
    units = scoring.base_work_units
    units += entities.total() * scoring.work_units_per_entity
    units += len(entities.technologies) * scoring.work_units_per_technology
    units += count_keyword_tokens(analysis.lowered_tokens, WORK_UNIT_INDICATORS) * scoring.work_units_per_indicator
    return max(units, 0)

"""Request interpreter.

Reads a lexical analysis and decides what the request is asking for:
language, framework and platform, remaining technologies as
dependencies, constraint phrases, plus complexity, priority and
work-unit scores.
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Sequence

from codeplan.config import CodeplanConfig
from codeplan.interpretation.scoring import (
    calculate_complexity,
    calculate_priority,
    estimate_work_units,
)
from codeplan.interpretation.tables import LookupTables, build_lookup_tables
from codeplan.interpretation.types import InterpretedRequest
from codeplan.lexical.types import LexicalAnalysis

logger = logging.getLogger(__name__)

SENTENCE_TERMINATOR = "."
# Terminator as a standalone token in the joined text; dots inside tokens
# such as "node.js" or "2.5" do not end a sentence.
_TERMINATOR_TOKEN = f" {SENTENCE_TERMINATOR}"


def _detect(technologies: Sequence[str], candidates: Sequence[str]) -> Optional[str]:
    """First technology (in entity order) found in the candidate list."""
    known = set(candidates)
    for tech in technologies:
        if tech in known:
            return tech
    return None


def extract_dependencies(technologies: Sequence[str], tables: LookupTables) -> list[str]:
    """Technologies outside the lookup lists, in discovery order."""
    excluded = tables.all_values
    dependencies: list[str] = []
    for tech in technologies:
        if tech.lower() in excluded or tech in dependencies:
            continue
        dependencies.append(tech)
    return dependencies


def extract_constraints(analysis: LexicalAnalysis, phrases: Sequence[str]) -> list[str]:
    """Capture the text between each trigger phrase and the next full stop.

    The end of the request closes its final sentence.
    """
    text = analysis.joined_text
    if analysis.tokens and analysis.tokens[-1] != SENTENCE_TERMINATOR:
        text = f"{text}{_TERMINATOR_TOKEN}"

    constraints: list[str] = []
    for phrase in phrases:
        match = re.search(rf"\b{re.escape(phrase)}\b", text)
        if match is None:
            continue
        end = text.find(_TERMINATOR_TOKEN, match.end())
        if end == -1:
            continue
        captured = text[match.end():end].strip()
        if captured:
            constraints.append(captured)
    return constraints


def interpret(
    analysis: LexicalAnalysis,
    raw_text: Optional[str] = None,
    config: Optional[CodeplanConfig] = None,
    tables: Optional[LookupTables] = None,
) -> InterpretedRequest:
    """Build an InterpretedRequest from a lexical analysis.

    Args:
        analysis: Output of ``codeplan.lexical.analyze``
        raw_text: Original request text (defaults to ``analysis.text``)
        config: Scoring weights and keyword overrides
        tables: Pre-built lookup tables (built from ``config`` when omitted)

    Returns:
        InterpretedRequest; missing categories are None, never errors
    """
    config = config or CodeplanConfig()
    tables = tables or build_lookup_tables(config.keywords)

    technologies = [tech.lower() for tech in analysis.entities.technologies]
    request = InterpretedRequest(
        original_prompt=analysis.text if raw_text is None else raw_text,
        analysis=analysis,
        language=_detect(technologies, tables.languages),
        framework=_detect(technologies, tables.frameworks),
        platform=_detect(technologies, tables.platforms),
        dependencies=tuple(extract_dependencies(analysis.entities.technologies, tables)),
        constraints=tuple(extract_constraints(analysis, tables.constraint_phrases)),
        complexity=calculate_complexity(analysis, config.scoring),
        priority=calculate_priority(analysis, config.scoring),
        estimated_work_units=estimate_work_units(analysis, config.scoring),
    )

    logger.debug(
        f"Request interpreted: language={request.language}, framework={request.framework}, "
        f"platform={request.platform}, complexity={request.complexity}, priority={request.priority}"
    )
    return request

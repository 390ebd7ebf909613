"""Lexical analysis entry point."""

from __future__ import annotations

import logging
from typing import Iterable

from codeplan.lexical.entities import extract_entities
from codeplan.lexical.tagger import tag
from codeplan.lexical.tokenizer import tokenize
from codeplan.lexical.types import LexicalAnalysis

logger = logging.getLogger(__name__)


def analyze(text: str, extra_technologies: Iterable[str] = ()) -> LexicalAnalysis:
    """Tokenize, tag and extract entities from a request.

    Pure function of ``text``: the same input always yields the same
    analysis. Long input is accepted as is; an empty string yields empty
    tokens, tags and entity buckets.

    Args:
        text: Raw request text
        extra_technologies: Additional names to treat as technologies

    Returns:
        LexicalAnalysis for the text
    """
    text = text or ""
    tokens = tokenize(text)
    tags = tag(tokens)
    entities = extract_entities(text, tokens, tags, extra_technologies)

    logger.debug(
        f"Prompt analysis complete: {len(tokens)} tokens, {entities.total()} entities"
    )
    return LexicalAnalysis(
        text=text,
        tokens=tuple(tokens),
        tags=tuple(tags),
        entities=entities,
    )

"""Prompt validation and phrase completion.

Validation never raises: every problem is reported in the returned
ValidationResult as an error, warning or suggestion.
"""

from __future__ import annotations

from typing import Optional

from codeplan.config import ValidationSettings
from codeplan.constants import MAX_COMPLETION_SUGGESTIONS
from codeplan.interpretation.tables import (
    COMPLETION_PHRASES,
    STRUCTURAL_KEYWORDS,
    VALIDATION_LANGUAGES,
)
from codeplan.interpretation.types import ValidationResult
from codeplan.lexical.tokenizer import is_word, tokenize

ELLIPSIS = "..."
INCOMPLETE_TRAILING_VERBS = frozenset({"create", "generate"})


def _words(text: str) -> list[str]:
    return [token.lower() for token in tokenize(text) if is_word(token)]


def suggest_completions(partial: str, limit: int = MAX_COMPLETION_SUGGESTIONS) -> list[str]:
    """Suggest common request phrases that complete the end of ``partial``.

    A phrase matches when a trailing run of words in ``partial`` that
    starts with the phrase's leading verb is a prefix of it, so
    "please create" and "build a comp..." both match.
    """
    if len(_words(partial)) < 2:
        return []

    tail_words = partial.strip().rstrip(".").lower().split()
    suggestions: list[str] = []
    for phrase in COMPLETION_PHRASES:
        if len(suggestions) >= limit:
            break
        lowered = phrase.lower()
        lead_verb = lowered.split()[0]
        for index, word in enumerate(tail_words):
            if word == lead_verb and lowered.startswith(" ".join(tail_words[index:])):
                suggestions.append(phrase)
                break
    return suggestions


def _looks_incomplete(text: str) -> bool:
    stripped = text.rstrip()
    if stripped.endswith(ELLIPSIS):
        return True
    words = _words(stripped)
    return bool(words) and words[-1] in INCOMPLETE_TRAILING_VERBS and not stripped.endswith((".", "!", "?"))


def validate_prompt(text: str, settings: Optional[ValidationSettings] = None) -> ValidationResult:
    """Check a request for length, structure and language hints."""
    settings = settings or ValidationSettings()
    text = text or ""
    lowered = text.lower()
    result = ValidationResult()

    if len(text) < settings.min_prompt_length:
        result.add_error("Prompt is too short. Please provide more details.")

    if len(text) > settings.max_prompt_length:
        result.warnings.append("Prompt is very long. Consider breaking it into smaller requests.")

    if not any(keyword in lowered for keyword in STRUCTURAL_KEYWORDS):
        result.warnings.append(
            "Consider specifying the type of code you want to generate (function, class, component, etc.)."
        )

    if not any(language in lowered for language in VALIDATION_LANGUAGES):
        result.suggestions.append("Consider specifying the programming language.")

    if _looks_incomplete(text):
        completions = suggest_completions(text)
        result.suggestions.extend(f'Did you mean to say "{completion}"?' for completion in completions)

    return result

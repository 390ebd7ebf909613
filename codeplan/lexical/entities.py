"""Entity extraction over the raw request text."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Iterable

from codeplan.lexical import lexicon
from codeplan.lexical.tokenizer import is_word
from codeplan.lexical.types import EntityBuckets

_NUMBER_PATTERN = re.compile(
    r"(?<![\w.])\d+(?:[.,]\d+)*(?:[kKmM](?!\w))?(?![\w])"
    r"|\b(?:" + "|".join(sorted(lexicon.NUMBER_WORDS, key=len, reverse=True)) + r")\b",
    re.IGNORECASE,
)


def _term_pattern(term: str) -> str:
    # \b does not work around "#" and "+", so use explicit look-arounds.
    return rf"(?<![\w.#+\-]){re.escape(term)}(?![\w#+]|[.\-]\w)"


@lru_cache(maxsize=32)
def _technology_pattern(terms: frozenset[str]) -> re.Pattern[str]:
    """Compile one alternation, longest terms first so "spring boot" beats "spring"."""
    ordered = sorted(terms, key=lambda term: (-len(term), term))
    return re.compile("|".join(_term_pattern(term) for term in ordered), re.IGNORECASE)


@lru_cache(maxsize=1)
def _case_sensitive_pattern() -> re.Pattern[str]:
    ordered = sorted(lexicon.CASE_SENSITIVE_TECHNOLOGIES, key=lambda term: (-len(term), term))
    return re.compile("|".join(_term_pattern(term) for term in ordered))


@lru_cache(maxsize=1)
def _case_sensitive_lowered() -> frozenset[str]:
    return frozenset(term.lower() for term in lexicon.CASE_SENSITIVE_TECHNOLOGIES)


def find_technologies(text: str, extra_terms: Iterable[str] = ()) -> list[str]:
    """Return technology mentions in order of appearance, original casing kept."""
    if not text:
        return []
    # Case-sensitive names stay case-sensitive even when passed as extra terms
    extra = {term.lower() for term in extra_terms if term} - _case_sensitive_lowered()
    terms = frozenset(lexicon.TECHNOLOGIES | extra)
    matches = [
        (match.start(), match.group(0))
        for match in _technology_pattern(terms).finditer(text)
    ]
    taken = [(start, start + len(value)) for start, value in matches]
    for match in _case_sensitive_pattern().finditer(text):
        if not any(start <= match.start() < end for start, end in taken):
            matches.append((match.start(), match.group(0)))
    matches.sort(key=lambda item: item[0])
    return [value for _, value in matches]


def find_numbers(text: str) -> list[str]:
    if not text:
        return []
    return [match.group(0) for match in _NUMBER_PATTERN.finditer(text)]


def extract_entities(
    text: str,
    tokens: list[str],
    tags: list[str],
    extra_technologies: Iterable[str] = (),
) -> EntityBuckets:
    """Populate each bucket independently; no match leaves a bucket empty."""
    technologies = find_technologies(text, extra_technologies)
    technology_names = {value.lower() for value in technologies}

    actions: list[str] = []
    nouns: list[str] = []
    for token, token_tag in zip(tokens, tags):
        if not is_word(token):
            continue
        if token_tag.startswith("VB"):
            actions.append(token)
        elif token_tag.startswith("NN") and token.lower() not in technology_names:
            nouns.append(token)

    return EntityBuckets(
        technologies=tuple(technologies),
        actions=tuple(actions),
        nouns=tuple(nouns),
        numbers=tuple(find_numbers(text)),
    )

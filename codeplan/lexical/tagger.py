"""Rule-table part-of-speech tagger.

Tags follow the Penn Treebank names. Each token is looked up in the
closed-class tables first, then the verb/adjective lexicons, then suffix
rules. Words nothing matches default to ``NN``; non-word tokens without a
rule get ``UNK``.
"""

from __future__ import annotations

import re

from codeplan.lexical import lexicon
from codeplan.lexical.tokenizer import is_word

UNKNOWN_TAG = "UNK"
DEFAULT_WORD_TAG = "NN"

_NUMBER_PATTERN = re.compile(r"\d+(?:[.,]\d+)*[kKmM]?")
_SENTENCE_END = frozenset({".", "!", "?"})
_PUNCTUATION_TAGS = {",": ",", ":": ":", ";": ":", "(": "(", ")": ")", '"': "''", "'": "''"}

_CLOSED_CLASS: dict[str, str] = {
    **{word: "DT" for word in lexicon.DETERMINERS},
    **{word: "IN" for word in lexicon.PREPOSITIONS},
    **{word: "CC" for word in lexicon.CONJUNCTIONS},
    **{word: "PRP" for word in lexicon.PRONOUNS},
    **{word: "PRP$" for word in lexicon.POSSESSIVES},
    **{word: "MD" for word in lexicon.MODALS},
    **{word: "WDT" for word in lexicon.WH_WORDS},
    **{word: "WRB" for word in lexicon.WH_ADVERBS},
    **{word: "RB" for word in lexicon.ADVERBS},
    **lexicon.BE_FORMS,
    **lexicon.HAVE_FORMS,
    "to": "TO",
}

# A base verb right after these tags reads as a noun ("a build", "the test").
_NOMINALISING_TAGS = frozenset({"DT", "JJ", "PRP$"})


def _tag_word(token: str, previous_tag: str | None, is_first: bool) -> str:
    lowered = token.lower()

    if lowered in _CLOSED_CLASS:
        return _CLOSED_CLASS[lowered]
    if _NUMBER_PATTERN.fullmatch(token) or lowered in lexicon.NUMBER_WORDS:
        return "CD"
    if lowered in lexicon.ADJECTIVES:
        return "JJ"
    if lowered in lexicon.VERBS:
        return "NN" if previous_tag in _NOMINALISING_TAGS else "VB"

    # Third person verbs: "needs", "supports", "uses"
    if lowered.endswith("s") and (lowered[:-1] in lexicon.VERBS or lowered[:-2] in lexicon.VERBS):
        return "NNS" if previous_tag in _NOMINALISING_TAGS else "VBZ"

    if token[0].isupper() and not is_first:
        return "NNP"
    if lowered.endswith("ing") and len(lowered) > 4:
        return "VBG"
    if lowered.endswith("ed") and len(lowered) > 3:
        return "VBN"
    if lowered.endswith("ly") and len(lowered) > 3:
        return "RB"
    if lowered.endswith(lexicon.NOUN_SUFFIXES):
        return "NN"
    if lowered.endswith(lexicon.ADJECTIVE_SUFFIXES):
        return "JJ"
    if lowered.endswith("s") and not lowered.endswith("ss") and len(lowered) > 3:
        return "NNS"
    return DEFAULT_WORD_TAG


def tag(tokens: list[str]) -> list[str]:
    """Return one tag per token."""
    tags: list[str] = []
    previous_tag: str | None = None
    for token in tokens:
        if token in _SENTENCE_END:
            current = "."
        elif token in _PUNCTUATION_TAGS:
            current = _PUNCTUATION_TAGS[token]
        elif is_word(token):
            is_first = previous_tag is None or previous_tag == "."
            current = _tag_word(token, previous_tag, is_first)
        else:
            current = UNKNOWN_TAG
        tags.append(current)
        previous_tag = current
    return tags

"""Word tokenizer for software requests."""

from __future__ import annotations

import re

# Words may contain internal ".", "-", "/" (node.js, real-time, ci/cd) and a
# trailing "++" or "#" (c++, c#). Any other non-space character is its own token.
_TOKEN_PATTERN = re.compile(
    r"\w+(?:[.\-/]\w+)*(?:\+\+|#)?"
    r"|[^\w\s]"
)

_WORD_PATTERN = re.compile(r"\w")


def tokenize(text: str) -> list[str]:
    """Split text into word and punctuation tokens, in order."""
    if not text:
        return []
    return _TOKEN_PATTERN.findall(text)


def is_word(token: str) -> bool:
    return bool(_WORD_PATTERN.search(token))

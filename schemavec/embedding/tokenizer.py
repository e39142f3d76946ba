"""
Tokenizer for rendered schema text.

Steps, in order:

    1. lowercase the whole text
    2. split on whitespace
    3. split off punctuation "(", ")", "," and ";" as standalone tokens
    4. drop empty tokens
    5. optionally remove stop words

    tokenize("CREATE TABLE t(a int,b int);")
    → ["create", "table", "t", "(", "a", "int", ",", "b", "int", ")", ";"]
"""

import re
from typing import FrozenSet, List

PUNCTUATION_PATTERN = re.compile(r"([(),;])")

# Kept deliberately small. Words the extractors look for ("on", "set",
# "null", "key", ...) must never appear here.
STOP_WORDS: FrozenSet[str] = frozenset(
    {"a", "an", "the", "and", "or", "of", "to", "in", "is", "as", "with", "for", "by", "at", "from"}
)


def tokenize(text: str, remove_stop_words: bool = False) -> List[str]:
    """Return the token stream for ``text``."""
    tokens: List[str] = []
    for chunk in text.lower().split():
        tokens.extend(part for part in PUNCTUATION_PATTERN.split(chunk) if part)

    if remove_stop_words:
        tokens = [token for token in tokens if token not in STOP_WORDS]

    return tokens

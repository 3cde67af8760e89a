"""Frequency-ranked keyword suggestions."""

from __future__ import annotations

import re
from collections import Counter

MIN_KEYWORD_LENGTH = 4

STOP_WORDS = frozenset(
    {
        "the",
        "a",
        "an",
        "and",
        "or",
        "but",
        "in",
        "on",
        "at",
        "to",
        "for",
        "of",
        "with",
        "by",
        "from",
        "as",
        "is",
        "was",
        "are",
        "were",
        "been",
        "be",
        "have",
        "has",
        "had",
        "do",
        "does",
        "did",
        "will",
        "would",
        "could",
        "should",
        "may",
        "might",
        "must",
        "can",
        "this",
        "that",
        "these",
        "those",
    }
)

# ASCII word characters only; accented letters are stripped like punctuation.
_PUNCTUATION = re.compile(r"[^A-Za-z0-9_\s]")


def tokenize(text: str) -> list[str]:
    """Lowercase, drop punctuation and split on whitespace."""
    return _PUNCTUATION.sub("", (text or "").lower()).split()


def find_keywords(text: str, top_n: int = 10) -> list[str]:
    """Return up to ``top_n`` of the most frequent non-stop-word tokens.

    Tokens shorter than four characters are ignored. Ties keep the order in
    which tokens first appeared.
    """
    if top_n <= 0:
        return []
    counts = Counter(
        word
        for word in tokenize(text)
        if len(word) >= MIN_KEYWORD_LENGTH and word not in STOP_WORDS
    )
    return [word for word, _ in counts.most_common(top_n)]

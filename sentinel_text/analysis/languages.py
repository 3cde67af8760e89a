"""Script and diacritic based language tagging."""

from __future__ import annotations

import re

DEFAULT_LANGUAGE = "en"
SAMPLE_CHARS = 100

# Order matters: the Latin ranges overlap and "fr" shadows "de" and "es".
LANGUAGE_RANGES: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("ru", re.compile(r"[а-яё]")),
    ("zh", re.compile(r"[一-龯]")),
    ("ja", re.compile(r"[ぁ-んァ-ン]")),
    ("ko", re.compile(r"[가-힣]")),
    ("fr", re.compile(r"[à-ÿ]")),
    ("de", re.compile(r"[ä-ü]")),
    ("es", re.compile(r"[á-ú]")),
)

SUPPORTED_LANGUAGES = frozenset({DEFAULT_LANGUAGE, *(tag for tag, _ in LANGUAGE_RANGES)})


def detect_language(text: str) -> str:
    """Tag ``text`` with the first script range found in its opening characters."""
    sample = (text or "")[:SAMPLE_CHARS].lower()
    for tag, pattern in LANGUAGE_RANGES:
        if pattern.search(sample):
            return tag
    return DEFAULT_LANGUAGE

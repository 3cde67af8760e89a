"""One-shot metadata profile for an ingested document."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from sentinel_text.config import get_config

from .dates import extract_date
from .entities import EntityBundle, extract_entities
from .keywords import find_keywords
from .languages import detect_language
from .summary import summarize

logger = logging.getLogger(__name__)


@dataclass
class DocumentProfile:
    """Everything the heuristics can say about one document body."""

    date: date | None = None
    entities: EntityBundle = field(default_factory=EntityBundle)
    summary: str = ""
    language: str = "en"
    keywords: list[str] = field(default_factory=list)
    word_count: int = 0
    char_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly representation for document metadata columns."""
        return {
            "date": self.date.isoformat() if self.date else None,
            "entities": self.entities.to_dict(),
            "summary": self.summary,
            "language": self.language,
            "keywords": list(self.keywords),
            "word_count": self.word_count,
            "char_count": self.char_count,
        }


def analyze_document(
    text: str,
    *,
    summary_length: int | None = None,
    keyword_count: int | None = None,
) -> DocumentProfile:
    """Run every analysis over ``text``; unset limits come from config."""
    cfg = get_config()
    text = text or ""
    length = cfg.summary_length if summary_length is None else summary_length
    count = cfg.keyword_count if keyword_count is None else keyword_count

    profile = DocumentProfile(
        date=extract_date(text),
        entities=extract_entities(text),
        summary=summarize(text, length),
        language=detect_language(text),
        keywords=find_keywords(text, count),
        word_count=len(text.split()),
        char_count=len(text),
    )
    logger.debug(
        "Profiled document: %d words, language=%s, %d keywords",
        profile.word_count,
        profile.language,
        len(profile.keywords),
    )
    return profile

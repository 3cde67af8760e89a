"""Pure analysis helpers for dates, entities, similarity, summaries, language and keywords."""

from .dates import DATE_PATTERNS, DatePattern, extract_date
from .entities import ORG_SUFFIXES, EntityBundle, extract_entities
from .files import format_file_size, sanitize_filename
from .keywords import STOP_WORDS, find_keywords
from .languages import SUPPORTED_LANGUAGES, detect_language
from .profile import DocumentProfile, analyze_document
from .similarity import rank_related, similarity, similarity_matrix
from .summary import summarize

__all__ = [
    "DATE_PATTERNS",
    "DatePattern",
    "DocumentProfile",
    "EntityBundle",
    "ORG_SUFFIXES",
    "STOP_WORDS",
    "SUPPORTED_LANGUAGES",
    "analyze_document",
    "detect_language",
    "extract_date",
    "extract_entities",
    "find_keywords",
    "format_file_size",
    "rank_related",
    "sanitize_filename",
    "similarity",
    "similarity_matrix",
    "summarize",
]

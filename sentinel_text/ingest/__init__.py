"""Ingestion helpers: HTML stripping, content-type classification and document rows."""

from .content_types import classify_filename, classify_url
from .documents import (IngestError, normalize_tags, prepare_text_document,
                        prepare_upload_document, prepare_url_document,
                        truncate_content)
from .html import extract_title, html_to_text, url_hostname

__all__ = [
    "IngestError",
    "classify_filename",
    "classify_url",
    "extract_title",
    "html_to_text",
    "normalize_tags",
    "prepare_text_document",
    "prepare_upload_document",
    "prepare_url_document",
    "truncate_content",
    "url_hostname",
]

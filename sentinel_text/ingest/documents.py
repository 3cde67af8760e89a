"""
Document row preparation for text, upload and URL ingestion.

Each ``prepare_*`` function validates its inputs and returns the row the
storage backend inserts: title, content, content type, tags, metadata and
project. Nothing here performs I/O; URL callers pass already-fetched HTML.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Iterable, Optional

from sentinel_text.analysis import analyze_document, format_file_size, sanitize_filename
from sentinel_text.config import get_config

from .content_types import classify_filename, classify_url
from .html import extract_title, html_to_text, url_hostname

logger = logging.getLogger(__name__)


class IngestError(ValueError):
    """Raised when a document cannot be prepared from the given inputs."""


def _timestamp(now: Optional[datetime]) -> str:
    return (now or datetime.now(timezone.utc)).isoformat()


def normalize_tags(tags: str | Iterable[str] | None) -> list[str]:
    """Accept a comma-separated string or an iterable; drop blanks."""
    if not tags:
        return []
    if isinstance(tags, str):
        items: Iterable[str] = tags.split(",")
    else:
        items = tags
    return [str(t).strip() for t in items if str(t).strip()]


def truncate_content(content: str, limit: Optional[int] = None) -> str:
    """Cap ``content`` at the configured maximum length."""
    max_chars = get_config().max_content_chars if limit is None else limit
    if len(content) > max_chars:
        logger.info("Truncating content from %d to %d characters", len(content), max_chars)
        return content[:max_chars]
    return content


def _build_row(
    *,
    title: str,
    content: str,
    content_type: str,
    source_url: Optional[str],
    tags: list[str],
    metadata: dict[str, Any],
    project_id: Optional[str],
) -> dict[str, Any]:
    if get_config().auto_analyze:
        metadata["analysis"] = analyze_document(content).to_dict()
    return {
        "project_id": project_id or None,
        "title": title,
        "content": content,
        "content_type": content_type,
        "source_url": source_url or None,
        "tags": tags,
        "metadata": metadata,
    }


def prepare_text_document(
    title: str,
    content: str,
    *,
    content_type: Optional[str] = None,
    tags: str | Iterable[str] | None = None,
    source_url: Optional[str] = None,
    project_id: Optional[str] = None,
    now: Optional[datetime] = None,
) -> dict[str, Any]:
    """Prepare a manually entered note or pasted text."""
    if not (title or "").strip() or not (content or "").strip():
        raise IngestError("Title and content are required")

    metadata = {
        "manual_entry": True,
        "created_at": _timestamp(now),
        "word_count": len(content.split()),
    }
    return _build_row(
        title=title.strip(),
        content=content,
        content_type=content_type or "note",
        source_url=source_url,
        tags=normalize_tags(tags),
        metadata=metadata,
        project_id=project_id,
    )


def prepare_upload_document(
    filename: str,
    data: bytes,
    *,
    mime_type: Optional[str] = None,
    tags: str | Iterable[str] | None = None,
    project_id: Optional[str] = None,
    now: Optional[datetime] = None,
) -> dict[str, Any]:
    """Prepare an uploaded file; its bytes are decoded as UTF-8."""
    if not filename:
        raise IngestError("No file provided")

    data = data or b""
    content = truncate_content(data.decode("utf-8", errors="replace"))
    metadata = {
        "filename": filename,
        "size": len(data),
        "size_label": format_file_size(len(data)),
        "type": mime_type,
        "uploaded_at": _timestamp(now),
        "storage_key": sanitize_filename(filename),
    }
    return _build_row(
        title=filename,
        content=content,
        content_type=classify_filename(filename),
        source_url=None,
        tags=normalize_tags(tags),
        metadata=metadata,
        project_id=project_id,
    )


def prepare_url_document(
    url: str,
    html: str,
    *,
    tags: str | Iterable[str] | None = None,
    project_id: Optional[str] = None,
    now: Optional[datetime] = None,
) -> dict[str, Any]:
    """Prepare a fetched web page.

    The returned row carries an extra ``snippet`` key with the opening of the
    extracted text for immediate display; it is not part of the stored row.
    """
    if not url:
        raise IngestError("No URL provided")

    text = html_to_text(html)
    content = truncate_content(text)
    metadata = {
        "source_url": url,
        "fetched_at": _timestamp(now),
        "content_length": len(text),
        "domain": url_hostname(url),
    }
    row = _build_row(
        title=extract_title(html, url),
        content=content,
        content_type=classify_url(url),
        source_url=url,
        tags=normalize_tags(tags),
        metadata=metadata,
        project_id=project_id,
    )
    row["snippet"] = text[: get_config().snippet_chars]
    return row

# Copyright (c) 2025 Dave Tofflemire, SigilDERG Project
# Licensed under the GNU Affero General Public License v3.0 (AGPLv3).
# Commercial licenses are available. Contact: davetmire85@gmail.com

"""Render document rows as JSON, CSV or Markdown downloads."""

from __future__ import annotations

import csv
import io
import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Mapping, Optional, Sequence

logger = logging.getLogger(__name__)

CSV_HEADERS = ["ID", "Title", "Content Type", "Created At", "Tags", "Source URL"]


class UnsupportedExportFormat(ValueError):
    """Raised for export formats other than json, csv and markdown."""


@dataclass
class ExportResult:
    content: str
    content_type: str
    filename: str


def _cell(value: Any) -> str:
    return "" if value is None else str(value)


def _tags(doc: Mapping[str, Any]) -> list[str]:
    return [str(t) for t in (doc.get("tags") or [])]


def _to_json(
    documents: Sequence[Mapping[str, Any]],
    entities: Optional[Sequence[Mapping[str, Any]]],
    timeline: Optional[Sequence[Mapping[str, Any]]],
    now: datetime,
) -> str:
    payload: dict[str, Any] = {"documents": list(documents)}
    if entities is not None:
        payload["entities"] = list(entities)
    if timeline is not None:
        payload["timeline"] = list(timeline)
    return json.dumps(payload, indent=2, ensure_ascii=False, default=str)


def _to_csv(
    documents: Sequence[Mapping[str, Any]],
    entities: Optional[Sequence[Mapping[str, Any]]],
    timeline: Optional[Sequence[Mapping[str, Any]]],
    now: datetime,
) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for doc in documents:
        writer.writerow(
            [
                _cell(doc.get("id")),
                _cell(doc.get("title")),
                _cell(doc.get("content_type")),
                _cell(doc.get("created_at")),
                "; ".join(_tags(doc)),
                _cell(doc.get("source_url")),
            ]
        )
    return buf.getvalue()


def _to_markdown(
    documents: Sequence[Mapping[str, Any]],
    entities: Optional[Sequence[Mapping[str, Any]]],
    timeline: Optional[Sequence[Mapping[str, Any]]],
    now: datetime,
) -> str:
    parts = [f"# Sentinel Export\n\nExported: {now.isoformat()}\n\n"]
    for doc in documents:
        section = f"## {_cell(doc.get('title'))}\n\n"
        section += f"**Type:** {_cell(doc.get('content_type'))}\n"
        section += f"**Created:** {_cell(doc.get('created_at'))}\n"
        if doc.get("source_url"):
            section += f"**Source:** {doc['source_url']}\n"
        tags = _tags(doc)
        if tags:
            section += f"**Tags:** {', '.join(tags)}\n"
        section += f"\n{_cell(doc.get('content'))}\n\n---\n\n"
        parts.append(section)
    return "".join(parts)


Renderer = Callable[..., str]

EXPORT_FORMATS: dict[str, tuple[Renderer, str, str]] = {
    "json": (_to_json, "application/json", "json"),
    "csv": (_to_csv, "text/csv", "csv"),
    "markdown": (_to_markdown, "text/markdown", "md"),
}


def export_filename(extension: str, now: datetime) -> str:
    return f"sentinel-export-{int(now.timestamp() * 1000)}.{extension}"


def export_documents(
    documents: Sequence[Mapping[str, Any]],
    fmt: str,
    *,
    entities: Optional[Sequence[Mapping[str, Any]]] = None,
    timeline: Optional[Sequence[Mapping[str, Any]]] = None,
    now: Optional[datetime] = None,
) -> ExportResult:
    """Render ``documents`` in ``fmt``.

    Entity and timeline rows only appear in JSON exports; CSV and Markdown
    cover documents alone.
    """
    key = (fmt or "").lower()
    if key not in EXPORT_FORMATS:
        raise UnsupportedExportFormat(f"Invalid format: {fmt!r}")

    renderer, content_type, extension = EXPORT_FORMATS[key]
    ts = now or datetime.now(timezone.utc)
    content = renderer(documents, entities, timeline, ts)
    logger.info("Exported %d documents as %s", len(documents), key)
    return ExportResult(
        content=content,
        content_type=content_type,
        filename=export_filename(extension, ts),
    )

"""Content-type classification for uploads and fetched URLs."""

from __future__ import annotations

from pathlib import PurePath

from .html import url_hostname

PDF_EXTS = {".pdf"}
TEXT_EXTS = {".txt", ".md"}
DOCUMENT_EXTS = {".doc", ".docx"}
IMAGE_EXTS = {".jpg", ".jpeg", ".png", ".gif"}

EXT_CONTENT_TYPE_MAP = {
    **{ext: "pdf" for ext in PDF_EXTS},
    **{ext: "text" for ext in TEXT_EXTS},
    **{ext: "document" for ext in DOCUMENT_EXTS},
    **{ext: "image" for ext in IMAGE_EXTS},
}

SOCIAL_MEDIA_HOSTS = ("twitter.com", "x.com")
VIDEO_HOSTS = ("youtube.com",)


def classify_filename(filename: str) -> str:
    """Content type for an uploaded file, keyed on its extension."""
    ext = PurePath(filename or "").suffix.lower()
    return EXT_CONTENT_TYPE_MAP.get(ext, "document")


def _host_matches(host: str, domains: tuple[str, ...]) -> bool:
    return any(host == d or host.endswith("." + d) for d in domains)


def classify_url(url: str) -> str:
    """Content type for a fetched page, keyed on its host and path."""
    url = url or ""
    host = url_hostname(url).lower()
    if _host_matches(host, SOCIAL_MEDIA_HOSTS):
        return "social_media"
    if _host_matches(host, VIDEO_HOSTS):
        return "video"
    if "pdf" in url.lower():
        return "pdf"
    return "article"

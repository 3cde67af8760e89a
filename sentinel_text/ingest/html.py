"""HTML to plain text conversion for fetched pages."""

from __future__ import annotations

import re
from urllib.parse import urlparse

from bs4 import BeautifulSoup

_WHITESPACE = re.compile(r"\s+")


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html or "", "html.parser")


def html_to_text(html: str) -> str:
    """Drop scripts and styles, then flatten the remaining text nodes."""
    soup = _soup(html)
    for script in soup(["script", "style"]):
        script.decompose()
    text = soup.get_text(separator=" ")
    return _WHITESPACE.sub(" ", text).strip()


def url_hostname(url: str | None) -> str:
    if not url:
        return ""
    try:
        return urlparse(url).hostname or ""
    except ValueError:
        return ""


def extract_title(html: str, url: str | None = None) -> str:
    """Page ``<title>``, falling back to the URL hostname."""
    soup = _soup(html)
    if soup.title is not None and soup.title.string:
        title = soup.title.string.strip()
        if title:
            return title
    return url_hostname(url)

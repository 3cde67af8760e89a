"""Prefix summaries for previews and list views."""

from __future__ import annotations

ELLIPSIS = "..."


def summarize(text: str, max_length: int = 200) -> str:
    """Return ``text`` cut to ``max_length`` characters at a word boundary.

    Text that already fits is returned unchanged. Otherwise the slice is cut
    back to its last whitespace character (unless that is the very first
    character) and ``"..."`` is appended.
    """
    text = text or ""
    max_length = max(0, max_length)
    if len(text) <= max_length:
        return text

    truncated = text[:max_length]
    last_space = -1
    for i in range(len(truncated) - 1, 0, -1):
        if truncated[i].isspace():
            last_space = i
            break

    if last_space > 0:
        return truncated[:last_space] + ELLIPSIS
    return truncated + ELLIPSIS

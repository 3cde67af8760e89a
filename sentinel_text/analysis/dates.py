"""Regex-driven date extraction."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date
from typing import Callable

logger = logging.getLogger(__name__)

MONTH_NAMES = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)


@dataclass(frozen=True)
class DatePattern:
    """A named regex plus a converter from its match to (year, month, day)."""

    name: str
    regex: re.Pattern[str]
    to_parts: Callable[[re.Match[str]], tuple[int, int, int]]

    def search(self, text: str) -> re.Match[str] | None:
        return self.regex.search(text)


def _slash_parts(m: re.Match[str]) -> tuple[int, int, int]:
    # Month-first, as in "3/15/2024".
    return int(m.group(3)), int(m.group(1)), int(m.group(2))


def _iso_parts(m: re.Match[str]) -> tuple[int, int, int]:
    return int(m.group(1)), int(m.group(2)), int(m.group(3))


def _month_name_parts(m: re.Match[str]) -> tuple[int, int, int]:
    month = MONTH_NAMES.index(m.group(1).lower()) + 1
    return int(m.group(3)), month, int(m.group(2))


DATE_PATTERNS: tuple[DatePattern, ...] = (
    DatePattern("slash", re.compile(r"(\d{1,2})/(\d{1,2})/(\d{4})"), _slash_parts),
    DatePattern("iso", re.compile(r"(\d{4})-(\d{2})-(\d{2})"), _iso_parts),
    DatePattern(
        "month_name",
        re.compile(
            r"(" + "|".join(MONTH_NAMES) + r")\s+(\d{1,2}),?\s+(\d{4})",
            re.IGNORECASE,
        ),
        _month_name_parts,
    ),
)


def extract_date(
    text: str, patterns: tuple[DatePattern, ...] = DATE_PATTERNS
) -> date | None:
    """Return the date named by the first matching pattern family, if any.

    Families are tried in priority order and the first family with a match
    anywhere in ``text`` decides the result. A match that is not a real
    calendar date (``2/30/2024``) yields ``None`` rather than falling through
    to later families.
    """
    if not text:
        return None

    for pattern in patterns:
        match = pattern.search(text)
        if match is None:
            continue
        try:
            year, month, day = pattern.to_parts(match)
            return date(year, month, day)
        except ValueError:
            logger.debug(
                "Discarding invalid %s date %r", pattern.name, match.group(0)
            )
            return None
    return None

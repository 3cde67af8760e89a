"""File size labels and storage-safe filenames."""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal

SIZE_UNITS = ("Bytes", "KB", "MB", "GB")
_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")
_UNDERSCORE_RUNS = re.compile(r"_{2,}")
_CENTS = Decimal("0.01")


def format_file_size(num_bytes: float) -> str:
    """Human-readable size such as ``"1.5 KB"``; sizes past GB stay in GB."""
    try:
        size = float(num_bytes)
    except (TypeError, ValueError):
        return "0 Bytes"
    if not math.isfinite(size) or size <= 0:
        return "0 Bytes"

    # floor(log_1024(size)) without float log error at exact powers of 1024
    unit = 0
    scaled = size
    while scaled >= 1024 and unit < len(SIZE_UNITS) - 1:
        scaled /= 1024
        unit += 1
    # Half-up, so 1.125 KB reads "1.13 KB"
    rounded = Decimal(scaled).quantize(_CENTS, rounding=ROUND_HALF_UP)
    label = f"{rounded:f}".rstrip("0").rstrip(".")
    return f"{label} {SIZE_UNITS[unit]}"


def sanitize_filename(filename: str) -> str:
    """Replace unsafe characters with ``_``, collapse runs, lowercase."""
    cleaned = _UNSAFE_CHARS.sub("_", filename or "")
    return _UNDERSCORE_RUNS.sub("_", cleaned).lower()

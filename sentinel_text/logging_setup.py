# Copyright (c) 2025 Dave Tofflemire, SigilDERG Project
# Licensed under the GNU Affero General Public License v3.0 (AGPLv3).
# Commercial licenses are available. Contact: davetmire85@gmail.com

"""Logging bootstrap for applications embedding sentinel-text."""

from __future__ import annotations

import logging
from pathlib import Path

from sentinel_text.config import Config, get_config

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def configure_logging(config: Config | None = None, *, force: bool = False) -> logging.Logger:
    """Configure root logging from ``config`` and return the package logger."""
    cfg = config or get_config()
    level = getattr(logging, cfg.log_level, None)
    if not isinstance(level, int):
        level = logging.INFO

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    log_file = cfg.log_file
    if log_file:
        log_path = Path(log_file).expanduser()
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
        except OSError as exc:
            logging.getLogger(__name__).warning(
                "Cannot open log file %s: %s", log_path, exc
            )

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=force)
    logger = logging.getLogger("sentinel_text")
    logger.setLevel(level)
    return logger

# Copyright (c) 2025 Dave Tofflemire, SigilDERG Project
# Licensed under the GNU Affero General Public License v3.0 (AGPLv3).
# Commercial licenses are available. Contact: davetmire85@gmail.com

"""
Configuration loader for sentinel-text.

Loads configuration from a JSON file with fallback to environment variables.
"""

import os
import json
from pathlib import Path
from typing import Dict, Any, Optional
import logging

logger = logging.getLogger(__name__)

DEFAULT_SUMMARY_LENGTH = 200
DEFAULT_KEYWORD_COUNT = 10
DEFAULT_MAX_CONTENT_CHARS = 50000
DEFAULT_SNIPPET_CHARS = 500


def _parse_bool(raw_value: Optional[str], default: bool) -> bool:
    """Parse a boolean environment variable value."""
    if raw_value is None or not raw_value.strip():
        return default
    return raw_value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Configuration manager for sentinel-text."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration.

        Args:
            config_path: Path to a JSON config file. If None, searches in:
                1. ./sentinel_text.json (current directory)
                2. ~/.sentinel_text/config.json
                3. Falls back to environment variables
        """
        self.config_data: Dict[str, Any] = {}
        self._load_config(config_path)

    def _load_config(self, config_path: Optional[Path] = None):
        """Load configuration from file or environment."""
        if config_path:
            if config_path.exists():
                self._load_from_file(config_path)
                return
            logger.info(
                "Config path %s does not exist, using environment variables",
                config_path,
            )
            self._load_from_env()
            return

        local_config = Path("sentinel_text.json")
        if local_config.exists():
            self._load_from_file(local_config)
            return

        user_config = Path.home() / ".sentinel_text" / "config.json"
        if user_config.exists():
            self._load_from_file(user_config)
            return

        logger.debug("No config file found, using environment variables")
        self._load_from_env()

    def _load_from_file(self, path: Path):
        """Load configuration from JSON file."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("top-level JSON value must be an object")
            self.config_data = data
            logger.info("Loaded configuration from %s", path)
        except Exception as e:
            logger.error("Error loading config from %s: %s", path, e)
            self._load_from_env()

    def _load_from_env(self):
        """Load configuration from environment variables."""
        self.config_data = {
            "analysis": {
                "summary_length": os.getenv(
                    "SENTINEL_TEXT_SUMMARY_LENGTH", str(DEFAULT_SUMMARY_LENGTH)
                ),
                "keyword_count": os.getenv(
                    "SENTINEL_TEXT_KEYWORD_COUNT", str(DEFAULT_KEYWORD_COUNT)
                ),
            },
            "ingest": {
                "max_content_chars": os.getenv(
                    "SENTINEL_TEXT_MAX_CONTENT_CHARS", str(DEFAULT_MAX_CONTENT_CHARS)
                ),
                "snippet_chars": os.getenv(
                    "SENTINEL_TEXT_SNIPPET_CHARS", str(DEFAULT_SNIPPET_CHARS)
                ),
                "auto_analyze": _parse_bool(os.getenv("SENTINEL_TEXT_AUTO_ANALYZE"), True),
            },
            "logging": {
                "level": os.getenv("SENTINEL_TEXT_LOG_LEVEL", "INFO"),
            },
        }

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dot-notation key."""
        keys = key.split(".")
        value = self.config_data
        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default
        return value if value is not None else default

    def _get_int(self, key: str, default: int, minimum: int = 0) -> int:
        value = self.get(key, default)
        try:
            parsed = int(value)
        except (TypeError, ValueError):
            logger.warning("Invalid %s '%s', defaulting to %d", key, value, default)
            return default
        if parsed < minimum:
            logger.warning(
                "%s=%d is below the minimum %d, defaulting to %d",
                key,
                parsed,
                minimum,
                default,
            )
            return default
        return parsed

    @property
    def summary_length(self) -> int:
        """Maximum summary length used when profiling documents."""
        return self._get_int("analysis.summary_length", DEFAULT_SUMMARY_LENGTH)

    @property
    def keyword_count(self) -> int:
        """Number of keywords kept when profiling documents."""
        return self._get_int("analysis.keyword_count", DEFAULT_KEYWORD_COUNT)

    @property
    def max_content_chars(self) -> int:
        """Upper bound on stored document content length."""
        return self._get_int(
            "ingest.max_content_chars", DEFAULT_MAX_CONTENT_CHARS, minimum=1
        )

    @property
    def snippet_chars(self) -> int:
        return self._get_int("ingest.snippet_chars", DEFAULT_SNIPPET_CHARS)

    @property
    def auto_analyze(self) -> bool:
        value = self.get("ingest.auto_analyze", True)
        if isinstance(value, str):
            return _parse_bool(value, True)
        return bool(value)

    @property
    def log_level(self) -> str:
        return str(self.get("logging.level", "INFO")).upper()

    @property
    def log_file(self) -> Optional[str]:
        """Get log file path from config or environment."""
        env_log_file = os.getenv("SENTINEL_TEXT_LOG_FILE")
        if env_log_file:
            return env_log_file
        return self.get("logging.file") or None


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def load_config(config_path: Optional[Path] = None):
    """Load configuration from specified path."""
    global _config
    _config = Config(config_path)
    return _config

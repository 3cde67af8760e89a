# Copyright (c) 2025 Dave Tofflemire, SigilDERG Project
# Licensed under the GNU Affero General Public License v3.0 (AGPLv3).
# Commercial licenses are available. Contact: davetmire85@gmail.com

"""
Pytest configuration and shared fixtures for sentinel-text tests.
"""

import json
import shutil
import tempfile
from datetime import datetime, timezone
from pathlib import Path

import pytest

import sentinel_text.config as sentinel_config

ENV_VARS = (
    "SENTINEL_TEXT_SUMMARY_LENGTH",
    "SENTINEL_TEXT_KEYWORD_COUNT",
    "SENTINEL_TEXT_MAX_CONTENT_CHARS",
    "SENTINEL_TEXT_SNIPPET_CHARS",
    "SENTINEL_TEXT_AUTO_ANALYZE",
    "SENTINEL_TEXT_LOG_LEVEL",
    "SENTINEL_TEXT_LOG_FILE",
)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir)
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture(autouse=True)
def isolated_config(temp_dir, monkeypatch):
    """Give every test an environment-only config, untouched by local files."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(temp_dir)
    monkeypatch.setenv("HOME", str(temp_dir))
    monkeypatch.setattr(sentinel_config, "_config", None)


@pytest.fixture
def test_config_file(temp_dir):
    """Create a temporary config file for testing."""
    config_path = temp_dir / "config.json"
    config_data = {
        "analysis": {
            "summary_length": 40,
            "keyword_count": 3,
        },
        "ingest": {
            "max_content_chars": 100,
            "snippet_chars": 20,
            "auto_analyze": True,
        },
        "logging": {
            "level": "debug",
            "file": str(temp_dir / "logs" / "sentinel.log"),
        },
    }

    with open(config_path, "w") as f:
        json.dump(config_data, f, indent=2)

    yield config_path


@pytest.fixture
def fixed_now():
    return datetime(2024, 3, 15, 12, 30, tzinfo=timezone.utc)


@pytest.fixture
def sample_article():
    return (
        "On March 15, 2024 John Smith of Acme Corp met Jane Doe in Paris. "
        "The research team reviewed shipping records, shipping invoices and "
        "customs filings. Shipping volumes doubled while customs filings fell."
    )


@pytest.fixture
def stored_documents():
    """Rows shaped like the documents table returns them."""
    return [
        {
            "id": "doc-1",
            "title": "Shipping records",
            "content": "Manifests for March.",
            "content_type": "pdf",
            "created_at": "2024-03-15T12:00:00+00:00",
            "tags": ["shipping", "customs"],
            "source_url": None,
        },
        {
            "id": "doc-2",
            "title": 'Interview "notes"',
            "content": "Transcript of the interview.",
            "content_type": "note",
            "created_at": "2024-03-16T09:00:00+00:00",
            "tags": [],
            "source_url": "https://example.com/interview",
        },
    ]

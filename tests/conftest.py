"""Shared pytest fixtures for remoji tests."""

import json
import logging
from pathlib import Path

import pytest

from remoji.models.types import EmojiRecord


SAMPLE_CACHE_DATA = {
    "grinning face": {
        "code": "U+1F600",
        "sym": "\U0001f600",
        "cat": "Smileys & Emotion",
        "subcat": "face-smiling",
    },
    "grinning face with big eyes": {
        "code": "U+1F603",
        "sym": "\U0001f603",
        "cat": "Smileys & Emotion",
        "subcat": "face-smiling",
    },
    "winking face": {
        "code": "U+1F609",
        "sym": "\U0001f609",
        "cat": "Smileys & Emotion",
        "subcat": "face-affection",
    },
    "waving hand": {
        "code": "U+1F44B",
        "sym": "\U0001f44b",
        "cat": "People & Body",
        "subcat": "hand-fingers-open",
    },
    "rocket": {
        "code": "U+1F680",
        "sym": "\U0001f680",
        "cat": "Travel & Places",
        "subcat": "transport-air",
    },
    "Japanese “free of charge” button": {
        "code": "U+1F21A",
        "sym": "\U0001f21a",
        "cat": "Symbols",
        "subcat": "alphanum",
    },
}


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep cache and log files inside a temp directory."""
    home = tmp_path / "remoji-home"
    monkeypatch.setenv("REMOJI_HOME", str(home))
    monkeypatch.delenv("REMOJI_CACHE_FILE", raising=False)
    monkeypatch.delenv("REMOJI_EMOJI_TABLE_URL", raising=False)
    monkeypatch.delenv("REMOJI_LOG_LEVEL", raising=False)
    yield home

    # Drop file handlers pointing into this test's temp directory
    remoji_logger = logging.getLogger("remoji")
    for handler in list(remoji_logger.handlers):
        remoji_logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def sample_cache():
    """An in-memory cache in table order."""
    return {
        name: EmojiRecord.from_cache_dict(name, entry)
        for name, entry in SAMPLE_CACHE_DATA.items()
    }


@pytest.fixture
def cache_file(isolated_home) -> Path:
    """The sample cache written where the CLI looks for it."""
    isolated_home.mkdir(parents=True, exist_ok=True)
    path = isolated_home / "emojis.json"
    path.write_text(json.dumps(SAMPLE_CACHE_DATA, ensure_ascii=False), encoding="utf-8")
    return path

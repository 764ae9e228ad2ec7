"""
backend/tests/conftest.py

Purpose:
    Shared pytest bootstrap: import path for the backend package and a
    settings factory with fake credentials so no test reads a real .env key.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_THIS_FILE = Path(__file__).resolve()
_BACKEND_DIR = _THIS_FILE.parents[1]

if str(_BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(_BACKEND_DIR))

from scorecast.config import Settings  # noqa: E402


@pytest.fixture
def make_settings():
    def _make(**overrides) -> Settings:
        values = {
            "FOOTBALL_API_KEY": "football-test-key",
            "ODDS_API_KEY": "odds-test-key",
            "TAVILY_API_KEY": "tavily-test-key",
            "GOOGLE_API_KEY": "google-test-key",
            "FOOTBALL_API_BASE_URL": "https://football.test",
            "ODDS_API_BASE_URL": "https://odds.test/v4",
            "TAVILY_BASE_URL": "https://tavily.test",
            "GEMINI_BASE_URL": "https://gemini.test/v1beta/models",
        }
        values.update(overrides)
        return Settings(**values)

    return _make

"""
backend/scorecast/config.py

Purpose:
    Central settings loading for the aggregation backend. Provider
    credentials, endpoints, timeouts and the scope allow-lists are read once
    here and handed to adapters explicitly.

Dependencies:
    - pydantic-settings
    - scorecast.config_leagues
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

from scorecast.config_leagues import DEFAULT_ALLOWED_LEAGUES, DEFAULT_NEWS_DOMAINS

# Prefer backend/.env, fallback to project-root .env.
_BACKEND_ENV_FILE = Path(__file__).resolve().parent.parent / ".env"
_ROOT_ENV_FILE = Path(__file__).resolve().parent.parent.parent / ".env"


class Settings(BaseSettings):
    # Provider credentials (empty = source disabled, never an exception)
    FOOTBALL_API_KEY: str = ""
    ODDS_API_KEY: str = ""
    TAVILY_API_KEY: str = ""
    GOOGLE_API_KEY: str = ""

    # Fixture provider (API-Football)
    FOOTBALL_API_BASE_URL: str = "https://v3.football.api-sports.io"
    FOOTBALL_API_KEY_HEADER: str = "x-apisports-key"

    # Odds provider
    ODDS_API_BASE_URL: str = "https://api.the-odds-api.com/v4"
    ODDS_SPORT_KEY: str = "soccer_epl"  # single competition scope
    ODDS_REGIONS: str = "eu"

    # News provider (Tavily)
    TAVILY_BASE_URL: str = "https://api.tavily.com"
    NEWS_MAX_RESULTS: int = 5
    NEWS_CONTEXT_MAX_RESULTS: int = 5
    NEWS_DOMAINS: list[str] = Field(default_factory=lambda: list(DEFAULT_NEWS_DOMAINS))

    # Prediction provider (Gemini)
    GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta/models"
    GEMINI_MODEL: str = "gemini-2.5-flash"
    GEMINI_TEMPERATURE: float = 0.4
    GEMINI_TIMEOUT_SECONDS: float = 30.0
    PREDICTION_NEWS_SNIPPETS: int = 3

    # Aggregation scope
    ALLOWED_LEAGUES: list[str] = Field(default_factory=lambda: list(DEFAULT_ALLOWED_LEAGUES))

    # Per-call timeout for data sources; a timeout counts as a source failure
    HTTP_TIMEOUT_SECONDS: float = 10.0

    BACKEND_CORS_ORIGINS: str = "http://localhost:3000"

    model_config = {
        "env_file": (str(_BACKEND_ENV_FILE), str(_ROOT_ENV_FILE)),
        "extra": "ignore",
    }


settings = Settings()

"""
backend/scorecast/providers/football_api.py

Purpose:
    Fixture source adapter for API-Football: fetches the fixtures of one
    calendar day and validates the `response` array as a whole.

Dependencies:
    - scorecast.providers.base
    - scorecast.models.fixtures
"""

from __future__ import annotations

from datetime import date
from typing import Optional

import httpx

from scorecast.config import Settings
from scorecast.errors import ShapeError
from scorecast.models.fixtures import Fixture
from scorecast.providers.base import BaseProvider, SourceResult, parse_json, validate_records
from scorecast.utils import utc_today


class FootballAPIProvider(BaseProvider):
    """API-Football fixtures-by-date adapter."""

    name = "football_api"

    def __init__(self, config: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        super().__init__(config.FOOTBALL_API_KEY, config.HTTP_TIMEOUT_SECONDS, transport)
        self._base_url = config.FOOTBALL_API_BASE_URL.rstrip("/")
        self._key_header = config.FOOTBALL_API_KEY_HEADER

    async def _fetch(self, day: date) -> list[Fixture]:
        api_key = self._require_key("FOOTBALL_API_KEY")
        resp = await self._client.get(
            f"{self._base_url}/fixtures",
            params={"date": day.isoformat()},
            headers={self._key_header: api_key},
        )
        body = parse_json(self.name, resp)
        if not isinstance(body, dict):
            raise ShapeError(self.name, "expected a JSON object body")
        fixtures = validate_records(self.name, Fixture, body.get("response"))
        self._logger.info("Football API: %d fixtures for %s", len(fixtures), day.isoformat())
        return fixtures

    async def fetch_fixtures_result(self, day: date | None = None) -> SourceResult[Fixture]:
        target = day or utc_today()
        return await self._settle(lambda: self._fetch(target))

    async def fetch_fixtures(self, day: date | None = None) -> list[Fixture]:
        """Fixtures for `day` (default: today, UTC). Empty on any failure."""
        result = await self.fetch_fixtures_result(day)
        return result.items

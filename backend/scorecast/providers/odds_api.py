"""
backend/scorecast/providers/odds_api.py

Purpose:
    Odds source adapter. Fetches head-to-head decimal odds for the single
    configured competition (ODDS_SPORT_KEY); fixtures of other competitions
    never reconcile against this feed.

Dependencies:
    - scorecast.providers.base
    - scorecast.models.odds
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from scorecast.config import Settings
from scorecast.errors import ShapeError
from scorecast.models.odds import Odds
from scorecast.providers.base import BaseProvider, SourceResult, parse_json, validate_records


class OddsAPIProvider(BaseProvider):
    """Bearer-authenticated odds feed for one sport key."""

    name = "odds_api"

    def __init__(self, config: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        super().__init__(config.ODDS_API_KEY, config.HTTP_TIMEOUT_SECONDS, transport)
        self._base_url = config.ODDS_API_BASE_URL.rstrip("/")
        self._sport_key = config.ODDS_SPORT_KEY
        self._regions = config.ODDS_REGIONS

    @property
    def sport_key(self) -> str:
        return self._sport_key

    def _records(self, body: Any) -> Any:
        # Envelope `{"data": [...]}`; a bare array is the provider's native shape.
        if isinstance(body, list):
            return body
        if isinstance(body, dict):
            return body.get("data")
        raise ShapeError(self.name, f"unexpected body type {type(body).__name__}")

    async def _fetch(self) -> list[Odds]:
        api_key = self._require_key("ODDS_API_KEY")
        resp = await self._client.get(
            f"{self._base_url}/sports/{self._sport_key}/odds",
            params={
                "regions": self._regions,
                "markets": "h2h",
                "oddsFormat": "decimal",
            },
            headers={"Authorization": f"Bearer {api_key}"},
        )
        odds = validate_records(self.name, Odds, self._records(parse_json(self.name, resp)))
        self._logger.info("Odds API: %d events for %s", len(odds), self._sport_key)
        return odds

    async def fetch_odds_result(self) -> SourceResult[Odds]:
        return await self._settle(self._fetch)

    async def fetch_odds(self) -> list[Odds]:
        """Current odds for the configured competition. Empty on any failure."""
        result = await self.fetch_odds_result()
        return result.items

"""
backend/scorecast/providers/tavily.py

Purpose:
    News source adapter for the Tavily search API. Provides a single free-text
    search and the three-query match context search (preview plus each
    side's injury/suspension news) merged without duplicate URLs.

Dependencies:
    - asyncio
    - scorecast.providers.base
    - scorecast.models.news
"""

from __future__ import annotations

import asyncio
from typing import Iterable, Optional

import httpx

from scorecast.config import Settings
from scorecast.errors import ShapeError
from scorecast.models.news import NewsItem
from scorecast.providers.base import BaseProvider, SourceResult, parse_json, validate_records


def match_context_queries(home_team: str, away_team: str) -> list[tuple[str, str]]:
    """(label, query) pairs in merge order: preview, home news, away news."""
    return [
        ("preview", f"{home_team} vs {away_team} match preview"),
        ("home_news", f"{home_team} injury suspension lineup"),
        ("away_news", f"{away_team} injury suspension lineup"),
    ]


def merge_unique_by_url(result_sets: Iterable[list[NewsItem]]) -> list[NewsItem]:
    """Concatenate result sets in order, keeping the first item seen per URL."""
    seen: set[str] = set()
    merged: list[NewsItem] = []
    for items in result_sets:
        for item in items:
            if item.url in seen:
                continue
            seen.add(item.url)
            merged.append(item)
    return merged


class TavilyProvider(BaseProvider):
    """Tavily /search adapter (API key travels in the JSON body)."""

    name = "tavily"

    def __init__(self, config: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        super().__init__(config.TAVILY_API_KEY, config.HTTP_TIMEOUT_SECONDS, transport)
        self._base_url = config.TAVILY_BASE_URL.rstrip("/")
        self._domains = list(config.NEWS_DOMAINS)
        self._max_results = config.NEWS_MAX_RESULTS
        self._context_max_results = config.NEWS_CONTEXT_MAX_RESULTS

    async def _search(
        self,
        query: str,
        include_domains: list[str] | None,
        max_results: int,
    ) -> list[NewsItem]:
        api_key = self._require_key("TAVILY_API_KEY")
        payload: dict = {
            "api_key": api_key,
            "query": query,
            "max_results": max_results,
        }
        if include_domains:
            payload["include_domains"] = include_domains
        resp = await self._client.post(f"{self._base_url}/search", json=payload)
        body = parse_json(self.name, resp)
        if not isinstance(body, dict):
            raise ShapeError(self.name, "expected a JSON object body")
        # The provider may return more than asked for; the cap is ours.
        return validate_records(self.name, NewsItem, body.get("results"))[:max_results]

    async def search_news_result(self, query: str) -> SourceResult[NewsItem]:
        return await self._settle(lambda: self._search(query, None, self._max_results))

    async def search_news(self, query: str) -> list[NewsItem]:
        """Single free-text search. Empty on any failure."""
        result = await self.search_news_result(query)
        return result.items

    async def _match_context(self, home_team: str, away_team: str) -> list[NewsItem]:
        self._require_key("TAVILY_API_KEY")
        queries = match_context_queries(home_team, away_team)
        outcomes = await asyncio.gather(
            *(
                self._settle(
                    lambda q=query: self._search(q, self._domains, self._context_max_results),
                    label=f"{self.name}.{label}",
                )
                for label, query in queries
            ),
            return_exceptions=True,
        )
        # gather keeps argument order, so the merge follows query order, not completion order.
        result_sets = [
            outcome.items if isinstance(outcome, SourceResult) else []
            for outcome in outcomes
        ]
        merged = merge_unique_by_url(result_sets)
        self._logger.info(
            "Tavily context %s vs %s: %d items (%s)",
            home_team,
            away_team,
            len(merged),
            ", ".join(f"{label}={len(items)}" for (label, _), items in zip(queries, result_sets)),
        )
        return merged

    async def search_match_context_result(
        self, home_team: str, away_team: str
    ) -> SourceResult[NewsItem]:
        return await self._settle(lambda: self._match_context(home_team, away_team))

    async def search_match_context(self, home_team: str, away_team: str) -> list[NewsItem]:
        """Preview + injury news for both sides, deduplicated by URL."""
        result = await self.search_match_context_result(home_team, away_team)
        return result.items

"""
backend/scorecast/services/aggregation_service.py

Purpose:
    Multi-source aggregation for the two dashboard read views. Fans out to
    the fixture/odds/news/prediction adapters, filters fixtures by the league
    allow-list, reconciles odds to fixtures by team names and degrades every
    source failure to an empty (or None) slot at this boundary.

Dependencies:
    - asyncio
    - scorecast.providers.*
    - scorecast.utils.team_matching
    - scorecast.utils.odds_utils
"""

from __future__ import annotations

import asyncio
import logging
from datetime import date
from typing import Any, Iterable

from scorecast.config import Settings
from scorecast.config_leagues import LEAGUE_INFO, get_league_info
from scorecast.models.aggregation import DeepDiveAnalysis, FavoriteMatch, LeagueOption, MatchListData
from scorecast.models.fixtures import Fixture, status_is_finished
from scorecast.models.news import NewsItem
from scorecast.models.odds import Odds, ThreeWayPrices
from scorecast.models.prediction import OddsSummary, PredictionInput, PredictionOutput
from scorecast.providers.base import SourceResult
from scorecast.providers.football_api import FootballAPIProvider
from scorecast.providers.gemini import GeminiPredictionProvider
from scorecast.providers.odds_api import OddsAPIProvider
from scorecast.providers.tavily import TavilyProvider
from scorecast.utils.odds_utils import best_three_way_prices
from scorecast.utils.team_matching import build_pair_index, lookup_pair, teams_match

logger = logging.getLogger("scorecast.aggregation")

DEFAULT_LEAGUE_COUNTRY = "International"


# ---------------------------------------------------------------------------
# Pure reconciliation helpers
# ---------------------------------------------------------------------------

def filter_allowed_leagues(fixtures: Iterable[Fixture], allowed_leagues: Iterable[str]) -> list[Fixture]:
    """Keep fixtures whose league name is in the allow-list (name-only membership)."""
    allowed = set(allowed_leagues)
    return [f for f in fixtures if f.league.name in allowed]


def build_odds_index(odds: Iterable[Odds]) -> dict[str, Odds]:
    return build_pair_index(odds)


def odds_for_fixture(fixture: Fixture, odds_index: dict[str, Odds]) -> Odds | None:
    """Odds record for the fixture's team pair, or its swapped pair, else None."""
    return lookup_pair(odds_index, fixture.home_name, fixture.away_name)


def prices_for_fixture(fixture: Fixture, odds_index: dict[str, Odds]) -> ThreeWayPrices | None:
    """Prices oriented to the fixture's own home/away sides."""
    record = odds_for_fixture(fixture, odds_index)
    prices = best_three_way_prices(record)
    if record is None or prices is None:
        return None
    if teams_match(record.home_team, fixture.home_name):
        return prices
    # Matched through the swapped pair: provider home is our away.
    return ThreeWayPrices(home=prices.away, draw=prices.draw, away=prices.home)


def _league_country(league_name: str, reported: str | None) -> str:
    if reported:
        return reported
    if league_name in LEAGUE_INFO:
        return get_league_info(league_name)["country"]
    return DEFAULT_LEAGUE_COUNTRY


def league_options(fixtures: Iterable[Fixture]) -> list[LeagueOption]:
    """Distinct leagues by name, sorted by name, for league pickers."""
    seen: set[str] = set()
    options: list[LeagueOption] = []
    for f in fixtures:
        if f.league.name in seen:
            continue
        seen.add(f.league.name)
        options.append(
            LeagueOption(id=f.league.id, name=f.league.name, country=_league_country(f.league.name, f.league.country))
        )
    return sorted(options, key=lambda o: o.name)


def fixtures_for_league(fixtures: Iterable[Fixture], league_id: int | None = None) -> list[Fixture]:
    """Fixtures of one league (None = all), ordered by kickoff."""
    selected = [f for f in fixtures if league_id is None or f.league.id == league_id]
    return sorted(selected, key=lambda f: f.kickoff)


def news_snippets(news: Iterable[NewsItem], limit: int) -> list[str]:
    """Title-or-description text of the first `limit` items that carry any."""
    snippets = [item.snippet for item in news if item.snippet]
    return snippets[:max(limit, 0)]


def normalize_match_id(match_id: str | int) -> str:
    """Canonical text form of a fixture id: "007", " 7" and 7 all become "7"."""
    text = str(match_id).strip()
    if text.isascii() and text.isdigit():
        return str(int(text))
    return text


def _slot(result: Any, source: str, errors: dict[str, str]) -> list:
    """Degrade one settled fan-out branch to its item list, recording failures."""
    if isinstance(result, SourceResult):
        if not result.ok:
            errors[source] = result.error or "failed"
        return result.items
    errors[source] = repr(result)
    logger.error("%s branch raised: %r", source, result)
    return []


# ---------------------------------------------------------------------------
# Aggregator
# ---------------------------------------------------------------------------

class MatchAggregator:
    """Entry points for the match list and deep-dive views."""

    def __init__(
        self,
        config: Settings,
        fixtures_provider: FootballAPIProvider | None = None,
        odds_provider: OddsAPIProvider | None = None,
        news_provider: TavilyProvider | None = None,
        prediction_provider: GeminiPredictionProvider | None = None,
    ):
        self._allowed_leagues = list(config.ALLOWED_LEAGUES)
        self._snippet_limit = config.PREDICTION_NEWS_SNIPPETS
        self.fixtures_provider = fixtures_provider or FootballAPIProvider(config)
        self.odds_provider = odds_provider or OddsAPIProvider(config)
        self.news_provider = news_provider or TavilyProvider(config)
        self.prediction_provider = prediction_provider or GeminiPredictionProvider(config)

    async def aclose(self) -> None:
        await asyncio.gather(
            self.fixtures_provider.aclose(),
            self.odds_provider.aclose(),
            self.news_provider.aclose(),
            self.prediction_provider.aclose(),
            return_exceptions=True,
        )

    async def _fetch_fixtures_and_odds(self, day: date | None = None) -> MatchListData:
        """Concurrent fixtures + odds fetch with settle semantics; no filtering."""
        fixtures_result, odds_result = await asyncio.gather(
            self.fixtures_provider.fetch_fixtures_result(day),
            self.odds_provider.fetch_odds_result(),
            return_exceptions=True,
        )
        errors: dict[str, str] = {}
        fixtures = _slot(fixtures_result, self.fixtures_provider.name, errors)
        odds = _slot(odds_result, self.odds_provider.name, errors)
        return MatchListData(fixtures=fixtures, odds=odds, source_errors=errors)

    async def get_match_list(self, day: date | None = None) -> MatchListData:
        """Allow-listed fixtures plus the raw odds list. Matching is left to the consumer."""
        data = await self._fetch_fixtures_and_odds(day)
        fixtures = filter_allowed_leagues(data.fixtures, self._allowed_leagues)
        logger.info(
            "Match list: %d/%d fixtures in allowed leagues, %d odds records%s",
            len(fixtures),
            len(data.fixtures),
            len(data.odds),
            f", failed sources: {sorted(data.source_errors)}" if data.source_errors else "",
        )
        return MatchListData(fixtures=fixtures, odds=data.odds, source_errors=data.source_errors)

    async def get_deep_dive_news(self, home_team: str, away_team: str) -> list[NewsItem]:
        return await self.news_provider.search_match_context(home_team, away_team)

    async def generate_match_prediction(
        self,
        home_team: str,
        away_team: str,
        news: list[NewsItem] | None,
        odds: ThreeWayPrices | None = None,
    ) -> PredictionOutput | None:
        summary = OddsSummary(**odds.model_dump()) if odds is not None else None
        data = PredictionInput(
            home_team=home_team,
            away_team=away_team,
            odds=summary,
            recent_news=news_snippets(news or [], self._snippet_limit),
        )
        return await self.prediction_provider.generate_prediction(data)

    async def get_deep_dive_for_teams(
        self,
        home_team: str,
        away_team: str,
        odds: ThreeWayPrices | None = None,
        status: str | None = None,
    ) -> DeepDiveAnalysis:
        """News, then a prediction fed with that news. The two steps never overlap."""
        return await self._deep_dive(home_team, away_team, odds, finished=status_is_finished(status))

    async def _deep_dive(
        self,
        home_team: str,
        away_team: str,
        odds: ThreeWayPrices | None,
        finished: bool,
    ) -> DeepDiveAnalysis:
        news = await self.get_deep_dive_news(home_team, away_team)
        if finished:
            logger.info("Deep dive %s vs %s: match finished, no prediction", home_team, away_team)
            return DeepDiveAnalysis(news=news, prediction=None)
        prediction = await self.generate_match_prediction(home_team, away_team, news, odds)
        return DeepDiveAnalysis(news=news, prediction=prediction)

    @staticmethod
    def resolve_fixture(match_id: str | int, data: MatchListData) -> Fixture | None:
        wanted = normalize_match_id(match_id)
        return next((f for f in data.fixtures if str(f.id) == wanted), None)

    async def get_deep_dive_analysis(self, match_id: str | int, day: date | None = None) -> DeepDiveAnalysis:
        """Deep dive by fixture id. Re-fetches the day's fixtures (and odds) to resolve the teams.

        A match that has left the fixture list yields `{news: None, prediction: None}`.
        """
        data = await self._fetch_fixtures_and_odds(day)
        fixture = self.resolve_fixture(match_id, data)
        if fixture is None:
            logger.warning("Deep dive: match %s not in current fixture list", match_id)
            return DeepDiveAnalysis(news=None, prediction=None)

        prices = prices_for_fixture(fixture, build_odds_index(data.odds))
        return await self._deep_dive(
            fixture.home_name,
            fixture.away_name,
            prices,
            finished=fixture.is_finished,
        )

    async def get_favorites_with_data(
        self, match_ids: Iterable[str | int], day: date | None = None
    ) -> list[FavoriteMatch]:
        """Join favorite match ids with the current match list and reconciled odds."""
        wanted = {normalize_match_id(match_id) for match_id in match_ids}
        if not wanted:
            return []
        data = await self.get_match_list(day)
        index = build_odds_index(data.odds)
        return [
            FavoriteMatch(match_id=str(f.id), fixture=f, odds=odds_for_fixture(f, index))
            for f in data.fixtures
            if str(f.id) in wanted
        ]

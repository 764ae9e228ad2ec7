"""
backend/scorecast/routers/matches.py

Purpose:
    Read endpoints for the dashboard: today's match list, league picker,
    deep-dive analysis (by fixture id or by team names) and the favorites
    join. Every endpoint answers 200 with empty sections when sources fail.

Dependencies:
    - scorecast.services.aggregation_service
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from pydantic import BaseModel, Field

from scorecast.services.aggregation_service import (
    MatchAggregator,
    build_odds_index,
    fixtures_for_league,
    league_options,
    prices_for_fixture,
)

router = APIRouter(prefix="/api/matches", tags=["matches"])


def get_aggregator(request: Request) -> MatchAggregator:
    return request.app.state.aggregator


class FavoritesRequest(BaseModel):
    match_ids: list[str] = Field(default_factory=list)


@router.get("")
async def match_list(
    day: Optional[date] = Query(default=None, alias="date"),
    league_id: Optional[int] = None,
    aggregator: MatchAggregator = Depends(get_aggregator),
):
    data = await aggregator.get_match_list(day)
    index = build_odds_index(data.odds)
    fixtures = fixtures_for_league(data.fixtures, league_id)
    return {
        "fixtures": fixtures,
        "odds": data.odds,
        "prices": {str(f.id): prices_for_fixture(f, index) for f in fixtures},
        "source_errors": data.source_errors,
    }


@router.get("/leagues")
async def match_leagues(
    day: Optional[date] = Query(default=None, alias="date"),
    aggregator: MatchAggregator = Depends(get_aggregator),
):
    data = await aggregator.get_match_list(day)
    return {"items": league_options(data.fixtures)}


@router.get("/deep-dive")
async def deep_dive_for_teams(
    home: str = Query(min_length=1),
    away: str = Query(min_length=1),
    status: Optional[str] = None,
    aggregator: MatchAggregator = Depends(get_aggregator),
):
    return await aggregator.get_deep_dive_for_teams(home, away, status=status)


@router.get("/{match_id}/deep-dive")
async def deep_dive_by_id(
    match_id: str,
    aggregator: MatchAggregator = Depends(get_aggregator),
):
    return await aggregator.get_deep_dive_analysis(match_id)


@router.post("/favorites")
async def favorites_with_data(
    body: FavoritesRequest,
    aggregator: MatchAggregator = Depends(get_aggregator),
):
    return {"items": await aggregator.get_favorites_with_data(body.match_ids)}

"""
backend/scorecast/models/aggregation.py

Purpose:
    Response shapes of the two read views (match list, deep dive) and the
    derived league picker / favorites payloads.

Dependencies:
    - pydantic
    - scorecast.models.*
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from scorecast.models.fixtures import Fixture
from scorecast.models.news import NewsItem
from scorecast.models.odds import Odds
from scorecast.models.prediction import PredictionOutput


class MatchListData(BaseModel):
    fixtures: list[Fixture] = Field(default_factory=list)
    odds: list[Odds] = Field(default_factory=list)
    # source name -> failure reason; empty when every source answered
    source_errors: dict[str, str] = Field(default_factory=dict)


class DeepDiveAnalysis(BaseModel):
    news: list[NewsItem] | None = None
    prediction: PredictionOutput | None = None


class LeagueOption(BaseModel):
    id: int
    name: str
    country: str


class FavoriteMatch(BaseModel):
    match_id: str
    fixture: Fixture
    odds: Odds | None = None

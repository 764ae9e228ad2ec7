"""
backend/scorecast/models/odds.py

Purpose:
    Odds record model for the odds provider (event -> bookmakers -> markets
    -> outcomes) and the extracted three-way price triple.

Dependencies:
    - pydantic
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from scorecast.utils import parse_utc


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class Outcome(_Frozen):
    name: str
    price: float


class Market(_Frozen):
    key: str
    outcomes: list[Outcome]


class Bookmaker(_Frozen):
    key: str | None = None
    title: str | None = None
    markets: list[Market]


class Odds(_Frozen):
    id: str
    sport_key: str
    sport_title: str | None = None
    commence_time: str
    home_team: str
    away_team: str
    # Some providers omit bookmakers entirely: "no price", not an error.
    bookmakers: list[Bookmaker] | None = None

    @field_validator("commence_time")
    @classmethod
    def _iso_timestamp(cls, value: str) -> str:
        parse_utc(value)
        return value


class ThreeWayPrices(BaseModel):
    home: float | None = None
    draw: float | None = None
    away: float | None = None

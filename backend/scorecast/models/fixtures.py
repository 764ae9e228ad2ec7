"""
backend/scorecast/models/fixtures.py

Purpose:
    Fixture domain model mirroring the API-Football fixture record
    (`fixture`, `league`, `teams` blocks). Records are request-scoped and
    immutable once validated.

Dependencies:
    - pydantic
    - scorecast.utils.parse_utc
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from scorecast.utils import parse_utc

FINISHED_STATUS_MARKERS = ("Finished", "FT", "AET", "PEN")


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class FixtureStatus(_Frozen):
    long: str
    short: str | None = None
    elapsed: int | None = None


class FixtureInfo(_Frozen):
    id: int
    date: str
    status: FixtureStatus

    @field_validator("date")
    @classmethod
    def _iso_timestamp(cls, value: str) -> str:
        parse_utc(value)
        return value


class Team(_Frozen):
    id: int
    name: str
    logo: str | None = None


class League(_Frozen):
    id: int
    name: str
    country: str | None = None
    logo: str | None = None


class FixtureTeams(_Frozen):
    home: Team
    away: Team

    @model_validator(mode="after")
    def _distinct_sides(self) -> "FixtureTeams":
        if self.home.id == self.away.id:
            raise ValueError(f"home and away are the same team (id={self.home.id})")
        return self


class Fixture(_Frozen):
    fixture: FixtureInfo
    league: League
    teams: FixtureTeams

    @property
    def id(self) -> int:
        return self.fixture.id

    @property
    def home_name(self) -> str:
        return self.teams.home.name

    @property
    def away_name(self) -> str:
        return self.teams.away.name

    @property
    def kickoff(self) -> datetime:
        return parse_utc(self.fixture.date)

    @property
    def is_finished(self) -> bool:
        return status_is_finished(self.fixture.status.long, self.fixture.status.short)


def status_is_finished(*labels: str | None) -> bool:
    """True when any status label carries a full-time marker."""
    return any(
        marker in label
        for label in labels
        if label
        for marker in FINISHED_STATUS_MARKERS
    )

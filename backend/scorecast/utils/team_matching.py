"""
backend/scorecast/utils/team_matching.py

Purpose:
    The single team-name reconciliation rule used wherever fixtures are
    correlated with team-name strings from another provider (odds records,
    favorites joins).

Notes:
    - Matching is exact equality on a normalized key (case-folded, accents
      stripped, whitespace collapsed), tried for (home, away) and then for
      the swapped pair.
    - Structurally different spellings ("Man City" vs "Manchester City")
      do not match. That is an accepted false negative; substring
      containment would also pair distinct clubs such as "Real Madrid" and
      "Real Madrid Castilla".
"""

from __future__ import annotations

import re
import unicodedata
from typing import Iterable, Protocol, TypeVar

_SPACE_RE = re.compile(r"\s+")


class _NamedPair(Protocol):
    home_team: str
    away_team: str


T = TypeVar("T", bound=_NamedPair)


def normalize_team_name(name: str) -> str:
    """Lowercase, accent-free, single-spaced comparison form of a team name."""
    normalized = unicodedata.normalize("NFKD", name or "")
    normalized = "".join(ch for ch in normalized if not unicodedata.combining(ch))
    return _SPACE_RE.sub(" ", normalized.casefold()).strip()


def team_key(home: str, away: str) -> str:
    return f"{normalize_team_name(home)}__{normalize_team_name(away)}"


def teams_match(name_a: str, name_b: str) -> bool:
    """Return True when both names normalize to the same key."""
    key_a = normalize_team_name(name_a)
    return bool(key_a) and key_a == normalize_team_name(name_b)


def build_pair_index(records: Iterable[T]) -> dict[str, T]:
    """Index records by their (home, away) key. The first record per key wins."""
    index: dict[str, T] = {}
    for record in records:
        index.setdefault(team_key(record.home_team, record.away_team), record)
    return index


def lookup_pair(index: dict[str, T], home: str, away: str) -> T | None:
    """Find a record for (home, away), falling back to the swapped pair."""
    found = index.get(team_key(home, away))
    if found is None:
        found = index.get(team_key(away, home))
    return found

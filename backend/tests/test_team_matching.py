"""
backend/tests/test_team_matching.py

Purpose:
    Team-name reconciliation rule: normalized exact match with one swapped
    fallback, no fuzzy pairing of differently spelled names.
"""

from __future__ import annotations

from dataclasses import dataclass

from scorecast.utils.team_matching import (
    build_pair_index,
    lookup_pair,
    normalize_team_name,
    team_key,
    teams_match,
)


@dataclass
class _Pair:
    home_team: str
    away_team: str
    tag: str = ""


class TestNormalizeTeamName:
    def test_lowercases_and_trims(self):
        assert normalize_team_name("  Real Madrid ") == "real madrid"

    def test_strips_diacritics(self):
        assert normalize_team_name("Atlético Madrid") == "atletico madrid"
        assert normalize_team_name("Beşiktaş") == "besiktas"

    def test_collapses_whitespace(self):
        assert normalize_team_name("Manchester   City") == "manchester city"

    def test_empty(self):
        assert normalize_team_name("") == ""
        assert normalize_team_name(None) == ""


def test_team_key_joins_with_double_underscore():
    assert team_key("Real Madrid", "Barcelona") == "real madrid__barcelona"


def test_teams_match_is_exact_after_normalization():
    assert teams_match("REAL MADRID", "real madrid")
    assert teams_match("Atletico Madrid", "Atlético Madrid")
    assert not teams_match("Man City", "Manchester City")
    assert not teams_match("Real Madrid", "Real Madrid Castilla")
    assert not teams_match("", "")


def test_lookup_direct_pair():
    index = build_pair_index([_Pair("Real Madrid", "Barcelona", "a")])
    assert lookup_pair(index, "real madrid", "BARCELONA").tag == "a"


def test_lookup_falls_back_to_swapped_pair():
    index = build_pair_index([_Pair("Real Madrid", "Barcelona", "a")])
    assert lookup_pair(index, "Barcelona", "Real Madrid").tag == "a"


def test_lookup_prefers_direct_pair_over_swapped():
    index = build_pair_index([_Pair("Barcelona", "Real Madrid", "swapped"), _Pair("Real Madrid", "Barcelona", "direct")])
    assert lookup_pair(index, "Real Madrid", "Barcelona").tag == "direct"


def test_lookup_miss_returns_none():
    index = build_pair_index([_Pair("Manchester City", "Arsenal")])
    assert lookup_pair(index, "Man City", "Arsenal") is None


def test_first_record_per_key_wins():
    index = build_pair_index([_Pair("Inter", "Milan", "first"), _Pair("inter", "milan", "second")])
    assert lookup_pair(index, "Inter", "Milan").tag == "first"

"""Head-to-head price extraction from odds records."""

from __future__ import annotations

from scorecast.models.odds import Market, Odds, ThreeWayPrices
from scorecast.utils.team_matching import normalize_team_name

H2H_MARKET = "h2h"
_DRAW_NAMES = ("draw", "x", "tie")


def first_h2h_market(odds: Odds | None) -> Market | None:
    """The h2h market of the first bookmaker that offers one."""
    if odds is None:
        return None
    for bookmaker in odds.bookmakers or []:
        for market in bookmaker.markets:
            if market.key == H2H_MARKET:
                return market
    return None


def best_three_way_prices(odds: Odds | None) -> ThreeWayPrices | None:
    """Home/draw/away prices keyed by the odds record's own team names.

    Returns None when no price at all is available (absent bookmakers
    included).
    """
    market = first_h2h_market(odds)
    if odds is None or market is None:
        return None

    by_name: dict[str, float] = {}
    for outcome in market.outcomes:
        by_name.setdefault(normalize_team_name(outcome.name), outcome.price)

    home = by_name.get(normalize_team_name(odds.home_team))
    away = by_name.get(normalize_team_name(odds.away_team))
    draw = next((by_name[name] for name in _DRAW_NAMES if name in by_name), None)

    if home is None and draw is None and away is None:
        return None
    return ThreeWayPrices(home=home, draw=draw, away=away)

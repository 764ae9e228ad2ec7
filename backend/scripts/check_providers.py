"""
backend/scripts/check_providers.py

Purpose:
    Manual smoke check against the live providers: today's fixtures, the
    odds feed, match-context news and one AI prediction. Uses the keys from
    the regular settings/.env.

Usage:
    cd backend && python -m scripts.check_providers
    cd backend && python -m scripts.check_providers --home "Arsenal" --away "Chelsea"
"""

from __future__ import annotations

import argparse
import asyncio
import logging

from scorecast.config import settings
from scorecast.middleware.logging import setup_logging
from scorecast.models.odds import ThreeWayPrices
from scorecast.services.aggregation_service import MatchAggregator


async def _run(home: str, away: str) -> int:
    aggregator = MatchAggregator(settings)
    failures = 0
    try:
        print("[1/4] Fixtures")
        fixtures = await aggregator.fixtures_provider.fetch_fixtures()
        if fixtures:
            first = fixtures[0]
            print(f"  OK: {len(fixtures)} fixtures today, first: {first.home_name} vs {first.away_name}")
        else:
            failures += 1
            print("  EMPTY: no fixtures today or FOOTBALL_API_KEY problem")

        print(f"[2/4] Odds ({aggregator.odds_provider.sport_key})")
        odds = await aggregator.odds_provider.fetch_odds()
        if odds:
            print(f"  OK: {len(odds)} events, first: {odds[0].home_team} vs {odds[0].away_team}")
        else:
            failures += 1
            print("  EMPTY: no events or ODDS_API_KEY problem")

        print(f"[3/4] News context for {home} vs {away}")
        news = await aggregator.get_deep_dive_news(home, away)
        if news:
            print(f"  OK: {len(news)} items, first: {news[0].title}")
        else:
            failures += 1
            print("  EMPTY: no news or TAVILY_API_KEY problem")

        print("[4/4] Prediction")
        prediction = await aggregator.generate_match_prediction(
            home, away, news, odds=ThreeWayPrices(home=2.1, draw=3.5, away=3.2)
        )
        if prediction:
            score = prediction.predicted_score
            print(f"  OK: winner={prediction.winner} score={score.home}-{score.away} confidence={prediction.confidence}")
            print(f"  reasoning: {prediction.reasoning}")
            if prediction.warnings:
                print(f"  warnings: {', '.join(prediction.warnings)}")
        else:
            failures += 1
            print("  FAILED: no prediction, check GOOGLE_API_KEY")
    finally:
        await aggregator.aclose()

    print({"ok": failures == 0, "failed_checks": failures})
    return 0 if failures == 0 else 1


def main() -> int:
    parser = argparse.ArgumentParser(description="Smoke check the live data providers.")
    parser.add_argument("--home", default="Real Madrid")
    parser.add_argument("--away", default="Barcelona")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()
    setup_logging(logging.INFO if args.verbose else logging.WARNING)
    return asyncio.run(_run(args.home, args.away))


if __name__ == "__main__":
    raise SystemExit(main())

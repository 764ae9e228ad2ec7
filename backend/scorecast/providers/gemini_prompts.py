from scorecast.models.prediction import PredictionInput


def _fmt_price(value: float | None) -> str:
    return "n/a" if value is None else f"{value:g}"


def build_prediction_prompt(data: PredictionInput) -> str:
    """Prompt asking for winner, approximate score, confidence, reasoning and risk warnings."""
    if data.odds is not None:
        odds_line = (
            f"Betting odds: home win {_fmt_price(data.odds.home)}, "
            f"draw {_fmt_price(data.odds.draw)}, away win {_fmt_price(data.odds.away)}."
        )
    else:
        odds_line = "No betting odds available."

    if data.recent_news:
        news_block = "\n".join(f"  [{i}] {item}" for i, item in enumerate(data.recent_news, start=1))
    else:
        news_block = "  (no news available)"

    return "\n".join([
        "You are an expert football analyst with deep knowledge of team form, tactics, and player availability.",
        "",
        f"Match: {data.home_team} (home) vs {data.away_team} (away)",
        odds_line,
        "",
        "Context (news, injuries, suspensions, lineups):",
        news_block,
        "",
        "Based on all available information, produce a structured JSON prediction with:",
        '- winner: the predicted winner\'s name exactly as provided, or the string "Draw"',
        "- predictedScore: your best approximate final score as integers (home goals, away goals)",
        "- confidence: your overall confidence level (low | medium | high)",
        "- reasoning: 2-3 sentences explaining your prediction",
        "- warnings: list of notable risk factors e.g. key injuries, suspensions (empty array if none)",
    ])

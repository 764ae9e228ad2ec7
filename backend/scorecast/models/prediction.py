"""
backend/scorecast/models/prediction.py

Purpose:
    Input and structured output contracts for AI match predictions. The
    output model is the validation gate for model-generated JSON: anything
    that does not fit is rejected by the generator.

Dependencies:
    - pydantic
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Confidence = Literal["low", "medium", "high"]


class PredictedScore(BaseModel):
    home: int = Field(ge=0)
    away: int = Field(ge=0)


class PredictionOutput(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    winner: str = Field(min_length=1)
    predicted_score: PredictedScore = Field(alias="predictedScore")
    confidence: Confidence
    reasoning: str = Field(min_length=1)
    warnings: list[str]


class OddsSummary(BaseModel):
    home: float | None = None
    draw: float | None = None
    away: float | None = None


class PredictionInput(BaseModel):
    home_team: str
    away_team: str
    odds: OddsSummary | None = None
    recent_news: list[str] | None = None


# Gemini responseSchema (OpenAPI subset) for PredictionOutput.
PREDICTION_RESPONSE_SCHEMA: dict = {
    "type": "OBJECT",
    "properties": {
        "winner": {"type": "STRING"},
        "predictedScore": {
            "type": "OBJECT",
            "properties": {
                "home": {"type": "INTEGER"},
                "away": {"type": "INTEGER"},
            },
            "required": ["home", "away"],
        },
        "confidence": {"type": "STRING", "enum": ["low", "medium", "high"]},
        "reasoning": {"type": "STRING"},
        "warnings": {"type": "ARRAY", "items": {"type": "STRING"}},
    },
    "required": ["winner", "predictedScore", "confidence", "reasoning", "warnings"],
}

"""
backend/scorecast/providers/gemini.py

Purpose:
    Prediction generator backed by the Gemini generateContent REST API in
    JSON mode. The model's text is parsed and validated against
    PredictionOutput here; the provider's schema constraint is not trusted.

Dependencies:
    - scorecast.providers.base
    - scorecast.providers.gemini_prompts
    - scorecast.models.prediction
"""

from __future__ import annotations

import json
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from scorecast.config import Settings
from scorecast.errors import GenerationError, ShapeError
from scorecast.models.prediction import (
    PREDICTION_RESPONSE_SCHEMA,
    PredictionInput,
    PredictionOutput,
)
from scorecast.providers.base import BaseProvider, SourceResult, parse_json
from scorecast.providers.gemini_prompts import build_prediction_prompt


def extract_text_and_reason(response: dict) -> tuple[str, Optional[str]]:
    """Extract text and finishReason from a generateContent response."""
    candidates = response.get("candidates") or []
    if not candidates:
        return "", None

    candidate = candidates[0]
    finish_reason = candidate.get("finishReason")
    parts = (candidate.get("content") or {}).get("parts") or []
    if not parts:
        return "", finish_reason
    return parts[0].get("text", ""), finish_reason


def parse_prediction(source: str, text: str) -> PredictionOutput:
    try:
        raw: Any = json.loads(text)
    except ValueError as exc:
        raise GenerationError(source, f"model output is not JSON: {exc}") from exc
    try:
        return PredictionOutput.model_validate(raw)
    except ValidationError as exc:
        raise ShapeError(source, f"prediction failed validation: {exc.error_count()} error(s)") from exc


class GeminiPredictionProvider(BaseProvider):
    """Single-attempt structured prediction call."""

    name = "gemini"

    def __init__(self, config: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        super().__init__(config.GOOGLE_API_KEY, config.GEMINI_TIMEOUT_SECONDS, transport)
        self._base_url = config.GEMINI_BASE_URL.rstrip("/")
        self._model = config.GEMINI_MODEL
        self._temperature = config.GEMINI_TEMPERATURE

    async def _generate(self, data: PredictionInput) -> list[PredictionOutput]:
        api_key = self._require_key("GOOGLE_API_KEY")
        payload = {
            "contents": [{"parts": [{"text": build_prediction_prompt(data)}]}],
            "generationConfig": {
                "temperature": self._temperature,
                "responseMimeType": "application/json",
                "responseSchema": PREDICTION_RESPONSE_SCHEMA,
            },
        }
        resp = await self._client.post(
            f"{self._base_url}/{self._model}:generateContent",
            json=payload,
            headers={"x-goog-api-key": api_key},
        )
        body = parse_json(self.name, resp)
        if not isinstance(body, dict):
            raise ShapeError(self.name, "expected a JSON object body")

        text, finish_reason = extract_text_and_reason(body)
        if not text.strip():
            raise GenerationError(self.name, f"empty model output (finishReason={finish_reason})")
        if finish_reason and finish_reason != "STOP":
            self._logger.warning("Gemini finishReason=%s for %s vs %s", finish_reason, data.home_team, data.away_team)

        prediction = parse_prediction(self.name, text)
        self._logger.info(
            "Gemini prediction %s vs %s: %s (%s)",
            data.home_team,
            data.away_team,
            prediction.winner,
            prediction.confidence,
        )
        return [prediction]

    async def generate_prediction_result(self, data: PredictionInput) -> SourceResult[PredictionOutput]:
        return await self._settle(lambda: self._generate(data))

    async def generate_prediction(self, data: PredictionInput) -> PredictionOutput | None:
        """Structured prediction, or None when no prediction is available."""
        result = await self.generate_prediction_result(data)
        return result.items[0] if result.ok and result.items else None

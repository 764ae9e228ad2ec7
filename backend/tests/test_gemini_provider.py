"""
backend/tests/test_gemini_provider.py

Purpose:
    Prediction generator: JSON-mode request, prompt content, validation of
    the model's JSON, and None for every failure.
"""

from __future__ import annotations

import json

import httpx
import pytest

from scorecast.models.prediction import OddsSummary, PredictionInput
from scorecast.providers.gemini import GeminiPredictionProvider, extract_text_and_reason
from scorecast.providers.gemini_prompts import build_prediction_prompt

VALID = {
    "winner": "Draw",
    "predictedScore": {"home": 1, "away": 1},
    "confidence": "medium",
    "reasoning": "x",
    "warnings": [],
}


def _gemini_body(text: str, finish_reason: str = "STOP") -> dict:
    return {
        "candidates": [{"content": {"parts": [{"text": text}], "role": "model"}, "finishReason": finish_reason}],
        "usageMetadata": {"promptTokenCount": 120, "candidatesTokenCount": 40},
    }


def _provider(make_settings, handler, **overrides) -> GeminiPredictionProvider:
    return GeminiPredictionProvider(make_settings(**overrides), transport=httpx.MockTransport(handler))


def _input(**kwargs) -> PredictionInput:
    return PredictionInput(home_team="Real Madrid", away_team="Barcelona", **kwargs)


@pytest.mark.asyncio
async def test_valid_response_is_parsed(make_settings):
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json=_gemini_body(json.dumps(VALID)))

    provider = _provider(make_settings, handler, GEMINI_MODEL="gemini-test")
    prediction = await provider.generate_prediction(_input())

    assert prediction is not None
    assert prediction.winner == "Draw"
    assert prediction.warnings == []
    assert prediction.predicted_score.home == 1
    assert requests[0].url.path == "/v1beta/models/gemini-test:generateContent"
    assert requests[0].headers["x-goog-api-key"] == "google-test-key"
    config = json.loads(requests[0].content)["generationConfig"]
    assert config["responseMimeType"] == "application/json"
    assert config["responseSchema"]["properties"]["confidence"]["enum"] == ["low", "medium", "high"]


@pytest.mark.asyncio
async def test_missing_fields_returns_none(make_settings):
    provider = _provider(make_settings, lambda r: httpx.Response(200, json=_gemini_body('{"winner":"Draw"}')))

    assert await provider.generate_prediction(_input()) is None


@pytest.mark.asyncio
async def test_out_of_range_values_return_none(make_settings):
    bad_confidence = {**VALID, "confidence": "certain"}
    negative_score = {**VALID, "predictedScore": {"home": -1, "away": 0}}

    for payload in (bad_confidence, negative_score):
        provider = _provider(make_settings, lambda r, p=payload: httpx.Response(200, json=_gemini_body(json.dumps(p))))
        assert await provider.generate_prediction(_input()) is None


@pytest.mark.asyncio
async def test_blank_winner_or_reasoning_returns_none(make_settings):
    blank_winner = {**VALID, "winner": ""}
    blank_reasoning = {**VALID, "reasoning": ""}

    for payload in (blank_winner, blank_reasoning):
        provider = _provider(make_settings, lambda r, p=payload: httpx.Response(200, json=_gemini_body(json.dumps(p))))
        result = await provider.generate_prediction_result(_input())
        assert result.error_kind == "shape"
        assert await provider.generate_prediction(_input()) is None


@pytest.mark.asyncio
async def test_non_json_text_returns_none(make_settings):
    provider = _provider(make_settings, lambda r: httpx.Response(200, json=_gemini_body("Real Madrid will win 2-1")))

    result = await provider.generate_prediction_result(_input())

    assert result.ok is False
    assert result.error_kind == "generation"


@pytest.mark.asyncio
async def test_refusal_without_parts_returns_none(make_settings):
    body = {"candidates": [{"finishReason": "SAFETY"}]}
    provider = _provider(make_settings, lambda r: httpx.Response(200, json=body))

    assert await provider.generate_prediction(_input()) is None


@pytest.mark.asyncio
async def test_http_error_returns_none(make_settings):
    provider = _provider(make_settings, lambda r: httpx.Response(429, json={"error": {"code": 429}}))

    assert await provider.generate_prediction(_input()) is None


@pytest.mark.asyncio
async def test_missing_credential_returns_none_without_request(make_settings):
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json=_gemini_body(json.dumps(VALID)))

    provider = _provider(make_settings, handler, GOOGLE_API_KEY="")

    assert await provider.generate_prediction(_input()) is None
    assert calls == []


def test_extract_text_and_reason_handles_empty_candidates():
    assert extract_text_and_reason({}) == ("", None)
    assert extract_text_and_reason({"candidates": [{"finishReason": "MAX_TOKENS", "content": {}}]}) == ("", "MAX_TOKENS")


class TestPredictionPrompt:
    def test_includes_teams_odds_and_numbered_news(self):
        prompt = build_prediction_prompt(
            _input(
                odds=OddsSummary(home=2.1, draw=3.5, away=3.2),
                recent_news=["Vinicius doubtful", "Pedri back in training"],
            )
        )

        assert "Match: Real Madrid (home) vs Barcelona (away)" in prompt
        assert "home win 2.1, draw 3.5, away win 3.2" in prompt
        assert "  [1] Vinicius doubtful" in prompt
        assert "  [2] Pedri back in training" in prompt

    def test_explicit_lines_when_odds_and_news_missing(self):
        prompt = build_prediction_prompt(_input(recent_news=[]))

        assert "No betting odds available." in prompt
        assert "(no news available)" in prompt

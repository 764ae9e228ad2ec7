"""
backend/scorecast/providers/base.py

Purpose:
    Shared adapter plumbing: the tagged SourceResult returned at every
    adapter boundary, credential checks, and all-or-nothing record
    validation.

Dependencies:
    - pydantic
    - scorecast.errors
    - scorecast.providers.http_client
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Generic, Optional, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from scorecast.errors import ConfigurationError, ProviderError, ShapeError
from scorecast.providers.http_client import ProviderClient

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


@dataclass
class SourceResult(Generic[T]):
    """Outcome of one source call: success with items, or failure with a reason."""

    source: str
    ok: bool
    items: list[T] = field(default_factory=list)
    error: str | None = None
    error_kind: str | None = None

    @classmethod
    def success(cls, source: str, items: list[T]) -> "SourceResult[T]":
        return cls(source=source, ok=True, items=list(items))

    @classmethod
    def failure(cls, source: str, exc: BaseException) -> "SourceResult[T]":
        kind = exc.kind if isinstance(exc, ProviderError) else "unexpected"
        reason = exc.message if isinstance(exc, ProviderError) else repr(exc)
        return cls(source=source, ok=False, error=reason, error_kind=kind)


class BaseProvider:
    """Common constructor and failure funnel for external data sources."""

    name: str = "provider"

    def __init__(
        self,
        api_key: str,
        timeout: float,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._api_key = (api_key or "").strip()
        self._client = ProviderClient(self.name, timeout=timeout, transport=transport)
        self._logger = logging.getLogger(f"scorecast.{self.name}")

    def _require_key(self, setting_name: str) -> str:
        if not self._api_key:
            raise ConfigurationError(self.name, f"{setting_name} is not set")
        return self._api_key

    async def _settle(
        self, call: Callable[[], Awaitable[list[T]]], label: str | None = None
    ) -> SourceResult[T]:
        """Run a fetch and fold every failure into a SourceResult, logging it once."""
        source = label or self.name
        try:
            items = await call()
        except ProviderError as exc:
            self._logger.error("%s failed (%s): %s", source, exc.kind, exc.message)
            return SourceResult.failure(source, exc)
        except Exception as exc:
            self._logger.exception("%s failed unexpectedly", source)
            return SourceResult.failure(source, exc)
        return SourceResult.success(source, items)

    async def aclose(self) -> None:
        await self._client.aclose()


def parse_json(source: str, resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError as exc:
        raise ShapeError(source, f"response is not JSON: {exc}") from exc


def validate_records(source: str, model: type[M], raw: Any) -> list[M]:
    """Validate a record array as a whole. One bad record rejects the batch."""
    if not isinstance(raw, list):
        raise ShapeError(source, f"expected a record array, got {type(raw).__name__}")
    try:
        return TypeAdapter(list[model]).validate_python(raw)
    except ValidationError as exc:
        first = exc.errors()[0] if exc.errors() else {}
        location = ".".join(str(part) for part in first.get("loc", ()))
        raise ShapeError(
            source, f"{exc.error_count()} invalid field(s), first at {location}: {first.get('msg')}"
        ) from exc

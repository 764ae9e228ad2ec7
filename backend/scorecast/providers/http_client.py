import asyncio
import logging
from typing import Any, Optional
from urllib.parse import urlparse

import httpx

from scorecast.errors import TransportError

logger = logging.getLogger("scorecast.http_client")


def _safe_url(url: str) -> str:
    """Strip query params (may contain API keys) for safe logging."""
    parsed = urlparse(str(url))
    return f"{parsed.scheme}://{parsed.netloc}{parsed.path}"


class ProviderClient:
    """httpx.AsyncClient wrapper: one attempt per call, explicit timeout, typed failures.

    Network errors, timeouts and non-2xx statuses all surface as TransportError
    so adapters handle a single failure type.
    """

    def __init__(
        self,
        name: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)
        self._name = name
        # httpx limits each phase (connect, read, ...); this bounds the whole call.
        self._deadline = timeout

    @property
    def name(self) -> str:
        return self._name

    async def request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            resp = await asyncio.wait_for(
                self._client.request(method, url, **kwargs), timeout=self._deadline
            )
        except (httpx.TimeoutException, asyncio.TimeoutError) as exc:
            logger.warning("[%s] Timeout on %s %s", self._name, method, _safe_url(url))
            raise TransportError(self._name, f"timeout: {exc!r}") from exc
        except httpx.HTTPError as exc:
            logger.warning(
                "[%s] Network error on %s %s: %s", self._name, method, _safe_url(url), exc
            )
            raise TransportError(self._name, f"network error: {exc}") from exc

        if resp.is_success:
            return resp

        logger.warning(
            "[%s] HTTP %d on %s %s", self._name, resp.status_code, method, _safe_url(url)
        )
        raise TransportError(
            self._name, f"HTTP {resp.status_code}", status_code=resp.status_code
        )

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("POST", url, **kwargs)

    async def aclose(self) -> None:
        await self._client.aclose()

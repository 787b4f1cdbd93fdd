from __future__ import annotations

import logging
from typing import Any

import httpx

from .exceptions import UpstreamError

logger = logging.getLogger(__name__)


class RecipeApiClient:
    """Shared GET-and-decode plumbing for the JSON recipe APIs."""

    def __init__(
        self,
        base_url: str,
        timeout: float,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport

    async def _get_json(self, endpoint: str, params: dict[str, str] | None = None) -> dict[str, Any]:
        logger.debug("GET %s/%s params=%s", self.base_url, endpoint, params)
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.get(endpoint, params=params)
                response.raise_for_status()
                payload = response.json()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise UpstreamError(endpoint, str(exc) or type(exc).__name__) from exc
        except ValueError as exc:
            raise UpstreamError(endpoint, "response is not valid JSON") from exc

        if not isinstance(payload, dict):
            raise UpstreamError(endpoint, "unexpected response shape")
        return payload


def records(payload: dict[str, Any], key: str) -> list[dict[str, Any]]:
    """Return the record list under ``key``; ``null`` or "None Found" mean no records."""
    items = payload.get(key)
    if not isinstance(items, list):
        return []
    return [item for item in items if isinstance(item, dict)]

from __future__ import annotations

from typing import Any

import httpx

from ..pairing.models import PairingRule
from .base import RecipeApiClient, records
from .config import DEFAULT_API_CONFIG, ApiConfig


class MealDBClient(RecipeApiClient):
    """Async client for TheMealDB filter endpoint."""

    def __init__(
        self,
        config: ApiConfig = DEFAULT_API_CONFIG,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(config.meal_base_url, config.timeout, transport)

    async def filter_by_area(self, area: str) -> list[dict[str, Any]]:
        payload = await self._get_json("filter.php", {"a": area})
        return records(payload, "meals")

    async def filter_by_category(self, category: str) -> list[dict[str, Any]]:
        payload = await self._get_json("filter.php", {"c": category})
        return records(payload, "meals")

    async def filter_by_rule(self, rule: PairingRule) -> list[dict[str, Any]]:
        if rule.kind == "area":
            return await self.filter_by_area(rule.value)
        return await self.filter_by_category(rule.value)

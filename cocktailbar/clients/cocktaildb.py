from __future__ import annotations

from typing import Any

import httpx

from .base import RecipeApiClient, records
from .config import DEFAULT_API_CONFIG, ApiConfig


class CocktailDBClient(RecipeApiClient):
    """Async client for TheCocktailDB."""

    def __init__(
        self,
        config: ApiConfig = DEFAULT_API_CONFIG,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(config.cocktail_base_url, config.timeout, transport)

    async def list_categories(self) -> list[str]:
        payload = await self._get_json("list.php", {"c": "list"})
        return [d["strCategory"] for d in records(payload, "drinks") if d.get("strCategory")]

    async def search_by_name(self, name: str) -> list[dict[str, Any]]:
        payload = await self._get_json("search.php", {"s": name})
        return records(payload, "drinks")

    async def filter_by_ingredient(self, ingredient: str) -> list[dict[str, Any]]:
        payload = await self._get_json("filter.php", {"i": ingredient})
        return records(payload, "drinks")

    async def filter_by_category(self, category: str) -> list[dict[str, Any]]:
        payload = await self._get_json("filter.php", {"c": category})
        return records(payload, "drinks")

    async def random_drink(self) -> dict[str, Any] | None:
        drinks = records(await self._get_json("random.php"), "drinks")
        return drinks[0] if drinks else None

    async def lookup_drink(self, drink_id: str) -> dict[str, Any] | None:
        drinks = records(await self._get_json("lookup.php", {"i": drink_id}), "drinks")
        return drinks[0] if drinks else None

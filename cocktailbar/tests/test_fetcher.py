from __future__ import annotations

import random
from unittest.mock import AsyncMock, MagicMock

import pytest

from cocktailbar.clients.exceptions import UpstreamError
from cocktailbar.clients.mealdb import MealDBClient
from cocktailbar.pairing.fetcher import fetch_meals_for_rule
from cocktailbar.pairing.models import PairingRule
from cocktailbar.pairing.rules import DEFAULT_PAIRINGS

MEXICAN = PairingRule(kind="area", value="Mexican")


def _meals(n: int, prefix: str = "Meal") -> list[dict]:
    return [{"idMeal": str(52700 + i), "strMeal": f"{prefix} {i}"} for i in range(n)]


def _client(side_effect=None, return_value=None) -> AsyncMock:
    client = AsyncMock(spec=MealDBClient)
    if side_effect is not None:
        client.filter_by_rule.side_effect = side_effect
    else:
        client.filter_by_rule.return_value = return_value
    return client


def _called_rules(client: AsyncMock) -> list[PairingRule]:
    return [c.args[0] for c in client.filter_by_rule.await_args_list]


@pytest.mark.asyncio
async def test_primary_results_truncated_to_first_six():
    meals = _meals(10)
    client = _client(return_value=meals)

    result = await fetch_meals_for_rule(MEXICAN, client, random.Random(0))

    assert result == meals[:6]
    client.filter_by_rule.assert_awaited_once_with(MEXICAN)


@pytest.mark.asyncio
async def test_primary_with_few_results_returned_as_is():
    meals = _meals(2)
    result = await fetch_meals_for_rule(MEXICAN, _client(return_value=meals), random.Random(0))
    assert result == meals


@pytest.mark.asyncio
async def test_primary_error_and_empty_fallbacks_give_empty_list():
    def lookup(rule):
        if rule == MEXICAN:
            raise UpstreamError("filter.php", "connection refused")
        return []

    client = _client(side_effect=lookup)
    result = await fetch_meals_for_rule(MEXICAN, client, random.Random(0))

    assert result == []
    assert client.filter_by_rule.await_count == 1 + len(DEFAULT_PAIRINGS)


@pytest.mark.asyncio
async def test_every_lookup_raising_gives_empty_list():
    client = _client(side_effect=RuntimeError("boom"))
    assert await fetch_meals_for_rule(MEXICAN, client, random.Random(0)) == []


@pytest.mark.asyncio
async def test_fallbacks_tried_in_shuffled_order_until_first_success():
    expected_order = list(DEFAULT_PAIRINGS)
    random.Random(3).shuffle(expected_order)
    winner = expected_order[2]
    winner_meals = _meals(8, prefix="Fallback")

    client = _client(side_effect=lambda rule: winner_meals if rule == winner else [])
    result = await fetch_meals_for_rule(MEXICAN, client, random.Random(3))

    assert result == winner_meals[:6]
    assert _called_rules(client) == [MEXICAN, *expected_order[:3]]


@pytest.mark.asyncio
async def test_failing_fallback_is_skipped():
    rng = MagicMock()
    rng.shuffle = lambda rules: None  # keep declaration order
    italian, thai = DEFAULT_PAIRINGS[0], DEFAULT_PAIRINGS[1]

    def lookup(rule):
        if rule == italian:
            raise UpstreamError("filter.php", "503 Service Unavailable")
        if rule == thai:
            return _meals(1, prefix="Thai")
        return []

    client = _client(side_effect=lookup)
    result = await fetch_meals_for_rule(MEXICAN, client, rng)

    assert result == _meals(1, prefix="Thai")
    assert _called_rules(client) == [MEXICAN, italian, thai]


@pytest.mark.asyncio
async def test_custom_fallback_pool():
    pool = [PairingRule(kind="category", value="Breakfast")]
    client = _client(side_effect=lambda rule: _meals(3) if rule in pool else [])

    result = await fetch_meals_for_rule(MEXICAN, client, random.Random(0), fallbacks=pool)

    assert result == _meals(3)
    assert _called_rules(client) == [MEXICAN, pool[0]]


from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from ..clients.mealdb import MealDBClient
from .models import PairingRule
from .randomness import RandomSource, get_random_source
from .rules import DEFAULT_PAIRINGS, MEAL_LIMIT

logger = logging.getLogger(__name__)


async def _try_rule(client: MealDBClient, rule: PairingRule) -> list[dict[str, Any]]:
    """Look up meals for one rule; failures count as no meals."""
    try:
        meals = await client.filter_by_rule(rule)
    except Exception:
        logger.warning("Meal pairing fetch failed for %s/%s", rule.kind, rule.value, exc_info=True)
        return []
    return meals[:MEAL_LIMIT]


async def fetch_meals_for_rule(
    rule: PairingRule,
    client: MealDBClient,
    rng: RandomSource | None = None,
    fallbacks: Sequence[PairingRule] = DEFAULT_PAIRINGS,
) -> list[dict[str, Any]]:
    """
    Fetch up to ``MEAL_LIMIT`` meals for a pairing rule.

    If the rule's lookup fails or comes back empty, the fallback rules are
    tried one at a time in shuffled order until one yields meals.
    Returns an empty list when nothing does; never raises.
    """
    meals = await _try_rule(client, rule)
    if meals:
        return meals

    rng = rng or get_random_source()
    shuffled = list(fallbacks)
    rng.shuffle(shuffled)

    for fallback in shuffled:
        meals = await _try_rule(client, fallback)
        if meals:
            logger.info(
                "Using fallback pairing %s/%s after %s/%s found nothing",
                fallback.kind, fallback.value, rule.kind, rule.value,
            )
            return meals

    logger.info("No meal pairing found for %s/%s or any fallback", rule.kind, rule.value)
    return []

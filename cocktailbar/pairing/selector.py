from __future__ import annotations

import logging
from collections.abc import Iterable

from ..drinks.models import Ingredient
from .models import PairingRule
from .randomness import RandomSource, get_random_source
from .rules import DEFAULT_PAIRINGS, FILLERS, PAIRING_CANDIDATES

logger = logging.getLogger(__name__)


def extract_pairing_keys(ingredients: Iterable[Ingredient]) -> list[str]:
    """Lowercased ingredient names with blanks and fillers removed."""
    keys: list[str] = []
    for ingredient in ingredients:
        key = (ingredient.name or "").lower().strip()
        if key and key not in FILLERS:
            keys.append(key)
    return keys


def pick_pairing_rule(
    ingredients: Iterable[Ingredient],
    rng: RandomSource | None = None,
) -> PairingRule:
    """
    Choose a food pairing rule for a cocktail.

    The first candidate group (in declaration order) sharing a key with the
    cocktail's non-filler ingredients supplies the options; one is picked at
    random. With no match, a random default pairing is returned.
    """
    rng = rng or get_random_source()
    keys = set(extract_pairing_keys(ingredients))

    for group in PAIRING_CANDIDATES:
        if group.match_keys & keys:
            rule = rng.choice(group.options)
            logger.info("Pairing %s/%s chosen for keys %s", rule.kind, rule.value, sorted(keys))
            return rule

    rule = rng.choice(DEFAULT_PAIRINGS)
    logger.info("No pairing match for keys %s, using default %s/%s", sorted(keys), rule.kind, rule.value)
    return rule

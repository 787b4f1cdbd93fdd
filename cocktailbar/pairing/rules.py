from __future__ import annotations

from .models import PairingGroup, PairingRule

MEAL_LIMIT = 6


def _area(value: str) -> PairingRule:
    return PairingRule(kind="area", value=value)


def _category(value: str) -> PairingRule:
    return PairingRule(kind="category", value=value)


def _group(keys: list[str], *options: PairingRule) -> PairingGroup:
    return PairingGroup(match_keys=frozenset(keys), options=options)


# Mixers and garnishes that say nothing about the base spirit
FILLERS: frozenset[str] = frozenset({
    "ice", "salt", "sugar", "water", "soda water", "club soda", "tonic water", "ginger ale",
    "lemon juice", "lime juice", "orange juice", "cranberry juice", "pineapple juice",
    "simple syrup", "syrup", "grenadine", "angostura bitters", "bitters",
    "mint", "basil", "rosemary", "egg white", "cream", "milk", "half-and-half",
})

# Scanned in order; the first group with a matching key wins.
PAIRING_CANDIDATES: tuple[PairingGroup, ...] = (
    _group(["tequila", "mezcal"], _area("Mexican"), _category("Pork"), _category("Seafood")),
    _group(["rum"], _area("Jamaican"), _area("Cuban"), _category("Dessert")),
    _group(["gin"], _category("Seafood"), _category("Vegetarian"), _area("British")),
    _group(["vodka"], _category("Pasta"), _area("Russian"), _category("Chicken")),
    _group(
        ["whiskey", "whisky", "bourbon", "rye", "scotch"],
        _category("Beef"), _category("Pork"), _area("American"),
    ),
    _group(["brandy", "cognac"], _category("Lamb"), _category("Beef"), _area("French")),
    # Aperitifs and bitter liqueurs
    _group(["campari", "aperol", "vermouth"], _category("Seafood"), _category("Pasta"), _area("Italian")),
    # Orange and nut liqueurs
    _group(
        ["triple sec", "cointreau", "grand marnier", "curaçao", "curacao", "amaretto"],
        _category("Dessert"), _category("Cake"), _category("Pancake"),
    ),
    _group(["sotol"], _area("Mexican"), _category("Beef")),
    _group(["cachaça", "cacacha", "aguardiente"], _area("Brazilian"), _category("Beef")),
    # Anise spirits
    _group(["ouzo", "pastis", "arak", "raki", "sambuca"], _area("Greek"), _category("Seafood")),
    # Rice spirits
    _group(["sake", "soju", "shochu"], _area("Japanese"), _category("Seafood")),
)

# Used both when nothing matches and as the lookup fallback pool
DEFAULT_PAIRINGS: tuple[PairingRule, ...] = (
    _area("Italian"),
    _area("Thai"),
    _area("Indian"),
    _category("Seafood"),
    _category("Vegetarian"),
    _category("Chicken"),
)

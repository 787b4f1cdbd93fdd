"""
Cocktail to food pairing.

Responsibilities:
- Map a cocktail's ingredients to a cuisine area or dish category rule.
- Pick among matching rules at random for variety.
- Fetch dishes for the rule from TheMealDB, falling back through the
  default rules in shuffled order when a lookup fails or is empty.
"""

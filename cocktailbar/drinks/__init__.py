"""
Drink record handling.

Responsibilities:
- Flatten TheCocktailDB's numbered ``strIngredientN`` / ``strMeasureN``
  fields into an ordered list of ingredient records.
"""

"""
Cocktail browser with food pairings.

Responsibilities:
- Serve server-rendered pages for searching and browsing TheCocktailDB.
- Suggest dishes from TheMealDB that pair with each cocktail.
"""

"""
Upstream recipe API clients.

Responsibilities:
- Query TheCocktailDB for categories, searches, random and single drinks.
- Query TheMealDB for dishes by cuisine area or category.
- Translate transport, status and decoding failures into ``UpstreamError``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import Depends, FastAPI, Form, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.exceptions import HTTPException as StarletteHTTPException

from .clients.cocktaildb import CocktailDBClient
from .clients.mealdb import MealDBClient
from .drinks.normalizer import normalize_drink
from .pairing.fetcher import fetch_meals_for_rule
from .pairing.randomness import RandomSource, get_random_source
from .pairing.selector import pick_pairing_rule

logger = logging.getLogger(__name__)

app = FastAPI(title="Cocktail Pairings", version="1.0.0", docs_url=None, redoc_url=None)

_BASE_DIR = Path(__file__).resolve().parent
_STATIC_DIR = _BASE_DIR / "static"
templates = Jinja2Templates(directory=str(_BASE_DIR / "templates"))


# ── Dependencies ─────────────────────────────────────────────────────────


def get_cocktail_client() -> CocktailDBClient:
    return CocktailDBClient()


def get_meal_client() -> MealDBClient:
    return MealDBClient()


def _render_error(request: Request, message: str, status_code: int = 200):
    return templates.TemplateResponse(
        request, "error.html", {"message": message}, status_code=status_code,
    )


async def _render_cocktail(
    request: Request,
    drink: dict,
    meal_client: MealDBClient,
    rng: RandomSource,
):
    normalized = normalize_drink(drink)
    pairing_rule = pick_pairing_rule(normalized["ingredients"], rng)
    meals = await fetch_meals_for_rule(pairing_rule, meal_client, rng)
    return templates.TemplateResponse(
        request,
        "cocktail.html",
        {"drink": normalized, "meals": meals, "pairing_rule": pairing_rule},
    )


# ── Pages ────────────────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/")
async def home(
    request: Request,
    cocktails: CocktailDBClient = Depends(get_cocktail_client),
):
    try:
        categories = await cocktails.list_categories()
    except Exception:
        logger.warning("Loading drink categories failed", exc_info=True)
        return _render_error(request, "Failed to load home page data. Please try again.")
    return templates.TemplateResponse(
        request, "index.html", {"categories": categories},
    )


@app.post("/search")
async def search(
    request: Request,
    name: str | None = Form(default=None),
    ingredient: str | None = Form(default=None),
    cocktails: CocktailDBClient = Depends(get_cocktail_client),
):
    name = (name or "").strip()
    ingredient = (ingredient or "").strip()

    try:
        if name:
            drinks = await cocktails.search_by_name(name)
            heading = f'Results for name: "{name}"'
        elif ingredient:
            drinks = await cocktails.filter_by_ingredient(ingredient)
            heading = f'Results with ingredient: "{ingredient}"'
        else:
            return RedirectResponse("/", status_code=303)
    except Exception:
        logger.warning("Drink search failed (name=%r, ingredient=%r)", name, ingredient, exc_info=True)
        return _render_error(request, "Search failed. Please try different terms.")

    return templates.TemplateResponse(
        request, "results.html", {"drinks": drinks, "heading": heading},
    )


@app.get("/random")
async def random_cocktail(
    request: Request,
    cocktails: CocktailDBClient = Depends(get_cocktail_client),
    meals: MealDBClient = Depends(get_meal_client),
    rng: RandomSource = Depends(get_random_source),
):
    try:
        drink = await cocktails.random_drink()
        if drink is None:
            return _render_error(request, "Could not fetch a random cocktail right now.")
        return await _render_cocktail(request, drink, meals, rng)
    except Exception:
        logger.warning("Random cocktail page failed", exc_info=True)
        return _render_error(request, "Could not fetch a random cocktail right now.")


@app.get("/drink/{drink_id}")
async def drink_detail(
    request: Request,
    drink_id: str,
    cocktails: CocktailDBClient = Depends(get_cocktail_client),
    meals: MealDBClient = Depends(get_meal_client),
    rng: RandomSource = Depends(get_random_source),
):
    try:
        drink = await cocktails.lookup_drink(drink_id)
        if drink is None:
            return _render_error(request, "Drink not found.")
        return await _render_cocktail(request, drink, meals, rng)
    except Exception:
        logger.warning("Drink page failed for id %s", drink_id, exc_info=True)
        return _render_error(request, "Could not load drink details.")


@app.get("/category/{name:path}")
async def category(
    request: Request,
    name: str,
    cocktails: CocktailDBClient = Depends(get_cocktail_client),
):
    try:
        drinks = await cocktails.filter_by_category(name)
    except Exception:
        logger.warning("Category listing failed for %s", name, exc_info=True)
        return _render_error(request, "Could not load category.")
    return templates.TemplateResponse(
        request, "results.html", {"drinks": drinks, "heading": f"Category: {name}"},
    )


# ── Static / not found ──────────────────────────────────────────────────


app.mount("/static", StaticFiles(directory=str(_STATIC_DIR)), name="static")


@app.exception_handler(StarletteHTTPException)
async def not_found(request: Request, exc: StarletteHTTPException):
    if exc.status_code != 404:
        return await http_exception_handler(request, exc)
    return _render_error(request, "Page not found.", status_code=404)

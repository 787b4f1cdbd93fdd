from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class ApiConfig:
    cocktail_base_url: str = os.getenv(
        "COCKTAILDB_BASE_URL", "https://www.thecocktaildb.com/api/json/v1/1"
    )
    meal_base_url: str = os.getenv(
        "MEALDB_BASE_URL", "https://www.themealdb.com/api/json/v1/1"
    )
    timeout: float = float(os.getenv("HTTP_TIMEOUT") or 10.0)


DEFAULT_API_CONFIG = ApiConfig()

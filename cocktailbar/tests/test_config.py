from __future__ import annotations

import importlib

import pytest

from cocktailbar import config
from cocktailbar.clients import config as api_config


@pytest.fixture(autouse=True)
def restore_config_modules(monkeypatch):
    yield
    monkeypatch.undo()
    importlib.reload(config)
    importlib.reload(api_config)


def test_port_defaults_to_3000(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    module = importlib.reload(config)
    assert module.ServerConfig().port == 3000


def test_port_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    module = importlib.reload(config)
    assert module.DEFAULT_SERVER_CONFIG.port == 8080
    assert module.DEFAULT_SERVER_CONFIG.log_level == "DEBUG"


def test_environment_overrides_do_not_leak(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    assert config.DEFAULT_SERVER_CONFIG.port == 3000
    assert config.DEFAULT_SERVER_CONFIG.log_level == "INFO"


def test_api_defaults(monkeypatch):
    monkeypatch.delenv("COCKTAILDB_BASE_URL", raising=False)
    monkeypatch.delenv("MEALDB_BASE_URL", raising=False)
    monkeypatch.delenv("HTTP_TIMEOUT", raising=False)
    module = importlib.reload(api_config)
    cfg = module.ApiConfig()
    assert cfg.cocktail_base_url == "https://www.thecocktaildb.com/api/json/v1/1"
    assert cfg.meal_base_url == "https://www.themealdb.com/api/json/v1/1"
    assert cfg.timeout == 10.0

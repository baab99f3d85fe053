"""Tests for configuration loading."""

import importlib
import os
from unittest.mock import patch


def _reload_config():
    import tareas_api.config as config_mod

    return importlib.reload(config_mod)


def test_defaults():
    with patch.dict(os.environ, {}, clear=False):
        for key in ("PORT", "HOST", "SEED_TASKS"):
            os.environ.pop(key, None)
        config_mod = _reload_config()

    assert config_mod.Config.PORT == 3000
    assert config_mod.Config.HOST == "0.0.0.0"
    assert config_mod.Config.SEED_TASKS is True


def test_port_from_environment():
    with patch.dict(os.environ, {"PORT": "8080"}):
        config_mod = _reload_config()

    assert config_mod.Config.PORT == 8080
    _reload_config()


def test_unseeded_store():
    from tareas_api import create_app
    from tareas_api.config import TestConfig

    class EmptyConfig(TestConfig):
        SEED_TASKS = False

    client = create_app(EmptyConfig).test_client()

    assert client.get("/tareas").get_json() == []
    assert client.post("/tareas", json={"title": "A", "description": "B"}).get_json()["id"] == 1

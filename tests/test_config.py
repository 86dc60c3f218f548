"""Tests for configuration loading from the environment and .env files."""

import importlib
import os

import pytest

import inventory_app.config as config

ENV_KEYS = ("INVENTORY_HOST", "INVENTORY_PORT", "INVENTORY_CACHE_DIR")


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    yield
    # load_dotenv writes straight into os.environ
    for key in ENV_KEYS:
        os.environ.pop(key, None)
    (tmp_path / ".env").unlink(missing_ok=True)
    importlib.reload(config)


def test_dotenv_in_working_directory_reaches_config(clean_env, tmp_path, monkeypatch):
    cache = tmp_path / "cache"
    (tmp_path / ".env").write_text(
        f"INVENTORY_HOST=127.0.0.1\nINVENTORY_PORT=3000\nINVENTORY_CACHE_DIR={cache}\n",
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)

    reloaded = importlib.reload(config)

    assert reloaded.Config.HOST == "127.0.0.1"
    assert reloaded.Config.PORT == "3000"
    assert reloaded.Config.CACHE_DIR == str(cache)


def test_environment_wins_over_dotenv(clean_env, tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("INVENTORY_HOST=from-dotenv\n", encoding="utf-8")
    monkeypatch.setenv("INVENTORY_HOST", "from-env")
    monkeypatch.chdir(tmp_path)

    reloaded = importlib.reload(config)

    assert reloaded.Config.HOST == "from-env"


def test_cache_layout(tmp_path):
    cache = str(tmp_path / "cache")
    config.ensure_cache_dirs(cache)

    assert config.inventory_path(cache) == os.path.join(cache, "inventory.json")
    assert os.path.isdir(config.uploads_dir(cache))

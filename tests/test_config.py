from __future__ import annotations

from pathlib import Path

from inventory_api.core import config as core_config


def test_defaults_match_fixed_constants(monkeypatch):
    for name in ("APP_ENV", "INVENTORY_DATA_FILE", "INVENTORY_HOST", "INVENTORY_PORT", "INVENTORY_CORS_ORIGINS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    core_config.get_settings.cache_clear()
    try:
        settings = core_config.get_settings()
    finally:
        core_config.get_settings.cache_clear()

    assert settings.app_env == "dev"
    assert settings.port == 3000
    assert settings.data_file == Path("data") / "inventory.json"
    assert settings.cors_origins == ("*",)
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("APP_ENV", "PROD")
    monkeypatch.setenv("INVENTORY_DATA_FILE", str(tmp_path / "inv.json"))
    monkeypatch.setenv("INVENTORY_PORT", "8080")
    monkeypatch.setenv("INVENTORY_CORS_ORIGINS", "http://localhost:5173, https://shop.example")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    core_config.get_settings.cache_clear()
    try:
        settings = core_config.get_settings()
    finally:
        core_config.get_settings.cache_clear()

    assert settings.app_env == "prod"
    assert settings.data_file == tmp_path / "inv.json"
    assert settings.port == 8080
    assert settings.cors_origins == ("http://localhost:5173", "https://shop.example")
    assert settings.log_level == "DEBUG"


def test_invalid_port_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("INVENTORY_PORT", "not-a-port")
    core_config.get_settings.cache_clear()
    try:
        assert core_config.get_settings().port == 3000
    finally:
        core_config.get_settings.cache_clear()

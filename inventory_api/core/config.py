"""
Configuration helpers for the inventory backend.

Settings are read from environment variables once and cached, so routers and
services never touch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os


DEFAULT_DATA_FILE = Path("data") / "inventory.json"
DEFAULT_PORT = 3000


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    data_file: Path
    host: str
    port: int
    cors_origins: tuple[str, ...]
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _list(value: str | None, default: tuple[str, ...]) -> tuple[str, ...]:
        if value is None:
            return default
        items = tuple(item.strip() for item in value.split(",") if item.strip())
        return items or default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        data_file=Path(os.getenv("INVENTORY_DATA_FILE") or DEFAULT_DATA_FILE),
        host=os.getenv("INVENTORY_HOST", "0.0.0.0"),
        port=_int(os.getenv("INVENTORY_PORT", str(DEFAULT_PORT)), DEFAULT_PORT),
        cors_origins=_list(os.getenv("INVENTORY_CORS_ORIGINS"), ("*",)),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )

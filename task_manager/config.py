"""Settings loaded from environment variables (+ optional .env)."""

import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    database_url: str = "sqlite:///./tasks.db"
    sql_echo: bool = False
    log_level: str = "INFO"
    atomic_category_sync: bool = True
    port: int = 8080


def get_settings() -> Settings:
    """Read the settings from the environment."""
    return Settings(
        database_url=os.getenv("DATABASE_URL", "sqlite:///./tasks.db"),
        sql_echo=_env_bool("SQL_ECHO", False),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        atomic_category_sync=_env_bool("ATOMIC_CATEGORY_SYNC", True),
        port=_env_int("PORT", 8080),
    )

# config.py
"""
Settings for the product service.

Values come from the environment (a .env file in the working directory is
loaded first). Malformed values fail fast with ConfigurationError.
"""
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


class ConfigurationError(Exception):
    """Raised when a configuration value is missing or invalid."""
    pass


def _get_int(key: str, default: int) -> int:
    raw = os.getenv(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"Environment variable '{key}' must be an integer, got '{raw}'")


def _get_float(key: str, default: float) -> float:
    raw = os.getenv(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"Environment variable '{key}' must be a number, got '{raw}'")


@dataclass(frozen=True)
class Settings:
    database_url: str = "sqlite:///products.db"
    db_timeout: float = 5.0
    log_level: str = "INFO"
    log_time_format: str = "%Y-%m-%dT%H:%M:%S"
    host: str = "0.0.0.0"
    port: int = 8080


def load_settings() -> Settings:
    load_dotenv()

    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    if log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        raise ConfigurationError(f"Unknown LOG_LEVEL '{log_level}'")

    port = _get_int("PORT", 8080)
    if not 0 < port < 65536:
        raise ConfigurationError(f"PORT out of range: {port}")

    return Settings(
        database_url=os.getenv("DATABASE_URL") or "sqlite:///products.db",
        db_timeout=_get_float("DB_TIMEOUT", 5.0),
        log_level=log_level,
        log_time_format=os.getenv("LOG_TIME_FORMAT") or "%Y-%m-%dT%H:%M:%S",
        host=os.getenv("HOST") or "0.0.0.0",
        port=port,
    )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Settings singleton, loaded on first access."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings

"""
Environment-driven settings.

Every value has a local default so the API starts with only DATABASE_URL set.
"""

from __future__ import annotations

import os

COMMENTARY_LIMIT_CEILING = 100


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def db_pool_min_size() -> int:
    return max(1, _env_int("DB_POOL_MIN_SIZE", 1))


def db_pool_max_size() -> int:
    return max(db_pool_min_size(), _env_int("DB_POOL_MAX_SIZE", 5))


def db_command_timeout_s() -> float:
    return _env_float("DB_COMMAND_TIMEOUT_S", 30.0)


def commentary_default_limit() -> int:
    return max(1, _env_int("COMMENTARY_DEFAULT_LIMIT", 10))


def commentary_max_limit() -> int:
    # The env var can only lower the ceiling, never raise it.
    return min(COMMENTARY_LIMIT_CEILING, max(1, _env_int("COMMENTARY_MAX_LIMIT", COMMENTARY_LIMIT_CEILING)))


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "").strip()
    if not raw:
        # Local frontend dev server.
        return ["http://localhost:5173", "http://127.0.0.1:5173"]
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def server_host() -> str:
    return os.environ.get("HOST", "0.0.0.0").strip() or "0.0.0.0"


def server_port() -> int:
    return _env_int("PORT", 8000)

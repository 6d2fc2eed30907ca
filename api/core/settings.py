"""
Environment-driven settings.

Everything is read on call so tests (and operators) can change the
environment without re-importing modules.
"""

from __future__ import annotations

import os

DEFAULT_DB_HOST = "localhost"
DEFAULT_DB_PORT = 5432
DEFAULT_DB_USER = "postgres"
DEFAULT_DB_PASSWORD = "password123"
DEFAULT_DB_NAME = "mydatabase"

DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_API_PORT = 8080


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, default).strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_list(name: str) -> list[str]:
    raw = os.environ.get(name, "")
    return [item.strip() for item in raw.split(",") if item.strip()]


def database_url_override() -> str:
    return os.environ.get("DATABASE_URL", "").strip()


def db_host() -> str:
    return _env_str("DB_HOST", DEFAULT_DB_HOST)


def db_port() -> int:
    return _env_int("DB_PORT", DEFAULT_DB_PORT)


def db_user() -> str:
    return _env_str("DB_USER", DEFAULT_DB_USER)


def db_password() -> str:
    # An explicitly empty password is allowed (trust / peer auth setups).
    return os.environ.get("DB_PASSWORD", DEFAULT_DB_PASSWORD)


def db_name() -> str:
    return _env_str("DB_NAME", DEFAULT_DB_NAME)


def db_pool_min_size() -> int:
    return max(0, _env_int("DB_POOL_MIN_SIZE", 1))


def db_pool_max_size() -> int:
    return max(1, db_pool_min_size(), _env_int("DB_POOL_MAX_SIZE", 5))


def log_level() -> str:
    return _env_str("LOG_LEVEL", "INFO").upper()


def api_host() -> str:
    return _env_str("API_HOST", DEFAULT_API_HOST)


def api_port() -> int:
    return _env_int("API_PORT", DEFAULT_API_PORT)


def cors_allow_headers() -> list[str]:
    return _env_list("CORS_ALLOW_HEADERS")

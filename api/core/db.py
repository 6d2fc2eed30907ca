"""
Async database access helpers (raw SQL) using asyncpg.

This module owns the connection pool. FastAPI opens it on startup, pings it
once, and closes it on shutdown (see `api/main.py`).

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit

import asyncpg

from . import settings
from .errors import StoreError

logger = logging.getLogger(__name__)

_pool: asyncpg.Pool | None = None

# Failures surfaced to callers as StoreError (raw message preserved).
_STORE_FAILURES = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError)


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def _build_database_url() -> str:
    user = quote(settings.db_user(), safe="")
    password = quote(settings.db_password(), safe="")
    return (
        f"postgresql://{user}:{password}"
        f"@{settings.db_host()}:{settings.db_port()}/{settings.db_name()}"
    )


def database_url() -> str:
    """
    DSN for the pool: DATABASE_URL when set, otherwise built from DB_HOST,
    DB_PORT, DB_USER, DB_PASSWORD and DB_NAME.
    """
    url = settings.database_url_override()
    if not url:
        return _build_database_url()
    return _sanitize_database_url(url)


async def init_pool() -> None:
    global _pool
    if _pool is not None:
        return None
    min_size = settings.db_pool_min_size()
    max_size = settings.db_pool_max_size()
    pool_ = await asyncpg.create_pool(
        dsn=database_url(),
        min_size=min_size,
        max_size=max_size,
    )
    try:
        await pool_.fetchval("SELECT 1")
    except BaseException:
        await pool_.close()
        raise
    _pool = pool_
    logger.info("db_pool_ready min_size=%s max_size=%s", min_size, max_size)


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None
    logger.info("db_pool_closed")


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise RuntimeError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    try:
        rows = await pool().fetch(sql, *args)
    except _STORE_FAILURES as exc:
        raise StoreError(str(exc)) from exc
    return [_record_to_dict(r) for r in rows]


async def execute(sql: str, *args: Any) -> str:
    """
    Run a statement (INSERT/UPDATE/DELETE). Returns the status tag, e.g. "DELETE 1".
    """
    try:
        return await pool().execute(sql, *args)
    except _STORE_FAILURES as exc:
        raise StoreError(str(exc)) from exc

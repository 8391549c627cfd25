"""
Async database access helpers (raw SQL) using aiosqlite.

This module owns the single shared connection. FastAPI opens it on startup
and closes it on shutdown (see `api/main.py`).

SQL parameter style:
- sqlite uses positional placeholders: ?, ?, ?, ...

The connection runs in autocommit mode, so every statement is its own
transaction. Foreign keys are switched on per connection; without that the
ON DELETE rules in `core/schema.py` are ignored.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import aiosqlite

from . import schema

_conn: aiosqlite.Connection | None = None


async def init_db(database_path: str) -> None:
    global _conn
    if _conn is not None:
        return None

    if database_path != ":memory:":
        Path(database_path).parent.mkdir(parents=True, exist_ok=True)

    conn = await aiosqlite.connect(database_path, isolation_level=None)
    conn.row_factory = aiosqlite.Row
    await conn.execute("PRAGMA foreign_keys = ON")
    await conn.executescript(schema.SCHEMA)
    _conn = conn


async def close_db() -> None:
    global _conn
    if _conn is None:
        return None
    await _conn.close()
    _conn = None


def connection() -> aiosqlite.Connection:
    if _conn is None:
        raise RuntimeError("DB connection is not initialized. Call init_db() on startup.")
    return _conn


def _row_to_dict(row: aiosqlite.Row) -> dict[str, Any]:
    return dict(row)


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    async with connection().execute(sql, args) as cursor:
        row = await cursor.fetchone()
    return _row_to_dict(row) if row is not None else None


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    async with connection().execute(sql, args) as cursor:
        rows = await cursor.fetchall()
    return [_row_to_dict(r) for r in rows]


async def fetch_value(sql: str, *args: Any) -> Any:
    row = await fetch_one(sql, *args)
    if row is None:
        return None
    return next(iter(row.values()), None)


async def insert(sql: str, *args: Any) -> int:
    """
    Run an INSERT and return the generated row id.
    """
    async with connection().execute(sql, args) as cursor:
        row_id = cursor.lastrowid
    if row_id is None:
        raise RuntimeError("INSERT did not produce a row id.")
    return int(row_id)


async def execute(sql: str, *args: Any) -> int:
    """
    Run an UPDATE/DELETE and return the affected row count.
    """
    async with connection().execute(sql, args) as cursor:
        return cursor.rowcount

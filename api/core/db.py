"""
Async database access helpers (raw SQL) using asyncpg.

`Database` owns one connection pool. The application creates it on startup,
keeps it on `app.state.db` and closes it on shutdown (see `api/main.py`).
Routes receive it through `Depends(get_db)`; tests construct their own.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...

Driver errors that describe bad input are translated here into
`core.errors` types so callers never inspect asyncpg-specific fields.
"""

from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from typing import Any, Iterator

import asyncpg
from fastapi import Request

from . import config, errors

logger = logging.getLogger(__name__)

# Postgres detail for 23503: Key (author)=(nobody) is not present in table "users".
_FK_DETAIL_RE = re.compile(r'Key \((?P<column>[^)]+)\)=\(.*\) is not present in table "(?P<table>[^"]+)"')


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


def _missing_reference(exc: asyncpg.ForeignKeyViolationError) -> errors.MissingReference:
    match = _FK_DETAIL_RE.search(getattr(exc, "detail", None) or "")
    if match is None:
        return errors.MissingReference()
    return errors.MissingReference(column=match.group("column"), table=match.group("table"))


@contextmanager
def _translate_driver_errors() -> Iterator[None]:
    try:
        yield
    except asyncpg.ForeignKeyViolationError as exc:
        raise _missing_reference(exc) from exc
    except (asyncpg.DataError, asyncpg.NotNullViolationError) as exc:
        raise errors.BadRequest() from exc


class Database:
    """
    Thin wrapper around an asyncpg pool returning plain dicts.
    """

    def __init__(self, pool: asyncpg.Pool) -> None:
        self._pool = pool

    @classmethod
    async def connect(
        cls,
        dsn: str | None = None,
        *,
        min_size: int | None = None,
        max_size: int | None = None,
        command_timeout: float | None = None,
    ) -> "Database":
        pool = await asyncpg.create_pool(
            dsn=dsn or config.database_url(),
            min_size=config.pool_min_size() if min_size is None else min_size,
            max_size=config.pool_max_size() if max_size is None else max_size,
            command_timeout=config.command_timeout() if command_timeout is None else command_timeout,
        )
        logger.info("Database pool opened")
        return cls(pool)

    async def close(self) -> None:
        await self._pool.close()
        logger.info("Database pool closed")

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        with _translate_driver_errors():
            row = await self._pool.fetchrow(sql, *args)
        return _record_to_dict(row) if row is not None else None

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        with _translate_driver_errors():
            rows = await self._pool.fetch(sql, *args)
        return [_record_to_dict(r) for r in rows]

    async def execute(self, sql: str, *args: Any) -> str:
        """
        Run a statement (INSERT/UPDATE/DELETE/DDL) and return its status tag.
        """
        with _translate_driver_errors():
            return await self._pool.execute(sql, *args)

    async def executemany(self, sql: str, args: list[tuple[Any, ...]]) -> None:
        """
        Run one statement for every argument tuple, in a single transaction.
        """
        if not args:
            return None
        async with self._pool.acquire() as conn:
            async with conn.transaction():
                with _translate_driver_errors():
                    await conn.executemany(sql, args)


def get_db(request: Request) -> Database:
    database = getattr(request.app.state, "db", None)
    if database is None:
        raise RuntimeError("Database is not initialized. It is opened in the app lifespan.")
    return database

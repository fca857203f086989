"""
User persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core.db import Database


async def list_users(database: Database) -> list[dict[str, Any]]:
    return await database.fetch_all(
        """
        SELECT username, name, avatar_url
        FROM users
        ORDER BY username ASC
        """
    )


async def get_user_by_username(database: Database, username: str) -> dict[str, Any] | None:
    return await database.fetch_one(
        """
        SELECT username, name, avatar_url
        FROM users
        WHERE username = $1
        """,
        username,
    )

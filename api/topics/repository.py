"""
Topic persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core.db import Database


async def list_topics(database: Database) -> list[dict[str, Any]]:
    return await database.fetch_all(
        """
        SELECT slug, description
        FROM topics
        """
    )


async def get_topic(database: Database, slug: str) -> dict[str, Any] | None:
    return await database.fetch_one(
        """
        SELECT slug, description
        FROM topics
        WHERE slug = $1
        """,
        slug,
    )

"""
Article persistence (raw SQL).

`comment_count` is aggregated from `comments` at query time.
"""

from __future__ import annotations

from typing import Any

from core.db import Database

# Whitelisted ORDER BY targets. Column names cannot be bound as parameters,
# so only these fixed expressions are ever interpolated into SQL.
SORTABLE_COLUMNS: dict[str, str] = {
    "article_id": "a.article_id",
    "title": "a.title",
    "topic": "a.topic",
    "author": "a.author",
    "created_at": "a.created_at",
    "votes": "a.votes",
    "comment_count": "comment_count",
}
SORT_ORDERS: dict[str, str] = {"asc": "ASC", "desc": "DESC"}

DEFAULT_SORT_BY = "created_at"
DEFAULT_ORDER = "desc"


async def list_articles(
    database: Database,
    *,
    sort_by: str = DEFAULT_SORT_BY,
    order: str = DEFAULT_ORDER,
    topic: str | None = None,
) -> list[dict[str, Any]]:
    """
    List articles without their body, newest first by default.

    Callers validate `sort_by`/`order`; unknown values raise KeyError here.
    """
    order_by = SORTABLE_COLUMNS[sort_by]
    direction = SORT_ORDERS[order]
    return await database.fetch_all(
        f"""
        SELECT
          a.author,
          a.title,
          a.article_id,
          a.topic,
          a.created_at,
          a.votes,
          a.article_img_url,
          count(c.comment_id)::int AS comment_count
        FROM articles a
        LEFT JOIN comments c ON c.article_id = a.article_id
        WHERE ($1::text IS NULL OR a.topic = $1::text)
        GROUP BY a.article_id
        ORDER BY {order_by} {direction}, a.article_id {direction}
        """,
        topic,
    )


async def get_article(database: Database, article_id: int) -> dict[str, Any] | None:
    return await database.fetch_one(
        """
        SELECT
          a.author,
          a.title,
          a.article_id,
          a.body,
          a.topic,
          a.created_at,
          a.votes,
          a.article_img_url,
          count(c.comment_id)::int AS comment_count
        FROM articles a
        LEFT JOIN comments c ON c.article_id = a.article_id
        WHERE a.article_id = $1
        GROUP BY a.article_id
        """,
        article_id,
    )


async def article_exists(database: Database, article_id: int) -> bool:
    row = await database.fetch_one(
        """
        SELECT 1 AS ok
        FROM articles
        WHERE article_id = $1
        """,
        article_id,
    )
    return row is not None


async def update_article_votes(database: Database, article_id: int, inc_votes: int) -> dict[str, Any] | None:
    """
    Add `inc_votes` (may be negative) to an article's votes, never going below 0.
    Returns the updated row, or None when the article does not exist.
    """
    return await database.fetch_one(
        """
        UPDATE articles
        SET votes = GREATEST(votes + $2, 0)
        WHERE article_id = $1
        RETURNING author, title, article_id, body, topic, created_at, votes, article_img_url
        """,
        article_id,
        inc_votes,
    )

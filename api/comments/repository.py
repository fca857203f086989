"""
Comment persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core.db import Database


async def list_comments_for_article(database: Database, article_id: int) -> list[dict[str, Any]]:
    """
    Comments on one article, newest first.
    """
    return await database.fetch_all(
        """
        SELECT comment_id, votes, created_at, author, body, article_id
        FROM comments
        WHERE article_id = $1
        ORDER BY created_at DESC, comment_id DESC
        """,
        article_id,
    )


async def insert_comment(database: Database, *, article_id: int, author: str, body: str) -> dict[str, Any]:
    """
    Insert a comment with zero votes and a server-assigned created_at.

    A missing article or author surfaces as `errors.MissingReference`
    (raised by the database layer from the foreign-key violation).
    """
    row = await database.fetch_one(
        """
        INSERT INTO comments (body, article_id, author)
        VALUES ($1, $2, $3)
        RETURNING comment_id, body, article_id, author, votes, created_at
        """,
        body,
        article_id,
        author,
    )
    if row is None:
        raise RuntimeError("Failed to insert comment.")
    return row


async def delete_comment(database: Database, comment_id: int) -> dict[str, Any] | None:
    """
    Delete a comment. Returns the deleted id, or None when not found.
    """
    return await database.fetch_one(
        """
        DELETE FROM comments
        WHERE comment_id = $1
        RETURNING comment_id
        """,
        comment_id,
    )

"""
Comment business logic.
"""

from __future__ import annotations

from core import errors
from core.db import Database
from articles import repository as article_repository

from . import repository

ARTICLE_DOES_NOT_EXIST = "article does not exist"
USER_DOES_NOT_EXIST = "user does not exist"
COMMENT_NOT_FOUND = "comment not found"

# Foreign-key column on `comments` -> message for the missing referenced row.
_MISSING_REFERENCE_MESSAGES = {
    "author": USER_DOES_NOT_EXIST,
    "article_id": ARTICLE_DOES_NOT_EXIST,
}


async def list_comments(database: Database, article_id: int) -> list[dict]:
    comments = await repository.list_comments_for_article(database, article_id)
    if not comments and not await article_repository.article_exists(database, article_id):
        raise errors.NotFound(ARTICLE_DOES_NOT_EXIST)
    return comments


async def add_comment(database: Database, article_id: int, *, username: str, body: str) -> dict:
    if not body.strip() or not username.strip():
        raise errors.BadRequest()

    try:
        return await repository.insert_comment(
            database,
            article_id=article_id,
            author=username,
            body=body,
        )
    except errors.MissingReference as exc:
        msg = _MISSING_REFERENCE_MESSAGES.get(exc.column or "")
        if msg is None:
            raise
        raise errors.NotFound(msg) from exc


async def remove_comment(database: Database, comment_id: int) -> None:
    deleted = await repository.delete_comment(database, comment_id)
    if deleted is None:
        raise errors.NotFound(COMMENT_NOT_FOUND)

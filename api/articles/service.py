"""
Article business logic: query validation and not-found translation.
"""

from __future__ import annotations

from core import errors
from core.db import Database
from topics import repository as topic_repository

from . import repository

ARTICLE_NOT_FOUND = "article not found"
TOPIC_NOT_FOUND = "topic not found"


async def list_articles(
    database: Database,
    *,
    sort_by: str | None = None,
    order: str | None = None,
    topic: str | None = None,
) -> list[dict]:
    sort_by = (sort_by or repository.DEFAULT_SORT_BY).strip()
    order = (order or repository.DEFAULT_ORDER).strip().lower()
    topic = topic or None
    if sort_by not in repository.SORTABLE_COLUMNS or order not in repository.SORT_ORDERS:
        raise errors.BadRequest()

    rows = await repository.list_articles(database, sort_by=sort_by, order=order, topic=topic)
    # An unknown topic is an error; a known topic without articles is not.
    if not rows and topic is not None:
        if await topic_repository.get_topic(database, topic) is None:
            raise errors.NotFound(TOPIC_NOT_FOUND)
    return rows


async def get_article(database: Database, article_id: int) -> dict:
    article = await repository.get_article(database, article_id)
    if article is None:
        raise errors.NotFound(ARTICLE_NOT_FOUND)
    return article


async def update_article_votes(database: Database, article_id: int, inc_votes: int) -> dict:
    article = await repository.update_article_votes(database, article_id, inc_votes)
    if article is None:
        raise errors.NotFound(ARTICLE_NOT_FOUND)
    return article

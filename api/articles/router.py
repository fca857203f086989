"""
Article API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from core.db import Database, get_db

from . import schemas, service

router = APIRouter()


@router.get("/api/articles")
async def get_articles(
    sort_by: str | None = Query(default=None, max_length=50),
    order: str | None = Query(default=None, max_length=10),
    topic: str | None = Query(default=None, max_length=200),
    database: Database = Depends(get_db),
) -> dict:
    """
    List articles without their body; supports sort_by, order and topic.
    """
    articles = await service.list_articles(database, sort_by=sort_by, order=order, topic=topic)
    return {"articles": articles}


@router.get("/api/articles/{article_id}")
async def get_article_by_id(
    article_id: int,
    database: Database = Depends(get_db),
) -> dict:
    """
    Fetch one article with its comment_count.
    """
    article = await service.get_article(database, article_id)
    return {"article": article}


@router.patch("/api/articles/{article_id}")
async def patch_article_votes(
    article_id: int,
    request: schemas.VoteUpdateRequest,
    database: Database = Depends(get_db),
) -> dict:
    """
    Add inc_votes to an article's votes and return the updated article.
    """
    article = await service.update_article_votes(database, article_id, request.inc_votes)
    return {"article": article}

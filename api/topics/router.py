"""
Topic API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core.db import Database, get_db

from . import repository

router = APIRouter()


@router.get("/api/topics")
async def get_topics(database: Database = Depends(get_db)) -> dict:
    """
    List every topic.
    """
    topics = await repository.list_topics(database)
    return {"topics": topics}

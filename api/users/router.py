"""
User API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core.db import Database, get_db

from . import repository, service

router = APIRouter()


@router.get("/api/users")
async def get_users(database: Database = Depends(get_db)) -> dict:
    """
    List every user.
    """
    users = await repository.list_users(database)
    return {"users": users}


@router.get("/api/users/{username}")
async def get_user_by_username(
    username: str,
    database: Database = Depends(get_db),
) -> dict:
    """
    Fetch one user by username.
    """
    user = await service.get_user(database, username)
    return {"user": user}

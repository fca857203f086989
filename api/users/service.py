"""
User business logic.
"""

from __future__ import annotations

from core import errors
from core.db import Database

from . import repository

USER_DOES_NOT_EXIST = "user does not exist"


async def get_user(database: Database, username: str) -> dict:
    user = await repository.get_user_by_username(database, username)
    if user is None:
        raise errors.NotFound(USER_DOES_NOT_EXIST)
    return user

"""
GET /api: a JSON description of every available endpoint.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter

router = APIRouter()

_ARTICLE_EXAMPLE: dict[str, Any] = {
    "author": "butter_bridge",
    "title": "Living in the shadow of a great man",
    "article_id": 1,
    "body": "I find this existence challenging",
    "topic": "mitch",
    "created_at": "2020-07-09T20:11:00",
    "votes": 100,
    "article_img_url": "https://images.pexels.com/photos/158651/news-newsletter-newspaper-information-158651.jpeg",
    "comment_count": 11,
}

_COMMENT_EXAMPLE: dict[str, Any] = {
    "comment_id": 19,
    "body": "still lurkin",
    "article_id": 1,
    "author": "lurker",
    "votes": 0,
    "created_at": "2020-11-03T21:00:00",
}

_USER_EXAMPLE: dict[str, Any] = {
    "username": "lurker",
    "name": "do_nothing",
    "avatar_url": "https://www.golenbock.com/wp-content/uploads/2015/01/placeholder-user.png",
}

ENDPOINTS: dict[str, dict[str, Any]] = {
    "GET /api": {
        "description": "serves a json representation of all the available endpoints of the api",
    },
    "GET /api/topics": {
        "description": "serves an array of all topics",
        "queries": [],
        "exampleResponse": {"topics": [{"slug": "football", "description": "Footie!"}]},
    },
    "GET /api/articles": {
        "description": "serves an array of all articles without their body, newest first",
        "queries": ["topic", "sort_by", "order"],
        "exampleResponse": {
            "articles": [{k: v for k, v in _ARTICLE_EXAMPLE.items() if k != "body"}],
        },
    },
    "GET /api/articles/:article_id": {
        "description": "serves a single article including its comment_count",
        "queries": [],
        "exampleResponse": {"article": _ARTICLE_EXAMPLE},
    },
    "PATCH /api/articles/:article_id": {
        "description": "adds inc_votes to the article's votes (never below zero) and serves the updated article",
        "exampleRequest": {"inc_votes": 1},
        "exampleResponse": {"article": {k: v for k, v in _ARTICLE_EXAMPLE.items() if k != "comment_count"}},
    },
    "GET /api/articles/:article_id/comments": {
        "description": "serves an array of comments for the given article, newest first",
        "queries": [],
        "exampleResponse": {"comments": [_COMMENT_EXAMPLE]},
    },
    "POST /api/articles/:article_id/comments": {
        "description": "adds a comment to the given article and serves the created comment",
        "exampleRequest": {"username": "lurker", "body": "still lurkin"},
        "exampleResponse": {"comment": _COMMENT_EXAMPLE},
    },
    "DELETE /api/comments/:comment_id": {
        "description": "deletes the given comment and responds with 204 and no body",
    },
    "GET /api/users": {
        "description": "serves an array of all users",
        "queries": [],
        "exampleResponse": {"users": [_USER_EXAMPLE]},
    },
    "GET /api/users/:username": {
        "description": "serves a single user",
        "queries": [],
        "exampleResponse": {"user": _USER_EXAMPLE},
    },
}


@router.get("/api")
async def get_endpoints() -> dict:
    """
    Describe every available endpoint.
    """
    return {"endpoints": ENDPOINTS}

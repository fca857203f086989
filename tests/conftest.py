"""
Shared fixtures for the API tests.

The default `client` fixture runs the real app with every repository function
replaced by an in-memory fake built from `seeds.data.TEST_DATA`, so these tests
need no database. `tests/test_integration.py` covers the SQL against Postgres.
"""

from __future__ import annotations

import copy
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from articles import repository as article_repository
from comments import repository as comment_repository
from core import errors
from main import create_app
from seeds.data import TEST_DATA
from topics import repository as topic_repository
from users import repository as user_repository

_ARTICLE_LIST_FIELDS = ("author", "title", "article_id", "topic", "created_at", "votes", "article_img_url")


class InMemoryStore:
    """
    Mirrors what the SQL in each repository module returns.
    """

    def __init__(self) -> None:
        self.topics = copy.deepcopy(TEST_DATA.topics)
        self.users = copy.deepcopy(TEST_DATA.users)
        self.articles = [
            {"article_id": index, **copy.deepcopy(article)}
            for index, article in enumerate(TEST_DATA.articles, start=1)
        ]
        self.comments = [
            {"comment_id": index, **copy.deepcopy(comment)}
            for index, comment in enumerate(TEST_DATA.comments, start=1)
        ]

    def _comment_count(self, article_id: int) -> int:
        return sum(1 for c in self.comments if c["article_id"] == article_id)

    def _find_article(self, article_id: int) -> dict[str, Any] | None:
        return next((a for a in self.articles if a["article_id"] == article_id), None)

    # topics
    async def list_topics(self, _database) -> list[dict[str, Any]]:
        return copy.deepcopy(self.topics)

    async def get_topic(self, _database, slug: str) -> dict[str, Any] | None:
        return next((dict(t) for t in self.topics if t["slug"] == slug), None)

    # articles
    async def list_articles(self, _database, *, sort_by="created_at", order="desc", topic=None):
        rows = [
            {**{k: a[k] for k in _ARTICLE_LIST_FIELDS}, "comment_count": self._comment_count(a["article_id"])}
            for a in self.articles
            if topic is None or a["topic"] == topic
        ]
        rows.sort(key=lambda r: (r[sort_by], r["article_id"]), reverse=order == "desc")
        return rows

    async def get_article(self, _database, article_id: int):
        article = self._find_article(article_id)
        if article is None:
            return None
        return {**article, "comment_count": self._comment_count(article_id)}

    async def article_exists(self, _database, article_id: int) -> bool:
        return self._find_article(article_id) is not None

    async def update_article_votes(self, _database, article_id: int, inc_votes: int):
        article = self._find_article(article_id)
        if article is None:
            return None
        article["votes"] = max(article["votes"] + inc_votes, 0)
        return dict(article)

    # comments
    async def list_comments_for_article(self, _database, article_id: int):
        rows = [dict(c) for c in self.comments if c["article_id"] == article_id]
        rows.sort(key=lambda c: (c["created_at"], c["comment_id"]), reverse=True)
        return rows

    async def insert_comment(self, _database, *, article_id: int, author: str, body: str):
        if self._find_article(article_id) is None:
            raise errors.MissingReference(column="article_id", table="articles")
        if not any(u["username"] == author for u in self.users):
            raise errors.MissingReference(column="author", table="users")
        comment = {
            "comment_id": max((c["comment_id"] for c in self.comments), default=0) + 1,
            "body": body,
            "article_id": article_id,
            "author": author,
            "votes": 0,
            "created_at": datetime.now(),
        }
        self.comments.append(comment)
        return dict(comment)

    async def delete_comment(self, _database, comment_id: int):
        for index, comment in enumerate(self.comments):
            if comment["comment_id"] == comment_id:
                del self.comments[index]
                return {"comment_id": comment_id}
        return None

    # users
    async def list_users(self, _database):
        return sorted(copy.deepcopy(self.users), key=lambda u: u["username"])

    async def get_user_by_username(self, _database, username: str):
        return next((dict(u) for u in self.users if u["username"] == username), None)


@asynccontextmanager
async def _stub_lifespan(app: FastAPI):
    # Repositories are faked, so the database handle is never used.
    app.state.db = object()
    yield
    app.state.db = None


@pytest.fixture
def store(monkeypatch: pytest.MonkeyPatch) -> InMemoryStore:
    fake = InMemoryStore()
    monkeypatch.setattr(topic_repository, "list_topics", fake.list_topics)
    monkeypatch.setattr(topic_repository, "get_topic", fake.get_topic)
    monkeypatch.setattr(article_repository, "list_articles", fake.list_articles)
    monkeypatch.setattr(article_repository, "get_article", fake.get_article)
    monkeypatch.setattr(article_repository, "article_exists", fake.article_exists)
    monkeypatch.setattr(article_repository, "update_article_votes", fake.update_article_votes)
    monkeypatch.setattr(comment_repository, "list_comments_for_article", fake.list_comments_for_article)
    monkeypatch.setattr(comment_repository, "insert_comment", fake.insert_comment)
    monkeypatch.setattr(comment_repository, "delete_comment", fake.delete_comment)
    monkeypatch.setattr(user_repository, "list_users", fake.list_users)
    monkeypatch.setattr(user_repository, "get_user_by_username", fake.get_user_by_username)
    return fake


@pytest.fixture
def app(store: InMemoryStore) -> FastAPI:
    return create_app(lifespan_handler=_stub_lifespan)


@pytest.fixture
def client(app: FastAPI):
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client

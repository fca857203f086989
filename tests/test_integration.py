"""
End-to-end tests against a real PostgreSQL database.

Set TEST_DATABASE_URL to a disposable database; it is dropped and re-seeded
with `seeds.data.TEST_DATA` before every test.
"""

from __future__ import annotations

import asyncio
import os
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from core.db import Database
from main import create_app
from seeds.data import TEST_DATA
from seeds.seed import seed

TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "").strip()

pytestmark = pytest.mark.skipif(not TEST_DATABASE_URL, reason="TEST_DATABASE_URL is not set")


async def _reseed() -> None:
    database = await Database.connect(TEST_DATABASE_URL, min_size=1, max_size=1)
    try:
        await seed(database, TEST_DATA)
    finally:
        await database.close()


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch):
    asyncio.run(_reseed())
    monkeypatch.setenv("DATABASE_URL", TEST_DATABASE_URL)
    with TestClient(create_app()) as test_client:
        yield test_client


def _created(rows: list[dict]) -> list[datetime]:
    return [datetime.fromisoformat(row["created_at"]) for row in rows]


def test_get_topics(client) -> None:
    topics = client.get("/api/topics").json()["topics"]

    assert len(topics) == len(TEST_DATA.topics)
    assert all(isinstance(t["slug"], str) and isinstance(t["description"], str) for t in topics)


def test_get_articles(client) -> None:
    res = client.get("/api/articles")

    assert res.status_code == 200
    articles = res.json()["articles"]
    assert len(articles) == len(TEST_DATA.articles)
    assert _created(articles) == sorted(_created(articles), reverse=True)
    by_id = {a["article_id"]: a for a in articles}
    assert by_id[1]["comment_count"] == 11
    assert by_id[2]["comment_count"] == 0


def test_get_articles_sorted_by_votes_ascending(client) -> None:
    articles = client.get("/api/articles?sort_by=votes&order=asc").json()["articles"]

    votes = [a["votes"] for a in articles]
    assert votes == sorted(votes)


def test_get_articles_by_topic(client) -> None:
    assert [a["topic"] for a in client.get("/api/articles?topic=cats").json()["articles"]] == ["cats"]
    assert client.get("/api/articles?topic=paper").json() == {"articles": []}
    assert client.get("/api/articles?topic=dogs").status_code == 404


def test_get_article_by_id(client) -> None:
    assert client.get("/api/articles/1").json()["article"]["article_id"] == 1

    missing = client.get("/api/articles/500")
    assert missing.status_code == 404
    assert missing.json() == {"msg": "article not found"}

    malformed = client.get("/api/articles/not_an_id")
    assert malformed.status_code == 400
    assert malformed.json() == {"msg": "Bad Request"}


def test_get_article_out_of_range_id_is_400(client) -> None:
    res = client.get("/api/articles/99999999999")

    assert res.status_code == 400
    assert res.json() == {"msg": "Bad Request"}


def test_get_article_comments(client) -> None:
    comments = client.get("/api/articles/1/comments").json()["comments"]
    assert len(comments) == 11
    assert _created(comments) == sorted(_created(comments), reverse=True)

    assert client.get("/api/articles/2/comments").json() == {"comments": []}

    missing = client.get("/api/articles/1000/comments")
    assert missing.status_code == 404
    assert missing.json() == {"msg": "article does not exist"}

    assert client.get("/api/articles/Notanumber/comments").status_code == 400


def test_post_comment(client) -> None:
    res = client.post(
        "/api/articles/1/comments",
        json={"username": "lurker", "body": "still lurkin", "some": "extra", "props": 13},
    )

    assert res.status_code == 201
    comment = res.json()["comment"]
    assert comment["body"] == "still lurkin"
    assert comment["article_id"] == 1
    assert comment["author"] == "lurker"
    assert comment["votes"] == 0
    assert isinstance(comment["comment_id"], int)
    datetime.fromisoformat(comment["created_at"])
    assert len(client.get("/api/articles/1/comments").json()["comments"]) == 12


def test_post_comment_missing_references(client) -> None:
    no_user = client.post("/api/articles/1/comments", json={"username": "invalid_user_", "body": "still lurkin"})
    assert no_user.status_code == 404
    assert no_user.json() == {"msg": "user does not exist"}

    no_article = client.post("/api/articles/1001/comments", json={"username": "lurker", "body": "still lurkin"})
    assert no_article.status_code == 404
    assert no_article.json() == {"msg": "article does not exist"}


def test_post_comment_bad_body(client) -> None:
    assert client.post("/api/articles/1/comments", json={"username": "lurker"}).status_code == 400
    assert client.post("/api/articles/1/comments", json={"username": "lurker", "body": ""}).status_code == 400


def test_patch_article_votes(client) -> None:
    assert client.patch("/api/articles/1", json={"inc_votes": -1}).json()["article"]["votes"] == 99
    assert client.patch("/api/articles/1", json={"inc_votes": -500}).json()["article"]["votes"] == 0
    assert client.patch("/api/articles/500", json={"inc_votes": 1}).status_code == 404


def test_delete_comment(client) -> None:
    assert client.delete("/api/comments/1").status_code == 204
    assert client.delete("/api/comments/1").status_code == 404


def test_get_users(client) -> None:
    users = client.get("/api/users").json()["users"]

    assert {u["username"] for u in users} == {u["username"] for u in TEST_DATA.users}
    assert client.get("/api/users/lurker").json()["user"]["name"] == "do_nothing"


def test_invalid_url(client) -> None:
    res = client.get("/api/no_topics_to_be_found_here")

    assert res.status_code == 404
    assert res.json() == {"msg": "invalid url"}

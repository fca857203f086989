from __future__ import annotations

import pytest

from core import config


def test_database_url_strips_sslmode(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db:5432/news?sslmode=require&application_name=api")

    assert config.database_url() == "postgresql://u:p@db:5432/news?application_name=api"


def test_database_url_without_query_is_unchanged(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db:5432/news")

    assert config.database_url() == "postgresql://u:p@db:5432/news"


def test_database_url_is_required(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(RuntimeError, match="DATABASE_URL is not set"):
        config.database_url()


def test_pool_sizes_fall_back_on_garbage(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DB_POOL_MIN_SIZE", "lots")
    monkeypatch.setenv("DB_POOL_MAX_SIZE", "0")

    assert config.pool_min_size() == 1
    assert config.pool_max_size() == 1


def test_cors_origins_are_split(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example,")

    assert config.cors_origins() == ["https://a.example", "https://b.example"]

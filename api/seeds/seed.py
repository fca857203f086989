"""
(Re)create the schema and load a dataset.

Usage (from `api/`):
    DATABASE_URL=postgresql://... SEED_DATASET=development python -m seeds.seed
"""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path

from core import config
from core.db import Database

from .data import DATASETS, Dataset

SCHEMA_PATH = Path(__file__).with_name("schema.sql")

logger = logging.getLogger(__name__)


async def seed(database: Database, data: Dataset) -> None:
    """
    Drop every table, recreate the schema and insert `data`.
    """
    await database.execute(SCHEMA_PATH.read_text(encoding="utf-8"))

    await database.executemany(
        "INSERT INTO topics (slug, description) VALUES ($1, $2)",
        [(t["slug"], t["description"]) for t in data.topics],
    )
    await database.executemany(
        "INSERT INTO users (username, name, avatar_url) VALUES ($1, $2, $3)",
        [(u["username"], u["name"], u.get("avatar_url")) for u in data.users],
    )
    # Ids follow insertion order; comments rely on it.
    await database.executemany(
        """
        INSERT INTO articles (title, topic, author, body, created_at, votes, article_img_url)
        VALUES ($1, $2, $3, $4, $5, $6, $7)
        """,
        [
            (a["title"], a["topic"], a["author"], a["body"], a["created_at"], a["votes"], a["article_img_url"])
            for a in data.articles
        ],
    )
    await database.executemany(
        """
        INSERT INTO comments (body, article_id, author, votes, created_at)
        VALUES ($1, $2, $3, $4, $5)
        """,
        [(c["body"], c["article_id"], c["author"], c["votes"], c["created_at"]) for c in data.comments],
    )
    logger.info(
        "Seeded %d topics, %d users, %d articles, %d comments",
        len(data.topics),
        len(data.users),
        len(data.articles),
        len(data.comments),
    )


async def _main() -> None:
    name = os.environ.get("SEED_DATASET", "development").strip() or "development"
    if name not in DATASETS:
        raise SystemExit(f"Unknown SEED_DATASET {name!r}; expected one of {sorted(DATASETS)}.")

    database = await Database.connect(config.database_url())
    try:
        await seed(database, DATASETS[name])
    finally:
        await database.close()


if __name__ == "__main__":
    config.configure_logging()
    asyncio.run(_main())

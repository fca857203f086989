"""
Environment-driven settings and logging setup.

Everything is read lazily from the process environment so tests can override
values with `monkeypatch.setenv`.
"""

from __future__ import annotations

import logging
import os
import sys
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173"

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_logging_configured = False


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _sanitize_database_url(url: str) -> str:
    # asyncpg rejects libpq-only query parameters such as sslmode.
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url(env_var: str = "DATABASE_URL") -> str:
    url = os.environ.get(env_var, "").strip()
    if not url:
        raise RuntimeError(f"{env_var} is not set.")
    return _sanitize_database_url(url)


def pool_min_size() -> int:
    return max(_env_int("DB_POOL_MIN_SIZE", 1), 0)


def pool_max_size() -> int:
    return max(_env_int("DB_POOL_MAX_SIZE", 5), 1)


def command_timeout() -> int:
    return _env_int("DB_COMMAND_TIMEOUT", 30)


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def configure_logging() -> None:
    """Configure the root logger once per process."""
    global _logging_configured
    if _logging_configured:
        return None
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root = logging.getLogger()
    root.setLevel(log_level())
    root.addHandler(handler)
    _logging_configured = True

from __future__ import annotations

import os

from lecture_catalog.domain.lecture import DEFAULT_PAGE_SIZE

DEFAULT_API_TIMEOUT_SECONDS = 10.0


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url


def lecture_api_url() -> str:
    url = os.getenv("LECTURE_API_URL")

    if not url:
        raise RuntimeError("LECTURE_API_URL environment variable is not set")

    return url.rstrip("/")


def lecture_api_timeout() -> float:
    raw = os.getenv("LECTURE_API_TIMEOUT")

    if not raw:
        return DEFAULT_API_TIMEOUT_SECONDS

    try:
        timeout = float(raw)
    except ValueError:
        raise RuntimeError(f"LECTURE_API_TIMEOUT must be a number of seconds, got {raw!r}")

    if timeout <= 0:
        raise RuntimeError("LECTURE_API_TIMEOUT must be > 0")

    return timeout


def catalog_page_size() -> int:
    raw = os.getenv("CATALOG_PAGE_SIZE")

    if not raw:
        return DEFAULT_PAGE_SIZE

    if not raw.isdigit() or int(raw) <= 0:
        raise RuntimeError(f"CATALOG_PAGE_SIZE must be a positive integer, got {raw!r}")

    return int(raw)

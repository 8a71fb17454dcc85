"""Engine and session lifecycle for the lecture database.

The engine is built on first use from DATABASE_URL, so importing the HTTP
app or the models never opens a connection.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from lecture_catalog.infra.config import database_url

logger = logging.getLogger(__name__)

POOL_OPTIONS: dict[str, Any] = {
    "pool_size": 5,
    "max_overflow": 10,
    "pool_pre_ping": True,
    "pool_recycle": 3600,
}

_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def get_engine() -> Engine:
    global _engine
    if _engine is None:
        _engine = create_engine(database_url(), **POOL_OPTIONS)
        logger.info("Lecture database engine created", extra={"dialect": _engine.dialect.name})
    return _engine


def session_factory() -> sessionmaker[Session]:
    """Session factory bound to the shared engine. Objects stay usable after commit."""
    global _session_factory
    if _session_factory is None:
        _session_factory = sessionmaker(bind=get_engine(), expire_on_commit=False)
    return _session_factory


def dispose_engine() -> None:
    """Close pooled connections and forget the engine (end of a script run)."""
    global _engine, _session_factory
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_factory = None


@contextmanager
def get_session() -> Iterator[Session]:
    """
    One unit of work: commit when the block finishes, roll back if it raises.

    Yields:
        Session: closed on exit either way
    """
    session = session_factory()()

    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()

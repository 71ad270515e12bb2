"""Database engine, session and startup utilities for BlinkShare."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterator, Optional, Union

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import URL, Engine
from sqlalchemy.orm import Session, sessionmaker

from .config import DATABASE_SCHEMA, Settings, get_settings


log = logging.getLogger("blinkshare.db")


def _register_sqlite_functions(engine: Engine) -> None:
    """Make SQLite enforce foreign keys and provide a Postgres-style ``now()``."""

    def _now() -> str:
        return datetime.now(timezone.utc).isoformat()

    @event.listens_for(engine, "connect")
    def _connect(dbapi_connection, _record) -> None:  # type: ignore[override]
        dbapi_connection.create_function("now", 0, _now)
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def create_engine_from_settings(
    settings: Optional[Settings] = None,
    url: Optional[Union[str, URL]] = None,
    echo: bool = False,
) -> Engine:
    """Create the pooled engine from settings or an explicit URL."""

    database_url = url or (settings or get_settings()).build_database_url()
    connect_args = {}
    if str(database_url).startswith("sqlite"):  # pragma: no branch - deterministic
        connect_args["check_same_thread"] = False
    else:
        connect_args["options"] = f"-csearch_path={DATABASE_SCHEMA}"
    engine = create_engine(database_url, echo=echo, pool_pre_ping=True, connect_args=connect_args)
    if engine.dialect.name == "sqlite":
        _register_sqlite_functions(engine)
    return engine


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Return a configured session factory for the provided engine."""

    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@contextmanager
def session_scope(session_factory: sessionmaker[Session]) -> Iterator[Session]:
    """Provide a transactional scope for DB operations."""

    session = session_factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


@dataclass
class DatabaseContext:
    """Process-wide database handles, built once at startup and passed around."""

    engine: Engine
    session_factory: sessionmaker[Session]

    @classmethod
    def from_engine(cls, engine: Engine) -> "DatabaseContext":
        return cls(engine=engine, session_factory=create_session_factory(engine))

    def session(self):
        return session_scope(self.session_factory)

    def dispose(self) -> None:
        self.engine.dispose()


def initialize_database(
    settings: Optional[Settings] = None,
    url: Optional[Union[str, URL]] = None,
) -> DatabaseContext:
    """Connect to the database and return the shared context.

    Connection and credential errors are logged and re-raised; the caller
    decides whether startup should abort.
    """

    try:
        engine = create_engine_from_settings(settings, url=url)
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except Exception:
        log.exception("Error during database initialization")
        raise
    log.info("Database connected successfully")
    return DatabaseContext.from_engine(engine)


__all__ = [
    "DatabaseContext",
    "create_engine_from_settings",
    "create_session_factory",
    "initialize_database",
    "session_scope",
]

"""Database engine setup for SQLite.

SQLAlchemy Core (not ORM): each request or CLI call is a short
``engine.begin()`` transaction, with nothing to gain from sessions or
identity maps.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from sixtydays.infrastructure.database.schema import metadata


def create_db_engine(db_path: Path | None) -> Engine:
    """Create a SQLite engine.

    A file database gets WAL journaling. ``db_path=None`` gives an
    in-memory database shared by every thread through a single connection,
    so the HTTP server's worker threads all see the same cards. Callers
    serialize use of that connection (see ``Workspace.transaction``).
    """
    if db_path is None:
        engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=False,
        )
        return engine

    engine = create_engine(
        f"sqlite:///{db_path}",
        connect_args={"check_same_thread": False},
        echo=False,
    )

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    return engine


def init_database(db_path: Path | None) -> Engine:
    """Create the parent directory and all tables, returning a ready engine.

    Idempotent: safe to call on an existing database.
    """
    if db_path is not None:
        db_path.parent.mkdir(parents=True, exist_ok=True)
    engine = create_db_engine(db_path)
    metadata.create_all(engine)
    return engine

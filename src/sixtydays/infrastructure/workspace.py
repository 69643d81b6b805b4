"""Workspace: the single dependency injected into every service.

Owns the settings plus lazily created resources: the cards database
engine and the PokeAPI client. Nothing is opened until a service asks
for it, so ``--help`` and pure exercises never touch disk or network.

Services reach the database only through :meth:`Workspace.transaction`
and :meth:`Workspace.connect`. An in-memory database is one shared
pysqlite connection, so those two hold a lock for its whole use; file
databases get a connection per thread and are not serialized.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager, nullcontext
from typing import TYPE_CHECKING

from sixtydays.infrastructure.database.engine import init_database
from sixtydays.infrastructure.pokeapi import PokeApiClient

if TYPE_CHECKING:
    from collections.abc import Iterator
    from contextlib import AbstractContextManager

    import httpx
    from sqlalchemy import Connection
    from sqlalchemy.engine import Engine

    from sixtydays.config.settings import SixtySettings

logger = logging.getLogger(__name__)


class Workspace:
    def __init__(
        self,
        settings: SixtySettings,
        *,
        pokeapi_transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.settings = settings
        self._engine: Engine | None = None
        self._pokeapi: PokeApiClient | None = None
        self._pokeapi_transport = pokeapi_transport
        self._open_lock = threading.Lock()
        self._memory_lock = threading.RLock()

    @property
    def engine(self) -> Engine:
        """Cards database engine, created (with tables) on first access."""
        if self._engine is None:
            with self._open_lock:
                if self._engine is None:
                    db_path = self.settings.database_path
                    logger.debug("Opening database %s", db_path or ":memory:")
                    self._engine = init_database(db_path)
        return self._engine

    def _db_guard(self) -> AbstractContextManager[object]:
        if self.settings.database_path is None:
            return self._memory_lock
        return nullcontext()

    @contextmanager
    def transaction(self) -> Iterator[Connection]:
        """One ``engine.begin()`` transaction: commit on success, rollback on error."""
        with self._db_guard(), self.engine.begin() as conn:
            yield conn

    @contextmanager
    def connect(self) -> Iterator[Connection]:
        """A read-only connection for queries."""
        with self._db_guard(), self.engine.connect() as conn:
            yield conn

    @property
    def pokeapi(self) -> PokeApiClient:
        if self._pokeapi is None:
            cfg = self.settings.pokedex
            self._pokeapi = PokeApiClient(
                cfg.base_url,
                timeout=cfg.timeout_seconds,
                user_agent=cfg.user_agent,
                transport=self._pokeapi_transport,
            )
        return self._pokeapi

    def close(self) -> None:
        """Release the engine and HTTP client if they were opened."""
        with self._memory_lock:
            if self._engine is not None:
                self._engine.dispose()
                self._engine = None
        if self._pokeapi is not None:
            self._pokeapi.close()
            self._pokeapi = None

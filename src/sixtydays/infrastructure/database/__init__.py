"""SQLite database engine and schema via SQLAlchemy Core."""

from sixtydays.infrastructure.database.engine import create_db_engine, init_database
from sixtydays.infrastructure.database.schema import cards, metadata

__all__ = [
    "cards",
    "create_db_engine",
    "init_database",
    "metadata",
]

"""SQLAlchemy Core table definitions for the sixtydays database."""

from __future__ import annotations

from sqlalchemy import Column, Index, Integer, MetaData, Table, Text

metadata = MetaData()

# AUTOINCREMENT keeps SQLite from reusing the id of a deleted card.
cards = Table(
    "cards",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("title", Text, nullable=False),
    Column("description", Text, nullable=False, default="", server_default=""),
    Column("url", Text),
    Column("created", Text, nullable=False),
    Column("modified", Text, nullable=False),
    sqlite_autoincrement=True,
)

Index("ix_cards_title", cards.c.title)

"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, sixtydays.toml only contains
overrides. An empty file (or none at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class FizzBuzzConfig(BaseModel):
    """[fizzbuzz] section."""

    model_config = {"frozen": True}

    timeout_seconds: float = 5.0
    max_count: int = Field(default=10_000, ge=1)


class PokedexConfig(BaseModel):
    """[pokedex] section."""

    model_config = {"frozen": True}

    base_url: str = "https://pokeapi.co/api/v2"
    timeout_seconds: float = 10.0
    user_agent: str = "sixtydays-pokedex/0.4"


class CardsConfig(BaseModel):
    """[cards] section.

    ``database`` is relative to the project root unless absolute.
    ``":memory:"`` keeps cards in an in-process SQLite database.
    """

    model_config = {"frozen": True}

    database: str = ".sixtydays/sixtydays.db"
    default_page_size: int = Field(default=50, ge=1)
    max_page_size: int = Field(default=200, ge=1)


class ServerConfig(BaseModel):
    """[server] section."""

    model_config = {"frozen": True}

    host: str = "127.0.0.1"
    port: int = 8000

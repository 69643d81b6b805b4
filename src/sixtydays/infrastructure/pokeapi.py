"""Blocking httpx client for PokeAPI.

One client per workspace: it centralises base URL, timeout and headers so
every lookup behaves the same, and tests swap in an
``httpx.MockTransport``.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class PokeApiError(Exception):
    """PokeAPI could not be reached or answered with an error."""


class PokemonNotFound(PokeApiError):
    """PokeAPI answered 404 for the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No Pokémon named {name!r}")
        self.name = name


def normalize_name(name: str) -> str:
    """PokeAPI names are lowercase and hyphenated."""
    return "-".join(name.strip().lower().split())


class PokeApiClient:
    """Thin wrapper over ``httpx.Client`` for the ``/pokemon`` endpoint."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        user_agent: str = "sixtydays",
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            timeout=httpx.Timeout(timeout),
            follow_redirects=True,
            headers={"User-Agent": user_agent, "Accept": "application/json"},
            transport=transport,
        )

    def fetch_pokemon(self, name: str) -> dict[str, Any]:
        """GET ``/pokemon/{name}`` and return the decoded JSON object.

        Raises:
            PokemonNotFound: PokeAPI answered 404.
            PokeApiError: Any other transport, HTTP or decoding failure.
        """
        slug = normalize_name(name)
        if not slug:
            raise PokemonNotFound(name)
        logger.debug("Fetching pokemon %s", slug)
        try:
            response = self._client.get(f"/pokemon/{slug}")
        except httpx.HTTPError as exc:
            msg = f"PokeAPI request failed: {exc}"
            raise PokeApiError(msg) from exc

        if response.status_code == httpx.codes.NOT_FOUND:
            raise PokemonNotFound(slug)
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            msg = f"PokeAPI returned {response.status_code} for {slug!r}"
            raise PokeApiError(msg) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            msg = f"PokeAPI returned invalid JSON for {slug!r}"
            raise PokeApiError(msg) from exc
        if not isinstance(payload, dict):
            msg = f"PokeAPI returned {type(payload).__name__}, expected an object"
            raise PokeApiError(msg)
        return payload

    def close(self) -> None:
        self._client.close()

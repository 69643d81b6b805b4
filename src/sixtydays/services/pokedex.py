"""PokedexService: day 6, one lookup against PokeAPI."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from sixtydays.domain.pokemon import Pokemon
from sixtydays.infrastructure.pokeapi import PokeApiError, PokemonNotFound
from sixtydays.services.base import BaseService
from sixtydays.services.result import ServiceResult
from sixtydays.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


class PokedexService(BaseService):
    @traced
    def lookup(self, name: str) -> ServiceResult:
        op = "pokedex"
        try:
            with trace_span("fetch"):
                payload = self._workspace.pokeapi.fetch_pokemon(name)
        except PokemonNotFound as exc:
            return ServiceResult.failure(op, "NOT_FOUND", str(exc), name=exc.name)
        except PokeApiError as exc:
            logger.warning("PokeAPI lookup failed for %s: %s", name, exc)
            return ServiceResult.failure(op, "UPSTREAM_ERROR", str(exc), name=name)

        try:
            pokemon = Pokemon.model_validate(payload)
        except ValidationError as exc:
            return ServiceResult.failure(
                op,
                "INVALID_RESPONSE",
                f"Unexpected PokeAPI response for {name!r}",
                errors=exc.error_count(),
            )
        return ServiceResult(ok=True, op=op, data=pokemon.summary())

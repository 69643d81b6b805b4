"""Shared pytest fixtures and test helpers for sixtydays tests."""

from __future__ import annotations

from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import httpx
import pytest
from click.testing import CliRunner

from sixtydays.config.settings import SixtySettings
from sixtydays.infrastructure.workspace import Workspace

PIKACHU: dict[str, Any] = {
    "id": 25,
    "name": "pikachu",
    "order": 35,
    "height": 4,
    "weight": 60,
    "base_experience": 112,
    "is_default": True,
    "location_area_encounters": "https://pokeapi.co/api/v2/pokemon/25/encounters",
    "species": {"name": "pikachu", "url": "https://pokeapi.co/api/v2/pokemon-species/25/"},
    "sprites": {
        "front_default": "https://img.example/pikachu.png",
        "back_default": None,
        "other": {"dream_world": {"front_default": None}},
    },
    "forms": [{"name": "pikachu", "url": "https://pokeapi.co/api/v2/pokemon-form/25/"}],
    "abilities": [
        {"ability": {"name": "lightning-rod", "url": ""}, "is_hidden": True, "slot": 3},
        {"ability": {"name": "static", "url": ""}, "is_hidden": False, "slot": 1},
    ],
    "stats": [
        {"base_stat": 35, "effort": 0, "stat": {"name": "hp", "url": ""}},
        {"base_stat": 90, "effort": 2, "stat": {"name": "speed", "url": ""}},
    ],
    "types": [{"slot": 1, "type": {"name": "electric", "url": ""}}],
    "moves": [
        {
            "move": {"name": "thunder-shock", "url": ""},
            "version_group_details": [
                {
                    "level_learned_at": 1,
                    "move_learn_method": {"name": "level-up", "url": ""},
                    "version_group": {"name": "red-blue", "url": ""},
                }
            ],
        }
    ],
    "held_items": [],
    "game_indices": [{"game_index": 84, "version": {"name": "red", "url": ""}}],
    "cries": {"latest": "https://example/cry.ogg"},
}


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's SIXTYDAYS_* environment out of the tests."""
    import os

    for key in list(os.environ):
        if key.startswith("SIXTYDAYS_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


def pokeapi_handler(
    payloads: dict[str, dict[str, Any]],
) -> Callable[[httpx.Request], httpx.Response]:
    """Fake PokeAPI answering ``/pokemon/{name}`` from *payloads*."""

    def handler(request: httpx.Request) -> httpx.Response:
        name = request.url.path.rstrip("/").rsplit("/", 1)[-1]
        if name in payloads:
            return httpx.Response(200, json=payloads[name])
        return httpx.Response(404, text="Not Found")

    return handler


@pytest.fixture
def settings(tmp_path: Path) -> SixtySettings:
    return SixtySettings.from_cli(root=tmp_path)


@pytest.fixture
def workspace(settings: SixtySettings) -> Generator[Workspace]:
    """Workspace on a temp directory with a fake PokeAPI."""
    ws = Workspace(
        settings,
        pokeapi_transport=httpx.MockTransport(pokeapi_handler({"pikachu": PIKACHU})),
    )
    try:
        yield ws
    finally:
        ws.close()


@pytest.fixture
def _isolated_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run the CLI from an empty temp directory so it gets its own database.

    Use via ``@pytest.mark.usefixtures("_isolated_root")``.
    """
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def create_card(workspace: Workspace, title: str, **fields: Any) -> dict[str, Any]:
    """Create a card via CardService, asserting success."""
    from sixtydays.services.cards import CardService

    result = CardService(workspace).create({"title": title, **fields})
    assert result.ok, result.error
    return result.data


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """``-v`` CLI runs switch telemetry on; switch it back off afterwards."""
    yield
    from sixtydays.services.telemetry import disable_telemetry

    disable_telemetry()

"""PokeAPI ``/pokemon/{name}`` response shape (day 6).

Only the parts the Pokédex shows are modelled; any other keys PokeAPI
returns are ignored.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class _Model(BaseModel):
    model_config = {"extra": "ignore", "frozen": True}


class NamedResource(_Model):
    name: str
    url: str = ""


class AbilitySlot(_Model):
    ability: NamedResource
    is_hidden: bool = False
    slot: int


class StatValue(_Model):
    stat: NamedResource
    base_stat: int
    effort: int = 0


class TypeSlot(_Model):
    slot: int
    type: NamedResource


class VersionGroupDetail(_Model):
    level_learned_at: int = 0
    move_learn_method: NamedResource
    version_group: NamedResource


class MoveEntry(_Model):
    move: NamedResource
    version_group_details: list[VersionGroupDetail] = Field(default_factory=list)


class GameIndex(_Model):
    game_index: int
    version: NamedResource


class HeldItem(_Model):
    item: NamedResource
    version_details: list[dict[str, Any]] = Field(default_factory=list)


class Sprites(_Model):
    front_default: str | None = None
    front_shiny: str | None = None
    front_female: str | None = None
    front_shiny_female: str | None = None
    back_default: str | None = None
    back_shiny: str | None = None
    back_female: str | None = None
    back_shiny_female: str | None = None


class Pokemon(_Model):
    """A single Pokémon as returned by PokeAPI."""

    id: int
    name: str
    order: int = 0
    height: int = 0
    weight: int = 0
    base_experience: int | None = None
    is_default: bool = True
    location_area_encounters: str = ""
    species: NamedResource | None = None
    sprites: Sprites = Field(default_factory=Sprites)
    forms: list[NamedResource] = Field(default_factory=list)
    abilities: list[AbilitySlot] = Field(default_factory=list)
    stats: list[StatValue] = Field(default_factory=list)
    types: list[TypeSlot] = Field(default_factory=list)
    moves: list[MoveEntry] = Field(default_factory=list)
    held_items: list[HeldItem] = Field(default_factory=list)
    game_indices: list[GameIndex] = Field(default_factory=list)

    def summary(self) -> dict[str, Any]:
        """Flat view used by the CLI and JSON output.

        Height is in decimetres and weight in hectograms, as PokeAPI reports them.
        """
        return {
            "id": self.id,
            "name": self.name,
            "height": self.height,
            "weight": self.weight,
            "base_experience": self.base_experience,
            "types": [t.type.name for t in sorted(self.types, key=lambda t: t.slot)],
            "abilities": [
                f"{a.ability.name} (hidden)" if a.is_hidden else a.ability.name
                for a in sorted(self.abilities, key=lambda a: a.slot)
            ],
            "stats": {s.stat.name: s.base_stat for s in self.stats},
            "moves_count": len(self.moves),
            "sprite": self.sprites.front_default,
        }

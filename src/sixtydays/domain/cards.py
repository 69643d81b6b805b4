"""Card models (days 11-13).

``CardIn`` validates create/replace payloads, ``CardPatch`` validates
partial updates, ``Card`` is what the store hands back. Unknown fields
are rejected on input.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, HttpUrl, StringConstraints, ValidationError, field_serializer

TITLE_MAX = 120
DESCRIPTION_MAX = 2000
# Largest integer a SQLite INTEGER column holds.
MAX_ID = 2**63 - 1

Title = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=TITLE_MAX)]
Description = Annotated[str, StringConstraints(max_length=DESCRIPTION_MAX)]


class CardIn(BaseModel):
    """Full card payload (POST, PUT)."""

    model_config = {"extra": "forbid", "frozen": True}

    title: Title
    description: Description = ""
    url: HttpUrl | None = None

    @field_serializer("url")
    def _url_as_str(self, url: HttpUrl | None) -> str | None:
        return str(url) if url is not None else None


class CardPatch(BaseModel):
    """Partial card payload (PATCH). Only fields actually sent are applied."""

    model_config = {"extra": "forbid", "frozen": True}

    title: Title | None = None
    description: Description | None = None
    url: HttpUrl | None = None

    @field_serializer("url")
    def _url_as_str(self, url: HttpUrl | None) -> str | None:
        return str(url) if url is not None else None

    def changes(self) -> dict[str, Any]:
        """The explicitly provided fields, JSON-ready."""
        return self.model_dump(exclude_unset=True)


class Card(BaseModel):
    """A stored card."""

    model_config = {"frozen": True}

    id: int
    title: str
    description: str = ""
    url: str | None = None
    created: str
    modified: str


def field_errors(exc: ValidationError) -> dict[str, str]:
    """Flatten a pydantic ValidationError into ``{field: message}``.

    Examples:
        >>> try:
        ...     CardIn.model_validate({"title": ""})
        ... except ValidationError as e:
        ...     sorted(field_errors(e))
        ['title']
    """
    out: dict[str, str] = {}
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"]) or "__root__"
        out.setdefault(loc, err["msg"])
    return out


def summarize_errors(fields: dict[str, str]) -> str:
    return "; ".join(f"{name}: {msg}" for name, msg in fields.items())

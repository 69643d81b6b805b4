"""CardService: days 11-13, CRUD over the cards table.

Pipeline per mutation: VALIDATE → APPLY → RESPOND. Each operation is one
``Workspace.transaction()``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError
from sqlalchemy import delete, func, insert, select, update

from sixtydays.domain.cards import Card, CardIn, CardPatch, field_errors, summarize_errors
from sixtydays.infrastructure.database.schema import cards
from sixtydays.services._helpers import clamp, now_iso
from sixtydays.services.base import BaseService
from sixtydays.services.result import ServiceResult
from sixtydays.services.telemetry import traced

if TYPE_CHECKING:
    from sqlalchemy import Connection
    from sqlalchemy.engine import Row

logger = logging.getLogger(__name__)


def _row_to_card(row: Row[Any]) -> Card:
    return Card(
        id=row.id,
        title=row.title,
        description=row.description,
        url=row.url,
        created=row.created,
        modified=row.modified,
    )


def _invalid(op: str, exc: ValidationError) -> ServiceResult:
    fields = field_errors(exc)
    return ServiceResult.failure(op, "VALIDATION_FAILED", summarize_errors(fields), fields=fields)


def _not_found(op: str, card_id: int) -> ServiceResult:
    return ServiceResult.failure(op, "NOT_FOUND", f"No card found with ID: {card_id}", id=card_id)


class CardService(BaseService):
    """Create, list, read, replace, patch and delete cards."""

    @traced
    def create(self, payload: Any) -> ServiceResult:
        op = "create_card"
        try:
            card_in = CardIn.model_validate(payload)
        except ValidationError as exc:
            return _invalid(op, exc)

        now = now_iso()
        values = {**card_in.model_dump(), "created": now, "modified": now}
        with self._workspace.transaction() as conn:
            result = conn.execute(insert(cards).values(**values))
            card_id = result.inserted_primary_key[0]
        logger.debug("Created card %s", card_id)
        return ServiceResult(ok=True, op=op, data=Card(id=card_id, **values).model_dump())

    @traced
    def list(self, *, offset: int = 0, limit: int | None = None) -> ServiceResult:
        """One page of cards ordered by id."""
        cfg = self.settings.cards
        if limit is None:
            limit = cfg.default_page_size
        limit = clamp(limit, 1, cfg.max_page_size)
        offset = max(offset, 0)

        with self._workspace.connect() as conn:
            total = conn.execute(select(func.count()).select_from(cards)).scalar_one()
            rows = conn.execute(
                select(cards).order_by(cards.c.id).offset(offset).limit(limit)
            ).all()

        items = [_row_to_card(row).model_dump() for row in rows]
        return ServiceResult(
            ok=True,
            op="list_cards",
            data={
                "items": items,
                "count": len(items),
                "total": total,
                "offset": offset,
                "limit": limit,
            },
        )

    @traced
    def get(self, card_id: int) -> ServiceResult:
        op = "get_card"
        with self._workspace.connect() as conn:
            row = conn.execute(select(cards).where(cards.c.id == card_id)).first()
        if row is None:
            return _not_found(op, card_id)
        return ServiceResult(ok=True, op=op, data=_row_to_card(row).model_dump())

    @traced
    def replace(self, card_id: int, payload: Any) -> ServiceResult:
        """Full update: every field not supplied goes back to its default."""
        op = "replace_card"
        try:
            card_in = CardIn.model_validate(payload)
        except ValidationError as exc:
            return _invalid(op, exc)
        return self._apply(op, card_id, card_in.model_dump())

    @traced
    def patch(self, card_id: int, changes: Any) -> ServiceResult:
        """Partial update: merge the supplied fields, then validate the whole card."""
        op = "patch_card"
        try:
            patch = CardPatch.model_validate(changes)
        except ValidationError as exc:
            return _invalid(op, exc)

        with self._workspace.transaction() as conn:
            row = conn.execute(select(cards).where(cards.c.id == card_id)).first()
            if row is None:
                return _not_found(op, card_id)
            current = _row_to_card(row)
            merged = {
                "title": current.title,
                "description": current.description,
                "url": current.url,
                **patch.changes(),
            }
            try:
                card_in = CardIn.model_validate(merged)
            except ValidationError as exc:
                return _invalid(op, exc)
            return self._write(op, conn, current, card_in.model_dump())

    @traced
    def delete(self, card_id: int) -> ServiceResult:
        op = "delete_card"
        with self._workspace.transaction() as conn:
            result = conn.execute(delete(cards).where(cards.c.id == card_id))
        if result.rowcount == 0:
            return _not_found(op, card_id)
        logger.debug("Deleted card %s", card_id)
        return ServiceResult(ok=True, op=op, data={"id": card_id})

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _apply(self, op: str, card_id: int, values: dict[str, Any]) -> ServiceResult:
        with self._workspace.transaction() as conn:
            row = conn.execute(select(cards).where(cards.c.id == card_id)).first()
            if row is None:
                return _not_found(op, card_id)
            return self._write(op, conn, _row_to_card(row), values)

    def _write(
        self,
        op: str,
        conn: Connection,
        current: Card,
        values: dict[str, Any],
    ) -> ServiceResult:
        modified = now_iso()
        conn.execute(
            update(cards).where(cards.c.id == current.id).values(**values, modified=modified)
        )
        fields_changed = sorted(
            key for key, value in values.items() if getattr(current, key) != value
        )
        card = current.model_copy(update={**values, "modified": modified})
        return ServiceResult(
            ok=True,
            op=op,
            data={**card.model_dump(), "fields_changed": fields_changed},
        )

"""Cards endpoints.

Each endpoint parses the request, calls CardService in the thread pool
(SQLAlchemy is blocking) and turns the ServiceResult into a JSON
response. Error bodies are ``{"errors": message, "code": CODE, "detail": {...}}``.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from sixtydays.domain.cards import MAX_ID
from sixtydays.services.cards import CardService
from sixtydays.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from sixtydays.infrastructure.workspace import Workspace

logger = logging.getLogger(__name__)

STATUS_BY_CODE: dict[str, int] = {
    "NOT_FOUND": 404,
    "VALIDATION_FAILED": 400,
    "INVALID_ID": 400,
    "INVALID_QUERY": 400,
    "INVALID_JSON": 422,
}

_CARD_KEYS = ("id", "title", "description", "url", "created", "modified")


class _BadRequest(Exception):
    def __init__(self, code: str, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.error = ServiceError(code=code, message=message, detail=detail)


def error_response(error: ServiceError) -> JSONResponse:
    status = STATUS_BY_CODE.get(error.code, 500)
    body = {"errors": error.message, "code": error.code, "detail": error.detail}
    return JSONResponse(body, status_code=status)


def _respond(result: ServiceResult, status_code: int = 200) -> Response:
    if not result.ok:
        assert result.error is not None
        return error_response(result.error)
    if status_code == 204:
        return Response(status_code=204)
    if result.op == "list_cards":
        return JSONResponse(result.data, status_code=status_code)
    card = {key: result.data.get(key) for key in _CARD_KEYS}
    return JSONResponse(card, status_code=status_code)


def _parse_count(raw: str) -> int | None:
    """Plain ASCII digits within SQLite's integer range, else None."""
    if not (raw.isascii() and raw.isdigit()):
        return None
    value = int(raw)
    return value if value <= MAX_ID else None


def _card_id(request: Request) -> int:
    raw = request.path_params["card_id"]
    card_id = _parse_count(raw)
    if card_id is None:
        msg = f"Card ID must be an integer between 0 and {MAX_ID}, got {raw!r}"
        raise _BadRequest("INVALID_ID", msg)
    return card_id


def _int_param(request: Request, name: str) -> int | None:
    raw = request.query_params.get(name)
    if raw is None:
        return None
    value = _parse_count(raw)
    if value is None:
        msg = f"Query parameter {name!r} must be an integer between 0 and {MAX_ID}"
        msg += f", got {raw!r}"
        raise _BadRequest("INVALID_QUERY", msg, param=name)
    return value


async def _json_object(request: Request) -> dict[str, Any]:
    body = await request.body()
    try:
        payload = json.loads(body)
    except ValueError as exc:
        raise _BadRequest("INVALID_JSON", f"Request body is not valid JSON: {exc}") from None
    if not isinstance(payload, dict):
        raise _BadRequest("INVALID_JSON", "Request body must be a JSON object")
    return payload


class CardEndpoints:
    """Route handlers bound to one workspace."""

    def __init__(self, workspace: Workspace) -> None:
        self._service = CardService(workspace)

    async def collection(self, request: Request) -> Response:
        try:
            if request.method == "POST":
                payload = await _json_object(request)
                result = await run_in_threadpool(self._service.create, payload)
                return _respond(result, 201)
            offset = _int_param(request, "offset") or 0
            limit = _int_param(request, "limit")
        except _BadRequest as exc:
            return error_response(exc.error)
        result = await run_in_threadpool(self._service.list, offset=offset, limit=limit)
        return _respond(result)

    async def item(self, request: Request) -> Response:
        try:
            card_id = _card_id(request)
            if request.method == "GET":
                return _respond(await run_in_threadpool(self._service.get, card_id))
            if request.method == "DELETE":
                return _respond(await run_in_threadpool(self._service.delete, card_id), 204)
            payload = await _json_object(request)
        except _BadRequest as exc:
            return error_response(exc.error)

        if request.method == "PUT":
            result = await run_in_threadpool(self._service.replace, card_id, payload)
        else:
            result = await run_in_threadpool(self._service.patch, card_id, payload)
        return _respond(result)


def card_routes(workspace: Workspace) -> list[Route]:
    endpoints = CardEndpoints(workspace)
    return [
        Route("/cards", endpoints.collection, methods=["GET", "POST"]),
        Route(
            "/cards/{card_id}",
            endpoints.item,
            methods=["GET", "PUT", "PATCH", "DELETE"],
        ),
    ]

"""serve: run the cards REST API with uvicorn."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from sixtydays.commands._base import SixtyCommand

if TYPE_CHECKING:
    from sixtydays.commands._context import AppContext


@click.command(
    cls=SixtyCommand,
    examples="""\
  # Serve on the configured [server] address (127.0.0.1:8000 by default)
  sixtydays serve

  # Listen on all interfaces
  sixtydays serve --host 0.0.0.0 --port 9000

  # Then, from another shell
  curl -X POST localhost:8000/cards -d '{"title": "Learn starlette"}'""",
)
@click.option("--host", default=None, help="Bind address (default: [server] host).")
@click.option("--port", default=None, type=int, help="Listen port (default: [server] port).")
@click.pass_obj
def serve(app: AppContext, host: str | None, port: int | None) -> None:
    """Serve GET/POST /cards and GET/PUT/PATCH/DELETE /cards/{id}."""
    import uvicorn

    from sixtydays.api.server import create_app

    cfg = app.settings.server
    asgi_app = create_app(app.workspace)
    uvicorn.run(
        asgi_app,
        host=cfg.host if host is None else host,
        port=cfg.port if port is None else port,
        log_config=None,
    )

from __future__ import annotations

import contextlib
from http import HTTPStatus
from typing import TYPE_CHECKING

import structlog
from starlette.applications import Starlette
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from roster.server.middleware import AccessLogMiddleware
from roster.server.settings import RosterServerSettings
from roster.views import (
    InvalidBodyError,
    create_player,
    delete_player,
    get_player,
    list_players,
    update_player,
)
from shared.dal import PlayerNotFoundError, StorageError
from shared.db import Database, SqlitePlayerRepository
from shared.logging import setup_logging

logger = structlog.get_logger()

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from starlette.requests import Request

    from shared.dal import PlayerRepository


async def _not_found_handler(request: Request, exc: Exception) -> Response:
    logger.info("player not found", path=request.url.path, error=str(exc))
    return Response(status_code=HTTPStatus.NOT_FOUND)


async def _storage_error_handler(request: Request, exc: Exception) -> Response:
    """Log the storage failure server-side; the client only sees a bare 500."""
    logger.error("storage failure", method=request.method, path=request.url.path, exc_info=exc)
    return Response(status_code=HTTPStatus.INTERNAL_SERVER_ERROR)


async def _invalid_body_handler(_request: Request, _exc: Exception) -> Response:
    return JSONResponse({"error": "Invalid JSON body"}, status_code=HTTPStatus.BAD_REQUEST)


async def health(_request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


def create_app(
    settings: RosterServerSettings | None = None,
    player_repository: PlayerRepository | None = None,
) -> Starlette:
    if settings is None:  # pragma: no cover
        settings = RosterServerSettings()

    # When the app creates its own repository, it owns the DB lifecycle.
    owned_db: Database | None = None

    if player_repository is None:
        owned_db = Database(settings.database_path)
        owned_db.connect()
        player_repository = SqlitePlayerRepository(owned_db)

    routes = [
        Route("/health", health, methods=["GET"], name="health"),
        Route("/players", list_players, methods=["GET"], name="list_players"),
        Route("/players", create_player, methods=["POST"], name="create_player"),
        Route("/players/{player_id}", get_player, methods=["GET"], name="get_player"),
        Route("/players/{player_id}", update_player, methods=["PUT"], name="update_player"),
        Route("/players/{player_id}", delete_player, methods=["DELETE"], name="delete_player"),
    ]

    @contextlib.asynccontextmanager
    async def lifespan(_app: Starlette) -> AsyncGenerator[None]:
        yield
        logger.info("roster server shutting down")
        if owned_db is not None:
            owned_db.close()

    # PlayerNotFoundError subclasses StorageError; Starlette picks the most specific handler.
    app = Starlette(
        routes=routes,
        lifespan=lifespan,
        exception_handlers={
            PlayerNotFoundError: _not_found_handler,
            StorageError: _storage_error_handler,
            InvalidBodyError: _invalid_body_handler,
        },
    )
    app.add_middleware(AccessLogMiddleware)  # type: ignore[arg-type]

    app.state.settings = settings
    app.state.db = owned_db
    app.state.player_repository = player_repository

    logger.info("roster server ready", strict_json=settings.strict_json)
    return app


def get_app() -> Starlette:  # pragma: no cover
    """Factory function for uvicorn --factory roster.server.app:get_app."""
    settings = RosterServerSettings()
    setup_logging(log_dir=settings.log_dir)
    return create_app(settings=settings)

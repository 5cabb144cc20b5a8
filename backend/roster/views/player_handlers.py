"""Player resource handlers: list, get, create, update, delete."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

import structlog
from starlette.responses import JSONResponse

from roster.views.body import DecodedBody, decode_player_body
from shared.dal import Player

if TYPE_CHECKING:
    from starlette.requests import Request

    from shared.dal import PlayerRepository

logger = structlog.get_logger()


def _repository(request: Request) -> PlayerRepository:
    return request.app.state.player_repository


async def _decode_body(request: Request) -> DecodedBody:
    decoded = decode_player_body(await request.body(), strict=request.app.state.settings.strict_json)
    if not decoded.well_formed:
        logger.info("request body is not a JSON object, using defaults", path=request.url.path)
    if decoded.rejected:
        logger.info("ignoring fields with unusable values", fields=list(decoded.rejected))
    return decoded


async def list_players(request: Request) -> JSONResponse:
    """GET /players"""
    players = await _repository(request).list_players()
    return JSONResponse([player.model_dump() for player in players])


async def get_player(request: Request) -> JSONResponse:
    """GET /players/{player_id}"""
    player = await _repository(request).get_player(request.path_params["player_id"])
    return JSONResponse(player.model_dump())


async def create_player(request: Request) -> JSONResponse:
    """POST /players — the id is always generated here, never taken from the body."""
    decoded = await _decode_body(request)
    player = decoded.apply_to(Player(id=str(uuid.uuid4())))
    await _repository(request).create_player(player)
    logger.info("player created", player_id=player.id)
    return JSONResponse(player.model_dump())


async def update_player(request: Request) -> JSONResponse:
    """PUT /players/{player_id}

    The stored record is loaded first so an unknown id yields 404 before any
    write. Body fields are overlaid onto it; the stored id is kept.
    """
    repository = _repository(request)
    existing = await repository.get_player(request.path_params["player_id"])
    decoded = await _decode_body(request)
    player = decoded.apply_to(existing)
    await repository.update_player(player)
    logger.info("player updated", player_id=player.id, fields=sorted(decoded.values))
    return JSONResponse(player.model_dump())


async def delete_player(request: Request) -> JSONResponse:
    """DELETE /players/{player_id} — succeeds whether or not the player existed."""
    player_id: str = request.path_params["player_id"]
    removed = await _repository(request).delete_player(player_id)
    logger.info("player delete", player_id=player_id, rows_removed=removed)
    return JSONResponse({f"id #{player_id}": "deleted"})

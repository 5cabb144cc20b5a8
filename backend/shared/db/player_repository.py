"""SQLite-backed player repository."""

from __future__ import annotations

import sqlite3
from typing import TYPE_CHECKING

import structlog
from pydantic import ValidationError

from shared.dal import PLAYER_FIELDS, Player, PlayerNotFoundError, PlayerRepository, StorageError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from shared.db.connection import Database

logger = structlog.get_logger()

_COLUMNS = ", ".join(PLAYER_FIELDS)


def _row_to_player(row: Sequence[object]) -> Player:
    try:
        return Player.model_validate(dict(zip(PLAYER_FIELDS, row, strict=True)))
    except ValidationError as exc:
        raise StorageError(f"Stored player row is not usable: id={row[0]!r}") from exc


class SqlitePlayerRepository(PlayerRepository):
    """SQLite implementation of PlayerRepository.

    Each write runs to commit or rollback without yielding to the event loop.
    Every sqlite3 failure, and any stored row that does not fit Player, surfaces
    as StorageError.
    """

    def __init__(self, db: Database) -> None:
        self._db = db

    async def list_players(self) -> list[Player]:
        """Return every stored player in insertion order."""
        conn = self._db.connection
        try:
            rows = conn.execute(f"SELECT {_COLUMNS} FROM players ORDER BY rowid").fetchall()  # noqa: S608
        except sqlite3.Error as exc:
            raise StorageError("Failed to list players") from exc
        return [_row_to_player(row) for row in rows]

    async def get_player(self, player_id: str) -> Player:
        conn = self._db.connection
        try:
            row = conn.execute(
                f"SELECT {_COLUMNS} FROM players WHERE id = ?",  # noqa: S608
                (player_id,),
            ).fetchone()
        except sqlite3.Error as exc:
            raise StorageError(f"Failed to load player '{player_id}'") from exc
        if row is None:
            raise PlayerNotFoundError(player_id)
        return _row_to_player(row)

    async def create_player(self, player: Player) -> None:
        """Insert a player. Raises StorageError on duplicate id or write failure."""
        conn = self._db.connection
        try:
            conn.execute(
                f"INSERT INTO players ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?)",  # noqa: S608
                (player.id, player.name, player.team, player.points, player.assists, player.rebounds),
            )
            conn.commit()
        except sqlite3.Error as exc:
            conn.rollback()
            if isinstance(exc, sqlite3.IntegrityError):
                raise StorageError(f"Player with id '{player.id}' already exists") from exc
            raise StorageError(f"Failed to insert player '{player.id}'") from exc

    async def update_player(self, player: Player) -> None:
        conn = self._db.connection
        try:
            cursor = conn.execute(
                "UPDATE players SET name = ?, team = ?, points = ?, assists = ?, rebounds = ? WHERE id = ?",
                (player.name, player.team, player.points, player.assists, player.rebounds, player.id),
            )
            conn.commit()
        except sqlite3.Error as exc:
            conn.rollback()
            raise StorageError(f"Failed to update player '{player.id}'") from exc
        if cursor.rowcount == 0:
            logger.warning("update matched no rows", player_id=player.id)

    async def delete_player(self, player_id: str) -> int:
        conn = self._db.connection
        try:
            cursor = conn.execute("DELETE FROM players WHERE id = ?", (player_id,))
            conn.commit()
        except sqlite3.Error as exc:
            conn.rollback()
            raise StorageError(f"Failed to delete player '{player_id}'") from exc
        return cursor.rowcount

"""Abstract interface for player persistence."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shared.dal.models import Player


class StorageError(Exception):
    """Any failure opening, querying, or writing the player store."""


class PlayerNotFoundError(StorageError):
    """No stored player matches the requested id."""

    def __init__(self, player_id: str) -> None:
        super().__init__(f"Player '{player_id}' not found")
        self.player_id = player_id


class PlayerRepository(ABC):
    """Abstract interface for player persistence.

    Implementations can use SQLite, PostgreSQL, etc.
    """

    @abstractmethod
    async def list_players(self) -> list[Player]: ...

    @abstractmethod
    async def get_player(self, player_id: str) -> Player:
        """Return the stored player or raise PlayerNotFoundError."""

    @abstractmethod
    async def create_player(self, player: Player) -> None: ...

    @abstractmethod
    async def update_player(self, player: Player) -> None:
        """Overwrite the stored row for player.id. A missing row is a no-op."""

    @abstractmethod
    async def delete_player(self, player_id: str) -> int:
        """Remove the player if present and return the number of rows removed."""

"""Data access layer: repository interfaces and shared persistence models."""

from shared.dal.models import PLAYER_FIELDS, Player
from shared.dal.player_repository import PlayerNotFoundError, PlayerRepository, StorageError

__all__ = [
    "PLAYER_FIELDS",
    "Player",
    "PlayerNotFoundError",
    "PlayerRepository",
    "StorageError",
]

"""Persistence models for the data access layer."""

from pydantic import BaseModel

PLAYER_FIELDS = ("id", "name", "team", "points", "assists", "rebounds")


class Player(BaseModel, frozen=True):
    """Basketball player record as stored and served over the API."""

    id: str
    name: str = ""
    team: str = ""
    points: int = 0
    assists: int = 0
    rebounds: int = 0

"""Roster server configuration via environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings


class RosterServerSettings(BaseSettings):
    model_config = {"env_prefix": "ROSTER_"}

    # SQLite file holding the players table; created on first start
    database_path: str = Field(default="basketball.db", min_length=1)
    host: str = "0.0.0.0"  # noqa: S104
    port: int = Field(default=8080, ge=1, le=65535)
    log_dir: str | None = None

    # Reject structurally invalid JSON bodies with 400 instead of decoding them as empty
    strict_json: bool = False

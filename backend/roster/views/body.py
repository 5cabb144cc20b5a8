"""Request body decoding for player create/update.

Decoding is permissive: anything that is not a usable value for a known field
is dropped rather than rejected, so a broken body behaves like an empty one.
Strict mode only tightens the structural check (the body must be a JSON object).
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from shared.dal import Player

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_STRING_FIELDS = ("name", "team")
_INTEGER_FIELDS = ("points", "assists", "rebounds")
_FIELDS_BY_FOLDED_NAME = {name.casefold(): name for name in (*_STRING_FIELDS, *_INTEGER_FIELDS)}


class InvalidBodyError(ValueError):
    """Request body is not a JSON object (raised in strict mode only)."""


class _UnparseableInt:
    """Stands in for an integer literal too long to convert; never accepted for any field."""


_UNPARSEABLE_INT = _UnparseableInt()


def _parse_int(literal: str) -> int | _UnparseableInt:
    try:
        return int(literal)
    except ValueError:
        return _UNPARSEABLE_INT


@dataclass(frozen=True)
class DecodedBody:
    """Field values accepted from a request body."""

    values: dict[str, str | int] = field(default_factory=dict)
    rejected: tuple[str, ...] = ()  # known fields present with an unusable value
    well_formed: bool = True  # False when the body was empty, invalid JSON, or not an object

    def apply_to(self, player: Player) -> Player:
        """Overlay the accepted values onto player. The id is never part of values."""
        return player.model_copy(update=self.values)


def _resolve_field(key: str) -> str | None:
    if key in _FIELDS_BY_FOLDED_NAME.values():
        return key
    return _FIELDS_BY_FOLDED_NAME.get(key.casefold())


def _accepts(field_name: str, value: Any) -> bool:  # noqa: ANN401
    if field_name in _STRING_FIELDS:
        return isinstance(value, str)
    # bool is an int subclass but not a JSON number
    return isinstance(value, int) and not isinstance(value, bool) and _INT64_MIN <= value <= _INT64_MAX


def decode_player_body(raw: bytes, *, strict: bool = False) -> DecodedBody:
    """Decode a player JSON body into the values it can contribute.

    Keys match field names exactly or case-insensitively; later keys win.
    Unknown keys and "id" are ignored. Raises InvalidBodyError only when strict
    is set and the body is not a JSON object.
    """
    try:
        data = json.loads(raw, parse_int=_parse_int) if raw.strip() else None
    except (ValueError, UnicodeDecodeError, RecursionError):
        data = None

    if not isinstance(data, dict):
        if strict:
            raise InvalidBodyError("Request body must be a JSON object")
        return DecodedBody(well_formed=False)

    values: dict[str, str | int] = {}
    rejected: list[str] = []
    for key, value in data.items():
        field_name = _resolve_field(key)
        if field_name is None:
            continue
        if _accepts(field_name, value):
            values[field_name] = value
        elif field_name not in rejected:
            rejected.append(field_name)

    return DecodedBody(values=values, rejected=tuple(rejected))

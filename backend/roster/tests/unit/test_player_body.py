"""Tests for permissive player body decoding."""

import json

import pytest

from roster.views.body import DecodedBody, InvalidBodyError, decode_player_body
from shared.dal import Player


def _decode(payload: object) -> DecodedBody:
    return decode_player_body(json.dumps(payload).encode())


class TestWellFormedBodies:
    def test_full_body(self):
        decoded = _decode({"name": "LeBron", "team": "Lakers", "points": 27, "assists": 8, "rebounds": 7})
        assert decoded.well_formed
        assert decoded.values == {"name": "LeBron", "team": "Lakers", "points": 27, "assists": 8, "rebounds": 7}
        assert decoded.rejected == ()

    def test_id_is_ignored(self):
        decoded = _decode({"id": "client-chosen", "name": "LeBron"})
        assert decoded.values == {"name": "LeBron"}

    def test_unknown_keys_are_ignored(self):
        decoded = _decode({"jersey": 23, "points": 10})
        assert decoded.values == {"points": 10}

    def test_keys_match_case_insensitively(self):
        decoded = _decode({"Name": "LeBron", "POINTS": 27})
        assert decoded.values == {"name": "LeBron", "points": 27}

    def test_later_key_wins(self):
        decoded = decode_player_body(b'{"name": "first", "NAME": "second"}')
        assert decoded.values == {"name": "second"}

    def test_empty_object(self):
        decoded = _decode({})
        assert decoded.well_formed
        assert decoded.values == {}


class TestWrongTypedFields:
    @pytest.mark.parametrize(
        "payload",
        [
            {"points": "27"},
            {"points": 27.5},
            {"points": True},
            {"points": None},
            {"points": 2**63},
            {"name": 23},
            {"team": ["Lakers"]},
        ],
    )
    def test_unusable_values_are_skipped(self, payload):
        decoded = _decode(payload)
        assert decoded.values == {}
        assert decoded.rejected == tuple(payload)

    def test_int64_bounds_are_accepted(self):
        decoded = _decode({"points": 2**63 - 1, "assists": -(2**63)})
        assert decoded.values == {"points": 2**63 - 1, "assists": -(2**63)}

    def test_oversized_integer_literal_rejects_only_that_field(self):
        decoded = decode_player_body(b'{"name": "LeBron", "points": ' + b"9" * 5000 + b"}")
        assert decoded.well_formed
        assert decoded.values == {"name": "LeBron"}
        assert decoded.rejected == ("points",)

    def test_oversized_integer_literal_is_not_taken_as_a_string(self):
        decoded = decode_player_body(b'{"name": ' + b"9" * 5000 + b', "team": "Lakers"}')
        assert decoded.values == {"team": "Lakers"}
        assert decoded.rejected == ("name",)

    def test_oversized_integer_literal_is_not_a_structural_error_in_strict_mode(self):
        decoded = decode_player_body(b'{"team": "Heat", "assists": -' + b"1" * 5000 + b"}", strict=True)
        assert decoded.values == {"team": "Heat"}
        assert decoded.rejected == ("assists",)

    def test_valid_fields_survive_alongside_invalid_ones(self):
        decoded = _decode({"name": "LeBron", "points": "lots"})
        assert decoded.values == {"name": "LeBron"}
        assert decoded.rejected == ("points",)


class TestMalformedBodies:
    @pytest.mark.parametrize("raw", [b"", b"   ", b"{not json", b"[1, 2]", b'"LeBron"', b"\xff\xfe\x00"])
    def test_decodes_to_empty_result(self, raw):
        decoded = decode_player_body(raw)
        assert not decoded.well_formed
        assert decoded.values == {}

    def test_deeply_nested_body_decodes_to_empty_result(self):
        decoded = decode_player_body(b'{"name": "LeBron", "team": ' + b"[" * 100_000 + b"]" * 100_000 + b"}")
        assert not decoded.well_formed
        assert decoded.values == {}

    @pytest.mark.parametrize("raw", [b"", b"{not json", b"[]", b"[" * 100_000 + b"]" * 100_000])
    def test_strict_mode_raises(self, raw):
        with pytest.raises(InvalidBodyError):
            decode_player_body(raw, strict=True)

    def test_strict_mode_still_skips_wrong_typed_fields(self):
        decoded = decode_player_body(b'{"points": "x", "team": "Heat"}', strict=True)
        assert decoded.values == {"team": "Heat"}


class TestApplyTo:
    def test_overlays_onto_base_and_keeps_id(self):
        base = Player(id="p1", name="LeBron", team="Lakers", points=10, assists=8, rebounds=7)
        merged = _decode({"points": 20, "id": "other"}).apply_to(base)
        assert merged == Player(id="p1", name="LeBron", team="Lakers", points=20, assists=8, rebounds=7)

    def test_empty_body_leaves_base_unchanged(self):
        base = Player(id="p1", name="LeBron")
        assert decode_player_body(b"").apply_to(base) == base

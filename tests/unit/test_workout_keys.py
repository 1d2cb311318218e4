"""
Unit tests for domain/workout_keys.py (synthetic workout key codec).
"""

import pytest

from domain.exceptions import InvalidWorkoutKeyError
from domain.workout_keys import (
    decode_workout_key,
    encode_workout_key,
    try_decode_workout_key,
)

pytestmark = pytest.mark.unit


class TestEncodeWorkoutKey:
    def test_encodes_in_week_day_workout_order(self):
        assert encode_workout_key(0, 1, 0) == "w:0-1-0"
        assert encode_workout_key(12, 3, 7) == "w:12-3-7"

    def test_negative_components(self):
        assert encode_workout_key(-1, 0, 2) == "w:-1-0-2"


class TestDecodeWorkoutKey:
    @pytest.mark.parametrize(
        "triple",
        [(0, 0, 0), (0, 1, 0), (3, 6, 12), (-1, 2, -3), (10**6, 0, 42)],
    )
    def test_decode_inverts_encode(self, triple):
        assert decode_workout_key(encode_workout_key(*triple)) == triple

    @pytest.mark.parametrize(
        "key",
        [
            "",
            "w:",
            "0-1-0",
            "x:0-1-0",
            "w:0-1",
            "w:0-1-0-4",
            "w:a-1-0",
            "w:0-1-0\n",
            " w:0-1-0",
            "w:0--1",
            "W:0-1-0",
        ],
    )
    def test_rejects_malformed_keys(self, key):
        with pytest.raises(InvalidWorkoutKeyError) as exc_info:
            decode_workout_key(key)
        assert exc_info.value.key == key

    def test_rejects_non_string(self):
        with pytest.raises(InvalidWorkoutKeyError):
            decode_workout_key(123)

    def test_invalid_key_is_a_value_error(self):
        with pytest.raises(ValueError):
            decode_workout_key("nope")


class TestTryDecodeWorkoutKey:
    def test_returns_triple_for_valid_key(self):
        assert try_decode_workout_key("w:2-0-1") == (2, 0, 1)

    def test_returns_none_for_missing_or_invalid(self):
        assert try_decode_workout_key(None) is None
        assert try_decode_workout_key("garbage") is None

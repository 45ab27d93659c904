# tests/test_utils.py

from datetime import datetime, timedelta, timezone
from actor_keys import ActorKind, KeyRecord, format_expiration, parse_expiration
from actor_keys.utils import colon_hex, compact_json


def test_format_expiration_utc():
    when = datetime(2020, 12, 24, 21, 0, 0, tzinfo=timezone.utc)
    assert format_expiration(when) == "2020-12-24T21:00:00Z"


def test_format_expiration_converts_to_utc():
    when = datetime(2020, 12, 24, 23, 0, 0, tzinfo=timezone(timedelta(hours=2)))
    assert format_expiration(when) == "2020-12-24T21:00:00Z"


def test_format_expiration_none_is_infinity():
    assert format_expiration(None) == "infinity"


def test_formatted_expiration_is_accepted_by_key():
    key = KeyRecord(ActorKind.USER, "alice")
    value = format_expiration(datetime(2031, 1, 2, 3, 4, 5))
    assert key.set_expiration_date(value) == "2031-01-02T03:04:05Z"


def test_parse_expiration():
    assert parse_expiration("infinity") is None
    assert parse_expiration("2020-12-24T21:00:00Z") == datetime(2020, 12, 24, 21, 0, 0, tzinfo=timezone.utc)


def test_colon_hex():
    assert colon_hex(b"\x00\x0f\xab") == "00:0f:ab"


def test_compact_json_keeps_insertion_order():
    assert compact_json({"user": "a", "name": "b"}) == '{"user":"a","name":"b"}'

import pytest
from pydantic import ValidationError

from statwatch.core.exceptions import FormatError, NumberError, ParseError
from statwatch.core.models import MetricsSnapshot
from statwatch.services.parser import parse_field, parse_snapshot


def test_fields_map_positionally():
    snapshot = parse_snapshot("25,16000,8000,500000,100000,100000,50000")

    assert snapshot.cpu_load == 25
    assert snapshot.memory_capacity == 16000
    assert snapshot.memory_usage == 8000
    assert snapshot.disk_capacity == 500000
    assert snapshot.disk_usage == 100000
    assert snapshot.network_capacity == 100000
    assert snapshot.network_activity == 50000

@pytest.mark.parametrize("payload", [
    "0,0,0,0,0,0,0",
    "95,1000,999,1000,999,1000,999",
    "1,17179869184,8589934592,1099511627776,549755813888,125000000,1000",
])
def test_parse_is_lossless(payload):
    assert parse_snapshot(payload).to_payload() == payload

@pytest.mark.parametrize("payload, bad_field", [
    ("1,2,3,4,5,6,7\n", "7\n"),
    ("1,2,3,4,5,6,7\r\n", "7\r\n"),
])
def test_trailing_line_terminator_is_rejected(payload, bad_field):
    with pytest.raises(NumberError) as exc_info:
        parse_snapshot(payload)

    assert exc_info.value.field == bad_field

@pytest.mark.parametrize("payload, count", [
    ("", 1),
    ("1,2,3,4,5,6", 6),
    ("1,2,3,4,5,6,7,8", 8),
    ("1,2,3,4,5,6,7,", 8),
])
def test_wrong_field_count(payload, count):
    with pytest.raises(FormatError) as exc_info:
        parse_snapshot(payload)

    assert exc_info.value.field_count == count
    assert exc_info.value.expected == 7

@pytest.mark.parametrize("payload, bad_field", [
    ("25,16000,abc,500000,100000,100000,50000", "abc"),
    ("25,16000,8000,500000,100000,100000,", ""),
    ("25, 16000,8000,500000,100000,100000,50000", " 16000"),
    ("-1,16000,8000,500000,100000,100000,50000", "-1"),
    ("25,16000,8000,5.5,100000,100000,50000", "5.5"),
    ("25,16_000,8000,500000,100000,100000,50000", "16_000"),
])
def test_non_numeric_field(payload, bad_field):
    with pytest.raises(NumberError) as exc_info:
        parse_snapshot(payload)

    assert exc_info.value.field == bad_field

def test_first_bad_field_is_reported():
    with pytest.raises(NumberError) as exc_info:
        parse_snapshot("x,1,2,3,y,5,6")

    assert exc_info.value.field == "x"

def test_parse_errors_share_a_base():
    assert issubclass(FormatError, ParseError)
    assert issubclass(NumberError, ParseError)

def test_parse_field():
    assert parse_field("0") == 0
    assert parse_field("007") == 7
    with pytest.raises(NumberError):
        parse_field("+7")

def test_snapshot_is_immutable():
    snapshot = parse_snapshot("1,2,3,4,5,6,7")

    with pytest.raises(ValidationError):
        snapshot.cpu_load = 99

def test_snapshot_rejects_negative_values():
    with pytest.raises(ValidationError):
        MetricsSnapshot.from_values([1, 2, 3, 4, 5, 6, -7])

from datetime import date

import pytest

from src.domain.errors import QueryValidationError
from src.domain.stay_dates import parse_date, parse_stay, resolve_stay


def test_missing_checkout_defaults_to_next_day():
    assert parse_stay("2024-01-15") == (date(2024, 1, 15), date(2024, 1, 16))


def test_checkout_before_checkin_rejected():
    with pytest.raises(QueryValidationError) as excinfo:
        parse_stay("2024-01-16", "2024-01-15")
    assert excinfo.value.error == "Invalid date range"


def test_same_day_checkout_rejected():
    with pytest.raises(QueryValidationError):
        parse_stay("2024-01-15", "2024-01-15")


def test_unparseable_checkout_defaults_to_next_day():
    assert parse_stay("2024-01-15", "next tuesday") == (date(2024, 1, 15), date(2024, 1, 16))


def test_month_end_rollover():
    assert parse_stay("2024-02-29")[1] == date(2024, 3, 1)


@pytest.mark.parametrize("raw", [None, ""])
def test_missing_checkin_rejected(raw):
    with pytest.raises(QueryValidationError) as excinfo:
        parse_stay(raw)
    assert "Missing" in excinfo.value.error


@pytest.mark.parametrize("raw", ["2024-13-01", "not-a-date", "15/01/2024"])
def test_malformed_checkin_rejected(raw):
    with pytest.raises(QueryValidationError) as excinfo:
        parse_stay(raw)
    assert excinfo.value.error == "Invalid checkIn date format"


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("2024-01-15", date(2024, 1, 15)),
        ("2024-01-15T10:30:00", date(2024, 1, 15)),
        ("2024-01-15T10:30:00Z", date(2024, 1, 15)),
        (" 2024-01-15 ", date(2024, 1, 15)),
        ("garbage", None),
        ("   ", None),
    ],
)
def test_parse_date(raw, expected):
    assert parse_date(raw) == expected


def test_resolve_stay_keeps_valid_range():
    assert resolve_stay(date(2024, 5, 1), date(2024, 5, 3)) == (date(2024, 5, 1), date(2024, 5, 3))


def test_offset_datetime_uses_utc_date():
    assert parse_date("2024-01-15T23:00:00-05:00") == date(2024, 1, 16)
    assert parse_stay("2024-01-15T23:00:00-05:00") == (date(2024, 1, 16), date(2024, 1, 17))

from datetime import date, datetime, timezone

import pytest

from parsers.date_parser import parse_date


def test_iso_date():
    assert parse_date("2010-01-01") == date(2010, 1, 1)


def test_iso_timestamp_keeps_calendar_date():
    assert parse_date("2015-03-04T00:00:00.000Z") == date(2015, 3, 4)


def test_day_month_year_slashes():
    assert parse_date("04/03/2015") == date(2015, 3, 4)


def test_day_month_year_dashes():
    assert parse_date("4-3-2015") == date(2015, 3, 4)


def test_strips_whitespace():
    assert parse_date("  2020-12-31 ") == date(2020, 12, 31)


def test_date_passes_through():
    d = date(2001, 5, 6)
    assert parse_date(d) is d


def test_datetime_becomes_date():
    assert parse_date(datetime(2001, 5, 6, 13, 0, tzinfo=timezone.utc)) == date(2001, 5, 6)


@pytest.mark.parametrize("value", ["", None, "yesterday", "2010/01/01", "2010-13-01"])
def test_invalid_raises(value):
    with pytest.raises(ValueError):
        parse_date(value)

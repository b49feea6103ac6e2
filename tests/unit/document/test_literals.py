from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from hotconf.document.literals import parse_date, parse_duration


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("12.09.2018", datetime(2018, 9, 12, tzinfo=UTC)),
        ("12.12.2010", datetime(2010, 12, 12, tzinfo=UTC)),
        ("1.2.2003", datetime(2003, 2, 1, tzinfo=UTC)),
        ("01.02.0999", datetime(999, 2, 1, tzinfo=UTC)),
    ],
)
def test_parse_date(text: str, expected: datetime) -> None:
    assert parse_date(text) == expected


@pytest.mark.parametrize(
    "text",
    ["2018-09-12", "12.09.18", "12.09.2018 10:00", "123.09.2018", "12/09/2018", "", "12.09.20181"],
)
def test_parse_date_rejects_other_layouts(text: str) -> None:
    with pytest.raises(ValueError, match="D.M.YYYY"):
        parse_date(text)


def test_parse_date_rejects_impossible_dates() -> None:
    with pytest.raises(ValueError, match="out of range"):
        parse_date("31.02.2018")


def test_parse_date_rejects_year_zero() -> None:
    with pytest.raises(ValueError, match="out of range"):
        parse_date("1.1.0000")


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("30m", timedelta(minutes=30)),
        ("2h", timedelta(hours=2)),
        ("500ms", timedelta(milliseconds=500)),
        ("1h15m30s", timedelta(hours=1, minutes=15, seconds=30)),
        ("1.5h", timedelta(minutes=90)),
        (".5s", timedelta(milliseconds=500)),
        ("1.s", timedelta(seconds=1)),
        ("-1.5s", timedelta(seconds=-1.5)),
        ("+10s", timedelta(seconds=10)),
        ("0", timedelta(0)),
        ("-0", timedelta(0)),
        ("0s", timedelta(0)),
        ("100us", timedelta(microseconds=100)),
        ("100µs", timedelta(microseconds=100)),
        ("100μs", timedelta(microseconds=100)),
        ("2500ns", timedelta(microseconds=2)),
    ],
)
def test_parse_duration(text: str, expected: timedelta) -> None:
    assert parse_duration(text) == expected


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("", "invalid duration"),
        ("-", "invalid duration"),
        ("30", "missing unit"),
        ("1h30", "missing unit"),
        ("30 m", "unknown unit"),
        ("30d", "unknown unit"),
        (".s", "invalid duration"),
        ("h", "invalid duration"),
        ("3000000h", "overflows"),
    ],
)
def test_parse_duration_rejects_malformed_expressions(text: str, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        parse_duration(text)

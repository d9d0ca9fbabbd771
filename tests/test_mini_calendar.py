import datetime

import pytest

from toyprograms.mini_calendar import (
    add_days,
    describe,
    is_leap_year,
    main,
    month_length,
    weekday_index,
)


@pytest.mark.parametrize(
    "year, expected",
    [(2000, True), (1900, False), (2024, True), (2023, False)],
)
def test_is_leap_year(year, expected):
    assert is_leap_year(year) is expected


@pytest.mark.parametrize("year", [1900, 2000, 2023, 2024])
def test_february_follows_leap_rule(year):
    assert (month_length(2, year) == 29) == is_leap_year(year)


def test_year_length():
    for year in (1999, 2000, 2100):
        total = sum(month_length(month, year) for month in range(1, 13))
        assert total == (366 if is_leap_year(year) else 365)


@pytest.mark.parametrize("days", [0, 1, 30, 59, 60, 365, 366, 1000, 40000])
def test_add_days_matches_calendar(days):
    start = datetime.date(2000, 1, 15)
    expected = start + datetime.timedelta(days=days)
    assert add_days(1, 15, 2000, days) == (expected.month, expected.day, expected.year)


def test_add_days_crosses_year():
    assert add_days(12, 31, 1999, 1) == (1, 1, 2000)


def test_add_days_rejects_invalid_date():
    with pytest.raises(ValueError):
        add_days(2, 30, 2001, 1)


def test_reference_weekday():
    assert weekday_index(1, 1, 2000) == 6


@pytest.mark.parametrize(
    "day, month, year", [(29, 2, 2000), (1, 3, 2100), (31, 12, 9999), (4, 7, 2024)]
)
def test_weekday_matches_calendar(day, month, year):
    expected = (datetime.date(year, month, day).weekday() + 1) % 7
    assert weekday_index(day, month, year) == expected


def test_weekday_repeats_weekly():
    assert weekday_index(8, 1, 2000) == weekday_index(1, 1, 2000)


def test_weekday_rejects_date_before_reference():
    with pytest.raises(ValueError):
        weekday_index(31, 12, 1999)


def test_describe_reference():
    assert describe(1, 1, 2000, 0) == "New date: Jan 1 2000. It falls on a Saturday."


def test_main_with_arguments(capsys):
    assert main(["1", "1", "2000", "0"]) == 0
    assert capsys.readouterr().out == describe(1, 1, 2000, 0) + "\n"


def test_main_rejects_bad_input(capsys):
    assert main(["x"]) == 1
    assert "error" in capsys.readouterr().err
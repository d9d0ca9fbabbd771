"""Add days to a date and name the weekday it falls on."""

from __future__ import annotations

import sys
from collections.abc import Sequence

DAYS_IN_MONTH = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
MONTH_NAMES = ("", "Jan", "Feb", "Mar", "Apr", "May", "Jun",
               "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
WEEKDAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday",
                 "Thursday", "Friday", "Saturday")

REFERENCE_YEAR = 2000
REFERENCE_MONTH = 1
REFERENCE_DAY = 1
REFERENCE_WEEKDAY = 6

PROMPT = (
    "Please enter a date between the years 1800 and 10000 in the format "
    "mm dd yy and provide the number of days to add to this date: "
)


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def month_length(month: int, year: int) -> int:
    """Return the number of days in ``month`` of ``year``."""
    if not 1 <= month <= 12:
        raise ValueError(f"invalid month: {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def _check_date(month: int, day: int, year: int) -> None:
    if not 1 <= day <= month_length(month, year):
        raise ValueError(f"invalid day {day} for month {month} of {year}")


def add_days(month: int, day: int, year: int, days: int) -> tuple[int, int, int]:
    """Return ``(month, day, year)`` moved ``days`` days forward."""
    _check_date(month, day, year)
    while days > 0:
        left_in_month = month_length(month, year) - day + 1
        if days >= left_in_month:
            days -= left_in_month
            day = 1
            month, year = (1, year + 1) if month == 12 else (month + 1, year)
        else:
            day += days
            days = 0
    return month, day, year


def _day_number(day: int, month: int, year: int) -> int:
    previous = year - 1
    return (
        previous * 365 + previous // 4 - previous // 100 + previous // 400
        + sum(month_length(m, year) for m in range(1, month))
        + day
    )


def weekday_index(day: int, month: int, year: int) -> int:
    """Return the weekday (0 for Sunday) of a date on or after 1 Jan 2000."""
    _check_date(month, day, year)
    offset = _day_number(day, month, year) - _day_number(
        REFERENCE_DAY, REFERENCE_MONTH, REFERENCE_YEAR
    )
    if offset < 0:
        raise ValueError("date lies before the reference date")
    return (REFERENCE_WEEKDAY + offset) % 7


def describe(month: int, day: int, year: int, days: int) -> str:
    """Describe the date ``days`` after the given one and its weekday."""
    month, day, year = add_days(month, day, year, days)
    weekday = WEEKDAY_NAMES[weekday_index(day, month, year)]
    return f"New date: {MONTH_NAMES[month]} {day} {year}. It falls on a {weekday}."


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``mm dd yy days`` (from arguments or standard input) and describe it."""
    if argv:
        tokens = list(argv)
    else:
        print(PROMPT)
        tokens = sys.stdin.read().split()
    try:
        month, day, year, days = (int(token) for token in tokens[:4])
        print(describe(month, day, year, days))
    except ValueError as error:
        sys.stderr.write(f"error: {error}\n")
        return 1
    return 0
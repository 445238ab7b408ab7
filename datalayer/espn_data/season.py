"""Current-week estimation for the NFL regular season."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Union

FIRST_WEEK = 1
LAST_WEEK = 18

# Week start anchors as (month, day, year offset from the season-start year),
# laid out on the 2024 calendar.
_WEEK_START_ANCHORS: tuple[tuple[int, int, int], ...] = (
    (9, 5, 0),
    (9, 12, 0),
    (9, 19, 0),
    (9, 26, 0),
    (10, 3, 0),
    (10, 10, 0),
    (10, 17, 0),
    (10, 24, 0),
    (10, 31, 0),
    (11, 7, 0),
    (11, 14, 0),
    (11, 21, 0),
    (11, 28, 0),
    (12, 5, 0),
    (12, 12, 0),
    (12, 19, 0),
    (12, 26, 0),
    (1, 2, 1),
)

DateLike = Union[date, datetime]


def _as_date(value: Optional[DateLike]) -> date:
    if value is None:
        return date.today()
    if isinstance(value, datetime):
        return value.date()
    return value


def season_start_year(today: Optional[DateLike] = None) -> int:
    current = _as_date(today)
    return current.year if current.month >= 9 else current.year - 1


def week_start_dates(season: int) -> list[date]:
    return [
        date(season + year_offset, month, day)
        for month, day, year_offset in _WEEK_START_ANCHORS
    ]


def estimate_week(today: Optional[DateLike] = None) -> int:
    """Return the NFL week (1-18) that ``today`` falls in.

    The anchor table is an approximation of the real schedule; dates before
    the first anchor report week 1 and dates after the last report week 18.
    """

    current = _as_date(today)
    week = FIRST_WEEK
    for index, start in enumerate(week_start_dates(season_start_year(current)), start=1):
        if start <= current:
            week = index
    return min(max(week, FIRST_WEEK), LAST_WEEK)

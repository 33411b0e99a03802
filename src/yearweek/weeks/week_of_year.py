"""
Date to Week Conversions (week_of_year.py)

Computes the week of the year a calendar date falls in for any week start day
and first-week rule, with the same arithmetic as .NET
GregorianCalendar.GetWeekOfYear:

- FIRST_DAY: the week containing January 1st is week 1, so week numbers run
  from 1 to 54
- FIRST_FULL_WEEK / FIRST_FOUR_DAY_WEEK: January days before week 1 report the
  last week of the previous year (52 or 53)

Also provides the trailing-week policy, where a short final week of December
is reported as week 1 of the following year, plus small week helpers
(weeks in a year, week of month, first/last day of a date's week).

Example:
    >>> week_of_year(date(2020, 1, 1))
    1
    >>> week_of_year(date(2020, 1, 5))
    2
    >>> week_of_year_with_last_week_policy(date(2024, 12, 30), WeekStart.SUNDAY, last_full_week=True)
    1
"""
# %%
# -----------------------------------------------------------------------------
# UPDATED ON: 2026-10-19
# CREATED ON: 2026-10-12
# -----------------------------------------------------------------------------
# COPYRIGHT @ 2025 Ricoh. All rights reserved.
# The information contained herein is copyright and proprietary to
# Ricoh and may not be reproduced, disclosed, or used in
# any manner without prior written permission from Ricoh.
# -----------------------------------------------------------------------------
# %%
from datetime import date
from typing import Tuple, Union

from yearweek.weeks.policy import (
    DAYS_IN_WEEK,
    FirstWeekRule,
    WeekStart,
    add_days,
    as_date,
    day_of_week,
    validate_year,
    weekday_offset,
)

StartLike = Union[WeekStart, int, str]
RuleLike = Union[FirstWeekRule, str]


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year using complete rules."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def _first_week_shift(lead: int, rule: FirstWeekRule) -> int:
    """
    Zero-based day of year on which week 1 starts (negative when week 1 begins
    in December of the previous year).

    `lead` is the number of days of January 1st's week that precede January 1st.
    """
    if lead == 0:
        return 0
    if DAYS_IN_WEEK - lead >= rule.full_days:
        return -lead
    return DAYS_IN_WEEK - lead


def _week_number(year: int, day_of_year: int, jan1_dow: int, start: WeekStart, rule: FirstWeekRule) -> int:
    lead = (jan1_dow - start) % DAYS_IN_WEEK
    shift = _first_week_shift(lead, rule)
    if day_of_year >= shift:
        return (day_of_year - shift) // DAYS_IN_WEEK + 1

    # Before week 1: count the day as part of the previous year. Plain
    # arithmetic keeps this working for January of year 1.
    prev_days = days_in_year(year - 1)
    prev_jan1_dow = (jan1_dow - prev_days) % DAYS_IN_WEEK
    return _week_number(year - 1, day_of_year + prev_days, prev_jan1_dow, start, rule)


def _year_position(value: date) -> Tuple[int, int]:
    """Zero-based day of year and the Sunday-based weekday of January 1st."""
    day_of_year = value.timetuple().tm_yday - 1
    jan1_dow = (day_of_week(value) - day_of_year) % DAYS_IN_WEEK
    return day_of_year, jan1_dow


def week_of_year(
    value: date,
    start: StartLike = WeekStart.SUNDAY,
    rule: RuleLike = FirstWeekRule.FIRST_DAY
) -> int:
    """
    Ordinal week of `value` within its own calendar year.

    Args:
        value: Date to classify (datetime and pandas Timestamp values are reduced to their date).
        start: Weekday that opens a week. Defaults to Sunday.
        rule: First week rule. Defaults to FIRST_DAY.

    Returns:
        int: Week number, 1..54 for FIRST_DAY, 1..53 for the other rules.
    """
    value = as_date(value)
    start = WeekStart.parse(start)
    rule = FirstWeekRule.parse(rule)
    day_of_year, jan1_dow = _year_position(value)
    return _week_number(value.year, day_of_year, jan1_dow, start, rule)


def is_before_first_week(
    value: date,
    start: StartLike = WeekStart.SUNDAY,
    rule: RuleLike = FirstWeekRule.FIRST_DAY
) -> bool:
    """True when an early January date still belongs to the previous year's last week."""
    value = as_date(value)
    day_of_year, jan1_dow = _year_position(value)
    lead = (jan1_dow - WeekStart.parse(start)) % DAYS_IN_WEEK
    return day_of_year < _first_week_shift(lead, FirstWeekRule.parse(rule))


def is_in_next_year_first_week(value: date, start: StartLike = WeekStart.SUNDAY) -> bool:
    """
    Check whether `value` lies in a short trailing week of its year.

    The last week of a year is short when December 31st is not the natural
    week-end weekday (Saturday for Sunday-start weeks, Sunday for Monday-start
    weeks). Dates from the start of that week through December 31st can then be
    attributed to week 1 of the next year.
    """
    value = as_date(value)
    start = WeekStart.parse(start)
    last_day = date(value.year, 12, 31)

    if day_of_week(last_day) == start.week_end:
        return False

    first_day = add_days(last_day, -weekday_offset(last_day, start))
    return first_day <= value <= last_day


def week_of_year_with_last_week_policy(
    value: date,
    start: StartLike = WeekStart.SUNDAY,
    rule: RuleLike = FirstWeekRule.FIRST_DAY,
    last_full_week: bool = False
) -> int:
    """
    Week of the year, optionally reporting a short trailing December week as week 1.

    Args:
        value: Date to classify.
        start: Weekday that opens a week.
        rule: First week rule.
        last_full_week: When True, dates inside a short final week of the year
            report week 1 (of the following year).

    Returns:
        int: Week number.
    """
    if last_full_week and is_in_next_year_first_week(value, start):
        return 1
    return week_of_year(value, start, rule)


def year_week(
    value: date,
    start: StartLike = WeekStart.SUNDAY,
    rule: RuleLike = FirstWeekRule.FIRST_DAY,
    last_full_week: bool = False
) -> Tuple[int, int]:
    """
    The (year, week) pair a date is reported under.

    The year differs from the calendar year when the trailing-week policy moves
    a December date into next year's week 1, or when an early January date
    falls in the previous year's last week.
    """
    value = as_date(value)
    week = week_of_year_with_last_week_policy(value, start, rule, last_full_week)

    if last_full_week and week == 1 and value.month == 12:
        return value.year + 1, 1
    if is_before_first_week(value, start, rule):
        return value.year - 1, week
    return value.year, week


def weeks_in_year(
    year: int,
    start: StartLike = WeekStart.SUNDAY,
    rule: RuleLike = FirstWeekRule.FIRST_DAY
) -> int:
    """Number of the last week of `year` (the week December 31st falls in)."""
    validate_year(year)
    return week_of_year(date(year, 12, 31), start, rule)


def week_of_month(value: date, start: StartLike = WeekStart.MONDAY) -> int:
    """
    Week of the month `value` falls in; the week holding the 1st is week 1.

    Defaults to Monday..Sunday weeks.
    """
    value = as_date(value)
    first = value.replace(day=1)
    return (value.day - 1 + weekday_offset(first, WeekStart.parse(start))) // DAYS_IN_WEEK + 1


def first_day_of_week(value: date, start: StartLike = WeekStart.SUNDAY) -> date:
    """The week-start day on or before `value`."""
    value = as_date(value)
    return add_days(value, -weekday_offset(value, WeekStart.parse(start)))


def last_day_of_week(value: date, start: StartLike = WeekStart.SUNDAY) -> date:
    """The week-end day on or after `value`."""
    value = as_date(value)
    return add_days(value, DAYS_IN_WEEK - 1 - weekday_offset(value, WeekStart.parse(start)))

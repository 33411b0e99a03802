"""
Week to Date Conversions (week_dates.py)

Resolves a WeekSpec (year, week number, week start, first week rule, last year
fallback) into calendar dates.

Week 1 starts on January 1st unless the first week rule places January 1st in
the previous year's last week, in which case week 1 starts on the first
week-start day after it. With last_year_fallback, week 1 is pulled back to the
week-start weekday even when that day is in December of the previous year.
Every later week starts on the week-start weekday, 7 days after the one before.

Example:
    >>> start_of_week(WeekSpec(2020, 1))
    datetime.date(2020, 1, 1)
    >>> start_of_week(WeekSpec(2020, 1, last_year_fallback=True))
    datetime.date(2019, 12, 29)
    >>> start_of_week(WeekSpec(2020, 2))
    datetime.date(2020, 1, 5)
"""
# %%
# -----------------------------------------------------------------------------
# UPDATED ON: 2026-10-19
# CREATED ON: 2026-10-13
# -----------------------------------------------------------------------------
# COPYRIGHT @ 2025 Ricoh. All rights reserved.
# The information contained herein is copyright and proprietary to
# Ricoh and may not be reproduced, disclosed, or used in
# any manner without prior written permission from Ricoh.
# -----------------------------------------------------------------------------
# %%
from datetime import date
from typing import Tuple

from yearweek.weeks.exceptions import InvalidArgument
from yearweek.weeks.policy import DAYS_IN_WEEK, WeekSpec, add_days, weekday_offset
from yearweek.weeks.week_of_year import last_day_of_week, week_of_year


def _remaining_days(value: date, spec: WeekSpec) -> int:
    """Days from `value` to the last day of its week."""
    return DAYS_IN_WEEK - 1 - weekday_offset(value, spec.start)


def first_week_start(spec: WeekSpec) -> date:
    """
    First day of week 1 of `spec.year`, before any last year fallback.

    This is January 1st when it is classified as week 1, otherwise the first
    week-start day after it.
    """
    year_start = date(spec.year, 1, 1)
    if week_of_year(year_start, spec.start, spec.rule) != 1:
        year_start = add_days(year_start, _remaining_days(year_start, spec) + 1)
    return year_start


def start_of_week(spec: WeekSpec) -> date:
    """
    First calendar date of the requested week.

    Args:
        spec: Year, week number and policy.

    Returns:
        date: Start of the week.

    Raises:
        InvalidArgument: If the week number is below 1 or the result falls
            outside 0001-01-01..9999-12-31.
    """
    if spec.week_number < 1:
        raise InvalidArgument(f"Week number must be 1 or greater, got: {spec.week_number}")

    year_start = first_week_start(spec)

    if spec.week_number == 1:
        if not spec.last_year_fallback:
            return year_start
        return add_days(year_start, -weekday_offset(year_start, spec.start))

    # end of week 1, then the full weeks in between, then one day into the target week
    days = _remaining_days(year_start, spec) + (spec.week_number - 2) * DAYS_IN_WEEK + 1
    return add_days(year_start, days)


def end_of_week(spec: WeekSpec) -> date:
    """Last calendar date of the requested week."""
    return last_day_of_week(start_of_week(spec), spec.start)


def week_range(spec: WeekSpec) -> Tuple[date, date]:
    """First and last calendar dates of the requested week."""
    first = start_of_week(spec)
    return first, last_day_of_week(first, spec.start)

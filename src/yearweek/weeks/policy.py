"""
Week Policy Model (policy.py)

Explicit value types describing how weeks are counted inside a calendar year:

- WeekStart: the weekday that opens a week (Sunday=0 ... Saturday=6, the same
  numbering used by .NET DayOfWeek)
- FirstWeekRule: which week of January is week 1
- WeekPolicy: every policy choice bundled into one immutable value
- WeekSpec: a concrete (year, week number) request plus the policy needed to
  resolve it into a calendar date

Dates are plain datetime.date values. The weekday helpers below translate
Python's Monday-based numbering into the Sunday-based numbering used by the
week arithmetic.
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
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum, IntEnum
from typing import Union

from yearweek.weeks.exceptions import InvalidArgument

MIN_YEAR = 1
MAX_YEAR = 9999
DAYS_IN_WEEK = 7


class WeekStart(IntEnum):
    """Weekday that opens a week."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @property
    def week_end(self) -> "WeekStart":
        """Weekday that closes a week opened by this day."""
        return WeekStart((self - 1) % DAYS_IN_WEEK)

    @classmethod
    def parse(cls, value: Union["WeekStart", int, str]) -> "WeekStart":
        """
        Resolve a week start from an enum member, a day number or a day name.

        Accepts full names and three letter abbreviations in any case
        ("Sunday", "mon"). Day numbers follow the Sunday=0 convention.

        Raises:
            InvalidArgument: If the value does not name a weekday.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise InvalidArgument(f"Invalid week start: {value!r}")
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError as e:
                raise InvalidArgument(f"Week start must be between 0 and 6, got: {value}") from e
        if isinstance(value, str):
            key = value.strip().upper()
            for member in cls:
                if key in (member.name, member.name[:3]):
                    return member
        raise InvalidArgument(f"Invalid week start: {value!r}")


class FirstWeekRule(str, Enum):
    """How week 1 of a year is chosen."""

    FIRST_DAY = "first_day"                      # week containing January 1st
    FIRST_FULL_WEEK = "first_full_week"          # first week fully inside the year
    FIRST_FOUR_DAY_WEEK = "first_four_day_week"  # first week with 4+ days in the year

    @property
    def full_days(self) -> int:
        """Days of the new year the first week needs before it counts as week 1."""
        if self is FirstWeekRule.FIRST_FULL_WEEK:
            return 7
        if self is FirstWeekRule.FIRST_FOUR_DAY_WEEK:
            return 4
        return 1

    @classmethod
    def parse(cls, value: Union["FirstWeekRule", str]) -> "FirstWeekRule":
        """
        Resolve a rule from an enum member, its value, its name or the .NET
        spelling ("FirstDay", "FirstFullWeek", "FirstFourDayWeek").

        Raises:
            InvalidArgument: If the value does not name a rule.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().replace("-", "").replace("_", "").lower()
            for member in cls:
                if key == member.value.replace("_", ""):
                    return member
        raise InvalidArgument(f"Invalid first week rule: {value!r}")


def day_of_week(value: date) -> int:
    """Weekday of a date with Sunday=0 ... Saturday=6."""
    return value.isoweekday() % DAYS_IN_WEEK


def weekday_offset(value: date, start: WeekStart) -> int:
    """Number of days between the start of the week containing `value` and `value`."""
    return (day_of_week(value) - start) % DAYS_IN_WEEK


def validate_year(year: int) -> None:
    """Raise InvalidArgument unless 1 <= year <= 9999."""
    if not (MIN_YEAR <= year <= MAX_YEAR):
        raise InvalidArgument(f"Year must be between {MIN_YEAR} and {MAX_YEAR}, got: {year}")


def as_date(value: date) -> date:
    """Drop the time part of datetime / pandas Timestamp values."""
    if isinstance(value, datetime):
        return value.date()
    return value


def add_days(value: date, days: int) -> date:
    """Shift a date by whole days, reporting dates past 0001-01-01..9999-12-31 as InvalidArgument."""
    try:
        return value + timedelta(days=days)
    except OverflowError as e:
        raise InvalidArgument(
            f"{value.isoformat()} shifted by {days} days is outside the supported date range"
        ) from e


@dataclass(frozen=True)
class WeekPolicy:
    """
    All choices that decide how dates map to week numbers.

    Attributes:
        start: Weekday that opens a week.
        rule: How week 1 is chosen.
        last_year_fallback: Week 1 starts on the literal week-start weekday even
            when that day belongs to the previous year.
        last_full_week: A short trailing week at the end of December is reported
            as week 1 of the following year.
    """

    start: WeekStart = WeekStart.SUNDAY
    rule: FirstWeekRule = FirstWeekRule.FIRST_DAY
    last_year_fallback: bool = False
    last_full_week: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", WeekStart.parse(self.start))
        object.__setattr__(self, "rule", FirstWeekRule.parse(self.rule))

    def spec(self, year: int, week_number: int) -> "WeekSpec":
        """Build the WeekSpec for a given year and week under this policy."""
        return WeekSpec.of(year, week_number, self)


@dataclass(frozen=True)
class WeekSpec:
    """
    A request for a week of a given year.

    Raises:
        InvalidArgument: If week_number < 1, the year is outside 1..9999, or the
            start / rule values cannot be resolved.
    """

    year: int
    week_number: int
    start: WeekStart = WeekStart.SUNDAY
    rule: FirstWeekRule = FirstWeekRule.FIRST_DAY
    last_year_fallback: bool = False

    def __post_init__(self) -> None:
        validate_year(self.year)
        if self.week_number < 1:
            raise InvalidArgument(f"Week number must be 1 or greater, got: {self.week_number}")
        object.__setattr__(self, "start", WeekStart.parse(self.start))
        object.__setattr__(self, "rule", FirstWeekRule.parse(self.rule))

    @classmethod
    def of(cls, year: int, week_number: int, policy: WeekPolicy) -> "WeekSpec":
        return cls(
            year=year,
            week_number=week_number,
            start=policy.start,
            rule=policy.rule,
            last_year_fallback=policy.last_year_fallback,
        )

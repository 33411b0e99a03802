"""Tests for the week policy value types."""

import dataclasses
from datetime import date

import pytest

from yearweek.weeks.exceptions import InvalidArgument
from yearweek.weeks.policy import (
    FirstWeekRule,
    WeekPolicy,
    WeekSpec,
    WeekStart,
    add_days,
    as_date,
    day_of_week,
    weekday_offset,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (WeekStart.MONDAY, WeekStart.MONDAY),
        (0, WeekStart.SUNDAY),
        (1, WeekStart.MONDAY),
        ("sunday", WeekStart.SUNDAY),
        ("Monday", WeekStart.MONDAY),
        ("SAT", WeekStart.SATURDAY),
        (" wed ", WeekStart.WEDNESDAY),
    ],
)
def test_week_start_parse(value, expected):
    assert WeekStart.parse(value) is expected


@pytest.mark.parametrize("value", [7, -1, "funday", "", None, True, 1.5])
def test_week_start_parse_rejects_unknown_values(value):
    with pytest.raises(InvalidArgument):
        WeekStart.parse(value)


def test_week_end_is_day_before_start():
    assert WeekStart.SUNDAY.week_end is WeekStart.SATURDAY
    assert WeekStart.MONDAY.week_end is WeekStart.SUNDAY
    assert WeekStart.SATURDAY.week_end is WeekStart.FRIDAY


@pytest.mark.parametrize(
    "value, expected",
    [
        (FirstWeekRule.FIRST_FULL_WEEK, FirstWeekRule.FIRST_FULL_WEEK),
        ("first_day", FirstWeekRule.FIRST_DAY),
        ("FIRST_FOUR_DAY_WEEK", FirstWeekRule.FIRST_FOUR_DAY_WEEK),
        ("FirstDay", FirstWeekRule.FIRST_DAY),
        ("FirstFullWeek", FirstWeekRule.FIRST_FULL_WEEK),
        ("FirstFourDayWeek", FirstWeekRule.FIRST_FOUR_DAY_WEEK),
        ("first-four-day-week", FirstWeekRule.FIRST_FOUR_DAY_WEEK),
    ],
)
def test_first_week_rule_parse(value, expected):
    assert FirstWeekRule.parse(value) is expected


@pytest.mark.parametrize("value", ["iso", "", None, 1])
def test_first_week_rule_parse_rejects_unknown_values(value):
    with pytest.raises(InvalidArgument):
        FirstWeekRule.parse(value)


def test_day_of_week_is_sunday_based():
    assert day_of_week(date(2020, 1, 1)) == 3  # Wednesday
    assert day_of_week(date(2023, 1, 1)) == 0  # Sunday
    assert day_of_week(date(2022, 12, 31)) == 6  # Saturday


def test_weekday_offset_depends_on_week_start():
    wednesday = date(2020, 1, 1)
    assert weekday_offset(wednesday, WeekStart.SUNDAY) == 3
    assert weekday_offset(wednesday, WeekStart.MONDAY) == 2

    sunday = date(2023, 1, 1)
    assert weekday_offset(sunday, WeekStart.SUNDAY) == 0
    assert weekday_offset(sunday, WeekStart.MONDAY) == 6


def test_as_date_drops_time():
    from datetime import datetime

    assert as_date(datetime(2020, 1, 5, 23, 59)) == date(2020, 1, 5)
    assert as_date(date(2020, 1, 5)) == date(2020, 1, 5)


def test_add_days_outside_range_is_invalid_argument():
    assert add_days(date(2020, 1, 1), -3) == date(2019, 12, 29)
    with pytest.raises(InvalidArgument):
        add_days(date(1, 1, 1), -1)
    with pytest.raises(InvalidArgument):
        add_days(date(9999, 12, 31), 1)


def test_week_spec_defaults():
    spec = WeekSpec(2020, 34)
    assert spec.start is WeekStart.SUNDAY
    assert spec.rule is FirstWeekRule.FIRST_DAY
    assert spec.last_year_fallback is False


def test_week_spec_coerces_names():
    spec = WeekSpec(2020, 1, start="monday", rule="FirstFourDayWeek")
    assert spec.start is WeekStart.MONDAY
    assert spec.rule is FirstWeekRule.FIRST_FOUR_DAY_WEEK


@pytest.mark.parametrize("week_number", [0, -1, -53])
def test_week_spec_rejects_week_below_one(week_number):
    with pytest.raises(InvalidArgument):
        WeekSpec(2020, week_number)


@pytest.mark.parametrize("year", [0, -1, 10000])
def test_week_spec_rejects_years_out_of_range(year):
    with pytest.raises(InvalidArgument):
        WeekSpec(year, 1)


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        WeekSpec(2020, 0)


def test_week_spec_is_immutable():
    spec = WeekSpec(2020, 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        spec.week_number = 2


def test_policy_builds_specs():
    policy = WeekPolicy(start=WeekStart.MONDAY, rule="first_full_week", last_year_fallback=True)
    spec = policy.spec(2021, 10)

    assert spec == WeekSpec(2021, 10, WeekStart.MONDAY, FirstWeekRule.FIRST_FULL_WEEK, True)
    assert WeekSpec.of(2021, 10, policy) == spec


def test_policy_defaults_match_week_spec_defaults():
    policy = WeekPolicy()
    assert policy.spec(2020, 1) == WeekSpec(2020, 1)
    assert policy.last_full_week is False

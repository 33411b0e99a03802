"""Tests for week to date conversions."""

from datetime import date, timedelta

import pytest

from yearweek.weeks.exceptions import InvalidArgument
from yearweek.weeks.policy import FirstWeekRule, WeekPolicy, WeekSpec, WeekStart
from yearweek.weeks.week_dates import end_of_week, first_week_start, start_of_week, week_range
from yearweek.weeks.week_of_year import (
    is_before_first_week,
    week_of_year,
    week_of_year_with_last_week_policy,
    weeks_in_year,
    year_week,
)

SUN = WeekStart.SUNDAY
MON = WeekStart.MONDAY
FIRST_DAY = FirstWeekRule.FIRST_DAY
FULL = FirstWeekRule.FIRST_FULL_WEEK
FOUR = FirstWeekRule.FIRST_FOUR_DAY_WEEK

YEARS = range(1995, 2031)


@pytest.mark.parametrize(
    "spec, expected",
    [
        (WeekSpec(2020, 1), date(2020, 1, 1)),
        (WeekSpec(2020, 1, last_year_fallback=True), date(2019, 12, 29)),
        (WeekSpec(2020, 2), date(2020, 1, 5)),
        (WeekSpec(2020, 34), date(2020, 8, 16)),
        (WeekSpec(2020, 53), date(2020, 12, 27)),
        (WeekSpec(2020, 2, MON), date(2020, 1, 6)),
        (WeekSpec(2020, 1, MON, last_year_fallback=True), date(2019, 12, 30)),
        # 2023-01-01 is a Sunday, alone in the first Monday week
        (WeekSpec(2023, 1, MON), date(2023, 1, 1)),
        (WeekSpec(2023, 2, MON), date(2023, 1, 2)),
        (WeekSpec(2023, 1, MON, last_year_fallback=True), date(2022, 12, 26)),
        # January 1st outside week 1
        (WeekSpec(2020, 1, SUN, FULL), date(2020, 1, 5)),
        (WeekSpec(2020, 1, SUN, FULL, True), date(2020, 1, 5)),
        (WeekSpec(2020, 2, SUN, FULL), date(2020, 1, 12)),
        (WeekSpec(2021, 1, MON, FOUR), date(2021, 1, 4)),
        (WeekSpec(2021, 10, MON, FOUR), date(2021, 3, 8)),
        (WeekSpec(2020, 1, MON, FOUR), date(2020, 1, 1)),
        (WeekSpec(2020, 1, MON, FOUR, True), date(2019, 12, 30)),
        (WeekSpec(2020, 2, MON, FOUR), date(2020, 1, 6)),
    ],
)
def test_start_of_week_reference_values(spec, expected):
    assert start_of_week(spec) == expected


@pytest.mark.parametrize("week_number", [0, -1])
def test_start_of_week_rejects_week_below_one(week_number):
    with pytest.raises(InvalidArgument):
        start_of_week(WeekSpec(2020, week_number))


def test_large_week_numbers_roll_into_next_year():
    assert start_of_week(WeekSpec(2020, 54)) == date(2021, 1, 3)


def test_results_outside_date_range_are_invalid():
    # 0001-01-01 is a Monday, so the Sunday week would start in year 0
    with pytest.raises(InvalidArgument):
        start_of_week(WeekSpec(1, 1, SUN, last_year_fallback=True))
    with pytest.raises(InvalidArgument):
        start_of_week(WeekSpec(9999, 60))


def test_year_one_without_fallback():
    assert start_of_week(WeekSpec(1, 1)) == date(1, 1, 1)
    assert start_of_week(WeekSpec(1, 2)) == date(1, 1, 7)


def test_end_of_week_and_range():
    assert end_of_week(WeekSpec(2020, 1)) == date(2020, 1, 4)
    assert end_of_week(WeekSpec(2020, 1, MON)) == date(2020, 1, 5)
    assert week_range(WeekSpec(2020, 34)) == (date(2020, 8, 16), date(2020, 8, 22))
    assert week_range(WeekSpec(2020, 1, last_year_fallback=True)) == (date(2019, 12, 29), date(2020, 1, 4))


def test_first_week_start():
    assert first_week_start(WeekSpec(2020, 1)) == date(2020, 1, 1)
    assert first_week_start(WeekSpec(2021, 7, MON, FOUR)) == date(2021, 1, 4)


@pytest.mark.parametrize("rule", list(FirstWeekRule))
@pytest.mark.parametrize("start", list(WeekStart))
def test_round_trip_every_week(start, rule):
    """Every week of a year maps back to itself through week_of_year."""
    for year in YEARS:
        for week in range(1, weeks_in_year(year, start, rule) + 1):
            first = start_of_week(WeekSpec(year, week, start, rule))
            assert first.year == year
            assert week_of_year(first, start, rule) == week


@pytest.mark.parametrize("rule", list(FirstWeekRule))
@pytest.mark.parametrize("start", [SUN, MON, WeekStart.SATURDAY])
def test_every_day_falls_inside_its_week(start, rule):
    """A date's own week starts on or before it and less than 7 days earlier."""
    day = date(2019, 1, 1)
    while day <= date(2021, 12, 31):
        if not is_before_first_week(day, start, rule):
            first = start_of_week(WeekSpec(day.year, week_of_year(day, start, rule), start, rule))
            assert first <= day
            assert (day - first).days < 7
        day += timedelta(days=1)


@pytest.mark.parametrize("rule", list(FirstWeekRule))
@pytest.mark.parametrize("start", list(WeekStart))
def test_weeks_after_first_are_seven_days_apart(start, rule):
    for year in (2019, 2020, 2021, 2023, 2024):
        for week in range(2, weeks_in_year(year, start, rule)):
            current = start_of_week(WeekSpec(year, week, start, rule))
            following = start_of_week(WeekSpec(year, week + 1, start, rule))
            assert following - current == timedelta(days=7)


@pytest.mark.parametrize("start", list(WeekStart))
def test_fallback_week_one_is_seven_days_before_week_two(start):
    for year in YEARS:
        for rule in FirstWeekRule:
            first = start_of_week(WeekSpec(year, 1, start, rule, True))
            second = start_of_week(WeekSpec(year, 2, start, rule, True))
            assert second - first == timedelta(days=7)


@pytest.mark.parametrize("start", list(WeekStart))
def test_first_day_week_one_contains_january_first(start):
    for year in YEARS:
        jan1 = date(year, 1, 1)
        plain = start_of_week(WeekSpec(year, 1, start, FIRST_DAY))
        fallback = start_of_week(WeekSpec(year, 1, start, FIRST_DAY, True))

        assert plain == jan1
        assert fallback <= jan1 < fallback + timedelta(days=7)
        assert fallback.weekday() == (start - 1) % 7  # Python's Monday=0 numbering


class TestPolicyFlagCombinations:
    """last_year_fallback and last_full_week act independently.

    2024-12-31 is a Tuesday and 2025-01-01 a Wednesday, so both flags matter for
    Sunday weeks around that year end.
    """

    @pytest.mark.parametrize(
        "last_year_fallback, last_full_week, week_one_start, dec30_year_week",
        [
            (False, False, date(2025, 1, 1), (2024, 53)),
            (False, True, date(2025, 1, 1), (2025, 1)),
            (True, False, date(2024, 12, 29), (2024, 53)),
            (True, True, date(2024, 12, 29), (2025, 1)),
        ],
    )
    def test_combination(self, last_year_fallback, last_full_week, week_one_start, dec30_year_week):
        policy = WeekPolicy(SUN, FIRST_DAY, last_year_fallback, last_full_week)

        assert start_of_week(policy.spec(2025, 1)) == week_one_start
        assert year_week(date(2024, 12, 30), policy.start, policy.rule, policy.last_full_week) == dec30_year_week

    def test_both_flags_resolve_december_dates_into_their_reported_week(self):
        policy = WeekPolicy(SUN, FIRST_DAY, last_year_fallback=True, last_full_week=True)
        for day in (29, 30, 31):
            value = date(2024, 12, day)
            year, week = year_week(value, policy.start, policy.rule, policy.last_full_week)
            first, last = week_range(policy.spec(year, week))
            assert first <= value <= last

    def test_last_full_week_without_fallback_does_not_change_week_dates(self):
        policy = WeekPolicy(SUN, FIRST_DAY, last_full_week=True)
        assert week_of_year_with_last_week_policy(date(2024, 12, 30), SUN, FIRST_DAY, True) == 1
        assert week_range(policy.spec(2025, 1)) == (date(2025, 1, 1), date(2025, 1, 4))

# %%
"""
Calendar Week Utilities

Conversions between year-week tokens (YYWW / YYYYWW), week numbers and calendar
dates under configurable week start days and first week rules.
"""

from yearweek.weeks.exceptions import InvalidArgument
from yearweek.weeks.policy import FirstWeekRule, WeekPolicy, WeekSpec, WeekStart
from yearweek.weeks.week_of_year import (
    first_day_of_week,
    is_in_next_year_first_week,
    last_day_of_week,
    week_of_month,
    week_of_year,
    week_of_year_with_last_week_policy,
    weeks_in_year,
    year_week,
)
from yearweek.weeks.week_dates import end_of_week, start_of_week, week_range
from yearweek.weeks.tokens import (
    format_year_week_token,
    parse_year_week_token,
    resolve_year_week_token,
    split_year_week_token,
)
from yearweek.weeks.locales import policy_for_locale
from yearweek.weeks.config import policy_from_config

__version__ = "1.0.0"
__all__ = [
    "InvalidArgument",
    "FirstWeekRule",
    "WeekPolicy",
    "WeekSpec",
    "WeekStart",
    "first_day_of_week",
    "is_in_next_year_first_week",
    "last_day_of_week",
    "week_of_month",
    "week_of_year",
    "week_of_year_with_last_week_policy",
    "weeks_in_year",
    "year_week",
    "end_of_week",
    "start_of_week",
    "week_range",
    "format_year_week_token",
    "parse_year_week_token",
    "resolve_year_week_token",
    "split_year_week_token",
    "policy_for_locale",
    "policy_from_config",
]

"""
Year-week tokens: "YYWW" (e.g. "2034", week 34 of 20xx) and "YYYYWW"
(e.g. "202034", week 34 of 2020).

Four digit tokens take their century from the reference date (today unless
given).
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
import re
from datetime import date
from typing import Optional, Tuple, Union

from yearweek.weeks.exceptions import InvalidArgument
from yearweek.weeks.policy import WeekPolicy, WeekSpec, validate_year
from yearweek.weeks.week_dates import start_of_week

TokenLike = Union[int, str]

_TOKEN_PATTERN = re.compile(r"^([0-9]{2}|[0-9]{4})([0-9]{2})$")


def split_year_week_token(token: TokenLike, today: Optional[date] = None) -> Tuple[int, int]:
    """
    Split a YYWW / YYYYWW token into (year, week).

    Raises:
        InvalidArgument: If the token is not 4 or 6 digits.
    """
    token_str = str(token).strip() if token is not None else ""
    match = _TOKEN_PATTERN.match(token_str)
    if not match:
        raise InvalidArgument(
            f"Invalid year-week token: {token!r}. Expected 4 (YYWW) or 6 (YYYYWW) digits"
        )

    year_part, week_part = match.groups()
    year = int(year_part)
    if len(year_part) == 2:
        today = today or date.today()
        year += today.year // 100 * 100

    validate_year(year)
    return year, int(week_part)


def parse_year_week_token(
    token: TokenLike,
    policy: Optional[WeekPolicy] = None,
    today: Optional[date] = None
) -> WeekSpec:
    """
    Parse a year-week token into a WeekSpec under `policy` (defaults to
    Sunday-start weeks, FIRST_DAY rule, no fallback).

    Raises:
        InvalidArgument: If the token is malformed or names week 00.
    """
    year, week = split_year_week_token(token, today)
    return WeekSpec.of(year, week, policy or WeekPolicy())


def resolve_year_week_token(
    token: TokenLike,
    policy: Optional[WeekPolicy] = None,
    today: Optional[date] = None
) -> date:
    """First calendar date of the week a token names."""
    return start_of_week(parse_year_week_token(token, policy, today))


def format_year_week_token(year: int, week: int, digits: int = 6) -> str:
    """
    Format a (year, week) pair as a YYYYWW (digits=6) or YYWW (digits=4) token.

    Raises:
        InvalidArgument: If digits is not 4 or 6, or year / week are out of range.
    """
    validate_year(year)
    if not (1 <= week <= 99):
        raise InvalidArgument(f"Week must be between 1 and 99 to fit a token, got: {week}")
    if digits == 6:
        return f"{year:04d}{week:02d}"
    if digits == 4:
        return f"{year % 100:02d}{week:02d}"
    raise InvalidArgument(f"Token digits must be 4 or 6, got: {digits}")

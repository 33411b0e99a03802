"""
Year-Week Converter (converters.py)

A converter class for moving between year-week tokens (YYWW / YYYYWW) and
calendar dates under a configurable week policy (week start day, first week
rule, last year fallback, trailing week attribution).

Includes pandas integration for batch processing: week numbers for a whole
Series of dates are computed with vectorised numpy arithmetic that follows
the same rules as the scalar functions.
Requires pandas, numpy, omegaconf and follows the project logging patterns.
"""
# %%
# -----------------------------------------------------------------------------
# UPDATED ON: 2026-10-19
# CREATED ON: 2026-10-15
# -----------------------------------------------------------------------------
# COPYRIGHT @ 2025 Ricoh. All rights reserved.
# The information contained herein is copyright and proprietary to
# Ricoh and may not be reproduced, disclosed, or used in
# any manner without prior written permission from Ricoh.
# -----------------------------------------------------------------------------
# %%
import time
from datetime import date, datetime
from typing import List, Optional, Tuple, Union

import numpy as np
import pandas as pd
from omegaconf import DictConfig

from yearweek.loggers.loguru.config import get_logger, get_logger_config, setup_logger
from yearweek.weeks.config import policy_from_config
from yearweek.weeks.exceptions import InvalidArgument
from yearweek.weeks.policy import DAYS_IN_WEEK, FirstWeekRule, WeekPolicy, add_days
from yearweek.weeks.tokens import format_year_week_token, parse_year_week_token, split_year_week_token
from yearweek.weeks.week_dates import week_range
from yearweek.weeks.week_of_year import weeks_in_year, year_week

DateLike = Union[str, date, datetime, pd.Timestamp]
TokenLike = Union[int, str]


def _is_leap_array(year: np.ndarray) -> np.ndarray:
    return (year % 4 == 0) & ((year % 100 != 0) | (year % 400 == 0))


def _first_week_shift_array(lead: np.ndarray, rule: FirstWeekRule) -> np.ndarray:
    """Vectorised zero-based day of year on which week 1 starts."""
    return np.where(DAYS_IN_WEEK - lead >= rule.full_days, -lead, DAYS_IN_WEEK - lead) * (lead != 0)


def week_numbers_array(
    year: np.ndarray,
    day_of_year: np.ndarray,
    jan1_dow: np.ndarray,
    policy: WeekPolicy
) -> np.ndarray:
    """
    Week numbers for arrays of (year, zero-based day of year, Sunday-based
    weekday of January 1st), matching week_of_year_with_last_week_policy.
    """
    start = int(policy.start)
    lead = (jan1_dow - start) % DAYS_IN_WEEK
    shift = _first_week_shift_array(lead, policy.rule)
    weeks = (day_of_year - shift) // DAYS_IN_WEEK + 1

    before = day_of_year < shift
    if before.any():
        prev_days = np.where(_is_leap_array(year - 1), 366, 365)
        prev_jan1 = (jan1_dow - prev_days) % DAYS_IN_WEEK
        prev_shift = _first_week_shift_array((prev_jan1 - start) % DAYS_IN_WEEK, policy.rule)
        prev_weeks = (day_of_year + prev_days - prev_shift) // DAYS_IN_WEEK + 1
        weeks = np.where(before, prev_weeks, weeks)

    if policy.last_full_week:
        year_days = np.where(_is_leap_array(year), 366, 365)
        dec31_dow = (jan1_dow + year_days - 1) % DAYS_IN_WEEK
        short = dec31_dow != int(policy.start.week_end)
        first_day = year_days - 1 - (dec31_dow - start) % DAYS_IN_WEEK
        weeks = np.where(short & (day_of_year >= first_day), 1, weeks)

    return weeks


class YearWeekConverter:
    """
    A class for converting between year-week tokens and calendar dates.

    This class provides methods for:
    - Converting YYWW / YYYYWW tokens to the first date of the week
    - Converting calendar dates to week numbers and tokens
    - Batch conversion of pandas Series
    - Validating tokens against the number of weeks in a year

    The week policy comes from the `weeks` section of the Hydra configuration
    unless one is passed explicitly.

    Example:
        >>> converter = YearWeekConverter(config)
        >>> converter.convert_token_to_date("202034")
        datetime.date(2020, 8, 16)
        >>> converter.convert_date_to_token("2020-08-16")
        '202034'
    """

    def __init__(
        self,
        config: Optional[DictConfig],
        log_operations: bool = False,
        policy: Optional[WeekPolicy] = None
    ) -> None:
        """
        Initialize the Year-Week Converter.

        Args:
            config (DictConfig): Hydra configuration object
            log_operations: Whether to log conversion operations (default: False)
            policy: Explicit week policy; overrides the configuration when given
        """
        self.config = config
        self.log_operations = log_operations
        self.logger = get_logger()
        self.policy = policy if policy is not None else policy_from_config(config)
        self.logger.info(
            "Initialized YearWeekConverter with start={}, rule={}, last_year_fallback={}, "
            "last_full_week={}, log_operations={}",
            self.policy.start.name, self.policy.rule.value, self.policy.last_year_fallback,
            self.policy.last_full_week, log_operations
        )

    @staticmethod
    def _to_date(value: DateLike) -> date:
        """Reduce a date-like value to a datetime.date."""
        if isinstance(value, str):
            try:
                return datetime.strptime(value.strip(), "%Y-%m-%d").date()
            except ValueError as e:
                raise InvalidArgument(f"Invalid date format. Expected 'YYYY-MM-DD', got: {value}") from e
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        raise InvalidArgument(f"Unsupported date value: {value!r}")

    def convert_token_to_date(self, token: TokenLike, today: Optional[date] = None) -> date:
        """
        Convert a year-week token to the first calendar date of that week.

        Args:
            token: YYWW or YYYYWW token, as int or str.
            today: Reference date for the century of 4 digit tokens (default: today).

        Returns:
            date: First day of the week

        Raises:
            InvalidArgument: If the token is malformed or names week 00.
        """
        try:
            first, _ = self.get_week_range(token, today)

            if self.log_operations:
                self.logger.debug("Converted token {} to: {}", token, first.isoformat())

            return first

        except Exception as e:
            self.logger.error("Error converting token {} to date: {}", token, str(e))
            raise

    def get_week_range(self, token: TokenLike, today: Optional[date] = None) -> Tuple[date, date]:
        """First and last dates of the week a token names."""
        spec = parse_year_week_token(token, self.policy, today)
        first, last = week_range(spec)

        if self.log_operations:
            self.logger.debug("Week {} range: {} to {}", token, first, last)

        return first, last

    def convert_date_to_year_week(self, value: DateLike) -> Tuple[int, int]:
        """(year, week) a date is reported under by the configured policy."""
        try:
            result = year_week(
                self._to_date(value), self.policy.start, self.policy.rule, self.policy.last_full_week
            )

            if self.log_operations:
                self.logger.debug("Converted date {} to year/week: {}", value, result)

            return result

        except Exception as e:
            self.logger.error("Error converting date {} to year/week: {}", value, str(e))
            raise

    def convert_date_to_week(self, value: DateLike) -> int:
        """
        Week number of a date under the configured policy.

        Args:
            value: Date to convert. Can be:
                - String in "YYYY-MM-DD" format
                - date / datetime object
                - pandas Timestamp

        Returns:
            int: Week number
        """
        return self.convert_date_to_year_week(value)[1]

    def convert_date_to_token(self, value: DateLike, digits: int = 6) -> str:
        """
        Convert a date to a YYYYWW (or YYWW) token.

        Example:
            >>> converter.convert_date_to_token("2024-12-30")   # last_full_week=True
            '202501'
        """
        year, week = self.convert_date_to_year_week(value)
        return format_year_week_token(year, week, digits)

    def convert_dates_to_weeks_pandas(
        self,
        dates: Union[DateLike, pd.Series]
    ) -> Union[int, pd.Series]:
        """
        Convert date(s) to week numbers with vectorised arithmetic for batch processing.

        Args:
            dates: Single date or pandas Series of dates / date strings.

        Returns:
            Union[int, pd.Series]: Week number(s); Series results use the Int64
            dtype with <NA> for missing dates.

        Example:
            >>> dates = pd.Series(["2020-01-01", "2020-01-05", None])
            >>> converter.convert_dates_to_weeks_pandas(dates)
            0       1
            1       2
            2    <NA>
            dtype: Int64
        """
        if not isinstance(dates, pd.Series):
            return self.convert_date_to_week(dates)

        try:
            started = time.perf_counter()
            self.logger.info("Processing batch week conversion for {} dates", len(dates))

            dt_series = pd.to_datetime(dates)
            present = dt_series.notna().to_numpy()
            filled = dt_series.fillna(pd.Timestamp("2000-01-01"))

            year = filled.dt.year.to_numpy(dtype=np.int64)
            day_of_year = filled.dt.dayofyear.to_numpy(dtype=np.int64) - 1
            dow = (filled.dt.dayofweek.to_numpy(dtype=np.int64) + 1) % DAYS_IN_WEEK
            jan1_dow = (dow - day_of_year) % DAYS_IN_WEEK

            weeks = week_numbers_array(year, day_of_year, jan1_dow, self.policy)
            result = pd.Series(weeks, index=dates.index, dtype="Int64")
            result[~present] = pd.NA

            get_logger_config().log_conversion_summary(
                "dates_to_weeks",
                total=len(dates),
                missing=int((~present).sum()),
                duration=time.perf_counter() - started,
            )
            return result

        except Exception as e:
            self.logger.error("Error in pandas batch week conversion: {}", str(e))
            raise

    def convert_tokens_to_dates_pandas(self, tokens: pd.Series, today: Optional[date] = None) -> pd.Series:
        """Convert a Series of tokens to week start dates (datetime64, NaT for missing tokens)."""
        def convert(token):
            if pd.isna(token):
                return pd.NaT
            if isinstance(token, float) and token.is_integer():
                token = int(token)
            return pd.Timestamp(self.convert_token_to_date(token, today))

        try:
            return pd.to_datetime(tokens.map(convert))
        except Exception as e:
            self.logger.error("Error in pandas batch token conversion: {}", str(e))
            raise

    def get_weeks_in_year(self, year: int) -> int:
        """Number of the last week of a year under the configured policy."""
        last_week = weeks_in_year(year, self.policy.start, self.policy.rule)

        if self.log_operations:
            self.logger.debug("Year {} has {} weeks", year, last_week)

        return last_week

    def is_valid_token(self, token: TokenLike, today: Optional[date] = None) -> bool:
        """Check if a token is well formed and names an existing week of its year."""
        try:
            year, week = split_year_week_token(token, today)
            is_valid = 1 <= week <= self.get_weeks_in_year(year)
        except InvalidArgument:
            is_valid = False

        if self.log_operations:
            self.logger.debug("Validation for token {}: {}", token, is_valid)

        return is_valid

    def get_current_token(self, today: Optional[date] = None, digits: int = 6) -> str:
        """Get the current week as a token."""
        current = self.convert_date_to_token(today or date.today(), digits)
        self.logger.info("Current token: {}", current)
        return current

    def get_days_diff(self, token: TokenLike, other_token: TokenLike) -> float:
        """
        Difference in days between the starts of two weeks.

        Returns:
            float: Positive if other_token is after token.

        Example:
            >>> converter.get_days_diff("202002", "202004")
            14.0
        """
        try:
            current = pd.Timestamp(self.convert_token_to_date(token))
            other = pd.Timestamp(self.convert_token_to_date(other_token))
            result = float((other - current) / np.timedelta64(1, 'D'))

            if self.log_operations:
                self.logger.debug("Days difference between {} and {}: {:.1f} days", token, other_token, result)

            return result

        except Exception as e:
            self.logger.error(
                "Error calculating days difference between {} and {}: {}", token, other_token, str(e)
            )
            raise

    def get_week_info(self, token: TokenLike, today: Optional[date] = None) -> dict:
        """Get comprehensive information about the week a token names."""
        try:
            year, week = split_year_week_token(token, today)
            first, last = self.get_week_range(token, today)
            days: List[date] = [
                add_days(first, offset) for offset in range((last - first).days + 1)
            ]

            info = {
                'year': year,
                'week': week,
                'token': format_year_week_token(year, week),
                'start': first,
                'end': last,
                'days': days,
                'week_start': self.policy.start.name.lower(),
                'first_week_rule': self.policy.rule.value,
                'total_weeks_in_year': self.get_weeks_in_year(year)
            }

            if self.log_operations:
                self.logger.debug("Generated week info for token {}: {} to {}", token, first, last)

            return info

        except Exception as e:
            self.logger.error("Error generating week info for token {}: {}", token, str(e))
            raise


# %%
# Example usage
if __name__ == "__main__":
    from hydra import compose, initialize_config_dir
    from hydra.core.global_hydra import GlobalHydra
    from yearweek.utils.find_paths import find_config_dir
    # %%
    conf_dir = find_config_dir()
    print(f"config path: {conf_dir}")

    GlobalHydra.instance().clear()
    with initialize_config_dir(config_dir=str(conf_dir), version_base=None):
        cfg = compose(config_name="config")
    # %%
    setup_logger(cfg)
    logger = get_logger()
    logger.info("Starting year-week converter demonstration")

    converter = YearWeekConverter(config=cfg, log_operations=True)
    # %%
    for token in ["202001", "202002", "202034", "2034"]:
        first, last = converter.get_week_range(token)
        print(f"   {token}: {first} to {last}")
    # %%
    for value in ["2020-01-01", "2022-12-31", "2024-12-31"]:
        print(f"   {value} -> {converter.convert_date_to_token(value)}")
    # %%
    dates_series = pd.Series(["2024-01-01", "2024-02-15", "2024-06-30", "2024-12-31"])
    print(converter.convert_dates_to_weeks_pandas(dates_series))

    logger.info("Completed year-week converter demonstration")

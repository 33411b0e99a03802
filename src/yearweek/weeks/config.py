"""
Hydra / OmegaConf configuration for week policies.

Looks up the `weeks` section of the project configuration and turns it into a
WeekPolicy:

    weeks:
      week_start: sunday            # any weekday name, abbreviation or 0..6 (Sunday=0)
      first_week_rule: first_day    # first_day | first_full_week | first_four_day_week
      last_year_fallback: false
      last_full_week: false
      locale: null                  # e.g. "de-DE"; overrides week_start / first_week_rule

Missing keys fall back to the defaults above, a missing section yields the
default policy.
"""
# -----------------------------------------------------------------------------
# UPDATED ON: 2026-10-19
# CREATED ON: 2026-10-14
# -----------------------------------------------------------------------------
# COPYRIGHT @ 2025 Ricoh. All rights reserved.
# The information contained herein is copyright and proprietary to
# Ricoh and may not be reproduced, disclosed, or used in
# any manner without prior written permission from Ricoh.
# -----------------------------------------------------------------------------

from typing import Optional

from omegaconf import DictConfig, OmegaConf

from yearweek.weeks.locales import week_convention
from yearweek.weeks.policy import WeekPolicy

DEFAULT_WEEKS_CONFIG = {
    "week_start": "sunday",
    "first_week_rule": "first_day",
    "last_year_fallback": False,
    "last_full_week": False,
    "locale": None,
}

# Places the weeks section may live in a composed config
POSSIBLE_PATHS = ["weeks", "calendar.weeks", "yearweek.weeks"]


def find_weeks_config(config: Optional[DictConfig]) -> DictConfig:
    """Find the weeks section and merge it over the defaults."""
    defaults = OmegaConf.create(DEFAULT_WEEKS_CONFIG)
    if config is None:
        return defaults

    for path in POSSIBLE_PATHS:
        found = OmegaConf.select(config, path)
        if found is not None:
            return OmegaConf.merge(defaults, found)

    return defaults


def policy_from_config(config: Optional[DictConfig]) -> WeekPolicy:
    """
    Build the WeekPolicy described by a Hydra configuration.

    Args:
        config: Composed Hydra configuration (or None for defaults).

    Returns:
        WeekPolicy: The configured policy.

    Raises:
        InvalidArgument: If the week start, rule or locale cannot be resolved.
    """
    weeks_config = find_weeks_config(config)

    start = weeks_config.week_start
    rule = weeks_config.first_week_rule
    if weeks_config.locale is not None:
        start, rule = week_convention(weeks_config.locale)

    return WeekPolicy(
        start=start,
        rule=rule,
        last_year_fallback=bool(weeks_config.last_year_fallback),
        last_full_week=bool(weeks_config.last_full_week),
    )

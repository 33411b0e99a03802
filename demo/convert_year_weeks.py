"""
Convert year-week tokens to dates and dates to tokens using Hydra with decorator
"""
# %%
# -----------------------------------------------------------------------------
# * UPDATED ON: 2026-10-19
# * CREATED ON: 2026-10-14
# -----------------------------------------------------------------------------
# COPYRIGHT @ 2025 Ricoh. All rights reserved.
# The information contained herein is copyright and proprietary to
# Ricoh and may not be reproduced, disclosed, or used in
# any manner without prior written permission from Ricoh.
# -----------------------------------------------------------------------------
# 🚀 Quick Start:
# -----------------------------------------------------------------------------
# * Default policy: python convert_year_weeks.py
# -----------------------------------------------------------------------------
# * Monday weeks, short December weeks count for next year:
#   python convert_year_weeks.py weeks.week_start=monday weeks.last_full_week=true
# -----------------------------------------------------------------------------
# * Locale defaults: python convert_year_weeks.py weeks.locale=de-DE 'demo.tokens=[202053,202101]'
# -----------------------------------------------------------------------------
# * Debug: python convert_year_weeks.py loggers.loguru.default_level=DEBUG
# %%
import hydra
from omegaconf import DictConfig

from yearweek.loggers.loguru.config import get_logger, setup_logger_for_script
from yearweek.weeks.converters import YearWeekConverter


# %%
@hydra.main(config_path="../conf", config_name="config", version_base=None)
def main(cfg: DictConfig):
    setup_logger_for_script(cfg, __file__)
    logger = get_logger()

    converter = YearWeekConverter(config=cfg, log_operations=True)
    policy = converter.policy
    logger.info("Converting with {} weeks, rule {}", policy.start.name.lower(), policy.rule.value)

    print("\n" + "=" * 60)
    print("TOKEN -> WEEK RANGE")
    print("=" * 60)
    for token in cfg.demo.tokens:
        token = str(token)
        if not converter.is_valid_token(token):
            print(f"  {token}: invalid for this policy")
            continue
        info = converter.get_week_info(token)
        print(f"  {token}: {info['start']} to {info['end']} "
              f"(week {info['week']} of {info['total_weeks_in_year']})")

    print("\n" + "=" * 60)
    print("DATE -> TOKEN")
    print("=" * 60)
    for value in cfg.demo.dates:
        print(f"  {value} -> {converter.convert_date_to_token(value)}")

    logger.info("Done")


# %%
if __name__ == "__main__":
    main()

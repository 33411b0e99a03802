"""
Locale to week policy adapter.

Maps culture names to the week start day and first week rule that .NET
CultureInfo.DateTimeFormat reports for them, so that week arithmetic can stay
free of locale handling. Only the rule selection lives here.
"""
# %%
# -----------------------------------------------------------------------------
# UPDATED ON: 2026-10-19
# CREATED ON: 2026-10-14
# -----------------------------------------------------------------------------
# COPYRIGHT @ 2025 Ricoh. All rights reserved.
# The information contained herein is copyright and proprietary to
# Ricoh and may not be reproduced, disclosed, or used in
# any manner without prior written permission from Ricoh.
# -----------------------------------------------------------------------------
# %%
from typing import Dict, Tuple

from yearweek.weeks.exceptions import InvalidArgument
from yearweek.weeks.policy import FirstWeekRule, WeekPolicy, WeekStart

_SUN, _MON, _SAT = WeekStart.SUNDAY, WeekStart.MONDAY, WeekStart.SATURDAY
_DAY = FirstWeekRule.FIRST_DAY
_FOUR = FirstWeekRule.FIRST_FOUR_DAY_WEEK

WEEK_CONVENTIONS: Dict[str, Tuple[WeekStart, FirstWeekRule]] = {
    "": (_SUN, _DAY),  # invariant culture
    "en-us": (_SUN, _DAY),
    "en-ca": (_SUN, _DAY),
    "en-au": (_MON, _DAY),
    "en-gb": (_MON, _FOUR),
    "en-ie": (_MON, _FOUR),
    "zh-cn": (_MON, _DAY),
    "zh-tw": (_SUN, _DAY),
    "zh-hk": (_SUN, _DAY),
    "ja-jp": (_SUN, _DAY),
    "ko-kr": (_SUN, _DAY),
    "de-de": (_MON, _FOUR),
    "de-at": (_MON, _FOUR),
    "de-ch": (_MON, _FOUR),
    "fr-fr": (_MON, _FOUR),
    "fr-ca": (_SUN, _DAY),
    "es-es": (_MON, _FOUR),
    "es-mx": (_SUN, _DAY),
    "it-it": (_MON, _FOUR),
    "nl-nl": (_MON, _FOUR),
    "sv-se": (_MON, _FOUR),
    "da-dk": (_MON, _FOUR),
    "nb-no": (_MON, _FOUR),
    "fi-fi": (_MON, _FOUR),
    "pl-pl": (_MON, _FOUR),
    "pt-pt": (_MON, _FOUR),
    "pt-br": (_SUN, _DAY),
    "ru-ru": (_MON, _DAY),
    "tr-tr": (_MON, _DAY),
    "he-il": (_SUN, _DAY),
    "ar-sa": (_SAT, _DAY),
    "hi-in": (_MON, _DAY),
}

# Bare language codes resolve to their primary culture
_PRIMARY_CULTURES = {
    "en": "en-us",
    "zh": "zh-cn",
    "ja": "ja-jp",
    "ko": "ko-kr",
    "de": "de-de",
    "fr": "fr-fr",
    "es": "es-es",
    "it": "it-it",
    "nl": "nl-nl",
    "sv": "sv-se",
    "da": "da-dk",
    "nb": "nb-no",
    "fi": "fi-fi",
    "pl": "pl-pl",
    "pt": "pt-br",
    "ru": "ru-ru",
    "tr": "tr-tr",
    "he": "he-il",
    "ar": "ar-sa",
    "hi": "hi-in",
}


def _normalize(name: str) -> str:
    return name.strip().replace("_", "-").lower()


def week_convention(name: str) -> Tuple[WeekStart, FirstWeekRule]:
    """
    (week start, first week rule) for a culture name such as "en-US", "zh_CN" or "de".

    Raises:
        InvalidArgument: If the culture is not known.
    """
    if name is None:
        raise InvalidArgument("Locale name must not be None")
    key = _normalize(name)
    key = _PRIMARY_CULTURES.get(key, key)
    try:
        return WEEK_CONVENTIONS[key]
    except KeyError as e:
        raise InvalidArgument(f"Unknown locale: {name!r}") from e


def policy_for_locale(
    name: str,
    last_year_fallback: bool = False,
    last_full_week: bool = False
) -> WeekPolicy:
    """Build the WeekPolicy a culture uses by default."""
    start, rule = week_convention(name)
    return WeekPolicy(
        start=start,
        rule=rule,
        last_year_fallback=last_year_fallback,
        last_full_week=last_full_week,
    )

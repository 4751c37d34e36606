"""Vietnamese lunar calendar (Âm lịch): conversions, Can Chi and auspicious hours."""

from .can_chi import day_can_chi, month_can_chi, year_can_chi
from .grid import month_grid, next_month, previous_month, sync_day
from .hours import hoang_dao_hours
from .lunar import (
    clamp_day,
    days_in_lunar_month,
    days_in_solar_month,
    from_lunar,
    is_leap_year,
    leap_month,
    local_date,
    to_lunar,
)
from .models import (
    ConversionFailure,
    DayCell,
    FailureKind,
    HourWindow,
    LunarDate,
    SexagenaryPair,
)
from .names import (
    gregorian_month_year,
    lunar_month_name,
    lunar_summary,
    solar_term,
    weekday_name,
    weekday_short_name,
)
from .tool import date_conversion_tool

__all__ = [
    "ConversionFailure",
    "DayCell",
    "FailureKind",
    "HourWindow",
    "LunarDate",
    "SexagenaryPair",
    "clamp_day",
    "date_conversion_tool",
    "day_can_chi",
    "days_in_lunar_month",
    "days_in_solar_month",
    "from_lunar",
    "gregorian_month_year",
    "hoang_dao_hours",
    "is_leap_year",
    "leap_month",
    "local_date",
    "lunar_month_name",
    "lunar_summary",
    "month_can_chi",
    "month_grid",
    "next_month",
    "previous_month",
    "solar_term",
    "sync_day",
    "to_lunar",
    "weekday_name",
    "weekday_short_name",
    "year_can_chi",
]

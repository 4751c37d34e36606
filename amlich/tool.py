"""
Date conversion between Solar (Dương lịch) and Lunar (Âm lịch), returned
as a JSON-ready response.
"""

import datetime
from typing import Any

from .can_chi import day_can_chi, month_can_chi, year_can_chi
from .config import LOCALE, TIME_ZONE_NAME
from .hours import hoang_dao_hours
from .log import get_logger
from .lunar import from_lunar, to_lunar
from .models import ConversionFailure, LunarDate
from .names import lunar_month_name, solar_term, weekday_name

log = get_logger(__name__)

CONVERSION_TYPES = ("s2l", "l2s")


def validate_date(date: str) -> bool:
    """Validate if a string is in YYYY-MM-DD format."""
    try:
        datetime.date.fromisoformat(date)
        return True
    except ValueError:
        return False


def _describe_day(solar: datetime.date, lunar: LunarDate) -> dict[str, Any]:
    """Fields shared by both conversion directions."""
    weekday = weekday_name(solar)
    can_chi_year = year_can_chi(lunar.year).label
    return {
        "solar_date": solar.isoformat(),
        "lunar_date": {
            "year": lunar.year,
            "month": lunar.month,
            "day": lunar.day,
            "leap_month": lunar.is_leap_month,
        },
        "weekday_vi": weekday,
        "full_solar_date_vi": f"{weekday} ngày {solar.day} tháng {solar.month} năm {solar.year}",
        "full_lunar_date_vi": (
            f"{weekday} ngày {lunar.day} tháng "
            f"{lunar_month_name(lunar.month, lunar.is_leap_month)} năm {can_chi_year}"
        ),
        "can_chi": {
            "day": day_can_chi(solar).label,
            "month": month_can_chi(lunar).label,
            "year": can_chi_year,
        },
        "solar_term": solar_term(solar),
        "auspicious_hours": [
            {
                "name": window.branch,
                "start_hour": f"{window.start_hour:02d}:00",
                "end_hour": f"{window.end_hour:02d}:00",
                "cross_midnight": window.crosses_midnight,
            }
            for window in hoang_dao_hours(solar)
        ],
        "locale": LOCALE,
        "timezone": TIME_ZONE_NAME,
    }


def date_conversion_tool(conversion_type: str, date: str, leap_month: bool = False) -> dict[str, Any]:
    """Convert a YYYY-MM-DD date between the solar and lunar calendars.

    ``s2l`` reads ``date`` as a solar date; ``l2s`` reads it as lunar
    year-month-day, with ``leap_month`` selecting the repeated month.
    Problems are reported in an ``error`` key, never raised.
    """
    if not all([conversion_type, date]):
        return {"error": "Missing one or more required arguments: conversion_type, date"}

    if conversion_type not in CONVERSION_TYPES:
        return {"error": "Wrong Conversion Type: conversion_type must be s2l or l2s"}

    if conversion_type == "s2l":
        if not validate_date(date):
            return {"error": "Invalid date format: YYYY-MM-DD"}
        try:
            solar = datetime.date.fromisoformat(date)
            lunar = to_lunar(solar)
            if isinstance(lunar, ConversionFailure):
                return {"error": lunar.message, "kind": lunar.kind.value}
            return {"mode": "s2l", **_describe_day(solar, lunar)}
        except Exception as error:
            log.error(f"{__name__}: s2l failed for '{date}': {error}")
            return {"error": f"Error converting Solar date {date} to Lunar date: {error}"}

    # Lunar dates such as 30/2 are not valid ISO dates, so parse the fields by hand.
    try:
        year, month, day = (int(part) for part in date.split("-"))
    except ValueError:
        return {"error": "Invalid date format: YYYY-MM-DD"}
    try:
        solar = from_lunar(year, month, day, bool(leap_month))
        if isinstance(solar, ConversionFailure):
            return {"error": solar.message, "kind": solar.kind.value}
        lunar = LunarDate(year, month, day, bool(leap_month))
        return {"mode": "l2s", **_describe_day(solar, lunar)}
    except Exception as error:
        log.error(f"{__name__}: l2s failed for '{date}' (leap_month={leap_month}): {error}")
        return {"error": f"Error converting Lunar date {date} to Solar date: {error}"}

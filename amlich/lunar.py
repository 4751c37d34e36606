"""Conversion between the Gregorian and the Vietnamese lunar calendar."""

import calendar
import datetime
import math
from zoneinfo import ZoneInfo

from . import astro
from .config import MAX_YEAR, MIN_YEAR, TIME_ZONE, TIME_ZONE_NAME
from .models import ConversionFailure, LunarDate, invalid_date, unresolved

VN_TZ = ZoneInfo(TIME_ZONE_NAME)


def local_date(value: datetime.date | datetime.datetime) -> datetime.date:
    """Resolve a date or datetime to the civil date in Vietnam.

    Aware datetimes are converted to Asia/Ho_Chi_Minh first; naive ones are
    taken as Vietnamese local time already.
    """
    if isinstance(value, datetime.datetime):
        if value.tzinfo is not None:
            value = value.astimezone(VN_TZ)
        return value.date()
    return value


def today(now: datetime.datetime | None = None) -> datetime.date:
    """Current civil date in Vietnam, whatever the host time zone."""
    return local_date(now or datetime.datetime.now(VN_TZ))


def is_leap_year(year: int) -> bool:
    """Proleptic Gregorian leap year rule."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_solar_month(year: int, month: int) -> int | ConversionFailure:
    """Number of days in a Gregorian month."""
    if not 1 <= month <= 12:
        return invalid_date(f"Invalid solar month: {month}")
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return calendar.mdays[month]


# Month grids spill one year past the supported range on either side.
FIRST_YEAR = MIN_YEAR - 1
LAST_YEAR = MAX_YEAR + 1


def to_lunar(value: datetime.date | datetime.datetime) -> LunarDate | ConversionFailure:
    """Convert a Gregorian (solar) date to its lunar date."""
    civil = local_date(value)
    if not FIRST_YEAR <= civil.year <= LAST_YEAR:
        return unresolved(f"Year {civil.year} is outside {FIRST_YEAR}-{LAST_YEAR}")

    day_number = astro.jd_from_date(civil.day, civil.month, civil.year)
    k = astro.lunation_index(day_number)
    month_start = astro.new_moon_day(k + 1, TIME_ZONE)
    # The mean lunation can run ahead of the true new moon
    while month_start > day_number:
        k -= 1
        month_start = astro.new_moon_day(k, TIME_ZONE)

    a11 = astro.lunar_month_11(civil.year, TIME_ZONE)
    b11 = a11
    if a11 >= month_start:
        lunar_year = civil.year
        a11 = astro.lunar_month_11(civil.year - 1, TIME_ZONE)
    else:
        lunar_year = civil.year + 1
        b11 = astro.lunar_month_11(civil.year + 1, TIME_ZONE)

    lunar_day = day_number - month_start + 1
    diff = (month_start - a11) // 29
    is_leap = False
    lunar_month = diff + 11
    if b11 - a11 > 365:
        leap_diff = astro.leap_month_offset(a11, TIME_ZONE)
        if diff >= leap_diff:
            lunar_month = diff + 10
            is_leap = diff == leap_diff
    if lunar_month > 12:
        lunar_month -= 12
    if lunar_month >= 11 and diff < 4:
        lunar_year -= 1
    return LunarDate(lunar_year, lunar_month, lunar_day, is_leap)


def _leap_month_in(a11: int, b11: int) -> int | None:
    """Leap month number inside the lunar year running from a11 to b11, if any."""
    if b11 - a11 <= 365:
        return None
    leap = astro.leap_month_offset(a11, TIME_ZONE) - 2
    return leap + 12 if leap <= 0 else leap


def leap_month(year: int) -> int | None:
    """Return the month that is repeated as a leap month in a lunar year."""
    before = _leap_month_in(
        astro.lunar_month_11(year - 1, TIME_ZONE), astro.lunar_month_11(year, TIME_ZONE)
    )
    if before is not None and before < 11:
        return before
    after = _leap_month_in(
        astro.lunar_month_11(year, TIME_ZONE), astro.lunar_month_11(year + 1, TIME_ZONE)
    )
    if after is not None and after >= 11:
        return after
    return None


def _month_lunation(year: int, month: int, is_leap: bool) -> int | ConversionFailure:
    """Lunation index k such that new_moon_day(k) starts the requested month."""
    # January of FIRST_YEAR still belongs to the lunar year before it
    if not FIRST_YEAR - 1 <= year <= LAST_YEAR:
        return unresolved(f"Lunar year {year} is outside {FIRST_YEAR - 1}-{LAST_YEAR}")
    if not 1 <= month <= 12:
        return invalid_date(f"Invalid lunar month: {month}")

    if month < 11:
        a11 = astro.lunar_month_11(year - 1, TIME_ZONE)
        b11 = astro.lunar_month_11(year, TIME_ZONE)
    else:
        a11 = astro.lunar_month_11(year, TIME_ZONE)
        b11 = astro.lunar_month_11(year + 1, TIME_ZONE)
    k = math.floor(0.5 + (a11 - astro.LUNATION_EPOCH) / astro.SYNODIC_MONTH)
    off = month - 11
    if off < 0:
        off += 12

    leap = _leap_month_in(a11, b11)
    if leap is not None:
        leap_off = astro.leap_month_offset(a11, TIME_ZONE)
        if is_leap and month != leap:
            return invalid_date(f"Lunar year {year} has no leap month {month}")
        if is_leap or off >= leap_off:
            off += 1
    elif is_leap:
        return invalid_date(f"Lunar year {year} has no leap month")
    return k + off


def days_in_lunar_month(year: int, month: int, is_leap: bool = False) -> int | ConversionFailure:
    """Length (29 or 30) of a lunar month."""
    k = _month_lunation(year, month, is_leap)
    if isinstance(k, ConversionFailure):
        return k
    return astro.new_moon_day(k + 1, TIME_ZONE) - astro.new_moon_day(k, TIME_ZONE)


def from_lunar(
    year: int,
    month: int,
    day: int,
    is_leap: bool = False,
) -> datetime.date | ConversionFailure:
    """Convert a lunar date to its Gregorian (solar) date."""
    k = _month_lunation(year, month, is_leap)
    if isinstance(k, ConversionFailure):
        return k
    month_start = astro.new_moon_day(k, TIME_ZONE)
    length = astro.new_moon_day(k + 1, TIME_ZONE) - month_start
    if not 1 <= day <= length:
        return invalid_date(
            f"Lunar month {month}{' (leap)' if is_leap else ''}/{year} has {length} days, got {day}"
        )
    dd, mm, yy = astro.jd_to_date(month_start + day - 1)
    return datetime.date(yy, mm, dd)


def clamp_day(day: int, length: int) -> int:
    """Clamp a picker day to a freshly computed month length."""
    return max(1, min(day, length))

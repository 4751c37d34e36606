"""
Astronomical building blocks of the Vietnamese lunar calendar.

Algorithm by Ho Ngoc Duc (https://www.informatik.uni-leipzig.de/~duc/amlich/),
new moon and solar longitude series from "Astronomical Algorithms" by
Jean Meeus, 1998.
"""

import math
from functools import lru_cache

from .config import TIME_ZONE

# Julian day of 1900-01-01 new moon, reference for counting lunations.
LUNATION_EPOCH = 2415021.076998695
SYNODIC_MONTH = 29.530588853
GREGORIAN_REFORM_JD = 2299161

DR = math.pi / 180.0


def jd_from_date(dd: int, mm: int, yy: int) -> int:
    """Compute the Julian day number for a given Gregorian date."""
    a = (14 - mm) // 12
    y = yy + 4800 - a
    m = mm + 12 * a - 3
    jd = dd + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045
    if jd < GREGORIAN_REFORM_JD:
        jd = dd + (153 * m + 2) // 5 + 365 * y + y // 4 - 32083
    return jd


def jd_to_date(jd: int) -> tuple[int, int, int]:
    """Convert a Julian day number to a Gregorian (day, month, year)."""
    if jd >= GREGORIAN_REFORM_JD:
        a = jd + 32044
        b = (4 * a + 3) // 146097
        c = a - (b * 146097) // 4
    else:
        b = 0
        c = jd + 32082
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = b * 100 + d - 4800 + m // 10
    return day, month, year


@lru_cache(maxsize=4096)
def new_moon(k: int) -> float:
    """Julian date (UT) of the k-th new moon after 1900-01-01."""
    t = k / 1236.85
    t2 = t * t
    t3 = t2 * t
    jd1 = 2415020.75933 + 29.53058868 * k + 0.0001178 * t2 - 0.000000155 * t3
    jd1 += 0.00033 * math.sin((166.56 + 132.87 * t - 0.009173 * t2) * DR)
    # Mean anomalies of the sun and moon, moon's argument of latitude
    m = 359.2242 + 29.10535608 * k - 0.0000333 * t2 - 0.00000347 * t3
    mpr = 306.0253 + 385.81691806 * k + 0.0107306 * t2 + 0.00001236 * t3
    f = 21.2964 + 390.67050646 * k - 0.0016528 * t2 - 0.00000239 * t3
    terms = (
        (0.1734 - 0.000393 * t) * math.sin(m * DR)
        + 0.0021 * math.sin(2 * DR * m)
        - 0.4068 * math.sin(mpr * DR)
        + 0.0161 * math.sin(DR * 2 * mpr)
        - 0.0004 * math.sin(DR * 3 * mpr)
        + 0.0104 * math.sin(DR * 2 * f)
        - 0.0051 * math.sin(DR * (m + mpr))
        - 0.0074 * math.sin(DR * (m - mpr))
        + 0.0004 * math.sin(DR * (2 * f + m))
        - 0.0004 * math.sin(DR * (2 * f - m))
        - 0.0006 * math.sin(DR * (2 * f + mpr))
        + 0.0010 * math.sin(DR * (2 * f - mpr))
        + 0.0005 * math.sin(DR * (2 * mpr + m))
    )
    if t < -11:
        delta_t = 0.001 + 0.000839 * t + 0.0002261 * t2 - 0.00000845 * t3 - 0.000000081 * t * t3
    else:
        delta_t = -0.000278 + 0.000265 * t + 0.000262 * t2
    return jd1 + terms - delta_t


def sun_longitude(jdn: float) -> float:
    """True longitude of the sun in radians, normalized to [0, 2*pi)."""
    t = (jdn - 2451545.0) / 36525.0
    t2 = t * t
    m = 357.52910 + 35999.05030 * t - 0.0001559 * t2 - 0.00000048 * t * t2
    l0 = 280.46645 + 36000.76983 * t + 0.0003032 * t2
    dl = (1.914600 - 0.004817 * t - 0.000014 * t2) * math.sin(DR * m)
    dl += (0.019993 - 0.000101 * t) * math.sin(DR * 2 * m) + 0.000290 * math.sin(DR * 3 * m)
    return ((l0 + dl) * DR) % (2 * math.pi)


def sun_longitude_sector(day_number: int, time_zone: int = TIME_ZONE) -> int:
    """Major solar term sector (0-11) at local midnight starting a Julian day."""
    return int(sun_longitude(day_number - 0.5 - time_zone / 24.0) / math.pi * 6)


def solar_term_index(day_number: int, time_zone: int = TIME_ZONE) -> int:
    """Solar term index (0-23, 0 = Xuân Phân) at local midnight of a Julian day."""
    return int(sun_longitude(day_number - 0.5 - time_zone / 24.0) / math.pi * 12)


def new_moon_day(k: int, time_zone: int = TIME_ZONE) -> int:
    """Julian day on which the k-th new moon falls in local time."""
    return int(new_moon(k) + 0.5 + time_zone / 24.0)


def lunation_index(day_number: float) -> int:
    """Number of whole lunations between the 1900 epoch and a Julian day."""
    return math.floor((day_number - LUNATION_EPOCH) / SYNODIC_MONTH)


@lru_cache(maxsize=1024)
def lunar_month_11(yy: int, time_zone: int = TIME_ZONE) -> int:
    """Julian day starting the 11th lunar month (the one holding the winter solstice)."""
    off = jd_from_date(31, 12, yy) - 2415021.0
    k = math.floor(off / SYNODIC_MONTH)
    nm = new_moon_day(k, time_zone)
    if sun_longitude_sector(nm, time_zone) >= 9:
        nm = new_moon_day(k - 1, time_zone)
    return nm


@lru_cache(maxsize=1024)
def leap_month_offset(a11: int, time_zone: int = TIME_ZONE) -> int:
    """Offset after month 11 of the first month that contains no major solar term."""
    k = math.floor((a11 - LUNATION_EPOCH) / SYNODIC_MONTH + 0.5)
    i = 1
    arc = sun_longitude_sector(new_moon_day(k + i, time_zone), time_zone)
    while True:
        last = arc
        i += 1
        arc = sun_longitude_sector(new_moon_day(k + i, time_zone), time_zone)
        if arc == last or i >= 14:
            break
    return i - 1

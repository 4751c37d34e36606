"""Can Chi (sexagenary) names for days, lunar months and years."""

import datetime

from .lunar import local_date
from .models import CAN, CHI, LunarDate, SexagenaryPair

# Day counted as Giáp Tý; day names run on from here in both directions.
DAY_ANCHOR = datetime.date(1984, 2, 2)


def day_offset(value: datetime.date | datetime.datetime) -> int:
    """Signed number of days between the anchor day and a civil date."""
    return local_date(value).toordinal() - DAY_ANCHOR.toordinal()


def day_can_chi(value: datetime.date | datetime.datetime) -> SexagenaryPair:
    """Can Chi of a day."""
    days = day_offset(value)
    return SexagenaryPair(days % len(CAN), days % len(CHI))


def month_can_chi(lunar: LunarDate) -> SexagenaryPair:
    """Can Chi of a lunar month.

    The first lunar month is always Dần. The stem follows the calendar's
    short rule (cycle year + month), not the Ngũ Hổ Độn table; displayed
    month names depend on it staying that way.
    """
    branch = (lunar.month + 1) % len(CHI)
    stem = (lunar.cycle_year % 10 + lunar.month - 1) % len(CAN)
    return SexagenaryPair(stem, branch)


def year_can_chi(year: int) -> SexagenaryPair:
    """Can Chi of a year, 1984 being Giáp Tý."""
    return SexagenaryPair((year + 6) % len(CAN), (year + 8) % len(CHI))

"""Vietnamese display names for dates."""

import datetime

from . import astro
from .can_chi import year_can_chi
from .lunar import local_date
from .models import LunarDate

DAYS = ["Thứ Hai", "Thứ Ba", "Thứ Tư", "Thứ Năm", "Thứ Sáu", "Thứ Bảy", "Chủ Nhật"]

SHORT_DAYS = ["Th 2", "Th 3", "Th 4", "Th 5", "Th 6", "Th 7", "CN"]

MONTHS = [
    "Giêng",
    "Hai",
    "Ba",
    "Tư",
    "Năm",
    "Sáu",
    "Bảy",
    "Tám",
    "Chín",
    "Mười",
    "Mười Một",
    "Chạp",
]

SOLAR_TERMS = [
    "Xuân Phân",
    "Thanh Minh",
    "Cốc Vũ",
    "Lập Hạ",
    "Tiểu Mãn",
    "Mang Chủng",
    "Hạ Chí",
    "Tiểu Thử",
    "Đại Thử",
    "Lập Thu",
    "Xử Thử",
    "Bạch Lộ",
    "Thu Phân",
    "Hàn Lộ",
    "Sương Giáng",
    "Lập Đông",
    "Tiểu Tuyết",
    "Đại Tuyết",
    "Đông Chí",
    "Tiểu Hàn",
    "Đại Hàn",
    "Lập Xuân",
    "Vũ Thủy",
    "Kinh Trập",
]


def weekday_name(value: datetime.date | datetime.datetime) -> str:
    """Full weekday name, e.g. "Thứ Hai"."""
    return DAYS[local_date(value).weekday()]


def weekday_short_name(index: int) -> str:
    """Grid header for a Monday-based weekday index (1=Monday, 7=Sunday)."""
    return SHORT_DAYS[max(1, min(7, index)) - 1]


def gregorian_month_year(value: datetime.date | datetime.datetime) -> str:
    """Month header of the solar calendar, e.g. "Tháng 3 2024"."""
    civil = local_date(value)
    return f"Tháng {civil.month} {civil.year}"


def lunar_month_name(month: int, is_leap: bool = False) -> str:
    """Traditional name of a lunar month, e.g. "Giêng" or "Tư Nhuận"."""
    name = MONTHS[month - 1]
    return f"{name} Nhuận" if is_leap else name


def lunar_summary(lunar: LunarDate) -> str:
    """One-line description of a lunar month and year, as shown under the day."""
    leap = " (nhuận)" if lunar.is_leap_month else ""
    return f"Tháng {lunar.month}{leap}, năm {year_can_chi(lunar.year).label}"


def solar_term(value: datetime.date | datetime.datetime) -> str:
    """Tiết khí in effect at the end of a day."""
    civil = local_date(value)
    day_number = astro.jd_from_date(civil.day, civil.month, civil.year)
    return SOLAR_TERMS[astro.solar_term_index(day_number + 1)]

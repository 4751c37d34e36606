"""Giờ Hoàng Đạo: the auspicious two-hour windows of a day."""

import datetime

from .can_chi import day_can_chi
from .models import CHI, HourWindow

# Six good hours for each day branch, indexed by the day's Chi.
AUSPICIOUS_HOURS = [
    ("Tý", "Sửu", "Mão", "Ngọ", "Thân", "Dậu"),
    ("Dần", "Mão", "Tỵ", "Thân", "Tuất", "Hợi"),
    ("Tý", "Dần", "Mão", "Ngọ", "Mùi", "Dậu"),
    ("Sửu", "Thìn", "Tỵ", "Thân", "Dậu", "Hợi"),
    ("Tý", "Mão", "Thìn", "Ngọ", "Thân", "Hợi"),
    ("Dần", "Thìn", "Tỵ", "Mùi", "Tuất", "Hợi"),
    ("Tý", "Sửu", "Thìn", "Ngọ", "Mùi", "Tuất"),
    ("Sửu", "Mão", "Ngọ", "Mùi", "Dậu", "Hợi"),
    ("Tý", "Dần", "Mão", "Tỵ", "Thân", "Tuất"),
    ("Sửu", "Thìn", "Ngọ", "Mùi", "Dậu", "Hợi"),
    ("Tý", "Mão", "Thìn", "Ngọ", "Thân", "Tuất"),
    ("Dần", "Tỵ", "Mùi", "Thân", "Tuất", "Hợi"),
]


def hour_window(branch_index: int) -> HourWindow:
    """Clock hours covered by a branch; Tý runs from 23h to 1h."""
    return HourWindow(
        CHI[branch_index],
        (branch_index * 2 + 23) % 24,
        (branch_index * 2 + 1) % 24,
    )


HOUR_WINDOWS = [hour_window(i) for i in range(len(CHI))]


def hoang_dao_hours(value: datetime.date | datetime.datetime) -> list[HourWindow]:
    """Auspicious hours of a day, in the natural order of the branches."""
    good = AUSPICIOUS_HOURS[day_can_chi(value).branch_index]
    return [window for window in HOUR_WINDOWS if window.branch in good]

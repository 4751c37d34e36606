"""Month view helpers: the 6x7 day grid and month navigation."""

import datetime

from .lunar import clamp_day, days_in_solar_month, to_lunar
from .models import ConversionFailure, DayCell, invalid_date

GRID_SIZE = 42


def previous_month(year: int, month: int) -> tuple[int, int]:
    """Month shown by the "previous" arrow, rolling back over January."""
    if month <= 1:
        return year - 1, 12
    return year, month - 1


def next_month(year: int, month: int) -> tuple[int, int]:
    """Month shown by the "next" arrow, rolling over December."""
    if month >= 12:
        return year + 1, 1
    return year, month + 1


def sync_day(day: int, year: int, month: int) -> datetime.date | ConversionFailure:
    """Keep the selected day when the displayed month changes, clamped to its length."""
    length = days_in_solar_month(year, month)
    if isinstance(length, ConversionFailure):
        return length
    return datetime.date(year, month, clamp_day(day, length))


def month_grid(year: int, month: int) -> list[DayCell] | ConversionFailure:
    """Forty-two days starting on the Monday on or before the first of the month.

    Every cell carries its lunar date so the view can print the small lunar
    day number under the solar one.
    """
    if not 1 <= month <= 12:
        return invalid_date(f"Invalid solar month: {month}")
    first = datetime.date(year, month, 1)
    start = first - datetime.timedelta(days=first.weekday())

    cells: list[DayCell] = []
    for i in range(GRID_SIZE):
        current = start + datetime.timedelta(days=i)
        lunar = to_lunar(current)
        if isinstance(lunar, ConversionFailure):
            return lunar
        cells.append(
            DayCell(
                date=current,
                lunar=lunar,
                in_month=current.month == month and current.year == year,
                is_weekend=current.weekday() >= 5,
            )
        )
    return cells

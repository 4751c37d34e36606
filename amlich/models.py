"""Value types produced by the calendar engine."""

import datetime
from dataclasses import dataclass
from enum import Enum

CAN = ["Giáp", "Ất", "Bính", "Đinh", "Mậu", "Kỷ", "Canh", "Tân", "Nhâm", "Quý"]

CHI = [
    "Tý",
    "Sửu",
    "Dần",
    "Mão",
    "Thìn",
    "Tỵ",
    "Ngọ",
    "Mùi",
    "Thân",
    "Dậu",
    "Tuất",
    "Hợi",
]


class FailureKind(Enum):
    INVALID_DATE = "invalid_date"
    UNRESOLVED_CONVERSION = "unresolved_conversion"


@dataclass(frozen=True)
class ConversionFailure:
    """A typed "no such date" result returned instead of raising."""

    kind: FailureKind
    message: str

    def __bool__(self) -> bool:
        return False


def invalid_date(message: str) -> ConversionFailure:
    return ConversionFailure(FailureKind.INVALID_DATE, message)


def unresolved(message: str) -> ConversionFailure:
    return ConversionFailure(FailureKind.UNRESOLVED_CONVERSION, message)


@dataclass(frozen=True)
class LunarDate:
    """A date in the Vietnamese lunisolar calendar.

    ``year`` is the Gregorian year in which the lunar year begins (Tết), so
    lunar 1/1/2024 is 2024-02-10.
    """

    year: int
    month: int
    day: int
    is_leap_month: bool = False

    @property
    def cycle_year(self) -> int:
        """Position of the year in the sixty-year cycle (1 = Giáp Tý)."""
        return (self.year - 4) % 60 + 1


@dataclass(frozen=True)
class SexagenaryPair:
    """A Can (heavenly stem) and Chi (earthly branch) pair."""

    stem_index: int
    branch_index: int

    def __post_init__(self):
        if not 0 <= self.stem_index < len(CAN):
            raise ValueError(f"stem index out of range: {self.stem_index}")
        if not 0 <= self.branch_index < len(CHI):
            raise ValueError(f"branch index out of range: {self.branch_index}")

    @property
    def stem(self) -> str:
        return CAN[self.stem_index]

    @property
    def branch(self) -> str:
        return CHI[self.branch_index]

    @property
    def label(self) -> str:
        return f"{self.stem} {self.branch}"

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class HourWindow:
    """A two-hour period of the day named after its earthly branch."""

    branch: str
    start_hour: int
    end_hour: int

    @property
    def crosses_midnight(self) -> bool:
        return self.start_hour > self.end_hour

    @property
    def label(self) -> str:
        return f"{self.branch} ({self.start_hour}h-{self.end_hour}h)"


@dataclass(frozen=True)
class DayCell:
    """One square of the month grid."""

    date: datetime.date
    lunar: LunarDate
    in_month: bool
    is_weekend: bool

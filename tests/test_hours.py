import datetime

from amlich.hours import AUSPICIOUS_HOURS, HOUR_WINDOWS, hoang_dao_hours
from amlich.models import CHI, HourWindow


def branches(value):
    return [window.branch for window in hoang_dao_hours(value)]


def test_ty_day():
    assert branches(datetime.date(1984, 2, 2)) == ["Tý", "Sửu", "Mão", "Ngọ", "Thân", "Dậu"]


def test_ngo_day():
    assert branches(datetime.date(1984, 2, 8)) == ["Tý", "Sửu", "Thìn", "Ngọ", "Mùi", "Tuất"]


def test_day_before_anchor_is_hoi_day():
    assert branches(datetime.date(1984, 2, 1)) == ["Dần", "Tỵ", "Mùi", "Thân", "Tuất", "Hợi"]


def test_hour_windows():
    assert HOUR_WINDOWS[0] == HourWindow("Tý", 23, 1)
    assert HOUR_WINDOWS[0].crosses_midnight
    assert HOUR_WINDOWS[0].label == "Tý (23h-1h)"
    assert HOUR_WINDOWS[6] == HourWindow("Ngọ", 11, 13)
    assert HOUR_WINDOWS[11] == HourWindow("Hợi", 21, 23)
    assert [w for w in HOUR_WINDOWS if w.crosses_midnight] == [HOUR_WINDOWS[0]]


def test_six_distinct_windows_every_day():
    day = datetime.date(2023, 1, 1)
    for _ in range(400):
        windows = hoang_dao_hours(day)
        names = [w.branch for w in windows]
        assert len(windows) == 6
        assert len(set(names)) == 6
        assert set(names) <= set(CHI)
        assert names == sorted(names, key=CHI.index)
        day += datetime.timedelta(days=1)


def test_table_shape():
    assert len(AUSPICIOUS_HOURS) == 12
    for row in AUSPICIOUS_HOURS:
        assert len(set(row)) == 6

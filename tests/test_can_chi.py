import datetime

import pytest

from amlich.can_chi import DAY_ANCHOR, day_can_chi, month_can_chi, year_can_chi
from amlich.models import LunarDate, SexagenaryPair


@pytest.mark.parametrize(
    "year, label",
    [
        (1984, "Giáp Tý"),
        (2044, "Giáp Tý"),
        (1924, "Giáp Tý"),
        (1900, "Canh Tý"),
        (2023, "Quý Mão"),
        (2024, "Giáp Thìn"),
        (2025, "Ất Tỵ"),
        (2100, "Canh Thân"),
    ],
)
def test_year_can_chi(year, label):
    assert year_can_chi(year).label == label


def test_year_cycle_is_sixty_years():
    for year in range(1900, 2101):
        assert year_can_chi(year) == year_can_chi(year + 60)


def test_day_anchor():
    pair = day_can_chi(DAY_ANCHOR)
    assert (pair.stem, pair.branch) == ("Giáp", "Tý")
    assert day_can_chi(datetime.date(1984, 2, 3)).label == "Ất Sửu"
    assert day_can_chi(DAY_ANCHOR + datetime.timedelta(days=60)).label == "Giáp Tý"


def test_day_before_anchor_uses_floor_modulo():
    pair = day_can_chi(datetime.date(1984, 2, 1))
    assert (pair.stem_index, pair.branch_index) == (9, 11)
    assert pair.label == "Quý Hợi"
    old = day_can_chi(datetime.date(1900, 1, 1))
    assert 0 <= old.stem_index < 10
    assert 0 <= old.branch_index < 12
    assert old == day_can_chi(datetime.date(1900, 1, 1) + datetime.timedelta(days=60))


def test_day_can_chi_accepts_datetime():
    moment = datetime.datetime(1984, 2, 1, 20, 0, tzinfo=datetime.UTC)
    assert day_can_chi(moment).label == "Giáp Tý"


def test_month_branch_starts_at_dan():
    for year in (1984, 2023, 2024):
        assert month_can_chi(LunarDate(year, 1, 1)).branch == "Dần"
        assert month_can_chi(LunarDate(year, 11, 1)).branch == "Tý"
        assert month_can_chi(LunarDate(year, 12, 1)).branch == "Sửu"


def test_month_stem_follows_cycle_year():
    assert LunarDate(1984, 1, 1).cycle_year == 1
    assert LunarDate(2024, 1, 1).cycle_year == 41
    assert month_can_chi(LunarDate(1984, 1, 1)).label == "Ất Dần"
    assert month_can_chi(LunarDate(2024, 1, 1)).label == "Ất Dần"
    assert month_can_chi(LunarDate(2024, 3, 10)).label == "Đinh Thìn"


def test_leap_month_shares_names_with_regular_month():
    assert month_can_chi(LunarDate(2025, 6, 1, True)) == month_can_chi(LunarDate(2025, 6, 1))


def test_sexagenary_pair_bounds():
    with pytest.raises(ValueError):
        SexagenaryPair(10, 0)
    with pytest.raises(ValueError):
        SexagenaryPair(0, -1)
    assert str(SexagenaryPair(0, 0)) == "Giáp Tý"

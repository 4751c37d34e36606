from amlich.tool import date_conversion_tool, validate_date


def test_solar_to_lunar():
    response = date_conversion_tool("s2l", "2024-02-10")
    assert response["mode"] == "s2l"
    assert response["solar_date"] == "2024-02-10"
    assert response["lunar_date"] == {"year": 2024, "month": 1, "day": 1, "leap_month": False}
    assert response["weekday_vi"] == "Thứ Bảy"
    assert response["full_lunar_date_vi"] == "Thứ Bảy ngày 1 tháng Giêng năm Giáp Thìn"
    assert response["can_chi"]["year"] == "Giáp Thìn"
    assert response["can_chi"]["month"] == "Ất Dần"
    assert len(response["auspicious_hours"]) == 6
    assert response["timezone"] == "Asia/Ho_Chi_Minh"
    assert response["locale"] == "vi-VN"


def test_lunar_to_solar_leap_month():
    response = date_conversion_tool("l2s", "2025-06-01", leap_month=True)
    assert response["mode"] == "l2s"
    assert response["solar_date"] == "2025-07-25"
    assert response["lunar_date"]["leap_month"] is True
    assert "Sáu Nhuận" in response["full_lunar_date_vi"]


def test_lunar_day_thirty_is_not_iso():
    response = date_conversion_tool("l2s", "2024-02-30")
    assert response["solar_date"] == "2024-04-08"


def test_lunar_to_solar_rejects_missing_leap_month():
    response = date_conversion_tool("l2s", "2024-03-01", leap_month=True)
    assert response["kind"] == "invalid_date"
    assert "error" in response


def test_lunar_day_beyond_month_length():
    response = date_conversion_tool("l2s", "2024-01-30")
    assert response["kind"] == "invalid_date"


def test_argument_errors():
    assert "error" in date_conversion_tool("", "2024-01-01")
    assert "error" in date_conversion_tool("x2y", "2024-01-01")
    assert "error" in date_conversion_tool("s2l", "2024/01/01")
    assert "error" in date_conversion_tool("l2s", "hello")


def test_out_of_range_year():
    response = date_conversion_tool("s2l", "1500-01-01")
    assert response["kind"] == "unresolved_conversion"


def test_validate_date():
    assert validate_date("2024-02-29")
    assert not validate_date("2023-02-29")

import os

TIME_ZONE = 7  # UTC+7, lunar day boundaries are computed at Vietnamese local midnight
TIME_ZONE_NAME = "Asia/Ho_Chi_Minh"
LOCALE = "vi-VN"

MIN_YEAR = 1900
MAX_YEAR = 2100

LOG_LEVEL = os.environ.get("AMLICH_LOG_LEVEL", "WARNING").upper()

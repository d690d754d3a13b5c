#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
韩国夏令时（서머타임）校正

1948-1988 年间部分年份实行夏令时，钟表时间比标准时间快 1 小时。
夏令时区间来自 pytz 的 Asia/Seoul 时区数据，不另行维护日期表。
"""

from datetime import MAXYEAR, MINYEAR, datetime, timedelta

import pytz

KOREA_TIMEZONE = pytz.timezone('Asia/Seoul')

# 强制开启夏令时校正时使用的偏移
SUMMER_TIME_OFFSET = timedelta(hours=1)

_NO_OFFSET = timedelta(0)


def summer_time_offset(year: int, month: int, day: int, hour: int = 12, minute: int = 0) -> timedelta:
    """
    韩国当地钟表时间对应的夏令时偏移，非夏令时为 0

    切换当天重复出现的钟表时间按标准时间处理；切换跳过的钟表时间同样按标准时间处理。
    """
    # localize 会在前后各偏移一天查找，首尾年份会溢出；这些年份远早于或晚于时区数据
    if not MINYEAR < year < MAXYEAR:
        return _NO_OFFSET
    localized = KOREA_TIMEZONE.localize(datetime(year, month, day, hour, minute), is_dst=False)
    return localized.dst() or _NO_OFFSET


def is_summer_time(year: int, month: int, day: int, hour: int = 12, minute: int = 0) -> bool:
    """该钟表时间在韩国是否处于夏令时"""
    return summer_time_offset(year, month, day, hour, minute) > _NO_OFFSET

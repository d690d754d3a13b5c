#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
农历 -> 公历转换

排盘引擎只接受公历日期，农历输入必须先经过这里转换。
农历数据来自 lunar_python。
"""

import logging
import re
from typing import Any, Dict

from lunar_python import Lunar

from saju_core.exceptions import InvalidDateError

logger = logging.getLogger(__name__)

_LUNAR_DATE_PATTERN = re.compile(r'^(\d{4})-(\d{1,2})-(\d{1,2})$')


class LunarConverter:
    """农历转换工具类"""

    @staticmethod
    def lunar_to_solar(lunar_year: int, lunar_month: int, lunar_day: int,
                       is_leap_month: bool = False) -> Dict[str, Any]:
        """
        将农历日期转换为公历日期

        Args:
            lunar_year: 农历年份
            lunar_month: 农历月份 1-12
            lunar_day: 农历日期 1-30
            is_leap_month: 是否为闰月

        Returns:
            dict: solar_year / solar_month / solar_day / solar_date 以及原始农历信息

        Raises:
            InvalidDateError: 农历日期不存在（如该年无此闰月、小月三十）
        """
        if not 1 <= lunar_month <= 12 or not 1 <= lunar_day <= 30:
            raise InvalidDateError(
                f"农历日期超出范围: {lunar_year}-{lunar_month}-{lunar_day}",
                year=lunar_year, month=lunar_month, day=lunar_day,
            )

        # lunar_python 用负数月份表示闰月
        month_arg = -lunar_month if is_leap_month else lunar_month
        try:
            lunar = Lunar.fromYmd(lunar_year, month_arg, lunar_day)
            solar = lunar.getSolar()
        except Exception as e:
            raise InvalidDateError(
                f"农历转阳历失败: {lunar_year}-{'闰' if is_leap_month else ''}{lunar_month}-{lunar_day}: {e}",
                year=lunar_year, month=lunar_month, day=lunar_day,
            ) from e

        solar_year, solar_month, solar_day = solar.getYear(), solar.getMonth(), solar.getDay()
        logger.debug(
            f"农历 {lunar_year}-{'闰' if is_leap_month else ''}{lunar_month}-{lunar_day} "
            f"-> 公历 {solar_year:04d}-{solar_month:02d}-{solar_day:02d}"
        )

        return {
            'solar_year': solar_year,
            'solar_month': solar_month,
            'solar_day': solar_day,
            'solar_date': f"{solar_year:04d}-{solar_month:02d}-{solar_day:02d}",
            'original_lunar': {
                'year': lunar_year,
                'month': lunar_month,
                'day': lunar_day,
                'is_leap_month': is_leap_month,
            },
        }

    @staticmethod
    def lunar_to_solar_from_string(lunar_date_str: str, is_leap_month: bool = False) -> Dict[str, Any]:
        """
        从 "YYYY-MM-DD"（农历年月日）字符串转换

        Raises:
            InvalidDateError: 无法解析或日期不存在
        """
        match = _LUNAR_DATE_PATTERN.match(lunar_date_str.strip())
        if not match:
            raise InvalidDateError(f"无法解析农历日期字符串: {lunar_date_str}")
        year, month, day = (int(g) for g in match.groups())
        return LunarConverter.lunar_to_solar(year, month, day, is_leap_month)

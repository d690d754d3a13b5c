#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
出生信息输入处理 - 统一处理农历转换和夏令时校正

输出的 BirthMoment 一定是公历（is_lunar=False），可直接交给 FourPillarsEngine。
"""

import logging
from datetime import datetime, timedelta
from typing import Any, Dict, Tuple

from saju_core.calculators.LunarConverter import LunarConverter
from saju_core.calculators.julian_day import is_valid_gregorian_date
from saju_core.exceptions import InvalidDateError, UnsupportedInputError
from saju_core.models.birth_input import BirthInputRequest
from saju_core.models.birth_moment import BirthMoment
from saju_core.utils.summer_time import SUMMER_TIME_OFFSET, summer_time_offset

logger = logging.getLogger(__name__)


class BirthInputProcessor:
    """出生信息输入处理工具类"""

    @staticmethod
    def process_input(request: BirthInputRequest) -> Tuple[BirthMoment, Dict[str, Any]]:
        """
        处理出生信息（农历转换 + 夏令时校正）

        Args:
            request: 已通过格式校验的请求

        Returns:
            (birth_moment, conversion_info) - 用于排盘的公历出生时刻和转换信息

        Raises:
            InvalidDateError: 日期不存在（公历或农历）
            UnsupportedInputError: 时间超出范围
        """
        conversion_info: Dict[str, Any] = {
            'original_date': request.birth_date,
            'original_time': request.birth_time,
            'calendar_type': request.calendar_type,
            'converted': False,
            'summer_time_applied': False,
        }

        year, month, day = request.date_parts()
        hour, minute = request.time_parts()

        if not 0 <= hour <= 23:
            raise UnsupportedInputError(f"小时超出范围 0-23: {hour}", field="hour")
        if not 0 <= minute <= 59:
            raise UnsupportedInputError(f"分钟超出范围 0-59: {minute}", field="minute")

        # 步骤1：农历输入先转换为公历
        if request.calendar_type == "lunar":
            lunar_result = LunarConverter.lunar_to_solar(year, month, day, request.is_leap_month)
            year = lunar_result['solar_year']
            month = lunar_result['solar_month']
            day = lunar_result['solar_day']
            conversion_info['converted'] = True
            conversion_info['lunar_to_solar'] = lunar_result
            logger.info(f"农历 {request.birth_date} -> 公历 {lunar_result['solar_date']}")
        elif not is_valid_gregorian_date(year, month, day):
            raise InvalidDateError(
                f"无效的公历日期: {request.birth_date}", year=year, month=month, day=day
            )

        # 步骤2：夏令时校正（拨回夏令时偏移，可能跨到前一天）
        if request.summer_time is None:
            offset = summer_time_offset(year, month, day, hour, minute)
        elif request.summer_time:
            offset = SUMMER_TIME_OFFSET
        else:
            offset = timedelta(0)

        if offset:
            try:
                standard = datetime(year, month, day, hour, minute) - offset
            except (ValueError, OverflowError) as e:
                raise InvalidDateError(
                    f"夏令时校正后超出可表示的日期范围: {year:04d}-{month:02d}-{day:02d} {hour:02d}:{minute:02d}",
                    year=year, month=month, day=day,
                ) from e
            year, month, day = standard.year, standard.month, standard.day
            hour, minute = standard.hour, standard.minute
            conversion_info['summer_time_applied'] = True
            logger.info(f"夏令时校正: {request.birth_time} -> {hour:02d}:{minute:02d}")

        birth_moment = BirthMoment(year=year, month=month, day=day, hour=hour, minute=minute)
        conversion_info['final_date'] = f"{year:04d}-{month:02d}-{day:02d}"
        conversion_info['final_time'] = f"{hour:02d}:{minute:02d}"

        return birth_moment, conversion_info

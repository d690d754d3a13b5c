#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
四柱计算模块

- 儒略日换算
- 年 / 月 / 日 / 时柱计算器
- 排盘引擎（对外入口）
- 农历转换
"""

from .julian_day import to_julian_day_number, is_leap_year, days_in_month, is_valid_gregorian_date
from .day_pillar import day_pillar
from .year_pillar import year_pillar
from .month_pillar import month_pillar, solar_month_index
from .hour_pillar import hour_pillar, hour_branch_index
from .four_pillars_engine import FourPillarsEngine, compute, get_engine

__all__ = [
    'to_julian_day_number',
    'is_leap_year',
    'days_in_month',
    'is_valid_gregorian_date',
    'day_pillar',
    'year_pillar',
    'month_pillar',
    'solar_month_index',
    'hour_pillar',
    'hour_branch_index',
    'FourPillarsEngine',
    'compute',
    'get_engine',
]

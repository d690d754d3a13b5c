#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
月柱计算

两步：
1. 按节气分界表求节气月（1=인 ... 12=축）
2. 月干由年干按五虎遁查表得到；月支固定，不随年份变化
"""

from typing import Optional

from saju_core.data.solar_terms import DEFAULT_SOLAR_TERM_TABLE, SolarTermBoundaryTable
from saju_core.data.stems_branches import (
    BRANCH_BY_KOREAN,
    STEM_BY_KOREAN,
    HeavenlyStem,
    StemBranchPair,
    pair_of,
)
from saju_core.data.tables import MONTH_BRANCHES, YEAR_STEM_TO_MONTH_STEMS


def solar_month_index(month: int, day: int,
                      boundary_table: Optional[SolarTermBoundaryTable] = None) -> int:
    """公历 (month, day) 所属节气月，1..12"""
    table = boundary_table or DEFAULT_SOLAR_TERM_TABLE
    return table.solar_month_of(month, day)


def month_pillar_for_solar_month(year_stem: HeavenlyStem, solar_month: int) -> StemBranchPair:
    stem = STEM_BY_KOREAN[YEAR_STEM_TO_MONTH_STEMS[year_stem.korean][solar_month - 1]]
    branch = BRANCH_BY_KOREAN[MONTH_BRANCHES[solar_month - 1]]
    return pair_of(stem, branch)


def month_pillar(year: int, month: int, day: int, year_stem: HeavenlyStem,
                 boundary_table: Optional[SolarTermBoundaryTable] = None) -> StemBranchPair:
    """
    计算月柱

    Args:
        year, month, day: 公历日期（节气表不随年变化，year 仅保留接口一致）
        year_stem: 年柱天干（已按立春调整）
        boundary_table: 节气分界表，默认使用内置近似表

    Returns:
        StemBranchPair: 月柱
    """
    return month_pillar_for_solar_month(year_stem, solar_month_index(month, day, boundary_table))

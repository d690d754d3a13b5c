#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""日柱计算：基准日 + 儒略日差值，按 60 取模"""

from saju_core.calculators.julian_day import to_julian_day_number
from saju_core.data.stems_branches import StemBranchPair, pillar_at
from saju_core.data.tables import DAY_ANCHOR_DATE, DAY_ANCHOR_INDEX

_ANCHOR_JDN = to_julian_day_number(DAY_ANCHOR_DATE.year, DAY_ANCHOR_DATE.month, DAY_ANCHOR_DATE.day)


def day_pillar_index(year: int, month: int, day: int) -> int:
    diff = to_julian_day_number(year, month, day) - _ANCHOR_JDN
    # 基准日之前 diff 为负，双重取模保证结果落在 [0, 59]
    return ((DAY_ANCHOR_INDEX + diff) % 60 + 60) % 60


def day_pillar(year: int, month: int, day: int) -> StemBranchPair:
    """
    计算日柱

    日柱只取决于公历日期；23 点以后（子时后半段）不换日。
    """
    return pillar_at(day_pillar_index(year, month, day))

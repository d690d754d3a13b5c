#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
时柱计算

1. 时间校正：钟表时间减 30 分钟（真太阳时近似），负值加 1440 回绕
2. 时辰：12 个 120 分钟的桶，以校正后的偶数整点为中心，子时以 00:00 为中心
3. 时干由日干按五鼠遁查表
"""

from saju_core.data.stems_branches import (
    STEM_BY_KOREAN,
    HeavenlyStem,
    StemBranchPair,
    branch_at,
    pair_of,
)
from saju_core.data.tables import DAY_STEM_TO_HOUR_STEMS

DEFAULT_TIME_CORRECTION_MINUTES = 30
MINUTES_PER_DAY = 24 * 60


def corrected_minutes(hour: int, minute: int,
                      correction_minutes: int = DEFAULT_TIME_CORRECTION_MINUTES) -> int:
    """校正后距午夜的分钟数，范围 [0, 1439]"""
    total = hour * 60 + minute - correction_minutes
    return total % MINUTES_PER_DAY


def hour_branch_index(hour: int, minute: int,
                      correction_minutes: int = DEFAULT_TIME_CORRECTION_MINUTES) -> int:
    """
    时辰序号 0..11（0 = 자시）

    默认校正下：자시 = 钟表 23:30-01:29，축시 = 01:30-03:29，依此类推。
    """
    return ((corrected_minutes(hour, minute, correction_minutes) + 60) // 120) % 12


def hour_pillar(day_stem: HeavenlyStem, hour: int, minute: int,
                correction_minutes: int = DEFAULT_TIME_CORRECTION_MINUTES) -> StemBranchPair:
    """
    计算时柱

    Args:
        day_stem: 日柱天干
        hour: 0-23
        minute: 0-59
        correction_minutes: 时间校正分钟数

    Returns:
        StemBranchPair: 时柱
    """
    bucket = hour_branch_index(hour, minute, correction_minutes)
    stem = STEM_BY_KOREAN[DAY_STEM_TO_HOUR_STEMS[day_stem.korean][bucket]]
    return pair_of(stem, branch_at(bucket))
